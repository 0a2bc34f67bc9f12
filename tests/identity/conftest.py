"""Registered admin devices."""

import pytest
from shared.tables import usuarios_admin


@pytest.fixture()
def admin_devices(seed):
    seed(
        usuarios_admin,
        [
            {"id": 1, "nombre_usuario": "tablet-mostrador-01"},
            {"id": 2, "nombre_usuario": "notebook-deposito"},
        ],
    )

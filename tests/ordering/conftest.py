"""Order payloads shared by the ordering tests."""

import pytest

LINE_ITEMS = [
    {
        "codigo_int": "MES-002",
        "descripcion_corta": "Mesa ratona",
        "cantidad": 2,
        "costosiniva": 1000,
        "iva": 21,
        "margen": 30,
    },
    {"codigo_int": "SIL-001", "descripcion_corta": "Silla plegable", "cantidad": "1", "precio": 500},
]


@pytest.fixture()
def line_items():
    return [dict(item) for item in LINE_ITEMS]


@pytest.fixture()
def order_payload(line_items):
    return {
        "fecha_pedido": "2025-03-14T18:22:05+00:00",
        "cliente_tienda": "sess-8f2c1d",
        "nombre_cliente": "María López",
        "array_pedido": line_items,
        "contacto_cliente": "+54 9 387 555-1234",
        "mensaje_cliente": "Entregar por la tarde",
    }

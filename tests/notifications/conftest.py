"""Alert fixtures: a sample notice and settings for each delivery channel."""

from decimal import Decimal

import pytest
from notifications.channel import reset_channels
from notifications.templates import NewOrderNotice


@pytest.fixture(autouse=True)
def _clean_channels():
    reset_channels()
    yield
    reset_channels()


@pytest.fixture()
def notice():
    return NewOrderNotice(
        order_id=42,
        total=Decimal(3700),
        items_text="MES-002 x2 — Mesa ratona — $1.600 — Subt $3.200\nSIL-001 x1 — Silla plegable — $500 — Subt $500",
        contact="+54 9 387 555-1234",
        link="https://bazaronlinesalta.com.ar/pedido/42",
    )


@pytest.fixture()
def whatsapp_settings(settings):
    return settings.model_copy(
        update={
            "notify_channel": "whatsapp",
            "waba_token": "token-123",
            "waba_phone_number_id": "1098765",
            "waba_alert_to": "5493875550000",
        }
    )

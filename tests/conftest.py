"""Shared fixtures: a throwaway SQLite database per test and an app wired to fake channels."""

import os
from pathlib import Path

import pytest
from sqlalchemy import create_engine, insert

os.environ.setdefault("ENVIRONMENT", "test")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path or "/bdd/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture()
def database_url(tmp_path):
    """Async URL of a freshly created SQLite database."""
    from shared.db import setup_db

    path = tmp_path / "store.db"
    setup_db(f"sqlite:///{path}")
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture()
def seed(database_url):
    """Insert rows straight into a table, bypassing the API."""
    sync_url = database_url.replace("+aiosqlite", "")

    def _seed(table, rows):
        engine = create_engine(sync_url)
        try:
            with engine.begin() as conn:
                conn.execute(insert(table), rows)
        finally:
            engine.dispose()

    return _seed


@pytest.fixture()
def settings(database_url, tmp_path):
    from shared.config import Settings

    return Settings(
        _env_file=None,
        database_url=database_url,
        environment="test",
        log_dir=str(tmp_path / "logs"),
        notify_channel="email",
        smtp_host="smtp.test",
        email_to="ventas@bazaronlinesalta.test",
        order_link_base="https://bazaronlinesalta.com.ar/pedido",
    )


@pytest.fixture()
async def engine(settings):
    from shared.db import build_engine

    engine = build_engine(settings)
    yield engine
    await engine.dispose()


@pytest.fixture()
def fake_email():
    from notifications.channel import EMAIL, reset_channels, set_channel
    from notifications.channel.fake_email import FakeEmailAdapter

    adapter = FakeEmailAdapter()
    set_channel(EMAIL, adapter)
    yield adapter
    reset_channels()


@pytest.fixture()
def fake_chat():
    from notifications.channel import WHATSAPP, reset_channels, set_channel
    from notifications.channel.fake_chat import FakeChatAdapter

    adapter = FakeChatAdapter()
    set_channel(WHATSAPP, adapter)
    yield adapter
    reset_channels()


@pytest.fixture()
def client(settings, fake_email):
    from app import create_app
    from fastapi.testclient import TestClient

    with TestClient(create_app(settings)) as test_client:
        yield test_client

"""Environment-driven configuration.

``DATABASE_URL`` is mandatory: building ``Settings`` without it raises, so the
app refuses to start. Everything else has a default or disables the feature
that needs it.
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CORS_ORIGINS = (
    "https://www.bazaronlinesalta.com.ar",
    "https://bazaronlinesalta.com.ar",
    "http://localhost:3000",
)

_ASYNC_DRIVERS = {
    "postgres://": "postgresql+asyncpg://",
    "postgresql://": "postgresql+asyncpg://",
    "postgresql+psycopg2://": "postgresql+asyncpg://",
    "sqlite://": "sqlite+aiosqlite://",
}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str
    port: int = 5000
    environment: str = "development"
    log_level: str | None = None
    log_dir: str = "logs"

    # Connection pool
    db_pool_size: int = 10
    db_pool_timeout: float = 10.0
    db_pool_recycle: int = 30
    db_connect_timeout: float = 10.0
    db_ssl: bool = True
    db_application_name: str = "bazaronlinesalta-backend"

    cors_origins: str = ",".join(DEFAULT_CORS_ORIGINS)

    # Staff alerts
    notify_channel: Literal["email", "whatsapp", "none"] = "email"
    order_link_base: str | None = None

    smtp_host: str | None = None
    smtp_port: int = 587
    smtp_user: str | None = None
    smtp_password: str | None = None
    email_from_name: str = "Bazar Online Salta"
    email_to: str | None = None

    waba_token: str | None = None
    waba_phone_number_id: str | None = None
    waba_alert_to: str | None = None
    waba_template: str | None = None
    waba_template_language: str = "es"
    waba_api_version: str = "v22.0"

    @field_validator("database_url")
    @classmethod
    def use_async_driver(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("DATABASE_URL must not be empty")
        for prefix, replacement in _ASYNC_DRIVERS.items():
            if value.startswith(prefix):
                return replacement + value[len(prefix) :]
        return value

    @field_validator(
        "waba_template",
        "waba_alert_to",
        "email_to",
        "smtp_host",
        "order_link_base",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value.strip() if isinstance(value, str) else value

    @property
    def allowed_origins(self) -> frozenset[str]:
        return frozenset(origin.strip() for origin in self.cors_origins.split(",") if origin.strip())

    @property
    def is_postgres(self) -> bool:
        return self.database_url.startswith("postgresql")

    @property
    def sync_database_url(self) -> str:
        """Same database through a blocking driver, for schema management."""
        return self.database_url.replace("+asyncpg", "+psycopg2").replace("+aiosqlite", "")


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""Chat channel port — abstract interface for WhatsApp-style messaging."""

from abc import ABC, abstractmethod


class ChatPort(ABC):
    """Abstract interface for chat dispatch adapters.

    Both methods return a dict with keys: message_id, status ("sent" or
    "failed"), error (optional).
    """

    @property
    def is_configured(self) -> bool:
        return True

    @abstractmethod
    async def send_text(self, to: str, body: str) -> dict:
        """Send a free-form text message."""
        ...

    @abstractmethod
    async def send_template(self, to: str, template: str, language: str, parameters: list[str]) -> dict:
        """Send a pre-approved template message with positional body parameters."""
        ...

"""Email channel port — abstract interface for email dispatch."""

from abc import ABC, abstractmethod


class EmailPort(ABC):
    """Abstract interface for email dispatch adapters."""

    @property
    def is_configured(self) -> bool:
        return True

    @abstractmethod
    async def send(
        self,
        to: str,
        subject: str,
        html_body: str,
        sender: str | None = None,
        body: str | None = None,
    ) -> dict:
        """Send an email message.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...

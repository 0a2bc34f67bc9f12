"""SMTP email adapter (Brevo relay in production)."""

from email.message import EmailMessage
from email.utils import make_msgid

import aiosmtplib

from notifications.channel.email_port import EmailPort


class SmtpEmailAdapter(EmailPort):
    """Sends HTML mail through an SMTP relay, upgrading with STARTTLS when offered."""

    def __init__(
        self,
        host: str | None,
        port: int = 587,
        username: str | None = None,
        password: str | None = None,
        timeout: float = 15.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings) -> "SmtpEmailAdapter":
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_user,
            password=settings.smtp_password,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.host)

    async def send(
        self,
        to: str,
        subject: str,
        html_body: str,
        sender: str | None = None,
        body: str | None = None,
    ) -> dict:
        message = EmailMessage()
        message["From"] = sender or self.username or to
        message["To"] = to
        message["Subject"] = subject
        message["Message-ID"] = make_msgid()
        message.set_content(body or subject)
        message.add_alternative(html_body, subtype="html")

        try:
            await aiosmtplib.send(
                message,
                hostname=self.host,
                port=self.port,
                username=self.username,
                password=self.password,
                timeout=self.timeout,
            )
        except (aiosmtplib.SMTPException, OSError) as exc:
            return {"message_id": None, "status": "failed", "error": f"[SMTP] {exc}"}

        return {"message_id": message["Message-ID"], "status": "sent"}

"""WhatsApp Business Cloud API adapter (Graph API ``/messages`` endpoint)."""

import httpx

from notifications.channel.chat_port import ChatPort

GRAPH_API_BASE = "https://graph.facebook.com"


class WhatsAppAdapter(ChatPort):
    def __init__(
        self,
        token: str | None,
        phone_number_id: str | None,
        api_version: str = "v22.0",
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.token = token
        self.phone_number_id = phone_number_id
        self.api_version = api_version
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, settings) -> "WhatsAppAdapter":
        return cls(
            token=settings.waba_token,
            phone_number_id=settings.waba_phone_number_id,
            api_version=settings.waba_api_version,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.token and self.phone_number_id)

    @property
    def messages_url(self) -> str:
        return f"{GRAPH_API_BASE}/{self.api_version}/{self.phone_number_id}/messages"

    async def send_text(self, to: str, body: str) -> dict:
        payload = {
            "messaging_product": "whatsapp",
            "to": to,
            "type": "text",
            "text": {"body": body},
        }
        return await self._post("text", payload)

    async def send_template(self, to: str, template: str, language: str, parameters: list[str]) -> dict:
        payload = {
            "messaging_product": "whatsapp",
            "to": to,
            "type": "template",
            "template": {
                "name": template,
                "language": {"code": language},
                "components": [
                    {
                        "type": "body",
                        "parameters": [{"type": "text", "text": value} for value in parameters],
                    }
                ],
            },
        }
        return await self._post("template", payload)

    async def _post(self, kind: str, payload: dict) -> dict:
        headers = {"Authorization": f"Bearer {self.token}"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.messages_url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            return {"message_id": None, "status": "failed", "error": f"[WABA {kind}] {exc}"}

        if response.is_error:
            return {
                "message_id": None,
                "status": "failed",
                "error": f"[WABA {kind}] {response.status_code} {response.reason_phrase} -> {response.text}",
            }

        try:
            messages = response.json().get("messages") or [{}]
            message_id = messages[0].get("id")
        except (ValueError, AttributeError, IndexError, TypeError):
            message_id = None
        return {"message_id": message_id, "status": "sent"}

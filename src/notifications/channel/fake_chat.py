"""Fake chat adapter — records sent WhatsApp messages for testing."""

from uuid import uuid4

from notifications.channel.chat_port import ChatPort


class FakeChatAdapter(ChatPort):
    """Chat adapter that records messages in memory for test assertions."""

    def __init__(self):
        self.sent_messages: list[dict] = []
        self.should_succeed = True
        self.templates_succeed = True
        self.failure_reason = "Chat delivery failed"

    def configure(
        self,
        should_succeed: bool = True,
        templates_succeed: bool = True,
        failure_reason: str = "Chat delivery failed",
    ):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.templates_succeed = templates_succeed
        self.failure_reason = failure_reason

    async def send_text(self, to: str, body: str) -> dict:
        return self._record(self.should_succeed, {"type": "text", "to": to, "body": body})

    async def send_template(self, to: str, template: str, language: str, parameters: list[str]) -> dict:
        record = {
            "type": "template",
            "to": to,
            "template": template,
            "language": language,
            "parameters": list(parameters),
        }
        return self._record(self.should_succeed and self.templates_succeed, record)

    def _record(self, succeed: bool, record: dict) -> dict:
        if not succeed:
            return {
                "message_id": None,
                "status": "failed",
                "error": self.failure_reason,
            }

        message_id = f"chat-{uuid4().hex[:12]}"
        self.sent_messages.append({"message_id": message_id, **record})
        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        """Clear sent messages (useful between tests)."""
        self.sent_messages.clear()
        self.should_succeed = True
        self.templates_succeed = True
        self.failure_reason = "Chat delivery failed"

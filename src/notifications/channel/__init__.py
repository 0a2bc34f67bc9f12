"""Channel adapter registry — pluggable staff alert channels.

Provides singleton access to channel adapters. Real adapters (SMTP relay,
WhatsApp Cloud API) are built from settings on first use; tests install
fakes with :func:`set_channel`.
"""

EMAIL = "email"
WHATSAPP = "whatsapp"

_channel_instances: dict[str, object] = {}


def get_channel(channel_type: str, settings):
    """Return the configured channel adapter (singleton per channel type).

    Args:
        channel_type: "email" or "whatsapp"
    """
    if channel_type not in _channel_instances:
        if channel_type == EMAIL:
            from notifications.channel.smtp_email import SmtpEmailAdapter

            _channel_instances[channel_type] = SmtpEmailAdapter.from_settings(settings)
        elif channel_type == WHATSAPP:
            from notifications.channel.whatsapp import WhatsAppAdapter

            _channel_instances[channel_type] = WhatsAppAdapter.from_settings(settings)
        else:
            raise ValueError(f"Unknown channel type: {channel_type}")

    return _channel_instances[channel_type]


def set_channel(channel_type: str, adapter) -> None:
    """Override the adapter for a channel (useful for tests)."""
    _channel_instances[channel_type] = adapter


def reset_channels():
    """Reset all channel singletons (useful for testing)."""
    _channel_instances.clear()

"""New order alert dispatch.

Runs after the order write has committed and the HTTP response is on its way.
Delivery failures are logged and never reach the caller. The only retry is
the fallback from a WhatsApp template message to free text.
"""

from email.utils import formataddr

import structlog

from notifications.channel import EMAIL, WHATSAPP, get_channel
from notifications.templates.new_order import NewOrderNotice, NewOrderTemplate
from ordering.order.line_items import items_text, order_total
from shared.config import Settings
from shared.errors import UpstreamNotificationError

logger = structlog.get_logger(__name__)


def build_notice(order_id: int, line_items, contact: str | None, settings: Settings) -> NewOrderNotice:
    link = None
    if settings.order_link_base:
        link = f"{settings.order_link_base.rstrip('/')}/{order_id}"
    return NewOrderNotice(
        order_id=order_id,
        total=order_total(line_items),
        items_text=items_text(line_items),
        contact=contact,
        link=link,
    )


def _recipient(channel_type: str, settings: Settings) -> str | None:
    return settings.email_to if channel_type == EMAIL else settings.waba_alert_to


def _raise_if_failed(result: dict, channel_type: str) -> dict:
    if result.get("status") != "sent":
        raise UpstreamNotificationError(f"{channel_type}: {result.get('error', 'Unknown dispatch error')}")
    return result


async def _send_email(adapter, notice: NewOrderNotice, settings: Settings) -> dict:
    content = NewOrderTemplate.render_email(notice)
    sender = formataddr((settings.email_from_name, settings.email_to))
    result = await adapter.send(
        to=settings.email_to,
        subject=content["subject"],
        html_body=content["html_body"],
        sender=sender,
        body=content["body"],
    )
    return _raise_if_failed(result, EMAIL)


async def _send_whatsapp(adapter, notice: NewOrderNotice, settings: Settings) -> dict:
    to = settings.waba_alert_to

    if settings.waba_template:
        logger.info("Sending WhatsApp template", template=settings.waba_template, order_id=notice.order_id)
        result = await adapter.send_template(
            to,
            settings.waba_template,
            settings.waba_template_language,
            NewOrderTemplate.template_parameters(notice),
        )
        if result.get("status") == "sent":
            return result
        logger.warning(
            "WhatsApp template failed, retrying as free text",
            order_id=notice.order_id,
            error=result.get("error"),
        )

    result = await adapter.send_text(to, NewOrderTemplate.render_chat(notice)["body"])
    return _raise_if_failed(result, WHATSAPP)


async def notify_new_order(order_id: int, line_items, contact: str | None, settings: Settings) -> dict | None:
    """Build the alert for a stored order and send it through the configured channel.

    Never raises: the order is already committed when this runs.
    """
    channel_type = settings.notify_channel
    if channel_type == "none":
        return None

    try:
        notice = build_notice(order_id, line_items, contact, settings)
        adapter = get_channel(channel_type, settings)
        if not adapter.is_configured or not _recipient(channel_type, settings):
            logger.warning("Notification channel not configured, skipping", channel=channel_type)
            return None

        if channel_type == EMAIL:
            result = await _send_email(adapter, notice, settings)
        else:
            result = await _send_whatsapp(adapter, notice, settings)
    except Exception as exc:
        logger.error(
            "New order notification failed",
            order_id=order_id,
            channel=channel_type,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return None

    logger.info(
        "New order notification sent",
        order_id=order_id,
        channel=channel_type,
        message_id=result.get("message_id"),
    )
    return result

"""New order alert — sent to staff when a customer submits an order."""

import re
from dataclasses import dataclass
from decimal import Decimal
from html import escape
from urllib.parse import quote

from ordering.order.line_items import NO_ITEMS, format_ars

WHATSAPP_CHAT_URL = "https://api.whatsapp.com/send"
SUBJECT_PREFIX = "[TSB]"


@dataclass(frozen=True)
class NewOrderNotice:
    order_id: int
    total: Decimal
    items_text: str
    contact: str | None = None
    link: str | None = None


def normalize_phone(contact: str | None) -> str:
    if not contact:
        return ""
    return re.sub(r"[^\d+]", "", str(contact)).strip()


def whatsapp_chat_link(contact: str | None, order_id) -> str:
    """Click-to-chat link that opens a conversation with the customer."""
    phone = quote(normalize_phone(contact), safe="")
    text = quote(f"Hola, te escribo por tu Nota de Pedido #{order_id}.", safe="")
    return f"{WHATSAPP_CHAT_URL}?phone={phone}&text={text}"


def _money(amount: str) -> str:
    return re.sub(r"^\$", "$ ", amount.strip())


def items_table_html(items_text: str) -> str:
    lines = [line for line in str(items_text or "").split("\n") if line]
    if not lines:
        return "<p>(sin ítems)</p>"

    rows = []
    for line in lines:
        parts = [part.strip() for part in line.split("—")] + ["", "", "", ""]
        item, description, unit, subtotal = parts[:4]
        subtotal = re.sub(r"^Subt\s*", "", subtotal)
        rows.append(
            "<tr>"
            f'<td><strong>{escape(item)}</strong><br><span style="color:#555">{escape(description)}</span></td>'
            f'<td align="right">{escape(_money(unit))}</td>'
            f'<td align="right">{escape(_money(subtotal))}</td>'
            "</tr>"
        )

    return (
        '<table border="0" cellpadding="6" cellspacing="0" '
        'style="border-collapse:collapse;width:100%;font-family:Arial">'
        '<thead><tr><th align="left">Ítem</th><th align="right">Unit.</th><th align="right">Subt.</th></tr></thead>'
        f"<tbody>{''.join(rows)}</tbody>"
        "</table>"
    )


class NewOrderTemplate:
    @staticmethod
    def render_email(notice: NewOrderNotice) -> dict:
        contact = notice.contact or "-"
        link_html = ""
        if notice.link:
            safe_link = escape(notice.link, quote=True)
            link_html = f'<p>Ver pedido: <a href="{safe_link}" target="_blank">{safe_link}</a></p>'

        html_body = (
            "<h2>🚨 Nuevo pedido en la web</h2>"
            f"<p><strong>Pedido #{notice.order_id}</strong><br>"
            f"Total: <strong>$ {format_ars(notice.total)}</strong><br>"
            f"Cliente (WhatsApp): <strong>{escape(contact)}</strong></p>"
            f"{items_table_html(notice.items_text)}"
            f'<p><a href="{escape(whatsapp_chat_link(notice.contact, notice.order_id), quote=True)}" '
            'target="_blank">📲 Chatear con el cliente</a></p>'
            f"{link_html}"
        )
        return {
            "subject": f"{SUBJECT_PREFIX} Nuevo pedido #{notice.order_id}",
            "html_body": html_body,
            "body": NewOrderTemplate.render_chat(notice)["body"],
        }

    @staticmethod
    def render_chat(notice: NewOrderNotice) -> dict:
        body = (
            "🚨 *NUEVO PEDIDO EN LA WEB*\n\n"
            f"#{notice.order_id} — Total: ${format_ars(notice.total)}\n"
            f"Cliente: {notice.contact or '-'}\n\n"
            f"🛒 Detalle:\n{notice.items_text or NO_ITEMS}"
        )
        return {"body": body}

    @staticmethod
    def template_parameters(notice: NewOrderNotice) -> list[str]:
        """Positional body parameters of the approved WhatsApp template."""
        return [
            str(notice.order_id),
            f"${format_ars(notice.total)}",
            notice.items_text or NO_ITEMS,
            notice.contact or "-",
        ]

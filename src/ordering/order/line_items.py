"""Order line items: parsing, totals and the text summary sent to staff.

``array_pedido`` arrives either as a list of objects or as a JSON string.
Payloads that cannot be read degrade to a zero total and a placeholder
summary instead of failing the request.
"""

import json
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, DecimalException, localcontext

from catalogue.pricing import to_decimal, unit_price

MAX_SUMMARY_LINES = 40
NO_ITEMS = "(sin ítems)"
UNREADABLE_ITEMS = "(error al formatear ítems)"


class LineItemError(ValueError):
    """The line-item payload is not a list of objects."""


def parse_line_items(raw) -> list[dict]:
    if raw is None:
        return []
    if isinstance(raw, str):
        if not raw.strip():
            return []
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise LineItemError(f"array_pedido is not valid JSON: {exc.msg}") from exc
    if not isinstance(raw, list):
        raise LineItemError("array_pedido must be a list")
    if not all(isinstance(item, Mapping) for item in raw):
        raise LineItemError("array_pedido entries must be objects")
    return [dict(item) for item in raw]


def quantity(item: Mapping) -> Decimal:
    """Ordered quantity: missing or zero counts as one, negatives as zero."""
    amount = to_decimal(item.get("cantidad"))
    if amount is None or amount == 0:
        return Decimal(1)
    return max(amount, Decimal(0))


def order_total(raw) -> Decimal:
    try:
        items = parse_line_items(raw)
        return sum((unit_price(item) * quantity(item) for item in items), Decimal(0))
    except (LineItemError, DecimalException):
        return Decimal(0)


def format_ars(amount) -> str:
    """Format like es-AR locale: "1.234.567,5"."""
    value = amount if isinstance(amount, Decimal) else to_decimal(amount)
    if value is None or not value.is_finite():
        value = Decimal(0)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        value = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    text = f"{value:,.2f}".replace(",", "\x00").replace(".", ",").replace("\x00", ".")
    return text.rstrip("0").rstrip(",")


def items_text(raw, limit: int = MAX_SUMMARY_LINES) -> str:
    try:
        items = parse_line_items(raw)
    except LineItemError:
        return UNREADABLE_ITEMS
    if not items:
        return NO_ITEMS

    lines = []
    try:
        for item in items[:limit]:
            qty = quantity(item)
            unit = unit_price(item)
            code = str(item.get("codigo_int") or "").strip()
            description = str(item.get("descripcion_corta") or "").strip()
            lines.append(
                f"{code} x{format_ars(qty)} — {description} — ${format_ars(unit)} — Subt ${format_ars(unit * qty)}"
            )
    except DecimalException:
        return UNREADABLE_ITEMS
    return "\n".join(lines)

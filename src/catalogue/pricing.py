"""Retail price derivation.

``price = round_half_up_to_100(cost * (1 + tax/100) * (1 + margin/100))``

Prices are derived at read time and never stored, so catalogue listings and
order summaries always agree on the current cost, tax and margin.
"""

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, DecimalException, InvalidOperation

_HUNDRED = Decimal(100)
# Amounts beyond this are typos or garbage, not prices or quantities.
AMOUNT_LIMIT = Decimal("1e12")


def to_decimal(value) -> Decimal | None:
    """Coerce numbers and numeric strings ("1.234" or "1234,5") to Decimal.

    Returns None for missing, non-numeric, non-finite and out-of-range values.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int | float):
        number = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip().replace(",", ".")
        if not text:
            return None
        try:
            number = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None
    if not number.is_finite() or abs(number) > AMOUNT_LIMIT:
        return None
    return number


def round_to_hundred(amount: Decimal) -> int:
    return int((amount / _HUNDRED).quantize(Decimal(1), rounding=ROUND_HALF_UP) * _HUNDRED)


def retail_price(cost, tax=None, margin=None) -> int:
    base = to_decimal(cost)
    if base is None:
        return 0
    tax_pct = to_decimal(tax) or Decimal(0)
    margin_pct = to_decimal(margin) or Decimal(0)

    try:
        amount = base * (1 + tax_pct / _HUNDRED) * (1 + margin_pct / _HUNDRED)
        return max(round_to_hundred(amount), 0)
    except DecimalException:
        return 0


def price_item(row: Mapping) -> dict:
    """Merchandise row with its derived ``precio``."""
    item = dict(row)
    item["precio"] = retail_price(item.get("costosiniva"), item.get("iva"), item.get("margen"))
    return item


def unit_price(line_item: Mapping) -> Decimal:
    """Unit price of an order line.

    Lines carrying catalogue cost fields are priced like the catalogue does;
    otherwise the price snapshot taken at checkout is used.
    """
    if to_decimal(line_item.get("costosiniva")) is not None:
        return Decimal(retail_price(line_item.get("costosiniva"), line_item.get("iva"), line_item.get("margen")))

    for field in ("precio", "price"):
        snapshot = to_decimal(line_item.get(field))
        if snapshot is not None:
            return max(snapshot, Decimal(0))
    return Decimal(0)

"""Numeric ordering for the free-text ``catcat`` rank field.

Editors type ranks like "1", "1.5", "3,5 Jardín" or "Cat. 12 - Hogar". The
first signed number found is the rank; rows without one sort last.
"""

import re
from collections.abc import Iterable, Mapping
from decimal import Decimal

_NUMBER = re.compile(r"[-+]?\d+(?:[.,]\d+)?")


def extract_sort_key(token: str | None) -> Decimal | None:
    if token is None:
        return None
    match = _NUMBER.search(str(token))
    if match is None:
        return None
    return Decimal(match.group(0).replace(",", "."))


def category_sort_key(row: Mapping) -> tuple:
    key = extract_sort_key(row.get("catcat"))
    # (missing-key flag, key, group name): keyed rows first, ties by group
    return (key is None, key if key is not None else Decimal(0), row.get("grupo") or "")


def sort_categories(rows: Iterable[Mapping]) -> list:
    return sorted(rows, key=category_sort_key)

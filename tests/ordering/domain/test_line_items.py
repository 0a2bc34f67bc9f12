"""Tests for order line-item parsing, totals and the staff summary."""

import json
from decimal import Decimal

import pytest
from ordering.order.line_items import (
    NO_ITEMS,
    UNREADABLE_ITEMS,
    LineItemError,
    format_ars,
    items_text,
    order_total,
    parse_line_items,
    quantity,
)


class TestParseLineItems:
    def test_list_is_accepted(self, line_items):
        assert parse_line_items(line_items) == line_items

    def test_json_string_is_decoded(self, line_items):
        assert parse_line_items(json.dumps(line_items)) == line_items

    @pytest.mark.parametrize("raw", [None, "", "   ", []])
    def test_empty_payloads(self, raw):
        assert parse_line_items(raw) == []

    @pytest.mark.parametrize("raw", ["{not json", '{"a": 1}', 42, "[1, 2]", [{"a": 1}, "x"]])
    def test_malformed_payloads_raise(self, raw):
        with pytest.raises(LineItemError):
            parse_line_items(raw)


class TestQuantity:
    @pytest.mark.parametrize(
        "item, expected",
        [
            ({"cantidad": 3}, Decimal(3)),
            ({"cantidad": "2"}, Decimal(2)),
            ({"cantidad": "1,5"}, Decimal("1.5")),
            ({}, Decimal(1)),
            ({"cantidad": 0}, Decimal(1)),
            ({"cantidad": "muchos"}, Decimal(1)),
            ({"cantidad": -2}, Decimal(0)),
        ],
    )
    def test_quantity(self, item, expected):
        assert quantity(item) == expected


class TestOrderTotal:
    def test_catalogue_lines_and_price_snapshots(self, line_items):
        # 2 x 1600 + 1 x 500
        assert order_total(line_items) == Decimal(3700)

    def test_json_string_payload(self, line_items):
        assert order_total(json.dumps(line_items)) == Decimal(3700)

    def test_lines_without_price_count_as_zero(self):
        assert order_total([{"codigo_int": "X", "cantidad": 4}]) == Decimal(0)

    def test_unreadable_payload_totals_zero(self):
        assert order_total("{oops") == Decimal(0)


class TestFormatArs:
    @pytest.mark.parametrize(
        "amount, expected",
        [
            (0, "0"),
            (1600, "1.600"),
            (Decimal("1234567.5"), "1.234.567,5"),
            (Decimal("99.99"), "99,99"),
            (None, "0"),
        ],
    )
    def test_format(self, amount, expected):
        assert format_ars(amount) == expected


class TestItemsText:
    def test_one_line_per_item(self, line_items):
        lines = items_text(line_items).splitlines()
        assert lines == [
            "MES-002 x2 — Mesa ratona — $1.600 — Subt $3.200",
            "SIL-001 x1 — Silla plegable — $500 — Subt $500",
        ]

    def test_summary_is_capped(self):
        items = [{"codigo_int": f"C-{n}", "precio": 100} for n in range(50)]
        assert len(items_text(items).splitlines()) == 40
        assert len(items_text(items, limit=5).splitlines()) == 5

    def test_empty_order(self):
        assert items_text([]) == NO_ITEMS

    def test_unreadable_order(self):
        assert items_text("[oops") == UNREADABLE_ITEMS


class TestAbsurdAmounts:
    def test_out_of_range_quantity_counts_as_one(self):
        assert quantity({"cantidad": 1e30}) == Decimal(1)

    def test_out_of_range_cost_prices_at_zero(self):
        assert order_total([{"codigo_int": "X", "costosiniva": "1e40", "cantidad": 1}]) == Decimal(0)

    def test_huge_totals_still_format(self):
        assert format_ars(Decimal("1e27")) == "1" + ".000" * 9

    def test_summary_of_huge_lines(self):
        items = [{"codigo_int": "X", "cantidad": 999999999999, "precio": 999999999999}]
        assert items_text(items).startswith("X x999.999.999.999 — ")

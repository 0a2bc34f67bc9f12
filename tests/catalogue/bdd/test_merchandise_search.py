"""BDD tests for merchandise search."""

from decimal import Decimal

from pytest_bdd import given, parsers, scenarios, then, when
from shared.tables import mercaderia

scenarios("features/merchandise_search.feature")

NUMERIC_COLUMNS = {"costosiniva", "iva", "margen"}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("the catalogue has visible merchandise")
def catalogue_has_merchandise(seed, datatable):
    header, *rows = datatable
    records = []
    for position, values in enumerate(rows, start=1):
        record = {
            column: Decimal(value) if column in NUMERIC_COLUMNS else value
            for column, value in zip(header, values, strict=True)
        }
        record.update(id=position, visibilidad="mostrar", grupo="Varios")
        records.append(record)
    seed(mercaderia, records)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the shopper searches for "{text}"'), target_fixture="listing")
def search(client, text):
    response = client.get("/api/mercaderia", params={"buscar": text})
    assert response.status_code == 200
    return response.json()


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the listing contains only "{code}"'))
def listing_contains_only(listing, code):
    assert [item["codigo_int"] for item in listing] == [code]


@then("the listing is empty")
def listing_is_empty(listing):
    assert listing == []


@then(parsers.cfparse('"{code}" is listed at {price:d}'))
def item_price(listing, code, price):
    (item,) = [item for item in listing if item["codigo_int"] == code]
    assert item["precio"] == price


@then(parsers.cfparse("the listing has {count:d} items"))
def listing_count(listing, count):
    assert len(listing) == count

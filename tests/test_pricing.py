"""Tests for order pricing."""

import pytest
from bson import ObjectId

from shop_api.app.core.db import PRODUCTS, Repository
from shop_api.app.core.errors import InvalidIdentifierError, OrderTotalError, UnknownProductsError
from shop_api.app.services.pricing import compute_total, price_order
from tests.conftest import run


@pytest.fixture
def products(database):
    return Repository(database[PRODUCTS], entity="Product")


def test_compute_total_applies_markup() -> None:
    assert compute_total([10, 2]) == pytest.approx(14.4)


def test_compute_total_rounds_to_cents() -> None:
    assert compute_total([0.1, 0.2]) == 0.36
    assert compute_total([]) == 0


def test_price_order_counts_every_occurrence(products) -> None:
    book = run(products.insert_one({"name": "Book", "about": "Paper", "price": 10.0}))
    pen = run(products.insert_one({"name": "Pen", "about": "Ink", "price": 2.0}))

    assert run(price_order(products, [book, pen, pen])) == pytest.approx(16.8)


def test_price_order_accepts_upper_case_ids(products) -> None:
    book = run(products.insert_one({"name": "Book", "about": "Paper", "price": 10.0}))

    assert run(price_order(products, [book.upper()])) == pytest.approx(12.0)


def test_price_order_reports_unknown_ids(products) -> None:
    missing = str(ObjectId())

    with pytest.raises(UnknownProductsError) as excinfo:
        run(price_order(products, [missing, missing]))

    assert excinfo.value.product_ids == [missing]


def test_price_order_rejects_malformed_ids(products) -> None:
    with pytest.raises(InvalidIdentifierError) as excinfo:
        run(price_order(products, ["not-an-id"]))

    assert excinfo.value.loc == ["body", "productIds"]


def test_price_order_rejects_non_finite_total(products) -> None:
    big = run(products.insert_one({"name": "Yacht", "about": "Big", "price": 1e308}))

    with pytest.raises(OrderTotalError):
        run(price_order(products, [big, big]))

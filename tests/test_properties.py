"""
Whole-dataset properties checked against the deterministic sample data.
"""

from decimal import Decimal

import pytest

from sellerstats.engine import analyze
from sellerstats.store import DataStore
from sellerstats.strategies import calculate_simple_revenue
from scripts.seed_data import seed


@pytest.fixture(scope="module")
def dataset():
    store = DataStore()
    seed(store)
    return store.dataset()


@pytest.fixture(scope="module")
def results(dataset):
    return analyze(dataset)


def test_one_row_per_seller(dataset, results):
    assert sorted(r.seller_id for r in results) == sorted(s.id for s in dataset.sellers)


def test_revenue_matches_line_items(dataset, results):
    products = {p.sku: p for p in dataset.products}
    expected = sum(
        calculate_simple_revenue(i, products[i.sku])
        for r in dataset.purchase_records
        for i in r.items
    )
    # each seller row is rounded to the cent
    assert abs(sum(r.revenue for r in results) - expected) <= Decimal("0.005") * len(results)


def test_profit_non_increasing(results):
    for a, b in zip(results, results[1:]):
        assert a.profit >= b.profit


def test_top_products_bounded_and_sorted(results):
    for r in results:
        assert len(r.top_products) <= 10
        revenues = [p.revenue for p in r.top_products]
        assert revenues == sorted(revenues, reverse=True)


def test_receipts_add_up(dataset, results):
    assert sum(r.receipt_count for r in results) == len(dataset.purchase_records)


def test_idempotent(dataset, results):
    assert analyze(dataset) == results

from decimal import Decimal

import pytest

from sellerstats.engine import analyze
from sellerstats.errors import InvalidInputError, InvalidOptionsError
from sellerstats.models import SalesDataset
from sellerstats.strategies import calculate_bonus_by_profit, calculate_simple_revenue
from sellerstats.validation import resolve_strategies, validate_dataset


def raw_data(**overrides):
    data = {
        "sellers": [{"id": "seller_1", "first_name": "Alexey", "last_name": "Petrov"}],
        "products": [{"sku": "SKU_001", "name": "Hammer", "purchase_price": 10}],
        "purchase_records": [
            {
                "receipt_id": "R-1",
                "seller_id": "seller_1",
                "total_amount": 36,
                "items": [{"sku": "SKU_001", "discount": 10, "sale_price": 20, "quantity": 2}],
            }
        ],
    }
    data.update(overrides)
    return data


class TestValidateDataset:
    def test_parses_raw_mapping(self):
        dataset = validate_dataset(raw_data())
        assert isinstance(dataset, SalesDataset)
        assert dataset.products[0].purchase_price == Decimal("10")
        assert dataset.purchase_records[0].items[0].quantity == 2

    def test_rejects_missing_data(self):
        with pytest.raises(InvalidInputError):
            validate_dataset(None)

    @pytest.mark.parametrize("key", ["sellers", "products", "purchase_records"])
    def test_rejects_non_list_collections(self, key):
        with pytest.raises(InvalidInputError, match=key):
            validate_dataset(raw_data(**{key: None}))

    def test_rejects_empty_purchase_records(self):
        with pytest.raises(InvalidInputError, match="must not be empty"):
            validate_dataset(raw_data(purchase_records=[]))

    def test_rejects_bad_line_item(self):
        bad = raw_data()
        bad["purchase_records"][0]["items"][0]["quantity"] = 0
        with pytest.raises(InvalidInputError, match="Malformed"):
            validate_dataset(bad)

    def test_rejects_discount_over_hundred(self):
        bad = raw_data()
        bad["purchase_records"][0]["items"][0]["discount"] = 150
        with pytest.raises(InvalidInputError):
            validate_dataset(bad)


class TestResolveStrategies:
    def test_defaults(self):
        assert resolve_strategies() == (calculate_simple_revenue, calculate_bonus_by_profit)

    def test_keeps_callables(self):
        revenue = lambda item, product: 0
        assert resolve_strategies(calculate_revenue=revenue)[0] is revenue

    def test_rejects_non_callable(self):
        with pytest.raises(InvalidOptionsError, match="calculate_revenue"):
            resolve_strategies(calculate_revenue="nope")
        with pytest.raises(InvalidOptionsError, match="calculate_bonus"):
            resolve_strategies(calculate_bonus=42)


class TestAnalyzeRawInput:
    def test_raw_mapping_is_validated_and_analyzed(self):
        [result] = analyze(raw_data())
        assert result.revenue == Decimal("36.00")
        assert result.profit == Decimal("16.00")
        assert result.bonus == Decimal("2.40")

    def test_bad_options_rejected_before_work(self):
        with pytest.raises(InvalidOptionsError):
            analyze(raw_data(), calculate_bonus="fifteen percent")

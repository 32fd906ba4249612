from typing import Any, Optional

from pydantic import ValidationError

from sellerstats.errors import InvalidInputError, InvalidOptionsError
from sellerstats.models import SalesDataset
from sellerstats.strategies import (
    DEFAULT_BONUS_STRATEGY,
    DEFAULT_REVENUE_STRATEGY,
    BonusStrategy,
    RevenueStrategy,
)

_COLLECTIONS = ("sellers", "products", "purchase_records")


def validate_dataset(raw: Any) -> SalesDataset:
    """Check the top-level shape of `raw` and parse it into a SalesDataset."""
    if isinstance(raw, SalesDataset):
        dataset = raw
    else:
        if not isinstance(raw, dict):
            raise InvalidInputError("Sales data must be an object")
        for key in _COLLECTIONS:
            if not isinstance(raw.get(key), list):
                raise InvalidInputError(f"'{key}' must be a list")
        try:
            dataset = SalesDataset.model_validate(raw)
        except ValidationError as exc:
            raise InvalidInputError(f"Malformed sales data: {exc}") from exc

    if not dataset.purchase_records:
        raise InvalidInputError("'purchase_records' must not be empty")
    return dataset


def resolve_strategies(
    calculate_revenue: Optional[Any] = None,
    calculate_bonus: Optional[Any] = None,
) -> tuple[RevenueStrategy, BonusStrategy]:
    if calculate_revenue is None:
        calculate_revenue = DEFAULT_REVENUE_STRATEGY
    elif not callable(calculate_revenue):
        raise InvalidOptionsError("calculate_revenue must be callable")

    if calculate_bonus is None:
        calculate_bonus = DEFAULT_BONUS_STRATEGY
    elif not callable(calculate_bonus):
        raise InvalidOptionsError("calculate_bonus must be callable")

    return calculate_revenue, calculate_bonus

"""
Pluggable revenue and bonus calculations.

Both are plain functions so callers can pass any callable with the same
signature. They must be pure: the engine calls them once per line item /
per seller and does not catch anything they raise.
"""

from decimal import Decimal
from typing import Protocol

from sellerstats.models import LineItem, Product, SellerAccumulator

_HUNDRED = Decimal("100")


class RevenueStrategy(Protocol):
    def __call__(self, item: LineItem, product: Product) -> Decimal: ...


class BonusStrategy(Protocol):
    def __call__(self, index: int, total: int, seller: SellerAccumulator) -> Decimal: ...


def calculate_simple_revenue(item: LineItem, product: Product) -> Decimal:
    """Revenue of one line item after its percentage discount."""
    return item.sale_price * item.quantity * (1 - item.discount / _HUNDRED)


def calculate_bonus_by_profit(index: int, total: int, seller: SellerAccumulator) -> Decimal:
    """Absolute bonus amount for the seller at 0-based rank `index`.

    Checked in order, so with three sellers the last one still gets 10%.
    """
    profit = seller.profit
    if index == 0:
        return profit * Decimal("0.15")
    if index in (1, 2):
        return profit * Decimal("0.10")
    if index == total - 1:
        return Decimal("0")
    return profit * Decimal("0.05")


DEFAULT_REVENUE_STRATEGY: RevenueStrategy = calculate_simple_revenue
DEFAULT_BONUS_STRATEGY: BonusStrategy = calculate_bonus_by_profit

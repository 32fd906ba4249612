import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union

from sellerstats.config import settings
from sellerstats.errors import (
    DuplicateKeyError,
    InvalidOptionsError,
    UnknownProductError,
    UnknownSellerError,
)
from sellerstats.models import (
    Product,
    ProductStats,
    PurchaseRecord,
    RankedSellerResult,
    SalesDataset,
    Seller,
    SellerAccumulator,
    TopProduct,
)
from sellerstats.money import round_money, to_decimal
from sellerstats.strategies import BonusStrategy, RevenueStrategy
from sellerstats.validation import resolve_strategies, validate_dataset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Indexes:
    products_by_sku: dict[str, Product]
    sellers_by_id: dict[str, Seller]


# ── 1. Index reference data ──────────────────────────────────────────────────

def build_indexes(products: Iterable[Product], sellers: Iterable[Seller]) -> Indexes:
    products_by_sku: dict[str, Product] = {}
    for product in products:
        if product.sku in products_by_sku:
            raise DuplicateKeyError("product", product.sku)
        products_by_sku[product.sku] = product

    sellers_by_id: dict[str, Seller] = {}
    for seller in sellers:
        if seller.id in sellers_by_id:
            raise DuplicateKeyError("seller", seller.id)
        sellers_by_id[seller.id] = seller

    return Indexes(products_by_sku=products_by_sku, sellers_by_id=sellers_by_id)


# ── 2. Accumulate per-seller totals ──────────────────────────────────────────

def aggregate(
    records: Iterable[PurchaseRecord],
    indexes: Indexes,
    calculate_revenue: RevenueStrategy,
) -> dict[str, SellerAccumulator]:
    stats = {
        seller_id: SellerAccumulator(seller_id=seller_id, name=seller.name)
        for seller_id, seller in indexes.sellers_by_id.items()
    }

    for record in records:
        seller_stat = stats.get(record.seller_id)
        if seller_stat is None:
            raise UnknownSellerError(record.seller_id)
        seller_stat.receipt_count += 1

        for item in record.items:
            product = indexes.products_by_sku.get(item.sku)
            if product is None:
                raise UnknownProductError(item.sku)

            revenue = to_decimal(calculate_revenue(item, product))
            cost = product.purchase_price * item.quantity

            seller_stat.revenue += revenue
            seller_stat.profit += revenue - cost
            seller_stat.sales_count += item.quantity

            sold = seller_stat.products_sold.get(item.sku)
            if sold is None:
                seller_stat.products_sold[item.sku] = ProductStats(
                    name=product.name, quantity=item.quantity, revenue=revenue,
                )
            else:
                sold.quantity += item.quantity
                sold.revenue += revenue

    return stats


# ── 3. Rank, award bonuses, pick top products ────────────────────────────────

def _resolve_top_limit(top_limit: Optional[int]) -> int:
    if top_limit is None:
        return settings.TOP_PRODUCTS_LIMIT
    if top_limit < 0:
        raise InvalidOptionsError(f"top_limit must not be negative, got {top_limit}")
    return top_limit


def _top_products(seller: SellerAccumulator, limit: int) -> list[TopProduct]:
    # sorted() is stable, so equal revenue keeps first-sale order
    ranked = sorted(
        seller.products_sold.items(), key=lambda entry: entry[1].revenue, reverse=True
    )
    return [
        TopProduct(
            product_id=sku,
            name=sold.name,
            quantity=sold.quantity,
            revenue=round_money(sold.revenue),
        )
        for sku, sold in ranked[:limit]
    ]


def rank_sellers(
    stats: dict[str, SellerAccumulator],
    calculate_bonus: BonusStrategy,
    top_limit: Optional[int] = None,
) -> list[RankedSellerResult]:
    top_limit = _resolve_top_limit(top_limit)
    sorted_sellers = sorted(stats.values(), key=lambda s: s.profit, reverse=True)
    total = len(sorted_sellers)

    results: list[RankedSellerResult] = []
    for index, seller in enumerate(sorted_sellers):
        bonus = calculate_bonus(index, total, seller)
        results.append(
            RankedSellerResult(
                seller_id=seller.seller_id,
                name=seller.name,
                revenue=round_money(seller.revenue),
                profit=round_money(seller.profit),
                sales_count=seller.sales_count,
                receipt_count=seller.receipt_count,
                bonus=round_money(bonus),
                top_products=_top_products(seller, top_limit),
            )
        )
    return results


def analyze(
    data: Union[SalesDataset, dict[str, Any]],
    calculate_revenue: Optional[RevenueStrategy] = None,
    calculate_bonus: Optional[BonusStrategy] = None,
    top_limit: Optional[int] = None,
) -> list[RankedSellerResult]:
    """Rank every seller in `data` by profit and attach bonus and top products.

    A raw dict is shape-checked first; a SalesDataset is taken as already
    validated. Strategies left as None fall back to the defaults.
    `top_limit` defaults to the configured TOP_PRODUCTS_LIMIT.
    """
    revenue_strategy, bonus_strategy = resolve_strategies(calculate_revenue, calculate_bonus)
    top_limit = _resolve_top_limit(top_limit)
    dataset = data if isinstance(data, SalesDataset) else validate_dataset(data)

    indexes = build_indexes(dataset.products, dataset.sellers)
    logger.debug(
        "Indexed %d products and %d sellers",
        len(indexes.products_by_sku), len(indexes.sellers_by_id),
    )

    stats = aggregate(dataset.purchase_records, indexes, revenue_strategy)
    results = rank_sellers(stats, bonus_strategy, top_limit)

    logger.info(
        "Analyzed %d purchase records for %d sellers",
        len(dataset.purchase_records), len(results),
    )
    return results

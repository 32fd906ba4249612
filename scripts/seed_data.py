"""
Deterministic sample-data generator.

Produces:
  - 5 sellers
  - 20 products (purchase price 100 - 2 000)
  - 200 receipts, 1-5 line items each
    - sale price = purchase price marked up 20 % - 100 %
    - ~30 % of items discounted 5-25 %
"""

import random
from decimal import Decimal

from sellerstats.models import LineItem, Product, PurchaseRecord, Seller
from sellerstats.store import DataStore

SEED = 42
RECEIPTS = 200

_SELLERS = [
    ("seller_1", "Alexey", "Petrov"),
    ("seller_2", "Ivan", "Smirnov"),
    ("seller_3", "Maria", "Ivanova"),
    ("seller_4", "Olga", "Kuznetsova"),
    ("seller_5", "Dmitry", "Sokolov"),
]

_PRODUCT_NAMES = [
    "Cordless Drill", "Hammer", "Tape Measure", "Screwdriver Set", "Work Gloves",
    "Safety Goggles", "Level", "Utility Knife", "Wrench Set", "Pliers",
    "Circular Saw", "Sanding Block", "Paint Roller", "Ladder", "Extension Cord",
    "Stud Finder", "Wood Glue", "Clamp", "Toolbox", "Flashlight",
]


def _money(value: float) -> Decimal:
    return Decimal(str(round(value, 2)))


def seed(store: DataStore) -> None:
    rng = random.Random(SEED)

    # ── sellers ──────────────────────────────────────────────────────────────
    for seller_id, first, last in _SELLERS:
        store.add_seller(Seller(id=seller_id, first_name=first, last_name=last))

    # ── products ─────────────────────────────────────────────────────────────
    products: list[Product] = []
    for n, name in enumerate(_PRODUCT_NAMES, start=1):
        product = Product(
            sku=f"SKU_{n:03d}",
            name=name,
            purchase_price=_money(rng.uniform(100, 2_000)),
        )
        products.append(product)
        store.add_product(product)

    # ── receipts ─────────────────────────────────────────────────────────────
    seller_ids = [s[0] for s in _SELLERS]
    for n in range(1, RECEIPTS + 1):
        items: list[LineItem] = []
        for product in rng.sample(products, rng.randint(1, 5)):
            markup = Decimal(str(round(rng.uniform(1.2, 2.0), 2)))
            discount = rng.choice([5, 10, 15, 20, 25]) if rng.random() < 0.30 else 0
            items.append(LineItem(
                sku=product.sku,
                discount=Decimal(discount),
                sale_price=(product.purchase_price * markup).quantize(Decimal("0.01")),
                quantity=rng.randint(1, 10),
            ))
        total = sum(
            (i.sale_price * i.quantity * (1 - i.discount / 100) for i in items),
            Decimal("0"),
        )
        store.add_purchase_record(PurchaseRecord(
            receipt_id=f"R-{n:04d}",
            seller_id=rng.choice(seller_ids),
            total_amount=total.quantize(Decimal("0.01")),
            items=items,
        ))

from pydantic import BaseModel, ConfigDict, Field
from decimal import Decimal
from typing import Optional


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    sku: str
    name: str
    purchase_price: Decimal = Field(ge=0)  # unit cost paid to the supplier


class Seller(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    first_name: str
    last_name: str

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class LineItem(BaseModel):
    sku: str
    discount: Decimal = Field(default=Decimal("0"), ge=0, le=100)  # percent
    sale_price: Decimal = Field(ge=0)
    quantity: int = Field(gt=0)


class PurchaseRecord(BaseModel):
    receipt_id: Optional[str] = None
    seller_id: str
    total_amount: Decimal = Decimal("0")
    items: list[LineItem]


class SalesDataset(BaseModel):
    sellers: list[Seller]
    products: list[Product]
    purchase_records: list[PurchaseRecord]


# ── Running totals (one analysis only) ───────────────────────────────────────

class ProductStats(BaseModel):
    name: str
    quantity: int = 0
    revenue: Decimal = Decimal("0")


class SellerAccumulator(BaseModel):
    seller_id: str
    name: str
    revenue: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")
    sales_count: int = 0    # units sold
    receipt_count: int = 0  # purchase records
    # insertion order == order of first sale
    products_sold: dict[str, ProductStats] = Field(default_factory=dict)


# ── Response models ──────────────────────────────────────────────────────────

class TopProduct(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: str
    name: str
    quantity: int
    revenue: Decimal


class RankedSellerResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    seller_id: str
    name: str
    revenue: Decimal
    profit: Decimal
    sales_count: int
    receipt_count: int
    bonus: Decimal
    top_products: list[TopProduct]

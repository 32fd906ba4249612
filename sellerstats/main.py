import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import Body, FastAPI, HTTPException, Query

from sellerstats.config import settings
from sellerstats.engine import analyze
from sellerstats.errors import SalesAnalysisError
from sellerstats.store import store

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Auto-seed on startup so the service is immediately usable
    if settings.SEED_ON_STARTUP:
        from scripts.seed_data import seed
        store.clear()
        seed(store)
        logger.info(
            "Seeded %d sellers, %d products, %d purchase records",
            len(store.sellers), len(store.products), len(store.purchase_records),
        )
    yield


app = FastAPI(
    title="Seller Performance Service",
    version="1.0.0",
    description="Revenue, profit, bonus and top-product ranking per seller",
    lifespan=lifespan,
)


@app.get("/health")
def health_check():
    return {"status": "ok"}


# ── Reference data ───────────────────────────────────────────────────────────

@app.get("/api/v1/sellers", summary="List all sellers")
def list_sellers():
    return {"sellers": [s.model_dump() for s in store.list_sellers()]}


@app.get("/api/v1/sellers/{seller_id}", summary="Get seller details")
def get_seller(seller_id: str):
    seller = store.get_seller(seller_id)
    if not seller:
        raise HTTPException(404, f"Seller '{seller_id}' not found")
    return {**seller.model_dump(), "name": seller.name}


@app.get("/api/v1/products", summary="List all products")
def list_products():
    return {"products": [p.model_dump() for p in store.list_products()]}


# ── Analysis ─────────────────────────────────────────────────────────────────

@app.get("/api/v1/report", summary="Rank sellers over the stored purchase records")
def get_report(
    seller_id: Optional[str] = Query(default=None, description="Only return this seller's row"),
):
    if seller_id is not None and store.get_seller(seller_id) is None:
        raise HTTPException(404, f"Seller '{seller_id}' not found")
    try:
        results = analyze(store.dataset())
    except SalesAnalysisError as exc:
        raise HTTPException(422, str(exc))
    if seller_id is not None:
        results = [r for r in results if r.seller_id == seller_id]
    return {"sellers": [r.model_dump() for r in results]}


@app.post("/api/v1/analyze", summary="Rank sellers over a posted dataset")
def post_analyze(payload: Any = Body(...)):
    try:
        results = analyze(payload)
    except SalesAnalysisError as exc:
        logger.warning("Rejected analysis request: %s", exc)
        raise HTTPException(422, str(exc))
    return {"sellers": [r.model_dump() for r in results]}


# ── Admin ─────────────────────────────────────────────────────────────────────

@app.post("/api/v1/admin/seed", summary="Re-seed sample data")
def reseed():
    from scripts.seed_data import seed
    store.clear()
    seed(store)
    return {
        "status": "seeded",
        "sellers": len(store.sellers),
        "products": len(store.products),
        "purchase_records": len(store.purchase_records),
    }

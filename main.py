import logging
import os
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Depends, Query, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from schemas import (
    Brand,
    CartItemCreate,
    CartItemUpdate,
    CartItemWithProduct,
    CartSummary,
    Category,
    Product,
    UserCreate,
    UserOut,
)
from seed import seed_catalog
from storage import MemStorage

# Environment settings
GUEST_SESSION_ID = os.getenv("GUEST_SESSION_ID", "guest-session")
SEED_SAMPLE_DATA = os.getenv("SEED_SAMPLE_DATA", "true").lower() not in ("0", "false", "no")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="BireuenVape API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup():
    storage = MemStorage(guest_session_id=GUEST_SESSION_ID)
    if SEED_SAMPLE_DATA:
        seed_catalog(storage)
    app.state.storage = storage
    logger.info("Storage ready: %s", storage.counts())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Malformed ids and bodies are client errors, reported as 400 rather than 422
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def get_storage(request: Request) -> MemStorage:
    return request.app.state.storage


def require_session_id(session_id: str) -> str:
    if not session_id.strip():
        raise HTTPException(status_code=400, detail="Session ID is required")
    return session_id


# Routes
@app.get("/")
def root():
    return {"message": "BireuenVape API is running"}


@app.get("/test")
def test_storage(request: Request):
    response = {
        "backend": "✅ Running",
        "storage": "❌ Not Available",
        "collections": {},
        "guest_session_id": GUEST_SESSION_ID,
    }

    storage = getattr(request.app.state, "storage", None)
    if storage is not None:
        response["storage"] = "✅ In-memory & Working"
        response["collections"] = storage.counts()
    else:
        response["storage"] = "⚠️  Available but not initialized"

    return response


# Product endpoints
@app.get("/api/products", response_model=List[Product])
def list_products(
    brand: Optional[List[str]] = Query(None),
    category: Optional[List[str]] = Query(None),
    min_price: Optional[int] = Query(None, alias="minPrice", ge=0),
    max_price: Optional[int] = Query(None, alias="maxPrice", ge=0),
    in_stock: Optional[bool] = Query(None, alias="inStock"),
    on_sale: Optional[bool] = Query(None, alias="onSale"),
    storage: MemStorage = Depends(get_storage),
):
    try:
        return storage.filter_products(
            brands=brand,
            categories=category,
            min_price=min_price,
            max_price=max_price,
            in_stock=in_stock,
            on_sale=on_sale,
        )
    except Exception:
        logger.exception("Failed to fetch products")
        raise HTTPException(status_code=500, detail="Failed to fetch products")


@app.get("/api/products/featured", response_model=List[Product])
def featured_products(storage: MemStorage = Depends(get_storage)):
    try:
        return storage.get_featured_products()
    except Exception:
        logger.exception("Failed to fetch featured products")
        raise HTTPException(status_code=500, detail="Failed to fetch featured products")


@app.get("/api/products/new-arrivals", response_model=List[Product])
def new_arrivals(storage: MemStorage = Depends(get_storage)):
    try:
        return storage.get_new_arrivals()
    except Exception:
        logger.exception("Failed to fetch new arrivals")
        raise HTTPException(status_code=500, detail="Failed to fetch new arrivals")


@app.get("/api/products/category/{category}", response_model=List[Product])
def products_by_category(category: str, storage: MemStorage = Depends(get_storage)):
    try:
        return storage.get_products_by_category(category)
    except Exception:
        logger.exception("Failed to fetch products by category %r", category)
        raise HTTPException(status_code=500, detail="Failed to fetch products by category")


@app.get("/api/products/brand/{brand}", response_model=List[Product])
def products_by_brand(brand: str, storage: MemStorage = Depends(get_storage)):
    try:
        return storage.get_products_by_brand(brand)
    except Exception:
        logger.exception("Failed to fetch products by brand %r", brand)
        raise HTTPException(status_code=500, detail="Failed to fetch products by brand")


@app.get("/api/products/search/{query}", response_model=List[Product])
def search_products(query: str, storage: MemStorage = Depends(get_storage)):
    try:
        return storage.search_products(query)
    except Exception:
        logger.exception("Failed to search products for %r", query)
        raise HTTPException(status_code=500, detail="Failed to search products")


@app.get("/api/products/{product_id}", response_model=Product)
def get_product(product_id: int, storage: MemStorage = Depends(get_storage)):
    try:
        product = storage.get_product_by_id(product_id)
        if not product:
            raise HTTPException(status_code=404, detail="Product not found")
        return product
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to fetch product %s", product_id)
        raise HTTPException(status_code=500, detail="Failed to fetch product")


# Brand and category endpoints
@app.get("/api/brands", response_model=List[Brand])
def list_brands(storage: MemStorage = Depends(get_storage)):
    try:
        return storage.get_brands()
    except Exception:
        logger.exception("Failed to fetch brands")
        raise HTTPException(status_code=500, detail="Failed to fetch brands")


@app.get("/api/brands/{name}", response_model=Brand)
def get_brand(name: str, storage: MemStorage = Depends(get_storage)):
    try:
        brand = storage.get_brand_by_name(name)
        if not brand:
            raise HTTPException(status_code=404, detail="Brand not found")
        return brand
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to fetch brand %r", name)
        raise HTTPException(status_code=500, detail="Failed to fetch brand")


@app.get("/api/categories", response_model=List[Category])
def list_categories(storage: MemStorage = Depends(get_storage)):
    try:
        return storage.get_categories()
    except Exception:
        logger.exception("Failed to fetch categories")
        raise HTTPException(status_code=500, detail="Failed to fetch categories")


@app.get("/api/categories/{name}", response_model=Category)
def get_category(name: str, storage: MemStorage = Depends(get_storage)):
    try:
        category = storage.get_category_by_name(name)
        if not category:
            raise HTTPException(status_code=404, detail="Category not found")
        return category
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to fetch category %r", name)
        raise HTTPException(status_code=500, detail="Failed to fetch category")


# Cart endpoints (per guest session)
@app.get("/api/cart/{session_id}", response_model=List[CartItemWithProduct])
def get_cart(session_id: str, storage: MemStorage = Depends(get_storage)):
    require_session_id(session_id)
    try:
        return storage.get_cart_with_products(session_id)
    except Exception:
        logger.exception("Failed to fetch cart items for session %r", session_id)
        raise HTTPException(status_code=500, detail="Failed to fetch cart items")


@app.get("/api/cart/{session_id}/summary", response_model=CartSummary)
def cart_summary(session_id: str, storage: MemStorage = Depends(get_storage)):
    require_session_id(session_id)
    try:
        return storage.cart_summary(session_id)
    except Exception:
        logger.exception("Failed to summarize cart for session %r", session_id)
        raise HTTPException(status_code=500, detail="Failed to summarize cart")


@app.post("/api/cart", response_model=CartItemWithProduct, status_code=status.HTTP_201_CREATED)
def add_to_cart(payload: CartItemCreate, storage: MemStorage = Depends(get_storage)):
    if payload.session_id is not None:
        require_session_id(payload.session_id)
    try:
        item = storage.add_to_cart(payload)
        return storage.with_product(item)
    except Exception:
        logger.exception("Failed to add product %s to cart", payload.product_id)
        raise HTTPException(status_code=500, detail="Failed to add item to cart")


@app.put("/api/cart/{item_id}", response_model=CartItemWithProduct)
def update_cart_item(item_id: int, payload: CartItemUpdate, storage: MemStorage = Depends(get_storage)):
    try:
        item = storage.update_cart_item(item_id, payload.quantity)
        if not item:
            raise HTTPException(status_code=404, detail="Cart item not found")
        return storage.with_product(item)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to update cart item %s", item_id)
        raise HTTPException(status_code=500, detail="Failed to update cart item")


@app.delete("/api/cart/session/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def clear_cart(session_id: str, storage: MemStorage = Depends(get_storage)):
    require_session_id(session_id)
    try:
        storage.clear_cart(session_id)
    except Exception:
        logger.exception("Failed to clear cart for session %r", session_id)
        raise HTTPException(status_code=500, detail="Failed to clear cart")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.delete("/api/cart/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_from_cart(item_id: int, storage: MemStorage = Depends(get_storage)):
    try:
        storage.remove_from_cart(item_id)
    except Exception:
        logger.exception("Failed to remove cart item %s", item_id)
        raise HTTPException(status_code=500, detail="Failed to remove item from cart")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# User endpoints
@app.post("/api/users", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register(payload: UserCreate, storage: MemStorage = Depends(get_storage)):
    if storage.get_user_by_username(payload.username):
        raise HTTPException(status_code=400, detail="Username already exists")
    try:
        user = storage.create_user(payload)
    except Exception:
        logger.exception("Failed to create user %r", payload.username)
        raise HTTPException(status_code=500, detail="Failed to create user")
    return UserOut(**user.model_dump())


@app.get("/api/users/{user_id}", response_model=UserOut)
def get_user(user_id: int, storage: MemStorage = Depends(get_storage)):
    user = storage.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return UserOut(**user.model_dump())


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)

"""
Data Schemas for BireuenVape

Each Pydantic model corresponds to one in-memory collection held by the store.
Collection name is the lowercase class name. Attributes are snake_case in
Python and camelCase on the wire (isNewArrival, sessionId, ...).
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Insert payloads

class UserCreate(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    email: Optional[EmailStr] = None
    date_of_birth: Optional[str] = None


class ProductCreate(CamelModel):
    name: str
    description: str
    price: int = Field(..., ge=0, description="Price in the smallest currency unit")
    discount_price: Optional[int] = Field(None, ge=0)
    brand: str
    category: str
    subcategory: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    colors: List[str] = Field(default_factory=list)
    in_stock: bool = True
    is_new_arrival: bool = False
    is_featured: bool = False
    rating: int = Field(0, ge=0, le=50, description="Tenths of a star, 45 -> 4.5")
    review_count: int = Field(0, ge=0)
    specifications: Dict[str, Any] = Field(default_factory=dict)


class BrandCreate(CamelModel):
    name: str
    logo: Optional[str] = None
    description: Optional[str] = None


class CategoryCreate(CamelModel):
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    product_count: int = 0


class CartItemCreate(CamelModel):
    user_id: Optional[int] = Field(None, strict=True)
    product_id: int = Field(..., strict=True)
    quantity: int = Field(1, ge=1, strict=True)
    color: Optional[str] = None
    session_id: Optional[str] = Field(None, description="Defaults to the guest session when omitted")


class CartItemUpdate(CamelModel):
    quantity: int = Field(..., gt=0, strict=True)


# Stored records

class User(CamelModel):
    id: int
    username: str
    password: str = Field(..., description="passlib hash, never the plain password")
    email: Optional[EmailStr] = None
    is_verified: bool = False
    date_of_birth: Optional[str] = None


class UserOut(CamelModel):
    id: int
    username: str
    email: Optional[EmailStr] = None
    is_verified: bool
    date_of_birth: Optional[str] = None


class Product(ProductCreate):
    id: int
    created_at: datetime


class Brand(BrandCreate):
    id: int


class Category(CategoryCreate):
    id: int


class CartItem(CamelModel):
    id: int
    user_id: Optional[int] = None
    product_id: int
    quantity: int
    color: Optional[str] = None
    session_id: str


# Read-time views, never stored

class CartItemWithProduct(CartItem):
    product: Optional[Product] = None


class CartSummary(CamelModel):
    session_id: str
    line_count: int
    item_count: int
    subtotal: int

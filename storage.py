"""
In-memory storage for BireuenVape.

Every collection is a ``Table``: records indexed by integer id, kept in
insertion order, with a counter that hands out the next id. Nothing is
persisted; a ``MemStorage`` lives exactly as long as the application that
created it.

Lookups that find nothing return ``None``. The store never raises for a
missing record, the HTTP layer decides what absence means.
"""
import logging
from datetime import datetime, timezone
from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from passlib.context import CryptContext

from schemas import (
    Brand,
    BrandCreate,
    CartItem,
    CartItemCreate,
    CartItemWithProduct,
    CartSummary,
    Category,
    CategoryCreate,
    Product,
    ProductCreate,
    User,
    UserCreate,
)

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

T = TypeVar("T", User, Product, Brand, Category, CartItem)


def get_password_hash(password):
    return pwd_context.hash(password)


class Table(Generic[T]):
    """Id-indexed records plus the next id to assign. Ids are never reused."""

    def __init__(self, name: str):
        self.name = name
        self._rows: Dict[int, T] = {}
        self._next_id = 1

    def insert(self, build: Callable[[int], T]) -> T:
        record = build(self._next_id)
        self._next_id += 1
        self._rows[record.id] = record
        return record

    def get(self, record_id: int) -> Optional[T]:
        return self._rows.get(record_id)

    def replace(self, record: T) -> T:
        self._rows[record.id] = record
        return record

    def delete(self, record_id: int) -> None:
        self._rows.pop(record_id, None)

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        return next((r for r in self._rows.values() if predicate(r)), None)

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [r for r in self._rows.values() if predicate(r)]

    def __iter__(self) -> Iterator[T]:
        # snapshot, callers may delete while iterating
        return iter(list(self._rows.values()))

    def __len__(self) -> int:
        return len(self._rows)


DEFAULT_SESSION_ID = "guest-session"


class MemStorage:
    def __init__(self, guest_session_id: str = DEFAULT_SESSION_ID):
        self.guest_session_id = guest_session_id
        self.users: Table[User] = Table("user")
        self.products: Table[Product] = Table("product")
        self.brands: Table[Brand] = Table("brand")
        self.categories: Table[Category] = Table("category")
        self.cart_items: Table[CartItem] = Table("cartitem")

    def counts(self) -> Dict[str, int]:
        return {
            table.name: len(table)
            for table in (self.users, self.products, self.brands, self.categories, self.cart_items)
        }

    # Users

    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users.find(lambda u: u.username == username)

    def create_user(self, payload: UserCreate) -> User:
        """Store a new user. The password is hashed and the account starts unverified."""
        return self.users.insert(
            lambda new_id: User(
                id=new_id,
                username=payload.username,
                password=get_password_hash(payload.password),
                email=payload.email,
                is_verified=False,
                date_of_birth=payload.date_of_birth,
            )
        )

    # Products

    def get_products(self) -> List[Product]:
        return list(self.products)

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        return self.products.get(product_id)

    def get_products_by_category(self, category: str) -> List[Product]:
        wanted = category.lower()
        return self.products.filter(lambda p: p.category.lower() == wanted)

    def get_products_by_brand(self, brand: str) -> List[Product]:
        wanted = brand.lower()
        return self.products.filter(lambda p: p.brand.lower() == wanted)

    def get_featured_products(self) -> List[Product]:
        return self.products.filter(lambda p: p.is_featured)

    def get_new_arrivals(self) -> List[Product]:
        return self.products.filter(lambda p: p.is_new_arrival)

    def search_products(self, query: str) -> List[Product]:
        """Case-insensitive substring match on name, description or brand."""
        q = query.lower()
        return self.products.filter(
            lambda p: q in p.name.lower() or q in p.description.lower() or q in p.brand.lower()
        )

    def filter_products(
        self,
        brands: Optional[List[str]] = None,
        categories: Optional[List[str]] = None,
        min_price: Optional[int] = None,
        max_price: Optional[int] = None,
        in_stock: Optional[bool] = None,
        on_sale: Optional[bool] = None,
    ) -> List[Product]:
        """Products matching every filter given, in insertion order.

        Brand and category names match case-insensitively, any of the listed
        names will do. The price bounds are inclusive and apply to the regular
        price. ``on_sale`` means the product has a discount price.
        """
        wanted_brands = {b.lower() for b in brands} if brands else None
        wanted_categories = {c.lower() for c in categories} if categories else None

        def matches(p: Product) -> bool:
            if wanted_brands is not None and p.brand.lower() not in wanted_brands:
                return False
            if wanted_categories is not None and p.category.lower() not in wanted_categories:
                return False
            if min_price is not None and p.price < min_price:
                return False
            if max_price is not None and p.price > max_price:
                return False
            if in_stock is not None and p.in_stock != in_stock:
                return False
            if on_sale is not None and (p.discount_price is not None) != on_sale:
                return False
            return True

        return [p for p in self.get_products() if matches(p)]

    def create_product(self, payload: ProductCreate) -> Product:
        return self.products.insert(
            lambda new_id: Product(
                id=new_id,
                created_at=datetime.now(timezone.utc),
                **payload.model_dump(),
            )
        )

    # Brands

    def get_brands(self) -> List[Brand]:
        return list(self.brands)

    def get_brand_by_name(self, name: str) -> Optional[Brand]:
        wanted = name.lower()
        return self.brands.find(lambda b: b.name.lower() == wanted)

    def create_brand(self, payload: BrandCreate) -> Brand:
        return self.brands.insert(lambda new_id: Brand(id=new_id, **payload.model_dump()))

    # Categories

    def get_categories(self) -> List[Category]:
        return list(self.categories)

    def get_category_by_name(self, name: str) -> Optional[Category]:
        wanted = name.lower()
        return self.categories.find(lambda c: c.name.lower() == wanted)

    def create_category(self, payload: CategoryCreate) -> Category:
        return self.categories.insert(lambda new_id: Category(id=new_id, **payload.model_dump()))

    # Cart

    def get_cart_items(self, session_id: str) -> List[CartItem]:
        return self.cart_items.filter(lambda i: i.session_id == session_id)

    def add_to_cart(self, payload: CartItemCreate) -> CartItem:
        """Add a line to a session's cart.

        A line with the same product, session and color already in the cart
        absorbs the new quantity instead of producing a second line; the merged
        record keeps its id. A line without a session id goes to the guest
        session.
        """
        if payload.session_id is None:
            payload = payload.model_copy(update={"session_id": self.guest_session_id})
        existing = self.cart_items.find(
            lambda i: i.product_id == payload.product_id
            and i.session_id == payload.session_id
            and i.color == payload.color
        )
        if existing:
            merged = existing.model_copy(update={"quantity": existing.quantity + payload.quantity})
            logger.debug("Merged cart item %s, quantity now %s", merged.id, merged.quantity)
            return self.cart_items.replace(merged)

        item = self.cart_items.insert(lambda new_id: CartItem(id=new_id, **payload.model_dump()))
        logger.debug("Added cart item %s to session %s", item.id, item.session_id)
        return item

    def update_cart_item(self, item_id: int, quantity: int) -> Optional[CartItem]:
        item = self.cart_items.get(item_id)
        if not item:
            return None
        return self.cart_items.replace(item.model_copy(update={"quantity": quantity}))

    def remove_from_cart(self, item_id: int) -> None:
        self.cart_items.delete(item_id)

    def clear_cart(self, session_id: str) -> None:
        for item in self.get_cart_items(session_id):
            self.cart_items.delete(item.id)

    def with_product(self, item: CartItem) -> CartItemWithProduct:
        return CartItemWithProduct(**item.model_dump(), product=self.get_product_by_id(item.product_id))

    def get_cart_with_products(self, session_id: str) -> List[CartItemWithProduct]:
        return [self.with_product(item) for item in self.get_cart_items(session_id)]

    def cart_summary(self, session_id: str) -> CartSummary:
        """Totals for a session's cart. A line is priced at the product's
        discount price when it has one, otherwise its regular price; lines
        whose product is unknown count as zero."""
        items = self.get_cart_items(session_id)
        subtotal = 0
        for item in items:
            product = self.get_product_by_id(item.product_id)
            if product:
                # a discount price of 0 is a free item, not a missing discount
                unit = product.discount_price if product.discount_price is not None else product.price
                subtotal += unit * item.quantity
        return CartSummary(
            session_id=session_id,
            line_count=len(items),
            item_count=sum(i.quantity for i in items),
            subtotal=subtotal,
        )

# micafe/services/catalog.py
import logging
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from micafe.config import settings
from micafe.exceptions import InvalidExtraError, ProductNotFoundError
from micafe.models.product import Extra, Product
from micafe.services.pricing import as_decimal

logger = logging.getLogger(__name__)

# Fields an admin edit may overwrite; the id is never among them
EDITABLE_FIELDS = ("name", "description", "price", "category", "prep_time", "available", "image_url")


def get_product(db, product_id: str) -> Product:
    product = next((p for p in db.products if p.id == product_id), None)
    if product is None:
        raise ProductNotFoundError()
    return product


def list_products(
    db,
    category: Optional[str] = None,
    q: Optional[str] = None,
    only_available: bool = False,
) -> List[Product]:
    items = db.products
    if category:
        items = [p for p in items if p.category == category]
    if q:
        needle = q.lower()
        items = [p for p in items if needle in p.name.lower()]
    if only_available:
        items = [p for p in items if p.available]
    return list(items)


def list_categories(db) -> List[str]:
    # Distinct, in catalog order
    return list(dict.fromkeys(p.category for p in db.products))


def resolve_extras(db, extra_ids: Iterable[str]) -> List[Extra]:
    """Look up extras in catalog order. Unknown ids are ignored."""
    wanted = set(extra_ids or [])
    return [e for e in db.extras if e.id in wanted]


def resolve_selected_extras(product: Product, extra_ids: Iterable[str]) -> List[Extra]:
    """Map a customer's chosen extra ids onto the product's allowed extras."""
    allowed = {e.id: e for e in product.allowed_extras}
    selected = []
    for extra_id in dict.fromkeys(extra_ids or []):
        if extra_id not in allowed:
            raise InvalidExtraError(f"Extra {extra_id} not allowed for {product.name}")
        selected.append(allowed[extra_id])
    return selected


def create_product(
    db,
    *,
    name: str,
    description: str = "",
    price: Decimal,
    category: str,
    prep_time: int,
    available: bool = True,
    extra_ids: Iterable[str] = (),
    image_url: Optional[str] = None,
) -> Product:
    product = Product(
        id=db.ids.next("p"),
        name=name,
        description=description,
        price=as_decimal(price),
        image_url=image_url or settings.DEFAULT_IMAGE_URL,
        category=category,
        prep_time=prep_time,
        available=available,
        allowed_extras=resolve_extras(db, extra_ids),
    )
    # Newest products are listed first
    db.products.insert(0, product)
    logger.info("Product %s created: %s", product.id, product.name)
    return product


def update_product(db, product_id: str, changes: Dict[str, Any]) -> Product:
    """Apply the given fields in place. ``None`` values leave a field unchanged."""
    product = get_product(db, product_id)

    for key in EDITABLE_FIELDS:
        value = changes.get(key)
        # An empty image reference keeps the current image
        if value is None or (key == "image_url" and not value):
            continue
        if key == "price":
            value = as_decimal(value)
        setattr(product, key, value)

    if changes.get("extra_ids") is not None:
        product.allowed_extras = resolve_extras(db, changes["extra_ids"])

    logger.info("Product %s updated", product.id)
    return product

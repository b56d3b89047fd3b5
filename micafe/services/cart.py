# micafe/services/cart.py
import logging
from typing import Iterable, Optional

from micafe.exceptions import InvalidQuantityError
from micafe.models.cart import Cart, CartItem
from micafe.models.product import Extra, Product
from micafe.utils.ids import IdGenerator

logger = logging.getLogger(__name__)


def _extra_key(extras: Iterable[Extra]) -> frozenset:
    return frozenset(e.id for e in extras)


def find_mergeable(cart: Cart, product: Product, selected_extras: Iterable[Extra]) -> Optional[CartItem]:
    # Same product and same set of extras, regardless of selection order
    key = _extra_key(selected_extras)
    for item in cart.items:
        if item.product.id == product.id and item.extra_ids() == key:
            return item
    return None


def add_to_cart(
    cart: Cart,
    product: Product,
    quantity: int,
    selected_extras: Iterable[Extra],
    ids: IdGenerator,
) -> CartItem:
    """Add ``quantity`` of ``product`` to the cart and return the affected line.

    An existing line with the same product and the same extras has its
    quantity increased in place; otherwise a new line is appended. The
    extras are expected to be a subset of ``product.allowed_extras``.
    """
    if quantity < 1:
        raise InvalidQuantityError()

    selected_extras = list(selected_extras)
    item = find_mergeable(cart, product, selected_extras)
    if item:
        item.quantity += quantity
    else:
        item = CartItem(
            id=ids.next("c"),
            product=product,
            quantity=quantity,
            selected_extras=selected_extras,
        )
        cart.items.append(item)

    logger.debug("Cart %s: %sx %s -> line %s", cart.user_id, quantity, product.name, item.id)
    return item


def update_quantity(cart: Cart, line_id: str, new_quantity: int) -> Optional[CartItem]:
    if new_quantity < 1:
        remove_line(cart, line_id)
        return None

    item = cart.find(line_id)
    if item:
        item.quantity = new_quantity
    return item


def remove_line(cart: Cart, line_id: str) -> None:
    cart.items = [it for it in cart.items if it.id != line_id]


def clear_cart(cart: Cart) -> None:
    cart.items = []


def item_count(cart: Cart) -> int:
    return sum(it.quantity for it in cart.items)

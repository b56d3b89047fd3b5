# micafe/services/orders.py
import copy
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from micafe.exceptions import EmptyCartError, OrderNotFoundError
from micafe.models.cart import Cart
from micafe.models.order import Order, OrderStatus, OrderType
from micafe.models.users import User
from micafe.services.cart import clear_cart
from micafe.services.pricing import ZERO, cart_total

logger = logging.getLogger(__name__)


@dataclass
class SalesSummary:
    total_sales: Decimal
    order_count: int
    completed_count: int
    pending_count: int


def get_order(db, order_id: str) -> Order:
    order = next((o for o in db.orders if o.id == order_id), None)
    if order is None:
        raise OrderNotFoundError()
    return order


def confirm_order(db, cart: Cart, customer: Optional[User], order_type: OrderType = OrderType.TAKEAWAY) -> Order:
    """Turn the cart into a pending order and empty the cart.

    Raises :class:`EmptyCartError` without touching any state when the cart
    has no lines or nobody is logged in.
    """
    if customer is None or not cart.items:
        raise EmptyCartError()

    order = Order(
        id=db.ids.next("o"),
        customer_id=customer.id,
        customer_name=customer.name,
        items=copy.deepcopy(cart.items),
        total=cart_total(cart.items),
        order_type=OrderType(order_type),
        created_at=db.clock(),
        receipt_number=db.receipts.next(),
        status=OrderStatus.PENDING,
    )
    db.orders.append(order)
    clear_cart(cart)

    logger.info("Order %s (#%s) confirmed for %s, total %s", order.id, order.receipt_number, customer.id, order.total)
    return order


def mark_completed(db, order_id: str) -> Order:
    # Completing twice is a no-op, not an error
    order = get_order(db, order_id)
    if order.status != OrderStatus.COMPLETED:
        order.status = OrderStatus.COMPLETED
        logger.info("Order %s (#%s) completed", order.id, order.receipt_number)
    return order


def _newest_first(orders) -> List[Order]:
    # Later insertions win ties on created_at
    return sorted(reversed(list(orders)), key=lambda o: o.created_at, reverse=True)


def order_history(db, customer_id: str, limit: Optional[int] = 10) -> List[Order]:
    orders = _newest_first(o for o in db.orders if o.customer_id == customer_id)
    return orders[:limit] if limit else orders


def recent_orders(db, limit: Optional[int] = 20) -> List[Order]:
    """Latest orders of every customer, for the admin dashboard."""
    orders = _newest_first(db.orders)
    return orders[:limit] if limit else orders


def pending_queue(db) -> List[Order]:
    # Oldest first, the order staff should prepare them in
    return sorted(
        (o for o in db.orders if o.status == OrderStatus.PENDING),
        key=lambda o: o.created_at,
    )


def sales_summary(db) -> SalesSummary:
    completed = sum(1 for o in db.orders if o.status == OrderStatus.COMPLETED)
    return SalesSummary(
        total_sales=sum((o.total for o in db.orders), ZERO),
        order_count=len(db.orders),
        completed_count=completed,
        pending_count=len(db.orders) - completed,
    )

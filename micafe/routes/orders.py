# micafe/routes/orders.py
from typing import List, Optional
from fastapi import APIRouter, Depends, Request, status
import logging

from micafe.config import settings
from micafe.database import Database, get_db
from micafe.exceptions import EmptyCartError, OrderNotFoundError
from micafe.models.order import Order, OrderType
from micafe.models.users import Role, User
from micafe.routes.cart import extras_out, notify
from micafe.schemas.order import (
    OrderConfirmation, OrderCreatePayload, OrderItemOut, OrderResponse, OrderStatusResult
)
from micafe.services import orders as order_service
from micafe.services.pricing import line_total, to_display, unit_price_with_extras
from micafe.utils.audit import client_ip, write_log
from micafe.utils.tokenJWT import role_required

router = APIRouter(prefix="/orders", tags=["Orders"])
logger = logging.getLogger(__name__)

client_only = role_required(Role.CLIENT)
staff_only = role_required(Role.STAFF)

# Map Order record to OrderResponse schema. Prices come from the snapshot
def order_to_out(order: Order) -> OrderResponse:
    items: List[OrderItemOut] = [
        OrderItemOut(
            product_id=it.product.id,
            product_name=it.product.name,
            qty=it.quantity,
            unit_price=to_display(unit_price_with_extras(it.product, it.selected_extras)),
            extras=extras_out(it),
            line_total=to_display(line_total(it)),
        )
        for it in order.items
    ]
    return OrderResponse(
        id=order.id,
        receipt_number=order.receipt_number,
        customer_id=order.customer_id,
        customer_name=order.customer_name,
        status=order.status,
        order_type=order.order_type,
        total_amount=to_display(order.total),
        created_at=order.created_at,
        items=items,
    )

# Confirm the caller's cart as a new pending order
@router.post("", response_model=OrderConfirmation, status_code=status.HTTP_201_CREATED)
def place_order(
    request: Request,
    payload: Optional[OrderCreatePayload] = None,
    db: Database = Depends(get_db),
    current_user: User = Depends(client_only),
):
    cart = db.cart_for(current_user.id)
    order_type = payload.order_type if payload else OrderType.TAKEAWAY
    try:
        order = order_service.confirm_order(db, cart, current_user, order_type)
    except EmptyCartError:
        write_log(db, user_id=current_user.id, action="ORDER_CREATE", resource="orders", status="FAIL",
                  ip=client_ip(request), meta={"reason": "Cart is empty"})
        raise

    write_log(db, user_id=current_user.id, action="ORDER_CREATE", resource="orders", status="SUCCESS",
              ip=client_ip(request), meta={"order_id": order.id, "receipt": order.receipt_number,
                                           "total": to_display(order.total)})
    return OrderConfirmation(
        order=order_to_out(order),
        notification=notify(f"Order #{order.receipt_number} confirmed! You will receive your receipt."),
    )

# Most recent orders of the caller
@router.get("", response_model=List[OrderResponse])
def list_my_orders(db: Database = Depends(get_db), current_user: User = Depends(client_only)):
    orders = order_service.order_history(db, current_user.id, limit=settings.ORDER_HISTORY_LIMIT)
    return [order_to_out(o) for o in orders]

# Pending orders for the staff panel, oldest first
@router.get("/queue", response_model=List[OrderResponse])
def pending_orders(db: Database = Depends(get_db), current_user: User = Depends(staff_only)):
    return [order_to_out(o) for o in order_service.pending_queue(db)]

# Mark an order as completed; repeating the call changes nothing
@router.post("/{order_id}/complete", response_model=OrderStatusResult)
def complete_order(
    order_id: str,
    request: Request,
    db: Database = Depends(get_db),
    current_user: User = Depends(staff_only),
):
    try:
        order = order_service.mark_completed(db, order_id)
    except OrderNotFoundError:
        logger.warning("Staff %s tried to complete unknown order %s", current_user.id, order_id)
        write_log(db, user_id=current_user.id, action="ORDER_COMPLETE", resource="orders", status="FAIL",
                  ip=client_ip(request), meta={"order_id": order_id})
        raise

    write_log(db, user_id=current_user.id, action="ORDER_COMPLETE", resource="orders", status="SUCCESS",
              ip=client_ip(request), meta={"order_id": order.id, "receipt": order.receipt_number})
    return OrderStatusResult(
        order=order_to_out(order),
        notification=notify(f"Order #{order.receipt_number} completed.", "info"),
    )

# micafe/schemas/order.py
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime

from micafe.models.order import OrderStatus, OrderType
from micafe.schemas.cart import Notification
from micafe.schemas.product import ExtraOut


# Output schema for an individual order line item
class OrderItemOut(BaseModel):
    product_id: str
    product_name: str
    qty: int
    unit_price: float
    extras: List[ExtraOut]
    line_total: float


# Input schema for confirming the current cart
class OrderCreatePayload(BaseModel):
    order_type: OrderType = OrderType.TAKEAWAY

# Output schema representing the full order details
class OrderResponse(BaseModel):
    id: str
    receipt_number: str
    customer_id: str
    customer_name: str
    status: OrderStatus
    order_type: OrderType
    total_amount: float
    created_at: datetime
    items: List[OrderItemOut]

# Response for a freshly confirmed order
class OrderConfirmation(BaseModel):
    order: OrderResponse
    notification: Optional[Notification] = None

# Response for a staff status change
class OrderStatusResult(BaseModel):
    order: OrderResponse
    notification: Optional[Notification] = None

# micafe/models/order.py
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List

from micafe.models.cart import CartItem


class OrderStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"


class OrderType(str, Enum):
    DINE_IN = "dine-in"
    TAKEAWAY = "takeaway"


@dataclass
class Order:
    id: str
    customer_id: str
    customer_name: str
    # Snapshot of the cart lines at confirmation time
    items: List[CartItem]
    total: Decimal
    order_type: OrderType
    created_at: datetime
    receipt_number: str
    status: OrderStatus = OrderStatus.PENDING

    @property
    def is_completed(self) -> bool:
        return self.status == OrderStatus.COMPLETED

# micafe/schemas/reports.py
from pydantic import BaseModel
from typing import List

from micafe.schemas.order import OrderResponse

# Admin dashboard figures across every order taken in this process
class DashboardOut(BaseModel):
    total_sales: float
    order_count: int
    completed_count: int
    pending_count: int
    # Newest first, every customer
    recent_orders: List[OrderResponse]

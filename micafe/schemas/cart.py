# micafe/schemas/cart.py
from pydantic import BaseModel, Field
from typing import List, Literal, Optional

from micafe.schemas.product import ExtraOut

# Message the frontend shows as a toast, then hides after duration_seconds
class Notification(BaseModel):
    message: str
    type: Literal["success", "error", "info"] = "success"
    duration_seconds: int

# Request schema for adding an item to the cart
class CartAddItem(BaseModel):
    product_id: str
    qty: int = Field(default=1, ge=1)
    extra_ids: List[str] = Field(default_factory=list)

# Request schema for updating cart item quantity; below 1 removes the line
class CartUpdateItem(BaseModel):
    qty: int

# Response schema for a single cart line item
class CartItemOut(BaseModel):
    id: str
    product_id: str
    name: str
    qty: int
    unit_price: float
    extras: List[ExtraOut]
    line_total: float

# Response schema for the entire cart summary
class CartOut(BaseModel):
    items: List[CartItemOut]
    total: float
    item_count: int
    notification: Optional[Notification] = None

# micafe/models/cart.py
from dataclasses import dataclass, field
from typing import List, Optional

from micafe.models.product import Extra, Product


# Represents a single grouped line (product + quantity + chosen extras) within a cart
@dataclass
class CartItem:
    id: str
    product: Product
    quantity: int
    selected_extras: List[Extra] = field(default_factory=list)

    def extra_ids(self) -> frozenset:
        return frozenset(e.id for e in self.selected_extras)


# Represents the active customer's cart; lives only as long as their session
@dataclass
class Cart:
    user_id: str
    items: List[CartItem] = field(default_factory=list)

    def find(self, line_id: str) -> Optional[CartItem]:
        return next((it for it in self.items if it.id == line_id), None)

# micafe/models/product.py
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List


# Optional customization attached to a product. Every extra currently costs 0,
# the price field exists so the pricing rules do not have to change later.
@dataclass
class Extra:
    id: str
    name: str
    price: Decimal = Decimal("0")


# Model Product
# A single menu entry. Mutated in place by admin edits, never deleted.
@dataclass
class Product:
    id: str
    name: str
    description: str
    price: Decimal
    image_url: str
    category: str
    prep_time: int  # minutes
    available: bool = True
    allowed_extras: List[Extra] = field(default_factory=list)

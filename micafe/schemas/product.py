# micafe/schemas/product.py
from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class ExtraOut(ORMBase):
    id: str
    name: str
    price: float = 0.0


# Shared base attributes for product entities
class ProductBase(ORMBase):
    name: str = Field(min_length=1)
    description: str = ""
    price: Decimal = Field(ge=0)
    category: str = Field(min_length=1)
    prep_time: int = Field(gt=0, description="Preparation time in minutes")
    available: bool = True
    image_url: Optional[str] = None


# Schema for creating a new product (also used for full PUT updates)
class ProductCreate(ProductBase):
    extra_ids: List[str] = Field(default_factory=list)


# Schema for partial product updates
class ProductEditRequest(ORMBase):
    """Schema for PATCH requests - all fields optional."""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)
    category: Optional[str] = Field(None, min_length=1)
    prep_time: Optional[int] = Field(None, gt=0)
    available: Optional[bool] = None
    image_url: Optional[str] = None
    extra_ids: Optional[List[str]] = None


# Full product representation including ID
class ProductOut(ORMBase):
    id: str
    name: str
    description: str
    price: float
    image_url: str
    category: str
    prep_time: int
    available: bool
    allowed_extras: List[ExtraOut]


# Paginated response for product listings
class ProductListPage(ORMBase):
    items: List[ProductOut]
    total: int
    page: int
    page_size: int

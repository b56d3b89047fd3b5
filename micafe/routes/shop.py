# micafe/routes/shop.py
from typing import Optional, List
from fastapi import APIRouter, Depends, Query

from micafe.database import Database, get_db
from micafe.models.users import User
from micafe.routes.products import product_to_out
from micafe.schemas.product import ExtraOut, ProductOut
from micafe.services import catalog
from micafe.services.pricing import to_display
from micafe.utils.tokenJWT import get_current_user

router = APIRouter(
    prefix="/shop",
    tags=["Shop"]
)

# Retrieve unique product categories
@router.get("/categories", response_model=List[str])
def get_unique_categories(db: Database = Depends(get_db)):
    return catalog.list_categories(db)

# Extras catalog used by the admin product form
@router.get("/extras", response_model=List[ExtraOut])
def get_extras(db: Database = Depends(get_db)):
    return [ExtraOut(id=e.id, name=e.name, price=to_display(e.price)) for e in db.extras]

# Menu listing. Unavailable products are still listed, flagged as such
@router.get("/products", response_model=List[ProductOut])
def list_products_for_shop(
    q: Optional[str] = Query(None, description="Search by name"),
    category: Optional[str] = Query(None, description="Filter by category"),
    db: Database = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return [product_to_out(p) for p in catalog.list_products(db, category=category, q=q)]

# micafe/routes/products.py
from typing import Optional, List, Literal
from fastapi import APIRouter, Depends, Query, Request

from micafe.database import Database, get_db
from micafe.models.product import Product
from micafe.models.users import Role, User
import micafe.schemas.product as product_schemas
from micafe.services import catalog
from micafe.services.pricing import to_display
from micafe.utils.audit import client_ip, write_log
from micafe.utils.tokenJWT import role_required

router = APIRouter(tags=["Products"])

admin_only = role_required(Role.ADMIN)


def product_to_out(p: Product) -> product_schemas.ProductOut:
    return product_schemas.ProductOut(
        id=p.id,
        name=p.name,
        description=p.description,
        price=to_display(p.price),
        image_url=p.image_url,
        category=p.category,
        prep_time=p.prep_time,
        available=p.available,
        allowed_extras=[
            product_schemas.ExtraOut(id=e.id, name=e.name, price=to_display(e.price))
            for e in p.allowed_extras
        ],
    )


# =========================
# PRODUCT LIST
# =========================
@router.get("/products", response_model=product_schemas.ProductListPage)
def list_products(
    name: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    sort_by: Literal["catalog", "name", "price", "prep_time"] = "catalog",
    order: Literal["asc", "desc"] = "asc",
    db: Database = Depends(get_db),
    current_user: User = Depends(admin_only),
):
    items: List[Product] = catalog.list_products(db, category=category, q=name)

    # "catalog" keeps the admin's ordering (newest first)
    if sort_by != "catalog":
        items = sorted(items, key=lambda p: getattr(p, sort_by), reverse=(order == "desc"))
    elif order == "desc":
        items = list(reversed(items))

    total = len(items)
    rows = items[(page - 1) * page_size: page * page_size]
    return {"items": [product_to_out(p) for p in rows], "total": total, "page": page, "page_size": page_size}


# =========================
# SINGLE PRODUCT
# =========================
@router.get("/products/{product_id}", response_model=product_schemas.ProductOut)
def get_product(product_id: str, db: Database = Depends(get_db), current_user: User = Depends(admin_only)):
    return product_to_out(catalog.get_product(db, product_id))


# =========================
# CREATE PRODUCT
# =========================
@router.post("/products", response_model=product_schemas.ProductOut, status_code=201)
def add_product(
    payload: product_schemas.ProductCreate,
    request: Request,
    db: Database = Depends(get_db),
    current_user: User = Depends(admin_only),
):
    new_product = catalog.create_product(db, **payload.model_dump())

    write_log(
        db, user_id=current_user.id, action="PRODUCT_CREATE", resource="products",
        status="SUCCESS", ip=client_ip(request), meta={"id": new_product.id, "name": new_product.name}
    )
    return product_to_out(new_product)


# =========================
# UPDATE PRODUCT (PUT - full)
# =========================
@router.put("/products/{product_id}", response_model=product_schemas.ProductOut)
def update_product(
    product_id: str,
    updated_data: product_schemas.ProductCreate,
    request: Request,
    db: Database = Depends(get_db),
    current_user: User = Depends(admin_only),
):
    product = catalog.update_product(db, product_id, updated_data.model_dump())

    write_log(
        db, user_id=current_user.id, action="PRODUCT_UPDATE", resource="products",
        status="SUCCESS", ip=client_ip(request), meta={"id": product.id}
    )
    return product_to_out(product)


# =========================
# PARTIAL EDIT (PATCH)
# =========================
@router.patch("/products/{product_id}", response_model=product_schemas.ProductOut)
def edit_product(
    product_id: str,
    payload: product_schemas.ProductEditRequest,
    request: Request,
    db: Database = Depends(get_db),
    current_user: User = Depends(admin_only),
):
    changes = payload.model_dump(exclude_unset=True)
    product = catalog.update_product(db, product_id, changes)

    write_log(
        db, user_id=current_user.id, action="PRODUCT_EDIT", resource="products",
        status="SUCCESS", ip=client_ip(request), meta={"id": product.id, "fields": sorted(changes)}
    )
    return product_to_out(product)

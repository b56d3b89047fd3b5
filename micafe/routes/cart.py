# micafe/routes/cart.py
from typing import Optional
from fastapi import APIRouter, Depends, Request, status

from micafe.config import settings
from micafe.database import Database, get_db
from micafe.exceptions import ProductUnavailableError
from micafe.models.cart import Cart, CartItem
from micafe.models.users import Role, User
from micafe.schemas.cart import CartAddItem, CartItemOut, CartOut, CartUpdateItem, Notification
from micafe.schemas.product import ExtraOut
from micafe.services import cart as cart_service
from micafe.services import catalog
from micafe.services.pricing import cart_total, line_total, to_display, unit_price_with_extras
from micafe.utils.audit import client_ip, write_log
from micafe.utils.tokenJWT import role_required

router = APIRouter(prefix="/cart", tags=["Cart"])

client_only = role_required(Role.CLIENT)


def notify(message: str, kind: str = "success") -> Notification:
    return Notification(message=message, type=kind, duration_seconds=settings.NOTIFICATION_DISPLAY_SECONDS)

def extras_out(item: CartItem):
    return [ExtraOut(id=e.id, name=e.name, price=to_display(e.price)) for e in item.selected_extras]

def _cart_to_out(cart: Cart, notification: Optional[Notification] = None) -> CartOut:
    items_out = [
        CartItemOut(
            id=it.id,
            product_id=it.product.id,
            name=it.product.name,
            qty=it.quantity,
            unit_price=to_display(unit_price_with_extras(it.product, it.selected_extras)),
            extras=extras_out(it),
            line_total=to_display(line_total(it)),
        )
        for it in cart.items
    ]
    # Total is summed exactly, then rounded once
    return CartOut(
        items=items_out,
        total=to_display(cart_total(cart.items)),
        item_count=cart_service.item_count(cart),
        notification=notification,
    )

@router.get("", response_model=CartOut)
def get_cart(db: Database = Depends(get_db), current_user: User = Depends(client_only)):
    return _cart_to_out(db.cart_for(current_user.id))

@router.post("/add", response_model=CartOut, status_code=status.HTTP_200_OK)
def add_to_cart(
    payload: CartAddItem,
    request: Request,
    db: Database = Depends(get_db),
    current_user: User = Depends(client_only),
):
    cart = db.cart_for(current_user.id)
    product = catalog.get_product(db, payload.product_id)

    # The menu disables the add button for these
    if not product.available:
        raise ProductUnavailableError(f"{product.name} is not available")

    extras = catalog.resolve_selected_extras(product, payload.extra_ids)
    item = cart_service.add_to_cart(cart, product, payload.qty, extras, db.ids)

    out = _cart_to_out(cart, notify(f"{payload.qty}x {product.name} added to cart."))
    write_log(
        db,
        user_id=current_user.id,
        action="CART_ADD",
        resource="cart",
        status="SUCCESS",
        ip=client_ip(request),
        meta={"product_id": product.id, "qty": payload.qty, "line_id": item.id, "total": out.total},
    )
    return out

@router.put("/items/{item_id}", response_model=CartOut)
def update_cart_item(
    item_id: str,
    payload: CartUpdateItem,
    request: Request,
    db: Database = Depends(get_db),
    current_user: User = Depends(client_only),
):
    cart = db.cart_for(current_user.id)
    cart_service.update_quantity(cart, item_id, payload.qty)

    out = _cart_to_out(cart)
    write_log(
        db,
        user_id=current_user.id,
        action="CART_UPDATE",
        resource="cart",
        status="SUCCESS",
        ip=client_ip(request),
        meta={"item_id": item_id, "qty": payload.qty, "total": out.total},
    )
    return out

@router.delete("/items/{item_id}", response_model=CartOut)
def delete_cart_item(
    item_id: str,
    request: Request,
    db: Database = Depends(get_db),
    current_user: User = Depends(client_only),
):
    cart = db.cart_for(current_user.id)
    cart_service.remove_line(cart, item_id)

    out = _cart_to_out(cart)
    write_log(
        db,
        user_id=current_user.id,
        action="CART_DELETE",
        resource="cart",
        status="SUCCESS",
        ip=client_ip(request),
        meta={"item_id": item_id, "cart_items": len(out.items), "total": out.total},
    )
    return out

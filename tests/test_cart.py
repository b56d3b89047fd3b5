from micafe.exceptions import InvalidQuantityError
from micafe.models.cart import Cart
from micafe.services import cart as cart_service
from micafe.services.catalog import get_product

import pytest


def _extra(db, extra_id):
    return next(e for e in db.extras if e.id == extra_id)


def test_same_product_and_extras_merge_into_one_line(db):
    cart = Cart(user_id="u1")
    latte = get_product(db, "p2")

    first = cart_service.add_to_cart(cart, latte, 1, [_extra(db, "e1")], db.ids)
    second = cart_service.add_to_cart(cart, latte, 2, [_extra(db, "e1")], db.ids)

    assert first is second
    assert len(cart.items) == 1
    assert cart.items[0].quantity == 3


def test_extra_order_does_not_matter(db):
    cart = Cart(user_id="u1")
    latte = get_product(db, "p2")

    cart_service.add_to_cart(cart, latte, 1, [_extra(db, "e1"), _extra(db, "e3")], db.ids)
    cart_service.add_to_cart(cart, latte, 1, [_extra(db, "e3"), _extra(db, "e1")], db.ids)

    assert len(cart.items) == 1
    assert cart.items[0].quantity == 2


def test_different_extras_make_separate_lines(db):
    cart = Cart(user_id="u1")
    latte = get_product(db, "p2")

    a = cart_service.add_to_cart(cart, latte, 1, [_extra(db, "e1")], db.ids)
    b = cart_service.add_to_cart(cart, latte, 1, [], db.ids)

    assert len(cart.items) == 2
    assert a.id != b.id


def test_different_products_make_separate_lines(db):
    cart = Cart(user_id="u1")
    cart_service.add_to_cart(cart, get_product(db, "p1"), 1, [], db.ids)
    cart_service.add_to_cart(cart, get_product(db, "p3"), 1, [], db.ids)

    assert [it.product.id for it in cart.items] == ["p1", "p3"]


def test_quantity_below_one_is_rejected(db):
    cart = Cart(user_id="u1")
    with pytest.raises(InvalidQuantityError):
        cart_service.add_to_cart(cart, get_product(db, "p1"), 0, [], db.ids)
    assert cart.items == []


def test_update_quantity_replaces_value(db):
    cart = Cart(user_id="u1")
    line = cart_service.add_to_cart(cart, get_product(db, "p2"), 1, [_extra(db, "e1")], db.ids)

    cart_service.update_quantity(cart, line.id, 5)

    assert cart.items[0].quantity == 5
    assert cart.items[0].id == line.id
    assert [e.id for e in cart.items[0].selected_extras] == ["e1"]


def test_update_quantity_to_zero_removes_only_that_line(db):
    cart = Cart(user_id="u1")
    keep = cart_service.add_to_cart(cart, get_product(db, "p1"), 2, [], db.ids)
    drop = cart_service.add_to_cart(cart, get_product(db, "p3"), 1, [], db.ids)

    assert cart_service.update_quantity(cart, drop.id, 0) is None

    assert [it.id for it in cart.items] == [keep.id]
    assert cart.items[0].quantity == 2


def test_remove_unknown_line_is_noop(db):
    cart = Cart(user_id="u1")
    cart_service.add_to_cart(cart, get_product(db, "p1"), 1, [], db.ids)

    cart_service.remove_line(cart, "c999")
    cart_service.update_quantity(cart, "c999", 4)

    assert len(cart.items) == 1
    assert cart.items[0].quantity == 1


def test_item_count_sums_quantities(db):
    cart = Cart(user_id="u1")
    cart_service.add_to_cart(cart, get_product(db, "p1"), 2, [], db.ids)
    cart_service.add_to_cart(cart, get_product(db, "p3"), 3, [], db.ids)

    assert cart_service.item_count(cart) == 5

# micafe/services/pricing.py
"""Price arithmetic for cart lines and orders.

Amounts stay ``Decimal`` end to end. Rounding to cents happens only in
:func:`to_display`, at the moment a value leaves the API.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from micafe.models.cart import CartItem
from micafe.models.product import Extra, Product

CENT = Decimal("0.01")
ZERO = Decimal("0")


def as_decimal(value) -> Decimal:
    # Floats go through str so 3.1 stays 3.1
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def unit_price_with_extras(product: Product, extras: Iterable[Extra]) -> Decimal:
    return as_decimal(product.price) + sum((as_decimal(e.price) for e in extras), ZERO)


def line_total(line: CartItem) -> Decimal:
    return unit_price_with_extras(line.product, line.selected_extras) * line.quantity


def cart_total(lines: Iterable[CartItem]) -> Decimal:
    return sum((line_total(line) for line in lines), ZERO)


def to_display(amount) -> float:
    return float(as_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP))

# micafe/database.py
from typing import Dict, List, Optional

from fastapi import Request

from micafe.config import settings
from micafe.models.cart import Cart
from micafe.models.log import Log
from micafe.models.order import Order
from micafe.models.product import Extra, Product
from micafe.models.users import User
from micafe.populate_db import load_mock_data
from micafe.utils.ids import Clock, IdGenerator, ReceiptGenerator, utc_now


class Database:
    """All application state for one process. Nothing is written to disk."""

    def __init__(
        self,
        ids: Optional[IdGenerator] = None,
        receipts: Optional[ReceiptGenerator] = None,
        clock: Optional[Clock] = None,
    ):
        self.users: List[User] = []
        self.extras: List[Extra] = []
        self.products: List[Product] = []
        self.orders: List[Order] = []
        self.carts: Dict[str, Cart] = {}
        self.logs: List[Log] = []

        self.ids = ids or IdGenerator()
        self.receipts = receipts or ReceiptGenerator(settings.RECEIPT_START, settings.RECEIPT_DIGITS)
        self.clock = clock or utc_now

    def cart_for(self, user_id: str) -> Cart:
        # Retrieve active cart or create a new one
        cart = self.carts.get(user_id)
        if cart is None:
            cart = Cart(user_id=user_id)
            self.carts[user_id] = cart
        return cart

    def get_user(self, user_id: str) -> Optional[User]:
        return next((u for u in self.users if u.id == user_id), None)

    def find_user_by_email(self, email: str) -> Optional[User]:
        normalized = (email or "").strip().lower()
        return next((u for u in self.users if u.email.lower() == normalized), None)


def init_db(db: Optional[Database] = None) -> Database:
    db = db or Database()
    if settings.SEED_MOCK_DATA:
        load_mock_data(db)
    return db


def get_db(request: Request) -> Database:
    return request.app.state.db

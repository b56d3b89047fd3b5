# micafe/services/accounts.py
import logging

from micafe.exceptions import DuplicateEmailError, InvalidCredentialsError
from micafe.models.users import Role, User
from micafe.services.cart import clear_cart

logger = logging.getLogger(__name__)


def register(db, name: str, email: str, password: str) -> User:
    # Normalize email input
    normalized_email = email.strip().lower()
    if db.find_user_by_email(normalized_email):
        raise DuplicateEmailError()

    # Self-registration always creates a customer account
    user = User(id=db.ids.next("u"), email=normalized_email, password=password, name=name, role=Role.CLIENT)
    db.users.append(user)
    logger.info("Registered user %s", user.id)
    return user


def authenticate(db, email: str, password: str) -> User:
    user = db.find_user_by_email(email)
    if user is None or user.password != password:
        raise InvalidCredentialsError()
    return user


def logout(db, user: User) -> None:
    cart = db.carts.pop(user.id, None)
    if cart is not None:
        clear_cart(cart)

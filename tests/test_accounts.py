import pytest

from micafe.exceptions import DuplicateEmailError, InvalidCredentialsError
from micafe.models.users import Role
from micafe.services import accounts
from micafe.services import cart as cart_service
from micafe.services.catalog import get_product


def test_register_creates_client(db):
    user = accounts.register(db, name="Lu", email="  Lu@Mail.com ", password="pw")
    assert user.id == "u4"
    assert user.role == Role.CLIENT
    assert user.email == "lu@mail.com"


def test_register_rejects_duplicate_email(db):
    with pytest.raises(DuplicateEmailError):
        accounts.register(db, name="Copy", email="CLIENT@mail.com", password="x")
    assert len(db.users) == 3


def test_authenticate_same_error_for_unknown_email_and_bad_password(db):
    with pytest.raises(InvalidCredentialsError) as unknown:
        accounts.authenticate(db, "nobody@mail.com", "123")
    with pytest.raises(InvalidCredentialsError) as wrong:
        accounts.authenticate(db, "client@mail.com", "nope")
    assert unknown.value.message == wrong.value.message


def test_logout_clears_cart(db):
    user = accounts.authenticate(db, "client@mail.com", "123")
    cart = db.cart_for(user.id)
    cart_service.add_to_cart(cart, get_product(db, "p1"), 1, [], db.ids)

    accounts.logout(db, user)

    assert cart.items == []
    assert db.cart_for(user.id).items == []

import pytest

from micafe.models.users import Role
from micafe.services.navigation import Page, landing_page, navigate


@pytest.mark.parametrize("role,page", [
    (Role.CLIENT, Page.MENU),
    (Role.CLIENT, Page.CART),
    (Role.CLIENT, Page.HISTORY),
    (Role.STAFF, Page.STAFF_QUEUE),
    (Role.ADMIN, Page.ADMIN_DASHBOARD),
    (Role.ADMIN, Page.ADMIN_PRODUCTS),
])
def test_allowed_pages_pass_through(role, page):
    assert navigate(page, role) == page


@pytest.mark.parametrize("role,page,expected", [
    (Role.CLIENT, Page.ADMIN_DASHBOARD, Page.MENU),
    (Role.STAFF, Page.CART, Page.STAFF_QUEUE),
    (Role.ADMIN, Page.STAFF_QUEUE, Page.ADMIN_DASHBOARD),
])
def test_forbidden_pages_redirect_to_landing(role, page, expected):
    assert navigate(page, role) == expected


def test_unknown_page_name_redirects():
    assert navigate("nowhere", Role.STAFF) == Page.STAFF_QUEUE


def test_anonymous_only_sees_login_and_register():
    assert navigate("register", None) == Page.REGISTER
    assert navigate("menu", None) == Page.LOGIN
    assert landing_page(None) == Page.LOGIN


def test_accepts_plain_strings():
    assert navigate("history", "client") == Page.HISTORY

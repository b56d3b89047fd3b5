# micafe/services/navigation.py
from enum import Enum
from typing import Dict, FrozenSet, Optional, Union

from micafe.models.users import Role


class Page(str, Enum):
    LOGIN = "login"
    REGISTER = "register"
    MENU = "menu"
    CART = "cart"
    HISTORY = "history"
    STAFF_QUEUE = "staff-queue"
    ADMIN_DASHBOARD = "admin-dashboard"
    ADMIN_PRODUCTS = "admin-products"


ALLOWED_PAGES: Dict[Role, FrozenSet[Page]] = {
    Role.CLIENT: frozenset({Page.MENU, Page.CART, Page.HISTORY}),
    Role.STAFF: frozenset({Page.STAFF_QUEUE}),
    Role.ADMIN: frozenset({Page.ADMIN_DASHBOARD, Page.ADMIN_PRODUCTS}),
}

LANDING_PAGES: Dict[Role, Page] = {
    Role.CLIENT: Page.MENU,
    Role.STAFF: Page.STAFF_QUEUE,
    Role.ADMIN: Page.ADMIN_DASHBOARD,
}

ANONYMOUS_PAGES = frozenset({Page.LOGIN, Page.REGISTER})


def landing_page(role: Optional[Role]) -> Page:
    if role is None:
        return Page.LOGIN
    return LANDING_PAGES[Role(role)]


def navigate(requested: Union[Page, str], role: Optional[Role]) -> Page:
    """Return ``requested`` if the role may see it, else the role's landing page.

    Never raises: unknown page names and forbidden pages both redirect.
    """
    try:
        page = Page(requested)
    except ValueError:
        return landing_page(role)

    allowed = ANONYMOUS_PAGES if role is None else ALLOWED_PAGES[Role(role)]
    return page if page in allowed else landing_page(role)

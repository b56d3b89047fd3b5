# micafe/populate_db.py
from decimal import Decimal

from micafe.models.product import Extra, Product
from micafe.models.users import Role, User


MOCK_EXTRAS = [
    Extra(id="e1", name="Almond Milk"),
    Extra(id="e2", name="Lactose-Free Milk"),
    Extra(id="e3", name="Caramel Syrup"),
    Extra(id="e4", name="Whipped Cream"),
    Extra(id="e5", name="No Onion"),
    Extra(id="e6", name="Extra Cheese"),
]


def _mock_products(extras):
    by_id = {e.id: e for e in extras}
    return [
        Product(
            id="p1",
            name="Espresso",
            description="Short and intense coffee, the base of everything.",
            price=Decimal("2.50"),
            image_url="https://placehold.co/600x400/D29961/FFF?text=Espresso",
            category="Drinks",
            prep_time=3,
            allowed_extras=[by_id["e2"]],
        ),
        Product(
            id="p2",
            name="Latte",
            description="Smooth espresso with steamed milk.",
            price=Decimal("3.50"),
            image_url="https://placehold.co/600x400/A56A49/FFF?text=Latte",
            category="Drinks",
            prep_time=5,
            allowed_extras=[by_id["e1"], by_id["e2"], by_id["e3"], by_id["e4"]],
        ),
        Product(
            id="p3",
            name="Butter Croissant",
            description="Crispy and tender puff pastry.",
            price=Decimal("2.00"),
            image_url="https://placehold.co/600x400/E8B478/FFF?text=Croissant",
            category="Pastry",
            prep_time=1,
        ),
        Product(
            id="p4",
            name="Ham and Cheese Sandwich",
            description="Classic toasted sandwich.",
            price=Decimal("4.50"),
            image_url="https://placehold.co/600x400/F0A868/FFF?text=Sandwich",
            category="Food",
            prep_time=8,
            allowed_extras=[by_id["e5"], by_id["e6"]],
        ),
        Product(
            id="p5",
            name="Orange Juice",
            description="Freshly squeezed, 100% natural.",
            price=Decimal("3.00"),
            image_url="https://placehold.co/600x400/FFA500/FFF?text=Juice",
            category="Drinks",
            prep_time=4,
            available=False,
        ),
    ]


MOCK_USERS = [
    ("u1", "client@mail.com", "123", "Juan Client", Role.CLIENT),
    ("u2", "staff@mail.com", "123", "Ana Staff", Role.STAFF),
    ("u3", "admin@mail.com", "123", "Manager Admin", Role.ADMIN),
]


def load_mock_data(db):
    """Fill an empty database with the static menu and the three demo accounts."""
    db.extras = [Extra(id=e.id, name=e.name, price=e.price) for e in MOCK_EXTRAS]
    db.products = _mock_products(db.extras)
    db.users = [
        User(id=uid, email=email, password=password, name=name, role=role)
        for uid, email, password, name, role in MOCK_USERS
    ]

    # Generated ids continue after the seeded ones
    db.ids.skip_past("e", len(db.extras))
    db.ids.skip_past("p", len(db.products))
    db.ids.skip_past("u", len(db.users))
    return db

def test_create_and_edit_product(client, admin_headers):
    resp = client.post("/products", json={
        "name": "Muffin", "price": "2.75", "category": "Pastry", "prep_time": 2, "extra_ids": ["e4"],
    }, headers=admin_headers)
    assert resp.status_code == 201
    product = resp.json()
    assert product["price"] == 2.75
    assert [e["id"] for e in product["allowed_extras"]] == ["e4"]

    listing = client.get("/products", headers=admin_headers).json()
    assert listing["items"][0]["id"] == product["id"]
    assert listing["total"] == 6

    resp = client.patch(f"/products/{product['id']}", json={"available": False}, headers=admin_headers)
    assert resp.json()["available"] is False
    assert resp.json()["name"] == "Muffin"


def test_put_replaces_fields(client, admin_headers):
    resp = client.put("/products/p1", json={
        "name": "Ristretto", "description": "Shorter.", "price": 2.2, "category": "Drinks", "prep_time": 2,
    }, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["id"] == "p1"
    assert resp.json()["name"] == "Ristretto"
    assert resp.json()["allowed_extras"] == []


def test_invalid_product_payload(client, admin_headers):
    resp = client.post("/products", json={
        "name": "Bad", "price": -1, "category": "Food", "prep_time": 0,
    }, headers=admin_headers)
    assert resp.status_code == 422


def test_unknown_product(client, admin_headers):
    assert client.get("/products/p404", headers=admin_headers).status_code == 404


def test_products_admin_only(client, client_headers):
    assert client.get("/products", headers=client_headers).status_code == 403


def test_dashboard(client, admin_headers, client_headers, staff_headers):
    client.post("/cart/add", json={"product_id": "p4", "qty": 2}, headers=client_headers)
    order = client.post("/orders", headers=client_headers).json()["order"]
    client.post(f"/orders/{order['id']}/complete", headers=staff_headers)

    stats = client.get("/admin/dashboard", headers=admin_headers).json()
    recent = stats.pop("recent_orders")
    assert stats == {"total_sales": 9.0, "order_count": 1, "completed_count": 1, "pending_count": 0}
    assert [o["receipt_number"] for o in recent] == [order["receipt_number"]]
    assert recent[0]["customer_name"] == "Juan Client"
    assert recent[0]["status"] == "completed"
    assert recent[0]["total_amount"] == 9.0


def test_users_and_logs(client, admin_headers):
    users = client.get("/users", params={"role": "staff"}, headers=admin_headers).json()
    assert [u["email"] for u in users["items"]] == ["staff@mail.com"]

    client.post("/login", json={"email": "client@mail.com", "password": "wrong"})
    logs = client.get("/logs", params={"action": "login", "status": "fail"}, headers=admin_headers).json()
    assert logs["total"] == 1
    assert logs["items"][0]["meta"] == {"email": "client@mail.com"}


def test_put_with_empty_image_keeps_current_image(client, admin_headers):
    before = client.get("/products/p1", headers=admin_headers).json()["image_url"]

    resp = client.put("/products/p1", json={
        "name": "Espresso", "price": 2.5, "category": "Drinks", "prep_time": 3, "image_url": "",
    }, headers=admin_headers)

    assert resp.status_code == 200
    assert resp.json()["image_url"] == before


def test_put_with_new_image_replaces_it(client, admin_headers):
    resp = client.put("/products/p1", json={
        "name": "Espresso", "price": 2.5, "category": "Drinks", "prep_time": 3,
        "image_url": "https://img.mail.com/espresso.png",
    }, headers=admin_headers)
    assert resp.json()["image_url"] == "https://img.mail.com/espresso.png"


def test_dashboard_lists_recent_orders_of_all_customers(client, admin_headers, client_headers):
    other = client.post("/register", json={"email": "rosa@mail.com", "password": "pw", "name": "Rosa"})
    other_headers = {"Authorization": f"Bearer {other.json()['access_token']}"}

    client.post("/cart/add", json={"product_id": "p1"}, headers=client_headers)
    first = client.post("/orders", headers=client_headers).json()["order"]
    client.post("/cart/add", json={"product_id": "p3"}, headers=other_headers)
    second = client.post("/orders", headers=other_headers).json()["order"]

    recent = client.get("/admin/dashboard", headers=admin_headers).json()["recent_orders"]

    assert [o["id"] for o in recent] == [second["id"], first["id"]]
    assert [o["customer_name"] for o in recent] == ["Rosa", "Juan Client"]


def test_dashboard_recent_orders_capped(client, admin_headers, client_headers):
    for _ in range(22):
        client.post("/cart/add", json={"product_id": "p1"}, headers=client_headers)
        client.post("/orders", headers=client_headers)

    stats = client.get("/admin/dashboard", headers=admin_headers).json()
    assert stats["order_count"] == 22
    assert len(stats["recent_orders"]) == 20
    assert stats["recent_orders"][0]["receipt_number"] == "000022"

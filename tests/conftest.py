from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from micafe.database import Database
from micafe.main import create_app
from micafe.populate_db import load_mock_data
from micafe.utils.ids import IdGenerator, ReceiptGenerator


class TickingClock:
    """Each call returns a time one minute after the previous one."""

    def __init__(self, start=datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self):
        self.now += timedelta(minutes=1)
        return self.now


@pytest.fixture
def db():
    database = Database(ids=IdGenerator(), receipts=ReceiptGenerator(start=1, digits=6), clock=TickingClock())
    return load_mock_data(database)


@pytest.fixture
def client(db):
    return TestClient(create_app(db))


def _login(client, email):
    resp = client.post("/login", json={"email": email, "password": "123"})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest.fixture
def client_headers(client):
    return _login(client, "client@mail.com")


@pytest.fixture
def staff_headers(client):
    return _login(client, "staff@mail.com")


@pytest.fixture
def admin_headers(client):
    return _login(client, "admin@mail.com")

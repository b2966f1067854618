# tests/conftest.py
import os

# musi byc ustawione przed importem app.*
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"

import fakeredis
import pytest
from fastapi import Depends
from fastapi.testclient import TestClient

from app.api.deps import get_caller, get_order_client, get_product_client, get_rate_limiter
from app.data.database import Base, SessionLocal, engine
from app.main import app
from app.services.rate_limit_service import RateLimiter
from app.utils.rest_client import RemoteServiceError


class FakeProductClient:
    def __init__(self, products=None):
        self.products = products or {}
        self.calls = []

    def get_all_products(self):
        self.calls.append(("get_all_products",))
        return list(self.products.values())

    def get_product_by_id(self, product_id):
        self.calls.append(("get_product_by_id", product_id))
        if product_id not in self.products:
            raise RemoteServiceError({"message": "Product not found"}, status_code=404)
        return self.products[product_id]


class FakeOrderClient:
    def __init__(self):
        self.calls = []
        self.fail_with = None

    def _record(self, *call):
        self.calls.append(call)
        if self.fail_with is not None:
            raise self.fail_with

    def get_user_orders(self, user_id):
        self._record("get_user_orders", user_id)
        return [{"id": "o1", "user_id": user_id}]

    def get_order(self, order_id):
        self._record("get_order", order_id)
        return {"id": order_id}

    def create_order(self, payload):
        self._record("create_order", payload)
        return {"id": "o1", "status": "pending", **payload}

    def delete_order(self, order_id):
        self._record("delete_order", order_id)
        return {"deleted": order_id}

    def delete_user_orders(self, user_id):
        self._record("delete_user_orders", user_id)
        return {"deleted": 0}


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def products():
    return FakeProductClient(
        {
            "p1": {"id": "p1", "name": "Mug", "price": 10},
            "p2": {"id": "p2", "name": "Pen", "price": 3},
        }
    )


@pytest.fixture
def orders():
    return FakeOrderClient()


@pytest.fixture
def limiter():
    return RateLimiter(client=fakeredis.FakeRedis(decode_responses=True))


@pytest.fixture
def client(products, orders, limiter):
    # fake klienci dalej wymagaja tokena jak prawdziwe dependency
    def product_client_override(caller=Depends(get_caller)):
        return products

    def order_client_override(caller=Depends(get_caller)):
        return orders

    app.dependency_overrides[get_product_client] = product_client_override
    app.dependency_overrides[get_order_client] = order_client_override
    app.dependency_overrides[get_rate_limiter] = lambda: limiter

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    def _register(email="alice@mail.com", password="secret123", **extra):
        body = {"name": "Alice", "email": email, "password": password, **extra}
        resp = client.post("/auth/register", json=body)
        assert resp.status_code == 201, resp.text
        data = resp.json()
        return data["user"], {"Authorization": f"Bearer {data['token']}"}

    return _register

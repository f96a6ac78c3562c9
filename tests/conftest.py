import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.models import StoreConfig
from app.store import cart_store
from app.store.store import Store, get_store


@pytest.fixture
def store():
    """Fresh store with the default milestone config (every 5th order, 10%)."""
    s = Store()
    yield s
    s.reset()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def fill_cart(store):
    """Put p1 x2 and p3 x1 (subtotal 10997) into a user's cart."""

    def _fill(user_id="user1"):
        cart_store.add_item(store, user_id, "p1", 2)
        cart_store.add_item(store, user_id, "p3", 1)

    return _fill


@pytest.fixture
def make_config():
    def _make(nth_order=5, discount_percent=10):
        return StoreConfig(nth_order=nth_order, discount_percent=discount_percent)

    return _make

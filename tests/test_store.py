from app.core.config import settings
from app.models import StoreConfig
from app.store import cart_store
from app.store.store import Store, build_store


def test_new_store_uses_defaults():
    assert Store().config == StoreConfig(nth_order=5, discount_percent=10)


def test_reset_clears_state(store, fill_cart):
    fill_cart("u1")
    store.order_count = 3

    store.reset()

    assert store.carts == {}
    assert store.orders == []
    assert store.discount_codes == []
    assert store.order_count == 0
    assert cart_store.get_cart(store, "u1")["subtotal"] == 0


def test_reset_without_config_keeps_current_config(make_config):
    s = Store(make_config(nth_order=3, discount_percent=20))

    s.reset()

    assert s.config.nth_order == 3
    assert s.config.discount_percent == 20


def test_reset_with_config_replaces_it(make_config):
    s = Store()

    s.reset(make_config(nth_order=7, discount_percent=15))

    assert s.config == StoreConfig(nth_order=7, discount_percent=15)


def test_built_store_keeps_settings_across_reset(monkeypatch):
    monkeypatch.setattr(settings, "NTH_ORDER", 4)
    monkeypatch.setattr(settings, "DISCOUNT_PERCENT", 25)
    s = build_store()

    s.reset()

    assert s.config == StoreConfig(nth_order=4, discount_percent=25)

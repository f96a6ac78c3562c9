from app.services.analytics import compute_stats, store_stats
from app.services.checkout import checkout
from app.services.discounts import DiscountLedger
from app.store import cart_store


def test_empty_store_stats(store):
    stats = store_stats(store)

    assert stats == {
        "totalItemsPurchased": 0,
        "totalRevenue": 0,
        "totalDiscountAmount": 0,
        "totalOrders": 0,
        "discountCodes": {"total": 0, "used": 0, "unused": 0, "codes": []},
    }


def test_stats_aggregate_orders_and_codes(store, fill_cart):
    for i in range(5):
        fill_cart(f"u{i}")
        checkout(store, f"u{i}")
    code = DiscountLedger(store).generate_for_current()
    fill_cart("lucky")
    checkout(store, "lucky", code.code)
    for i in range(4):
        cart_store.add_item(store, f"late{i}", "p2", 1)
        checkout(store, f"late{i}")
    DiscountLedger(store).generate_for_current()

    stats = store_stats(store)

    assert stats["totalOrders"] == 10
    assert stats["totalItemsPurchased"] == 6 * 3 + 4
    assert stats["totalRevenue"] == sum(o.total for o in store.orders)
    assert stats["totalRevenue"] == 5 * 10997 + 9897 + 4 * 7999
    assert stats["totalDiscountAmount"] == 1100
    summary = stats["discountCodes"]
    assert summary["total"] == 2
    assert summary["used"] == 1
    assert summary["unused"] == 1
    assert summary["used"] + summary["unused"] == summary["total"]
    assert [c.code for c in summary["codes"]][0] == code.code


def test_compute_stats_is_pure(store, fill_cart):
    fill_cart("u1")
    checkout(store, "u1")
    orders, codes = list(store.orders), list(store.discount_codes)

    assert compute_stats(orders, codes) == compute_stats(orders, codes)
    assert store.orders == orders


def test_store_stats_reads_codes_through_ledger(store, fill_cart, monkeypatch):
    for i in range(5):
        fill_cart(f"u{i}")
        checkout(store, f"u{i}")
    code = DiscountLedger(store).generate_for_current()

    calls = []
    original = DiscountLedger.list_all

    def spy(self):
        calls.append(self.store)
        return original(self)

    monkeypatch.setattr(DiscountLedger, "list_all", spy)
    stats = store_stats(store)

    assert calls == [store]
    listed = stats["discountCodes"]["codes"]
    assert [c.code for c in listed] == [code.code]
    # the stats hold copies, not the ledger's own records
    listed[0].status = "used"
    assert code.status == "unused"

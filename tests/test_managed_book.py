import io

from matchbook.managed_book import ManagedOrderBook
from matchbook.order import Order, Trade


def make_book():
    out = io.StringIO()
    return ManagedOrderBook(out=out), out


def test_match_prints_and_returns_trade():
    book, out = make_book()
    book.add_order(Order("ORD1", True, 101.0, 10, 1))
    trades = book.add_order(Order("ORD2", False, 100.0, 10, 2))
    assert trades == [Trade("ORD1", "ORD2", 100.0, 10)]
    assert out.getvalue() == "[MATCH] ORD1 x ORD2 @ 100 x 10\n"
    assert book.bids() == [] and book.asks() == []


def test_partial_fill_mutates_resting_order():
    buy = Order("B", True, 101.0, 10, 1)
    book, _ = make_book()
    book.add_order(buy)
    trades = book.add_order(Order("S", False, 100.0, 4, 2))
    assert book.bids() == [buy]
    assert buy.quantity + trades[0].quantity == 10
    assert buy.timestamp == 1


def test_time_priority_at_equal_price():
    book, _ = make_book()
    book.add_order(Order("LATE", True, 100.0, 5, 9))
    book.add_order(Order("EARLY", True, 100.0, 5, 3))
    assert [o.id for o in book.bids()] == ["EARLY", "LATE"]
    trades = book.add_order(Order("S", False, 100.0, 5, 10))
    assert trades[0].buy_id == "EARLY"


def test_cancel_known_and_unknown():
    book, out = make_book()
    book.add_order(Order("ORD3", True, 100.5, 5, 3))
    assert book.cancel_order("ORD3") is True
    assert out.getvalue() == "[CANCEL] Order ORD3 marked as canceled.\n"
    assert book.cancel_order("NOPE") is False
    assert book.bids() == []


def test_canceled_order_is_skipped_in_matching():
    book, _ = make_book()
    book.add_order(Order("GONE", True, 102.0, 5, 1))
    book.add_order(Order("KEEP", True, 101.0, 5, 2))
    book.cancel_order("GONE")
    trades = book.add_order(Order("S", False, 100.0, 5, 3))
    assert [t.buy_id for t in trades] == ["KEEP"]


def test_modify_replaces_and_keeps_timestamp():
    book, out = make_book()
    book.add_order(Order("ORD1", True, 101.0, 10, 1))
    assert book.modify_order("ORD1", 99.0, 8) is True
    (order,) = book.bids()
    assert (order.price, order.quantity, order.timestamp) == (99.0, 8, 1)
    assert "[MODIFY] Canceling and replacing Order ORD1\n" in out.getvalue()


def test_modify_can_trigger_match():
    book, _ = make_book()
    book.add_order(Order("S", False, 101.5, 5, 1))
    book.add_order(Order("B", True, 100.0, 5, 2))
    assert book.modify_order("B", 101.5, 5) is True
    assert book.bids() == [] and book.asks() == []


def test_modify_filled_order_fails():
    book, out = make_book()
    book.add_order(Order("ORD5", True, 102.0, 6, 5))
    book.add_order(Order("S", False, 100.0, 6, 6))
    assert book.modify_order("ORD5", 101.0, 6) is False
    assert out.getvalue().endswith(
        "[MODIFY-FAIL] Order ORD5 already filled or canceled.\n"
    )


def test_modify_canceled_or_unknown_fails():
    book, _ = make_book()
    book.add_order(Order("X", False, 103.0, 5, 1))
    book.cancel_order("X")
    assert book.modify_order("X", 101.5, 5) is False
    assert book.modify_order("MISSING", 1.0, 1) is False
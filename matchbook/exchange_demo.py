"""A scripted session on a three-symbol exchange."""

from __future__ import annotations

import argparse
import itertools
import sys
from typing import List, Optional, TextIO

from matchbook.exchange import Exchange
from matchbook.order import Order

_SCRIPT = [
    ("A1", "AAPL", True, 150.0, 10),
    ("A2", "AAPL", False, 149.0, 10),
    ("A3", "AAPL", True, 151.0, 5),
    ("A4", "AAPL", False, 150.0, 3),
    ("A5", "AAPL", False, 151.0, 4),
    ("T1", "TSLA", True, 700.0, 5),
    ("T2", "TSLA", False, 699.0, 5),
    ("T3", "TSLA", False, 702.0, 6),
    ("T4", "TSLA", True, 703.0, 3),
    ("G1", "GOOG", True, 2800.0, 8),
    ("G2", "GOOG", False, 2795.0, 6),
]


def run(out: Optional[TextIO] = None) -> Exchange:
    """Play the session, print each book, and return the exchange."""
    exchange = Exchange(out)
    clock = itertools.count(1)
    for order_id, symbol, is_buy, price, qty in _SCRIPT:
        exchange.add_order(Order(order_id, is_buy, price, qty, next(clock), symbol))

    exchange.cancel_order("AAPL", "A1")
    exchange.modify_order("TSLA", "T1", 695.0, 5)
    exchange.cancel_order("GOOG", "G2")
    exchange.modify_order("GOOG", "G1", 2790.0, 10)

    for symbol in ("AAPL", "TSLA", "GOOG"):
        exchange.print_order_book(symbol)
    return exchange


def main(argv: Optional[List[str]] = None) -> int:
    """Run the scripted session on standard output."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)
    run(sys.stdout)
    return 0
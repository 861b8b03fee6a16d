"""A scripted session of adds, cancels and modifies on one order book."""

from __future__ import annotations

import argparse
import itertools
import sys
from typing import List, Optional, TextIO

from matchbook.managed_book import ManagedOrderBook
from matchbook.order import Order

_SCRIPT = [
    ("ORD1", True, 101.0, 10),
    ("ORD2", False, 100.0, 10),
    ("ORD3", True, 100.5, 5),
    ("ORD4", False, 99.5, 8),
    ("ORD5", True, 102.0, 6),
    ("ORD6", False, 103.0, 5),
]


def run(out: Optional[TextIO] = None) -> ManagedOrderBook:
    """Play the session and return the book in its final state."""
    book = ManagedOrderBook(out)
    clock = itertools.count(1)
    for order_id, is_buy, price, qty in _SCRIPT:
        book.add_order(Order(order_id, is_buy, price, qty, next(clock)))

    book.cancel_order("ORD3")
    book.modify_order("ORD1", 99.0, 8)
    book.modify_order("ORD2", 98.5, 5)
    book.cancel_order("ORD5")
    book.modify_order("ORD6", 101.5, 5)
    return book


def main(argv: Optional[List[str]] = None) -> int:
    """Run the scripted session on standard output."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)
    run(sys.stdout)
    return 0
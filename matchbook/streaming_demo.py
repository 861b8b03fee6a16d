"""Orders streamed through a queue into a matching order book."""

from __future__ import annotations

import argparse
import itertools
import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, List, Optional, TextIO

from matchbook.order import Order, Trade
from matchbook.simple_book import SimpleOrderBook
from matchbook.tsqueue import ThreadSafeQueue

_ORDERS_PER_SIDE = 5


def _emit(out: Optional[TextIO], line: str) -> None:
    stream = sys.stdout if out is None else out
    stream.write(line + "\n")
    stream.flush()


def producer(
    queue: ThreadSafeQueue[Order],
    clock: Iterator[int],
    out: Optional[TextIO] = None,
    lock: Optional[threading.Lock] = None,
    delay: float = 0.1,
) -> None:
    """Submit five falling buy orders, then five rising sell orders."""
    lock = lock if lock is not None else threading.Lock()
    buys = (
        Order(f"BUY{i}", True, 101.0 - i * 0.5, 10) for i in range(_ORDERS_PER_SIDE)
    )
    sells = (
        Order(f"SELL{i}", False, 100.0 + i * 0.5, 10) for i in range(_ORDERS_PER_SIDE)
    )
    for order in itertools.chain(buys, sells):
        order.timestamp = next(clock)
        queue.push(order)
        with lock:
            _emit(out, f"[Producer] {order.id} submitted.")
        time.sleep(delay)


def consumer(
    queue: ThreadSafeQueue[Order],
    book: SimpleOrderBook,
    count: int,
    out: Optional[TextIO] = None,
    lock: Optional[threading.Lock] = None,
) -> List[Trade]:
    """Feed ``count`` orders from the queue into ``book``; return the trades."""
    lock = lock if lock is not None else threading.Lock()
    trades: List[Trade] = []
    for _ in range(count):
        order = queue.pop()
        with lock:
            _emit(out, f"[Consumer] Processing {order.id}")
            trades.extend(book.add_order(order))
    return trades


def run(out: Optional[TextIO] = None, delay: float = 0.1) -> List[Trade]:
    """Run one producer and one matching consumer; return the trades made."""
    queue: ThreadSafeQueue[Order] = ThreadSafeQueue()
    book = SimpleOrderBook(out)
    clock = itertools.count(1)
    lock = threading.Lock()
    with ThreadPoolExecutor(max_workers=2) as pool:
        produced = pool.submit(producer, queue, clock, out, lock, delay)
        consumed = pool.submit(
            consumer, queue, book, 2 * _ORDERS_PER_SIDE, out, lock
        )
        produced.result()
        return consumed.result()


def main(argv: Optional[List[str]] = None) -> int:
    """Run the streaming demonstration on standard output."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--no-delay", action="store_true", help="skip simulated delays")
    args = parser.parse_args(argv)
    run(sys.stdout, 0.0 if args.no_delay else 0.1)
    return 0
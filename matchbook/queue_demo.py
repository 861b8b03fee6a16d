"""Producer and consumer threads passing orders through a shared queue."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, TextIO

from matchbook.order import Order
from matchbook.tsqueue import ThreadSafeQueue

_BASIC_COUNT = 5


def _emit(out: Optional[TextIO], line: str) -> None:
    stream = sys.stdout if out is None else out
    stream.write(line + "\n")
    stream.flush()


def producer(
    queue: ThreadSafeQueue[Order],
    out: Optional[TextIO] = None,
    delay: float = 0.5,
) -> None:
    """Push five orders, pausing ``delay`` seconds after each."""
    for i in range(_BASIC_COUNT):
        order = Order(f"ORD{i}", i % 2 == 0, 100.0 + i, 10)
        _emit(out, f"[Producer] New Order: {order.id}")
        queue.push(order)
        time.sleep(delay)


def consumer(
    queue: ThreadSafeQueue[Order],
    out: Optional[TextIO] = None,
    delay: float = 0.3,
) -> List[Order]:
    """Take five orders, spending ``delay`` seconds on each; return them."""
    taken: List[Order] = []
    for _ in range(_BASIC_COUNT):
        order = queue.pop()
        _emit(out, f"[Consumer] Processing Order: {order.id}")
        taken.append(order)
        time.sleep(delay)
    return taken


def run_basic(
    out: Optional[TextIO] = None,
    produce_delay: float = 0.5,
    consume_delay: float = 0.3,
) -> List[Order]:
    """Run one producer and one consumer; return the orders consumed."""
    queue: ThreadSafeQueue[Order] = ThreadSafeQueue()
    with ThreadPoolExecutor(max_workers=2) as pool:
        produced = pool.submit(producer, queue, out, produce_delay)
        consumed = pool.submit(consumer, queue, out, consume_delay)
        produced.result()
        taken = consumed.result()
    _emit(out, "✅ All orders processed.")
    return taken


def producer_batch(
    queue: ThreadSafeQueue[Order],
    orders: Sequence[Order],
    start: int,
    end: int,
    out: Optional[TextIO] = None,
    lock: Optional[threading.Lock] = None,
    delay: float = 0.001,
) -> None:
    """Push ``orders[start:end]``, pausing ``delay`` seconds before each."""
    lock = lock if lock is not None else threading.Lock()
    for order in orders[start:end]:
        time.sleep(delay)
        queue.push(order)
        with lock:
            _emit(out, f"[Producer {threading.get_ident()}] Pushed {order.id}")


def consumer_loop(
    queue: ThreadSafeQueue[Order],
    expected: int,
    out: Optional[TextIO] = None,
    lock: Optional[threading.Lock] = None,
    delay: float = 0.002,
) -> List[Order]:
    """Take ``expected`` orders, pausing ``delay`` seconds after each."""
    lock = lock if lock is not None else threading.Lock()
    taken: List[Order] = []
    for _ in range(expected):
        order = queue.pop()
        with lock:
            _emit(out, f"[Consumer {threading.get_ident()}] Got {order.id}")
        taken.append(order)
        time.sleep(delay)
    return taken


def run_multi(
    out: Optional[TextIO] = None,
    total: int = 1000,
    num_producers: int = 4,
    num_consumers: int = 2,
    produce_delay: float = 0.001,
    consume_delay: float = 0.002,
) -> List[Order]:
    """Share ``total`` orders among producers and consumers; return those consumed.

    The last producer takes any remainder of the split. Each consumer takes
    ``total // num_consumers`` orders.
    """
    if num_producers < 1 or num_consumers < 1:
        raise ValueError("need at least one producer and one consumer")
    if total < 0:
        raise ValueError("total must not be negative")

    queue: ThreadSafeQueue[Order] = ThreadSafeQueue()
    orders = [Order(f"ORD{i}", i % 2 == 0, 100.0 + i, 10) for i in range(total)]
    lock = threading.Lock()
    per_thread = total // num_producers
    per_consumer = total // num_consumers

    with ThreadPoolExecutor(max_workers=num_producers + num_consumers) as pool:
        producers = []
        for i in range(num_producers):
            start = i * per_thread
            end = total if i == num_producers - 1 else start + per_thread
            producers.append(
                pool.submit(
                    producer_batch, queue, orders, start, end, out, lock, produce_delay
                )
            )
        consumers = [
            pool.submit(consumer_loop, queue, per_consumer, out, lock, consume_delay)
            for _ in range(num_consumers)
        ]
        for future in producers:
            future.result()
        taken = [order for future in consumers for order in future.result()]

    _emit(out, "\n✅ All orders processed.")
    return taken


def main(argv: Optional[List[str]] = None) -> int:
    """Run the single-pair or the many-thread queue demonstration."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("mode", nargs="?", choices=("basic", "multi"), default="basic")
    parser.add_argument("--no-delay", action="store_true", help="skip simulated delays")
    parser.add_argument("--orders", type=int, default=1000)
    parser.add_argument("--producers", type=int, default=4)
    parser.add_argument("--consumers", type=int, default=2)
    args = parser.parse_args(argv)

    if args.mode == "basic":
        if args.no_delay:
            run_basic(sys.stdout, 0.0, 0.0)
        else:
            run_basic(sys.stdout)
    else:
        delays = (0.0, 0.0) if args.no_delay else (0.001, 0.002)
        try:
            run_multi(
                sys.stdout, args.orders, args.producers, args.consumers, *delays
            )
        except ValueError as exc:
            parser.error(str(exc))
    return 0
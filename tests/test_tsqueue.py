import queue
import threading
import time

import pytest

from matchbook.tsqueue import ThreadSafeQueue


def test_fifo_order():
    q = ThreadSafeQueue()
    for item in ("ORD0", "ORD1", "ORD2"):
        q.push(item)
    assert [q.pop(), q.pop(), q.pop()] == ["ORD0", "ORD1", "ORD2"]


def test_len_tracks_push_and_pop():
    q = ThreadSafeQueue()
    assert len(q) == 0
    q.push(1)
    q.push(2)
    assert len(q) == 2
    q.pop()
    assert len(q) == 1


def test_pop_timeout_on_empty_raises():
    q = ThreadSafeQueue()
    with pytest.raises(queue.Empty):
        q.pop(timeout=0.01)


def test_pop_waits_for_producer():
    q = ThreadSafeQueue()

    def produce_later():
        time.sleep(0.05)
        q.push("late")

    worker = threading.Thread(target=produce_later)
    started = time.monotonic()
    worker.start()
    value = q.pop(timeout=5)
    waited = time.monotonic() - started
    worker.join(timeout=5)
    assert value == "late"
    assert waited >= 0.04
    assert len(q) == 0


def test_many_producers_and_consumers_lose_nothing():
    q = ThreadSafeQueue()
    items = list(range(200))
    got = []
    got_lock = threading.Lock()

    def produce(chunk):
        for value in chunk:
            q.push(value)

    def consume(count):
        for _ in range(count):
            value = q.pop(timeout=5)
            with got_lock:
                got.append(value)

    threads = [threading.Thread(target=produce, args=(items[i::4],)) for i in range(4)]
    threads += [threading.Thread(target=consume, args=(100,)) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)
    assert sorted(got) == items
    assert len(q) == 0
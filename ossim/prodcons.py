"""The producer-consumer problem over a bounded buffer guarded by semaphores."""

from __future__ import annotations

import itertools
import random
import sys
import threading
import time
from collections import deque
from typing import Any, Callable, Iterable, TextIO

BUFFER_SIZE = 5
ITEM_LIMIT = 100


class BoundedBuffer:
    """A fixed-capacity FIFO buffer; put blocks when full, get blocks when empty."""

    def __init__(self, capacity: int = BUFFER_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._empty = threading.Semaphore(capacity)
        self._full = threading.Semaphore(0)
        self._mutex = threading.Lock()

    def __len__(self) -> int:
        with self._mutex:
            return len(self._items)

    def put(self, item: Any) -> None:
        """Add an item, waiting for a free slot."""
        self._insert(item, None)

    def get(self) -> Any:
        """Remove and return the oldest item, waiting for one to arrive."""
        return self._remove(None)

    def _insert(self, item: Any, report: Callable[[Any], None] | None) -> None:
        self._empty.acquire()
        with self._mutex:
            self._items.append(item)
            if report is not None:
                report(item)
        self._full.release()

    def _remove(self, report: Callable[[Any], None] | None) -> Any:
        self._full.acquire()
        with self._mutex:
            item = self._items.popleft()
            if report is not None:
                report(item)
        self._empty.release()
        return item


def _rounds(count: int | None) -> Iterable[int]:
    return itertools.count() if count is None else range(count)


def _pause(rng: random.Random, max_sleep: int) -> None:
    if max_sleep > 0:
        time.sleep(rng.randrange(max_sleep))


def _reporter(stream: TextIO, verb: str) -> Callable[[Any], None]:
    def report(item: Any) -> None:
        stream.write(f"{verb}: {item}\n")
        stream.flush()

    return report


def producer(
    buffer: BoundedBuffer,
    count: int | None = None,
    rng: random.Random | None = None,
    max_sleep: int = 20,
    out: TextIO | None = None,
) -> list[int]:
    """Put ``count`` random items (forever if None) into the buffer; return them."""
    rng = random.Random() if rng is None else rng
    report = _reporter(sys.stdout if out is None else out, "Produced")
    produced = []
    for _ in _rounds(count):
        item = rng.randrange(ITEM_LIMIT)
        buffer._insert(item, report)
        produced.append(item)
        _pause(rng, max_sleep)
    return produced


def consumer(
    buffer: BoundedBuffer,
    count: int | None = None,
    rng: random.Random | None = None,
    max_sleep: int = 2,
    out: TextIO | None = None,
) -> list[int]:
    """Take ``count`` items (forever if None) from the buffer; return them."""
    rng = random.Random() if rng is None else rng
    report = _reporter(sys.stdout if out is None else out, "Consumed")
    consumed = []
    for _ in _rounds(count):
        consumed.append(buffer._remove(report))
        _pause(rng, max_sleep)
    return consumed


def run(
    count: int | None = None,
    seed: int | None = None,
    max_producer_sleep: int = 20,
    max_consumer_sleep: int = 2,
    out: TextIO | None = None,
) -> tuple[list[int], list[int]]:
    """Run one producer and one consumer thread; return (produced, consumed)."""
    stream = sys.stdout if out is None else out
    buffer = BoundedBuffer()
    seeder = random.Random(seed)
    producer_rng = random.Random(seeder.random())
    consumer_rng = random.Random(seeder.random())
    results: dict[str, list[int]] = {}

    def produce() -> None:
        results["produced"] = producer(buffer, count, producer_rng, max_producer_sleep, stream)

    def consume() -> None:
        results["consumed"] = consumer(buffer, count, consumer_rng, max_consumer_sleep, stream)

    threads = [
        threading.Thread(target=produce, name="producer", daemon=True),
        threading.Thread(target=consume, name="consumer", daemon=True),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return results["produced"], results["consumed"]
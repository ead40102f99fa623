import io
import random
import threading

import pytest

from ossim.prodcons import BUFFER_SIZE, BoundedBuffer, consumer, producer, run


def test_buffer_is_fifo():
    buffer = BoundedBuffer()
    for item in [3, 1, 4]:
        buffer.put(item)
    assert [buffer.get() for _ in range(3)] == [3, 1, 4]


def test_buffer_length():
    buffer = BoundedBuffer()
    buffer.put("a")
    buffer.put("b")
    assert len(buffer) == 2
    buffer.get()
    assert len(buffer) == 1


def test_put_blocks_when_full():
    buffer = BoundedBuffer()
    for item in range(BUFFER_SIZE):
        buffer.put(item)
    worker = threading.Thread(target=buffer.put, args=("late",), daemon=True)
    worker.start()
    worker.join(timeout=0.2)
    assert worker.is_alive()
    assert buffer.get() == 0
    worker.join(timeout=5)
    assert not worker.is_alive()
    assert len(buffer) == BUFFER_SIZE


def test_get_blocks_when_empty():
    buffer = BoundedBuffer(capacity=1)
    got = []
    worker = threading.Thread(target=lambda: got.append(buffer.get()), daemon=True)
    worker.start()
    worker.join(timeout=0.2)
    assert worker.is_alive()
    buffer.put("item")
    worker.join(timeout=5)
    assert got == ["item"]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        BoundedBuffer(capacity=0)


def test_producer_then_consumer_same_items():
    buffer = BoundedBuffer(capacity=10)
    out = io.StringIO()
    produced = producer(buffer, 4, random.Random(1), 0, out)
    consumed = consumer(buffer, 4, random.Random(2), 0, out)
    assert consumed == produced
    assert all(0 <= item < 100 for item in produced)
    lines = out.getvalue().splitlines()
    assert lines == [f"Produced: {i}" for i in produced] + [f"Consumed: {i}" for i in consumed]


def test_run_consumes_everything_produced():
    out = io.StringIO()
    produced, consumed = run(count=20, seed=7, max_producer_sleep=0, max_consumer_sleep=0, out=out)
    assert consumed == produced
    assert len(produced) == 20


def test_run_is_reproducible_with_seed():
    first, _ = run(count=10, seed=3, max_producer_sleep=0, max_consumer_sleep=0, out=io.StringIO())
    second, _ = run(count=10, seed=3, max_producer_sleep=0, max_consumer_sleep=0, out=io.StringIO())
    assert first == second


def test_each_item_produced_before_consumed():
    out = io.StringIO()
    produced, _ = run(count=15, seed=5, max_producer_sleep=0, max_consumer_sleep=0, out=out)
    lines = out.getvalue().splitlines()
    produced_at = [n for n, line in enumerate(lines) if line.startswith("Produced: ")]
    consumed_at = [n for n, line in enumerate(lines) if line.startswith("Consumed: ")]
    assert len(produced_at) == len(consumed_at) == len(produced)
    assert all(p < c for p, c in zip(produced_at, consumed_at))
    # the buffer never holds more than its capacity
    assert all(
        sum(1 for p in produced_at if p < c) - n <= BUFFER_SIZE
        for n, c in enumerate(consumed_at)
    )
"""Passing a text message between processes through a named shared-memory segment."""

from __future__ import annotations

import os
from multiprocessing import resource_tracker
from multiprocessing.shared_memory import SharedMemory
from typing import Sequence

DEFAULT_NAME = "shmfile"
DEFAULT_SIZE = 1024

_GREETING = "Hello, shared memory!\n"


def build_message(args: Sequence[str]) -> str:
    """Compose the text the writer stores, from command-line words."""
    if not args:
        return _GREETING + "No messages were passed from CLI\n"
    return _GREETING + "Here's the message from the CLI:\n" + " ".join(args) + "\n"


def _untrack(segment: SharedMemory) -> None:
    # The segment must outlive this process, so keep the resource tracker
    # from removing it when the interpreter exits.
    if os.name == "posix":
        resource_tracker.unregister("/" + segment.name, "shared_memory")


def _encode(message: str) -> bytes:
    return message.encode("utf-8") + b"\0"


def write_message(message: str, name: str = DEFAULT_NAME, size: int = DEFAULT_SIZE) -> None:
    """Store ``message`` in the segment called ``name``, creating it if needed."""
    if size <= 0:
        raise ValueError("segment size must be positive")
    data = _encode(message)
    if len(data) > size:
        raise ValueError(f"message of {len(data)} bytes does not fit in {size} bytes")
    try:
        segment = SharedMemory(name=name, create=True, size=size)
    except FileExistsError:
        segment = SharedMemory(name=name)
    try:
        if len(data) > segment.size:
            raise ValueError(
                f"message of {len(data)} bytes does not fit in {segment.size} bytes"
            )
        segment.buf[: len(data)] = data
    finally:
        _untrack(segment)
        segment.close()


def read_message(name: str = DEFAULT_NAME, unlink: bool = True) -> str:
    """Return the message held in segment ``name``; remove the segment if ``unlink``.

    Raises FileNotFoundError if no such segment exists.
    """
    segment = SharedMemory(name=name)
    try:
        raw = bytes(segment.buf)
    finally:
        segment.close()
        if unlink:
            segment.unlink()
        else:
            _untrack(segment)
    text, _, _ = raw.partition(b"\0")
    return text.decode("utf-8", errors="replace")
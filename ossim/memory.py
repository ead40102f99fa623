"""Contiguous memory allocation strategies: first fit, best fit and worst fit."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Sequence

# Best fit only looks at blocks whose remaining size is below this value.
_BEST_FIT_LIMIT = 9999

_RULE = "-" * 65
_HEADER = "| Process No. | Process Size | Block Size | Remaining Block Size |"


@dataclass
class Block:
    """A memory block and the space still free in it."""

    size: int
    remaining: int = field(init=False)

    def __post_init__(self) -> None:
        self.remaining = self.size

    def fits(self, amount: int) -> bool:
        return self.remaining >= amount

    def take(self, amount: int) -> int:
        """Carve ``amount`` out of the block and return what is left."""
        self.remaining -= amount
        return self.remaining


@dataclass(frozen=True)
class Allocation:
    """Where one process was placed; the block fields are None if it did not fit."""

    process_size: int
    block_size: int | None = None
    remaining_block_size: int | None = None

    @property
    def allocated(self) -> bool:
        return self.block_size is not None


_Chooser = Callable[[Sequence[Block], int], "Block | None"]


def _allocate(
    block_sizes: Iterable[int], process_sizes: Iterable[int], choose: _Chooser
) -> list[Allocation]:
    blocks = [Block(size) for size in block_sizes]
    allocations = []
    for size in process_sizes:
        block = choose(blocks, size)
        if block is None:
            allocations.append(Allocation(size))
        else:
            allocations.append(Allocation(size, block.size, block.take(size)))
    return allocations


def _first(blocks: Sequence[Block], size: int) -> Block | None:
    return next((b for b in blocks if b.fits(size)), None)


def _best(blocks: Sequence[Block], size: int) -> Block | None:
    candidates = [b for b in blocks if b.fits(size) and b.remaining < _BEST_FIT_LIMIT]
    return min(candidates, key=lambda b: b.remaining, default=None)


def _worst(blocks: Sequence[Block], size: int) -> Block | None:
    candidates = [b for b in blocks if b.fits(size) and b.remaining > 0]
    return max(candidates, key=lambda b: b.remaining, default=None)


def first_fit(block_sizes: Iterable[int], process_sizes: Iterable[int]) -> list[Allocation]:
    """Place each process in the first block with enough room."""
    return _allocate(block_sizes, process_sizes, _first)


def best_fit(block_sizes: Iterable[int], process_sizes: Iterable[int]) -> list[Allocation]:
    """Place each process in the block with the least room that still fits it."""
    return _allocate(block_sizes, process_sizes, _best)


def worst_fit(block_sizes: Iterable[int], process_sizes: Iterable[int]) -> list[Allocation]:
    """Place each process in the block with the most room."""
    return _allocate(block_sizes, process_sizes, _worst)


def format_allocations(title: str, allocations: Sequence[Allocation]) -> str:
    """Render allocations as a table headed by ``title``, e.g. "Best-Fit"."""
    lines = [f"{title} Memory Allocation Results:", _RULE, _HEADER, _RULE]
    for number, alloc in enumerate(allocations, start=1):
        if alloc.allocated:
            block, remaining = f"{alloc.block_size:<10}", f"{alloc.remaining_block_size:<19}"
        else:
            block, remaining = f"{'N/A':<10}", f"{'N/A':<19}"
        lines.append(f"| {number:<11} | {alloc.process_size:<12} | {block} | {remaining} |")
    lines.append(_RULE)
    return "\n".join(lines) + "\n"
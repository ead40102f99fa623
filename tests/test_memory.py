import pytest

from ossim.memory import (
    Allocation,
    Block,
    best_fit,
    first_fit,
    format_allocations,
    worst_fit,
)

BLOCKS = [100, 500, 200, 300, 600]
PROCESSES = [212, 417, 112, 426]


def _rows(text):
    lines = text.splitlines()
    return [
        [cell.strip() for cell in line.strip("|").split("|")]
        for line in lines[4:-1]
    ]


def test_block_take_reduces_remaining():
    block = Block(50)
    assert block.remaining == 50
    assert block.take(20) == 30
    assert block.fits(30)
    assert not block.fits(31)


def test_first_fit_chooses_first_block_that_fits():
    result = first_fit(BLOCKS, PROCESSES)
    assert [a.block_size for a in result] == [500, 600, 500, None]
    assert result[0].remaining_block_size == 500 - 212
    assert result[2].remaining_block_size == 500 - 212 - 112


def test_best_fit_chooses_tightest_block():
    result = best_fit(BLOCKS, PROCESSES)
    assert [a.block_size for a in result] == [300, 500, 200, 600]
    assert all(a.allocated for a in result)


def test_worst_fit_chooses_largest_block():
    result = worst_fit(BLOCKS, PROCESSES)
    assert [a.block_size for a in result] == [600, 500, 600, None]
    assert result[2].remaining_block_size == 600 - 212 - 112


@pytest.mark.parametrize("strategy", [first_fit, best_fit, worst_fit])
def test_unallocated_has_no_block(strategy):
    result = strategy([10], [20])
    assert result == [Allocation(20)]
    assert not result[0].allocated


@pytest.mark.parametrize("strategy", [first_fit, best_fit, worst_fit])
def test_remaining_never_negative(strategy):
    result = strategy(BLOCKS, PROCESSES + [50, 50, 50, 300])
    for alloc in result:
        if alloc.allocated:
            assert 0 <= alloc.remaining_block_size <= alloc.block_size - alloc.process_size


def test_best_fit_ignores_blocks_at_or_above_limit():
    assert best_fit([10000], [5]) == [Allocation(5)]
    assert first_fit([10000], [5])[0].block_size == 10000


def test_worst_fit_ignores_empty_block_for_zero_size():
    assert worst_fit([0], [0]) == [Allocation(0)]
    assert first_fit([0], [0])[0].remaining_block_size == 0


def test_best_fit_tie_goes_to_first_block():
    result = best_fit([200, 200], [150, 150])
    assert [a.remaining_block_size for a in result] == [50, 50]


def test_format_allocations_rows_match_results():
    result = first_fit(BLOCKS, PROCESSES)
    text = format_allocations("First-Fit", result)
    assert text.splitlines()[0] == "First-Fit Memory Allocation Results:"
    rows = _rows(text)
    assert rows[0] == ["1", "212", "500", str(500 - 212)]
    assert rows[3] == ["4", "426", "N/A", "N/A"]
    assert len({len(line) for line in text.splitlines()[4:-1]}) == 1
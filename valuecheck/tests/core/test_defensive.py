"""Unit tests for DefensiveCopy.

Covers the aliasing guarantees in both directions (source -> holder and
snapshot -> holder), range checking, and the flags that switch each
copy off to reproduce the aliasing bug.
"""

import pytest

from valuecheck.core.defensive import DefensiveCopy
from valuecheck.core.errors import InvalidArgumentError, OutOfRangeError


@pytest.fixture
def source() -> list[int]:
    """The documented five-element array."""
    return [1, 2, 3, 4, 5]


# ============================================================================
# Aliasing guarantees
# ============================================================================


def test_mutating_source_does_not_change_holder(source: list[int]) -> None:
    holder = DefensiveCopy(source)
    source[0] = 10
    assert holder.get()[0] == 1


def test_mutating_snapshot_does_not_change_holder(source: list[int]) -> None:
    holder = DefensiveCopy(source)
    snapshot = holder.get()
    snapshot[0] = 99
    snapshot.append(6)
    assert holder.get() == [1, 2, 3, 4, 5]


def test_get_returns_a_fresh_list_each_call(source: list[int]) -> None:
    holder = DefensiveCopy(source)
    first, second = holder.get(), holder.get()
    assert first == second
    assert first is not second
    assert first is not source


def test_accepts_any_iterable() -> None:
    holder = DefensiveCopy(n * n for n in range(4))
    assert holder.get() == [0, 1, 4, 9]
    assert holder.get() == [0, 1, 4, 9]


def test_shallow_copy_shares_nested_elements() -> None:
    nested = [[1], [2]]
    holder = DefensiveCopy(nested)
    nested[0].append(100)
    assert holder.get()[0] == [1, 100]


def test_deep_copy_isolates_nested_elements() -> None:
    nested = [[1], [2]]
    holder = DefensiveCopy(nested, deep=True)
    nested[0].append(100)
    holder.get()[1].append(200)
    holder.item(1).append(300)
    assert holder.get() == [[1], [2]]


# ============================================================================
# Reproducing the aliasing bug
# ============================================================================


class TestAliasingFailureModes:
    def test_without_construct_copy_source_leaks_in(self, source: list[int]) -> None:
        holder = DefensiveCopy(source, copy_on_construct=False)
        source[0] = 10
        assert holder.get()[0] == 10

    def test_without_get_copy_snapshot_leaks_back(self, source: list[int]) -> None:
        holder = DefensiveCopy(source, copy_on_get=False)
        holder.get()[0] = 10
        assert holder.get()[0] == 10
        assert source[0] == 1

    def test_aliasing_without_construct_copy_needs_a_list(self) -> None:
        with pytest.raises(InvalidArgumentError, match="requires a list source"):
            DefensiveCopy((1, 2, 3), copy_on_construct=False)


# ============================================================================
# Indexed access and argument checking
# ============================================================================


class TestItem:
    @pytest.mark.parametrize("index, expected", [(0, 1), (2, 3), (4, 5)])
    def test_in_range(self, source: list[int], index: int, expected: int) -> None:
        assert DefensiveCopy(source).item(index) == expected

    @pytest.mark.parametrize("index", [5, 6, -1, -5])
    def test_out_of_range(self, source: list[int], index: int) -> None:
        with pytest.raises(OutOfRangeError) as excinfo:
            DefensiveCopy(source).item(index)
        assert excinfo.value.index == index
        assert excinfo.value.length == 5
        assert f"index {index} out of range for length 5" in str(excinfo.value)

    def test_out_of_range_is_an_index_error(self) -> None:
        with pytest.raises(IndexError):
            DefensiveCopy([]).item(0)


@pytest.mark.parametrize("bad", [None, 42, "12345", b"123"])
def test_rejects_non_sequence_sources(bad) -> None:
    with pytest.raises(InvalidArgumentError):
        DefensiveCopy(bad)


def test_len_and_equality(source: list[int]) -> None:
    holder = DefensiveCopy(source)
    assert len(holder) == 5
    assert holder == DefensiveCopy([1, 2, 3, 4, 5])
    assert holder != DefensiveCopy([1, 2, 3])

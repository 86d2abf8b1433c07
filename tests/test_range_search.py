from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from range_search import (
    NOT_FOUND,
    InvalidArgumentError,
    RangeBinarySearch,
    detect_direction,
    find_key_indexes,
)
from range_search.search import ASCENDING, DESCENDING, find_boundary

ASC = [0, 1, 2, 4, 4, 6, 7, 7, 7, 7, 8, 9, 10, 12, 15, 15]
DESC = [15, 15, 12, 10, 9, 8, 7, 7, 7, 7, 6, 4, 4, 2, 1, 0]
ASC_ONCE = [0, 1, 2, 4, 4, 6, 6, 6, 6, 7, 8, 9, 10, 12, 15, 15]
DESC_ONCE = [15, 15, 12, 10, 9, 8, 8, 8, 8, 7, 6, 4, 4, 2, 1, 0]


@pytest.mark.parametrize(
    ("values", "key", "expected"),
    [
        (ASC, 7, [6, 7, 8, 9]),
        (DESC, 7, [6, 7, 8, 9]),
        (ASC_ONCE, 7, [9]),
        (DESC_ONCE, 7, [9]),
        (ASC_ONCE, 3, [-1]),
        (DESC_ONCE, 3, [-1]),
        ([5], 5, [0]),
        ([5], 2, [-1]),
    ],
)
def test_search_known_scenarios(values, key, expected) -> None:
    assert RangeBinarySearch(values, key).search() == expected


def test_empty_search_space_is_not_found() -> None:
    for key in (-1, 0, 42):
        assert RangeBinarySearch([], key).search() == [NOT_FOUND]


def test_none_search_space_is_rejected() -> None:
    for key in (0, 7, -3):
        with pytest.raises(InvalidArgumentError, match="must not be None"):
            RangeBinarySearch(None, key)


def test_invalid_argument_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        RangeBinarySearch(None, 1)


def test_detect_direction_uses_endpoints() -> None:
    assert detect_direction([]) == ASCENDING
    assert detect_direction([9]) == ASCENDING
    assert detect_direction([3, 3, 3]) == ASCENDING
    assert detect_direction(ASC) == ASCENDING
    assert detect_direction(DESC) == DESCENDING


def test_search_is_repeatable_and_leaves_input_untouched() -> None:
    values = list(ASC)
    engine = RangeBinarySearch(values, 4)
    first = engine.search()
    second = engine.search()
    assert first == second == [3, 4]
    assert values == ASC


def test_engine_is_frozen() -> None:
    engine = RangeBinarySearch(ASC, 7)
    with pytest.raises(dataclasses.FrozenInstanceError):
        engine.key = 8


def test_locate_reports_tagged_result() -> None:
    hit = RangeBinarySearch(DESC, 4).locate()
    assert hit.found
    assert hit.direction == DESCENDING
    assert (hit.first, hit.last) == (11, 12)
    assert hit.indexes() == [11, 12]

    miss = RangeBinarySearch(ASC, 5).locate()
    assert not miss.found
    assert miss.first is None and miss.last is None
    assert miss.indexes() == [NOT_FOUND]


def test_match_at_last_index_skips_second_search() -> None:
    result = RangeBinarySearch([1, 2, 3], 3).locate()
    assert result.indexes() == [2]
    assert result.probes == (1, 2)


def test_run_covering_whole_space() -> None:
    assert find_key_indexes([4, 4, 4, 4, 4], 4) == [0, 1, 2, 3, 4]


def test_dense_duplicates_stay_logarithmic() -> None:
    n = 1024
    result = RangeBinarySearch([7] * n, 7).locate()
    assert result.indexes() == list(range(n))
    assert len(result.probes) <= 2 * n.bit_length()


def test_find_boundary_returns_not_found_when_low_is_past_end() -> None:
    values = [1, 2, 3]
    assert find_boundary(values, key=3, low=3, key_before=lambda k, v: k < v, want_first=False) == NOT_FOUND


def test_find_boundary_picks_outermost_match() -> None:
    values = [1, 2, 2, 2, 2, 3]
    before = lambda k, v: k < v
    assert find_boundary(values, key=2, low=0, key_before=before, want_first=True) == 1
    assert find_boundary(values, key=2, low=0, key_before=before, want_first=False) == 4


def test_reversed_space_mirrors_indexes() -> None:
    for key in (0, 4, 7, 15, 3):
        forward = find_key_indexes(ASC, key)
        backward = find_key_indexes(ASC[::-1], key)
        if forward == [NOT_FOUND]:
            assert backward == [NOT_FOUND]
        else:
            assert backward == sorted(len(ASC) - 1 - i for i in forward)


def test_numpy_search_space_matches_list() -> None:
    arr = np.asarray(DESC, dtype=np.int64)
    out = RangeBinarySearch(arr, 7).search()
    assert out == [6, 7, 8, 9]
    assert all(type(i) is int for i in out)


def test_random_sorted_spaces_match_linear_scan() -> None:
    rng = np.random.default_rng(123)
    for _ in range(300):
        n = int(rng.integers(0, 40))
        values = np.sort(rng.integers(-5, 6, size=n))
        if rng.random() < 0.5:
            values = values[::-1]
        key = int(rng.integers(-6, 7))
        expected = [i for i, v in enumerate(values.tolist()) if v == key] or [NOT_FOUND]
        assert find_key_indexes(values.tolist(), key) == expected
        assert find_key_indexes(values, key) == expected

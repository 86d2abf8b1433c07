from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

NOT_FOUND = -1

ASCENDING = "ascending"
DESCENDING = "descending"


class InvalidArgumentError(ValueError):
    pass


# A reduction predicate answers: does the key sit left of this midpoint value?
def _key_before_ascending(key: int, value: int) -> bool:
    return key < value


def _key_before_descending(key: int, value: int) -> bool:
    return key > value


_REDUCTION_PREDICATES: dict[str, Callable[[int, int], bool]] = {
    ASCENDING: _key_before_ascending,
    DESCENDING: _key_before_descending,
}


def detect_direction(values: Sequence[int]) -> str:
    if len(values) > 1 and values[0] > values[len(values) - 1]:
        return DESCENDING
    return ASCENDING


@dataclass(frozen=True, slots=True)
class RangeSearchResult:
    key: int
    direction: str
    first: int | None
    last: int | None
    probes: tuple[int, ...]

    @property
    def found(self) -> bool:
        return self.first is not None

    def indexes(self) -> list[int]:
        """Matching indexes in ascending order, or ``[NOT_FOUND]`` when the key is absent."""
        if self.first is None or self.last is None:
            return [NOT_FOUND]
        return list(range(self.first, self.last + 1))


# Binary search over [low, len(values) - 1] that keeps going after a match to reach the outermost one.
def find_boundary(
    values: Sequence[int],
    *,
    key: int,
    low: int,
    key_before: Callable[[int, int], bool],
    want_first: bool,
    probes: list[int] | None = None,
) -> int:
    lo = int(low)
    hi = len(values) - 1
    result = NOT_FOUND

    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if probes is not None:
            probes.append(mid)
        value = values[mid]
        if value == key:
            result = mid
            if want_first:
                hi = mid - 1
            else:
                lo = mid + 1
        elif key_before(key, value):
            hi = mid - 1
        else:
            lo = mid + 1

    return result


@dataclass(frozen=True, slots=True, eq=False)
class RangeBinarySearch:
    """Finds every index holding ``key`` in a sorted (ascending or descending) search space.

    Sortedness is not checked here; see ``range_search.validate.check_monotonic``.
    """

    search_space: Sequence[int]
    key: int

    def __post_init__(self) -> None:
        if self.search_space is None:
            raise InvalidArgumentError("search space must not be None")

    def locate(self) -> RangeSearchResult:
        values = self.search_space
        direction = detect_direction(values)
        key_before = _REDUCTION_PREDICATES[direction]
        probes: list[int] = []

        first = find_boundary(values, key=self.key, low=0, key_before=key_before, want_first=True, probes=probes)
        if first == NOT_FOUND:
            return RangeSearchResult(key=self.key, direction=direction, first=None, last=None, probes=tuple(probes))

        last = first
        if first < len(values) - 1:
            upper = find_boundary(
                values,
                key=self.key,
                low=first + 1,
                key_before=key_before,
                want_first=False,
                probes=probes,
            )
            if upper != NOT_FOUND:
                last = upper

        return RangeSearchResult(key=self.key, direction=direction, first=first, last=last, probes=tuple(probes))

    def search(self) -> list[int]:
        return self.locate().indexes()


def find_key_indexes(values: Sequence[int], key: int) -> list[int]:
    return RangeBinarySearch(values, key).search()

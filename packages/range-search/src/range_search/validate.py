from __future__ import annotations

from typing import Sequence

import numpy as np

from .search import ASCENDING, DESCENDING, detect_direction


class SearchSpaceValidationError(ValueError):
    pass


def check_monotonic(values: Sequence[int]) -> str:
    arr = np.asarray(values)
    if arr.ndim != 1:
        raise SearchSpaceValidationError(f"search space must be one-dimensional, got shape {arr.shape}")
    if arr.size <= 1:
        return ASCENDING

    direction = detect_direction(arr)
    # Compare neighbours directly; np.diff wraps on unsigned and extreme int64 values.
    if direction == DESCENDING:
        bad = np.flatnonzero(arr[1:] > arr[:-1])
    else:
        bad = np.flatnonzero(arr[1:] < arr[:-1])

    if bad.size:
        i = int(bad[0]) + 1
        raise SearchSpaceValidationError(
            f"search space is not sorted {direction}: "
            f"index {i} holds {arr[i]} after {arr[i - 1]}"
        )
    return direction

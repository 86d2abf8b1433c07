from __future__ import annotations

import json
from pathlib import Path
import re

import numpy as np

_TEXT_SUFFIXES = {".txt", ".csv"}


def _as_search_space(raw: np.ndarray, where: str) -> np.ndarray:
    arr = np.asarray(raw)
    if arr.size == 0:
        return np.zeros((0,), dtype=np.int64)
    if arr.ndim != 1:
        raise ValueError(f"{where} must hold a flat list of integers, got shape {arr.shape}")
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"{where} must hold integers, got dtype {arr.dtype}")
    return arr.astype(np.int64, copy=False)


def parse_values(raw: str) -> np.ndarray:
    tokens = [t for t in re.split(r"[,\s]+", raw.strip()) if t]
    try:
        ints = [int(t) for t in tokens]
    except ValueError as exc:
        raise ValueError(f"values must be integers: {raw!r}") from exc
    try:
        return np.asarray(ints, dtype=np.int64)
    except OverflowError as exc:
        raise ValueError(f"values out of int64 range: {raw!r}") from exc


def load_search_space(path: Path | str) -> np.ndarray:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"search space file not found: {p}")

    suffix = p.suffix.lower()
    if suffix == ".json":
        payload = json.loads(p.read_text(encoding="utf-8"))
        if not isinstance(payload, list) or any(isinstance(v, bool) or not isinstance(v, int) for v in payload):
            raise ValueError(f"{p} must contain a JSON list of integers")
        try:
            return np.asarray(payload, dtype=np.int64)
        except OverflowError as exc:
            raise ValueError(f"{p} holds values out of int64 range") from exc
    if suffix == ".npy":
        return _as_search_space(np.load(p, allow_pickle=False), str(p))
    if suffix in _TEXT_SUFFIXES:
        return parse_values(p.read_text(encoding="utf-8"))
    raise ValueError(f"unsupported search space file type: {p.suffix or '<none>'}")

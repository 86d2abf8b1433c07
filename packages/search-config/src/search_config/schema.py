from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path
from typing import Any


_ALLOWED_TOP = {"search", "output"}
_OUTPUT_FORMATS = {"text", "json"}


@dataclass(frozen=True, slots=True)
class SearchConfig:
    config_path: Path
    config_root: Path
    search: dict[str, Any]
    output: dict[str, Any]



def _expect_dict(payload: Any, where: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValueError(f"{where} must be an object")
    return payload



def _expect_keys(obj: dict[str, Any], allowed: set[str], where: str, required: set[str] | None = None) -> None:
    extra = sorted(set(obj) - allowed)
    if extra:
        raise ValueError(f"unknown keys in {where}: {extra}")
    req = required if required is not None else set()
    missing = sorted(req - set(obj))
    if missing:
        raise ValueError(f"missing required keys in {where}: {missing}")



def _expect_int(raw: Any, where: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"{where} must be an integer")
    return raw



def _expect_bool(raw: Any, where: str) -> bool:
    if not isinstance(raw, bool):
        raise ValueError(f"{where} must be a boolean")
    return raw



def _resolve_path(config_root: Path, raw: str | Path) -> Path:
    p = Path(raw)
    if not p.is_absolute():
        p = (config_root / p).resolve()
    else:
        p = p.resolve()
    return p



def _normalize_search(search: dict[str, Any], config_root: Path) -> dict[str, Any]:
    has_values = "values" in search
    has_file = "values_file" in search
    if has_values == has_file:
        raise ValueError("search must set exactly one of: values, values_file")

    out: dict[str, Any] = {
        "key": _expect_int(search["key"], "search.key"),
        "check_sorted": _expect_bool(search.get("check_sorted", False), "search.check_sorted"),
        "values": None,
        "values_file": None,
    }
    if has_values:
        values = search["values"]
        if not isinstance(values, list):
            raise ValueError("search.values must be a list")
        out["values"] = [_expect_int(v, f"search.values[{i}]") for i, v in enumerate(values)]
    else:
        out["values_file"] = _resolve_path(config_root, str(search["values_file"]))
    return out



def _normalize_output(output: dict[str, Any], config_root: Path) -> dict[str, Any]:
    fmt = str(output.get("format", "text"))
    if fmt not in _OUTPUT_FORMATS:
        raise ValueError(f"output.format must be one of {sorted(_OUTPUT_FORMATS)}, got {fmt!r}")
    report_raw = output.get("report_path")
    report_path = _resolve_path(config_root, str(report_raw)) if report_raw else None
    return {"format": fmt, "report_path": report_path}



def load_search_config(path: Path | str = "search.json") -> SearchConfig:
    config_path = Path(path).resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"config not found: {config_path}")

    payload = json.loads(config_path.read_text(encoding="utf-8"))
    payload = _expect_dict(payload, "config")
    _expect_keys(payload, _ALLOWED_TOP, "config", required={"search"})

    config_root = config_path.parent

    search = _expect_dict(payload.get("search", {}), "search")
    _expect_keys(search, {"values", "values_file", "key", "check_sorted"}, "search", required={"key"})

    output = _expect_dict(payload.get("output", {}), "output")
    _expect_keys(output, {"format", "report_path"}, "output")

    return SearchConfig(
        config_path=config_path,
        config_root=config_root,
        search=_normalize_search(search, config_root),
        output=_normalize_output(output, config_root),
    )

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from search_config import load_search_config

from .io import load_search_space, parse_values
from .search import RangeBinarySearch, RangeSearchResult
from .validate import SearchSpaceValidationError, check_monotonic


def _atomic_write_json(path: Path, payload: dict[str, Any]) -> None:
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(payload, indent=2, default=str), encoding="utf-8")
    tmp.replace(path)


def _build_report(result: RangeSearchResult, *, size: int) -> dict[str, Any]:
    return {
        "status": "found" if result.found else "not_found",
        "key": int(result.key),
        "direction": result.direction,
        "size": int(size),
        "indexes": result.indexes(),
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Find every index of a key in a sorted integer array")
    parser.add_argument("--config", type=Path, default=None)
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--values", type=str, default=None, help="comma or space separated integers")
    source.add_argument("--values-file", type=Path, default=None, help=".json, .npy, .txt or .csv")
    parser.add_argument("--key", type=int, default=None)
    parser.add_argument("--check-sorted", action="store_true")
    parser.add_argument("--format", choices=["text", "json"], default=None)
    parser.add_argument("--report", type=Path, default=None)
    args = parser.parse_args()

    search: dict[str, Any] = {"values": None, "values_file": None, "key": None, "check_sorted": False}
    output: dict[str, Any] = {"format": "text", "report_path": None}
    if args.config is not None:
        shared = load_search_config(args.config)
        search.update(shared.search)
        output.update(shared.output)

    if args.values is not None:
        search["values"] = parse_values(args.values)
        search["values_file"] = None
    if args.values_file is not None:
        search["values_file"] = args.values_file.resolve()
        search["values"] = None
    if args.key is not None:
        search["key"] = args.key
    if args.check_sorted:
        search["check_sorted"] = True
    if args.format is not None:
        output["format"] = args.format
    if args.report is not None:
        output["report_path"] = args.report.resolve()

    if search["key"] is None:
        parser.error("a key is required: pass --key or set search.key in --config")
    if search["values"] is None and search["values_file"] is None:
        parser.error("a search space is required: pass --values, --values-file or --config")

    values = search["values"]
    if values is None:
        values = load_search_space(search["values_file"])

    if search["check_sorted"]:
        try:
            check_monotonic(values)
        except SearchSpaceValidationError as exc:
            print("status: error")
            print(f"reason: {exc}")
            raise SystemExit(2)

    result = RangeBinarySearch(values, int(search["key"])).locate()
    report = _build_report(result, size=len(values))

    report_path: Path | None = output["report_path"]
    if report_path is not None:
        report_path.parent.mkdir(parents=True, exist_ok=True)
        _atomic_write_json(report_path, report)
        report["report"] = str(report_path)

    if output["format"] == "json":
        print(json.dumps(report))
        return

    print(f"status: {report['status']}")
    print(f"key: {report['key']}")
    print(f"direction: {report['direction']}")
    print(f"size: {report['size']}")
    print(f"indexes: {','.join(str(i) for i in report['indexes'])}")
    if report_path is not None:
        print(f"report: {report_path}")


if __name__ == "__main__":
    main()

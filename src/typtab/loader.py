"""Load table rows from JSON, YAML or CSV."""

import csv
import io
import json
import re
from pathlib import Path
from typing import Any, Optional

import yaml

from typtab.errors import RowsLoadError

FORMATS = ("json", "yaml", "csv")

_SUFFIXES = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".csv": "csv",
}

_INTEGER = re.compile(r"-?\d+")


def detect_format(path: str) -> Optional[str]:
    """Guess the input format from a file suffix."""
    return _SUFFIXES.get(Path(path).suffix.lower())


def _infer(cell: str) -> Any:
    if _INTEGER.fullmatch(cell):
        return int(cell)
    return cell


def _check_rows(data: Any) -> list[list[Any]]:
    if not isinstance(data, list):
        raise RowsLoadError(f"expected a list of rows, got {type(data).__name__}")
    for i, row in enumerate(data):
        if not isinstance(row, list):
            raise RowsLoadError(f"row {i} is not a list: {row!r}")
    return data


def parse_rows(text: str, fmt: str, infer_integers: bool = False) -> list[list[Any]]:
    """Parse rows from text in the given format.

    JSON and YAML documents must be a list of lists. CSV cells are read as
    text; with ``infer_integers`` cells that look like whole numbers are
    converted to ``int``.
    """
    if fmt == "json":
        try:
            return _check_rows(json.loads(text))
        except json.JSONDecodeError as e:
            raise RowsLoadError(f"invalid JSON: {e}") from e

    if fmt == "yaml":
        try:
            data = yaml.safe_load(text)
            # An empty document has no rows
            return _check_rows([] if data is None else data)
        except yaml.YAMLError as e:
            raise RowsLoadError(f"invalid YAML: {e}") from e

    if fmt == "csv":
        rows = list(csv.reader(io.StringIO(text)))
        if infer_integers:
            rows = [[_infer(cell) for cell in row] for row in rows]
        return rows

    raise RowsLoadError(f"unknown format {fmt!r}, expected one of: {', '.join(FORMATS)}")


def load_rows(
    path: str,
    fmt: Optional[str] = None,
    infer_integers: bool = False,
) -> list[list[Any]]:
    """Load rows from a file, detecting the format from its suffix."""
    fmt = fmt or detect_format(path)
    if fmt is None:
        raise RowsLoadError(f"cannot detect format of {path}, pass --format")

    try:
        with open(path, newline="" if fmt == "csv" else None) as f:
            text = f.read()
    except OSError as e:
        raise RowsLoadError(f"cannot read {path}: {e}") from e

    return parse_rows(text, fmt, infer_integers=infer_integers)

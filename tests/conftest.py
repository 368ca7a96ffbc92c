"""Test fixtures and configuration."""

import json

import pytest


@pytest.fixture
def users():
    """Rows with text and integer cells."""
    return [
        ["John", 200, 10],
        ["Mary", 500, 100],
    ]


@pytest.fixture
def rows_json(tmp_path, users):
    """Path to a JSON rows file."""
    path = tmp_path / "rows.json"
    path.write_text(json.dumps(users))
    return str(path)

"""typtab: Typst table content from Python rows."""

__version__ = "0.1.0"

from typtab.format import (
    format_cell,
    table_content,
    table_content_with_breaks,
)
from typtab.errors import InvalidBreakIndicator, RowsLoadError, TyptabError

__all__ = [
    "format_cell",
    "table_content",
    "table_content_with_breaks",
    "InvalidBreakIndicator",
    "RowsLoadError",
    "TyptabError",
]

"""Convert rows of Python values into Typst table content.

The output is meant to be spliced into a ``#table(...)`` call::

    #table(
      columns: 3,
      {content}
    )

Integers and plain text become quoted string literals. Text containing the
break indicator becomes a content block (``[...]``) with each indicator
replaced by Typst's forced line break, since string literals cannot hold one.
"""

from typing import Any, Iterable

from typtab.errors import InvalidBreakIndicator

ROW_SEPARATOR = ",\n  "
CELL_SEPARATOR = ", "

# Typst forced line break: space, backslash, newline.
LINE_BREAK = " \\\n"

DEFAULT_BREAK = "\\"
DEFAULT_CUSTOM_BREAK = "|"


def check_break_indicator(break_indicator: Any) -> None:
    """Raise InvalidBreakIndicator unless the indicator is a non-empty string."""
    if not isinstance(break_indicator, str) or not break_indicator:
        raise InvalidBreakIndicator(break_indicator)


def _quote(value: str) -> str:
    return f'"{value}"'


def format_cell(value: Any, break_indicator: str = DEFAULT_BREAK) -> str:
    """Format a single column value.

    ``bool`` is a subclass of ``int`` but is rendered through ``repr`` like
    any other non-integer value.
    """
    check_break_indicator(break_indicator)
    return _format_cell(value, break_indicator)


def _format_cell(value: Any, break_indicator: str) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return _quote(str(value))

    if isinstance(value, str):
        if break_indicator not in value:
            return _quote(value)
        return f"[{value.replace(break_indicator, LINE_BREAK)}]"

    return _quote(repr(value))


def table_content_with_breaks(
    rows: Iterable[Iterable[Any]],
    break_indicator: str = DEFAULT_CUSTOM_BREAK,
) -> str:
    """Format rows using a custom break indicator.

    Every occurrence of ``break_indicator`` inside a text value is replaced
    by a line break, and the value is emitted as a content block.

    Raises:
        InvalidBreakIndicator: if ``break_indicator`` is empty or not a string.
    """
    check_break_indicator(break_indicator)

    return ROW_SEPARATOR.join(
        CELL_SEPARATOR.join(_format_cell(cell, break_indicator) for cell in row)
        for row in rows
    )


def table_content(rows: Iterable[Iterable[Any]]) -> str:
    """Format rows for a Typst table, breaking lines at backslashes.

    >>> table_content([["John", 10, 20], ["Alice", 20, 30]])
    '"John", "10", "20",\\n  "Alice", "20", "30"'
    """
    return table_content_with_breaks(rows, DEFAULT_BREAK)

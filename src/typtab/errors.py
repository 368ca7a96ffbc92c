"""Exceptions raised by typtab."""


class TyptabError(Exception):
    """Base class for typtab errors."""


class InvalidBreakIndicator(TyptabError, ValueError):
    """Break indicator is empty or not a string."""

    def __init__(self, indicator: object):
        self.indicator = indicator
        super().__init__(
            f"break indicator must be a non-empty string, got {indicator!r}"
        )


class RowsLoadError(TyptabError):
    """Input rows could not be read or are not a list of rows."""

"""errors.py - Fatal configuration failures. Raised before any file I/O."""


class SnipeError(Exception):
    """Base class for everything line-snipe raises on purpose."""


class InvalidPatternError(SnipeError, ValueError):
    """Content pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid pattern {pattern!r}: {reason}")


class InvalidFilterError(SnipeError, ValueError):
    """Include/exclude glob could not be compiled."""

    def __init__(self, glob: str, reason: str):
        self.glob = glob
        self.reason = reason
        super().__init__(f"invalid file pattern {glob!r}: {reason}")


class InvalidOptionError(SnipeError, ValueError):
    """Numeric option out of range."""

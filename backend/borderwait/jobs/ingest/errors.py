from typing import Any, Optional


class BorderWaitError(Exception):
    """Base class for errors raised while normalizing border wait data."""


class FormatError(BorderWaitError, ValueError):
    """A value does not have the expected shape."""

    def __init__(self, value: Any, expected: str, message: Optional[str] = None):
        self.value = value
        self.expected = expected
        super().__init__(message or f"Bad value {value!r}: expected {expected}")


class StructuralError(BorderWaitError, LookupError):
    """The markup does not contain the element the extractor needs."""

    def __init__(self, selector: str, message: Optional[str] = None):
        self.selector = selector
        super().__init__(message or f"Element not found: {selector}")

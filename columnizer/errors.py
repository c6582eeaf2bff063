"""Exception types raised by columnizer.

Formatting itself never fails: non-numeric cells, bad width limits and
ragged rows all fall back to a formatting decision. Only configuration
and input acquisition can raise.
"""

from typing import List


class ColumnizerError(Exception):
    """Base class for all columnizer errors."""


class ConfigValidationError(ColumnizerError):
    """Raised when configuration validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Configuration validation failed: {'; '.join(errors)}")


class InputReadError(ColumnizerError):
    """Raised when no input could be read (e.g. empty stdin after retries)."""


class BinaryInputError(ColumnizerError):
    """Raised when input bytes are not valid UTF-8 text."""

    def __init__(self, source: str, size: int):
        self.source = source
        self.size = size
        super().__init__(f"Input from {source} is binary ({size} bytes), not UTF-8 text")

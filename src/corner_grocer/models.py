"""
Data models and error types for corner-grocer.
"""

from dataclasses import dataclass
from enum import Enum


class SortOrder(str, Enum):
    """Ordering for listing and histogram views."""

    NAME = "name"
    FREQ_DESC = "freq_desc"
    FREQ_ASC = "freq_asc"


class ErrorKind(str, Enum):
    """Kinds of failure surfaced to the command line."""

    OPEN = "open"
    WRITE = "write"
    USAGE = "usage"


class GrocerError(Exception):
    """Base error for corner-grocer failures."""

    kind: ErrorKind

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class OpenError(GrocerError):
    """Input file could not be opened for reading."""

    kind = ErrorKind.OPEN


class WriteError(GrocerError):
    """Backup file could not be created or finalized."""

    kind = ErrorKind.WRITE


class UsageError(GrocerError):
    """Invalid command-line arguments or configuration values."""

    kind = ErrorKind.USAGE


@dataclass
class ItemRecord:
    """One distinct purchased item."""

    key: str
    display_name: str
    count: int = 0

    def as_row(self) -> tuple[str, int]:
        return (self.display_name, self.count)


def normalize_key(item: str) -> str:
    """Trim surrounding whitespace and ASCII-lowercase an item name."""
    return ascii_lower(item.strip())


def ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)

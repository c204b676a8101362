"""
Purchase frequency table.

Counts item occurrences case-insensitively, exposes sorted views, and writes
the ``frequency.dat`` backup.
"""

import contextlib
import logging
import os
import shutil
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from .models import ItemRecord, OpenError, SortOrder, WriteError, ascii_lower, normalize_key

logger = logging.getLogger(__name__)

BACKUP_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _name_sort_key(row: tuple[str, int]) -> tuple[str, str]:
    # Case-insensitive first, exact spelling breaks ties
    return (ascii_lower(row[0]), row[0])


class FrequencyTable:
    """Frequency of each distinct item in a purchase log."""

    def __init__(self, input_path: str | Path | None = None):
        self.input_path = str(input_path) if input_path is not None else ""
        self._items: dict[str, ItemRecord] = {}

    def load(self, lines: Iterable[str]) -> None:
        """Rebuild the table from raw lines, one item per line.

        Blank lines are skipped. The first spelling seen for an item becomes
        its display name.
        """
        self._items = {}
        for line in lines:
            item = line.strip()
            if not item:
                continue
            key = ascii_lower(item)
            record = self._items.get(key)
            if record is None:
                record = self._items[key] = ItemRecord(key=key, display_name=item)
            record.count += 1

        logger.debug(
            f"Loaded {self.total_purchases()} purchase(s) of "
            f"{self.unique_item_count()} item(s)"
        )

    def load_file(self, path: str | Path) -> None:
        """Load the table from a text file.

        Bytes that are not valid UTF-8 load as U+FFFD rather than failing.
        Raises OpenError if the file cannot be opened.
        """
        self.input_path = str(path)
        try:
            f = open(path, encoding="utf-8", errors="replace")
        except OSError as e:
            raise OpenError(f"Failed to open input file: {path}", path=str(path)) from e

        with f:
            logger.debug(f"Reading {path}")
            self.load(f)

    def count_of(self, item: str) -> int:
        record = self._items.get(normalize_key(item))
        return record.count if record else 0

    def total_purchases(self) -> int:
        return sum(record.count for record in self._items.values())

    def unique_item_count(self) -> int:
        return len(self._items)

    def _rows(self) -> list[tuple[str, int]]:
        return [record.as_row() for record in self._items.values()]

    def items_sorted_by_name(self) -> list[tuple[str, int]]:
        """All (display_name, count) pairs, A to Z."""
        return sorted(self._rows(), key=_name_sort_key)

    def items_sorted_by_freq_desc(self) -> list[tuple[str, int]]:
        """All pairs by count high to low, names A to Z within a count."""
        return sorted(self._rows(), key=lambda row: (-row[1], *_name_sort_key(row)))

    def items_sorted_by_freq_asc(self) -> list[tuple[str, int]]:
        """Reverse of items_sorted_by_freq_desc().

        Tied counts therefore list names Z to A.
        """
        return list(reversed(self.items_sorted_by_freq_desc()))

    def items_sorted(self, order: SortOrder) -> list[tuple[str, int]]:
        if order == SortOrder.NAME:
            return self.items_sorted_by_name()
        if order == SortOrder.FREQ_DESC:
            return self.items_sorted_by_freq_desc()
        return self.items_sorted_by_freq_asc()

    def write_backup(self, output_path: str | Path) -> None:
        """
        Persist the table as "<name> <count>" lines, sorted by name.

        The file is written to a sibling ".tmp" file and moved into place.
        Raises WriteError if the temporary file cannot be written or the
        final file cannot be put in place.
        """
        path = Path(output_path)
        if path.parent != Path():
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                # Opening the temporary file below reports the real failure
                logger.debug(f"Could not create {path.parent}: {e}")

        tmp = path.with_name(path.name + ".tmp")
        stamp = datetime.now().strftime(BACKUP_TIMESTAMP_FORMAT)

        try:
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(f"# frequency.dat generated {stamp} from {self.input_path}\n")
                for name, count in self.items_sorted_by_name():
                    f.write(f"{name} {count}\n")
        except OSError as e:
            # Partial writes are not left behind
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise WriteError(f"Failed to write output file: {tmp}", path=str(tmp)) from e

        try:
            os.replace(tmp, path)
        except OSError as e:
            logger.warning(f"Rename of {tmp} failed ({e}), copying instead")
            try:
                shutil.copyfile(tmp, path)
                tmp.unlink()
            except OSError as copy_error:
                raise WriteError(
                    f"Failed to finalize output file: {path}", path=str(path)
                ) from copy_error

        logger.debug(f"Wrote {self.unique_item_count()} item(s) to {path}")


def read_backup(path: str | Path) -> list[tuple[str, int]]:
    """Parse a backup file into (display_name, count) pairs.

    Comment lines starting with "#" are skipped. The count is the last
    space-separated field, so names may contain spaces.
    """
    try:
        f = open(path, encoding="utf-8", errors="replace")
    except OSError as e:
        raise OpenError(f"Failed to open backup file: {path}", path=str(path)) from e

    rows = []
    with f:
        for line in f:
            line = line.rstrip("\n")
            if not line.strip() or line.startswith("#"):
                continue
            name, _, count = line.rpartition(" ")
            rows.append((name, int(count)))
    return rows

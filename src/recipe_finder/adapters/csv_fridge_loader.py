"""CSV loader for fridge contents."""

import csv
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from recipe_finder.domain.ingredients import FridgeIngredient
from recipe_finder.errors import FileAccessError, ParseError, ValidationError
from recipe_finder.services.fridge import Fridge

_COLUMNS = 4

_logger = logging.getLogger(__name__)


@dataclass
class CsvFridgeLoader:
    """Fill a fridge from rows of name, amount, unit and use-by date."""

    delimiter: str = ","

    def load(self, path: str | Path, fridge: Fridge) -> int:
        """Load a CSV file into the fridge and return the number of rows read."""
        csv_path = Path(path)
        try:
            with csv_path.open(newline="", encoding="utf-8") as handle:
                reader = csv.reader(handle, delimiter=self.delimiter)
                count = _add_rows(_numbered_records(reader), fridge)
        except OSError as exc:
            raise FileAccessError(
                f"Cannot open {csv_path}. The file does not exist or you do not "
                "have permissions to access it."
            ) from exc
        except UnicodeDecodeError as exc:
            raise ParseError(
                f"CSV file import error: {csv_path} is not valid UTF-8 text "
                f"({exc.reason} at byte {exc.start})."
            ) from exc
        _logger.info("Loaded %s fridge items from %s", count, csv_path)
        return count

    def load_rows(self, rows: Iterable[list[str]], fridge: Fridge) -> int:
        """Add one fridge item per row, numbering rows from 1.

        Blank rows are skipped.
        """
        return _add_rows(enumerate(rows, start=1), fridge)


def _numbered_records(reader: "csv._reader") -> Iterator[tuple[int, list[str]]]:
    """Yield each record with the physical line it starts on."""
    line = 1
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            raise ParseError(f"CSV file import error on line {line}: {exc}") from exc
        yield line, row
        line = reader.line_num + 1


def _add_rows(numbered_rows: Iterable[tuple[int, list[str]]], fridge: Fridge) -> int:
    count = 0
    for line, row in numbered_rows:
        if not row or all(not cell.strip() for cell in row):
            continue
        try:
            item = _row_to_item(row)
        except ValidationError as exc:
            raise ParseError(f"CSV file import error on line {line}: {exc}") from exc
        fridge.add_item(item)
        count += 1
    return count


def _row_to_item(row: list[str]) -> FridgeIngredient:
    if len(row) != _COLUMNS:
        raise ValidationError(f"Expected {_COLUMNS} columns but found {len(row)}.")
    name, amount, unit, use_by_date = (cell.strip() for cell in row)
    return FridgeIngredient(name, amount, unit, use_by_date)

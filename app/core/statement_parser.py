# app/core/statement_parser.py

"""
Tolerant parser for bank statement CSV exports.

Exports differ between banks and even between downloads: tab or comma
(sometimes semicolon) delimiters, quoted descriptions with embedded
commas, and a variable block of header noise before the movements.

The canonical layout has 9 columns:
movement date, effective date, description, value, currency,
balance after, currency, operation number, document number.
"""

from typing import Iterable, Iterator
import logging
import re

from app.models import LineParseWarning, RawTransactionRow
from app.core.normalizers import contains_any, parse_positive_amount, strip_quotes

logger = logging.getLogger(__name__)

DATE_PATTERN = re.compile(r'^\d{2}/\d{2}/\d{4}\b')

# Delimiter not inside a balanced double-quoted field
COMMA_SPLIT = re.compile(r',(?=(?:[^"]*"[^"]*")*[^"]*$)')
SEMICOLON_SPLIT = re.compile(r';(?=(?:[^"]*"[^"]*")*[^"]*$)')

DESCRIPTION_COLUMN = 2
VALUE_COLUMN = 3
MIN_CANONICAL_COLUMNS = 4
FALLBACK_VALUE_LOOKAHEAD = 3


def split_columns(line: str) -> list[str]:
    """
    Split one CSV line into columns.

    Tab first, then a quote-aware comma split when it yields a full row,
    then semicolon (decimal-comma exports). A line with no delimiter is
    one column.
    """
    if "\t" in line:
        return line.split("\t")

    if ";" in line or "," in line:
        if line.count('"') % 2:
            raise ValueError("unbalanced double quotes")

    comma_columns = COMMA_SPLIT.split(line) if "," in line else None
    if comma_columns and len(comma_columns) >= MIN_CANONICAL_COLUMNS:
        return comma_columns

    if ";" in line:
        columns = SEMICOLON_SPLIT.split(line)
        if len(columns) >= MIN_CANONICAL_COLUMNS:
            return columns

    if comma_columns:
        return comma_columns

    return [line]


def has_date_column(columns: list[str]) -> bool:
    """True when any column starts with a DD/MM/YYYY date."""
    return any(DATE_PATTERN.match(strip_quotes(c)) for c in columns)


class BankStatementParser:
    """
    Turns statement text into RawTransactionRow objects.

    `target_fragments` are only used for short rows (fewer than 4
    columns), where the description and value must be found by scanning.
    Skipped lines are collected in `warnings`.
    """

    def __init__(self, target_fragments: Iterable[str] = ()):
        self.target_fragments = list(target_fragments)
        self.warnings: list[LineParseWarning] = []
        self.rows_scanned = 0

    def parse(self, text: str) -> Iterator[RawTransactionRow]:
        """
        Yield data rows lazily.

        Everything before the first row with a date column is header
        noise. From that row on, every non-blank line is a data row,
        dated or not (continuation lines have no date).
        """
        in_transactions = False

        for line_number, line in enumerate(text.lstrip("\ufeff").splitlines(), start=1):
            if not line.strip():
                continue

            try:
                columns = split_columns(line)

                if not in_transactions:
                    if not has_date_column(columns):
                        continue
                    in_transactions = True
                    logger.debug(f"Transactions start at line {line_number}")

                row = self._build_row(line_number, columns)
            except Exception as e:
                if in_transactions:
                    self._warn(line_number, line, str(e))
                else:
                    logger.debug(f"Ignoring unparseable header line {line_number}: {e}")
                continue

            self.rows_scanned += 1
            yield row

    def _build_row(self, line_number: int, columns: list[str]) -> RawTransactionRow:
        if len(columns) >= MIN_CANONICAL_COLUMNS:
            description = strip_quotes(columns[DESCRIPTION_COLUMN])
            value_text = strip_quotes(columns[VALUE_COLUMN])
        else:
            description, value_text = self._scan_short_row(columns)

        return RawTransactionRow(
            line_number=line_number,
            raw_columns=columns,
            description=description,
            value_text=value_text,
        )

    def _scan_short_row(self, columns: list[str]) -> tuple[str, str]:
        """Find the target description, then the first positive value after it."""
        for i, column in enumerate(columns):
            if not contains_any(column, self.target_fragments):
                continue

            following = columns[i + 1:i + 1 + FALLBACK_VALUE_LOOKAHEAD]
            for candidate in following:
                if parse_positive_amount(strip_quotes(candidate)) is not None:
                    return strip_quotes(column), strip_quotes(candidate)
            return strip_quotes(column), ""

        return " ".join(strip_quotes(c) for c in columns), ""

    def _warn(self, line_number: int, line: str, reason: str) -> None:
        logger.warning(f"Skipping statement line {line_number}: {reason}")
        self.warnings.append(LineParseWarning(
            line_number=line_number,
            line=line,
            reason=reason,
        ))

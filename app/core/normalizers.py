# app/core/normalizers.py

"""
Text and number normalization utilities.

Bank exports and OCR output arrive with mixed accents, separators
and currency noise. Everything is normalized here before comparison.
"""

from datetime import date, datetime
from typing import Any
import logging
import math
import re
import unicodedata

logger = logging.getLogger(__name__)


def strip_accents(s: str | None) -> str:
    """Remove combining marks (é -> e, ç -> c), keeping everything else."""
    if not s:
        return ""
    decomposed = unicodedata.normalize("NFKD", s)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def normalize_text(s: str | None) -> str:
    """
    Normalize free text for fuzzy comparison.

    - Lowercase
    - Strip accents
    - Replace anything non-alphanumeric with a space
    - Collapse whitespace
    """
    if not s:
        return ""

    s = strip_accents(s.lower())
    s = re.sub(r'[^a-z0-9\s]', ' ', s)
    s = re.sub(r'\s+', ' ', s).strip()
    return s


def contains_any(text: str | None, fragments: list[str]) -> bool:
    """
    Case-insensitive substring test that tolerates missing accents.

    Both the text and each fragment are compared as written and with
    accents stripped, so "Depósito" and "Deposito" behave the same.
    """
    if not text:
        return False

    lowered = text.lower()
    unaccented = strip_accents(lowered)
    for fragment in fragments:
        fragment = fragment.lower()
        if fragment in lowered or strip_accents(fragment) in unaccented:
            return True
    return False


def normalize_plate(plate: str | None) -> str:
    """Normalize a licence plate: uppercase, separators removed."""
    if not plate:
        return ""
    return re.sub(r'[^A-Z0-9]', '', plate.upper())


def strip_quotes(s: str | None) -> str:
    """Remove wrapping double quotes and surrounding whitespace."""
    if not s:
        return ""
    s = s.strip()
    if len(s) >= 2 and s.startswith('"') and s.endswith('"'):
        s = s[1:-1]
    return s.replace('""', '"').strip()


def normalize_decimal_separators(text: str) -> str:
    """
    Rewrite a decimal-comma amount as dot-decimal.

    Handles:
    - 96.000,00  -> 96000.00
    - 96,000.00  -> 96000.00
    - 131000,50  -> 131000.50
    - 1.234.567  -> 1234567
    - 96.000     -> 96.000 (a single dot is always decimal)
    """
    s = re.sub(r'\s', '', text)

    if "," in s and "." in s:
        if s.rfind(",") > s.rfind("."):
            s = s.replace(".", "").replace(",", ".")
        else:
            s = s.replace(",", "")
    elif "," in s:
        parts = s.split(",")
        if len(parts) == 2 and len(re.sub(r'\D', '', parts[1])) != 3:
            s = parts[0] + "." + parts[1]
        else:
            s = s.replace(",", "")
    elif s.count(".") > 1:
        s = s.replace(".", "")
    elif re.search(r'\d\.\d{3}(?!\d)', s):
        logger.warning(f"Amount '{text}' read as decimal; a thousands separator would make it 1000x larger")

    return s


def parse_amount(text: Any) -> float | None:
    """
    Parse an amount from statement or OCR text.

    Currency symbols and letters are dropped (only digits, '.' and '-'
    survive). Returns None when nothing parseable remains.
    """
    if text is None or isinstance(text, bool):
        return None

    if isinstance(text, (int, float)):
        value = float(text)
        return value if math.isfinite(value) else None

    if not isinstance(text, str):
        return None

    cleaned = re.sub(r'[^\d.-]', '', normalize_decimal_separators(text))
    if not re.search(r'\d', cleaned):
        return None

    try:
        value = float(cleaned)
    except ValueError:
        return None

    return value if math.isfinite(value) else None


def parse_positive_amount(text: Any) -> float | None:
    """Parse an amount, keeping it only when strictly positive."""
    value = parse_amount(text)
    if value is None or value <= 0:
        return None
    return value


def coerce_positive(value: Any, default: float) -> float:
    """Return value as a positive finite float, or default."""
    parsed = parse_positive_amount(value)
    return default if parsed is None else parsed


def normalize_date(d: Any) -> date | None:
    """
    Normalize date to date object.

    Handles:
    - date objects
    - datetime objects
    - ISO strings
    - DD/MM/YYYY strings (bank exports)
    """
    if d is None:
        return None

    if isinstance(d, datetime):
        return d.date()

    if isinstance(d, date):
        return d

    if isinstance(d, str):
        d = d.strip()
        try:
            return datetime.fromisoformat(d.replace('Z', '+00:00')).date()
        except ValueError:
            pass

        formats = [
            '%Y-%m-%d',
            '%d/%m/%Y',
            '%d-%m-%Y',
            '%Y/%m/%d',
        ]
        for fmt in formats:
            try:
                return datetime.strptime(d, fmt).date()
            except ValueError:
                continue

    return None

"""Field formatting primitives.

Every field of every record goes through one of these four functions,
which keeps each line byte-exact regardless of the builder:

- ``numeric``: digits only, zero-filled on the left, truncated from the left
- ``alpha``: accent-stripped, ASCII-only uppercase text, space-filled on the right
- ``date``: ``DDMMYYYY``
- ``money``: implicit-decimal integer, zero-filled on the left

Optional values degrade to zeros or spaces instead of raising, so that a
missing optional field never shifts the positions of the fields after it.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from datetime import date as _date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from cnab_gen.exceptions import InvalidFieldError

logger = logging.getLogger(__name__)

_NON_DIGIT = re.compile(r"\D")
_WHITESPACE = re.compile(r"\s")


def numeric(value: Any, width: int) -> str:
    """Format a numeric field.

    Non-digit characters are discarded. When the remaining digits are
    longer than ``width`` the rightmost ``width`` digits are kept.
    """
    if value is None:
        return "0" * width
    digits = _NON_DIGIT.sub("", str(value))
    if len(digits) > width:
        return digits[-width:]
    return digits.rjust(width, "0")


def alpha(value: Any, width: int, keep: str = "") -> str:
    """Format an alphanumeric field.

    Parameters
    ----------
    value : Any
        Value to format; ``None`` yields a blank field.
    width : int
        Field width.
    keep : str
        Punctuation characters that must survive normalization
        (``"@.-+"`` for e-mail and random PIX keys).
    """
    if value is None:
        return " " * width
    # NFKD also folds ordinals and superscripts ("1º" -> "1o")
    text = unicodedata.normalize("NFKD", str(value))
    chars = []
    for ch in text:
        if _WHITESPACE.match(ch):
            chars.append(" ")
        elif ch.isascii() and (ch in keep or ch.isalnum() or ch == "_"):
            chars.append(ch)
    cleaned = "".join(chars).upper()
    return cleaned[:width].ljust(width, " ")


def _ddmmyyyy(value: _date) -> str:
    # always 8 characters, years below 1000 included
    return f"{value.day:02d}{value.month:02d}{value.year:04d}"


def date(value: Any) -> str:
    """Format a date as ``DDMMYYYY``; invalid or missing input gives zeros."""
    if isinstance(value, _date):
        return _ddmmyyyy(value)
    if isinstance(value, str) and value:
        try:
            parsed = _date.fromisoformat(value.strip()[:10])
        except ValueError:
            logger.debug("Unparseable date %r, writing zeros", value)
            return "00000000"
        return _ddmmyyyy(parsed)
    return "00000000"


def to_decimal(value: Any) -> Decimal | None:
    """Convert a number or numeric string to ``Decimal``; ``None`` if impossible."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return result if result.is_finite() else None


def money(value: Any, width: int, decimals: int = 2) -> str:
    """Format a monetary value as an implicit-decimal integer.

    ``money(1234.5, 15) == "000000000123450"``. Negative values and values
    that do not fit in ``width`` digits cannot be represented and raise
    :class:`InvalidFieldError`.
    """
    amount = to_decimal(value)
    if amount is None:
        if value is not None:
            logger.debug("Unparseable amount %r, writing zeros", value)
        return "0" * width
    scaled = (amount * (Decimal(10) ** decimals)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    if scaled < 0:
        raise InvalidFieldError(f"Negative amount cannot be encoded: {value}")
    digits = str(int(scaled))
    if len(digits) > width:
        raise InvalidFieldError(f"Amount {value} does not fit in {width} digits")
    return digits.rjust(width, "0")


def round_money(value: Any, decimals: int = 2) -> Decimal:
    """Round an amount to ``decimals`` places the same way ``money`` does."""
    amount = to_decimal(value) or Decimal(0)
    return amount.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def from_money(digits: str, decimals: int = 2) -> Decimal:
    """Decode an implicit-decimal field back into a ``Decimal``."""
    return Decimal(int(digits)).scaleb(-decimals)

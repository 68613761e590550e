"""Helpers shared by the record builders."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from cnab_gen.exceptions import MissingFieldError
from cnab_gen.formatters import alpha, numeric
from cnab_gen.models.base import Party
from cnab_gen.models.batch import Record
from cnab_gen.models.enums import RecordType, SegmentCode

OCCURRENCES = " " * 10


def blanks(width: int) -> str:
    return " " * width


def zeros(width: int) -> str:
    return "0" * width


def assemble(
    parts: Iterable[str],
    record_type: RecordType,
    segment: SegmentCode | None = None,
) -> Record:
    """Concatenate formatted fields into a :class:`Record`.

    The record itself rejects lines that are not 240 characters long.
    """
    return Record("".join(parts), record_type, segment)


def detail_prefix(
    bank_code: str, batch_number: int, register_number: int, segment: SegmentCode
) -> str:
    """Positions 1-14 of every detail line."""
    return (
        numeric(bank_code, 3)
        + numeric(batch_number, 4)
        + RecordType.DETAIL.value
        + numeric(register_number, 5)
        + segment.value
    )


def require(value: Any, description: str) -> Any:
    """Return ``value`` or raise :class:`MissingFieldError` if it is empty."""
    if value is None or value == "":
        raise MissingFieldError(f"{description} is required")
    return value


def party_fields(
    party: Party | None, type_width: int, number_width: int, name_width: int = 0
) -> str:
    """Inscription type, number and optionally name of a party.

    A missing party yields zeros for the type and number and blanks for
    the name.
    """
    if party is None:
        return zeros(type_width) + zeros(number_width) + blanks(name_width)
    text = numeric(party.inscription_type.value, type_width) + numeric(
        party.inscription_number, number_width
    )
    if name_width:
        text += alpha(party.name, name_width)
    return text

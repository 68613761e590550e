"""Value types shared by companies and payments."""

from __future__ import annotations

import re
from dataclasses import dataclass

from cnab_gen.exceptions import InvalidFieldError, MissingFieldError
from cnab_gen.models.enums import InscriptionType

_NON_DIGIT = re.compile(r"\D")


def only_digits(value: str | None) -> str:
    """Strip every non-digit character."""
    return _NON_DIGIT.sub("", value or "")


@dataclass(frozen=True)
class Address:
    """Postal address written in segments B and Q and in batch headers.

    ``postal_code`` is the 8-digit CEP; the record builders split it into
    the 5-digit prefix and the 3-digit suffix.
    """

    street: str
    city: str
    state: str
    postal_code: str
    number: str = ""
    complement: str = ""
    neighborhood: str = ""

    def __post_init__(self) -> None:
        for name in ("street", "city", "state", "postal_code"):
            if not getattr(self, name):
                raise MissingFieldError(f"Address {name} is required")
        if len(only_digits(self.postal_code)) != 8:
            raise InvalidFieldError(f"Postal code must have 8 digits: {self.postal_code!r}")

    @property
    def postal_prefix(self) -> str:
        return only_digits(self.postal_code)[:5]

    @property
    def postal_suffix(self) -> str:
        return only_digits(self.postal_code)[5:]


@dataclass(frozen=True)
class BankAccount:
    """Bank routing data: bank, agency and account with check digits."""

    bank_code: str
    agency: str
    account: str
    agency_digit: str = ""
    account_digit: str = ""
    account_agency_digit: str = ""

    def __post_init__(self) -> None:
        for name in ("bank_code", "agency", "account"):
            if not getattr(self, name):
                raise MissingFieldError(f"Bank account {name} is required")
        if len(only_digits(self.bank_code)) > 3:
            raise InvalidFieldError(f"Bank code must have up to 3 digits: {self.bank_code!r}")


@dataclass(frozen=True)
class Party:
    """A person or company identified by CPF or CNPJ."""

    inscription_type: InscriptionType
    inscription_number: str
    name: str = ""

    def __post_init__(self) -> None:
        if not self.inscription_number:
            raise MissingFieldError("Inscription number is required")
        try:
            kind = InscriptionType(self.inscription_type)
        except ValueError as exc:
            raise InvalidFieldError(
                f"Inscription type must be 1 (CPF) or 2 (CNPJ), got {self.inscription_type!r}"
            ) from exc
        object.__setattr__(self, "inscription_type", kind)
        digits = only_digits(self.inscription_number)
        if len(digits) != kind.digits:
            raise InvalidFieldError(
                f"{kind.name} must have {kind.digits} digits, got {len(digits)}"
            )
        object.__setattr__(self, "inscription_number", digits)

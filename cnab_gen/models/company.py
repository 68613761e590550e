"""Company (paying account holder) model."""

from __future__ import annotations

from dataclasses import dataclass

from cnab_gen.exceptions import MissingFieldError
from cnab_gen.models.base import Address, BankAccount, Party
from cnab_gen.models.enums import InscriptionType


@dataclass(frozen=True)
class Company:
    """Company issuing the remittance.

    The debit account's bank code is written at positions 1-3 of every
    line of the file.
    """

    inscription_type: InscriptionType
    inscription_number: str
    name: str
    account: BankAccount
    agreement_code: str = ""
    bank_name: str = ""
    address: Address | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise MissingFieldError("Company name is required")
        if self.account is None:
            raise MissingFieldError("Company bank account is required")
        party = Party(self.inscription_type, self.inscription_number, self.name)
        object.__setattr__(self, "inscription_type", party.inscription_type)
        object.__setattr__(self, "inscription_number", party.inscription_number)

    @property
    def bank_code(self) -> str:
        return self.account.bank_code

    @property
    def party(self) -> Party:
        return Party(self.inscription_type, self.inscription_number, self.name)

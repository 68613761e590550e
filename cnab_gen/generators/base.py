"""Base generator class for all sample data generators."""

from __future__ import annotations

import random
from abc import ABC
from datetime import date, timedelta
from decimal import Decimal

from faker import Faker

from cnab_gen.generators.documents import generate_cnpj, generate_cpf
from cnab_gen.models.base import Address, BankAccount, Party
from cnab_gen.models.enums import InscriptionType

BANK_CODES = ["001", "033", "104", "237", "341", "260", "077", "756"]


class BaseGenerator(ABC):
    """Base class for all sample data generators.

    Provides common initialization (Faker instance creation and seed-based
    reproducibility) plus builders for the value types every payment
    needs.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``pt_BR``).
    reference_date : date | None
        Day payment dates are drawn after; today when omitted.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "pt_BR",
        reference_date: date | None = None,
    ) -> None:
        self.fake = Faker(locale)
        self.reference_date = reference_date or date.today()
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)

    def _person(self) -> Party:
        return Party(InscriptionType.CPF, generate_cpf(), self.fake.name())

    def _organization(self) -> Party:
        return Party(InscriptionType.CNPJ, generate_cnpj(), self.fake.company())

    def _account(self, bank_code: str | None = None) -> BankAccount:
        return BankAccount(
            bank_code=bank_code or random.choice(BANK_CODES),
            agency=str(random.randint(1, 9999)),
            agency_digit=str(random.randint(0, 9)),
            account=str(random.randint(10000, 99999999)),
            account_digit=str(random.randint(0, 9)),
        )

    def _address(self) -> Address:
        return Address(
            street=self.fake.street_name(),
            number=str(random.randint(1, 9999)),
            complement=random.choice(["", "", "SALA 1", "APTO 12", "FUNDOS"]),
            neighborhood=self.fake.bairro(),
            city=self.fake.city(),
            state=self.fake.estado_sigla(),
            postal_code=self.fake.postcode(formatted=False),
        )

    def _amount(self, low: float, high: float) -> Decimal:
        """Uniform amount between ``low`` and ``high``, rounded to cents."""
        value = random.uniform(low, high)
        return Decimal(str(round(value, 2)))

    def _payment_date(self, max_days: int = 30) -> date:
        return self.reference_date + timedelta(days=random.randint(0, max_days))

"""Company generator."""

from __future__ import annotations

import random

from cnab_gen.generators.base import BANK_CODES, BaseGenerator
from cnab_gen.generators.documents import generate_cnpj
from cnab_gen.models.company import Company
from cnab_gen.models.enums import InscriptionType

BANK_NAMES = {
    "001": "BANCO DO BRASIL S.A.",
    "033": "BANCO SANTANDER BRASIL S.A.",
    "104": "CAIXA ECONOMICA FEDERAL",
    "237": "BANCO BRADESCO S.A.",
    "341": "ITAU UNIBANCO S.A.",
    "260": "NU PAGAMENTOS S.A.",
    "077": "BANCO INTER S.A.",
    "756": "BANCO SICOOB S.A.",
}


class CompanyGenerator(BaseGenerator):
    """Generate synthetic paying companies."""

    def generate(self, bank_code: str | None = None) -> Company:
        """Generate a single company.

        Parameters
        ----------
        bank_code : str | None
            Bank holding the debit account; random when omitted.

        Returns
        -------
        Company
            Generated company with address and agreement code.
        """
        bank_code = bank_code or random.choice(BANK_CODES)
        return Company(
            inscription_type=InscriptionType.CNPJ,
            inscription_number=generate_cnpj(),
            name=self.fake.company(),
            account=self._account(bank_code),
            agreement_code=str(random.randint(100000, 99999999)),
            bank_name=BANK_NAMES.get(bank_code, ""),
            address=self._address(),
        )

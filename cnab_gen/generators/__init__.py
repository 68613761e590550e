"""Sample data generators (Faker, pt_BR locale)."""

from cnab_gen.generators.base import BaseGenerator
from cnab_gen.generators.company import CompanyGenerator
from cnab_gen.generators.documents import (
    generate_barcode,
    generate_cnpj,
    generate_cpf,
    is_valid_cnpj,
    is_valid_cpf,
)
from cnab_gen.generators.payments import (
    BatchGenerator,
    BoletoPaymentGenerator,
    PayrollPaymentGenerator,
    PixCodePaymentGenerator,
    SupplierPaymentGenerator,
    TaxPaymentGenerator,
)

__all__ = [
    "BaseGenerator",
    "BatchGenerator",
    "BoletoPaymentGenerator",
    "CompanyGenerator",
    "PayrollPaymentGenerator",
    "PixCodePaymentGenerator",
    "SupplierPaymentGenerator",
    "TaxPaymentGenerator",
    "generate_barcode",
    "generate_cnpj",
    "generate_cpf",
    "is_valid_cnpj",
    "is_valid_cpf",
]

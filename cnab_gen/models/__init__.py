"""Domain models for CNAB 240 remittance generation."""

from cnab_gen.models.base import Address, BankAccount, Party
from cnab_gen.models.batch import (
    LINE_LENGTH,
    Batch,
    BatchResult,
    EncodingResult,
    GenerationReport,
    Record,
    resolve_family,
)
from cnab_gen.models.company import Company
from cnab_gen.models.enums import (
    InscriptionType,
    PaymentFamily,
    PaymentForm,
    PixKeyType,
    RecordType,
    SegmentCode,
    ServiceType,
    TaxKind,
)
from cnab_gen.models.payments import (
    BoletoPayment,
    GareSupplement,
    Payment,
    PayrollPayment,
    PixCodePayment,
    PixKey,
    SupplierPayment,
    TaxPayment,
    Withholding,
)

__all__ = [
    "Address",
    "BankAccount",
    "Batch",
    "BatchResult",
    "BoletoPayment",
    "Company",
    "EncodingResult",
    "GareSupplement",
    "GenerationReport",
    "InscriptionType",
    "LINE_LENGTH",
    "Party",
    "Payment",
    "PaymentFamily",
    "PaymentForm",
    "PayrollPayment",
    "PixCodePayment",
    "PixKey",
    "PixKeyType",
    "Record",
    "RecordType",
    "SegmentCode",
    "ServiceType",
    "SupplierPayment",
    "TaxKind",
    "TaxPayment",
    "Withholding",
    "resolve_family",
]

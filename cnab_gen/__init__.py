"""cnab-gen: CNAB 240 remittance file encoder."""

from cnab_gen.config import CnabGenConfig, LayoutConfig, OutputConfig
from cnab_gen.exceptions import (
    CnabGenError,
    ConfigurationError,
    InvalidFieldError,
    MalformedRecordError,
    MissingFieldError,
    SinkError,
    UnsupportedVariantError,
)
from cnab_gen.models import (
    Address,
    BankAccount,
    Batch,
    BoletoPayment,
    Company,
    EncodingResult,
    GareSupplement,
    GenerationReport,
    Party,
    PayrollPayment,
    PixCodePayment,
    PixKey,
    SupplierPayment,
    TaxPayment,
    Withholding,
)
from cnab_gen.orchestrator import FileOrchestrator, generate_file
from cnab_gen.parsing import batch_from_dict, company_from_dict, request_from_dict
from cnab_gen.sinks import ConsoleSink, MemorySink, TextFileSink

__version__ = "0.1.0"

__all__ = [
    "Address",
    "BankAccount",
    "Batch",
    "BoletoPayment",
    "CnabGenConfig",
    "CnabGenError",
    "Company",
    "ConfigurationError",
    "ConsoleSink",
    "EncodingResult",
    "FileOrchestrator",
    "GareSupplement",
    "GenerationReport",
    "InvalidFieldError",
    "LayoutConfig",
    "MalformedRecordError",
    "MemorySink",
    "MissingFieldError",
    "OutputConfig",
    "Party",
    "PayrollPayment",
    "PixCodePayment",
    "PixKey",
    "SinkError",
    "SupplierPayment",
    "TaxPayment",
    "TextFileSink",
    "UnsupportedVariantError",
    "Withholding",
    "batch_from_dict",
    "company_from_dict",
    "generate_file",
    "request_from_dict",
]

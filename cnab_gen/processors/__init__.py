"""Batch processors, one per payment family."""

from cnab_gen.config import LayoutConfig
from cnab_gen.exceptions import UnsupportedVariantError
from cnab_gen.models.enums import PaymentFamily
from cnab_gen.processors.base import BatchProcessor
from cnab_gen.processors.boleto import BoletoProcessor, PixProcessor
from cnab_gen.processors.payroll import PayrollProcessor
from cnab_gen.processors.supplier import SupplierProcessor
from cnab_gen.processors.tax import TaxProcessor

PROCESSORS: dict[PaymentFamily, type[BatchProcessor]] = {
    PaymentFamily.SUPPLIER: SupplierProcessor,
    PaymentFamily.BOLETO: BoletoProcessor,
    PaymentFamily.PIX: PixProcessor,
    PaymentFamily.PAYROLL: PayrollProcessor,
    PaymentFamily.TAX: TaxProcessor,
}


def processor_for(family: PaymentFamily, layout: LayoutConfig | None = None) -> BatchProcessor:
    """Return a fresh processor for ``family``."""
    try:
        processor_cls = PROCESSORS[family]
    except KeyError as exc:
        raise UnsupportedVariantError(f"No processor for payment family {family!r}") from exc
    return processor_cls(layout)


__all__ = [
    "BatchProcessor",
    "BoletoProcessor",
    "PROCESSORS",
    "PayrollProcessor",
    "PixProcessor",
    "SupplierProcessor",
    "TaxProcessor",
    "processor_for",
]

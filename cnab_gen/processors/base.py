"""Base batch processor."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal

from cnab_gen.config import LayoutConfig
from cnab_gen.exceptions import MissingFieldError, UnsupportedVariantError
from cnab_gen.formatters import round_money
from cnab_gen.models.batch import Batch, BatchResult, Record
from cnab_gen.models.company import Company
from cnab_gen.models.enums import PaymentFamily
from cnab_gen.models.payments import Payment
from cnab_gen.records.batch import batch_header, batch_trailer

logger = logging.getLogger(__name__)


class BatchProcessor(ABC):
    """Encode one batch: header, detail segments and trailer.

    A processor instance keeps the running state of the batch being
    encoded: ``register_count`` (one per emitted segment) and
    ``total_amount`` (sum of the payments' principal amounts, rounded to
    cents). Both are reset at the start of every :meth:`process` call.

    Subclasses set ``family`` and ``payment_type`` and implement
    :meth:`emit`, which returns the segments of one payment in order.

    Parameters
    ----------
    layout : LayoutConfig | None
        Layout constants for the batch header.
    """

    family: PaymentFamily
    payment_type: type

    def __init__(self, layout: LayoutConfig | None = None) -> None:
        self.layout = layout or LayoutConfig()
        self.bank_code = ""
        self.batch_number = 0
        self.register_count = 0
        self.total_amount = Decimal("0")

    def next_register(self) -> int:
        """Advance and return the register number of the next segment."""
        self.register_count += 1
        return self.register_count

    def process(self, company: Company, batch: Batch, number: int) -> BatchResult:
        """Encode ``batch`` as batch ``number`` of the file."""
        if company is None:
            raise MissingFieldError("Company is required")
        if not batch.payments:
            raise MissingFieldError("Batch has no payments")

        self.bank_code = company.bank_code
        self.batch_number = number
        self.register_count = 0
        self.total_amount = Decimal("0")

        records: list[Record] = [
            batch_header(
                company,
                number,
                batch.service_type,
                batch.payment_form,
                message=batch.message,
                layout=self.layout,
            )
        ]
        for payment in batch.payments:
            if not isinstance(payment, self.payment_type):
                raise UnsupportedVariantError(
                    f"{type(self).__name__} cannot encode {type(payment).__name__}"
                )
            records.extend(self.emit(payment, batch))
            self.total_amount += round_money(payment.principal_amount)

        record_count = self.register_count + 2
        records.append(
            batch_trailer(self.bank_code, number, record_count, self.total_amount)
        )
        logger.debug(
            "Encoded %s batch %d: %d payments, %d records",
            self.family.value,
            number,
            len(batch.payments),
            record_count,
        )
        return BatchResult(number, self.family, records, self.total_amount)

    @abstractmethod
    def emit(self, payment: Payment, batch: Batch) -> list[Record]:
        """Return the detail segments of one payment."""

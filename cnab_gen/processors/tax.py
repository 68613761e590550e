"""Tax batches."""

from __future__ import annotations

from cnab_gen.models.batch import Batch, Record
from cnab_gen.models.enums import PaymentFamily
from cnab_gen.models.payments import TaxPayment
from cnab_gen.processors.base import BatchProcessor
from cnab_gen.records.tax import segment_n, segment_o, segment_w


class TaxProcessor(BatchProcessor):
    """Barcode taxes emit O then N (then W for GARE); others emit N alone."""

    family = PaymentFamily.TAX
    payment_type = TaxPayment

    def emit(self, payment: TaxPayment, batch: Batch) -> list[Record]:
        bank, number = self.bank_code, self.batch_number
        if not payment.barcode:
            return [segment_n(bank, number, self.next_register(), payment)]

        records = [
            segment_o(bank, number, self.next_register(), payment),
            segment_n(bank, number, self.next_register(), payment),
        ]
        if payment.is_gare:
            records.append(segment_w(bank, number, self.next_register(), payment))
        return records

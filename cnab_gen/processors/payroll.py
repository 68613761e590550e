"""Payroll batches."""

from __future__ import annotations

from cnab_gen.models.batch import Batch, Record
from cnab_gen.models.enums import PaymentFamily
from cnab_gen.models.payments import PayrollPayment
from cnab_gen.processors.base import BatchProcessor
from cnab_gen.records.payroll import segment_p, segment_q, segment_r
from cnab_gen.records.transfer import segment_c, segment_d


class PayrollProcessor(BatchProcessor):
    """P, Q and R for every employee, then C and D when their data is set."""

    family = PaymentFamily.PAYROLL
    payment_type = PayrollPayment

    def emit(self, payment: PayrollPayment, batch: Batch) -> list[Record]:
        bank, number = self.bank_code, self.batch_number
        records = [
            segment_p(bank, number, self.next_register(), payment),
            segment_q(bank, number, self.next_register(), payment),
            segment_r(bank, number, self.next_register(), payment),
        ]
        if payment.withholding is not None:
            records.append(segment_c(bank, number, self.next_register(), payment.withholding))
        if payment.history_message:
            records.append(segment_d(bank, number, self.next_register(), payment))
        return records

"""Supplier payments: segment A plus an optional segment B."""

from __future__ import annotations

from cnab_gen.models.batch import Batch, Record
from cnab_gen.models.enums import CLEARING_HOUSES, PaymentFamily
from cnab_gen.models.payments import SupplierPayment
from cnab_gen.processors.base import BatchProcessor
from cnab_gen.records.transfer import segment_a, segment_b_address, segment_b_pix


class SupplierProcessor(BatchProcessor):
    """Credit, DOC, TED and PIX-by-key transfers.

    Segment B follows segment A only when the payment carries an address
    or a PIX key; the PIX variant of B is used for the latter.
    """

    family = PaymentFamily.SUPPLIER
    payment_type = SupplierPayment

    def emit(self, payment: SupplierPayment, batch: Batch) -> list[Record]:
        clearing_house = CLEARING_HOUSES.get(batch.payment_form, "000")
        records = [
            segment_a(
                self.bank_code,
                self.batch_number,
                self.next_register(),
                payment,
                clearing_house=clearing_house,
            )
        ]
        if payment.pix is not None:
            records.append(
                segment_b_pix(self.bank_code, self.batch_number, self.next_register(), payment)
            )
        elif payment.address is not None:
            records.append(
                segment_b_address(
                    self.bank_code, self.batch_number, self.next_register(), payment
                )
            )
        return records

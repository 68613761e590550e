"""Boleto and PIX-by-code settlements (segment J family)."""

from __future__ import annotations

from cnab_gen.models.batch import Batch, Record
from cnab_gen.models.enums import PaymentFamily
from cnab_gen.models.payments import BoletoPayment, PixCodePayment
from cnab_gen.processors.base import BatchProcessor
from cnab_gen.records.boleto import segment_j, segment_j52, segment_j52_pix


class BoletoProcessor(BatchProcessor):
    """Segment J, followed by J-52 when payer or beneficiary data is present."""

    family = PaymentFamily.BOLETO
    payment_type = BoletoPayment

    def emit(self, payment: BoletoPayment, batch: Batch) -> list[Record]:
        records = [segment_j(self.bank_code, self.batch_number, self.next_register(), payment)]
        if payment.has_identities:
            records.append(
                segment_j52(self.bank_code, self.batch_number, self.next_register(), payment)
            )
        return records


class PixProcessor(BatchProcessor):
    """Segment J always followed by the PIX layout of J-52."""

    family = PaymentFamily.PIX
    payment_type = PixCodePayment

    def emit(self, payment: PixCodePayment, batch: Batch) -> list[Record]:
        return [
            segment_j(self.bank_code, self.batch_number, self.next_register(), payment),
            segment_j52_pix(self.bank_code, self.batch_number, self.next_register(), payment),
        ]

"""Tax segments: O (barcode), N (code based) and W (GARE supplement)."""

from __future__ import annotations

from cnab_gen.exceptions import MissingFieldError
from cnab_gen.formatters import alpha, date, money, numeric
from cnab_gen.models.batch import Record
from cnab_gen.models.enums import RecordType, SegmentCode
from cnab_gen.models.payments import GareSupplement, TaxPayment
from cnab_gen.records.base import (
    OCCURRENCES,
    assemble,
    blanks,
    detail_prefix,
    party_fields,
    require,
)
from cnab_gen.records.boleto import checked_barcode


def segment_o(
    bank_code: str,
    batch_number: int,
    register_number: int,
    payment: TaxPayment,
) -> Record:
    """Segment O: tax or utility paid by barcode."""
    barcode = checked_barcode(payment.barcode)
    require(payment.payment_date, "Payment date")

    parts = [
        detail_prefix(bank_code, batch_number, register_number, SegmentCode.O),
        "0",
        "00",
        barcode,
        alpha(payment.concessionaire_name, 30),
        date(payment.due_date or payment.payment_date),
        date(payment.payment_date),
        money(payment.total, 15),
        alpha(payment.your_number, 20),
        alpha(payment.our_number, 20),
        blanks(68),
        OCCURRENCES,
    ]
    return assemble(parts, RecordType.DETAIL, SegmentCode.O)


def segment_n(
    bank_code: str,
    batch_number: int,
    register_number: int,
    payment: TaxPayment,
) -> Record:
    """Segment N: tax identified by revenue code and taxpayer.

    When the payment has no barcode this segment is the only one emitted,
    so the taxpayer and revenue code become mandatory.
    """
    require(payment.payment_date, "Payment date")
    if not payment.barcode:
        if payment.taxpayer is None:
            raise MissingFieldError("Taxpayer identification is required without a barcode")
        require(payment.revenue_code, "Revenue code")
    taxpayer = payment.taxpayer

    parts = [
        detail_prefix(bank_code, batch_number, register_number, SegmentCode.N),
        "0",
        "00",
        alpha(payment.your_number, 20),
        alpha(payment.our_number, 20),
        alpha(taxpayer.name if taxpayer else "", 30),
        date(payment.payment_date),
        money(payment.total, 15),
        numeric(payment.revenue_code, 6),
        party_fields(taxpayer, 2, 14),
        numeric(payment.kind.value, 2),
        date(payment.assessment_period),
        alpha(payment.reference_number, 17),
        money(payment.amount, 15),
        money(payment.fine, 15),
        money(payment.interest, 15),
        date(payment.due_date),
        blanks(18),
        OCCURRENCES,
    ]
    return assemble(parts, RecordType.DETAIL, SegmentCode.N)


def segment_w(
    bank_code: str,
    batch_number: int,
    register_number: int,
    payment: TaxPayment,
) -> Record:
    """Segment W: GARE-SP state tax supplement."""
    gare: GareSupplement = require(payment.gare, "GARE supplement")
    require(gare.state_registration, "State registration")

    parts = [
        detail_prefix(bank_code, batch_number, register_number, SegmentCode.W),
        "0",
        "00",
        numeric(gare.state_registration, 12),
        alpha(gare.debt_registration, 13),
        date(gare.revenue_date),
        party_fields(payment.taxpayer, 1, 14),
        money(payment.amount, 15),
        money(payment.interest, 15),
        money(payment.fine, 15),
        money(gare.discount, 15),
        numeric(gare.reference_period, 6),
        blanks(99),
        OCCURRENCES,
    ]
    return assemble(parts, RecordType.DETAIL, SegmentCode.W)

"""Barcode settlement segments: J, J-52 and J-52 PIX."""

from __future__ import annotations

from cnab_gen.exceptions import InvalidFieldError, MissingFieldError
from cnab_gen.formatters import alpha, date, money, numeric
from cnab_gen.models.base import only_digits
from cnab_gen.models.batch import Record
from cnab_gen.models.enums import RecordType, SegmentCode
from cnab_gen.models.payments import BoletoPayment, PixCodePayment
from cnab_gen.records.base import (
    OCCURRENCES,
    assemble,
    blanks,
    detail_prefix,
    party_fields,
    require,
    zeros,
)
from cnab_gen.records.transfer import PIX_KEY_CHARS

BARCODE_LENGTH = 44
OPTIONAL_RECORD = "52"
CURRENCY_CODE = "09"


def checked_barcode(barcode: str | None) -> str:
    """Return the 44 barcode digits or raise."""
    require(barcode, "Barcode")
    digits = only_digits(barcode)
    if len(digits) != BARCODE_LENGTH:
        raise InvalidFieldError(
            f"Barcode must have {BARCODE_LENGTH} digits, got {len(digits)}"
        )
    return digits


def segment_j(
    bank_code: str,
    batch_number: int,
    register_number: int,
    payment: BoletoPayment | PixCodePayment,
) -> Record:
    """Segment J: barcode, due date and amounts of the document being paid."""
    barcode = checked_barcode(payment.barcode)
    require(payment.payment_date, "Payment date")

    parts = [
        detail_prefix(bank_code, batch_number, register_number, SegmentCode.J),
        "0",
        "00",
        barcode,
        alpha(payment.beneficiary_name, 30),
        date(payment.due_date or payment.payment_date),
        money(payment.amount, 15),
        money(payment.discount, 15),
        money(payment.surcharge, 15),
        date(payment.payment_date),
        money(payment.amount, 15),
        zeros(15),
        alpha(payment.your_number, 20),
        alpha(payment.our_number, 20),
        CURRENCY_CODE,
        blanks(6),
        OCCURRENCES,
    ]
    return assemble(parts, RecordType.DETAIL, SegmentCode.J)


def segment_j52(
    bank_code: str,
    batch_number: int,
    register_number: int,
    payment: BoletoPayment,
) -> Record:
    """Segment J-52: payer, beneficiary and drawer identification."""
    if not payment.has_identities:
        raise MissingFieldError("Segment J-52 needs payer or beneficiary identification")

    parts = [
        detail_prefix(bank_code, batch_number, register_number, SegmentCode.J),
        "0",
        "00",
        OPTIONAL_RECORD,
        party_fields(payment.payer, 1, 15, 40),
        party_fields(payment.beneficiary, 1, 15, 40),
        party_fields(payment.drawer, 1, 15, 40),
        blanks(53),
    ]
    return assemble(parts, RecordType.DETAIL, SegmentCode.J)


def segment_j52_pix(
    bank_code: str,
    batch_number: int,
    register_number: int,
    payment: PixCodePayment,
) -> Record:
    """Segment J-52 in its PIX layout: identities plus key and transaction id."""
    pix = require(payment.pix, "PIX key data")

    parts = [
        detail_prefix(bank_code, batch_number, register_number, SegmentCode.J),
        "0",
        "00",
        OPTIONAL_RECORD,
        party_fields(payment.payer, 1, 15),
        party_fields(payment.beneficiary, 1, 15),
        numeric(pix.key_type.value, 2),
        alpha(pix.key, 77, keep=PIX_KEY_CHARS),
        alpha(pix.tx_id, 35),
        alpha(pix.message, 65),
        OCCURRENCES,
    ]
    return assemble(parts, RecordType.DETAIL, SegmentCode.J)

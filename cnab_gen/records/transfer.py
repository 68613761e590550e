"""Transfer segments: A (routing), B (address or PIX complement), C and D."""

from __future__ import annotations

from cnab_gen.formatters import alpha, date, money, numeric
from cnab_gen.models.base import Address, BankAccount, Party
from cnab_gen.models.batch import Record
from cnab_gen.models.enums import RecordType, SegmentCode
from cnab_gen.models.payments import PayrollPayment, PixKey, SupplierPayment, Withholding
from cnab_gen.records.base import (
    OCCURRENCES,
    assemble,
    blanks,
    detail_prefix,
    party_fields,
    require,
    zeros,
)

CURRENCY = "BRL"
PIX_KEY_CHARS = "@.-+"


def account_fields(account: BankAccount | None) -> str:
    """Bank, agency and account block (23 characters)."""
    if account is None:
        return zeros(3) + zeros(5) + blanks(1) + zeros(12) + blanks(1) + blanks(1)
    return (
        numeric(account.bank_code, 3)
        + numeric(account.agency, 5)
        + alpha(account.agency_digit, 1)
        + numeric(account.account, 12)
        + alpha(account.account_digit, 1)
        + alpha(account.account_agency_digit, 1)
    )


def segment_a(
    bank_code: str,
    batch_number: int,
    register_number: int,
    payment: SupplierPayment,
    clearing_house: str = "000",
) -> Record:
    """Segment A: beneficiary routing, amount and purpose codes."""
    require(payment.beneficiary.name, "Beneficiary name")
    require(payment.payment_date, "Payment date")

    parts = [
        detail_prefix(bank_code, batch_number, register_number, SegmentCode.A),
        "0",
        "00",
        numeric(clearing_house, 3),
        account_fields(payment.account),
        alpha(payment.beneficiary.name, 30),
        alpha(payment.your_number, 20),
        date(payment.payment_date),
        CURRENCY,
        zeros(15),
        money(payment.amount, 15),
        alpha(payment.our_number, 20),
        zeros(8),
        zeros(15),
        alpha(payment.information, 40),
        alpha(payment.doc_purpose, 2),
        alpha(payment.ted_purpose, 5),
        alpha(payment.complementary_purpose, 2),
        blanks(3),
        numeric(payment.notice, 1),
        OCCURRENCES,
    ]
    return assemble(parts, RecordType.DETAIL, SegmentCode.A)


def segment_b_address(
    bank_code: str,
    batch_number: int,
    register_number: int,
    payment: SupplierPayment,
) -> Record:
    """Segment B carrying the beneficiary address."""
    address: Address = require(payment.address, "Beneficiary address")
    beneficiary: Party = payment.beneficiary

    parts = [
        detail_prefix(bank_code, batch_number, register_number, SegmentCode.B),
        blanks(3),
        party_fields(beneficiary, 1, 14),
        alpha(address.street, 30),
        numeric(address.number, 5),
        alpha(address.complement, 15),
        alpha(address.neighborhood, 15),
        alpha(address.city, 20),
        numeric(address.postal_prefix, 5),
        numeric(address.postal_suffix, 3),
        alpha(address.state, 2),
        date(payment.payment_date),
        money(payment.amount, 15),
        zeros(15),
        zeros(15),
        zeros(15),
        zeros(15),
        blanks(15),
        numeric(payment.notice, 1),
        zeros(6),
        numeric(payment.ispb, 8),
    ]
    return assemble(parts, RecordType.DETAIL, SegmentCode.B)


def segment_b_pix(
    bank_code: str,
    batch_number: int,
    register_number: int,
    payment: SupplierPayment,
) -> Record:
    """Segment B carrying the PIX key of a transfer by key."""
    pix: PixKey = require(payment.pix, "PIX key data")

    parts = [
        detail_prefix(bank_code, batch_number, register_number, SegmentCode.B),
        alpha(pix.key_type.value, 3),
        party_fields(payment.beneficiary, 1, 14),
        alpha(pix.tx_id, 35),
        alpha(pix.message or payment.information, 60),
        alpha(pix.key, 99, keep=PIX_KEY_CHARS),
        zeros(6),
        numeric(payment.ispb, 8),
    ]
    return assemble(parts, RecordType.DETAIL, SegmentCode.B)


def segment_c(
    bank_code: str,
    batch_number: int,
    register_number: int,
    withholding: Withholding,
) -> Record:
    """Segment C: payroll withholding complement."""
    require(withholding, "Withholding data")

    parts = [
        detail_prefix(bank_code, batch_number, register_number, SegmentCode.C),
        blanks(3),
        money(withholding.income_tax, 15),
        money(withholding.iss, 15),
        money(withholding.inss, 15),
        money(withholding.fgts, 15),
        money(withholding.discounts, 15),
        money(withholding.additions, 15),
        money(withholding.net_amount, 15),
        blanks(108),
        OCCURRENCES,
    ]
    return assemble(parts, RecordType.DETAIL, SegmentCode.C)


def segment_d(
    bank_code: str,
    batch_number: int,
    register_number: int,
    payment: PayrollPayment,
) -> Record:
    """Segment D: free-text credit history shown on the employee statement."""
    require(payment.history_message, "History message")

    parts = [
        detail_prefix(bank_code, batch_number, register_number, SegmentCode.D),
        blanks(3),
        numeric(payment.history_code, 2),
        alpha(payment.history_message, 200),
        blanks(11),
        OCCURRENCES,
    ]
    return assemble(parts, RecordType.DETAIL, SegmentCode.D)

"""Payroll segments: P (routing), Q (identity and address), R (schedule)."""

from __future__ import annotations

from cnab_gen.formatters import alpha, date, money, numeric
from cnab_gen.models.base import Party
from cnab_gen.models.batch import Record
from cnab_gen.models.enums import RecordType, SegmentCode
from cnab_gen.models.payments import PayrollPayment
from cnab_gen.records.base import (
    OCCURRENCES,
    assemble,
    blanks,
    detail_prefix,
    party_fields,
    require,
    zeros,
)
from cnab_gen.records.transfer import CURRENCY, account_fields

MOVEMENT = "01"


def segment_p(
    bank_code: str,
    batch_number: int,
    register_number: int,
    payment: PayrollPayment,
) -> Record:
    """Segment P: employee bank routing and amount."""
    require(payment.employee.name, "Employee name")
    require(payment.payment_date, "Payment date")

    parts = [
        detail_prefix(bank_code, batch_number, register_number, SegmentCode.P),
        MOVEMENT,
        account_fields(payment.account),
        alpha(payment.employee.name, 30),
        alpha(payment.registration, 20),
        date(payment.payment_date),
        CURRENCY,
        zeros(15),
        money(payment.amount, 15),
        alpha(payment.our_number, 20),
        zeros(8),
        zeros(15),
        blanks(57),
        OCCURRENCES,
    ]
    return assemble(parts, RecordType.DETAIL, SegmentCode.P)


def segment_q(
    bank_code: str,
    batch_number: int,
    register_number: int,
    payment: PayrollPayment,
    drawer: Party | None = None,
) -> Record:
    """Segment Q: employee identification and address.

    Without an address the address block is blank, the CEP zero-filled.
    """
    employee = payment.employee
    address = payment.address
    if address is None:
        address_block = blanks(40) + blanks(15) + zeros(5) + zeros(3) + blanks(15) + blanks(2)
    else:
        street = " ".join(
            part for part in (address.street, address.number, address.complement) if part
        )
        address_block = (
            alpha(street, 40)
            + alpha(address.neighborhood, 15)
            + numeric(address.postal_prefix, 5)
            + numeric(address.postal_suffix, 3)
            + alpha(address.city, 15)
            + alpha(address.state, 2)
        )

    parts = [
        detail_prefix(bank_code, batch_number, register_number, SegmentCode.Q),
        MOVEMENT,
        party_fields(employee, 1, 15, 40),
        address_block,
        party_fields(drawer, 1, 15, 40),
        blanks(22),
        OCCURRENCES,
    ]
    return assemble(parts, RecordType.DETAIL, SegmentCode.Q)


def _schedule(amount, when) -> str:
    if not amount:
        return "0" + zeros(8) + zeros(15)
    return "1" + date(when) + money(amount, 15)


def segment_r(
    bank_code: str,
    batch_number: int,
    register_number: int,
    payment: PayrollPayment,
) -> Record:
    """Segment R: discount and fine schedule; unused entries are zero-filled."""
    parts = [
        detail_prefix(bank_code, batch_number, register_number, SegmentCode.R),
        MOVEMENT,
        _schedule(payment.discount_amount, payment.discount_date),
        _schedule(None, None),
        _schedule(payment.fine_amount, payment.fine_date),
        blanks(10),
        blanks(40),
        blanks(40),
        blanks(20),
        zeros(8),
        zeros(3),
        zeros(5),
        blanks(1),
        zeros(12),
        blanks(1),
        blanks(1),
        "0",
        OCCURRENCES,
    ]
    return assemble(parts, RecordType.DETAIL, SegmentCode.R)

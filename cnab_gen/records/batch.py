"""Batch header (type 1) and batch trailer (type 5)."""

from __future__ import annotations

from decimal import Decimal

from cnab_gen.config import LayoutConfig
from cnab_gen.formatters import alpha, money, numeric
from cnab_gen.models.batch import Record
from cnab_gen.models.company import Company
from cnab_gen.models.enums import RecordType
from cnab_gen.records.base import OCCURRENCES, assemble, blanks, require, zeros
from cnab_gen.records.file import company_account_fields

CREDIT_OPERATION = "C"
PAYMENT_INDICATOR = "01"


def _company_address(company: Company) -> str:
    address = company.address
    if address is None:
        return blanks(30) + zeros(5) + blanks(15) + blanks(20) + zeros(5) + zeros(3) + blanks(2)
    return (
        alpha(address.street, 30)
        + numeric(address.number, 5)
        + alpha(address.complement, 15)
        + alpha(address.city, 20)
        + numeric(address.postal_prefix, 5)
        + numeric(address.postal_suffix, 3)
        + alpha(address.state, 2)
    )


def batch_header(
    company: Company,
    batch_number: int,
    service_type: str,
    payment_form: str,
    message: str = "",
    layout: LayoutConfig | None = None,
) -> Record:
    """Build the header of batch ``batch_number``."""
    layout = layout or LayoutConfig()
    require(company, "Company")
    require(service_type, "Batch service type")
    require(payment_form, "Batch payment form")

    parts = [
        numeric(company.bank_code, 3),
        numeric(batch_number, 4),
        RecordType.BATCH_HEADER.value,
        CREDIT_OPERATION,
        numeric(service_type, 2),
        numeric(payment_form, 2),
        numeric(layout.batch_layout_version, 3),
        blanks(1),
        company_account_fields(company),
        alpha(message, 40),
        _company_address(company),
        PAYMENT_INDICATOR,
        blanks(6),
        OCCURRENCES,
    ]
    return assemble(parts, RecordType.BATCH_HEADER)


def batch_trailer(
    bank_code: str, batch_number: int, record_count: int, total_amount: Decimal
) -> Record:
    """Build the batch trailer.

    ``record_count`` counts the batch header, the detail segments and this
    trailer; ``total_amount`` is the sum of the payment principal amounts.
    """
    parts = [
        numeric(bank_code, 3),
        numeric(batch_number, 4),
        RecordType.BATCH_TRAILER.value,
        blanks(9),
        numeric(record_count, 6),
        money(total_amount, 18),
        zeros(18),
        zeros(6),
        blanks(165),
        OCCURRENCES,
    ]
    return assemble(parts, RecordType.BATCH_TRAILER)

"""File header (type 0) and file trailer (type 9)."""

from __future__ import annotations

from datetime import datetime

from cnab_gen.config import LayoutConfig
from cnab_gen.formatters import alpha, date, numeric
from cnab_gen.models.batch import Record
from cnab_gen.models.company import Company
from cnab_gen.models.enums import RecordType
from cnab_gen.records.base import assemble, blanks, require, zeros

FILE_BATCH_CODE = "0000"
TRAILER_BATCH_CODE = "9999"
REMITTANCE = "1"


def company_account_fields(company: Company) -> str:
    """Positions 18-102 shared by the file and batch headers."""
    account = company.account
    return (
        numeric(company.inscription_type.value, 1)
        + numeric(company.inscription_number, 14)
        + alpha(company.agreement_code, 20)
        + numeric(account.agency, 5)
        + alpha(account.agency_digit, 1)
        + numeric(account.account, 12)
        + alpha(account.account_digit, 1)
        + alpha(account.account_agency_digit, 1)
        + alpha(company.name, 30)
    )


def file_header(
    company: Company, generated_at: datetime, layout: LayoutConfig | None = None
) -> Record:
    """Build the file header.

    Parameters
    ----------
    company : Company
        Company issuing the remittance.
    generated_at : datetime
        Generation timestamp written at positions 144-157.
    layout : LayoutConfig, optional
        Layout version, density and file sequence; defaults apply when omitted.

    Returns
    -------
    Record
        The 240-character header line.
    """
    layout = layout or LayoutConfig()
    require(company, "Company")
    require(company.bank_code, "Company bank code")
    require(generated_at, "Generation timestamp")

    parts = [
        numeric(company.bank_code, 3),
        FILE_BATCH_CODE,
        RecordType.FILE_HEADER.value,
        blanks(9),
        company_account_fields(company),
        alpha(company.bank_name or layout.default_bank_name, 30),
        blanks(10),
        REMITTANCE,
        date(generated_at),
        generated_at.strftime("%H%M%S"),
        numeric(layout.file_sequence, 6),
        numeric(layout.file_layout_version, 3),
        numeric(layout.recording_density, 5),
        blanks(20),
        blanks(20),
        blanks(29),
    ]
    return assemble(parts, RecordType.FILE_HEADER)


def file_trailer(bank_code: str, batch_count: int, record_count: int) -> Record:
    """Build the file trailer; ``record_count`` includes header and trailer."""
    require(bank_code, "Bank code")
    parts = [
        numeric(bank_code, 3),
        TRAILER_BATCH_CODE,
        RecordType.FILE_TRAILER.value,
        blanks(9),
        numeric(batch_count, 6),
        numeric(record_count, 6),
        zeros(6),
        blanks(205),
    ]
    return assemble(parts, RecordType.FILE_TRAILER)

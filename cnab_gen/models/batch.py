"""Batch input model and encoding results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

from cnab_gen.exceptions import MalformedRecordError, MissingFieldError, UnsupportedVariantError
from cnab_gen.models.enums import (
    BOLETO_FORMS,
    PaymentFamily,
    PaymentForm,
    RecordType,
    SegmentCode,
    ServiceType,
)
from cnab_gen.models.payments import Payment

LINE_LENGTH = 240


def resolve_family(service_type: str, payment_form: str) -> PaymentFamily:
    """Map a (service type, payment form) pair to the payment family.

    Raises
    ------
    UnsupportedVariantError
        If the service type is not one of the supported codes.
    """
    try:
        service = ServiceType(service_type)
    except ValueError as exc:
        raise UnsupportedVariantError(f"Unsupported service type: {service_type!r}") from exc

    if service is ServiceType.PAYROLL:
        return PaymentFamily.PAYROLL
    if service is ServiceType.TAXES:
        return PaymentFamily.TAX
    if payment_form in BOLETO_FORMS:
        return PaymentFamily.BOLETO
    if service is ServiceType.MISCELLANEOUS and payment_form == PaymentForm.PIX_QR_CODE:
        return PaymentFamily.PIX
    return PaymentFamily.SUPPLIER


@dataclass
class Batch:
    """Ordered payments of one service type, encoded as one CNAB batch."""

    service_type: str
    payment_form: str
    payments: list[Payment] = field(default_factory=list)
    message: str = ""

    def __post_init__(self) -> None:
        if not self.service_type:
            raise MissingFieldError("Batch service type is required")
        if not self.payment_form:
            raise MissingFieldError("Batch payment form is required")
        # Accept enum members as well as raw codes
        self.service_type = getattr(self.service_type, "value", self.service_type)
        self.payment_form = getattr(self.payment_form, "value", self.payment_form)

    @property
    def family(self) -> PaymentFamily:
        return resolve_family(self.service_type, self.payment_form)


@dataclass(frozen=True)
class Record:
    """One 240-character line of the file."""

    line: str
    record_type: RecordType
    segment: SegmentCode | None = None

    def __post_init__(self) -> None:
        if len(self.line) != LINE_LENGTH:
            label = self.segment.value if self.segment else self.record_type.name
            raise MalformedRecordError(
                f"Record {label} has {len(self.line)} characters (expected {LINE_LENGTH})"
            )

    def __str__(self) -> str:
        return self.line


@dataclass
class BatchResult:
    """Lines produced for one batch, header and trailer included."""

    number: int
    family: PaymentFamily
    records: list[Record]
    total_amount: Decimal

    @property
    def lines(self) -> list[str]:
        return [record.line for record in self.records]

    @property
    def record_count(self) -> int:
        return len(self.records)

    @property
    def detail_count(self) -> int:
        return self.record_count - 2


@dataclass
class EncodingResult:
    """Complete file: ordered records plus the counters written in the trailer."""

    records: list[Record]
    batches: list[BatchResult]
    generated_at: datetime

    @property
    def lines(self) -> list[str]:
        return [record.line for record in self.records]

    @property
    def content(self) -> str:
        """Lines joined with a single newline, no trailing terminator."""
        return "\n".join(self.lines)

    @property
    def batch_count(self) -> int:
        return len(self.batches)

    @property
    def record_count(self) -> int:
        return len(self.records)

    @property
    def total_amount(self) -> Decimal:
        return sum((batch.total_amount for batch in self.batches), Decimal("0"))

    def byte_size(self, encoding: str = "latin-1") -> int:
        return len(self.content.encode(encoding, errors="replace"))

    def summary(self, encoding: str = "latin-1") -> dict[str, Any]:
        """Statistics returned to the caller alongside the file."""
        return {
            "batch_count": self.batch_count,
            "record_count": self.record_count,
            "byte_size": self.byte_size(encoding),
            "batches": [
                {
                    "number": batch.number,
                    "family": batch.family.value,
                    "record_count": batch.record_count,
                    "total_amount": str(batch.total_amount),
                }
                for batch in self.batches
            ],
        }


@dataclass
class GenerationReport:
    """Outcome of encoding a file and handing it to a sink."""

    result: EncodingResult
    location: Path | str
    byte_size: int

    @property
    def filename(self) -> str:
        return Path(str(self.location)).name

    def to_dict(self) -> dict[str, Any]:
        data = self.result.summary()
        data.update({"file": self.filename, "location": str(self.location), "byte_size": self.byte_size})
        return data

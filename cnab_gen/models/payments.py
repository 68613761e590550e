"""Payment models, one dataclass per payment family.

``Payment`` is a tagged union: every variant exposes ``family`` and
``principal_amount`` and the batch processors dispatch on the concrete
type rather than probing for attributes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Union

from cnab_gen.exceptions import InvalidFieldError, MissingFieldError, UnsupportedVariantError
from cnab_gen.formatters import to_decimal
from cnab_gen.models.base import Address, BankAccount, Party
from cnab_gen.models.enums import PaymentFamily, PixKeyType, TaxKind

ZERO = Decimal("0")


def _coerce_amount(obj: Any, name: str, required: bool = False) -> None:
    """Normalize a monetary attribute of a frozen dataclass to ``Decimal``."""
    value = getattr(obj, name)
    if value is None:
        if required:
            raise MissingFieldError(f"{type(obj).__name__}.{name} is required")
        return
    amount = to_decimal(value)
    if amount is None:
        raise InvalidFieldError(f"{type(obj).__name__}.{name} is not a number: {value!r}")
    if amount < 0:
        raise InvalidFieldError(f"{type(obj).__name__}.{name} cannot be negative: {value}")
    object.__setattr__(obj, name, amount)


@dataclass(frozen=True)
class PixKey:
    """Instant-transfer (PIX) addressing data."""

    key_type: PixKeyType
    key: str
    tx_id: str = ""
    message: str = ""

    def __post_init__(self) -> None:
        if not self.key:
            raise MissingFieldError("PIX key is required")
        try:
            object.__setattr__(self, "key_type", PixKeyType(self.key_type))
        except ValueError as exc:
            raise UnsupportedVariantError(f"Unknown PIX key type: {self.key_type!r}") from exc


@dataclass(frozen=True)
class SupplierPayment:
    """Credit, DOC, TED or PIX-by-key payment to a beneficiary (segments A/B)."""

    beneficiary: Party
    payment_date: date
    amount: Decimal
    account: BankAccount | None = None
    your_number: str = ""
    our_number: str = ""
    information: str = ""
    doc_purpose: str = ""
    ted_purpose: str = ""
    complementary_purpose: str = ""
    notice: str = "0"
    ispb: str = ""
    address: Address | None = None
    pix: PixKey | None = None

    family = PaymentFamily.SUPPLIER

    def __post_init__(self) -> None:
        _coerce_amount(self, "amount", required=True)
        if self.beneficiary is None:
            raise MissingFieldError("Supplier payment beneficiary is required")
        if self.address is not None and self.pix is not None:
            raise InvalidFieldError("A supplier payment carries either an address or a PIX key")
        if self.account is None and self.pix is None:
            raise MissingFieldError("Supplier payment needs a bank account or a PIX key")

    @property
    def principal_amount(self) -> Decimal:
        return self.amount

    @property
    def needs_complement(self) -> bool:
        """Whether a segment B follows the segment A."""
        return self.address is not None or self.pix is not None


@dataclass(frozen=True)
class _BarcodePayment:
    """Fields shared by payments identified by a 44-digit barcode."""

    barcode: str
    beneficiary_name: str
    payment_date: date
    amount: Decimal
    due_date: date | None = None
    discount: Decimal = ZERO
    surcharge: Decimal = ZERO
    your_number: str = ""
    our_number: str = ""
    payer: Party | None = None
    beneficiary: Party | None = None

    def __post_init__(self) -> None:
        _coerce_amount(self, "amount", required=True)
        _coerce_amount(self, "discount")
        _coerce_amount(self, "surcharge")

    @property
    def principal_amount(self) -> Decimal:
        return self.amount


@dataclass(frozen=True)
class BoletoPayment(_BarcodePayment):
    """Boleto settlement (segments J and J-52)."""

    drawer: Party | None = None

    family = PaymentFamily.BOLETO

    @property
    def has_identities(self) -> bool:
        """Whether payer or beneficiary identification was supplied."""
        return self.payer is not None or self.beneficiary is not None


@dataclass(frozen=True)
class PixCodePayment(_BarcodePayment):
    """PIX payment initiated from a payment code (segments J and J-52 PIX)."""

    pix: PixKey | None = None

    family = PaymentFamily.PIX

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.pix is None:
            raise MissingFieldError("PIX payment by code requires PIX key data")


@dataclass(frozen=True)
class Withholding:
    """Payroll withholding figures written in segment C."""

    income_tax: Decimal = ZERO
    iss: Decimal = ZERO
    inss: Decimal = ZERO
    fgts: Decimal = ZERO
    discounts: Decimal = ZERO
    additions: Decimal = ZERO
    net_amount: Decimal = ZERO

    def __post_init__(self) -> None:
        for name in ("income_tax", "iss", "inss", "fgts", "discounts", "additions", "net_amount"):
            _coerce_amount(self, name)


@dataclass(frozen=True)
class PayrollPayment:
    """Salary payment to an employee (segments P, Q, R, optionally C and D)."""

    employee: Party
    account: BankAccount
    amount: Decimal
    payment_date: date
    address: Address | None = None
    registration: str = ""
    our_number: str = ""
    withholding: Withholding | None = None
    history_code: int = 0
    history_message: str = ""
    discount_amount: Decimal | None = None
    discount_date: date | None = None
    fine_amount: Decimal | None = None
    fine_date: date | None = None

    family = PaymentFamily.PAYROLL

    def __post_init__(self) -> None:
        _coerce_amount(self, "amount", required=True)
        _coerce_amount(self, "discount_amount")
        _coerce_amount(self, "fine_amount")
        if self.employee is None:
            raise MissingFieldError("Payroll payment employee is required")
        if self.account is None:
            raise MissingFieldError("Payroll payment bank account is required")

    @property
    def principal_amount(self) -> Decimal:
        return self.amount


@dataclass(frozen=True)
class GareSupplement:
    """State tax (GARE-SP) data written in segment W."""

    state_registration: str
    debt_registration: str = ""
    revenue_date: date | None = None
    reference_period: str = ""
    discount: Decimal = ZERO

    def __post_init__(self) -> None:
        _coerce_amount(self, "discount")


@dataclass(frozen=True)
class TaxPayment:
    """Tax payment, either barcode based (O+N[+W]) or code based (N)."""

    kind: TaxKind
    amount: Decimal
    payment_date: date
    barcode: str | None = None
    concessionaire_name: str = ""
    fine: Decimal = ZERO
    interest: Decimal = ZERO
    revenue_code: str = ""
    taxpayer: Party | None = None
    assessment_period: date | None = None
    reference_number: str = ""
    due_date: date | None = None
    your_number: str = ""
    our_number: str = ""
    gare: GareSupplement | None = None

    family = PaymentFamily.TAX

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "kind", TaxKind(self.kind))
        except ValueError as exc:
            raise UnsupportedVariantError(f"Unsupported tax kind: {self.kind!r}") from exc
        _coerce_amount(self, "amount", required=True)
        _coerce_amount(self, "fine")
        _coerce_amount(self, "interest")

    @property
    def total(self) -> Decimal:
        """Principal plus fine plus interest."""
        return self.amount + self.fine + self.interest

    @property
    def principal_amount(self) -> Decimal:
        """Amount summed by the batch trailer; fine and interest are left out."""
        return self.amount

    @property
    def is_gare(self) -> bool:
        return self.kind is TaxKind.GARE


Payment = Union[SupplierPayment, BoletoPayment, PixCodePayment, PayrollPayment, TaxPayment]

PAYMENT_TYPES: dict[PaymentFamily, type] = {
    PaymentFamily.SUPPLIER: SupplierPayment,
    PaymentFamily.BOLETO: BoletoPayment,
    PaymentFamily.PIX: PixCodePayment,
    PaymentFamily.PAYROLL: PayrollPayment,
    PaymentFamily.TAX: TaxPayment,
}

__all__ = [
    "BoletoPayment",
    "GareSupplement",
    "PAYMENT_TYPES",
    "Payment",
    "PayrollPayment",
    "PixCodePayment",
    "PixKey",
    "SupplierPayment",
    "TaxPayment",
    "Withholding",
]

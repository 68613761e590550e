"""Build typed models from plain nested dicts.

This is the shape a request layer (HTTP body, JSON file) delivers::

    {
        "company": {"inscription_type": "2", "inscription_number": "...",
                    "name": "...", "account": {...}, "address": {...}},
        "batches": [
            {"service_type": "20", "payment_form": "01",
             "payments": [{"beneficiary": {...}, "account": {...}, ...}]}
        ]
    }
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from cnab_gen.exceptions import CnabGenError, InvalidFieldError, MissingFieldError
from cnab_gen.models.base import Address, BankAccount, Party
from cnab_gen.models.batch import Batch
from cnab_gen.models.company import Company
from cnab_gen.models.enums import PaymentFamily
from cnab_gen.models.payments import (
    BoletoPayment,
    GareSupplement,
    Payment,
    PayrollPayment,
    PixCodePayment,
    PixKey,
    SupplierPayment,
    TaxPayment,
    Withholding,
)


def _require(data: dict[str, Any], key: str, context: str) -> Any:
    value = data.get(key)
    if value is None or value == "":
        raise MissingFieldError(f"{context}.{key} is required")
    return value


def _text(data: dict[str, Any], *keys: str) -> dict[str, str]:
    """Copy the optional text fields present in ``data``."""
    return {key: str(data[key]) for key in keys if data.get(key) is not None}


def parse_decimal(value: Any) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise InvalidFieldError(f"Not a valid amount: {value!r}") from exc


def parse_int(value: Any, default: int = 0) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidFieldError(f"Not a valid integer: {value!r}") from exc


def parse_date(value: Any) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError as exc:
        raise InvalidFieldError(f"Not a valid ISO date: {value!r}") from exc


def _amounts(data: dict[str, Any], *keys: str) -> dict[str, Decimal]:
    result = {}
    for key in keys:
        amount = parse_decimal(data.get(key))
        if amount is not None:
            result[key] = amount
    return result


def _dates(data: dict[str, Any], *keys: str) -> dict[str, date]:
    result = {}
    for key in keys:
        parsed = parse_date(data.get(key))
        if parsed is not None:
            result[key] = parsed
    return result


def party_from_dict(data: dict[str, Any] | None, context: str = "party") -> Party | None:
    if not data:
        return None
    return Party(
        inscription_type=str(_require(data, "inscription_type", context)),
        inscription_number=str(_require(data, "inscription_number", context)),
        name=str(data.get("name") or ""),
    )


def account_from_dict(data: dict[str, Any] | None) -> BankAccount | None:
    if not data:
        return None
    return BankAccount(
        bank_code=str(_require(data, "bank_code", "account")),
        agency=str(_require(data, "agency", "account")),
        account=str(_require(data, "account", "account")),
        **_text(data, "agency_digit", "account_digit", "account_agency_digit"),
    )


def address_from_dict(data: dict[str, Any] | None) -> Address | None:
    if not data:
        return None
    return Address(
        street=str(_require(data, "street", "address")),
        city=str(_require(data, "city", "address")),
        state=str(_require(data, "state", "address")),
        postal_code=str(_require(data, "postal_code", "address")),
        **_text(data, "number", "complement", "neighborhood"),
    )


def pix_from_dict(data: dict[str, Any] | None) -> PixKey | None:
    if not data:
        return None
    return PixKey(
        key_type=str(_require(data, "key_type", "pix")),
        key=str(_require(data, "key", "pix")),
        **_text(data, "tx_id", "message"),
    )


def company_from_dict(data: dict[str, Any] | None) -> Company:
    """Build the :class:`Company` issuing the file."""
    if not data:
        raise MissingFieldError("Company is required")
    account = account_from_dict(data.get("account"))
    if account is None:
        raise MissingFieldError("company.account is required")
    return Company(
        inscription_type=str(_require(data, "inscription_type", "company")),
        inscription_number=str(_require(data, "inscription_number", "company")),
        name=str(_require(data, "name", "company")),
        account=account,
        address=address_from_dict(data.get("address")),
        **_text(data, "agreement_code", "bank_name"),
    )


def _supplier(data: dict[str, Any]) -> SupplierPayment:
    beneficiary = party_from_dict(_require(data, "beneficiary", "payment"), "beneficiary")
    return SupplierPayment(
        beneficiary=beneficiary,
        payment_date=parse_date(_require(data, "payment_date", "payment")),
        amount=parse_decimal(_require(data, "amount", "payment")),
        account=account_from_dict(data.get("account")),
        address=address_from_dict(data.get("address")),
        pix=pix_from_dict(data.get("pix")),
        **_text(
            data,
            "your_number",
            "our_number",
            "information",
            "doc_purpose",
            "ted_purpose",
            "complementary_purpose",
            "notice",
            "ispb",
        ),
    )


def _barcode_kwargs(data: dict[str, Any]) -> dict[str, Any]:
    return {
        "barcode": str(_require(data, "barcode", "payment")),
        "beneficiary_name": str(data.get("beneficiary_name") or ""),
        "payment_date": parse_date(_require(data, "payment_date", "payment")),
        "amount": parse_decimal(_require(data, "amount", "payment")),
        "payer": party_from_dict(data.get("payer"), "payer"),
        "beneficiary": party_from_dict(data.get("beneficiary"), "beneficiary"),
        **_dates(data, "due_date"),
        **_amounts(data, "discount", "surcharge"),
        **_text(data, "your_number", "our_number"),
    }


def _boleto(data: dict[str, Any]) -> BoletoPayment:
    return BoletoPayment(
        drawer=party_from_dict(data.get("drawer"), "drawer"), **_barcode_kwargs(data)
    )


def _pix_code(data: dict[str, Any]) -> PixCodePayment:
    pix = pix_from_dict(data.get("pix"))
    if pix is None:
        raise MissingFieldError("payment.pix is required for PIX payments by code")
    return PixCodePayment(pix=pix, **_barcode_kwargs(data))


def _payroll(data: dict[str, Any]) -> PayrollPayment:
    account = account_from_dict(data.get("account"))
    if account is None:
        raise MissingFieldError("payment.account is required")
    withholding_data = data.get("withholding")
    withholding = None
    if withholding_data:
        withholding = Withholding(
            **_amounts(
                withholding_data,
                "income_tax",
                "iss",
                "inss",
                "fgts",
                "discounts",
                "additions",
                "net_amount",
            )
        )
    return PayrollPayment(
        employee=party_from_dict(_require(data, "employee", "payment"), "employee"),
        account=account,
        amount=parse_decimal(_require(data, "amount", "payment")),
        payment_date=parse_date(_require(data, "payment_date", "payment")),
        address=address_from_dict(data.get("address")),
        withholding=withholding,
        history_code=parse_int(data.get("history_code")),
        **_text(data, "registration", "our_number", "history_message"),
        **_amounts(data, "discount_amount", "fine_amount"),
        **_dates(data, "discount_date", "fine_date"),
    )


def _tax(data: dict[str, Any]) -> TaxPayment:
    gare_data = data.get("gare")
    gare = None
    if gare_data:
        gare = GareSupplement(
            state_registration=str(_require(gare_data, "state_registration", "gare")),
            **_text(gare_data, "debt_registration", "reference_period"),
            **_dates(gare_data, "revenue_date"),
            **_amounts(gare_data, "discount"),
        )
    return TaxPayment(
        kind=str(_require(data, "kind", "payment")),
        amount=parse_decimal(_require(data, "amount", "payment")),
        payment_date=parse_date(_require(data, "payment_date", "payment")),
        barcode=data.get("barcode") or None,
        taxpayer=party_from_dict(data.get("taxpayer"), "taxpayer"),
        gare=gare,
        **_text(
            data,
            "concessionaire_name",
            "revenue_code",
            "reference_number",
            "your_number",
            "our_number",
        ),
        **_amounts(data, "fine", "interest"),
        **_dates(data, "assessment_period", "due_date"),
    )


PAYMENT_PARSERS = {
    PaymentFamily.SUPPLIER: _supplier,
    PaymentFamily.BOLETO: _boleto,
    PaymentFamily.PIX: _pix_code,
    PaymentFamily.PAYROLL: _payroll,
    PaymentFamily.TAX: _tax,
}


def payment_from_dict(family: PaymentFamily, data: dict[str, Any]) -> Payment:
    return PAYMENT_PARSERS[family](data)


def batch_from_dict(data: dict[str, Any]) -> Batch:
    """Build a :class:`Batch`; payments are parsed for the batch's family."""
    batch = Batch(
        service_type=str(_require(data, "service_type", "batch")),
        payment_form=str(_require(data, "payment_form", "batch")),
        message=str(data.get("message") or ""),
    )
    family = batch.family
    batch.payments = [payment_from_dict(family, item) for item in data.get("payments") or []]
    return batch


def request_from_dict(data: dict[str, Any]) -> tuple[Company, list[Batch]]:
    """Parse a whole request into the company and its batches."""
    company = company_from_dict(data.get("company"))
    batches_data = data.get("batches")
    if not batches_data:
        raise MissingFieldError("At least one batch is required")
    batches = []
    for number, batch_data in enumerate(batches_data, start=1):
        try:
            batches.append(batch_from_dict(batch_data))
        except CnabGenError as exc:
            raise exc.with_batch(number)
    return company, batches

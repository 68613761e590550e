"""Pytest configuration and fixtures."""

import logging
from datetime import date, datetime
from decimal import Decimal

import pytest

from cnab_gen.models import (
    Address,
    BankAccount,
    Batch,
    BoletoPayment,
    Company,
    GareSupplement,
    InscriptionType,
    Party,
    PayrollPayment,
    PixCodePayment,
    PixKey,
    PixKeyType,
    SupplierPayment,
    TaxPayment,
    Withholding,
)
from cnab_gen.orchestrator import FileOrchestrator

BARCODE = "34199" + "1234567890" * 3 + "123456789"
GENERATED_AT = datetime(2024, 3, 15, 10, 30, 45)
PAY_DAY = date(2024, 3, 20)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def generated_at() -> datetime:
    """Timestamp returned by the fixed clock."""
    return GENERATED_AT


@pytest.fixture
def clock():
    """Clock always returning ``GENERATED_AT``."""
    return lambda: GENERATED_AT


@pytest.fixture
def orchestrator(clock) -> FileOrchestrator:
    """Orchestrator with default configuration and a fixed clock."""
    return FileOrchestrator(clock=clock)


@pytest.fixture
def address() -> Address:
    """Sample address."""
    return Address(
        street="Rua das Flores",
        number="123",
        complement="Sala 4",
        neighborhood="Centro",
        city="São Paulo",
        state="SP",
        postal_code="01310-100",
    )


@pytest.fixture
def company(address: Address) -> Company:
    """Sample paying company at bank 341."""
    return Company(
        inscription_type=InscriptionType.CNPJ,
        inscription_number="11.222.333/0001-81",
        name="Acme Indústria e Comércio Ltda",
        account=BankAccount(
            bank_code="341",
            agency="1529",
            agency_digit="",
            account="70940",
            account_digit="2",
        ),
        agreement_code="AGR123",
        bank_name="Banco Itaú",
        address=address,
    )


@pytest.fixture
def person() -> Party:
    """Sample individual."""
    return Party(InscriptionType.CPF, "111.444.777-35", "João da Silva")


@pytest.fixture
def organization() -> Party:
    """Sample organization."""
    return Party(InscriptionType.CNPJ, "11222333000181", "Fornecedor Ltda")


@pytest.fixture
def beneficiary_account() -> BankAccount:
    """Sample beneficiary account at bank 001."""
    return BankAccount(
        bank_code="001", agency="1234", agency_digit="5", account="987654", account_digit="3"
    )


@pytest.fixture
def supplier_payment(organization: Party, beneficiary_account: BankAccount) -> SupplierPayment:
    """Supplier payment without address or PIX key."""
    return SupplierPayment(
        beneficiary=organization,
        payment_date=PAY_DAY,
        amount=Decimal("1500.50"),
        account=beneficiary_account,
        your_number="NF000123",
    )


@pytest.fixture
def pix_key() -> PixKey:
    """Sample e-mail PIX key."""
    return PixKey(PixKeyType.EMAIL, "financeiro@fornecedor.com.br", tx_id="TX123", message="Fatura")


@pytest.fixture
def boleto_payment() -> BoletoPayment:
    """Boleto without payer/beneficiary identification."""
    return BoletoPayment(
        barcode=BARCODE,
        beneficiary_name="Energia SA",
        payment_date=PAY_DAY,
        amount=Decimal("250.75"),
        due_date=date(2024, 3, 18),
    )


@pytest.fixture
def pix_code_payment(organization: Party, person: Party, pix_key: PixKey) -> PixCodePayment:
    """PIX payment by code."""
    return PixCodePayment(
        barcode=BARCODE,
        beneficiary_name="Fornecedor Ltda",
        payment_date=PAY_DAY,
        amount=Decimal("99.90"),
        payer=organization,
        beneficiary=person,
        pix=pix_key,
    )


@pytest.fixture
def payroll_payment(person: Party, beneficiary_account: BankAccount, address: Address) -> PayrollPayment:
    """Payroll payment with neither withholding nor history message."""
    return PayrollPayment(
        employee=person,
        account=beneficiary_account,
        amount=Decimal("3500.00"),
        payment_date=PAY_DAY,
        address=address,
        registration="000123",
    )


@pytest.fixture
def withholding() -> Withholding:
    """Sample withholding figures."""
    return Withholding(
        income_tax=Decimal("262.50"),
        inss=Decimal("315.00"),
        net_amount=Decimal("2922.50"),
    )


@pytest.fixture
def gare_payment(organization: Party) -> TaxPayment:
    """GARE-SP tax paid by barcode (segments O, N, W)."""
    return TaxPayment(
        kind="18",
        amount=Decimal("1000.00"),
        fine=Decimal("20.00"),
        interest=Decimal("10.00"),
        payment_date=PAY_DAY,
        barcode=BARCODE,
        concessionaire_name="SEFAZ SP",
        revenue_code="0462",
        taxpayer=organization,
        gare=GareSupplement(
            state_registration="110042490114",
            debt_registration="1234567890123",
            revenue_date=PAY_DAY,
            reference_period="022024",
        ),
    )


@pytest.fixture
def darf_payment(organization: Party) -> TaxPayment:
    """DARF paid by revenue code (segment N alone)."""
    return TaxPayment(
        kind="16",
        amount=Decimal("500.00"),
        payment_date=PAY_DAY,
        revenue_code="0220",
        taxpayer=organization,
        assessment_period=date(2024, 2, 29),
        due_date=PAY_DAY,
    )


@pytest.fixture
def supplier_batch(supplier_payment: SupplierPayment) -> Batch:
    """Single-payment supplier batch (service 20, TED)."""
    return Batch("20", "41", [supplier_payment])


@pytest.fixture
def payroll_batch(payroll_payment: PayrollPayment) -> Batch:
    """Single-payment payroll batch."""
    return Batch("30", "01", [payroll_payment])


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a logging test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    package_level = logging.getLogger("cnab_gen").level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger("cnab_gen").setLevel(package_level)

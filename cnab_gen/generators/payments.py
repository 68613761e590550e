"""Payment and batch generators, one per payment family."""

from __future__ import annotations

import random
from abc import abstractmethod
from decimal import Decimal
from typing import Iterator

from cnab_gen.formatters import round_money
from cnab_gen.generators.base import BaseGenerator
from cnab_gen.generators.documents import generate_barcode, generate_cpf
from cnab_gen.models.batch import Batch
from cnab_gen.models.enums import PaymentFamily, PaymentForm, PixKeyType, ServiceType, TaxKind
from cnab_gen.models.payments import (
    BoletoPayment,
    GareSupplement,
    PayrollPayment,
    PixCodePayment,
    PixKey,
    SupplierPayment,
    TaxPayment,
    Withholding,
)


class _PaymentGenerator(BaseGenerator):
    """Shared ``generate_batch`` and PIX key helpers."""

    @abstractmethod
    def generate(self):
        """Generate one payment."""

    def generate_batch(self, count: int) -> Iterator:
        """Yield ``count`` generated payments."""
        for _ in range(count):
            yield self.generate()

    def _pix_key(self) -> PixKey:
        key_type = random.choice(list(PixKeyType))
        if key_type is PixKeyType.PHONE:
            key = f"+55{random.randint(11, 99)}9{random.randint(10000000, 99999999)}"
        elif key_type is PixKeyType.EMAIL:
            key = self.fake.email()
        elif key_type is PixKeyType.DOCUMENT:
            key = generate_cpf()
        else:
            key = self.fake.uuid4()
        return PixKey(
            key_type=key_type,
            key=key,
            tx_id=self.fake.pystr(min_chars=25, max_chars=35),
            message=self.fake.sentence(nb_words=4),
        )


class SupplierPaymentGenerator(_PaymentGenerator):
    """Generate transfers to suppliers.

    Parameters
    ----------
    address_rate : float
        Share of payments carrying the beneficiary address (segment B).
    pix_rate : float
        Share of payments sent to a PIX key instead of an account.
    """

    def __init__(
        self, seed: int | None = None, address_rate: float = 0.5, pix_rate: float = 0.0, **kwargs
    ) -> None:
        super().__init__(seed, **kwargs)
        self.address_rate = address_rate
        self.pix_rate = pix_rate

    def generate(self) -> SupplierPayment:
        beneficiary = self._organization() if random.random() < 0.7 else self._person()
        use_pix = random.random() < self.pix_rate
        use_address = not use_pix and random.random() < self.address_rate
        return SupplierPayment(
            beneficiary=beneficiary,
            payment_date=self._payment_date(),
            amount=self._amount(50, 50000),
            account=None if use_pix else self._account(),
            your_number=f"NF{random.randint(1, 999999):06d}",
            information=self.fake.sentence(nb_words=5),
            address=self._address() if use_address else None,
            pix=self._pix_key() if use_pix else None,
        )


class BoletoPaymentGenerator(_PaymentGenerator):
    """Generate boleto settlements."""

    def __init__(self, seed: int | None = None, identity_rate: float = 0.5, **kwargs) -> None:
        super().__init__(seed, **kwargs)
        self.identity_rate = identity_rate

    def _barcode_fields(self) -> dict:
        amount = self._amount(20, 20000)
        cents = int(amount * 100)
        bank_code = random.choice(["001", "033", "104", "237", "341"])
        return {
            "barcode": generate_barcode(bank_code, cents, random.randint(1000, 9999)),
            "beneficiary_name": self.fake.company(),
            "payment_date": self._payment_date(),
            "amount": amount,
            "your_number": f"{random.randint(1, 99999999):08d}",
        }

    def generate(self) -> BoletoPayment:
        with_identities = random.random() < self.identity_rate
        return BoletoPayment(
            payer=self._organization() if with_identities else None,
            beneficiary=self._organization() if with_identities else None,
            **self._barcode_fields(),
        )


class PixCodePaymentGenerator(BoletoPaymentGenerator):
    """Generate PIX payments initiated from a payment code."""

    def generate(self) -> PixCodePayment:
        return PixCodePayment(
            payer=self._organization(),
            beneficiary=self._organization(),
            pix=self._pix_key(),
            **self._barcode_fields(),
        )


class PayrollPaymentGenerator(_PaymentGenerator):
    """Generate salary payments."""

    def __init__(
        self,
        seed: int | None = None,
        withholding_rate: float = 0.5,
        history_rate: float = 0.3,
        **kwargs,
    ) -> None:
        super().__init__(seed, **kwargs)
        self.withholding_rate = withholding_rate
        self.history_rate = history_rate

    def _withholding(self, gross: Decimal) -> Withholding:
        income_tax = round_money(gross * Decimal("0.075"))
        inss = round_money(gross * Decimal("0.09"))
        fgts = round_money(gross * Decimal("0.08"))
        return Withholding(
            income_tax=income_tax,
            inss=inss,
            fgts=fgts,
            net_amount=gross - income_tax - inss,
        )

    def generate(self) -> PayrollPayment:
        amount = self._amount(1412, 25000)
        with_history = random.random() < self.history_rate
        return PayrollPayment(
            employee=self._person(),
            account=self._account(),
            amount=amount,
            payment_date=self._payment_date(max_days=5),
            address=self._address(),
            registration=f"{random.randint(1, 999999):06d}",
            withholding=self._withholding(amount) if random.random() < self.withholding_rate else None,
            history_code=1 if with_history else 0,
            history_message="SALARIO MENSAL" if with_history else "",
        )


class TaxPaymentGenerator(_PaymentGenerator):
    """Generate tax payments: GARE and barcode taxes with a barcode, DARF without."""

    KINDS = [TaxKind.GARE, TaxKind.BARCODE, TaxKind.DARF, TaxKind.GPS]
    KIND_WEIGHTS = [0.3, 0.3, 0.25, 0.15]

    def __init__(self, seed: int | None = None, kind: TaxKind | None = None, **kwargs) -> None:
        super().__init__(seed, **kwargs)
        self.kind = TaxKind(kind) if kind else None

    def generate(self) -> TaxPayment:
        kind = self.kind or random.choices(self.KINDS, weights=self.KIND_WEIGHTS, k=1)[0]
        amount = self._amount(100, 30000)
        fine = round_money(amount * Decimal("0.02")) if random.random() < 0.2 else Decimal("0")
        interest = round_money(amount * Decimal("0.01")) if fine else Decimal("0")
        payment_date = self._payment_date()
        taxpayer = self._organization()
        with_barcode = kind in (TaxKind.GARE, TaxKind.BARCODE)

        gare = None
        if kind is TaxKind.GARE:
            gare = GareSupplement(
                state_registration=str(random.randint(10**11, 10**12 - 1)),
                debt_registration=str(random.randint(10**12, 10**13 - 1)),
                revenue_date=payment_date,
                reference_period=payment_date.strftime("%m%Y"),
            )

        return TaxPayment(
            kind=kind,
            amount=amount,
            payment_date=payment_date,
            barcode=generate_barcode("800", int((amount + fine + interest) * 100))
            if with_barcode
            else None,
            concessionaire_name=self.fake.company() if with_barcode else "",
            fine=fine,
            interest=interest,
            revenue_code=random.choice(["0220", "1708", "2089", "5952", "046-2"]),
            taxpayer=taxpayer,
            assessment_period=payment_date.replace(day=1),
            reference_number=str(random.randint(1, 10**9)),
            due_date=payment_date,
            gare=gare,
        )


class BatchGenerator(BaseGenerator):
    """Generate complete batches for any payment family."""

    # (service type, payment form) used for each family
    BATCH_CODES = {
        PaymentFamily.SUPPLIER: (ServiceType.SUPPLIERS, PaymentForm.TED),
        PaymentFamily.BOLETO: (ServiceType.SUPPLIERS, PaymentForm.OTHER_BANK_BOLETO),
        PaymentFamily.PIX: (ServiceType.MISCELLANEOUS, PaymentForm.PIX_QR_CODE),
        PaymentFamily.PAYROLL: (ServiceType.PAYROLL, PaymentForm.ACCOUNT_CREDIT),
        PaymentFamily.TAX: (ServiceType.TAXES, PaymentForm.TAX_BARCODE),
    }

    GENERATORS = {
        PaymentFamily.SUPPLIER: SupplierPaymentGenerator,
        PaymentFamily.BOLETO: BoletoPaymentGenerator,
        PaymentFamily.PIX: PixCodePaymentGenerator,
        PaymentFamily.PAYROLL: PayrollPaymentGenerator,
        PaymentFamily.TAX: TaxPaymentGenerator,
    }

    def __init__(self, seed: int | None = None, **kwargs) -> None:
        super().__init__(seed, **kwargs)
        self._generators = {
            family: generator_cls(seed, reference_date=self.reference_date)
            for family, generator_cls in self.GENERATORS.items()
        }

    def generate(self, family: PaymentFamily | str, count: int = 1) -> Batch:
        """Generate one batch.

        Parameters
        ----------
        family : PaymentFamily | str
            Payment family of the batch.
        count : int
            Number of payments.

        Returns
        -------
        Batch
            Batch whose service type and payment form resolve to ``family``.
        """
        family = PaymentFamily(family)
        service_type, payment_form = self.BATCH_CODES[family]
        payments = list(self._generators[family].generate_batch(count))
        return Batch(
            service_type=service_type.value,
            payment_form=payment_form.value,
            payments=payments,
            message=f"PAGAMENTOS {family.value}",
        )

"""Tests for batch processors."""

from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from cnab_gen.exceptions import MissingFieldError, UnsupportedVariantError
from cnab_gen.models import Batch, PaymentFamily, SupplierPayment
from cnab_gen.processors import (
    BoletoProcessor,
    PayrollProcessor,
    PixProcessor,
    SupplierProcessor,
    TaxProcessor,
    processor_for,
)


def segments(result) -> list[str]:
    """Segment letters of the detail lines of a batch result."""
    return [line[13] for line in result.lines[1:-1]]


def register_numbers(result) -> list[int]:
    return [int(line[8:13]) for line in result.lines[1:-1]]


class TestBatchProcessorBase:
    """Tests for the shared batch algorithm."""

    def test_header_and_trailer(self, company, supplier_batch) -> None:
        result = SupplierProcessor().process(company, supplier_batch, 4)

        assert result.number == 4
        assert result.family is PaymentFamily.SUPPLIER
        assert result.lines[0][7] == "1"
        assert result.lines[-1][7] == "5"
        assert all(line[3:7] == "0004" for line in result.lines)

    def test_count_and_sum_in_trailer(self, company, supplier_payment) -> None:
        other = replace(supplier_payment, amount=Decimal("0.125"))
        batch = Batch("20", "01", [supplier_payment, other])
        result = SupplierProcessor().process(company, batch, 1)

        assert result.record_count == 4
        assert result.detail_count == 2
        assert result.total_amount == Decimal("1500.63")
        trailer = result.lines[-1]
        assert trailer[17:23] == "000004"
        assert trailer[23:41] == "000000000000150063"

    def test_register_numbers_are_sequential(self, company, payroll_payment) -> None:
        batch = Batch("30", "01", [payroll_payment, payroll_payment])
        result = PayrollProcessor().process(company, batch, 1)

        assert register_numbers(result) == [1, 2, 3, 4, 5, 6]

    def test_state_resets_between_batches(self, company, supplier_batch) -> None:
        processor = SupplierProcessor()
        first = processor.process(company, supplier_batch, 1)
        second = processor.process(company, supplier_batch, 2)

        assert first.record_count == second.record_count == 3
        assert first.total_amount == second.total_amount

    def test_wrong_variant(self, company, boleto_payment) -> None:
        batch = Batch("20", "01", [boleto_payment])
        with pytest.raises(UnsupportedVariantError, match="BoletoPayment"):
            SupplierProcessor().process(company, batch, 1)

    def test_empty_batch(self, company) -> None:
        with pytest.raises(MissingFieldError, match="no payments"):
            SupplierProcessor().process(company, Batch("20", "01", []), 1)

    def test_processor_for(self) -> None:
        assert isinstance(processor_for(PaymentFamily.TAX), TaxProcessor)
        assert isinstance(processor_for(PaymentFamily.PIX), PixProcessor)


class TestSupplierProcessor:
    """Tests for SupplierProcessor."""

    def test_a_only(self, company, supplier_batch) -> None:
        result = SupplierProcessor().process(company, supplier_batch, 1)
        assert segments(result) == ["A"]

    def test_a_and_b_with_address(self, company, supplier_payment, address) -> None:
        payment = replace(supplier_payment, address=address)
        result = SupplierProcessor().process(company, Batch("20", "03", [payment]), 1)

        assert segments(result) == ["A", "B"]
        assert result.lines[1][17:20] == "700"

    def test_a_and_pix_b(self, company, organization, pix_key) -> None:
        payment = SupplierPayment(organization, date(2024, 3, 20), Decimal("5"), pix=pix_key)
        result = SupplierProcessor().process(company, Batch("98", "45", [payment]), 1)

        assert segments(result) == ["A", "B"]
        assert result.lines[1][17:20] == "009"
        assert result.lines[2][14:17] == "02 "


class TestBoletoProcessors:
    """Tests for BoletoProcessor and PixProcessor."""

    def test_j_only(self, company, boleto_payment) -> None:
        result = BoletoProcessor().process(company, Batch("20", "31", [boleto_payment]), 1)
        assert segments(result) == ["J"]

    def test_j_and_j52(self, company, boleto_payment, organization) -> None:
        payment = replace(boleto_payment, payer=organization)
        result = BoletoProcessor().process(company, Batch("20", "31", [payment]), 1)

        assert segments(result) == ["J", "J"]
        assert result.lines[2][17:19] == "52"

    def test_pix_always_two_segments(self, company, pix_code_payment) -> None:
        result = PixProcessor().process(company, Batch("98", "47", [pix_code_payment]), 1)

        assert segments(result) == ["J", "J"]
        assert result.lines[2][51:53] == "02"
        assert result.total_amount == Decimal("99.90")


class TestPayrollProcessor:
    """Tests for PayrollProcessor."""

    def test_pqr(self, company, payroll_batch) -> None:
        result = PayrollProcessor().process(company, payroll_batch, 1)

        assert segments(result) == ["P", "Q", "R"]
        assert result.record_count == 5

    def test_withholding_and_history(self, company, payroll_payment, withholding) -> None:
        payment = replace(payroll_payment, withholding=withholding, history_message="Bonus")
        result = PayrollProcessor().process(company, Batch("30", "01", [payment]), 1)

        assert segments(result) == ["P", "Q", "R", "C", "D"]
        assert result.record_count == 7
        assert result.total_amount == Decimal("3500.00")


class TestTaxProcessor:
    """Tests for TaxProcessor."""

    def test_gare_emits_o_n_w(self, company, gare_payment) -> None:
        result = TaxProcessor().process(company, Batch("22", "18", [gare_payment]), 1)

        assert segments(result) == ["O", "N", "W"]
        assert result.total_amount == Decimal("1000.00")

    def test_trailer_sums_principal_only(self, company, gare_payment) -> None:
        payment = replace(
            gare_payment, amount=Decimal("100.00"), fine=Decimal("5.00"), interest=Decimal("1.00")
        )
        result = TaxProcessor().process(company, Batch("22", "18", [payment]), 1)
        trailer = result.lines[-1]

        assert trailer[23:41] == "000000000000010000"
        assert result.lines[2][13] == "N"
        assert result.lines[2][95:110] == "000000000010600"

    def test_barcode_tax_emits_o_n(self, company, gare_payment) -> None:
        payment = replace(gare_payment, kind="13", gare=None)
        result = TaxProcessor().process(company, Batch("22", "13", [payment]), 1)

        assert segments(result) == ["O", "N"]

    def test_code_based_tax_emits_n(self, company, darf_payment) -> None:
        result = TaxProcessor().process(company, Batch("22", "16", [darf_payment]), 1)

        assert segments(result) == ["N"]
        assert result.record_count == 3

    def test_gare_without_supplement(self, company, gare_payment) -> None:
        payment = replace(gare_payment, gare=None)
        with pytest.raises(MissingFieldError, match="GARE"):
            TaxProcessor().process(company, Batch("22", "18", [payment]), 1)

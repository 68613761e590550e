"""Tests for custom exception hierarchy."""

from cnab_gen.exceptions import (
    CnabGenError,
    ConfigurationError,
    InvalidFieldError,
    MalformedRecordError,
    MissingFieldError,
    SinkError,
    UnsupportedVariantError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_cnab_gen_error_is_exception(self) -> None:
        assert isinstance(CnabGenError("test"), Exception)

    def test_missing_field_is_cnab_gen_error(self) -> None:
        assert isinstance(MissingFieldError("test"), CnabGenError)

    def test_invalid_field_is_cnab_gen_error(self) -> None:
        assert isinstance(InvalidFieldError("test"), CnabGenError)

    def test_malformed_record_is_cnab_gen_error(self) -> None:
        assert isinstance(MalformedRecordError("test"), CnabGenError)

    def test_unsupported_variant_is_cnab_gen_error(self) -> None:
        assert isinstance(UnsupportedVariantError("test"), CnabGenError)

    def test_configuration_error_is_cnab_gen_error(self) -> None:
        assert isinstance(ConfigurationError("test"), CnabGenError)

    def test_sink_error_is_cnab_gen_error(self) -> None:
        assert isinstance(SinkError("test"), CnabGenError)

    def test_exception_message(self) -> None:
        err = MissingFieldError("Barcode is required")
        assert str(err) == "Barcode is required"
        assert err.batch_number is None


class TestBatchContext:
    """Tests for batch number context."""

    def test_with_batch_returns_self(self) -> None:
        err = InvalidFieldError("Amount too large")
        assert err.with_batch(3) is err
        assert err.batch_number == 3

    def test_message_prefixed(self) -> None:
        err = UnsupportedVariantError("Unsupported service type: '99'", batch_number=2)
        assert str(err) == "Batch 2: Unsupported service type: '99'"
        assert err.message == "Unsupported service type: '99'"

"""Custom exception hierarchy for cnab-gen."""


class CnabGenError(Exception):
    """Base exception for all cnab-gen errors.

    ``batch_number`` is filled in by the orchestrator when the error was
    raised while a specific batch was being encoded.
    """

    def __init__(self, message: str, batch_number: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.batch_number = batch_number

    def with_batch(self, batch_number: int) -> "CnabGenError":
        """Attach the number of the batch being encoded and return self."""
        self.batch_number = batch_number
        return self

    def __str__(self) -> str:
        if self.batch_number is not None:
            return f"Batch {self.batch_number}: {self.message}"
        return self.message


class MissingFieldError(CnabGenError):
    """Raised when a record builder or processor lacks mandatory data."""


class InvalidFieldError(CnabGenError):
    """Raised when a value is present but cannot be encoded."""


class MalformedRecordError(CnabGenError):
    """Raised when an assembled line is not exactly 240 characters."""


class UnsupportedVariantError(CnabGenError):
    """Raised for unknown service types, payment variants or tax kinds."""


class ConfigurationError(CnabGenError):
    """Raised when configuration is invalid or missing."""


class SinkError(CnabGenError):
    """Raised when a sink operation fails."""

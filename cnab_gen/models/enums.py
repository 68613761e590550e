"""Enumeration types for CNAB 240 records and payments."""

from enum import Enum


class RecordType(str, Enum):
    FILE_HEADER = "0"
    BATCH_HEADER = "1"
    DETAIL = "3"
    BATCH_TRAILER = "5"
    FILE_TRAILER = "9"


class SegmentCode(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    J = "J"
    N = "N"
    O = "O"
    P = "P"
    Q = "Q"
    R = "R"
    W = "W"


class InscriptionType(str, Enum):
    CPF = "1"
    CNPJ = "2"

    @property
    def digits(self) -> int:
        """Length of a valid identification number of this type."""
        return 11 if self is InscriptionType.CPF else 14


class ServiceType(str, Enum):
    SUPPLIERS = "20"
    TAXES = "22"
    PAYROLL = "30"
    MISCELLANEOUS = "98"


class PaymentForm(str, Enum):
    ACCOUNT_CREDIT = "01"
    PAYMENT_CHECK = "02"
    DOC = "03"
    TAX_BARCODE = "13"
    DARF = "16"
    GPS = "17"
    GARE_SP = "18"
    IPVA = "19"
    DPVAT = "20"
    OWN_BANK_BOLETO = "30"
    OTHER_BANK_BOLETO = "31"
    FGTS = "35"
    TED = "41"
    PIX_TRANSFER = "45"
    PIX_QR_CODE = "47"


class TaxKind(str, Enum):
    BARCODE = "13"
    DARF = "16"
    GPS = "17"
    GARE = "18"
    IPVA = "19"
    DPVAT = "20"
    FGTS = "35"


class PixKeyType(str, Enum):
    PHONE = "01"
    EMAIL = "02"
    DOCUMENT = "03"
    RANDOM = "04"


class PaymentFamily(str, Enum):
    SUPPLIER = "SUPPLIER"
    BOLETO = "BOLETO"
    PAYROLL = "PAYROLL"
    TAX = "TAX"
    PIX = "PIX"


BOLETO_FORMS = frozenset({PaymentForm.OWN_BANK_BOLETO.value, PaymentForm.OTHER_BANK_BOLETO.value})

# Clearing house (camara centralizadora) written in segment A
CLEARING_HOUSES = {
    PaymentForm.ACCOUNT_CREDIT.value: "000",
    PaymentForm.PAYMENT_CHECK.value: "000",
    PaymentForm.DOC.value: "700",
    PaymentForm.TED.value: "018",
    PaymentForm.PIX_TRANSFER.value: "009",
}

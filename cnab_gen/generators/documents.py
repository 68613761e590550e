"""Valid Brazilian identification numbers and barcodes using pure arithmetic."""

from __future__ import annotations

import random

from cnab_gen.models.base import only_digits

CPF_WEIGHTS = (range(10, 1, -1), range(11, 1, -1))
CNPJ_WEIGHTS = (
    [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2],
    [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2],
)


def _check_digit(digits: list[int], weights) -> int:
    total = sum(d * w for d, w in zip(digits, weights))
    digit = 11 - (total % 11)
    return 0 if digit >= 10 else digit


def generate_cpf() -> str:
    """Generate a valid Brazilian CPF (11 digits)."""
    digits = [random.randint(0, 9) for _ in range(9)]
    for weights in CPF_WEIGHTS:
        digits.append(_check_digit(digits, weights))
    return "".join(str(d) for d in digits)


def generate_cnpj() -> str:
    """Generate a valid Brazilian CNPJ (14 digits), always a head office (0001)."""
    digits = [random.randint(0, 9) for _ in range(8)] + [0, 0, 0, 1]
    for weights in CNPJ_WEIGHTS:
        digits.append(_check_digit(digits, weights))
    return "".join(str(d) for d in digits)


def is_valid_cpf(value: str) -> bool:
    digits = [int(d) for d in only_digits(value)]
    if len(digits) != 11 or len(set(digits)) == 1:
        return False
    return all(
        digits[9 + i] == _check_digit(digits[: 9 + i], weights)
        for i, weights in enumerate(CPF_WEIGHTS)
    )


def is_valid_cnpj(value: str) -> bool:
    digits = [int(d) for d in only_digits(value)]
    if len(digits) != 14 or len(set(digits)) == 1:
        return False
    return all(
        digits[12 + i] == _check_digit(digits[: 12 + i], weights)
        for i, weights in enumerate(CNPJ_WEIGHTS)
    )


def barcode_check_digit(body: str) -> int:
    """Modulo 11 general check digit of a boleto barcode.

    ``body`` is the 43 barcode digits without the check digit (position 5).
    """
    total = 0
    weight = 2
    for digit in reversed(body):
        total += int(digit) * weight
        weight = 2 if weight == 9 else weight + 1
    digit = 11 - (total % 11)
    return 1 if digit in (0, 10, 11) else digit


def generate_barcode(bank_code: str, amount_cents: int, due_factor: int = 0) -> str:
    """Generate a 44-digit boleto barcode with a valid general check digit.

    Layout: bank (3), currency ``9`` (1), check digit (1), due factor (4),
    amount in cents (10), free field (25).
    """
    free_field = "".join(str(random.randint(0, 9)) for _ in range(25))
    head = only_digits(bank_code).rjust(3, "0")[-3:] + "9"
    tail = f"{due_factor % 10000:04d}{amount_cents % 10**10:010d}{free_field}"
    return f"{head}{barcode_check_digit(head + tail)}{tail}"

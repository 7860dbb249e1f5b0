from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

_CNPJ_WEIGHTS_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_CNPJ_WEIGHTS_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def _cnpj_digit(digits: str, weights: tuple[int, ...]) -> str:
    rest = sum(int(d) * w for d, w in zip(digits, weights, strict=True)) % 11
    return "0" if rest < 2 else str(11 - rest)


def validate_cnpj(value: str) -> str:
    """Validate a CNPJ (with or without punctuation).

    Returns the 14 bare digits. Raises ValueError on wrong length, repeated
    digits or check-digit mismatch.
    """
    digits = re.sub(r"[.\-/\s]", "", value)
    if not re.fullmatch(r"\d{14}", digits):
        raise ValueError("CNPJ: deve ter 14 digitos numericos")
    if len(set(digits)) == 1:
        raise ValueError(f"CNPJ invalido: '{value}'")
    first = _cnpj_digit(digits[:12], _CNPJ_WEIGHTS_1)
    second = _cnpj_digit(digits[:12] + first, _CNPJ_WEIGHTS_2)
    if digits[12:] != first + second:
        raise ValueError(f"CNPJ invalido: '{value}' (digito verificador)")
    return digits


def validate_monetary(value: str | int | float) -> Decimal:
    """Validate a monetary value, returning it as Decimal.

    Zero is accepted; negative, NaN and Infinity are not.
    """
    try:
        d = Decimal(str(value))
        if not d.is_finite():
            raise InvalidOperation
    except InvalidOperation:
        raise ValueError(f"Valor numerico invalido: '{value}'") from None
    if d < 0:
        raise ValueError(f"Valor nao pode ser negativo: '{value}'")
    return d


def validate_items_count(value: str | int) -> int:
    """Validate a non-negative integer item count."""
    if isinstance(value, bool):
        raise ValueError(f"Quantidade invalida: '{value}'")
    try:
        n = int(str(value))
    except ValueError:
        raise ValueError(f"Quantidade invalida: '{value}'") from None
    if n < 0:
        raise ValueError(f"Quantidade nao pode ser negativa: '{value}'")
    return n

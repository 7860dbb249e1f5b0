from __future__ import annotations

from decimal import Decimal

import pytest

from faturador.utils.validators import validate_cnpj, validate_items_count, validate_monetary


class TestValidateCnpj:
    def test_bare_digits(self):
        assert validate_cnpj("11222333000181") == "11222333000181"

    def test_punctuated(self):
        assert validate_cnpj("11.222.333/0001-81") == "11222333000181"

    def test_wrong_check_digit(self):
        with pytest.raises(ValueError, match="verificador"):
            validate_cnpj("11222333000182")

    def test_wrong_length(self):
        with pytest.raises(ValueError, match="14 digitos"):
            validate_cnpj("12345")

    def test_letters(self):
        with pytest.raises(ValueError, match="14 digitos"):
            validate_cnpj("1122233300018A")

    def test_repeated_digits(self):
        with pytest.raises(ValueError, match="invalido"):
            validate_cnpj("00000000000000")


class TestValidateMonetary:
    def test_valid(self):
        assert validate_monetary("19684.93") == Decimal("19684.93")

    def test_integer(self):
        assert validate_monetary(1000) == Decimal("1000")

    def test_float(self):
        assert validate_monetary(0.1) == Decimal("0.1")

    def test_zero_allowed(self):
        assert validate_monetary("0") == 0

    def test_negative_raises(self):
        with pytest.raises(ValueError, match="negativo"):
            validate_monetary("-5")

    def test_nan_raises(self):
        with pytest.raises(ValueError, match="invalido"):
            validate_monetary("NaN")

    def test_infinity_raises(self):
        with pytest.raises(ValueError, match="invalido"):
            validate_monetary("Infinity")

    def test_non_numeric_raises(self):
        with pytest.raises(ValueError, match="invalido"):
            validate_monetary("abc")


class TestValidateItemsCount:
    def test_valid(self):
        assert validate_items_count(6) == 6

    def test_string(self):
        assert validate_items_count("3") == 3

    def test_zero(self):
        assert validate_items_count(0) == 0

    def test_negative(self):
        with pytest.raises(ValueError, match="negativa"):
            validate_items_count(-1)

    def test_fraction(self):
        with pytest.raises(ValueError, match="invalida"):
            validate_items_count("1.5")

    def test_bool(self):
        with pytest.raises(ValueError, match="invalida"):
            validate_items_count(True)

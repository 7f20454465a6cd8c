"""
Тесты для Power: power_n, power

Проверяет:
1. Точность двоичного возведения в степень (без рядов)
2. Таблицу диспетчеризации power по случаям
3. Ошибки области определения: 0 ** (-n), отрицательное ** нецелое
"""

from decimal import Decimal

import pytest

from src.decimal_math.errors import DomainError
from src.decimal_math.power import power, power_n

SQRT_2 = Decimal("1.414213562373095048801688724209698078569671875376948073176680")
SQRT_10_POW_5 = Decimal("316.2277660168379331998893544432718533719555139325216826857504")


def assert_close(actual: Decimal, expected: Decimal, rel: Decimal = Decimal("1e-24")) -> None:
    """Сравнение с относительным допуском."""
    scale = max(abs(expected), Decimal(1))
    assert abs(actual - expected) <= rel * scale, f"{actual} != {expected}"


# =============================================================================
# POWER_N
# =============================================================================


class TestPowerN:
    """Тесты power_n"""

    def test_power_of_two(self) -> None:
        """2^10 = 1024 точно"""
        assert power_n(Decimal(2), 10) == 1024

    def test_negative_power_inverts(self) -> None:
        """2^-1 = 0.5 точно"""
        assert power_n(Decimal(2), -1) == Decimal("0.5")
        assert power_n(Decimal(4), -2) == Decimal("0.0625")

    def test_zero_power_is_one(self) -> None:
        """x^0 = 1, в том числе 0^0"""
        assert power_n(Decimal("123.456"), 0) == 1
        assert power_n(Decimal(0), 0) == 1

    def test_exact_decimal_fractions(self) -> None:
        """Дробное основание возводится без потерь"""
        assert power_n(Decimal("1.1"), 2) == Decimal("1.21")
        assert power_n(Decimal("0.5"), 3) == Decimal("0.125")
        assert power_n(Decimal("-3"), 3) == -27
        assert power_n(Decimal("-3"), 4) == 81

    @pytest.mark.parametrize("exponent", [1, 2, 3, 7, 8, 15, 16, 23])
    def test_matches_repeated_multiplication(self, exponent: int) -> None:
        """Результат совпадает с последовательным умножением"""
        base = Decimal("1.5")
        expected = Decimal(1)
        for _ in range(exponent):
            expected *= base
        assert power_n(base, exponent) == expected

    def test_zero_base_negative_power(self) -> None:
        """0^-1 не определено"""
        with pytest.raises(DomainError, match="Zero base"):
            power_n(Decimal(0), -1)

    @pytest.mark.parametrize("exponent", [1.5, Decimal(2), True])
    def test_non_int_power_rejected(self, exponent: object) -> None:
        """Показатель обязан быть int"""
        with pytest.raises(TypeError, match="power must be int"):
            power_n(Decimal(2), exponent)  # type: ignore[arg-type]


# =============================================================================
# POWER
# =============================================================================


class TestPowerDispatch:
    """Тесты таблицы случаев power"""

    def test_zero_exponent(self) -> None:
        """x^0 = 1, включая 0^0"""
        assert power(Decimal(0), Decimal(0)) == 1
        assert power(Decimal("-7.5"), Decimal(0)) == 1

    def test_unit_exponent_returns_value(self) -> None:
        """x^1 = x"""
        assert power(Decimal("-2.5"), Decimal(1)) == Decimal("-2.5")

    def test_unit_base(self) -> None:
        """1^y = 1"""
        assert power(Decimal(1), Decimal("123.456")) == 1

    def test_zero_base_positive_exponent(self) -> None:
        """0^5 = 0"""
        assert power(Decimal(0), Decimal(5)) == 0
        assert power(Decimal(0), Decimal("0.5")) == 0

    def test_zero_base_negative_exponent(self) -> None:
        """0^-1 не определено"""
        with pytest.raises(DomainError, match="zero base and negative power"):
            power(Decimal(0), Decimal(-1))

    def test_minus_one_exponent(self) -> None:
        """x^-1 = 1/x"""
        assert power(Decimal(4), Decimal(-1)) == Decimal("0.25")

    def test_negative_base_non_integer_exponent(self) -> None:
        """(-8)^(1/3) вне вещественной области"""
        with pytest.raises(DomainError, match="negative base"):
            power(Decimal(-8), Decimal(1) / Decimal(3))

    def test_integer_exponent_positive_base_is_exact(self) -> None:
        """Целый показатель при положительном основании — точный путь"""
        assert power(Decimal(2), Decimal(10)) == 1024
        assert power(Decimal("1.5"), Decimal(2)) == Decimal("2.25")
        assert power(Decimal(2), Decimal(-3)) == Decimal("0.125")

    def test_near_integer_exponent_uses_exact_path(self) -> None:
        """Показатель в пределах EPSILON от целого считается целым"""
        assert power(Decimal(2), Decimal("3.00000000000000000000001")) == 8

    def test_negative_base_odd_exponent(self) -> None:
        """(-2)^3 = -8"""
        assert power(Decimal(-2), Decimal(3)) == -8

    def test_negative_base_even_exponent(self) -> None:
        """(-2)^2 = 4"""
        assert_close(power(Decimal(-2), Decimal(2)), Decimal(4))
        assert_close(power(Decimal(-3), Decimal(-2)), Decimal(1) / Decimal(9))

    def test_fractional_exponent(self) -> None:
        """Нецелый показатель — через exp(y * log(x))"""
        assert_close(power(Decimal(2), Decimal("0.5")), SQRT_2)
        assert_close(power(Decimal(10), Decimal("2.5")), SQRT_10_POW_5)
        assert_close(power(Decimal(4), Decimal("-0.5")), Decimal("0.5"))

    def test_accepts_plain_numbers(self) -> None:
        """int/str аргументы приводятся к Decimal"""
        assert power(3, 2) == 9
        assert power("0.5", "2") == Decimal("0.25")

"""
Тесты для Roots: sqrt (Newton–Raphson с float seed)

Проверяет:
1. Точные корни и итерацию до неподвижной точки при epsilon = 0
2. Отрицательный аргумент → NegativeSquareRootError (DomainError + OverflowError)
3. Seed вне диапазона float (очень большие / очень малые x)
4. Ненулевой epsilon как более грубый критерий остановки
"""

from decimal import Decimal

import pytest

from src.decimal_math.errors import DomainError, NegativeSquareRootError
from src.decimal_math.roots import sqrt

SQRT_2 = Decimal("1.414213562373095048801688724209698078569671875376948073176680")
SQRT_3 = Decimal("1.732050807568877293527446341505872366942805253810380628055807")


class TestSqrtExact:
    """Точные корни"""

    def test_perfect_squares(self) -> None:
        """sqrt(4) = 2, sqrt(0) = 0"""
        assert sqrt(Decimal(4)) == 2
        assert sqrt(Decimal(0)) == 0
        assert sqrt(Decimal(1)) == 1
        assert sqrt(Decimal("0.25")) == Decimal("0.5")
        assert sqrt(Decimal(144)) == 12

    def test_irrational_roots(self) -> None:
        """sqrt(2), sqrt(3) совпадают с эталоном до последнего разряда"""
        assert abs(sqrt(Decimal(2)) - SQRT_2) <= Decimal("1e-27")
        assert abs(sqrt(Decimal(3)) - SQRT_3) <= Decimal("1e-27")

    def test_square_of_root(self) -> None:
        """sqrt(x)^2 ≈ x"""
        for value in ("0.001", "7", "12345.6789"):
            x = Decimal(value)
            root = sqrt(x)
            assert abs(root * root - x) <= x * Decimal("1e-26")


class TestSqrtDomain:
    """Область определения"""

    def test_negative_raises(self) -> None:
        """sqrt(-1) → NegativeSquareRootError"""
        with pytest.raises(NegativeSquareRootError, match="negative number"):
            sqrt(Decimal(-1))

    def test_negative_is_overflow_and_domain_error(self) -> None:
        """Исключение перехватывается как OverflowError и как DomainError"""
        with pytest.raises(OverflowError):
            sqrt(Decimal("-0.0001"))
        with pytest.raises(DomainError):
            sqrt(Decimal("-0.0001"))

    def test_negative_epsilon_rejected(self) -> None:
        """epsilon < 0 не допускается"""
        with pytest.raises(DomainError, match="epsilon"):
            sqrt(Decimal(2), Decimal("-0.1"))


class TestSqrtSeed:
    """Seed вне диапазона float"""

    def test_huge_value(self) -> None:
        """x за пределами float (inf seed)"""
        assert sqrt(Decimal("1E+400")) == Decimal("1E+200")
        root = sqrt(Decimal("2E+500"))
        assert abs(root / Decimal("1E+250") - SQRT_2) <= Decimal("1e-26")

    def test_tiny_value(self) -> None:
        """x ниже float (нулевой seed при x != 0)"""
        assert sqrt(Decimal("1E-400")) == Decimal("1E-200")
        root = sqrt(Decimal("3E-500"))
        assert abs(root / Decimal("1E-250") - SQRT_3) <= Decimal("1e-26")


class TestSqrtEpsilon:
    """Пользовательский допуск сходимости"""

    def test_loose_epsilon_is_close_enough(self) -> None:
        """Грубый epsilon всё равно даёт близкий корень"""
        root = sqrt(Decimal(2), Decimal("0.001"))
        assert abs(root - SQRT_2) < Decimal("0.001")

    def test_default_epsilon_is_fixed_point(self) -> None:
        """epsilon = 0 даёт тот же результат, что и явный ноль"""
        assert sqrt(Decimal(2)) == sqrt(Decimal(2), Decimal(0))

    def test_deterministic(self) -> None:
        """Повторные вызовы идентичны"""
        assert str(sqrt(Decimal("10.5"))) == str(sqrt(Decimal("10.5")))

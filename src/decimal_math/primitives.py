"""
Primitives — abs, sign, приближённая проверка целочисленности

Базовые операции без зависимостей от других семейств функций.
"""

from decimal import Decimal
from typing import Union

from src.decimal_math.config import decimal_function
from src.decimal_math.constants import EPSILON, ZERO
from src.decimal_math.errors import DomainError

DecimalLike = Union[Decimal, int, str, float]


def to_decimal(value: DecimalLike) -> Decimal:
    """
    Приведение аргумента к Decimal.

    float конвертируется через str, чтобы не переносить двоичный хвост
    (Decimal(0.1) != Decimal("0.1")).

    Args:
        value: Decimal, int, str или float

    Returns:
        Конечное Decimal-значение

    Raises:
        TypeError: Если тип не поддерживается (включая bool)
        DomainError: Если значение NaN или Infinity
        decimal.InvalidOperation: Если строка не является числом
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a numeric argument")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, (int, str)):
        result = Decimal(value)
    else:
        raise TypeError(f"Cannot convert {type(value).__name__} to Decimal")

    if not result.is_finite():
        raise DomainError(f"Argument must be finite, got {result}")

    return result


@decimal_function
def abs_(x: DecimalLike) -> Decimal:
    """
    Модуль значения: -x если x <= 0, иначе x.

    Examples:
        >>> abs_(Decimal("-2.5"))
        Decimal('2.5')
    """
    x = to_decimal(x)
    if x <= ZERO:
        return -x
    return x


@decimal_function
def sign(x: DecimalLike) -> int:
    """
    Знак значения.

    Returns:
        -1 если x < 0, 0 если x == 0, 1 если x > 0
    """
    x = to_decimal(x)
    if x < ZERO:
        return -1
    if x > ZERO:
        return 1
    return 0


@decimal_function
def is_integer(x: DecimalLike) -> bool:
    """
    Приближённая проверка целочисленности.

    Отсекает дробную часть (в сторону нуля) и сравнивает остаток с EPSILON.
    Допуск абсолютный и не зависит от масштаба x: для очень больших значений
    проверка фактически сводится к сравнению младших разрядов. Не
    использовать для точного ветвления без учёта этого допуска.

    Examples:
        >>> is_integer(Decimal("3"))
        True
        >>> is_integer(Decimal("3.00000000000000000001"))
        True
        >>> is_integer(Decimal("3.5"))
        False
    """
    x = to_decimal(x)
    truncated = int(x)
    return abs_(x - truncated) <= EPSILON

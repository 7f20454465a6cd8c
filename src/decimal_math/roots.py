"""
Roots — квадратный корень методом Ньютона–Рафсона

Начальное приближение берётся из float (math.sqrt): точность seed не важна,
важна только близость к корню. Дальше итерации выполняются в Decimal.
"""

import logging
import math
from decimal import Decimal

from src.decimal_math.config import decimal_function, get_config
from src.decimal_math.constants import HALF, ZERO
from src.decimal_math.errors import DomainError, NegativeSquareRootError
from src.decimal_math.primitives import DecimalLike, abs_, to_decimal

logger = logging.getLogger(__name__)


def _initial_approximation(x: Decimal) -> Decimal:
    """
    Seed для Ньютона из двоичной плавающей точки.

    Вне диапазона float (seed inf, либо 0 при ненулевом x) seed строится
    по десятичному порядку: 10^(adjusted(x) // 2).
    """
    seed = math.sqrt(float(x))
    if math.isinf(seed) or (seed == 0.0 and x != ZERO):
        return Decimal(1).scaleb(x.adjusted() // 2)
    return Decimal(seed)


@decimal_function
def sqrt(x: DecimalLike, epsilon: DecimalLike = ZERO) -> Decimal:
    """
    Квадратный корень.

    Итерация: current = (previous + x / previous) / 2, пока
    |previous - current| > epsilon. epsilon == 0 означает итерацию до
    неподвижной точки рабочей точности (соседние приближения совпадают
    цифра в цифру); ненулевой epsilon даёт более быструю, грубую сходимость.

    Args:
        x: Подкоренное значение (>= 0)
        epsilon: Допуск сходимости (default: 0)

    Returns:
        sqrt(x)

    Raises:
        NegativeSquareRootError: Если x < 0
        DomainError: Если epsilon < 0

    Examples:
        >>> sqrt(Decimal(4)) == 2
        True
        >>> sqrt(Decimal(0))
        Decimal('0')
    """
    x = to_decimal(x)
    epsilon = to_decimal(epsilon)

    if x < ZERO:
        raise NegativeSquareRootError(
            f"Cannot calculate square root from a negative number: {x}"
        )
    if epsilon < ZERO:
        raise DomainError(f"epsilon must be non-negative, got {epsilon}")

    max_iterations = get_config().max_iterations
    current = _initial_approximation(x)
    for _ in range(max_iterations):
        previous = current
        if previous == ZERO:
            return ZERO

        current = (previous + x / previous) * HALF
        if abs_(previous - current) <= epsilon:
            break
    else:
        # Соседние приближения колеблются на последнем разряде
        logger.debug("sqrt: iteration stopped at cap %d", max_iterations)

    return current

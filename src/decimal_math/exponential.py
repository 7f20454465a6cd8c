"""
Exponential / Logarithm — exp, log, log10, log_base

exp: редукция аргумента целыми единицами в [0, 1], ряд Тейлора
    Σ x^n / n! с рекуррентой factor *= x / n, затем умножение на E^count
    через power_n (точный путь).

log: мультипликативная редукция в (1/E, 1), затем знакочередующийся ряд
    ln(1 + u) = Σ (-1)^(n+1) u^n / n для u = x - 1.

Ряды останавливаются, когда частичная сумма перестаёт меняться в рабочей
точности, или по лимиту итераций (тогда возвращается лучший частичный
результат, событие пишется в DEBUG-лог).
"""

import logging
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal

from src.decimal_math.config import decimal_function, get_config
from src.decimal_math.constants import E, E_INVERTED, LOG10_INV, ONE, ZERO
from src.decimal_math.errors import DomainError
from src.decimal_math.power import power_n
from src.decimal_math.primitives import DecimalLike, to_decimal

logger = logging.getLogger(__name__)


@decimal_function
def exp(x: DecimalLike) -> Decimal:
    """
    Экспонента e^x.

    Редукция: пока x > 1 — вычитаем единицу, пока x < 0 — прибавляем,
    count хранит сдвиг. Сдвиг вычисляется за один шаг через целую часть
    (результат совпадает с пошаговой редукцией).

    Args:
        x: Показатель

    Returns:
        e^x

    Raises:
        decimal.Overflow: Если результат выходит за Emax контекста

    Examples:
        >>> exp(Decimal(0))
        Decimal('1')
    """
    x = to_decimal(x)

    count = 0
    if x > ONE:
        count = int(x.to_integral_value(rounding=ROUND_CEILING)) - 1
    elif x < ZERO:
        count = int(x.to_integral_value(rounding=ROUND_FLOOR))
    if count:
        x -= count

    # Теперь x в [0, 1]
    max_iterations = get_config().max_iterations
    result = ONE
    factor = ONE
    for iteration in range(1, max_iterations + 1):
        cached_result = result
        factor *= x / iteration
        result += factor
        if result == cached_result:
            break
    else:
        logger.debug("exp: series stopped at iteration cap %d", max_iterations)

    if count != 0:
        result *= power_n(E, count)

    return result


@decimal_function
def log(x: DecimalLike) -> Decimal:
    """
    Натуральный логарифм ln(x).

    Редукция: пока x >= 1 — умножаем на 1/E (count += 1), пока x <= 1/E —
    умножаем на E (count -= 1). Результат: count + ln(x_reduced).

    Args:
        x: Аргумент (строго положительный)

    Returns:
        ln(x)

    Raises:
        DomainError: Если x <= 0

    Examples:
        >>> log(Decimal(1))
        Decimal('0')
    """
    x = to_decimal(x)
    if x <= ZERO:
        raise DomainError(f"log requires x > 0, got {x}")

    if x == ONE:
        return ZERO

    # Константы округлены до рабочей точности, как и произведения редукции
    e = +E
    e_inverted = +E_INVERTED

    count = 0
    while x >= ONE:
        x *= e_inverted
        count += 1

    while x <= e_inverted:
        x *= e
        count -= 1

    x -= ONE
    if x == ZERO:
        return Decimal(count)

    max_iterations = get_config().max_iterations
    result = ZERO
    y = ONE
    for iteration in range(1, max_iterations + 1):
        cached_result = result
        y *= -x
        result += y / iteration
        if result == cached_result:
            break
    else:
        logger.debug("log: series stopped at iteration cap %d", max_iterations)

    # result = -ln(1 + u)
    return count - result


@decimal_function
def log10(x: DecimalLike) -> Decimal:
    """Десятичный логарифм: log(x) * log10(E)."""
    return log(x) * LOG10_INV


@decimal_function
def log_base(x: DecimalLike, base: DecimalLike) -> Decimal:
    """
    Логарифм по произвольному основанию: log(x) / log(base).

    Raises:
        DomainError: Если x <= 0, base <= 0 или base == 1
    """
    base = to_decimal(base)
    if base <= ZERO or base == ONE:
        raise DomainError(f"log base must be positive and != 1, got {base}")
    return log(x) / log(base)

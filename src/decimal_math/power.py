"""
Power — целая и вещественная степень

power_n: возведение в целую степень двоичным возведением (exponentiation
by squaring). Точный путь: никаких рядов, только умножения Decimal,
O(log |power|) умножений.

power: вещественная степень с диспетчеризацией по случаям. Целый
показатель при положительном основании всегда идёт через power_n, чтобы
не терять точность на круговом пути exp(pow * log(value)).
"""

from decimal import Decimal

from src.decimal_math.config import decimal_function
from src.decimal_math.constants import ONE, ZERO
from src.decimal_math.errors import DomainError
from src.decimal_math.primitives import DecimalLike, is_integer, to_decimal


@decimal_function
def power_n(value: DecimalLike, power: int) -> Decimal:
    """
    Возведение в целую степень.

    Args:
        value: Основание
        power: Целый показатель (int, может быть отрицательным)

    Returns:
        value ** power

    Raises:
        TypeError: Если power не int
        DomainError: Если value == 0 и power < 0

    Examples:
        >>> power_n(Decimal(2), 10)
        Decimal('1024')
        >>> power_n(Decimal(2), -1)
        Decimal('0.5')
    """
    if isinstance(power, bool) or not isinstance(power, int):
        raise TypeError(f"power must be int, got {type(power).__name__}")

    value = to_decimal(value)

    if power == 0:
        return ONE

    if power < 0:
        if value == ZERO:
            raise DomainError(f"Zero base with negative power {power} is undefined")
        value = ONE / value
        power = -power

    q = power
    prod = ONE
    current = value

    while q > 0:
        if q % 2 == 1:
            # Единица в двоичной записи показателя: забираем текущую степень
            prod = current * prod
            q -= 1

        q //= 2
        if q:
            # value^i -> value^(2*i)
            current *= current

    return prod


@decimal_function
def power(value: DecimalLike, exponent: DecimalLike) -> Decimal:
    """
    Вещественная степень value ** exponent.

    Порядок диспетчеризации:
        exponent == 0                    → 1
        exponent == 1                    → value
        value == 1                       → 1
        value == 0, exponent > 0         → 0
        value == 0, exponent < 0         → DomainError
        exponent == -1                   → 1 / value
        value < 0, exponent не целое     → DomainError
        exponent целое, value > 0        → power_n (точный путь)
        exponent не целое, value >= 0    → exp(exponent * log(value))
        exponent целое чётное, value < 0 → exp(exponent * log(-value))
        exponent целое нечётное, value < 0 → -exp(exponent * log(-value))

    "Целое" определяется через is_integer (с допуском EPSILON).

    Raises:
        DomainError: Ноль в отрицательной степени или отрицательное основание
            с нецелым показателем

    Examples:
        >>> power(Decimal(0), Decimal(0))
        Decimal('1')
    """
    from src.decimal_math.exponential import exp, log

    value = to_decimal(value)
    exponent = to_decimal(exponent)

    if exponent == ZERO:
        return ONE
    if exponent == ONE:
        return value

    if value == ONE:
        return ONE
    if value == ZERO:
        if exponent > ZERO:
            return ZERO
        raise DomainError(
            f"Invalid operation: zero base and negative power {exponent}"
        )

    if exponent == -ONE:
        return ONE / value

    exponent_is_integer = is_integer(exponent)
    if value < ZERO and not exponent_is_integer:
        raise DomainError(
            f"Invalid operation: negative base {value} and non-integer power {exponent}"
        )

    if exponent_is_integer and value > ZERO:
        return power_n(value, int(exponent))

    if not exponent_is_integer:
        return exp(exponent * log(value))

    # Отрицательное основание, целый показатель: знак по чётности
    if int(exponent) % 2 == 0:
        return exp(exponent * log(-value))
    return -exp(exponent * log(-value))

"""
Trigonometric — cos, sin, tan, asin, acos, atan, atan2

cos: редукция по периоду 2π и полупериоду π, затем чётный ряд Тейлора
    по x². Публичный cos кладёт результат на fixed-point сетку выходной
    точности, поэтому нули косинуса (например, в π/2) сравниваются с нулём
    точно. sin и tan берут косинус в рабочей точности (_cos).

sin: не вычисляется отдельным рядом. |sin x| = sqrt(1 - cos²x), знак
    определяется по полупериоду, в который попадает x.

asin: нечётность + формула половинного угла
    asin(x) = (π/2 - asin(1 - 2x²)) / 2, пока преобразованный аргумент
    ближе к нулю, затем нечётный ряд Тейлора.

acos, atan, atan2 выражаются через asin.
"""

import logging
from decimal import ROUND_DOWN, Decimal

from src.decimal_math.config import decimal_function, get_config, to_fixed_point
from src.decimal_math.constants import (
    HALF,
    HALF_PI,
    ONE,
    PI,
    QUARTER_PI,
    TWO_PI,
    ZERO,
)
from src.decimal_math.errors import DecimalMathInvariantError, DomainError
from src.decimal_math.primitives import DecimalLike, abs_, to_decimal
from src.decimal_math.roots import sqrt

logger = logging.getLogger(__name__)


# =============================================================================
# РЕДУКЦИЯ АРГУМЕНТА
# =============================================================================


def _remove_full_turns(x: Decimal) -> Decimal:
    """Вычитает из x целое число оборотов 2π (усечение к нулю)."""
    if abs_(x) > TWO_PI:
        turns = int((x / TWO_PI).to_integral_value(rounding=ROUND_DOWN))
        x -= turns * TWO_PI
    return x


# =============================================================================
# COS / SIN / TAN
# =============================================================================


def _cos(x: Decimal) -> Decimal:
    """Косинус в рабочей точности, без выхода на fixed-point сетку."""
    x = _remove_full_turns(x)

    # Дочищаем остаток после округления числа оборотов
    while x > TWO_PI:
        x -= TWO_PI
    while x < -TWO_PI:
        x += TWO_PI

    # Теперь x в [-2π, 2π]
    if PI <= x <= TWO_PI:
        return -_cos(x - PI)
    if -TWO_PI <= x <= -PI:
        return -_cos(x + PI)

    x_squared = x * x

    # y = 1 - x²/2! + x⁴/4! - x⁶/6! ...
    xx = -x_squared * HALF
    y = ONE + xx
    cached_y = y - ONE  # заведомо отличается от y

    max_iterations = get_config().max_iterations
    i = 1
    while cached_y != y and i < max_iterations:
        cached_y = y

        # 2i² + 2i + i + 1 = 2i² + 3i + 1
        factor = Decimal(i * (i + i + 3) + 1)
        factor = -HALF / factor
        xx *= x_squared * factor
        y += xx
        i += 1

    if cached_y != y:
        logger.debug("cos: series stopped at iteration cap %d", max_iterations)

    return y


@decimal_function
def cos(x: DecimalLike) -> Decimal:
    """
    Косинус.

    Args:
        x: Угол в радианах

    Returns:
        cos(x) на fixed-point сетке 10^-precision

    Examples:
        >>> cos(Decimal(0)) == 1
        True
    """
    return to_fixed_point(_cos(to_decimal(x)))


@decimal_function
def is_sign_of_sine_positive(x: DecimalLike) -> bool:
    """
    Знак синуса по полупериоду.

    После редукции в [-2π, 2π]:
        [-2π, -π] → положительный
        [-π, 0]   → отрицательный
        [0, π]    → положительный
        [π, 2π]   → отрицательный

    Raises:
        DecimalMathInvariantError: Если x не попал ни в один интервал
            (недостижимо при корректной редукции)
    """
    x = _remove_full_turns(to_decimal(x))

    while x >= TWO_PI:
        x -= TWO_PI
    while x <= -TWO_PI:
        x += TWO_PI

    if -TWO_PI <= x <= -PI:
        return True
    if -PI <= x <= ZERO:
        return False
    if ZERO <= x <= PI:
        return True
    if PI <= x <= TWO_PI:
        return False

    raise DecimalMathInvariantError(
        f"Argument {x} left [-2π, 2π] after period reduction"
    )


@decimal_function
def sin(x: DecimalLike) -> Decimal:
    """
    Синус: sqrt(1 - cos²x) со знаком полупериода.

    Examples:
        >>> sin(Decimal(0))
        Decimal('0')
    """
    x = to_decimal(x)
    cos_x = _cos(x)

    # Округление может дать cos² чуть больше 1
    radicand = ONE - cos_x * cos_x
    if radicand < ZERO:
        radicand = ZERO

    module_of_sin = sqrt(radicand)
    if is_sign_of_sine_positive(x):
        return module_of_sin
    return -module_of_sin


@decimal_function
def tan(x: DecimalLike) -> Decimal:
    """
    Тангенс: sin(x) / cos(x).

    Raises:
        DomainError: Если cos(x) == 0 в выходной точности (вертикальная
            асимптота, например x = π/2)
    """
    x = to_decimal(x)
    cos_x = _cos(x)
    if to_fixed_point(cos_x) == ZERO:
        raise DomainError(f"tan is undefined where cos(x) == 0, got x={x}")

    return sin(x) / cos_x


# =============================================================================
# ОБРАТНЫЕ ФУНКЦИИ
# =============================================================================


@decimal_function
def asin(x: DecimalLike) -> Decimal:
    """
    Арксинус.

    Args:
        x: Значение в [-1, 1]

    Returns:
        asin(x) в [-π/2, π/2]

    Raises:
        DomainError: Если x вне [-1, 1]
    """
    x = to_decimal(x)
    if x > ONE or x < -ONE:
        raise DomainError(f"asin requires x in [-1, 1], got {x}")

    # Известные значения
    if x == ZERO:
        return ZERO
    if x == ONE:
        return HALF_PI

    # asin нечётная
    if x < ZERO:
        return -asin(-x)

    # asin(x) = (π/2 - asin(1 - 2x²)) / 2 при x >= 0; ряд сходится быстрее
    # у нуля, поэтому переходим, пока новый аргумент ближе к нулю
    new_x = ONE - 2 * x * x
    if abs_(x) > abs_(new_x):
        t = asin(new_x)
        return HALF * (HALF_PI - t)

    max_iterations = get_config().max_iterations
    result = x
    y = result
    xx = x * x
    for i in range(1, max_iterations + 1):
        cached_y = y
        result *= xx * (ONE - HALF / i)
        y += result / (2 * i + 1)
        if y == cached_y:
            break
    else:
        logger.debug("asin: series stopped at iteration cap %d", max_iterations)

    return y


@decimal_function
def acos(x: DecimalLike) -> Decimal:
    """
    Арккосинус.

    acos(0) = π/2, acos(1) = 0, acos(x) = π - acos(-x) для x < 0,
    иначе π/2 - asin(x).

    Raises:
        DomainError: Если x вне [-1, 1]
    """
    x = to_decimal(x)
    if x == ZERO:
        return HALF_PI
    if x == ONE:
        return ZERO

    if x < ZERO:
        return PI - acos(-x)

    return HALF_PI - asin(x)


@decimal_function
def atan(x: DecimalLike) -> Decimal:
    """Арктангенс: asin(x / sqrt(1 + x²)), atan(0) = 0, atan(1) = π/4."""
    x = to_decimal(x)
    if x == ZERO:
        return ZERO
    if x == ONE:
        return QUARTER_PI

    return asin(x / sqrt(ONE + x * x))


@decimal_function
def atan2(y: DecimalLike, x: DecimalLike) -> Decimal:
    """
    Угол точки (x, y) с учётом квадранта.

    Args:
        y: Ордината
        x: Абсцисса

    Returns:
        Угол в (-π, π]

    Raises:
        DomainError: Если x == 0 и y == 0 (угол в начале координат не определён)
    """
    y = to_decimal(y)
    x = to_decimal(x)

    if x > ZERO:
        return atan(y / x)
    if x < ZERO and y >= ZERO:
        return atan(y / x) + PI
    if x < ZERO and y < ZERO:
        return atan(y / x) - PI

    # x == 0
    if y > ZERO:
        return HALF_PI
    if y < ZERO:
        return -HALF_PI

    raise DomainError("atan2 is undefined at the origin (0, 0)")

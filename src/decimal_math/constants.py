"""
Decimal Math Constants — именованные Decimal-константы

Все константы задаются строковыми литералами с 50-60 значащими цифрами,
чтобы покрыть точность рабочего контекста (precision + guard digits).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Константы никогда не строятся из float (нет двоичных артефактов)
2. Константы никогда не пересчитываются в runtime
3. Точность литерала >= рабочей точности вычислений; заниженная точность
   молча ухудшает все зависимые функции
"""

from decimal import Decimal
from typing import Final

# =============================================================================
# БАЗОВЫЕ ЗНАЧЕНИЯ
# =============================================================================

ZERO: Final[Decimal] = Decimal("0")
ONE: Final[Decimal] = Decimal("1")
HALF: Final[Decimal] = Decimal("0.5")

# Абсолютный допуск для is_integer (не зависит от масштаба значения)
EPSILON: Final[Decimal] = Decimal("0.0000000000000000001")


# =============================================================================
# ТРАНСЦЕНДЕНТНЫЕ КОНСТАНТЫ
# =============================================================================

E: Final[Decimal] = Decimal("2.7182818284590452353602874713526624977572470936999595749")

# 1 / E
E_INVERTED: Final[Decimal] = Decimal("0.3678794411714423215955237701614608674458111310317678")

# log10(E) = 1 / ln(10)
LOG10_INV: Final[Decimal] = Decimal("0.434294481903251827651128918916605082294397005803666566114")

PI: Final[Decimal] = Decimal("3.14159265358979323846264338327950288419716939937510")
HALF_PI: Final[Decimal] = Decimal("1.570796326794896619231321691639751442098584699687552910487")
QUARTER_PI: Final[Decimal] = Decimal("0.785398163397448309615660845819875721049292349843776455243")
TWO_PI: Final[Decimal] = Decimal("6.28318530717958647692528676655900576839433879875021")


# =============================================================================
# ПАРАМЕТРЫ СХОДИМОСТИ
# =============================================================================

# Жёсткий лимит итераций ряда Тейлора (защита от бесконечного цикла
# на границе точности, при нормальной редукции аргумента не достигается)
MAXIMUM_ITERATIONS: Final[int] = 100

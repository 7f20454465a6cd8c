"""
Decimal Math — трансцендентные функции над decimal.Decimal

Тригонометрические, гиперболические, экспоненциальные, логарифмические,
степенные функции и квадратный корень, вычисляемые напрямую в Decimal.
Двоичная плавающая точка используется только для начального приближения
sqrt.

Все функции чистые: не читают и не изменяют decimal-контекст вызывающего
кода, вычисляют в рабочем контексте активной DecimalMathConfig и округляют
результат до её выходной точности.
"""

import logging as _logging

# Constants
from src.decimal_math.constants import E, EPSILON, ONE, PI, ZERO

# Config
from src.decimal_math.config import (
    DEFAULT_CONFIG,
    DecimalMathConfig,
    get_config,
    use_config,
)

# Errors
from src.decimal_math.errors import (
    DecimalMathError,
    DecimalMathInvariantError,
    DomainError,
    NegativeSquareRootError,
)

# Primitives
from src.decimal_math.primitives import abs_, is_integer, sign, to_decimal

# Exponential / Logarithm
from src.decimal_math.exponential import exp, log, log10, log_base

# Power
from src.decimal_math.power import power, power_n

# Square root
from src.decimal_math.roots import sqrt

# Trigonometric
from src.decimal_math.trigonometric import (
    acos,
    asin,
    atan,
    atan2,
    cos,
    is_sign_of_sine_positive,
    sin,
    tan,
)

# Hyperbolic
from src.decimal_math.hyperbolic import cosh, sinh, tanh

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    # Constants
    "E",
    "EPSILON",
    "ONE",
    "PI",
    "ZERO",
    # Config
    "DEFAULT_CONFIG",
    "DecimalMathConfig",
    "get_config",
    "use_config",
    # Errors
    "DecimalMathError",
    "DecimalMathInvariantError",
    "DomainError",
    "NegativeSquareRootError",
    # Primitives
    "abs_",
    "is_integer",
    "sign",
    "to_decimal",
    # Exponential / Logarithm
    "exp",
    "log",
    "log10",
    "log_base",
    # Power
    "power",
    "power_n",
    # Square root
    "sqrt",
    # Trigonometric
    "acos",
    "asin",
    "atan",
    "atan2",
    "cos",
    "is_sign_of_sine_positive",
    "sin",
    "tan",
    # Hyperbolic
    "cosh",
    "sinh",
    "tanh",
]

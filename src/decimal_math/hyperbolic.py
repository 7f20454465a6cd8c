"""
Hyperbolic — cosh, sinh, tanh через exp(x) и exp(-x) = 1 / exp(x)
"""

from decimal import Decimal

from src.decimal_math.config import decimal_function
from src.decimal_math.constants import HALF, ONE
from src.decimal_math.exponential import exp
from src.decimal_math.primitives import DecimalLike


@decimal_function
def cosh(x: DecimalLike) -> Decimal:
    """Гиперболический косинус: (e^x + e^-x) / 2."""
    y = exp(x)
    yy = ONE / y
    return (y + yy) * HALF


@decimal_function
def sinh(x: DecimalLike) -> Decimal:
    """Гиперболический синус: (e^x - e^-x) / 2."""
    y = exp(x)
    yy = ONE / y
    return (y - yy) * HALF


@decimal_function
def tanh(x: DecimalLike) -> Decimal:
    """Гиперболический тангенс: (e^x - e^-x) / (e^x + e^-x)."""
    y = exp(x)
    yy = ONE / y
    return (y - yy) / (y + yy)

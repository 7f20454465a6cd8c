"""
Decimal Math Errors — иерархия исключений

Нарушение области определения → DomainError (немедленно, без fallback).
Исчерпание точности ряда ошибкой НЕ является: возвращается лучший
частичный результат.
"""


class DecimalMathError(Exception):
    """Базовое исключение библиотеки."""

    pass


class DomainError(DecimalMathError, ValueError):
    """
    Аргумент вне математической области определения функции.

    Примеры: asin(2), log(0), atan2(0, 0), tan(π/2),
    power(0, -1), power(-8, 1/3).
    """

    pass


class NegativeSquareRootError(DomainError, OverflowError):
    """
    Квадратный корень из отрицательного числа.

    Является одновременно DomainError и OverflowError: вызывающий код может
    перехватывать его как ошибку области определения или как overflow.
    """

    pass


class DecimalMathInvariantError(DecimalMathError, RuntimeError):
    """
    Нарушение внутреннего инварианта (недостижимо при корректной редукции).

    Никогда не подавляется: неверный знак или ветка хуже, чем исключение.
    """

    pass

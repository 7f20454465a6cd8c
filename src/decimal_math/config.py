"""
Decimal Math Config — точность и контексты вычислений

Модуль задаёт, в какой точности работает библиотека:
- precision: число значащих цифр возвращаемых значений
- guard_digits: дополнительные цифры рабочего контекста во время рядов
- rounding: режим округления decimal
- max_iterations: общий лимит итераций рядов

Контракт вычисления (декоратор decimal_function):
1. Вход в decimal.localcontext(working_context()) — контекст вызывающего
   кода не читается и не изменяется
2. Вложенные вызовы функций библиотеки остаются в рабочем контексте
   (без промежуточного округления)
3. Decimal-результат округляется до output_context()

Активная конфигурация хранится в ContextVar: use_config() меняет её только
для текущего потока / async-задачи. Глобального setter нет.
"""

import decimal
import functools
from contextlib import contextmanager
from contextvars import ContextVar
from decimal import Decimal
from typing import Any, Callable, Final, Iterator, Optional, TypeVar

from pydantic import BaseModel, Field, field_validator

from src.decimal_math.constants import MAXIMUM_ITERATIONS

F = TypeVar("F", bound=Callable[..., Any])

ROUNDING_MODES: Final[frozenset[str]] = frozenset(
    {
        decimal.ROUND_CEILING,
        decimal.ROUND_DOWN,
        decimal.ROUND_FLOOR,
        decimal.ROUND_HALF_DOWN,
        decimal.ROUND_HALF_EVEN,
        decimal.ROUND_HALF_UP,
        decimal.ROUND_UP,
        decimal.ROUND_05UP,
    }
)


# =============================================================================
# CONFIG MODEL
# =============================================================================


class DecimalMathConfig(BaseModel):
    """
    Параметры точности библиотеки.

    Immutable модель (frozen=True). Для изменения используется use_config(),
    создающий новый экземпляр.
    """

    precision: int = Field(
        default=28, gt=0, description="Значащие цифры возвращаемых значений"
    )
    guard_digits: int = Field(
        default=10, ge=0, description="Дополнительные цифры рабочего контекста"
    )
    rounding: str = Field(
        default=decimal.ROUND_HALF_EVEN, description="Режим округления decimal"
    )
    max_iterations: int = Field(
        default=MAXIMUM_ITERATIONS, gt=0, description="Лимит итераций рядов"
    )

    model_config = {"frozen": True}

    @field_validator("rounding")
    @classmethod
    def validate_rounding(cls, v: str) -> str:
        """Допускаются только константы округления модуля decimal."""
        if v not in ROUNDING_MODES:
            raise ValueError(
                f"rounding must be one of {sorted(ROUNDING_MODES)}, got {v!r}"
            )
        return v

    @property
    def working_precision(self) -> int:
        return self.precision + self.guard_digits

    @property
    def resolution(self) -> Decimal:
        """
        Шаг fixed-point сетки выходной точности: 10^-precision.

        Ограниченные по модулю результаты (cos в [-1, 1]) кладутся на эту
        сетку, поэтому значения, неотличимые от нуля в выходной точности,
        сравниваются с нулём точно.
        """
        return Decimal(1).scaleb(-self.precision)

    def output_context(self) -> decimal.Context:
        return decimal.Context(prec=self.precision, rounding=self.rounding)

    def working_context(self) -> decimal.Context:
        return decimal.Context(prec=self.working_precision, rounding=self.rounding)


DEFAULT_CONFIG: Final[DecimalMathConfig] = DecimalMathConfig()


# =============================================================================
# SCOPING
# =============================================================================

_ACTIVE_CONFIG: ContextVar[DecimalMathConfig] = ContextVar(
    "decimal_math_config", default=DEFAULT_CONFIG
)

# True пока выполняется внешний вызов функции библиотеки
_IN_EVALUATION: ContextVar[bool] = ContextVar("decimal_math_in_evaluation", default=False)


def get_config() -> DecimalMathConfig:
    """Активная конфигурация текущего потока / задачи."""
    return _ACTIVE_CONFIG.get()


@contextmanager
def use_config(
    config: Optional[DecimalMathConfig] = None, **overrides: Any
) -> Iterator[DecimalMathConfig]:
    """
    Временная активация конфигурации.

    Args:
        config: Готовая конфигурация (default: текущая активная)
        **overrides: Поля, заменяемые в config (валидируются заново)

    Yields:
        Активированная конфигурация

    Raises:
        pydantic.ValidationError: Если overrides нарушают ограничения полей

    Examples:
        >>> with use_config(precision=50):  # doctest: +SKIP
        ...     e50 = exp(1)
    """
    base = config if config is not None else get_config()
    if overrides:
        base = DecimalMathConfig(**{**base.model_dump(), **overrides})

    token = _ACTIVE_CONFIG.set(base)
    try:
        yield base
    finally:
        _ACTIVE_CONFIG.reset(token)


# =============================================================================
# EVALUATION
# =============================================================================


def decimal_function(func: F) -> F:
    """
    Декоратор публичной функции библиотеки.

    Внешний вызов выполняется в рабочем контексте активной конфигурации,
    Decimal-результат округляется до выходной точности. Вложенные вызовы
    (например, exp внутри cosh) выполняются напрямую, без повторного входа
    в контекст и без промежуточного округления.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if _IN_EVALUATION.get():
            return func(*args, **kwargs)

        config = get_config()
        token = _IN_EVALUATION.set(True)
        try:
            with decimal.localcontext(config.working_context()):
                result = func(*args, **kwargs)
        finally:
            _IN_EVALUATION.reset(token)

        if isinstance(result, Decimal):
            return config.output_context().plus(result)
        return result

    return wrapper  # type: ignore[return-value]


def to_fixed_point(value: Decimal) -> Decimal:
    """
    Кладёт значение на fixed-point сетку выходной точности активной
    конфигурации (quantize до 10^-precision).

    Только для ограниченных по модулю результатов (|value| < 10): квантование
    выполняется в контексте с precision + 2 цифрами.
    """
    config = get_config()
    context = decimal.Context(prec=config.precision + 2, rounding=config.rounding)
    return value.quantize(config.resolution, context=context)

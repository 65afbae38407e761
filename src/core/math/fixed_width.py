"""
Fixed-Width Primitives — Java-совместимые числовые типы

Модуль задаёт точную семантику четырёх примитивных типов:
- int    — 32-bit signed, two's-complement
- long   — 64-bit signed, two's-complement
- float  — IEEE-754 binary32
- double — IEEE-754 binary64 (нативный Python float)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Целочисленное переполнение никогда не бросает исключение: результат
   берётся по модулю 2^n и приводится в знаковый диапазон
2. Значение float всегда точно представимо в binary32 (хранится как Python float)
3. NaN/Inf — это валидные значения float/double, а не ошибки
4. bool не является числом ни для одного из типов

Python int не имеет фиксированной ширины, поэтому каждая операция
над int/long обязана заканчиваться wrap_int32/wrap_int64.
"""

import math
import numbers
from typing import Final

import numpy as np

# =============================================================================
# ГРАНИЦЫ ТИПОВ
# =============================================================================

INT32_BITS: Final[int] = 32
INT64_BITS: Final[int] = 64

INT32_MIN: Final[int] = -(2 ** (INT32_BITS - 1))
INT32_MAX: Final[int] = 2 ** (INT32_BITS - 1) - 1

INT64_MIN: Final[int] = -(2 ** (INT64_BITS - 1))
INT64_MAX: Final[int] = 2 ** (INT64_BITS - 1) - 1

# Наибольшее конечное binary32 значение
FLOAT32_MAX: Final[float] = float(np.finfo(np.float32).max)

_INT32_MASK: Final[int] = (1 << INT32_BITS) - 1
_INT64_MASK: Final[int] = (1 << INT64_BITS) - 1


# =============================================================================
# WRAPAROUND
# =============================================================================


def wrap_int32(value: int) -> int:
    """
    Приведение произвольного Python int к 32-bit signed (two's-complement).

    Args:
        value: Любое целое (в том числе за пределами диапазона)

    Returns:
        value mod 2^32, приведённое в [INT32_MIN, INT32_MAX]

    Examples:
        >>> wrap_int32(2147483648)
        -2147483648
        >>> wrap_int32(-2147483649)
        2147483647
        >>> wrap_int32(42)
        42
    """
    return ((value - INT32_MIN) & _INT32_MASK) + INT32_MIN


def wrap_int64(value: int) -> int:
    """
    Приведение произвольного Python int к 64-bit signed (two's-complement).

    Examples:
        >>> wrap_int64(9223372036854775808)
        -9223372036854775808
    """
    return ((value - INT64_MIN) & _INT64_MASK) + INT64_MIN


def is_int32(value: int) -> bool:
    """True если value помещается в int без переполнения."""
    return INT32_MIN <= value <= INT32_MAX


def is_int64(value: int) -> bool:
    """True если value помещается в long без переполнения."""
    return INT64_MIN <= value <= INT64_MAX


# =============================================================================
# FLOAT NARROWING
# =============================================================================


def to_float32(value: float) -> float:
    """
    Округление вещественного числа до ближайшего binary32 (round-half-even).

    Результат возвращается как Python float, но его значение точно
    представимо в single precision. Переполнение даёт ±inf, NaN сохраняется.

    Args:
        value: Вещественное число (double precision)

    Returns:
        Значение, округлённое до binary32

    Examples:
        >>> to_float32(1.5)
        1.5
        >>> to_float32(0.1)
        0.10000000149011612
        >>> to_float32(1e39)
        inf
    """
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.float32(value))


def is_float32_exact(value: float) -> bool:
    """
    Проверка, что value точно представимо в binary32.

    NaN считается представимым (binary32 NaN существует).
    """
    if math.isnan(value):
        return True
    return to_float32(value) == value


# =============================================================================
# ВАЛИДАЦИЯ АРГУМЕНТОВ
# =============================================================================


def _is_integral(value: object) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def _is_real(value: object) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real)


def validate_int32(value: object, name: str) -> int:
    """
    Валидация аргумента типа int.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как Python int

    Raises:
        TypeError: Если value не целое число (bool тоже отвергается)
        ValueError: Если value вне [INT32_MIN, INT32_MAX]
    """
    if not _is_integral(value):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    result = int(value)
    if not is_int32(result):
        raise ValueError(
            f"{name} must be in [{INT32_MIN}, {INT32_MAX}], got {result}"
        )
    return result


def validate_int64(value: object, name: str) -> int:
    """
    Валидация аргумента типа long.

    Raises:
        TypeError: Если value не целое число
        ValueError: Если value вне [INT64_MIN, INT64_MAX]
    """
    if not _is_integral(value):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    result = int(value)
    if not is_int64(result):
        raise ValueError(
            f"{name} must be in [{INT64_MIN}, {INT64_MAX}], got {result}"
        )
    return result


def validate_float64(value: object, name: str) -> float:
    """
    Валидация аргумента типа double.

    Принимает любое вещественное число (int расширяется до double).
    NaN/Inf допустимы.

    Raises:
        TypeError: Если value не вещественное число
        ValueError: Если целое слишком велико для double
    """
    if not _is_real(value):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")

    try:
        return float(value)
    except OverflowError as e:
        raise ValueError(f"{name} is out of double range: {value}") from e


def validate_float32(value: object, name: str) -> float:
    """
    Валидация аргумента типа float.

    Значение сначала приводится к double, затем округляется до binary32.

    Raises:
        TypeError: Если value не вещественное число
        ValueError: Если целое слишком велико для double
    """
    return to_float32(validate_float64(value, name))

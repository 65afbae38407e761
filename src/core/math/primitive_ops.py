"""
Primitive Ops — арифметика над int/long/float/double

Аналоги инструкций iadd/ineg/ladd/lneg/fadd/fneg/dadd/dneg:
- int/long: сложение и отрицание с two's-complement wraparound
- float: сложение в binary32 (оба операнда и результат — binary32)
- double: нативное IEEE-754 сложение Python float

Операции тотальны: исключения не бросаются, переполнение и
невалидные float-операции дают wrap / ±inf / NaN соответственно.
Аргументы считаются уже провалидированными (см. fixed_width.validate_*).
"""

import numpy as np

from src.core.math.fixed_width import to_float32, wrap_int32, wrap_int64

# =============================================================================
# INT (32-bit)
# =============================================================================


def int_add(a: int, b: int) -> int:
    """iadd: a + b с wraparound по модулю 2^32."""
    return wrap_int32(a + b)


def int_neg(a: int) -> int:
    """
    ineg: -a с wraparound.

    -INT32_MIN == INT32_MIN (положительного двойника нет).
    """
    return wrap_int32(-a)


def int_sub(a: int, b: int) -> int:
    """a - b, выраженное как a + (-b)."""
    return int_add(a, int_neg(b))


# =============================================================================
# LONG (64-bit)
# =============================================================================


def long_add(a: int, b: int) -> int:
    """ladd: a + b с wraparound по модулю 2^64."""
    return wrap_int64(a + b)


def long_neg(a: int) -> int:
    """lneg: -a с wraparound (-INT64_MIN == INT64_MIN)."""
    return wrap_int64(-a)


def long_sub(a: int, b: int) -> int:
    return long_add(a, long_neg(b))


# =============================================================================
# FLOAT (binary32)
# =============================================================================


def float_add(a: float, b: float) -> float:
    """
    fadd: сложение в single precision.

    Операнды приводятся к binary32 до сложения, сумма округляется
    один раз в binary32 (numpy float32 + float32 → float32).

    Args:
        a: Первый операнд (значение binary32)
        b: Второй операнд (значение binary32)

    Returns:
        Сумма в binary32 как Python float
    """
    with np.errstate(over="ignore", invalid="ignore"):
        result = np.float32(a) + np.float32(b)
    return float(result)


def float_neg(a: float) -> float:
    """fneg: смена знака (в том числе у нуля и NaN)."""
    return to_float32(-a)


# =============================================================================
# DOUBLE (binary64)
# =============================================================================


def double_add(a: float, b: float) -> float:
    """dadd: IEEE-754 сложение double, без спецобработки."""
    return a + b


def double_neg(a: float) -> float:
    return -a

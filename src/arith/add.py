"""
Add — библиотека сложения над примитивными типами

Восемь чистых функций с точной семантикой фиксированной ширины:
- int/long: two's-complement wraparound, без исключений при переполнении
- float: IEEE-754 binary32, константа -0.5 задана в single precision
- double: IEEE-754 binary64

Все функции тотальны на своей области определения, без состояния и
потокобезопасны. Аргументы вне области определения (не число, bool,
int вне диапазона) отвергаются через fixed_width.validate_*.

Класс Add предоставляет те же функции как static methods под
именами в camelCase (doubleAddHalf, longAddConst, ...).
"""

from typing import Final

from src.core.math.fixed_width import (
    to_float32,
    validate_float32,
    validate_float64,
    validate_int32,
    validate_int64,
)
from src.core.math.primitive_ops import (
    double_add as _dadd,
    float_add as _fadd,
    int_add as _iadd,
    int_neg as _ineg,
    long_add as _ladd,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DOUBLE_HALF_OFFSET: Final[float] = -0.5

# binary32 литерал -0.5f (точно представим, но строится в single precision)
FLOAT_HALF_OFFSET: Final[float] = to_float32(-0.5)

LONG_CONST_OFFSET: Final[int] = -9

INT_CONST_OFFSET: Final[int] = 1_000_000


# =============================================================================
# INT
# =============================================================================


def add(a: int, b: int) -> int:
    """
    a + b для int.

    Examples:
        >>> add(2, 3)
        5
        >>> add(2147483647, 1)
        -2147483648
    """
    return _iadd(validate_int32(a, "a"), validate_int32(b, "b"))


def subtract(a: int, b: int) -> int:
    """
    a - b для int, вычисляется как add(a, -b).

    -b берётся с wraparound, поэтому subtract(x, INT32_MIN) == x + INT32_MIN.

    Examples:
        >>> subtract(2, 3)
        -1
        >>> subtract(-2147483648, 1)
        2147483647
    """
    b = validate_int32(b, "b")
    return add(a, _ineg(b))


def int_add_const(i: int) -> int:
    """
    i + 1_000_000 для int (с wraparound).

    Examples:
        >>> int_add_const(0)
        1000000
    """
    return _iadd(validate_int32(i, "i"), INT_CONST_OFFSET)


def add_many(a: int, b: int, c: int, d: int, e: int, f: int) -> int:
    """
    Сумма шести int слева направо: a + b + c + d + e + f.

    Сложение по модулю 2^32 ассоциативно и коммутативно, поэтому порядок
    на результат не влияет.

    Examples:
        >>> add_many(1, 2, 3, 4, 5, 6)
        21
        >>> add_many(2147483647, 1, 0, 0, 0, 0)
        -2147483648
    """
    terms = [
        validate_int32(value, name)
        for name, value in (("a", a), ("b", b), ("c", c), ("d", d), ("e", e), ("f", f))
    ]

    total = 0
    for term in terms:
        total = _iadd(total, term)
    return total


# =============================================================================
# LONG
# =============================================================================


def long_add_const(l: int) -> int:  # noqa: E741
    """
    l + (-9) для long (с wraparound по модулю 2^64).

    Examples:
        >>> long_add_const(9)
        0
        >>> long_add_const(-9223372036854775808)
        9223372036854775799
    """
    return _ladd(validate_int64(l, "l"), LONG_CONST_OFFSET)


# =============================================================================
# FLOAT / DOUBLE
# =============================================================================


def float_add_half(f: float) -> float:
    """
    f + (-0.5f) в single precision.

    Аргумент округляется до binary32, сумма считается в binary32.

    Examples:
        >>> float_add_half(1.5)
        1.0
    """
    return _fadd(validate_float32(f, "f"), FLOAT_HALF_OFFSET)


def double_add_half(a: float) -> float:
    """
    a + (-0.5) в double precision.

    Examples:
        >>> double_add_half(1.5)
        1.0
    """
    return _dadd(validate_float64(a, "a"), DOUBLE_HALF_OFFSET)


def double_add(a: float, b: float) -> float:
    """a + b в double precision (IEEE-754, без спецобработки NaN/Inf)."""
    return _dadd(validate_float64(a, "a"), validate_float64(b, "b"))


# =============================================================================
# STATIC METHOD CLASS
# =============================================================================


class Add:
    """
    Набор статических функций сложения под именами в camelCase.

    Add.add(2, 3), Add.doubleAddHalf(1.5), Add.addMany(1, 2, 3, 4, 5, 6) ...
    """

    subtract = staticmethod(subtract)
    add = staticmethod(add)
    doubleAddHalf = staticmethod(double_add_half)
    doubleAdd = staticmethod(double_add)
    floatAddHalf = staticmethod(float_add_half)
    longAddConst = staticmethod(long_add_const)
    intAddConst = staticmethod(int_add_const)
    addMany = staticmethod(add_many)

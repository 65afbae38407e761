"""
Тесты для библиотеки Add

Проверяемые свойства:
1. subtract(add(a, b), b) == a для любых int (по модулю 2^32)
2. Коммутативность add
3. Wraparound на границах int/long
4. Константы: +1_000_000 (int), -9 (long), -0.5 (double), -0.5f (float)
5. addMany: переполнение распространяется через многочленную сумму
6. Static methods класса Add совпадают с функциями модуля
"""

import math
import random

import numpy as np
import pytest

from src.arith.add import (
    DOUBLE_HALF_OFFSET,
    FLOAT_HALF_OFFSET,
    INT_CONST_OFFSET,
    LONG_CONST_OFFSET,
    Add,
    add,
    add_many,
    double_add,
    double_add_half,
    float_add_half,
    int_add_const,
    long_add_const,
    subtract,
)
from src.core.math.fixed_width import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    is_float32_exact,
    wrap_int32,
)

# Граничные значения int для табличных тестов
INT32_EDGES = [INT32_MIN, INT32_MIN + 1, -1, 0, 1, INT32_MAX - 1, INT32_MAX]


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def int32_pairs():
    """Детерминированная выборка пар int, включая границы."""
    rng = random.Random(20240501)
    pairs = [(a, b) for a in INT32_EDGES for b in INT32_EDGES]
    pairs += [
        (rng.randint(INT32_MIN, INT32_MAX), rng.randint(INT32_MIN, INT32_MAX))
        for _ in range(200)
    ]
    return pairs


# =============================================================================
# ТЕСТЫ: add / subtract
# =============================================================================


class TestAdd:
    """Тесты add"""

    def test_simple(self):
        assert add(2, 3) == 5
        assert add(-2, -3) == -5

    def test_overflow_boundary(self):
        """add(2147483647, 1) == -2147483648"""
        assert add(2147483647, 1) == -2147483648

    def test_underflow_boundary(self):
        assert add(INT32_MIN, -1) == INT32_MAX

    def test_min_plus_min(self):
        assert add(INT32_MIN, INT32_MIN) == 0

    def test_commutative(self, int32_pairs):
        for a, b in int32_pairs:
            assert add(a, b) == add(b, a)

    def test_matches_modular_sum(self, int32_pairs):
        for a, b in int32_pairs:
            assert add(a, b) == wrap_int32(a + b)

    def test_rejects_out_of_range(self):
        with pytest.raises(ValueError):
            add(INT32_MAX + 1, 0)

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            add(True, 1)


class TestSubtract:
    """Тесты subtract"""

    def test_simple(self):
        assert subtract(2, 3) == -1
        assert subtract(10, 4) == 6

    def test_inverse_of_add(self, int32_pairs):
        """subtract(add(a, b), b) == a"""
        for a, b in int32_pairs:
            assert subtract(add(a, b), b) == a

    def test_negating_min_wraps(self):
        """-INT32_MIN == INT32_MIN, поэтому x - MIN == x + MIN"""
        assert subtract(0, INT32_MIN) == INT32_MIN
        assert subtract(INT32_MIN, INT32_MIN) == 0
        assert subtract(-1, INT32_MIN) == INT32_MAX

    def test_overflow_wraps(self):
        assert subtract(INT32_MIN, 1) == INT32_MAX
        assert subtract(INT32_MAX, -1) == INT32_MIN


# =============================================================================
# ТЕСТЫ: Константы
# =============================================================================


class TestIntAddConst:
    """Тесты int_add_const: i + 1_000_000"""

    def test_constant(self):
        assert INT_CONST_OFFSET == 1000000

    def test_zero(self):
        assert int_add_const(0) == 1000000

    def test_negative(self):
        assert int_add_const(-1000000) == 0

    def test_first_overflowing_input(self):
        assert int_add_const(INT32_MAX - 1000000) == INT32_MAX
        assert int_add_const(INT32_MAX - 1000000 + 1) == INT32_MIN

    def test_max_wraps(self):
        assert int_add_const(INT32_MAX) == INT32_MIN + 1000000 - 1


class TestLongAddConst:
    """Тесты long_add_const: l + (-9)"""

    def test_constant(self):
        assert LONG_CONST_OFFSET == -9

    def test_nine(self):
        assert long_add_const(9) == 0

    def test_zero(self):
        assert long_add_const(0) == -9

    def test_no_32_bit_wrap(self):
        assert long_add_const(INT32_MIN) == INT32_MIN - 9

    def test_min_wraps(self):
        assert long_add_const(INT64_MIN) == INT64_MAX - 8

    def test_rejects_out_of_range(self):
        with pytest.raises(ValueError):
            long_add_const(INT64_MAX + 1)


class TestDoubleAddHalf:
    """Тесты double_add_half: a + (-0.5)"""

    def test_constant(self):
        assert DOUBLE_HALF_OFFSET == -0.5

    def test_exact(self):
        assert double_add_half(1.5) == 1.0
        assert double_add_half(0.5) == 0.0
        assert double_add_half(0.0) == -0.5

    def test_accepts_int(self):
        assert double_add_half(2) == 1.5

    def test_rounding_in_double(self):
        """2^53 - 0.5 лежит посередине между 2^53 - 1 и 2^53 → к чётному 2^53"""
        assert double_add_half(2.0**53) == 2.0**53

    def test_special_values(self):
        assert double_add_half(math.inf) == math.inf
        assert double_add_half(-math.inf) == -math.inf
        assert math.isnan(double_add_half(math.nan))


class TestDoubleAdd:
    """Тесты double_add"""

    def test_simple(self):
        assert double_add(1.25, 2.5) == 3.75

    def test_ieee_rounding(self):
        assert double_add(0.1, 0.2) == 0.30000000000000004

    def test_overflow_to_infinity(self):
        assert double_add(1e308, 1e308) == math.inf

    def test_inf_minus_inf(self):
        assert math.isnan(double_add(math.inf, -math.inf))


class TestFloatAddHalf:
    """Тесты float_add_half: f + (-0.5f) в binary32"""

    def test_constant_is_single_precision(self):
        assert FLOAT_HALF_OFFSET == -0.5
        assert is_float32_exact(FLOAT_HALF_OFFSET)

    def test_exact(self):
        assert float_add_half(1.5) == 1.0

    def test_matches_numpy_float32(self):
        for value in [0.1, 1.1, 3.3, 1e-8, 123456.789, -7.25]:
            expected = float(np.float32(value) + np.float32(-0.5))
            assert float_add_half(value) == expected

    def test_rounds_in_single_precision(self):
        """В binary32 2^24 - 0.5 лежит посередине → к чётному 2^24"""
        assert float_add_half(2.0**24) == 2.0**24
        assert double_add_half(2.0**24) == 2.0**24 - 0.5

    def test_result_is_binary32(self):
        assert is_float32_exact(float_add_half(0.1))

    def test_special_values(self):
        assert float_add_half(math.inf) == math.inf
        assert math.isnan(float_add_half(math.nan))


# =============================================================================
# ТЕСТЫ: addMany
# =============================================================================


class TestAddMany:
    """Тесты add_many"""

    def test_simple(self):
        assert add_many(1, 2, 3, 4, 5, 6) == 21

    def test_all_ones(self):
        assert add_many(1, 1, 1, 1, 1, 1) == 6

    def test_overflow_propagates(self):
        assert add_many(2147483647, 1, 0, 0, 0, 0) == -2147483648

    def test_overflow_and_back(self):
        """Промежуточное переполнение компенсируется последующими слагаемыми"""
        assert add_many(INT32_MAX, 1, -1, 0, 0, 0) == INT32_MAX

    def test_order_independent(self):
        terms = [INT32_MAX, INT32_MAX, INT32_MIN, 7, -3, INT32_MAX]
        expected = add_many(*terms)
        assert add_many(*reversed(terms)) == expected
        assert add_many(*sorted(terms)) == expected
        assert expected == wrap_int32(sum(terms))

    def test_rejects_invalid_term(self):
        with pytest.raises(TypeError, match="e must be an int"):
            add_many(1, 2, 3, 4, 5.0, 6)


# =============================================================================
# ТЕСТЫ: класс Add
# =============================================================================


class TestAddClass:
    """Static methods класса Add"""

    def test_method_names(self):
        for name in [
            "subtract",
            "add",
            "doubleAddHalf",
            "doubleAdd",
            "floatAddHalf",
            "longAddConst",
            "intAddConst",
            "addMany",
        ]:
            assert callable(getattr(Add, name))

    def test_callable_without_instance(self):
        assert Add.subtract(2, 3) == -1
        assert Add.add(2147483647, 1) == -2147483648
        assert Add.doubleAddHalf(1.5) == 1.0
        assert Add.doubleAdd(1.0, 2.0) == 3.0
        assert Add.floatAddHalf(1.5) == 1.0
        assert Add.longAddConst(9) == 0
        assert Add.intAddConst(0) == 1000000
        assert Add.addMany(1, 2, 3, 4, 5, 6) == 21

    def test_callable_on_instance(self):
        assert Add().add(1, 1) == 2

"""
Core math modules

Примитивы фиксированной ширины и операции над int/long/float/double.
"""

# Fixed-width primitives
from src.core.math.fixed_width import (
    # Type limits
    FLOAT32_MAX,
    INT32_BITS,
    INT32_MAX,
    INT32_MIN,
    INT64_BITS,
    INT64_MAX,
    INT64_MIN,
    # Predicates
    is_float32_exact,
    is_int32,
    is_int64,
    # Wraparound / narrowing
    to_float32,
    wrap_int32,
    wrap_int64,
    # Validation
    validate_float32,
    validate_float64,
    validate_int32,
    validate_int64,
)

# Primitive operations
from src.core.math.primitive_ops import (
    double_add,
    double_neg,
    float_add,
    float_neg,
    int_add,
    int_neg,
    int_sub,
    long_add,
    long_neg,
    long_sub,
)

__all__ = [
    # Fixed-width — Type limits
    "FLOAT32_MAX",
    "INT32_BITS",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_BITS",
    "INT64_MAX",
    "INT64_MIN",
    # Fixed-width — Predicates
    "is_float32_exact",
    "is_int32",
    "is_int64",
    # Fixed-width — Wraparound / narrowing
    "to_float32",
    "wrap_int32",
    "wrap_int64",
    # Fixed-width — Validation
    "validate_float32",
    "validate_float64",
    "validate_int32",
    "validate_int64",
    # Primitive operations
    "double_add",
    "double_neg",
    "float_add",
    "float_neg",
    "int_add",
    "int_neg",
    "int_sub",
    "long_add",
    "long_neg",
    "long_sub",
]

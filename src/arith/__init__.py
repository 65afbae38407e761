"""
Arithmetic library — сложение над примитивными типами.
"""

from .add import (
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

__all__ = [
    # Constants
    "DOUBLE_HALF_OFFSET",
    "FLOAT_HALF_OFFSET",
    "INT_CONST_OFFSET",
    "LONG_CONST_OFFSET",
    # Static method class
    "Add",
    # Functions
    "add",
    "add_many",
    "double_add",
    "double_add_half",
    "float_add_half",
    "int_add_const",
    "long_add_const",
    "subtract",
]

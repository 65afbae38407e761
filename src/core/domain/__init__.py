"""
Domain models and value objects.

Contains the tagged primitive value and the method descriptor model.
"""

from src.core.domain.descriptors import DescriptorParseError, MethodDescriptor
from src.core.domain.values import (
    PrimitiveType,
    PrimitiveTypeMismatch,
    TypedValue,
    coerce_to,
)

__all__ = [
    # Values
    "PrimitiveType",
    "PrimitiveTypeMismatch",
    "TypedValue",
    "coerce_to",
    # Descriptors
    "DescriptorParseError",
    "MethodDescriptor",
]

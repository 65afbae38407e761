"""
Runtime — вызов статических методов по имени.
"""

from .invoker import (
    ArgumentCountError,
    ArgumentKindError,
    InvocationConfig,
    InvocationError,
    Invoker,
    MethodExecutionError,
    MethodTable,
    NoSuchClassError,
    NoSuchMethodError,
    StaticMethod,
    default_method_table,
    run,
)

__all__ = [
    # Exceptions
    "InvocationError",
    "NoSuchClassError",
    "NoSuchMethodError",
    "ArgumentCountError",
    "ArgumentKindError",
    "MethodExecutionError",
    # Config
    "InvocationConfig",
    # Method table
    "StaticMethod",
    "MethodTable",
    "default_method_table",
    # Invoker
    "Invoker",
    "run",
]

"""
TypedValue — примитивное значение с тегом типа

Immutable Pydantic модель: пара (PrimitiveType, value).
Операции +, -, унарный минус выполняются по семантике своего типа
(см. src.core.math.primitive_ops) и требуют совпадения типов операндов.
"""

import math
from enum import Enum
from typing import Union

from pydantic import BaseModel, Field, model_validator

from src.core.math.fixed_width import (
    validate_float32,
    validate_float64,
    validate_int32,
    validate_int64,
)
from src.core.math.primitive_ops import (
    double_add,
    double_neg,
    float_add,
    float_neg,
    int_add,
    int_neg,
    long_add,
    long_neg,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PrimitiveTypeMismatch(TypeError):
    """Операция над значениями разных примитивных типов (например int + long)."""

    pass


# =============================================================================
# ENUMS
# =============================================================================


class PrimitiveType(str, Enum):
    """
    Примитивный числовой тип.

    descriptor — однобуквенный код типа в дескрипторе метода.
    """

    INT = "INT"
    LONG = "LONG"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"

    @property
    def descriptor(self) -> str:
        return _DESCRIPTORS[self]

    @property
    def is_integral(self) -> bool:
        return self in (PrimitiveType.INT, PrimitiveType.LONG)

    @classmethod
    def from_descriptor(cls, code: str) -> "PrimitiveType":
        """
        Тип по коду дескриптора.

        Raises:
            ValueError: Если код не I/J/F/D
        """
        for primitive, descriptor in _DESCRIPTORS.items():
            if descriptor == code:
                return primitive
        raise ValueError(f"Unsupported primitive descriptor: {code!r}")


_DESCRIPTORS = {
    PrimitiveType.INT: "I",
    PrimitiveType.LONG: "J",
    PrimitiveType.FLOAT: "F",
    PrimitiveType.DOUBLE: "D",
}

_VALIDATORS = {
    PrimitiveType.INT: validate_int32,
    PrimitiveType.LONG: validate_int64,
    PrimitiveType.FLOAT: validate_float32,
    PrimitiveType.DOUBLE: validate_float64,
}

_ADD = {
    PrimitiveType.INT: int_add,
    PrimitiveType.LONG: long_add,
    PrimitiveType.FLOAT: float_add,
    PrimitiveType.DOUBLE: double_add,
}

_NEG = {
    PrimitiveType.INT: int_neg,
    PrimitiveType.LONG: long_neg,
    PrimitiveType.FLOAT: float_neg,
    PrimitiveType.DOUBLE: double_neg,
}


def coerce_to(primitive: PrimitiveType, value: object, name: str = "value") -> Union[int, float]:
    """
    Приведение Python значения к представлению примитивного типа.

    int/long: проверка диапазона (без неявного wrap).
    float: округление до binary32. double: расширение int → float.

    Raises:
        TypeError: Неверный Python тип (включая bool)
        ValueError: Значение вне диапазона
    """
    return _VALIDATORS[primitive](value, name)


# =============================================================================
# TYPED VALUE MODEL
# =============================================================================


class TypedValue(BaseModel):
    """
    Значение примитивного типа.

    Immutable модель (frozen=True). Значение нормализуется при создании:
    - INT/LONG хранятся как Python int в своём диапазоне
    - FLOAT хранится как Python float, точно представимый в binary32
    - DOUBLE хранится как Python float

    Равенство — числовое внутри одного типа (NaN != NaN, 0.0 == -0.0);
    значения разных типов не равны.
    """

    type: PrimitiveType = Field(..., description="Примитивный тип значения")
    value: Union[int, float] = Field(..., description="Значение в представлении типа")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _normalize_value(cls, data):
        if isinstance(data, dict) and "type" in data and "value" in data:
            primitive = PrimitiveType(data["type"])
            data = {**data, "value": coerce_to(primitive, data["value"])}
        return data

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def of_int(cls, value: int) -> "TypedValue":
        return cls(type=PrimitiveType.INT, value=value)

    @classmethod
    def of_long(cls, value: int) -> "TypedValue":
        return cls(type=PrimitiveType.LONG, value=value)

    @classmethod
    def of_float(cls, value: float) -> "TypedValue":
        return cls(type=PrimitiveType.FLOAT, value=value)

    @classmethod
    def of_double(cls, value: float) -> "TypedValue":
        return cls(type=PrimitiveType.DOUBLE, value=value)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _require_same_type(self, other: "TypedValue", op: str) -> None:
        if other.type is not self.type:
            raise PrimitiveTypeMismatch(
                f"unsupported operation: {self.type.value} {op} {other.type.value}"
            )

    def __add__(self, other: "TypedValue") -> "TypedValue":
        if not isinstance(other, TypedValue):
            return NotImplemented
        self._require_same_type(other, "+")
        return TypedValue(type=self.type, value=_ADD[self.type](self.value, other.value))

    def __neg__(self) -> "TypedValue":
        return TypedValue(type=self.type, value=_NEG[self.type](self.value))

    def __sub__(self, other: "TypedValue") -> "TypedValue":
        if not isinstance(other, TypedValue):
            return NotImplemented
        self._require_same_type(other, "-")
        return self + (-other)

    # -------------------------------------------------------------------------
    # Equality
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedValue):
            return NotImplemented
        return self.type is other.type and self.value == other.value

    def __hash__(self) -> int:
        if isinstance(self.value, float) and math.isnan(self.value):
            return hash((self.type, "nan"))
        return hash((self.type, self.value))

    def __repr__(self) -> str:
        return f"TypedValue({self.type.value}, {self.value!r})"

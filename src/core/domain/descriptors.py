"""
MethodDescriptor — сигнатура статического метода

Формат дескриптора: "(" {тип параметра} ")" тип результата,
где тип — один из кодов I (int), J (long), F (float), D (double).

Examples:
    (II)I      — int f(int, int)
    (D)D       — double f(double)
    (IIIIII)I  — int f(int, int, int, int, int, int)

Объектные типы (L...;), массивы ([) и void (V) не поддерживаются.
"""

from pydantic import BaseModel, Field

from src.core.domain.values import PrimitiveType


class DescriptorParseError(ValueError):
    """Некорректный или неподдерживаемый дескриптор метода."""

    pass


class MethodDescriptor(BaseModel):
    """
    Разобранный дескриптор метода.

    Immutable модель (frozen=True).
    """

    parameters: tuple[PrimitiveType, ...] = Field(
        default=(), description="Типы параметров в порядке объявления"
    )
    return_type: PrimitiveType = Field(..., description="Тип результата")

    model_config = {"frozen": True}

    @property
    def arity(self) -> int:
        return len(self.parameters)

    @classmethod
    def parse(cls, text: str) -> "MethodDescriptor":
        """
        Разбор строки дескриптора.

        Args:
            text: Дескриптор, например "(II)I"

        Returns:
            MethodDescriptor

        Raises:
            DescriptorParseError: Если строка некорректна или содержит
                неподдерживаемые типы
        """
        if not text.startswith("("):
            raise DescriptorParseError(f"Descriptor must start with '(': {text!r}")

        close = text.find(")")
        if close < 0:
            raise DescriptorParseError(f"Descriptor is missing ')': {text!r}")

        params_part = text[1:close]
        return_part = text[close + 1:]

        if len(return_part) != 1:
            raise DescriptorParseError(
                f"Descriptor must have exactly one return type: {text!r}"
            )

        try:
            parameters = tuple(PrimitiveType.from_descriptor(code) for code in params_part)
            return_type = PrimitiveType.from_descriptor(return_part)
        except ValueError as e:
            raise DescriptorParseError(f"{e} in descriptor {text!r}") from e

        return cls(parameters=parameters, return_type=return_type)

    def __str__(self) -> str:
        params = "".join(p.descriptor for p in self.parameters)
        return f"({params}){self.return_type.descriptor}"

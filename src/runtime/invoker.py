"""
Invoker — вызов статических методов по имени класса и метода

Таблица методов (MethodTable) хранит для каждого класса его статические
методы с дескрипторами. Invoker.run(class_name, method_name, args):
1. Находит класс и метод (NoSuchClassError / NoSuchMethodError)
2. Проверяет количество аргументов (ArgumentCountError)
3. Приводит каждый аргумент к типу параметра (ArgumentKindError)
4. Вызывает метод и упаковывает результат в TypedValue типа результата
   (int/long результат приводится по модулю 2^n; сбой метода → MethodExecutionError)

Аргументы могут быть:
- TypedValue (тип должен совпадать с параметром при strict_kinds)
- Python int/float
- строки ("2", "-0.5", "NaN") при parse_string_arguments
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Sequence

from src.arith.add import Add
from src.core.domain.descriptors import MethodDescriptor
from src.core.domain.values import PrimitiveType, TypedValue, coerce_to
from src.core.math.fixed_width import wrap_int32, wrap_int64

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvocationError(Exception):
    """Базовая ошибка вызова метода."""

    pass


class NoSuchClassError(InvocationError):
    pass


class NoSuchMethodError(InvocationError):
    pass


class ArgumentCountError(InvocationError):
    """Количество аргументов не совпадает с дескриптором."""

    pass


class ArgumentKindError(InvocationError):
    """Аргумент не приводится к типу параметра."""

    pass


class MethodExecutionError(InvocationError):
    """Метод упал или вернул значение, не приводимое к типу результата."""

    pass


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class InvocationConfig:
    """Конфигурация Invoker."""

    # Строковые аргументы разбираются по типу параметра ("2" → int 2)
    parse_string_arguments: bool = True

    # TypedValue аргумент должен иметь ровно тип параметра (без расширения int → long)
    strict_kinds: bool = True


# =============================================================================
# METHOD TABLE
# =============================================================================


@dataclass(frozen=True)
class StaticMethod:
    """Статический метод: имя, дескриптор и реализация."""

    name: str
    descriptor: MethodDescriptor
    function: Callable[..., object]


class MethodTable:
    """
    Реестр статических методов по классам.

    Заполняется один раз при создании, далее используется только на чтение.
    """

    def __init__(self):
        self._classes: Dict[str, Dict[str, StaticMethod]] = {}

    def register(
        self,
        class_name: str,
        method_name: str,
        descriptor: str,
        function: Callable[..., object],
    ) -> StaticMethod:
        """
        Регистрация метода.

        Raises:
            DescriptorParseError: Некорректный дескриптор
            ValueError: Метод с таким именем уже зарегистрирован
        """
        if method_name in self._classes.get(class_name, {}):
            raise ValueError(f"Method already registered: {class_name}.{method_name}")

        method = StaticMethod(
            name=method_name,
            descriptor=MethodDescriptor.parse(descriptor),
            function=function,
        )

        # Таблица меняется только после успешного разбора дескриптора
        self._classes.setdefault(class_name, {})[method_name] = method
        return method

    def lookup(self, class_name: str, method_name: str) -> StaticMethod:
        """
        Поиск метода.

        Raises:
            NoSuchClassError: Класс не зарегистрирован
            NoSuchMethodError: Метода нет в классе
        """
        methods = self._classes.get(class_name)
        if methods is None:
            raise NoSuchClassError(f"no such class: {class_name}")

        method = methods.get(method_name)
        if method is None:
            raise NoSuchMethodError(f"no such method: {class_name}.{method_name}")
        return method

    def class_names(self) -> list[str]:
        return sorted(self._classes)

    def method_names(self, class_name: str) -> list[str]:
        if class_name not in self._classes:
            raise NoSuchClassError(f"no such class: {class_name}")
        return sorted(self._classes[class_name])


def default_method_table() -> MethodTable:
    """Таблица с классом Add и его восемью методами."""
    table = MethodTable()
    table.register("Add", "subtract", "(II)I", Add.subtract)
    table.register("Add", "add", "(II)I", Add.add)
    table.register("Add", "doubleAddHalf", "(D)D", Add.doubleAddHalf)
    table.register("Add", "doubleAdd", "(DD)D", Add.doubleAdd)
    table.register("Add", "floatAddHalf", "(F)F", Add.floatAddHalf)
    table.register("Add", "longAddConst", "(J)J", Add.longAddConst)
    table.register("Add", "intAddConst", "(I)I", Add.intAddConst)
    table.register("Add", "addMany", "(IIIIII)I", Add.addMany)
    return table


# =============================================================================
# INVOKER
# =============================================================================


def _parse_string(kind: PrimitiveType, text: str):
    """
    Разбор строкового аргумента: int/long через int(), float/double через float().

    Группировка цифр через "_" не принимается. Пробелы по краям
    отбрасываются; для float/double допустимы "NaN", "inf", "Infinity".

    Raises:
        ValueError: Строка не является числом нужного типа
    """
    if "_" in text:
        raise ValueError(f"digit grouping is not allowed: {text!r}")
    text = text.strip()
    if kind.is_integral:
        return int(text, 10)
    return float(text)


def _wrap_result(kind: PrimitiveType, raw: object) -> object:
    """Целочисленный результат приводится по модулю 2^n, как у iadd/ladd."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        if kind is PrimitiveType.INT:
            return wrap_int32(raw)
        if kind is PrimitiveType.LONG:
            return wrap_int64(raw)
    return raw


def _reject_string_args(method: StaticMethod, args: object) -> None:
    """Строка вместо списка аргументов не разбивается на символы."""
    if isinstance(args, (str, bytes)):
        raise ArgumentCountError(
            f"{method.name}: args must be a sequence of arguments, not {type(args).__name__}"
        )


class Invoker:
    """
    Вызов статических методов из MethodTable с приведением аргументов.
    """

    def __init__(
        self,
        table: Optional[MethodTable] = None,
        config: Optional[InvocationConfig] = None,
    ):
        self.table = table if table is not None else default_method_table()
        self.config = config if config is not None else InvocationConfig()

    def coerce_argument(self, kind: PrimitiveType, arg: object, position: int) -> TypedValue:
        """
        Приведение одного аргумента к типу параметра.

        Raises:
            ArgumentKindError: Аргумент не приводится к типу параметра
        """
        name = f"argument {position}"

        if isinstance(arg, TypedValue):
            if self.config.strict_kinds and arg.type is not kind:
                raise ArgumentKindError(
                    f"{name}: expected {kind.value}, got {arg.type.value}"
                )
            raw = arg.value
        elif isinstance(arg, str):
            if not self.config.parse_string_arguments:
                raise ArgumentKindError(f"{name}: string arguments are disabled")
            try:
                raw = _parse_string(kind, arg)
            except ValueError as e:
                raise ArgumentKindError(
                    f"{name}: cannot parse {arg!r} as {kind.value}"
                ) from e
        else:
            raw = arg

        try:
            return TypedValue(type=kind, value=coerce_to(kind, raw, name))
        except (TypeError, ValueError) as e:
            raise ArgumentKindError(f"{name}: {e}") from e

    def invoke(self, method: StaticMethod, args: Sequence[object]) -> TypedValue:
        """
        Вызов уже найденного метода.

        Raises:
            ArgumentCountError: Неверное количество аргументов (или args — строка)
            ArgumentKindError: Аргумент не приводится к типу параметра
            MethodExecutionError: Метод упал или вернул неприводимое значение
        """
        _reject_string_args(method, args)

        descriptor = method.descriptor
        if len(args) != descriptor.arity:
            raise ArgumentCountError(
                f"{method.name}{descriptor} expects {descriptor.arity} arguments, "
                f"got {len(args)}"
            )

        typed_args = [
            self.coerce_argument(kind, arg, position)
            for position, (kind, arg) in enumerate(zip(descriptor.parameters, args))
        ]

        try:
            raw_result = method.function(*(value.value for value in typed_args))
            result = TypedValue(
                type=descriptor.return_type,
                value=_wrap_result(descriptor.return_type, raw_result),
            )
        except (TypeError, ValueError) as e:
            raise MethodExecutionError(f"{method.name}{descriptor} failed: {e}") from e

        logger.debug(
            "invoke %s%s args=%s result=%r",
            method.name,
            descriptor,
            [value.value for value in typed_args],
            result,
        )
        return result

    def run(self, class_name: str, method_name: str, args: Iterable[object] = ()) -> TypedValue:
        """
        Поиск и вызов метода.

        Args:
            class_name: Имя класса (например "Add")
            method_name: Имя метода (например "subtract")
            args: Аргументы (TypedValue, int/float или строки)

        Returns:
            Результат как TypedValue типа результата метода

        Raises:
            NoSuchClassError, NoSuchMethodError, ArgumentCountError,
            ArgumentKindError, MethodExecutionError
        """
        method = self.table.lookup(class_name, method_name)
        _reject_string_args(method, args)
        return self.invoke(method, list(args))


_DEFAULT_INVOKER: Optional[Invoker] = None


def run(class_name: str, method_name: str, args: Iterable[object] = ()) -> TypedValue:
    """Invoker.run с таблицей и конфигурацией по умолчанию."""
    global _DEFAULT_INVOKER
    if _DEFAULT_INVOKER is None:
        _DEFAULT_INVOKER = Invoker()
    return _DEFAULT_INVOKER.run(class_name, method_name, args)

"""
Capabilities — Операторные контракты скалярного типа

Каждая операция Matrix/Vector требует от типа элементов только те
операторы, которые ей действительно нужны. Контейнер сам по себе
ничего не требует: матрицу из произвольных объектов можно создать,
индексировать, сравнивать и печатать, но не складывать и не умножать.

Один протокол = одна способность:
- SupportsAdd / SupportsSub / SupportsMul (a op b -> T)
- SupportsInplaceAdd / SupportsInplaceSub / SupportsInplaceMul (a op= b)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Проверка выполняется до начала вычислений (операнды не изменяются)
2. Отсутствие способности → CapabilityError (подкласс TypeError)
"""

import logging
from collections.abc import Iterable
from typing import Any, Protocol, TypeVar, runtime_checkable

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CapabilityError(TypeError):
    """
    Тип элементов не поддерживает операцию.

    Возникает при попытке сложить/умножить элементы без соответствующего
    оператора или построить zeroes()/ones()/identity() для типа без
    аддитивной или мультипликативной единицы.
    """

    pass


# =============================================================================
# PROTOCOLS
# =============================================================================


@runtime_checkable
class SupportsAdd(Protocol):
    """a + b"""

    def __add__(self, other: Any) -> Any: ...


@runtime_checkable
class SupportsSub(Protocol):
    """a - b"""

    def __sub__(self, other: Any) -> Any: ...


@runtime_checkable
class SupportsMul(Protocol):
    """a * b"""

    def __mul__(self, other: Any) -> Any: ...


@runtime_checkable
class SupportsNeg(Protocol):
    """-a"""

    def __neg__(self) -> Any: ...


@runtime_checkable
class SupportsInplaceAdd(Protocol):
    """
    a += b

    Неизменяемые числа (int, float) не определяют __iadd__, но Python
    откатывается на __add__, поэтому для них достаточно SupportsAdd.
    """

    def __iadd__(self, other: Any) -> Any: ...


@runtime_checkable
class SupportsInplaceSub(Protocol):
    """a -= b"""

    def __isub__(self, other: Any) -> Any: ...


@runtime_checkable
class SupportsInplaceMul(Protocol):
    """a *= b"""

    def __imul__(self, other: Any) -> Any: ...


# Fallback in-place → value-returning (семантика Python для a op= b)
_INPLACE_FALLBACK: dict[type, type] = {
    SupportsInplaceAdd: SupportsAdd,
    SupportsInplaceSub: SupportsSub,
    SupportsInplaceMul: SupportsMul,
}


# =============================================================================
# CAPABILITY GATE
# =============================================================================


def has_capability(value: Any, capability: type) -> bool:
    """
    Проверка, обладает ли значение способностью.

    Для in-place протоколов учитывается fallback на обычный оператор.

    Examples:
        >>> has_capability(1, SupportsAdd)
        True
        >>> has_capability(1, SupportsInplaceAdd)
        True
        >>> has_capability(object(), SupportsMul)
        False
    """
    if isinstance(value, capability):
        return True
    fallback = _INPLACE_FALLBACK.get(capability)
    return fallback is not None and isinstance(value, fallback)


def is_scalar(value: Any) -> bool:
    """
    Проверка, может ли значение быть скалярным множителем.

    Последовательности (list, str, Matrix, Vector) поддерживают *, но
    означают повторение или другую операцию, поэтому скаляром не считаются.

    Examples:
        >>> is_scalar(2.5)
        True
        >>> is_scalar([0])
        False
    """
    return isinstance(value, SupportsMul) and not isinstance(value, Iterable)


def require_capability(
    values: Iterable[T],
    capability: type,
    operation: str,
) -> None:
    """
    Проверка способности для всех элементов.

    Args:
        values: Элементы операнда (в порядке хранения)
        capability: Протокол (SupportsAdd, SupportsMul, ...)
        operation: Имя операции для диагностики (например, 'matrix addition')

    Raises:
        CapabilityError: Если хотя бы один элемент не обладает способностью
    """
    for value in values:
        if not has_capability(value, capability):
            logger.debug(
                "capability %s missing for %s in %s",
                capability.__name__,
                type(value).__name__,
                operation,
            )
            raise CapabilityError(
                f"{operation} requires elements supporting "
                f"{capability.__name__}, got {type(value).__name__}"
            )

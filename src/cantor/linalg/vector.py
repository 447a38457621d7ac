"""
Vector — Вектор фиксированной длины

Одномерный аналог Matrix: N ≥ 1 элементов скалярного типа T в плоском
списке. Длина фиксируется при создании; операции над векторами разной
длины отклоняются до начала вычислений.
"""

import logging
import math
import operator
from copy import copy
from typing import Any, Generic, Iterable, Iterator, TypeVar

from src.cantor.domain.shape import ShapeMismatchError
from src.cantor.traits.capabilities import (
    SupportsAdd,
    SupportsMul,
    SupportsSub,
    is_scalar,
    require_capability,
)
from src.cantor.traits.identities import additive_identity

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _ensure_same_length(lhs: "Vector[Any]", rhs: "Vector[Any]", operation: str) -> None:
    if len(lhs) != len(rhs):
        logger.debug("%s length mismatch: %d vs %d", operation, len(lhs), len(rhs))
        raise ShapeMismatchError(
            f"{operation} requires vectors of equal length, "
            f"got {len(lhs)} and {len(rhs)}",
            expected=len(lhs),
            actual=len(rhs),
        )


class Vector(Generic[T]):
    """
    Вектор фиксированной длины.

    Examples:
        >>> Vector([1, 2, 3]).dot(Vector([4, 5, 6]))
        32
        >>> Vector([3.0, 4.0]).norm()
        5.0
    """

    __slots__ = ("_values",)

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable[T]):
        """
        Args:
            values: Элементы вектора (не менее одного)

        Raises:
            ShapeMismatchError: Если values пуст
        """
        data = [copy(value) for value in values]
        if not data:
            raise ShapeMismatchError(
                "Vector requires at least one value", expected=">= 1", actual=0
            )
        self._values: list[T] = data

    @classmethod
    def _wrap(cls, values: list[T]) -> "Vector[T]":
        vector = cls.__new__(cls)
        vector._values = values
        return vector

    @classmethod
    def new(cls, values: Iterable[T]) -> "Vector[T]":
        return cls(values)

    @classmethod
    def zero(cls, n: int, kind: type = float) -> "Vector[Any]":
        """
        Нулевой вектор длины n (аддитивная единица kind).

        Raises:
            ValueError: Если n < 1
            CapabilityError: Если у kind нет аддитивной единицы
        """
        if n < 1:
            raise ValueError(f"n must be positive, got {n}")
        zero = additive_identity(kind)
        return cls._wrap([copy(zero) for _ in range(n)])

    @classmethod
    def fill(cls, value: T, n: int) -> "Vector[T]":
        """Вектор длины n, все элементы которого равны value."""
        if n < 1:
            raise ValueError(f"n must be positive, got {n}")
        return cls._wrap([copy(value) for _ in range(n)])

    # =========================================================================
    # ACCESS
    # =========================================================================

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __getitem__(self, index: int) -> T:
        index = operator.index(index)
        if not 0 <= index < len(self._values):
            raise IndexError(
                f"Index {index} out of bounds for vector of length {len(self._values)}"
            )
        return self._values[index]

    def to_list(self) -> list[T]:
        return list(self._values)

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def __add__(self, other: object) -> "Vector[T]":
        if not isinstance(other, Vector):
            return NotImplemented
        _ensure_same_length(self, other, "vector addition")
        require_capability(self._values, SupportsAdd, "vector addition")
        require_capability(other._values, SupportsAdd, "vector addition")
        return self._wrap([a + b for a, b in zip(self._values, other._values)])

    def __sub__(self, other: object) -> "Vector[T]":
        if not isinstance(other, Vector):
            return NotImplemented
        _ensure_same_length(self, other, "vector subtraction")
        require_capability(self._values, SupportsSub, "vector subtraction")
        require_capability(other._values, SupportsSub, "vector subtraction")
        return self._wrap([a - b for a, b in zip(self._values, other._values)])

    def __mul__(self, scalar: object) -> "Vector[T]":
        if not is_scalar(scalar):
            return NotImplemented
        require_capability(self._values, SupportsMul, "scalar multiplication")
        return self._wrap([value * scalar for value in self._values])

    def __rmul__(self, scalar: object) -> "Vector[T]":
        if not is_scalar(scalar):
            return NotImplemented
        require_capability(self._values, SupportsMul, "scalar multiplication")
        return self._wrap([scalar * value for value in self._values])

    def dot(self, other: "Vector[T]") -> T:
        """
        Скалярное произведение Σ self[i] * other[i].

        Свёртка начинается с аддитивной единицы типа элементов.

        Raises:
            ShapeMismatchError: Если длины различаются
            CapabilityError: Если элементы не поддерживают * или +
        """
        _ensure_same_length(self, other, "dot product")
        for operand in (self._values, other._values):
            require_capability(operand, SupportsMul, "dot product")
            require_capability(operand, SupportsAdd, "dot product")
        total = additive_identity(type(self._values[0]))
        for a, b in zip(self._values, other._values):
            total = total + a * b
        return total

    def norm(self) -> T:
        """
        Евклидова норма: sqrt(Σ x²).

        Сумма квадратов считается через float, результат приводится
        обратно к типу элементов (для int — с отбрасыванием дробной части).
        """
        require_capability(self._values, SupportsMul, "vector norm")
        kind = type(self._values[0])
        sum_of_squares = 0.0
        for value in self._values:
            sum_of_squares += float(value * value)
        return kind(math.sqrt(sum_of_squares))

    # =========================================================================
    # COMPARISON & DISPLAY
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Vector({self._values!r})"

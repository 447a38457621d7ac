"""
Shape — Размерность матрицы (rows × columns)

Immutable Pydantic модель. Размерность — часть идентичности значения:
матрицы 2×3 и 3×2 несовместимы как операнды, хотя обе хранят 6 элементов.

Все проверки совместимости выполняются в начале бинарной операции
(fail fast), до любых вычислений.
"""

import logging

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ShapeMismatchError(ValueError):
    """
    Несовместимые размерности операндов.

    Attributes:
        expected: Ожидаемая размерность (или описание)
        actual: Фактическая размерность
    """

    def __init__(self, message: str, expected: object = None, actual: object = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NotSquareError(ShapeMismatchError):
    """Операция определена только для квадратных матриц."""

    pass


# =============================================================================
# SHAPE MODEL
# =============================================================================


class Shape(BaseModel):
    """
    Размерность rows × columns.

    Обе размерности — строго положительные целые.
    """

    rows: int = Field(..., gt=0, strict=True, description="Количество строк")
    columns: int = Field(..., gt=0, strict=True, description="Количество столбцов")

    model_config = {"frozen": True}  # Immutable

    @property
    def size(self) -> int:
        """Количество элементов (длина плоского хранилища)."""
        return self.rows * self.columns

    @property
    def is_square(self) -> bool:
        return self.rows == self.columns

    def transposed(self) -> "Shape":
        """Размерность после транспонирования (columns × rows)."""
        return Shape(rows=self.columns, columns=self.rows)

    def offset(self, row: int, col: int) -> int:
        """
        Плоское смещение элемента (row, col) в row-major порядке.

        Raises:
            IndexError: Если индекс вне диапазона или отрицательный
        """
        if not 0 <= row < self.rows:
            raise IndexError(f"Row index {row} out of bounds for {self}")
        if not 0 <= col < self.columns:
            raise IndexError(f"Column index {col} out of bounds for {self}")
        return row * self.columns + col

    def __str__(self) -> str:
        return f"{self.rows}x{self.columns}"


# =============================================================================
# SHAPE GUARDS
# =============================================================================


def ensure_length(length: int, shape: Shape) -> None:
    """
    Проверка длины плоской последовательности значений.

    Raises:
        ShapeMismatchError: Если length != rows * columns
    """
    if length != shape.size:
        logger.debug("literal length %d does not fit %s", length, shape)
        raise ShapeMismatchError(
            f"Expected {shape.size} values for a {shape} matrix, got {length}",
            expected=shape.size,
            actual=length,
        )


def ensure_same_shape(lhs: Shape, rhs: Shape, operation: str) -> None:
    """
    Проверка идентичности размерностей (элементные операции).

    Raises:
        ShapeMismatchError: Если lhs != rhs
    """
    if lhs != rhs:
        logger.debug("%s shape mismatch: %s vs %s", operation, lhs, rhs)
        raise ShapeMismatchError(
            f"{operation} requires identical shapes, got {lhs} and {rhs}",
            expected=lhs,
            actual=rhs,
        )


def ensure_inner_dimension(lhs: Shape, rhs: Shape) -> None:
    """
    Проверка внутренней размерности для умножения (R×C) · (C×N).

    Raises:
        ShapeMismatchError: Если lhs.columns != rhs.rows
    """
    if lhs.columns != rhs.rows:
        logger.debug("matrix product inner dimension mismatch: %s · %s", lhs, rhs)
        raise ShapeMismatchError(
            f"Matrix product requires lhs columns == rhs rows, got {lhs} · {rhs}",
            expected=lhs.columns,
            actual=rhs.rows,
        )


def ensure_square(shape: Shape, operation: str) -> None:
    """
    Проверка квадратности.

    Raises:
        NotSquareError: Если rows != columns
    """
    if not shape.is_square:
        logger.debug("%s requires a square matrix, got %s", operation, shape)
        raise NotSquareError(
            f"{operation} requires a square matrix, got {shape}",
            expected="square",
            actual=shape,
        )

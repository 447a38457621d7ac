"""
Matrix — Плотная матрица фиксированной размерности

Матрица rows × columns над скалярным типом T, хранимая как один плоский
список длины rows*columns в row-major порядке:
    элемент (row, col) → смещение row*columns + col

Размерность фиксируется при создании и не меняется. Совместимость
размерностей проверяется в начале каждой бинарной операции (fail fast).

Семантика значений: каждая операция, не помеченная как in-place,
возвращает новую матрицу с собственным хранилищем. Конструкторы копируют
входную последовательность, поэтому матрица никогда не разделяет
хранилище с вызывающим кодом или с другим операндом.

In-place операции:
- transpose_in_place()           (только квадратные)
- m @= other / m *= other        (только квадратные N×N · N×N, через scratch-буфер)
- m += other / m -= other
- m *= scalar
- m[row, col] = value

Ограничения на тип элементов локальны для операций: матрицу из любых
объектов можно создать, индексировать, сравнить и напечатать; сложение
и умножение требуют соответствующих способностей (traits.capabilities).
"""

import logging
import operator
from copy import copy
from typing import Any, Generic, Iterable, Iterator, Optional, Sequence, TypeVar

from src.cantor.domain.shape import (
    Shape,
    ShapeMismatchError,
    ensure_inner_dimension,
    ensure_length,
    ensure_same_shape,
    ensure_square,
)
from src.cantor.math.tolerance import ToleranceConfig, is_close
from src.cantor.traits.capabilities import (
    SupportsAdd,
    SupportsInplaceAdd,
    SupportsInplaceMul,
    SupportsInplaceSub,
    SupportsMul,
    SupportsNeg,
    SupportsSub,
    is_scalar,
    require_capability,
)
from src.cantor.traits.identities import additive_identity, multiplicative_identity

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Matrix(Generic[T]):
    """
    Матрица rows × columns с row-major хранением.

    Examples:
        >>> m = Matrix([1, 2, 3, 4], rows=2, columns=2)
        >>> m[1, 0]
        3
        >>> print(m.transpose())
        [1 3]
        [2 4]
    """

    __slots__ = ("_values", "_shape")

    # Изменяемое значение: хэширование запрещено
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable[T], rows: int, columns: int):
        """
        Создание матрицы из плоской последовательности.

        Args:
            values: rows*columns элементов в row-major порядке
            rows: Количество строк (> 0)
            columns: Количество столбцов (> 0)

        Raises:
            ShapeMismatchError: Если длина values != rows * columns
            pydantic.ValidationError: Если размерность не положительное целое
        """
        shape = Shape(rows=rows, columns=columns)
        data = [copy(value) for value in values]
        ensure_length(len(data), shape)
        self._values: list[T] = data
        self._shape = shape

    @classmethod
    def _wrap(cls, values: list[T], shape: Shape) -> "Matrix[T]":
        # Без копирования: values уже принадлежит новой матрице
        matrix = cls.__new__(cls)
        matrix._values = values
        matrix._shape = shape
        return matrix

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def new(cls, values: Iterable[T], rows: int, columns: int) -> "Matrix[T]":
        """Синоним конструктора: Matrix.new(values, rows, columns)."""
        return cls(values, rows, columns)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> "Matrix[T]":
        """
        Создание матрицы из вложенных строк.

        Args:
            rows: Последовательность строк одинаковой длины

        Raises:
            ShapeMismatchError: Если строки разной длины
            pydantic.ValidationError: Если строк нет или строки пустые
        """
        columns = len(rows[0]) if rows else 0
        for index, row in enumerate(rows):
            if len(row) != columns:
                raise ShapeMismatchError(
                    f"Row {index} has {len(row)} values, expected {columns}",
                    expected=columns,
                    actual=len(row),
                )
        return cls([value for row in rows for value in row], len(rows), columns)

    @classmethod
    def zeroes(cls, rows: int, columns: int, kind: type = float) -> "Matrix[Any]":
        """
        Матрица, все элементы которой равны аддитивной единице kind.

        Raises:
            CapabilityError: Если у kind нет аддитивной единицы
        """
        shape = Shape(rows=rows, columns=columns)
        zero = additive_identity(kind)
        return cls._wrap([copy(zero) for _ in range(shape.size)], shape)

    @classmethod
    def ones(cls, rows: int, columns: int, kind: type = float) -> "Matrix[Any]":
        """
        Матрица, все элементы которой равны мультипликативной единице kind.

        Raises:
            CapabilityError: Если у kind нет мультипликативной единицы
        """
        shape = Shape(rows=rows, columns=columns)
        one = multiplicative_identity(kind)
        return cls._wrap([copy(one) for _ in range(shape.size)], shape)

    @classmethod
    def identity(cls, n: int, kind: type = float) -> "Matrix[Any]":
        """
        Единичная матрица n × n.

        Диагональ (смещение i*(n+1)) — мультипликативная единица,
        остальные элементы — аддитивная единица.

        Raises:
            CapabilityError: Если у kind нет одной из единиц
        """
        shape = Shape(rows=n, columns=n)
        zero = additive_identity(kind)
        one = multiplicative_identity(kind)
        values = [copy(zero) for _ in range(shape.size)]
        for i in range(n):
            values[i * (n + 1)] = copy(one)
        return cls._wrap(values, shape)

    # =========================================================================
    # SHAPE & ACCESS
    # =========================================================================

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def rows(self) -> int:
        return self._shape.rows

    @property
    def columns(self) -> int:
        return self._shape.columns

    @property
    def is_square(self) -> bool:
        return self._shape.is_square

    def _offset(self, key: Any) -> int:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"Matrix indices must be (row, col) pairs, got {key!r}")
        row, col = operator.index(key[0]), operator.index(key[1])
        return self._shape.offset(row, col)

    def __getitem__(self, key: tuple[int, int]) -> T:
        """
        Элемент (row, col), индексация с нуля.

        Raises:
            IndexError: Если row/col вне диапазона (в том числе отрицательные)
            TypeError: Если ключ не пара целых
        """
        return self._values[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        self._values[self._offset(key)] = value

    def __len__(self) -> int:
        return self._shape.size

    def __iter__(self) -> Iterator[T]:
        """Элементы в row-major порядке."""
        return iter(self._values)

    def to_list(self) -> list[T]:
        """Плоская копия хранилища (row-major)."""
        return list(self._values)

    def to_rows(self) -> list[list[T]]:
        """Вложенная копия: список строк."""
        columns = self._shape.columns
        return [
            self._values[start : start + columns]
            for start in range(0, self._shape.size, columns)
        ]

    def copy(self) -> "Matrix[T]":
        """Независимая копия матрицы."""
        return self._wrap([copy(value) for value in self._values], self._shape)

    # =========================================================================
    # TRANSFORMATION
    # =========================================================================

    def transpose(self) -> "Matrix[T]":
        """
        Транспонирование без изменения self.

        Для матрицы rows × columns возвращает columns × rows, где
        элемент (col, row) результата равен элементу (row, col) исходной.
        Квадратность не требуется.
        """
        rows, columns = self._shape.rows, self._shape.columns
        transposed: list[Any] = [None] * self._shape.size
        for row in range(rows):
            for col in range(columns):
                transposed[col * rows + row] = copy(self._values[row * columns + col])
        return self._wrap(transposed, self._shape.transposed())

    def transpose_in_place(self) -> None:
        """
        Транспонирование на месте (только квадратные матрицы).

        Обменивает (row, col) ↔ (col, row) для всех пар row < col;
        диагональ не затрагивается. Новое хранилище не создаётся.

        Raises:
            NotSquareError: Если матрица не квадратная
        """
        ensure_square(self._shape, "transpose_in_place")
        n = self._shape.rows
        values = self._values
        for row in range(n):
            for col in range(row + 1, n):
                upper, lower = row * n + col, col * n + row
                values[upper], values[lower] = values[lower], values[upper]

    # =========================================================================
    # ELEMENTWISE ARITHMETIC
    # =========================================================================

    def __add__(self, other: object) -> "Matrix[T]":
        if not isinstance(other, Matrix):
            return NotImplemented
        ensure_same_shape(self._shape, other._shape, "matrix addition")
        require_capability(self._values, SupportsAdd, "matrix addition")
        require_capability(other._values, SupportsAdd, "matrix addition")
        return self._wrap(
            [a + b for a, b in zip(self._values, other._values)], self._shape
        )

    def __sub__(self, other: object) -> "Matrix[T]":
        if not isinstance(other, Matrix):
            return NotImplemented
        ensure_same_shape(self._shape, other._shape, "matrix subtraction")
        require_capability(self._values, SupportsSub, "matrix subtraction")
        require_capability(other._values, SupportsSub, "matrix subtraction")
        return self._wrap(
            [a - b for a, b in zip(self._values, other._values)], self._shape
        )

    def _assign(self, values: list[T]) -> "Matrix[T]":
        # Хранилище переписывается только после вычисления всех элементов
        self._values[:] = values
        return self

    def __iadd__(self, other: object) -> "Matrix[T]":
        if not isinstance(other, Matrix):
            return NotImplemented
        ensure_same_shape(self._shape, other._shape, "in-place matrix addition")
        require_capability(self._values, SupportsInplaceAdd, "in-place matrix addition")
        require_capability(other._values, SupportsAdd, "in-place matrix addition")
        return self._assign(
            [operator.iadd(copy(a), b) for a, b in zip(self._values, other._values)]
        )

    def __isub__(self, other: object) -> "Matrix[T]":
        if not isinstance(other, Matrix):
            return NotImplemented
        ensure_same_shape(self._shape, other._shape, "in-place matrix subtraction")
        require_capability(
            self._values, SupportsInplaceSub, "in-place matrix subtraction"
        )
        require_capability(other._values, SupportsSub, "in-place matrix subtraction")
        return self._assign(
            [operator.isub(copy(a), b) for a, b in zip(self._values, other._values)]
        )

    def __neg__(self) -> "Matrix[T]":
        require_capability(self._values, SupportsNeg, "matrix negation")
        return self._wrap([-value for value in self._values], self._shape)

    # =========================================================================
    # MATRIX MULTIPLICATION
    # =========================================================================

    def _product(self, other: "Matrix[T]") -> list[T]:
        """
        Произведение (R×C) · (C×N) как плоский список длины R*N.

        result[row, col] = Σ_k self[row, k] * other[k, col],
        накопление начинается с аддитивной единицы типа элементов.
        Операнды не изменяются.
        """
        ensure_inner_dimension(self._shape, other._shape)
        for operand in (self._values, other._values):
            require_capability(operand, SupportsMul, "matrix product")
            require_capability(operand, SupportsAdd, "matrix product")
        zero = additive_identity(type(self._values[0]))

        rows, inner, columns = self._shape.rows, self._shape.columns, other._shape.columns
        lhs, rhs = self._values, other._values
        result: list[T] = []
        for row in range(rows):
            base = row * inner
            for col in range(columns):
                total = zero
                for k in range(inner):
                    total = total + lhs[base + k] * rhs[k * columns + col]
                result.append(total)
        return result

    def __matmul__(self, other: object) -> "Matrix[T]":
        """
        Матричное произведение: (R×C) @ (C×N) → R×N.

        Raises:
            ShapeMismatchError: Если self.columns != other.rows
            CapabilityError: Если элементы не поддерживают + / * или
                у их типа нет аддитивной единицы
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self._product(other)
        return self._wrap(result, Shape(rows=self._shape.rows, columns=other._shape.columns))

    def __imatmul__(self, other: object) -> "Matrix[T]":
        """
        Матричное произведение на месте (только N×N · N×N).

        Сумма накапливается в scratch-буфер и только затем переписывает
        хранилище self: каждый элемент результата читает несколько
        исходных элементов.

        Raises:
            NotSquareError: Если self не квадратная
            ShapeMismatchError: Если other другой размерности
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        ensure_square(self._shape, "in-place matrix product")
        ensure_same_shape(self._shape, other._shape, "in-place matrix product")
        return self._assign(self._product(other))

    def __mul__(self, other: object) -> "Matrix[T]":
        """
        Matrix * Matrix — матричное произведение (как @).
        Matrix * scalar — умножение каждого элемента на скаляр.

        Последовательности скалярами не считаются (NotImplemented).
        """
        if isinstance(other, Matrix):
            return self.__matmul__(other)
        if not is_scalar(other):
            return NotImplemented
        require_capability(self._values, SupportsMul, "scalar multiplication")
        return self._wrap([value * other for value in self._values], self._shape)

    def __rmul__(self, other: object) -> "Matrix[T]":
        if not is_scalar(other):
            return NotImplemented
        require_capability(self._values, SupportsMul, "scalar multiplication")
        return self._wrap([other * value for value in self._values], self._shape)

    def __imul__(self, other: object) -> "Matrix[T]":
        """
        m *= Matrix — матричное произведение на месте (как @=).
        m *= scalar — каждый элемент умножается на скаляр на месте,
        размерность не меняется.
        """
        if isinstance(other, Matrix):
            return self.__imatmul__(other)
        if not is_scalar(other):
            return NotImplemented
        require_capability(
            self._values, SupportsInplaceMul, "in-place scalar multiplication"
        )
        return self._assign(
            [operator.imul(copy(value), other) for value in self._values]
        )

    # =========================================================================
    # COMPARISON & DISPLAY
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        """Равенство: одинаковая размерность и поэлементное ==."""
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._shape == other._shape and self._values == other._values

    def allclose(
        self, other: "Matrix[Any]", config: Optional[ToleranceConfig] = None
    ) -> bool:
        """
        Поэлементное сравнение с толерантностью.

        Матрицы разной размерности не равны.

        Args:
            other: Матрица для сравнения
            config: Толерантности (default: ToleranceConfig())
        """
        config = config or ToleranceConfig()
        if self._shape != other._shape:
            return False
        return all(
            is_close(a, b, rel_tol=config.rel_tol, abs_tol=config.abs_tol)
            for a, b in zip(self._values, other._values)
        )

    def __str__(self) -> str:
        """
        rows строк вида "[a b c]", разделённых переводом строки,
        без завершающего перевода строки.
        """
        columns = self._shape.columns
        return "\n".join(
            "[" + " ".join(str(value) for value in self._values[start : start + columns]) + "]"
            for start in range(0, self._shape.size, columns)
        )

    def __repr__(self) -> str:
        return (
            f"Matrix({self._values!r}, rows={self._shape.rows}, "
            f"columns={self._shape.columns})"
        )

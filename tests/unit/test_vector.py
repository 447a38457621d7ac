"""
Тесты для Vector

Проверяет:
1. Создание (new, zero, fill) и запрет пустого вектора
2. Сложение/вычитание и проверку длины
3. Умножение на скаляр
4. Скалярное произведение и евклидову норму
5. Доступ, равенство и repr
"""

from fractions import Fraction

import pytest

from src.cantor.domain.shape import ShapeMismatchError
from src.cantor.linalg.vector import Vector
from src.cantor.traits.capabilities import CapabilityError


class MulOnly:
    """Элемент с умножением, но без сложения."""

    def __mul__(self, other: object) -> "MulOnly":
        return self


class TestConstruction:
    """Тесты создания векторов"""

    def test_new(self) -> None:
        v = Vector.new([1, 2, 3])
        assert v.to_list() == [1, 2, 3]
        assert len(v) == 3

    def test_empty_rejected(self) -> None:
        with pytest.raises(ShapeMismatchError, match="at least one value"):
            Vector([])

    def test_input_not_aliased(self) -> None:
        source = [1.0, 2.0]
        v = Vector(source)
        source[0] = 5.0
        assert v[0] == 1.0

    def test_zero(self) -> None:
        assert Vector.zero(3, kind=int).to_list() == [0, 0, 0]
        assert Vector.zero(2, kind=Fraction).to_list() == [Fraction(0), Fraction(0)]

    def test_zero_without_identity(self) -> None:
        with pytest.raises(CapabilityError):
            Vector.zero(2, kind=str)

    def test_fill(self) -> None:
        assert Vector.fill(7, 4).to_list() == [7, 7, 7, 7]

    @pytest.mark.parametrize("n", [0, -3])
    def test_non_positive_length_rejected(self, n: int) -> None:
        with pytest.raises(ValueError, match="n must be positive"):
            Vector.zero(n)
        with pytest.raises(ValueError, match="n must be positive"):
            Vector.fill(1, n)


class TestArithmetic:
    """Тесты арифметики"""

    def test_add(self) -> None:
        assert Vector([1, 2, 3]) + Vector([4, 5, 6]) == Vector([5, 7, 9])

    def test_sub(self) -> None:
        assert Vector([4, 5, 6]) - Vector([1, 2, 3]) == Vector([3, 3, 3])

    def test_operands_unchanged(self) -> None:
        a = Vector([1, 2])
        b = Vector([3, 4])
        a + b
        assert a.to_list() == [1, 2]
        assert b.to_list() == [3, 4]

    def test_length_mismatch(self) -> None:
        with pytest.raises(ShapeMismatchError, match="equal length"):
            Vector([1, 2]) + Vector([1, 2, 3])
        with pytest.raises(ShapeMismatchError):
            Vector([1, 2]) - Vector([1])

    def test_scalar_mul(self) -> None:
        assert Vector([1, 2, 3]) * 2 == Vector([2, 4, 6])
        assert 2 * Vector([1, 2, 3]) == Vector([2, 4, 6])

    def test_vector_times_vector_unsupported(self) -> None:
        with pytest.raises(TypeError):
            Vector([1, 2]) * Vector([3, 4])

    def test_rhs_only_incapable_rejected(self) -> None:
        """Способность проверяется у обоих операндов"""
        with pytest.raises(CapabilityError, match="vector addition"):
            Vector([1]) + Vector([object()])
        with pytest.raises(CapabilityError, match="vector subtraction"):
            Vector([1, 2]) - Vector([1, "x"])

    @pytest.mark.parametrize("other", [[0], (0,), "ab"])
    def test_sequence_is_not_scalar(self, other: object) -> None:
        with pytest.raises(TypeError):
            Vector([1, 2]) * other
        with pytest.raises(TypeError):
            other * Vector([1, 2])


class TestDotAndNorm:
    """Тесты скалярного произведения и нормы"""

    def test_dot(self) -> None:
        assert Vector([1, 2, 3]).dot(Vector([4, 5, 6])) == 32

    def test_dot_fraction(self) -> None:
        a = Vector([Fraction(1, 2), Fraction(1, 3)])
        b = Vector([Fraction(2), Fraction(3)])
        assert a.dot(b) == Fraction(2)

    def test_dot_length_mismatch(self) -> None:
        with pytest.raises(ShapeMismatchError):
            Vector([1, 2]).dot(Vector([1, 2, 3]))

    def test_dot_without_identity(self) -> None:
        with pytest.raises(CapabilityError):
            Vector(["a"]).dot(Vector(["b"]))

    def test_dot_rhs_only_incapable(self) -> None:
        with pytest.raises(CapabilityError, match="dot product"):
            Vector([1]).dot(Vector([object()]))

    def test_dot_requires_addition(self) -> None:
        """Свёртка складывает произведения, поэтому нужен и +"""
        with pytest.raises(CapabilityError, match="SupportsAdd"):
            Vector([MulOnly()]).dot(Vector([MulOnly()]))

    def test_norm(self) -> None:
        assert Vector([3.0, 4.0]).norm() == pytest.approx(5.0, abs=1e-12)

    def test_norm_converts_back_to_element_type(self) -> None:
        """Норма через float, результат — тип элементов"""
        result = Vector([3, 4]).norm()
        assert result == 5
        assert isinstance(result, int)

    def test_norm_int_truncates(self) -> None:
        assert Vector([1, 1]).norm() == 1

    def test_norm_unit(self) -> None:
        assert Vector([0.0, 0.0, 1.0]).norm() == 1.0


class TestAccessAndDisplay:
    """Тесты доступа и представления"""

    def test_getitem(self) -> None:
        v = Vector([1, 2, 3])
        assert v[0] == 1
        assert v[2] == 3

    @pytest.mark.parametrize("index", [3, -1])
    def test_out_of_bounds(self, index: int) -> None:
        with pytest.raises(IndexError):
            Vector([1, 2, 3])[index]

    def test_iter(self) -> None:
        assert list(Vector([1, 2, 3])) == [1, 2, 3]

    def test_equality(self) -> None:
        assert Vector([1, 2]) == Vector([1, 2])
        assert Vector([1, 2]) != Vector([2, 1])
        assert Vector([1, 2]) != Vector([1, 2, 3])

    def test_repr_exposes_backing_sequence(self) -> None:
        assert repr(Vector([1, 2, 3])) == "Vector([1, 2, 3])"

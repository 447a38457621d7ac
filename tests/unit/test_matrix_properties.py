"""
Property-based тесты алгебраических свойств Matrix

Проверяет:
1. A + 0 == A и (A + B) - B == A
2. Ассоциативность умножения (точно для int, с толерантностью для float)
3. A · I == A == I · A
4. transpose(transpose(A)) == A и обмен размерностей
5. Запись/чтение элемента по индексу
6. Умножение на скаляр на месте сохраняет размерность
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from src.cantor.linalg.matrix import Matrix
from src.cantor.math.tolerance import ToleranceConfig

dims = st.integers(min_value=1, max_value=4)
ints = st.integers(min_value=-50, max_value=50)
floats = st.floats(min_value=-100.0, max_value=100.0, allow_nan=False, allow_infinity=False)


def matrices(rows: int, columns: int, elements: st.SearchStrategy = ints) -> st.SearchStrategy:
    """Стратегия матриц заданной размерности."""
    size = rows * columns
    return st.lists(elements, min_size=size, max_size=size).map(
        lambda values: Matrix(values, rows, columns)
    )


@given(st.data())
def test_add_zeroes_is_identity(data: st.DataObject) -> None:
    rows, columns = data.draw(dims), data.draw(dims)
    a = data.draw(matrices(rows, columns))
    assert a + Matrix.zeroes(rows, columns, kind=int) == a


@given(st.data())
def test_add_then_sub_roundtrip(data: st.DataObject) -> None:
    rows, columns = data.draw(dims), data.draw(dims)
    a = data.draw(matrices(rows, columns))
    b = data.draw(matrices(rows, columns))
    assert (a + b) - b == a


@given(st.data())
def test_product_associative_int(data: st.DataObject) -> None:
    m, n, p, q = (data.draw(dims) for _ in range(4))
    a = data.draw(matrices(m, n))
    b = data.draw(matrices(n, p))
    c = data.draw(matrices(p, q))
    assert (a * b) * c == a * (b * c)


@settings(max_examples=50)
@given(st.data())
def test_product_associative_float(data: st.DataObject) -> None:
    m, n, p, q = (data.draw(dims) for _ in range(4))
    a = data.draw(matrices(m, n, floats))
    b = data.draw(matrices(n, p, floats))
    c = data.draw(matrices(p, q, floats))
    # Погрешность накопления растёт с величиной произведений
    assert ((a * b) * c).allclose(a * (b * c), ToleranceConfig(rel_tol=1e-6, abs_tol=1e-3))


@given(st.data())
def test_identity_neutral(data: st.DataObject) -> None:
    n = data.draw(dims)
    a = data.draw(matrices(n, n))
    identity = Matrix.identity(n, kind=int)
    assert a * identity == a
    assert identity * a == a


@given(st.data())
def test_double_transpose(data: st.DataObject) -> None:
    rows, columns = data.draw(dims), data.draw(dims)
    a = data.draw(matrices(rows, columns))
    assert a.transpose().transpose() == a


@given(st.data())
def test_transpose_swaps_elements(data: st.DataObject) -> None:
    rows, columns = data.draw(dims), data.draw(dims)
    a = data.draw(matrices(rows, columns))
    t = a.transpose()
    assert (t.rows, t.columns) == (columns, rows)
    for i in range(columns):
        for j in range(rows):
            assert t[i, j] == a[j, i]


@given(st.data())
def test_transpose_in_place_matches_transpose(data: st.DataObject) -> None:
    n = data.draw(dims)
    a = data.draw(matrices(n, n))
    expected = a.transpose()
    a.transpose_in_place()
    assert a == expected


@given(st.data())
def test_in_place_product_matches_value_product(data: st.DataObject) -> None:
    n = data.draw(dims)
    a = data.draw(matrices(n, n))
    b = data.draw(matrices(n, n))
    expected = a * b
    a *= b
    assert a == expected


@given(st.data())
def test_index_roundtrip(data: st.DataObject) -> None:
    rows, columns = data.draw(dims), data.draw(dims)
    a = data.draw(matrices(rows, columns))
    row = data.draw(st.integers(min_value=0, max_value=rows - 1))
    col = data.draw(st.integers(min_value=0, max_value=columns - 1))
    value = data.draw(ints)
    a[row, col] = value
    assert a[row, col] == value


@given(st.data())
def test_scalar_in_place_keeps_shape(data: st.DataObject) -> None:
    rows, columns = data.draw(dims), data.draw(dims)
    a = data.draw(matrices(rows, columns))
    scalar = data.draw(ints)
    expected = [value * scalar for value in a]
    a *= scalar
    assert (a.rows, a.columns) == (rows, columns)
    assert a.to_list() == expected

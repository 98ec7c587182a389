"""
Тесты для модели Matrix

Проверяет:
1. Создание и zero-fill, пустые размеры
2. Инвариант len(data) == rows * cols (Pydantic валидация)
3. Доступ к элементам и RangeError
4. clone / to_buffer — независимые копии
5. Равенство и allclose
6. Текстовое отображение
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    AllocationError,
    DimensionMismatch,
    Matrix,
    MatrixError,
    RangeError,
    clone,
    create,
    format_matrix,
    matrix_from_values,
)


@pytest.fixture
def m23() -> Matrix:
    """Матрица 2×3 [[1, 2, 3], [4, 5, 6]]"""
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6]])


# =============================================================================
# СОЗДАНИЕ
# =============================================================================


class TestCreate:
    """Тесты создания матриц"""

    def test_zero_filled(self) -> None:
        m = create(2, 3)
        assert m.shape == (2, 3)
        assert m.data == [0.0] * 6

    def test_constructor_without_data_is_zero_filled(self) -> None:
        m = Matrix(rows=3, cols=1)
        assert m.data == [0.0, 0.0, 0.0]

    def test_zero_extents_allowed(self) -> None:
        assert create(0, 0).data == []
        assert create(0, 5).size == 0
        assert create(4, 0).to_rows() == [[], [], [], []]

    def test_negative_extent_rejected(self) -> None:
        with pytest.raises(ValidationError):
            create(-1, 2)

    def test_allocation_failure(self) -> None:
        """Нереалистичные размеры → AllocationError"""
        with pytest.raises(AllocationError):
            create(10**20, 10**20)

    def test_allocation_error_is_memory_error(self) -> None:
        with pytest.raises(MemoryError):
            create(10**20, 10**20)

    def test_identity(self) -> None:
        assert Matrix.identity(3).to_rows() == [
            [1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [0.0, 0.0, 1.0],
        ]
        assert Matrix.identity(0).shape == (0, 0)

    def test_from_rows(self, m23: Matrix) -> None:
        assert m23.rows == 2
        assert m23.cols == 3
        assert m23.data == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]

    def test_from_rows_empty(self) -> None:
        assert Matrix.from_rows([]).shape == (0, 0)

    def test_from_rows_ragged(self) -> None:
        with pytest.raises(DimensionMismatch, match="Row 1 has 1 values, expected 2"):
            Matrix.from_rows([[1, 2], [3]])

    def test_from_values(self) -> None:
        m = matrix_from_values(2, 2, iter([1, 2, 3, 4]))
        assert m.to_rows() == [[1.0, 2.0], [3.0, 4.0]]

    def test_from_values_wrong_count(self) -> None:
        with pytest.raises(DimensionMismatch):
            matrix_from_values(2, 2, [1, 2, 3])


# =============================================================================
# ИНВАРИАНТ БУФЕРА
# =============================================================================


class TestBufferInvariant:
    """len(data) == rows * cols всегда"""

    def test_wrong_length_rejected(self) -> None:
        with pytest.raises(ValidationError, match="does not match 2x2"):
            Matrix(rows=2, cols=2, data=[1.0, 2.0, 3.0])

    def test_assignment_rejected(self, m23: Matrix) -> None:
        before = m23.clone()
        with pytest.raises(ValidationError):
            m23.data = [1.0]
        assert m23.shape == (2, 3)
        assert m23 == before

    @pytest.mark.parametrize("field, value", [("rows", 3), ("cols", 1)])
    def test_extent_assignment_keeps_invariant(
        self, m23: Matrix, field: str, value: int
    ) -> None:
        """Отклонённое присваивание не меняет форму"""
        with pytest.raises(ValidationError, match="frozen"):
            setattr(m23, field, value)
        assert m23.shape == (2, 3)
        assert len(m23.data) == m23.rows * m23.cols
        with pytest.raises(RangeError):
            m23.get(2, 1)

    def test_set_still_writes_in_place(self, m23: Matrix) -> None:
        m23.set(1, 2, 7.5)
        assert m23.data[5] == 7.5

    def test_constructor_copies_input(self) -> None:
        values = [1.0, 2.0]
        m = Matrix(rows=1, cols=2, data=values)
        values[0] = 99.0
        assert m.get(0, 0) == 1.0

    def test_ints_coerced_to_float(self) -> None:
        m = Matrix(rows=1, cols=2, data=[1, 2])
        assert all(isinstance(v, float) for v in m.data)


# =============================================================================
# ДОСТУП К ЭЛЕМЕНТАМ
# =============================================================================


class TestElementAccess:
    """Тесты get/set/row"""

    def test_row_major_layout(self, m23: Matrix) -> None:
        assert m23.get(0, 2) == 3.0
        assert m23.get(1, 0) == 4.0
        assert m23.data[1 * 3 + 2] == m23.get(1, 2)

    def test_set(self, m23: Matrix) -> None:
        m23.set(1, 1, -7.5)
        assert m23.get(1, 1) == -7.5
        assert m23.data[4] == -7.5

    @pytest.mark.parametrize("i, j", [(2, 0), (0, 3), (-1, 0), (0, -1), (5, 5)])
    def test_get_out_of_range(self, m23: Matrix, i: int, j: int) -> None:
        with pytest.raises(RangeError):
            m23.get(i, j)

    def test_set_out_of_range(self, m23: Matrix) -> None:
        with pytest.raises(RangeError, match=r"Index \(2, 0\) out of range for 2x3"):
            m23.set(2, 0, 1.0)

    def test_range_error_hierarchy(self, m23: Matrix) -> None:
        with pytest.raises(IndexError):
            m23.get(9, 9)
        with pytest.raises(MatrixError):
            m23.get(9, 9)

    def test_empty_matrix_has_no_elements(self) -> None:
        with pytest.raises(RangeError):
            create(0, 0).get(0, 0)

    def test_row(self, m23: Matrix) -> None:
        assert m23.row(1) == [4.0, 5.0, 6.0]
        with pytest.raises(RangeError):
            m23.row(2)

    def test_row_is_copy(self, m23: Matrix) -> None:
        r = m23.row(0)
        r[0] = 100.0
        assert m23.get(0, 0) == 1.0

    def test_properties(self, m23: Matrix) -> None:
        assert m23.shape == (2, 3)
        assert m23.size == 6
        assert not m23.is_square
        assert Matrix.identity(2).is_square


# =============================================================================
# КОПИРОВАНИЕ
# =============================================================================


class TestClone:
    """clone и to_buffer не разделяют буфер"""

    def test_clone_equal(self, m23: Matrix) -> None:
        c = clone(m23)
        assert c == m23
        assert c is not m23
        assert c.data is not m23.data

    def test_clone_independent(self, m23: Matrix) -> None:
        c = m23.clone()
        c.set(0, 0, 42.0)
        assert m23.get(0, 0) == 1.0

    def test_to_buffer_independent(self, m23: Matrix) -> None:
        buf = m23.to_buffer()
        buf[0] = -1.0
        assert m23.data[0] == 1.0


# =============================================================================
# СРАВНЕНИЕ И ОТОБРАЖЕНИЕ
# =============================================================================


class TestComparison:
    """Тесты == и allclose"""

    def test_exact_equality(self) -> None:
        a = Matrix.from_rows([[1.0, 2.0]])
        b = Matrix(rows=1, cols=2, data=[1.0, 2.0])
        assert a == b

    def test_shape_matters(self) -> None:
        a = Matrix(rows=1, cols=2, data=[1.0, 2.0])
        b = Matrix(rows=2, cols=1, data=[1.0, 2.0])
        assert a != b
        assert not a.allclose(b)

    def test_allclose_within_tolerance(self) -> None:
        a = Matrix.from_rows([[1.0, 0.0]])
        b = Matrix.from_rows([[1.0 + 1e-12, 1e-13]])
        assert a != b
        assert a.allclose(b)

    def test_allclose_outside_tolerance(self) -> None:
        a = Matrix.from_rows([[1.0]])
        b = Matrix.from_rows([[1.001]])
        assert not a.allclose(b)
        assert a.allclose(b, rel_tol=1e-2)

    def test_not_equal_to_other_types(self) -> None:
        assert Matrix.identity(1) != [[1.0]]


class TestFormat:
    """Текстовое отображение матрицы"""

    def test_header_and_rows(self) -> None:
        text = format_matrix(Matrix.from_rows([[1, 2], [3, 4]]))
        lines = text.splitlines()
        assert lines[0] == "Matrix 2x2:"
        assert lines[1] == "         1          2"
        assert lines[2] == "         3          4"

    def test_four_significant_digits(self) -> None:
        text = format_matrix(Matrix.from_rows([[3.14159265, 1e-7]]))
        assert "3.142" in text
        assert "1e-07" in text

    def test_str_uses_format(self) -> None:
        m = Matrix.identity(1)
        assert str(m) == format_matrix(m)

    def test_empty(self) -> None:
        assert format_matrix(create(0, 0)) == "Matrix 0x0:"

"""
Matrix — Плотная вещественная матрица

Pydantic модель с плоским row-major буфером:
    element (i, j) хранится по индексу i * cols + j

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(data) == rows * cols всегда (проверяется при создании; поля frozen)
2. Новая матрица без data заполнена нулями
3. Буфер никогда не разделяется: конструктор копирует входной список,
   to_buffer()/row()/to_rows() возвращают копии
4. Обращение за пределы [0, rows) × [0, cols) → RangeError
   (отрицательные индексы Python не поддерживаются)
"""

import operator
from typing import Any, Iterable, Sequence

from pydantic import BaseModel, Field, model_validator

from src.core.domain.errors import AllocationError, DimensionMismatch, RangeError
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
)


def allocate_buffer(rows: int, cols: int) -> list[float]:
    """
    Выделение нулевого буфера rows × cols.

    Raises:
        AllocationError: Если runtime не может выделить буфер
    """
    try:
        return [0.0] * (rows * cols)
    except (MemoryError, OverflowError) as e:
        raise AllocationError(
            f"Cannot allocate {rows}x{cols} matrix buffer: {type(e).__name__}"
        ) from e


# =============================================================================
# MATRIX MODEL
# =============================================================================


class Matrix(BaseModel):
    """
    Плотная матрица rows × cols с row-major буфером float.

    Поля rows/cols/data заморожены (frozen), замена атрибутов запрещена;
    элементы изменяются только через set(), in-place.
    """

    rows: int = Field(..., ge=0, frozen=True, description="Число строк")
    cols: int = Field(..., ge=0, frozen=True, description="Число столбцов")
    data: list[float] = Field(..., frozen=True, description="Row-major буфер длины rows * cols")

    @model_validator(mode="before")
    @classmethod
    def fill_zeros_when_data_missing(cls, values: Any) -> Any:
        """Матрица без data заполняется нулями."""
        if isinstance(values, dict) and values.get("data") is None:
            rows = values.get("rows")
            cols = values.get("cols")
            if isinstance(rows, int) and isinstance(cols, int) and rows >= 0 and cols >= 0:
                values = {**values, "data": allocate_buffer(rows, cols)}
        return values

    @model_validator(mode="after")
    def validate_buffer_length(self) -> "Matrix":
        """Проверка инварианта len(data) == rows * cols."""
        expected = self.rows * self.cols
        if len(self.data) != expected:
            raise ValueError(
                f"data length {len(self.data)} does not match {self.rows}x{self.cols} "
                f"(expected {expected})"
            )
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        """Нулевая матрица rows × cols."""
        return cls(rows=rows, cols=cols)

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """Единичная матрица n × n."""
        m = cls.zeros(n, n)
        for i in range(n):
            m.data[i * n + i] = 1.0
        return m

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """
        Создание матрицы из списка строк.

        Args:
            rows: Последовательность строк одинаковой длины

        Raises:
            DimensionMismatch: Если строки разной длины
        """
        n_rows = len(rows)
        n_cols = len(rows[0]) if n_rows else 0
        data: list[float] = []
        for i, row in enumerate(rows):
            if len(row) != n_cols:
                raise DimensionMismatch(
                    f"Row {i} has {len(row)} values, expected {n_cols}"
                )
            data.extend(row)
        return cls(rows=n_rows, cols=n_cols, data=data)

    # -------------------------------------------------------------------------
    # Доступ к элементам
    # -------------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def size(self) -> int:
        return self.rows * self.cols

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def _offset(self, i: int, j: int) -> int:
        i = operator.index(i)
        j = operator.index(j)
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise RangeError(
                f"Index ({i}, {j}) out of range for {self.rows}x{self.cols} matrix"
            )
        return i * self.cols + j

    def get(self, i: int, j: int) -> float:
        """
        Элемент (i, j).

        Raises:
            RangeError: Если индекс вне матрицы
        """
        return self.data[self._offset(i, j)]

    def set(self, i: int, j: int, value: float) -> None:
        """
        Запись элемента (i, j).

        Raises:
            RangeError: Если индекс вне матрицы
        """
        self.data[self._offset(i, j)] = float(value)

    def row(self, i: int) -> list[float]:
        """Копия строки i."""
        i = operator.index(i)
        if not 0 <= i < self.rows:
            raise RangeError(f"Row {i} out of range for {self.rows}x{self.cols} matrix")
        start = i * self.cols
        return self.data[start : start + self.cols]

    def to_rows(self) -> list[list[float]]:
        """Матрица как список строк (копия)."""
        return [self.data[i * self.cols : (i + 1) * self.cols] for i in range(self.rows)]

    def to_buffer(self) -> list[float]:
        """Экспорт row-major буфера (независимая копия) для алгоритмов."""
        return list(self.data)

    def clone(self) -> "Matrix":
        """Глубокая копия с независимым буфером."""
        return clone(self)

    # -------------------------------------------------------------------------
    # Сравнение и отображение
    # -------------------------------------------------------------------------

    def allclose(
        self,
        other: "Matrix",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Поэлементное сравнение с толерантностью.

        Матрицы разных размеров никогда не близки.
        """
        if self.shape != other.shape:
            return False
        return all(
            is_close(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in zip(self.data, other.data)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.rows == other.rows and self.cols == other.cols and self.data == other.data

    def __str__(self) -> str:
        return format_matrix(self)


# =============================================================================
# FUNCTIONS
# =============================================================================


def create(rows: int, cols: int) -> Matrix:
    """
    Создание нулевой матрицы rows × cols.

    rows=0 или cols=0 допустимы (пустой буфер).

    Raises:
        AllocationError: Если буфер не может быть выделен
        ValueError: Если размеры отрицательные
    """
    return Matrix.zeros(rows, cols)


def clone(a: Matrix) -> Matrix:
    """Новая матрица с независимой копией буфера a."""
    return Matrix(rows=a.rows, cols=a.cols, data=a.to_buffer())


def format_matrix(m: Matrix) -> str:
    """
    Текстовое представление для отображения пользователю.

    Формат:
        Matrix 2x2:
                 1          2
                 3          4
    """
    lines = [f"Matrix {m.rows}x{m.cols}:"]
    for row in m.to_rows():
        lines.append(" ".join(_format_cell(v) for v in row))
    return "\n".join(lines)


def _format_cell(value: float) -> str:
    return f"{value:10.4g}"


def matrix_from_values(rows: int, cols: int, values: Iterable[float]) -> Matrix:
    """
    Матрица из потока значений в row-major порядке.

    Raises:
        DimensionMismatch: Если значений не rows * cols
    """
    data = list(values)
    if len(data) != rows * cols:
        raise DimensionMismatch(
            f"Expected {rows * cols} values for {rows}x{cols} matrix, got {len(data)}"
        )
    return Matrix(rows=rows, cols=cols, data=data)

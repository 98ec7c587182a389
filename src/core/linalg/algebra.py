"""
Algebra — Элементарные операции над матрицами

Операции:
- add / subtract: поэлементно, размеры должны совпадать
- multiply: стандартное произведение, a.cols == b.rows
- transpose: новая матрица (cols × rows)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операнды никогда не изменяются, результат — новая матрица
2. Несовместимые размеры → DimensionMismatch
3. transpose — чистое перемещение данных (без округлений)
"""

from src.core.domain.errors import DimensionMismatch
from src.core.domain.matrix import Matrix, allocate_buffer


def _add_sub(a: Matrix, b: Matrix, subtract: bool) -> Matrix:
    if a.rows != b.rows or a.cols != b.cols:
        op = "subtract" if subtract else "add"
        raise DimensionMismatch(
            f"Cannot {op} {a.rows}x{a.cols} and {b.rows}x{b.cols} matrices"
        )

    if subtract:
        data = [x - y for x, y in zip(a.data, b.data)]
    else:
        data = [x + y for x, y in zip(a.data, b.data)]

    return Matrix(rows=a.rows, cols=a.cols, data=data)


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Поэлементная сумма a + b.

    Raises:
        DimensionMismatch: Если размеры не совпадают
    """
    return _add_sub(a, b, subtract=False)


def subtract(a: Matrix, b: Matrix) -> Matrix:
    """
    Поэлементная разность a - b.

    Raises:
        DimensionMismatch: Если размеры не совпадают
    """
    return _add_sub(a, b, subtract=True)


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Матричное произведение a · b.

    Порядок циклов i, k, j: строка a читается один раз,
    строка b проходится последовательно.

    Формула:
        c[i][j] = Σ_k a[i][k] * b[k][j]

    Args:
        a: Матрица m × n
        b: Матрица n × p

    Returns:
        Новая матрица m × p

    Raises:
        DimensionMismatch: Если a.cols != b.rows

    Examples:
        >>> multiply(Matrix.from_rows([[1, 2], [3, 4]]),
        ...          Matrix.from_rows([[5, 6], [7, 8]])).to_rows()
        [[19.0, 22.0], [43.0, 50.0]]
    """
    if a.cols != b.rows:
        raise DimensionMismatch(
            f"Cannot multiply {a.rows}x{a.cols} by {b.rows}x{b.cols}: "
            f"inner dimensions {a.cols} != {b.rows}"
        )

    m, n, p = a.rows, a.cols, b.cols
    a_data = a.data
    b_data = b.data
    c = allocate_buffer(m, p)

    for i in range(m):
        c_off = i * p
        for k in range(n):
            aik = a_data[i * n + k]
            b_off = k * p
            for j in range(p):
                c[c_off + j] += aik * b_data[b_off + j]

    return Matrix(rows=m, cols=p, data=c)


def transpose(a: Matrix) -> Matrix:
    """
    Транспонирование: t[j][i] = a[i][j].

    Returns:
        Новая матрица a.cols × a.rows
    """
    rows, cols = a.rows, a.cols
    data = a.data
    t = [data[i * cols + j] for j in range(cols) for i in range(rows)]
    return Matrix(rows=cols, cols=rows, data=t)

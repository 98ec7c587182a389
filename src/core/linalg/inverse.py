"""
Inverse — Обратная матрица методом Гаусса-Жордана

Расширенный буфер n × 2n:
    [ A | I ]  →  (Gauss-Jordan)  →  [ I | A^-1 ]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. A не изменяется (расширенный буфер — приватная копия)
2. Pivot с |value| < eps → SingularMatrix, частичный результат не возвращается
3. Результат — новая матрица n × n (правая половина буфера)
"""

from src.core.domain.errors import NotSquare, SingularMatrix
from src.core.domain.matrix import Matrix, allocate_buffer
from src.core.linalg.elimination import EliminationMode, eliminate
from src.core.math.numerical_safeguards import EPS_PIVOT


def build_augmented(a: Matrix) -> list[float]:
    """Расширенный буфер [A | I] размера n × 2n."""
    n = a.rows
    width = 2 * n
    buffer = allocate_buffer(n, width)
    for i in range(n):
        row = i * width
        buffer[row : row + n] = a.data[i * n : (i + 1) * n]
        buffer[row + n + i] = 1.0
    return buffer


def inverse(a: Matrix, eps: float = EPS_PIVOT) -> Matrix:
    """
    Обратная матрица.

    inverse матрицы 0 × 0 — пустая матрица 0 × 0.

    Args:
        a: Квадратная матрица
        eps: Порог вырожденности pivot (default: EPS_PIVOT)

    Returns:
        Новая матрица A^-1

    Raises:
        NotSquare: Если a.rows != a.cols
        SingularMatrix: Если матрица необратима (pivot < eps)

    Examples:
        inverse(Matrix.from_rows([[2, 1], [5, 3]])) ≈ [[3, -1], [-5, 2]]
    """
    if not a.is_square:
        raise NotSquare(f"Inverse requires a square matrix, got {a.rows}x{a.cols}")

    n = a.rows
    width = 2 * n
    augmented = build_augmented(a)
    result = eliminate(augmented, n, width, EliminationMode.GAUSS_JORDAN, eps=eps)

    if result.singular:
        raise SingularMatrix(
            f"Matrix {n}x{n} is singular: pivot below eps={eps:.1e} "
            f"at column {result.singular_column}",
            column=result.singular_column,
        )

    data = []
    for i in range(n):
        row = i * width
        data.extend(augmented[row + n : row + width])

    return Matrix(rows=n, cols=n, data=data)

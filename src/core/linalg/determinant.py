"""
Determinant — Детерминант через приведение к верхнетреугольной форме

Формула:
    det(A) = sign × Π pivot_i
    sign = (-1) ** (число перестановок строк)

Ранний выход: если очередной pivot по модулю < eps, возвращается 0.0
без выполнения оставшихся шагов (произведение в любом случае равно 0).

Вырожденность сообщается значением 0.0, а не исключением:
детерминант определён для любой квадратной матрицы.
"""

from src.core.domain.errors import NotSquare
from src.core.domain.matrix import Matrix
from src.core.linalg.elimination import EliminationMode, eliminate
from src.core.math.numerical_safeguards import EPS_PIVOT


def determinant(a: Matrix, eps: float = EPS_PIVOT) -> float:
    """
    Детерминант квадратной матрицы.

    Работает на приватной копии буфера, a не изменяется.
    det матрицы 0 × 0 равен 1.0 (пустое произведение).

    Args:
        a: Квадратная матрица
        eps: Порог вырожденности pivot (default: EPS_PIVOT)

    Returns:
        Детерминант или 0.0 для вырожденной матрицы

    Raises:
        NotSquare: Если a.rows != a.cols

    Examples:
        >>> round(determinant(Matrix.from_rows([[2, 1], [5, 3]])), 12)
        1.0
        >>> determinant(Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]]))
        0.0
    """
    if not a.is_square:
        raise NotSquare(f"Determinant requires a square matrix, got {a.rows}x{a.cols}")

    n = a.rows
    scratch = a.to_buffer()
    result = eliminate(scratch, n, n, EliminationMode.UPPER_TRIANGULAR, eps=eps)

    if result.singular:
        return 0.0

    return result.sign * result.pivot_product

"""
Linear algebra kernels над плотными матрицами

Алгебра, исключение Гаусса с частичным выбором pivot,
детерминант, обратная матрица, случайная генерация.
"""

# Algebra
from src.core.linalg.algebra import add, multiply, subtract, transpose

# Elimination Engine
from src.core.linalg.elimination import (
    EliminationMode,
    EliminationResult,
    eliminate,
    select_pivot,
    swap_rows,
)

# Determinant / Inverse
from src.core.linalg.determinant import determinant
from src.core.linalg.inverse import build_augmented, inverse

# Random fill
from src.core.linalg.random_fill import ordered_bounds, random_fill, random_matrix

__all__ = [
    # Algebra
    "add",
    "subtract",
    "multiply",
    "transpose",
    # Elimination Engine
    "EliminationMode",
    "EliminationResult",
    "eliminate",
    "select_pivot",
    "swap_rows",
    # Determinant / Inverse
    "determinant",
    "inverse",
    "build_augmented",
    # Random fill
    "ordered_bounds",
    "random_fill",
    "random_matrix",
]

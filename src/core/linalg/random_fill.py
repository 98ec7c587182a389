"""
Random Fill — Заполнение матрицы равномерно распределёнными значениями

Каждый элемент независимо выбирается из U[min_value, max_value].
Если max_value < min_value, границы меняются местами.

Для воспроизводимости передаётся собственный random.Random(seed).
"""

import random

from src.core.domain.matrix import Matrix
from src.core.math.numerical_safeguards import validate_finite


def ordered_bounds(min_value: float, max_value: float) -> tuple[float, float]:
    """
    Валидация и упорядочивание границ.

    Raises:
        ValueError: Если граница NaN/Inf
    """
    validate_finite(min_value, "min_value")
    validate_finite(max_value, "max_value")
    if max_value < min_value:
        return max_value, min_value
    return min_value, max_value


def random_fill(
    matrix: Matrix,
    min_value: float,
    max_value: float,
    rng: random.Random | None = None,
) -> None:
    """
    Заполнение существующей матрицы in-place.

    Args:
        matrix: Матрица для заполнения
        min_value: Нижняя граница
        max_value: Верхняя граница
        rng: Генератор (default: модульный random)

    Raises:
        ValueError: Если граница NaN/Inf
    """
    lo, hi = ordered_bounds(min_value, max_value)
    uniform = rng.uniform if rng is not None else random.uniform
    data = matrix.data
    for idx in range(len(data)):
        data[idx] = uniform(lo, hi)


def random_matrix(
    rows: int,
    cols: int,
    min_value: float,
    max_value: float,
    rng: random.Random | None = None,
) -> Matrix:
    """Новая матрица rows × cols со случайными элементами."""
    lo, hi = ordered_bounds(min_value, max_value)
    m = Matrix.zeros(rows, cols)
    random_fill(m, lo, hi, rng=rng)
    return m

"""
Elimination Engine — Исключение Гаусса с частичным выбором опорного элемента

Общий алгоритм для детерминанта и обратной матрицы.

Рабочий буфер: плоский row-major список n × width (width >= n),
опорные столбцы [0, n).

АЛГОРИТМ (для каждого i = 0..n-1):
    a. Partial pivoting: среди строк i..n-1 выбирается строка с максимальным
       |buf[r][i]|. При равенстве побеждает первая (строгое сравнение ">").
    b. Проверка вырожденности: |buf[piv][i]| < eps → остановка, singular.
    c. Перестановка строк i и piv целиком, смена знака.
    d. Редукция:
       - UPPER_TRIANGULAR: исключаются только строки ниже i,
         det *= pivot
       - GAUSS_JORDAN: строка i делится на pivot, столбец i исключается
         во всех остальных строках; строки с |factor| < eps пропускаются

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Буфер принадлежит вызывающему коду (приватная копия), engine его изменяет
2. Выбор pivot детерминирован
3. При singular дальнейшие шаги не выполняются
"""

import logging
from dataclasses import dataclass
from enum import Enum

from src.core.math.numerical_safeguards import EPS_PIVOT, is_negligible_pivot, validate_eps

logger = logging.getLogger(__name__)


# =============================================================================
# TYPES
# =============================================================================


class EliminationMode(str, Enum):
    """Режим редукции."""

    UPPER_TRIANGULAR = "upper_triangular"  # Детерминант
    GAUSS_JORDAN = "gauss_jordan"  # Обратная матрица


@dataclass(frozen=True)
class EliminationResult:
    """Результат прохода Elimination Engine."""

    singular: bool
    singular_column: int | None  # Столбец, на котором найден нулевой pivot

    # Учёт перестановок
    swaps: int
    sign: int  # (-1) ** swaps

    # Опорные элементы (значения до нормировки)
    pivots: tuple[float, ...]
    pivot_product: float  # Π(pivots), без учёта знака


# =============================================================================
# PRIMITIVES
# =============================================================================


def select_pivot(buffer: list[float], width: int, column: int, n: int) -> int:
    """
    Выбор строки с максимальным |buffer[r][column]| среди r = column..n-1.

    Первая строка с максимальным значением выигрывает.

    Returns:
        Индекс строки-pivot
    """
    piv = column
    best = abs(buffer[column * width + column])
    for r in range(column + 1, n):
        candidate = abs(buffer[r * width + column])
        if candidate > best:
            best = candidate
            piv = r
    return piv


def swap_rows(buffer: list[float], width: int, r1: int, r2: int) -> None:
    """Перестановка строк r1 и r2 целиком (in-place)."""
    if r1 == r2:
        return
    s1 = r1 * width
    s2 = r2 * width
    buffer[s1 : s1 + width], buffer[s2 : s2 + width] = (
        buffer[s2 : s2 + width],
        buffer[s1 : s1 + width],
    )


# =============================================================================
# ENGINE
# =============================================================================


def eliminate(
    buffer: list[float],
    n: int,
    width: int,
    mode: EliminationMode,
    eps: float = EPS_PIVOT,
) -> EliminationResult:
    """
    Прямой (и для GAUSS_JORDAN — обратный) ход исключения in-place.

    Args:
        buffer: Row-major рабочий буфер n × width (изменяется)
        n: Число строк и опорных столбцов
        width: Ширина строки (width >= n)
        mode: Режим редукции
        eps: Порог вырожденности pivot

    Returns:
        EliminationResult

    Raises:
        ValueError: Если width < n, длина буфера неверна или eps <= 0
    """
    validate_eps(eps)
    if width < n:
        raise ValueError(f"width must be >= n, got width={width}, n={n}")
    if len(buffer) != n * width:
        raise ValueError(f"buffer length {len(buffer)} does not match {n}x{width}")

    swaps = 0
    pivots: list[float] = []
    product = 1.0

    for i in range(n):
        # a. Partial pivoting
        piv = select_pivot(buffer, width, i, n)
        pivot = buffer[piv * width + i]

        # b. Singularity check
        if is_negligible_pivot(pivot, eps):
            logger.debug(
                "Singular pivot at column %d: |%.3e| < eps=%.1e (mode=%s)",
                i, pivot, eps, mode.value,
            )
            return EliminationResult(
                singular=True,
                singular_column=i,
                swaps=swaps,
                sign=-1 if swaps % 2 else 1,
                pivots=tuple(pivots),
                pivot_product=0.0,
            )

        # c. Row swap
        if piv != i:
            swap_rows(buffer, width, i, piv)
            swaps += 1

        pivots.append(pivot)
        row_i = i * width

        # d. Reduction
        if mode == EliminationMode.UPPER_TRIANGULAR:
            product *= pivot
            for r in range(i + 1, n):
                row_r = r * width
                factor = buffer[row_r + i] / pivot
                for c in range(i, width):
                    buffer[row_r + c] -= factor * buffer[row_i + c]
        else:
            for c in range(width):
                buffer[row_i + c] /= pivot
            product *= pivot
            for r in range(n):
                if r == i:
                    continue
                row_r = r * width
                factor = buffer[row_r + i]
                if is_negligible_pivot(factor, eps):
                    continue
                for c in range(width):
                    buffer[row_r + c] -= factor * buffer[row_i + c]

    return EliminationResult(
        singular=False,
        singular_column=None,
        swaps=swaps,
        sign=-1 if swaps % 2 else 1,
        pivots=tuple(pivots),
        pivot_product=product,
    )

"""
Numerical Safeguards — Epsilon-пороги и float-проверки для матричного ядра

Модуль задаёт численную политику всех алгоритмов над матрицами:
- Порог вырожденности опорного элемента (pivot) при исключении Гаусса
- Толерантности для сравнения float (element-wise allclose)
- Проверки на NaN/Inf для входных параметров
- Валидация параметров с понятными сообщениями об ошибках

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Pivot с |value| < EPS_PIVOT считается нулевым (матрица вырождена)
2. Float сравнения всегда учитывают машинную точность
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог вырожденности опорного элемента
# Используется в Elimination Engine (детерминант и обратная матрица)
EPS_PIVOT: Final[float] = 1e-12

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close / Matrix.allclose
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_negligible_pivot(value: float, eps: float = EPS_PIVOT) -> bool:
    """
    Проверка, слишком ли мал опорный элемент для деления.

    Строгое сравнение: |value| == eps ещё допустим.

    Examples:
        >>> is_negligible_pivot(0.0)
        True
        >>> is_negligible_pivot(1e-13)
        True
        >>> is_negligible_pivot(1e-12)
        False
    """
    return abs(value) < eps


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_eps(eps: float) -> None:
    """
    Валидация epsilon-порога.

    Raises:
        ValueError: Если eps <= 0 или NaN/Inf
    """
    if not is_valid_float(eps) or eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


"""
Тесты для Random Fill

Проверяет:
1. Все элементы в [min, max]
2. Перестановку границ при max < min
3. Воспроизводимость через random.Random(seed)
4. Валидацию NaN/Inf границ
"""

import math
import random

import pytest

from src.core.domain import Matrix, create
from src.core.linalg.random_fill import ordered_bounds, random_fill, random_matrix


class TestOrderedBounds:
    """Упорядочивание границ"""

    def test_already_ordered(self) -> None:
        assert ordered_bounds(-1.0, 1.0) == (-1.0, 1.0)

    def test_swapped(self) -> None:
        assert ordered_bounds(5.0, -5.0) == (-5.0, 5.0)

    def test_equal(self) -> None:
        assert ordered_bounds(3.0, 3.0) == (3.0, 3.0)

    @pytest.mark.parametrize("lo, hi", [(math.nan, 1.0), (0.0, math.inf), (-math.inf, 0.0)])
    def test_non_finite_rejected(self, lo: float, hi: float) -> None:
        with pytest.raises(ValueError, match="must be a valid float"):
            ordered_bounds(lo, hi)


class TestRandomFill:
    """Заполнение существующей матрицы"""

    def test_values_within_bounds(self) -> None:
        m = create(10, 10)
        random_fill(m, -2.5, 7.5, rng=random.Random(1))
        assert all(-2.5 <= v <= 7.5 for v in m.data)

    def test_swapped_bounds(self) -> None:
        m = create(5, 5)
        random_fill(m, 10.0, 0.0, rng=random.Random(2))
        assert all(0.0 <= v <= 10.0 for v in m.data)

    def test_degenerate_range(self) -> None:
        m = create(2, 3)
        random_fill(m, 4.0, 4.0, rng=random.Random(3))
        assert m.data == [4.0] * 6

    def test_reproducible(self) -> None:
        a = create(3, 4)
        b = create(3, 4)
        random_fill(a, 0.0, 1.0, rng=random.Random(99))
        random_fill(b, 0.0, 1.0, rng=random.Random(99))
        assert a == b

    def test_module_generator_by_default(self) -> None:
        m = create(50, 1)
        random_fill(m, 0.0, 1.0)
        assert all(0.0 <= v <= 1.0 for v in m.data)
        assert len(set(m.data)) > 1

    def test_shape_preserved(self) -> None:
        m = create(2, 7)
        random_fill(m, -1.0, 1.0, rng=random.Random(4))
        assert m.shape == (2, 7)

    def test_empty(self) -> None:
        m = create(0, 0)
        random_fill(m, 0.0, 1.0)
        assert m.data == []


class TestRandomMatrix:
    """Конструктор случайной матрицы"""

    def test_shape_and_bounds(self) -> None:
        m = random_matrix(3, 2, -1.0, 1.0, rng=random.Random(5))
        assert isinstance(m, Matrix)
        assert m.shape == (3, 2)
        assert all(-1.0 <= v <= 1.0 for v in m.data)

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(ValueError):
            random_matrix(2, 2, math.nan, 1.0)

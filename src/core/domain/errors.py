"""
Ошибки матричного ядра

Все сбои ядра — типизированные исключения, производные от MatrixError.
Каждое исключение дополнительно наследует ближайший builtin, поэтому
вызывающий код может перехватывать как MatrixError, так и ValueError/IndexError.

Ни одна ошибка не завершает процесс: решение о реакции принимает вызывающий код.
Детерминант сообщает о вырожденности значением 0.0, а не исключением.
"""


class MatrixError(Exception):
    """Базовый класс всех ошибок матричного ядра."""

    pass


class AllocationError(MatrixError, MemoryError):
    """
    Не удалось выделить буфер rows × cols.

    Возникает при создании матрицы и при декодировании заголовка
    с нереалистичными размерами.
    """

    pass


class DimensionMismatch(MatrixError, ValueError):
    """Несовместимые размеры операндов (add/subtract/multiply)."""

    pass


class NotSquare(MatrixError, ValueError):
    """Детерминант или обратная матрица запрошены для неквадратной матрицы."""

    pass


class SingularMatrix(MatrixError, ArithmeticError):
    """
    Матрица необратима: опорный элемент по модулю меньше EPS_PIVOT.

    Attributes:
        column: Столбец, на котором остановилось исключение
    """

    def __init__(self, message: str, column: int | None = None):
        super().__init__(message)
        self.column = column


class RangeError(MatrixError, IndexError):
    """Обращение к элементу за пределами 0 <= i < rows, 0 <= j < cols."""

    pass


class MalformedInput(MatrixError, ValueError):
    """Нарушен формат сериализованной матрицы (текст или JSON payload)."""

    pass

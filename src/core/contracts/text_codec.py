"""
Text Codec — Текстовый формат матрицы

Формат:
    <rows> <cols>
    <row0: cols значений через пробел>
    ...
    <row(rows-1)>

Декодер читает whitespace-разделённые токены: два целых (размеры),
затем ровно rows * cols float в row-major порядке. Лишние токены
после объявленных значений игнорируются.

Представление float:
- precision=None (default): repr(float), кратчайшая форма с точным round-trip
- precision=p (p >= 12): формат "%.{p}g"
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from src.core.domain.errors import MalformedInput
from src.core.domain.matrix import Matrix

logger = logging.getLogger(__name__)

# Минимальное число значащих цифр для текстового представления
MIN_SIGNIFICANT_DIGITS: Final[int] = 12


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class TextCodecConfig:
    """Конфигурация текстового кодека."""

    precision: int | None = None  # None → repr (точный round-trip)
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.precision is not None and self.precision < MIN_SIGNIFICANT_DIGITS:
            raise ValueError(
                f"precision must be >= {MIN_SIGNIFICANT_DIGITS} significant digits, "
                f"got {self.precision}"
            )


# =============================================================================
# CODEC
# =============================================================================


class TextCodec:
    """Кодек матрицы в текстовый формат и обратно."""

    def __init__(self, config: TextCodecConfig | None = None):
        self.config = config or TextCodecConfig()

    def format_value(self, value: float) -> str:
        if self.config.precision is None:
            return repr(float(value))
        return f"{value:.{self.config.precision}g}"

    def encode(self, matrix: Matrix) -> str:
        """
        Сериализация матрицы в текст.

        Returns:
            Текст с завершающим переводом строки
        """
        lines = [f"{matrix.rows} {matrix.cols}"]
        for row in matrix.to_rows():
            lines.append(" ".join(self.format_value(v) for v in row))
        return "\n".join(lines) + "\n"

    def decode(self, text: str) -> Matrix:
        """
        Десериализация матрицы из текста.

        Raises:
            MalformedInput: Если заголовок отсутствует/не числовой/отрицательный
                или значений меньше rows * cols
            AllocationError: Если буфер для объявленных размеров не выделяется
        """
        tokens = text.split()
        if len(tokens) < 2:
            raise MalformedInput("Missing '<rows> <cols>' header")

        rows = _parse_extent(tokens[0], "rows")
        cols = _parse_extent(tokens[1], "cols")

        expected = rows * cols
        available = len(tokens) - 2
        if available < expected:
            raise MalformedInput(
                f"Expected {expected} values for {rows}x{cols} matrix, got {available}"
            )

        matrix = Matrix.zeros(rows, cols)
        data = matrix.data
        for idx, token in enumerate(tokens[2 : 2 + expected]):
            data[idx] = _parse_value(token, idx)

        return matrix

    def save(self, matrix: Matrix, path: str | Path) -> None:
        """
        Запись матрицы в файл.

        Raises:
            OSError: Если файл не может быть записан
        """
        path = Path(path)
        path.write_text(self.encode(matrix), encoding=self.config.encoding)
        logger.debug("Saved %dx%d matrix to %s", matrix.rows, matrix.cols, path)

    def load(self, path: str | Path) -> Matrix:
        """
        Чтение матрицы из файла.

        Raises:
            OSError: Если файл не может быть прочитан
            MalformedInput: Если содержимое не соответствует формату
        """
        path = Path(path)
        matrix = self.decode(path.read_text(encoding=self.config.encoding))
        logger.debug("Loaded %dx%d matrix from %s", matrix.rows, matrix.cols, path)
        return matrix


def _parse_extent(token: str, name: str) -> int:
    # int() accepts digit separators ("1_000"), the format does not
    if "_" in token:
        raise MalformedInput(f"Header {name} must be an integer, got {token!r}")
    try:
        value = int(token)
    except ValueError:
        raise MalformedInput(f"Header {name} must be an integer, got {token!r}") from None
    if value < 0:
        raise MalformedInput(f"Header {name} must be non-negative, got {value}")
    return value


def _parse_value(token: str, idx: int) -> float:
    if "_" in token:
        raise MalformedInput(f"Value #{idx} ({token!r}) is not a floating literal")
    try:
        return float(token)
    except ValueError:
        raise MalformedInput(f"Value #{idx} ({token!r}) is not a floating literal") from None


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def dumps(matrix: Matrix, config: TextCodecConfig | None = None) -> str:
    """Сериализация матрицы в текст."""
    return TextCodec(config).encode(matrix)


def loads(text: str) -> Matrix:
    """Десериализация матрицы из текста."""
    return TextCodec().decode(text)


def save_txt(matrix: Matrix, path: str | Path, config: TextCodecConfig | None = None) -> None:
    """Запись матрицы в текстовый файл."""
    TextCodec(config).save(matrix, path)


def load_txt(path: str | Path) -> Matrix:
    """Чтение матрицы из текстового файла."""
    return TextCodec().load(path)

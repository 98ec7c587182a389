"""Matrix Session — диспетчер команд над «текущей» матрицей.

Структурированная замена интерактивного меню:
- Сессия хранит текущую матрицу (или None)
- Каждая команда — CommandRequest, результат — неизменяемый CommandResult
- Ошибки ядра (MatrixError) и файловые ошибки не выходят за пределы execute():
  они превращаются в CommandResult(ok=False, error_kind=...)

Команды:
- CREATE / RANDOM / LOAD: заменить текущую матрицу
- SHOW / SAVE: отобразить или сохранить текущую
- ADD / SUBTRACT / MULTIPLY: результат с операндом, текущая не меняется
- TRANSPOSE: заменить текущую транспонированной
- DETERMINANT / INVERSE: вычисления над текущей
- CLEAR: освободить текущую
"""

import logging
import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from src.core.contracts.text_codec import TextCodec, TextCodecConfig
from src.core.domain.errors import MatrixError
from src.core.domain.matrix import Matrix, format_matrix
from src.core.linalg.algebra import add, multiply, subtract, transpose
from src.core.linalg.determinant import determinant
from src.core.linalg.inverse import inverse
from src.core.linalg.random_fill import random_matrix
from src.core.math.numerical_safeguards import EPS_PIVOT

logger = logging.getLogger(__name__)


class Command(str, Enum):
    """Команда сессии (пункт меню)."""
    CREATE = "create"
    RANDOM = "random"
    LOAD = "load"
    SHOW = "show"
    SAVE = "save"
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    TRANSPOSE = "transpose"
    DETERMINANT = "determinant"
    INVERSE = "inverse"
    CLEAR = "clear"


class NoCurrentMatrix(MatrixError):
    """Команда требует текущую матрицу, а её нет."""
    pass


@dataclass(frozen=True)
class SessionConfig:
    """Конфигурация сессии.

    seed фиксирует генератор для RANDOM (None → недетерминированный).
    history_limit — число последних результатов, хранимых в истории.
    """
    pivot_eps: float = EPS_PIVOT
    codec: TextCodecConfig = field(default_factory=TextCodecConfig)
    seed: Optional[int] = None
    history_limit: int = 1000

    def __post_init__(self) -> None:
        if self.history_limit <= 0:
            raise ValueError(f"history_limit must be positive, got {self.history_limit}")


@dataclass(frozen=True)
class CommandRequest:
    """Запрос команды. Используются только поля, нужные команде."""
    command: Command
    rows: Optional[Sequence[Sequence[float]]] = None  # CREATE
    shape: Optional[tuple[int, int]] = None  # RANDOM
    min_value: Optional[float] = None  # RANDOM
    max_value: Optional[float] = None  # RANDOM
    path: Optional[str | Path] = None  # LOAD / SAVE
    operand: Optional[Matrix] = None  # ADD / SUBTRACT / MULTIPLY


@dataclass(frozen=True)
class CommandResult:
    """Результат выполнения команды."""
    command: Command
    ok: bool
    message: str

    matrix: Optional[Matrix] = None  # Результирующая матрица (копия)
    value: Optional[float] = None  # DETERMINANT

    # Диагностика
    error_kind: Optional[str] = None


class MatrixSession:
    """Сессия работы с текущей матрицей.

    Пример:
        session = MatrixSession(SessionConfig(seed=42))
        session.execute(CommandRequest(Command.CREATE, rows=[[2, 1], [5, 3]]))
        result = session.execute(CommandRequest(Command.DETERMINANT))
        result.value  # ≈ 1.0
    """

    def __init__(self, config: Optional[SessionConfig] = None):
        self.config = config or SessionConfig()
        self._codec = TextCodec(self.config.codec)
        self._rng = random.Random(self.config.seed)
        self._current: Optional[Matrix] = None

        # История выполненных команд (последние history_limit)
        self._history: deque[CommandResult] = deque(maxlen=self.config.history_limit)

        self._handlers: dict[Command, Callable[[CommandRequest], CommandResult]] = {
            Command.CREATE: self._create,
            Command.RANDOM: self._random,
            Command.LOAD: self._load,
            Command.SHOW: self._show,
            Command.SAVE: self._save,
            Command.ADD: self._binary,
            Command.SUBTRACT: self._binary,
            Command.MULTIPLY: self._binary,
            Command.TRANSPOSE: self._transpose,
            Command.DETERMINANT: self._determinant,
            Command.INVERSE: self._inverse,
            Command.CLEAR: self._clear,
        }

    @property
    def current(self) -> Optional[Matrix]:
        """Копия текущей матрицы (или None)."""
        return self._current.clone() if self._current is not None else None

    @property
    def history(self) -> List[CommandResult]:
        return list(self._history)

    def execute(self, request: CommandRequest) -> CommandResult:
        """Выполнение одной команды.

        Returns:
            CommandResult; исключения ядра не пробрасываются
        """
        handler = self._handlers[request.command]
        try:
            result = handler(request)
        except MatrixError as e:
            result = self._failure(request.command, type(e).__name__, str(e))
        except OSError as e:
            result = self._failure(request.command, "IOError", str(e))
        except ValueError as e:
            result = self._failure(request.command, "InvalidRequest", str(e))
        else:
            logger.debug("Command %s: %s", request.command.value, result.message.splitlines()[0])

        self._history.append(result)
        return result

    def run(self, requests: Sequence[CommandRequest]) -> List[CommandResult]:
        """Последовательное выполнение команд."""
        return [self.execute(request) for request in requests]

    # -------------------------------------------------------------------------
    # Handlers
    # -------------------------------------------------------------------------

    def _create(self, request: CommandRequest) -> CommandResult:
        if request.rows is None:
            raise ValueError("CREATE requires rows")
        self._current = Matrix.from_rows(request.rows)
        return self._replaced(request.command, "Created")

    def _random(self, request: CommandRequest) -> CommandResult:
        if request.shape is None or request.min_value is None or request.max_value is None:
            raise ValueError("RANDOM requires shape, min_value and max_value")
        rows, cols = request.shape
        self._current = random_matrix(
            rows, cols, request.min_value, request.max_value, rng=self._rng
        )
        return self._replaced(request.command, "Generated")

    def _load(self, request: CommandRequest) -> CommandResult:
        if request.path is None:
            raise ValueError("LOAD requires path")
        self._current = self._codec.load(request.path)
        return self._replaced(request.command, "Loaded")

    def _show(self, request: CommandRequest) -> CommandResult:
        current = self._require_current()
        return CommandResult(
            command=request.command,
            ok=True,
            message=format_matrix(current),
            matrix=current.clone(),
        )

    def _save(self, request: CommandRequest) -> CommandResult:
        if request.path is None:
            raise ValueError("SAVE requires path")
        current = self._require_current()
        self._codec.save(current, request.path)
        return CommandResult(
            command=request.command,
            ok=True,
            message=f"Saved to '{request.path}'",
        )

    def _binary(self, request: CommandRequest) -> CommandResult:
        current = self._require_current()
        if request.operand is None:
            raise ValueError(f"{request.command.name} requires operand")

        if request.command == Command.ADD:
            result, title = add(current, request.operand), "addition"
        elif request.command == Command.SUBTRACT:
            result, title = subtract(current, request.operand), "subtraction"
        else:
            result, title = multiply(current, request.operand), "multiplication"

        return CommandResult(
            command=request.command,
            ok=True,
            message=f"Result ({title}):\n{format_matrix(result)}",
            matrix=result,
        )

    def _transpose(self, request: CommandRequest) -> CommandResult:
        current = self._require_current()
        self._current = transpose(current)
        return CommandResult(
            command=request.command,
            ok=True,
            message=(
                f"Transposed, matrix is now {self._current.rows}x{self._current.cols}"
            ),
            matrix=self._current.clone(),
        )

    def _determinant(self, request: CommandRequest) -> CommandResult:
        current = self._require_current()
        det = determinant(current, eps=self.config.pivot_eps)
        return CommandResult(
            command=request.command,
            ok=True,
            message=f"Determinant = {det:.12g}",
            value=det,
        )

    def _inverse(self, request: CommandRequest) -> CommandResult:
        current = self._require_current()
        inv = inverse(current, eps=self.config.pivot_eps)
        return CommandResult(
            command=request.command,
            ok=True,
            message=f"Inverse:\n{format_matrix(inv)}",
            matrix=inv,
        )

    def _clear(self, request: CommandRequest) -> CommandResult:
        if self._current is None:
            return CommandResult(command=request.command, ok=True, message="No current matrix")
        self._current = None
        return CommandResult(command=request.command, ok=True, message="Matrix released")

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _require_current(self) -> Matrix:
        if self._current is None:
            raise NoCurrentMatrix("No current matrix")
        return self._current

    def _replaced(self, command: Command, verb: str) -> CommandResult:
        current = self._current
        return CommandResult(
            command=command,
            ok=True,
            message=f"{verb} {current.rows}x{current.cols} matrix",
            matrix=current.clone(),
        )

    def _failure(self, command: Command, error_kind: str, message: str) -> CommandResult:
        logger.warning("Command %s failed: %s: %s", command.value, error_kind, message)
        return CommandResult(
            command=command,
            ok=False,
            message=message,
            error_kind=error_kind,
        )

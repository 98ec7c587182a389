"""Toolbox — командная сессия над матричным ядром.

- Диспетчер команд, повторяющий пункты меню (создание, загрузка, операции)
- Типизированные результаты вместо вывода в терминал
"""

from .session import (
    Command,
    CommandRequest,
    CommandResult,
    MatrixSession,
    NoCurrentMatrix,
    SessionConfig,
)

__all__ = [
    "Command",
    "CommandRequest",
    "CommandResult",
    "MatrixSession",
    "NoCurrentMatrix",
    "SessionConfig",
]

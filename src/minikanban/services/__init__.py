"""Service layer for board logic."""

from .board_service import BoardService, BoardState, TaskValidationError

__all__ = [
    "BoardService",
    "BoardState",
    "TaskValidationError",
]

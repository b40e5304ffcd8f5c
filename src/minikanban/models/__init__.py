"""Data models."""

from .board import Board, BoardColumn
from .status import (
    COLUMN_TITLES,
    STATUS_ORDER,
    MoveDirection,
    TaskStatus,
    adjacent_status,
    can_move_left,
    can_move_right,
)
from .task import Task, TaskCreate, TaskId, TaskUpdate

__all__ = [
    "COLUMN_TITLES",
    "STATUS_ORDER",
    "Board",
    "BoardColumn",
    "MoveDirection",
    "Task",
    "TaskCreate",
    "TaskId",
    "TaskStatus",
    "TaskUpdate",
    "adjacent_status",
    "can_move_left",
    "can_move_right",
]

"""Task status enumeration and column ordering."""

from enum import Enum


class TaskStatus(str, Enum):
    """Valid statuses for a task, one per board column."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class MoveDirection(str, Enum):
    """Direction of a one-step column move."""

    LEFT = "left"
    RIGHT = "right"


# Fixed left-to-right column order
STATUS_ORDER: tuple[TaskStatus, ...] = (
    TaskStatus.TODO,
    TaskStatus.IN_PROGRESS,
    TaskStatus.DONE,
)

COLUMN_TITLES: dict[TaskStatus, str] = {
    TaskStatus.TODO: "A Fazer",
    TaskStatus.IN_PROGRESS: "Em Progresso",
    TaskStatus.DONE: "Concluídas",
}


def adjacent_status(status: TaskStatus | str, direction: MoveDirection | str) -> TaskStatus | None:
    """Get the neighbouring status in the column order.

    Args:
        status: Current task status
        direction: Which neighbour to look up

    Returns:
        The adjacent status, or None at either end of the order or for an
        unknown status.
    """
    try:
        index = STATUS_ORDER.index(TaskStatus(status))
    except ValueError:
        return None

    step = -1 if MoveDirection(direction) is MoveDirection.LEFT else 1
    next_index = index + step
    if next_index < 0 or next_index >= len(STATUS_ORDER):
        return None
    return STATUS_ORDER[next_index]


def can_move_left(status: TaskStatus | str) -> bool:
    """Whether a task in this status has a column to its left."""
    return adjacent_status(status, MoveDirection.LEFT) is not None


def can_move_right(status: TaskStatus | str) -> bool:
    """Whether a task in this status has a column to its right."""
    return adjacent_status(status, MoveDirection.RIGHT) is not None

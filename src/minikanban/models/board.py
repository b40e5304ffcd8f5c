"""Board view models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .status import COLUMN_TITLES, STATUS_ORDER, TaskStatus
from .task import Task


class BoardColumn(BaseModel):
    """One column of the board: every task sharing a status."""

    status: TaskStatus
    title: str
    tasks: list[Task] = Field(default_factory=list)

    @property
    def task_count(self) -> int:
        return len(self.tasks)


class Board(BaseModel):
    """Tasks partitioned into the fixed status columns."""

    columns: list[BoardColumn] = Field(default_factory=list)

    @classmethod
    def from_tasks(cls, tasks: list[Task]) -> Board:
        """
        Create a Board from a task list, grouping by exact status match.

        Columns follow the fixed status order. Within a column tasks keep the
        order they had in the input list.
        """
        columns = [
            BoardColumn(
                status=status,
                title=COLUMN_TITLES[status],
                tasks=[t for t in tasks if t.status == status],
            )
            for status in STATUS_ORDER
        ]
        return cls(columns=columns)

    def get_column(self, status: TaskStatus | str) -> BoardColumn:
        """Get the column for a status."""
        status = TaskStatus(status)
        for column in self.columns:
            if column.status == status:
                return column
        raise KeyError(status)

    @property
    def task_count(self) -> int:
        return sum(column.task_count for column in self.columns)

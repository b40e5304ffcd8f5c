"""Service owning the board state and every user-triggered operation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from ..api import TaskApiClient, TaskClientError
from ..models import (
    Board,
    MoveDirection,
    Task,
    TaskCreate,
    TaskStatus,
    TaskUpdate,
    adjacent_status,
)

logger = logging.getLogger(__name__)

LOAD_ERROR = "Erro ao carregar tarefas"
TITLE_REQUIRED = "Título é obrigatório"
TITLE_EMPTY = "Título não pode ser vazio"


class TaskValidationError(ValueError):
    """Input rejected before any request was sent."""

    pass


@dataclass
class BoardState:
    """Client-side board state.

    `tasks` is only ever replaced by a full reload; mutations go to the API and
    are observed through the next load.
    """

    tasks: list[Task] = field(default_factory=list)
    title: str = ""
    description: str = ""
    loading: bool = False
    error: str = ""
    dragging_task: Task | None = None
    # Bumped whenever the service clears the form, so views know to reset inputs
    form_resets: int = 0


class BoardService:
    """Service for board operations against the task API."""

    def __init__(self, client: TaskApiClient, state: BoardState | None = None) -> None:
        self.client = client
        self.state = state or BoardState()
        self._listeners: list[Callable[[BoardState], None]] = []

    def subscribe(self, callback: Callable[[BoardState], None]) -> None:
        """Call `callback` whenever the loading flag, the error or the task list changes.

        Callbacks run on the thread that performed the operation.
        """
        self._listeners.append(callback)

    def _notify(self) -> None:
        for callback in self._listeners:
            callback(self.state)

    @property
    def board(self) -> Board:
        """The board derived from the last loaded task list."""
        return Board.from_tasks(self.state.tasks)

    def load_tasks(self) -> bool:
        """
        Reload the full task list.

        Failures are recorded in `state.error` instead of raised; the previous
        list stays in place.

        Returns:
            True if the list was loaded
        """
        self.state.error = ""
        self.state.loading = True
        self._notify()
        try:
            self.state.tasks = self.client.list_tasks()
            logger.debug("Loaded %d tasks", len(self.state.tasks))
            return True
        except TaskClientError as e:
            logger.warning("Task list load failed: %s", e)
            self.state.error = str(e) or LOAD_ERROR
            return False
        finally:
            self.state.loading = False
            self._notify()

    def set_form(self, title: str, description: str) -> None:
        """Record the new-task form fields."""
        self.state.title = title
        self.state.description = description

    def clear_form(self) -> None:
        """Empty the new-task form."""
        self.set_form("", "")
        self.state.form_resets += 1

    def create_task(self) -> Task:
        """
        Create a task from the form fields, in the first column.

        The form is cleared only after the API accepted the task.

        Raises:
            TaskValidationError: The trimmed title is empty
            TaskClientError: The API call failed
        """
        title = self.state.title.strip()
        if not title:
            raise TaskValidationError(TITLE_REQUIRED)

        self.state.loading = True
        self._notify()
        try:
            task = self.client.create_task(
                TaskCreate(
                    title=title,
                    description=self.state.description.strip(),
                    status=TaskStatus.TODO,
                )
            )
            logger.info("Task created: %s", task.id)
            self.clear_form()
            self.load_tasks()
            return task
        finally:
            self.state.loading = False
            self._notify()

    def move_task(self, task: Task, direction: MoveDirection | str) -> bool:
        """
        Move a task one column left or right.

        Returns:
            False without calling the API when the task is already at that end

        Raises:
            TaskClientError: The API call failed
        """
        new_status = adjacent_status(task.status, direction)
        if new_status is None:
            logger.debug("move_task: %s already at %s end", task.id, direction)
            return False

        self._change_status(task, new_status)
        return True

    def start_drag(self, task: Task) -> None:
        """Remember the task being dragged."""
        self.state.dragging_task = task

    def end_drag(self) -> None:
        """Forget the dragged task."""
        self.state.dragging_task = None

    def drop_task(self, target_status: TaskStatus | str) -> bool:
        """
        Drop the dragged task onto a column.

        Drag state is cleared whatever the outcome.

        Returns:
            True if the task changed column

        Raises:
            TaskClientError: The API call failed
        """
        task = self.state.dragging_task
        if task is None:
            return False

        try:
            target_status = TaskStatus(target_status)
            if task.status == target_status:
                return False
            self._change_status(task, target_status)
            return True
        finally:
            self.end_drag()

    def edit_task(self, task: Task, new_title: str, new_description: str) -> None:
        """
        Replace a task's title and description.

        Raises:
            TaskValidationError: The trimmed title is empty
            TaskClientError: The API call failed
        """
        title = new_title.strip()
        if not title:
            raise TaskValidationError(TITLE_EMPTY)

        self.client.update_task(task.id, TaskUpdate(title=title, description=new_description))
        logger.info("Task edited: %s", task.id)
        self.load_tasks()

    def delete_task(self, task: Task) -> None:
        """
        Delete a task. There is no undo.

        Raises:
            TaskClientError: The API call failed
        """
        self.client.delete_task(task.id)
        logger.info("Task deleted: %s", task.id)
        self.load_tasks()

    def _change_status(self, task: Task, new_status: TaskStatus) -> None:
        """Send a status change, resending title and description with it."""
        self.client.update_task(
            task.id,
            TaskUpdate(
                status=new_status,
                title=task.title,
                description=task.description or "",
            ),
        )
        logger.info("Task moved: %s (%s -> %s)", task.id, task.status.value, new_status.value)
        self.load_tasks()

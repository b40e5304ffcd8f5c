"""Task card widget."""

from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Static

from ...models import Task, can_move_left, can_move_right

ACTION_LEFT = "left"
ACTION_RIGHT = "right"
ACTION_EDIT = "edit"
ACTION_DELETE = "delete"


class CardButton(Button, can_focus=False):
    """Compact card button; focus stays on the card for keyboard navigation."""

    pass


class TaskCard(Widget, can_focus=True):
    """A task card displayed in a column."""

    class ActionRequested(Message):
        """One of the card buttons was pressed."""

        def __init__(self, task: Task, action: str) -> None:
            super().__init__()
            self.task = task
            self.action = action

    class DragStarted(Message):
        """The mouse went down on this card."""

        def __init__(self, task: Task) -> None:
            super().__init__()
            self.task = task

    def __init__(self, task_data: Task, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._task_data = task_data

    @property
    def task(self) -> Task:  # pyrefly: ignore[bad-override]
        """Get the task for this card."""
        return self._task_data

    def compose(self) -> ComposeResult:
        """Create card layout."""
        yield Static(self._truncate(self._task_data.display_title, 40), classes="task-title")

        if self._task_data.description:
            yield Static(self._task_data.description, classes="task-description")

        status = self._task_data.status
        with Horizontal(classes="task-moves"):
            yield CardButton("←", name=ACTION_LEFT, disabled=not can_move_left(status))
            yield CardButton("→", name=ACTION_RIGHT, disabled=not can_move_right(status))
        with Horizontal(classes="task-actions"):
            yield CardButton("Editar", name=ACTION_EDIT, classes="edit-button")
            yield CardButton("Excluir", name=ACTION_DELETE, classes="delete-button")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(self.ActionRequested(self._task_data, event.button.name or ""))

    def on_mouse_down(self, event: events.MouseDown) -> None:
        self.post_message(self.DragStarted(self._task_data))

    def _truncate(self, text: str, max_len: int) -> str:
        """Truncate text with ellipsis."""
        if len(text) <= max_len:
            return text
        return text[: max_len - 1] + "…"

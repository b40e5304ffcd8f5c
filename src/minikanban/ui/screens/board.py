"""Main kanban board screen."""

from textual import events
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.message import Message
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, Static

from ...models import COLUMN_TITLES, STATUS_ORDER, Board, Task, TaskId, TaskStatus
from ...services import BoardState
from ..widgets.column import KanbanColumn
from ..widgets.task_card import TaskCard

SUBMIT_LABEL = "Adicionar"
SUBMITTING_LABEL = "Salvando..."


def _column_widget_id(status: TaskStatus) -> str:
    return f"column-{status.value.replace('_', '-')}"


class BoardScreen(Screen):
    """Board screen: creation form, error banner and the three columns.

    The screen only displays the state it is given; user actions are posted
    as messages and handled by the app.
    """

    class DragCancelled(Message):
        """The mouse was released outside every column."""

        pass

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._current_column = 0
        self._current_task = 0
        self._pending_focus_id: TaskId | None = None
        self._form_resets = 0

    def compose(self) -> ComposeResult:
        """Create the board layout."""
        yield Header()
        yield Static(
            "Este é o quadro com 3 colunas: A Fazer, Em Progresso e Concluídas.",
            id="board-subtitle",
        )

        with Horizontal(id="task-form"):
            yield Input(placeholder="Título da tarefa", id="title-input")
            yield Input(placeholder="Descrição (opcional)", id="description-input")
            yield Button(SUBMIT_LABEL, id="submit-task", variant="primary")

        yield Static("", id="error-banner")

        with Container(id="board-container"), Horizontal(id="columns"):
            for status in STATUS_ORDER:
                yield KanbanColumn(
                    title=COLUMN_TITLES[status],
                    status=status,
                    id=_column_widget_id(status),
                )

        yield Footer()

    def on_mount(self) -> None:
        """Hide the empty banner and load tasks once the widgets exist."""
        self.query_one("#error-banner", Static).display = False
        self.app.load_tasks()  # pyrefly: ignore[missing-attribute]

    def show_state(self, state: BoardState, board: Board) -> None:
        """Bring every widget in line with the given state."""
        self._show_form(state)
        self._show_error(state.error)
        self._show_board(board)

    def _show_form(self, state: BoardState) -> None:
        # Inputs are the source of truth while typing; only a reset flows back
        if state.form_resets != self._form_resets:
            self._form_resets = state.form_resets
            self.query_one("#title-input", Input).value = state.title
            self.query_one("#description-input", Input).value = state.description

        submit = self.query_one("#submit-task", Button)
        submit.disabled = state.loading
        submit.label = SUBMITTING_LABEL if state.loading else SUBMIT_LABEL

    def _show_error(self, error: str) -> None:
        banner = self.query_one("#error-banner", Static)
        banner.update(error)
        banner.display = bool(error)

    def _show_board(self, board: Board) -> None:
        # Keep focus on the same task across the rebuild
        current = self.get_current_task()
        if current is not None and self._board_has_focus():
            self._pending_focus_id = current.id

        for board_column in board.columns:
            column = self.query_one(f"#{_column_widget_id(board_column.status)}", KanbanColumn)
            column.set_tasks(board_column.tasks)

        # Defer focus until after DOM is rebuilt (double-defer to ensure columns finish first)
        self.call_after_refresh(self._schedule_pending_focus)

    def _board_has_focus(self) -> bool:
        focused = self.focused
        return focused is not None and not isinstance(focused, Input | Button)

    def _schedule_pending_focus(self) -> None:
        self.call_after_refresh(self._apply_pending_focus)

    def _apply_pending_focus(self) -> None:
        """Move focus to the remembered task, or clamp the previous position."""
        if self._pending_focus_id is None:
            return
        task_id = self._pending_focus_id
        self._pending_focus_id = None

        position = self._find_task_position(task_id)
        if position:
            self._current_column, self._current_task = position
        else:
            column = self._get_column(self._current_column)
            if column and column.task_count > 0:
                self._current_task = min(self._current_task, column.task_count - 1)
            else:
                self._current_task = 0
        self._update_focus()

    def _find_task_position(self, task_id: TaskId) -> tuple[int, int] | None:
        """
        Find a task's position by ID.

        Returns:
            (column_index, task_index) or None if not found
        """
        for col_idx in range(len(STATUS_ORDER)):
            column = self._get_column(col_idx)
            if column is None:
                continue
            for task_idx, task in enumerate(column.tasks):
                if task.id == task_id:
                    return (col_idx, task_idx)
        return None

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        """Keep the board cursor on a card focused with the mouse."""
        if isinstance(event.widget, TaskCard):
            position = self._find_task_position(event.widget.task.id)
            if position:
                self._current_column, self._current_task = position

    def on_mouse_up(self, event: events.MouseUp) -> None:
        """Columns stop their own mouse-up, so this is a release elsewhere."""
        self.post_message(self.DragCancelled())

    def focus_form(self) -> None:
        self.query_one("#title-input", Input).focus()

    def focus_board(self) -> None:
        if self.get_current_task() is not None:
            self._update_focus()
        else:
            # Empty column: leave the form anyway
            self.set_focus(None)

    @property
    def form_values(self) -> tuple[str, str]:
        """Current (title, description) typed into the form."""
        return (
            self.query_one("#title-input", Input).value,
            self.query_one("#description-input", Input).value,
        )

    def navigate_column(self, delta: int) -> None:
        """Navigate between columns."""
        new_column = max(0, min(self._current_column + delta, len(STATUS_ORDER) - 1))

        if new_column != self._current_column:
            self._current_column = new_column
            column = self._get_column(new_column)
            if column and column.task_count > 0:
                self._current_task = min(self._current_task, column.task_count - 1)
            else:
                self._current_task = 0
            self._update_focus()

    def navigate_task(self, delta: int) -> None:
        """Navigate between tasks in current column."""
        column = self._get_column(self._current_column)
        if column is None or column.task_count == 0:
            return

        new_task = max(0, min(self._current_task + delta, column.task_count - 1))

        if new_task != self._current_task:
            self._current_task = new_task
            self._update_focus()

    def navigate_to_task(self, index: int) -> None:
        """Navigate to specific task index (-1 for last)."""
        column = self._get_column(self._current_column)
        if column is None or column.task_count == 0:
            return

        index = column.task_count - 1 if index < 0 else min(index, column.task_count - 1)

        self._current_task = index
        self._update_focus()

    def _get_column(self, index: int) -> KanbanColumn | None:
        """Get column widget by index."""
        if index < 0 or index >= len(STATUS_ORDER):
            return None
        try:
            return self.query_one(f"#{_column_widget_id(STATUS_ORDER[index])}", KanbanColumn)
        except Exception:
            return None

    def _update_focus(self) -> None:
        column = self._get_column(self._current_column)
        if column:
            column.focus_task(self._current_task)

    def get_current_task(self) -> Task | None:
        """Get the task under the board cursor."""
        column = self._get_column(self._current_column)
        if column:
            return column.get_task(self._current_task)
        return None

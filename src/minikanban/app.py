"""minikanban TUI Application."""

from __future__ import annotations

import logging
from functools import partial

from textual import work
from textual.app import App
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import Button, Input

from .api import TaskApiClient, TaskClientError
from .config import Settings
from .models import MoveDirection, Task, TaskStatus
from .services import BoardService, BoardState, TaskValidationError
from .services.board_service import TITLE_EMPTY
from .ui.screens.board import BoardScreen
from .ui.widgets import (
    AlertModal,
    ConfirmModal,
    HelpScreen,
    KanbanColumn,
    PromptModal,
    TaskCard,
    TaskPreviewModal,
)
from .ui.widgets.task_card import ACTION_DELETE, ACTION_EDIT, ACTION_LEFT, ACTION_RIGHT

logger = logging.getLogger(__name__)

# Shown when a failure carries no message of its own
CREATE_FAILED = "Erro ao criar tarefa"
MOVE_FAILED = "Erro ao mover tarefa"
EDIT_FAILED = "Erro ao editar tarefa"
DELETE_FAILED = "Erro ao excluir tarefa"

DELETE_CONFIRMATION = "Tem certeza que deseja excluir esta tarefa?"
TITLE_PROMPT = "Novo título:"
DESCRIPTION_PROMPT = "Nova descrição (opcional):"


class MiniKanbanApp(App):
    """minikanban - Kanban board for a remote task API."""

    TITLE = "Mini Kanban"

    CSS_PATH = "ui/styles.tcss"

    BINDINGS = [
        # Core bindings
        Binding("q", "quit", "Sair", show=True),
        Binding("?", "help", "Ajuda", show=True),
        Binding("r", "refresh", "Recarregar", show=True),
        # Navigation
        Binding("left", "nav_left", "← Coluna", show=False),
        Binding("down", "nav_down", "↓ Tarefa", show=False),
        Binding("up", "nav_up", "↑ Tarefa", show=False),
        Binding("right", "nav_right", "→ Coluna", show=False),
        Binding("home", "nav_first", "Primeira", show=False),
        Binding("end", "nav_last", "Última", show=False),
        # Task actions
        Binding("n", "new_task", "Nova", show=True),
        Binding("e", "edit_task", "Editar", show=True),
        Binding("d", "delete_task", "Excluir", show=True),
        Binding("enter", "preview_task", "Detalhes", show=False),
        Binding("shift+left", "move_task_left", "Mover ←", show=False),
        Binding("shift+right", "move_task_right", "Mover →", show=False),
        Binding("escape", "escape", "Voltar", show=False, priority=True),
    ]

    SCREENS = {
        "board": BoardScreen,
    }

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self._init_services()

    def _init_services(self) -> None:
        """Initialize the API client and the board service."""
        self.client = TaskApiClient(self.settings.api_url, timeout=self.settings.request_timeout)
        self.board_service = BoardService(self.client)
        self.board_service.subscribe(self._on_state_changed)

    def on_mount(self) -> None:
        """Called when app is mounted."""
        logger.info("Using task API at %s", self.client.base_url)
        # The board screen starts the first load once it is mounted
        self.push_screen("board")

    def _on_state_changed(self, state: BoardState) -> None:
        # Service operations always run in worker threads
        self.call_from_thread(self.refresh_board)

    def refresh_board(self) -> None:
        """Redraw the board from the service state, even under a modal."""
        screen = self._board_screen()
        if screen is not None:
            screen.show_state(self.board_service.state, self.board_service.board)

    def _board_screen(self) -> BoardScreen | None:
        for screen in self.screen_stack:
            if isinstance(screen, BoardScreen):
                return screen
        return None

    def show_alert(self, message: str) -> None:
        """Show a blocking message."""
        self.push_screen(AlertModal(message))

    # Workers: every API round trip runs off the UI thread. Overlapping
    # operations are neither cancelled nor serialised.

    @work(thread=True, group="api")
    def load_tasks(self) -> None:
        """Reload the full task list."""
        self.board_service.load_tasks()

    @work(thread=True, group="api")
    def _create_task(self) -> None:
        try:
            self.board_service.create_task()
        except TaskValidationError as e:
            self.call_from_thread(self.show_alert, str(e))
        except TaskClientError as e:
            self.call_from_thread(self.show_alert, str(e) or CREATE_FAILED)

    @work(thread=True, group="api")
    def _move_task(self, task: Task, direction: MoveDirection) -> None:
        try:
            self.board_service.move_task(task, direction)
        except TaskClientError as e:
            self.call_from_thread(self.show_alert, str(e) or MOVE_FAILED)

    @work(thread=True, group="api")
    def _drop_task(self, status: TaskStatus) -> None:
        try:
            self.board_service.drop_task(status)
        except TaskClientError as e:
            self.call_from_thread(self.show_alert, str(e) or MOVE_FAILED)

    @work(thread=True, group="api")
    def _edit_task(self, task: Task, new_title: str, new_description: str) -> None:
        try:
            self.board_service.edit_task(task, new_title, new_description)
        except TaskValidationError as e:
            self.call_from_thread(self.show_alert, str(e))
        except TaskClientError as e:
            self.call_from_thread(self.show_alert, str(e) or EDIT_FAILED)

    @work(thread=True, group="api")
    def _delete_task(self, task: Task) -> None:
        try:
            self.board_service.delete_task(task)
        except TaskClientError as e:
            self.call_from_thread(self.show_alert, str(e) or DELETE_FAILED)

    # Form

    def on_input_changed(self, event: Input.Changed) -> None:
        """Mirror the creation form into the board state."""
        if event.input.id in ("title-input", "description-input"):
            screen = self.screen
            if isinstance(screen, BoardScreen):
                self.board_service.set_form(*screen.form_values)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in either form field submits the form."""
        if event.input.id in ("title-input", "description-input"):
            self.action_submit_task()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "submit-task":
            self.action_submit_task()

    def action_submit_task(self) -> None:
        """Create a task from the form unless a request is in flight."""
        if self.board_service.state.loading:
            return
        self._create_task()

    # Card buttons and drag-and-drop

    def on_task_card_action_requested(self, message: TaskCard.ActionRequested) -> None:
        if message.action == ACTION_LEFT:
            self._move_task(message.task, MoveDirection.LEFT)
        elif message.action == ACTION_RIGHT:
            self._move_task(message.task, MoveDirection.RIGHT)
        elif message.action == ACTION_EDIT:
            self.start_edit(message.task)
        elif message.action == ACTION_DELETE:
            self.confirm_delete(message.task)

    def on_task_card_drag_started(self, message: TaskCard.DragStarted) -> None:
        self.board_service.start_drag(message.task)

    def on_kanban_column_dropped(self, message: KanbanColumn.Dropped) -> None:
        """Move the dragged task to the column it was released over."""
        dragging = self.board_service.state.dragging_task
        if dragging is None:
            return
        if dragging.status == message.status:
            # Same column: nothing to send
            self.board_service.drop_task(message.status)
            return
        self._drop_task(message.status)

    def on_board_screen_drag_cancelled(self, message: BoardScreen.DragCancelled) -> None:
        self.board_service.end_drag()

    # Edit and delete flows

    def start_edit(self, task: Task) -> None:
        """Prompt for a new title, then a new description."""
        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            PromptModal(TITLE_PROMPT, task.title),
            callback=partial(self._handle_edit_title, task),
        )

    def _handle_edit_title(self, task: Task, new_title: str | None) -> None:
        if new_title is None:
            return
        if not new_title.strip():
            self.show_alert(TITLE_EMPTY)
            return
        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            PromptModal(DESCRIPTION_PROMPT, task.description or ""),
            callback=partial(self._handle_edit_description, task, new_title),
        )

    def _handle_edit_description(
        self, task: Task, new_title: str, new_description: str | None
    ) -> None:
        if new_description is None:
            return
        self._edit_task(task, new_title, new_description)

    def confirm_delete(self, task: Task) -> None:
        """Ask before deleting; there is no undo."""
        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            ConfirmModal(DELETE_CONFIRMATION),
            callback=partial(self._handle_delete_confirm, task),
        )

    def _handle_delete_confirm(self, task: Task, confirmed: bool | None) -> None:
        if not confirmed:
            return
        self._delete_task(task)

    # Key binding actions

    def action_refresh(self) -> None:
        """Reload the board."""
        self.load_tasks()

    def action_help(self) -> None:
        """Show help screen."""
        self.push_screen(HelpScreen())

    def action_nav_left(self) -> None:
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_column(-1)

    def action_nav_right(self) -> None:
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_column(1)

    def action_nav_up(self) -> None:
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_task(-1)

    def action_nav_down(self) -> None:
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_task(1)

    def action_nav_first(self) -> None:
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_to_task(0)

    def action_nav_last(self) -> None:
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_to_task(-1)

    def action_new_task(self) -> None:
        """Jump to the creation form."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.focus_form()

    def action_edit_task(self) -> None:
        """Edit the task under the cursor."""
        task = self._current_task()
        if task is not None:
            self.start_edit(task)

    def action_delete_task(self) -> None:
        """Delete the task under the cursor (with confirmation)."""
        task = self._current_task()
        if task is not None:
            self.confirm_delete(task)

    def action_preview_task(self) -> None:
        """Show the task details modal."""
        task = self._current_task()
        if task is None:
            return
        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            TaskPreviewModal(task),
            callback=partial(self._handle_preview_result, task),
        )

    def _handle_preview_result(self, task: Task, edit_requested: bool | None) -> None:
        if edit_requested:
            self.start_edit(task)

    def action_move_task_left(self) -> None:
        task = self._current_task()
        if task is not None:
            self._move_task(task, MoveDirection.LEFT)

    def action_move_task_right(self) -> None:
        task = self._current_task()
        if task is not None:
            self._move_task(task, MoveDirection.RIGHT)

    def action_escape(self) -> None:
        """Handle escape: dismiss modal or leave the form."""
        screen = self.screen

        if isinstance(screen, ModalScreen):
            screen.dismiss()
            return

        if isinstance(screen, BoardScreen):
            screen.focus_board()

    def _current_task(self) -> Task | None:
        screen = self.screen
        if not isinstance(screen, BoardScreen):
            return None
        return screen.get_current_task()


def run(settings: Settings | None = None) -> None:
    """Run the minikanban application."""
    app = MiniKanbanApp(settings)
    try:
        app.run()
    finally:
        app.client.close()

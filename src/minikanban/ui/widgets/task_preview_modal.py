"""Read-only task details modal."""

import json

from rich.syntax import Syntax as RichSyntax
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static

from ...models import Task


class TaskPreviewModal(ModalScreen[bool]):
    """Modal showing a task as the API returned it.

    Returns True if user wants to edit the task, False otherwise.
    """

    DEFAULT_CSS = """
    TaskPreviewModal {
        align: center middle;
    }

    TaskPreviewModal > VerticalScroll {
        width: 80%;
        height: 80%;
        border: solid $primary;
        background: $surface;
    }

    TaskPreviewModal > VerticalScroll > #title-bar {
        height: 1;
        width: 100%;
        background: $primary-darken-2;
        color: $text;
        text-align: center;
    }

    TaskPreviewModal > VerticalScroll > #content {
        width: 100%;
        height: auto;
        padding: 0 1;
    }

    TaskPreviewModal > VerticalScroll > #footer-bar {
        height: 1;
        width: 100%;
        background: $surface-lighten-1;
        color: $text-muted;
        text-align: center;
        dock: bottom;
    }
    """

    # Only define bindings for actions we handle - let other keys dismiss
    BINDINGS = [
        Binding("e", "edit", "Editar", show=False),
    ]

    # Keys that should scroll content, not dismiss
    SCROLL_KEYS = {"up", "down", "pageup", "pagedown", "home", "end"}

    def __init__(self, task_data: Task) -> None:
        super().__init__()
        self._task_data = task_data

    def compose(self) -> ComposeResult:
        content = json.dumps(
            self._task_data.model_dump(mode="json"), indent=2, ensure_ascii=False
        )
        syntax = RichSyntax(content, "json", theme="github-dark", word_wrap=True)

        with VerticalScroll():
            yield Static(self._task_data.display_title, id="title-bar")
            yield Static(syntax, id="content")
            yield Static(r"\[e] Editar  \[qualquer tecla] Fechar", id="footer-bar")

    def on_key(self, event) -> None:
        """Handle key events - scroll keys scroll, others dismiss."""
        if event.key in self.SCROLL_KEYS or event.key == "e":
            return
        event.stop()
        self.dismiss(False)

    def action_edit(self) -> None:
        self.dismiss(True)

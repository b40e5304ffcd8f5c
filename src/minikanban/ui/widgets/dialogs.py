"""Small centred dialogs: a message, an optional body and a row of buttons."""

from typing import TypeVar

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label

ResultT = TypeVar("ResultT")


class MessageDialog(ModalScreen[ResultT]):
    """Base dialog.

    Subclasses list their buttons as ``(id, label, variant)`` in ``BUTTONS``
    and map the pressed button id to the dismiss result in ``result_for``.
    """

    DEFAULT_CSS = """
    MessageDialog {
        align: center middle;
    }

    MessageDialog > Vertical {
        width: 50;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    MessageDialog.-alert > Vertical {
        border: solid $error;
    }

    MessageDialog.-wide > Vertical {
        width: 60;
    }

    MessageDialog .dialog-message {
        width: 100%;
        text-align: center;
        margin-bottom: 1;
    }

    MessageDialog Input {
        margin-bottom: 1;
    }

    MessageDialog .buttons {
        width: 100%;
        height: auto;
        align: center middle;
    }

    MessageDialog Button {
        margin: 0 1;
    }
    """

    BUTTONS: tuple[tuple[str, str, str], ...] = ()

    def __init__(self, message: str, classes: str | None = None) -> None:
        super().__init__(classes=classes)
        self.message = message

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(self.message, classes="dialog-message")
            yield from self.compose_body()
            with Center(classes="buttons"):
                for button_id, label, variant in self.BUTTONS:
                    yield Button(label, id=button_id, variant=variant)

    def compose_body(self) -> ComposeResult:
        """Widgets between the message and the buttons."""
        yield from ()

    def result_for(self, button_id: str) -> ResultT:
        raise NotImplementedError

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(self.result_for(event.button.id or ""))


class AlertModal(MessageDialog[None]):
    """Blocks until the user acknowledges the message."""

    BUTTONS = (("ok", "OK", "primary"),)

    BINDINGS = [
        Binding("enter,escape", "close", "OK"),
    ]

    def __init__(self, message: str) -> None:
        super().__init__(message, classes="-alert")

    def on_mount(self) -> None:
        self.query_one("#ok", Button).focus()

    def result_for(self, button_id: str) -> None:
        return None

    def action_close(self) -> None:
        self.dismiss(None)


class ConfirmModal(MessageDialog[bool]):
    """Yes/no question; dismisses with True only for yes."""

    BUTTONS = (("yes", "Sim", "error"), ("no", "Não", "primary"))

    BINDINGS = [
        Binding("s,y", "answer(True)", "Sim"),
        Binding("n,escape", "answer(False)", "Não"),
    ]

    def result_for(self, button_id: str) -> bool:
        return button_id == "yes"

    def action_answer(self, confirmed: bool) -> None:
        self.dismiss(confirmed)


class PromptModal(MessageDialog[str | None]):
    """Asks for one line of text.

    Dismisses with the entered text (possibly empty), or None when cancelled.
    """

    BUTTONS = (("ok", "OK", "primary"), ("cancel", "Cancelar", "default"))

    BINDINGS = [
        Binding("escape", "cancel", "Cancelar"),
    ]

    def __init__(self, message: str, default: str = "") -> None:
        super().__init__(message, classes="-wide")
        self.default = default

    def compose_body(self) -> ComposeResult:
        yield Input(value=self.default, id="prompt-input")

    def on_mount(self) -> None:
        self.query_one("#prompt-input", Input).focus()

    @property
    def value(self) -> str:
        return self.query_one("#prompt-input", Input).value

    def result_for(self, button_id: str) -> str | None:
        return self.value if button_id == "ok" else None

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss(event.value)

    def action_cancel(self) -> None:
        self.dismiss(None)

"""Help screen showing keyboard shortcuts."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Static


class HelpScreen(ModalScreen):
    """Modal help screen showing keyboard shortcuts."""

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    HelpScreen > Vertical {
        width: 60;
        height: auto;
        max-height: 90%;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    HelpScreen .help-title {
        text-align: center;
        text-style: bold;
        padding-bottom: 1;
        border-bottom: solid $primary-darken-2;
    }

    HelpScreen .help-section {
        height: auto;
        padding: 1 0 0 0;
    }

    HelpScreen .section-title {
        text-style: bold;
        color: $primary;
    }

    HelpScreen .help-row {
        height: 1;
    }

    HelpScreen .help-key {
        width: 18;
        text-style: bold;
    }

    HelpScreen .help-desc {
        width: 1fr;
        color: $text-muted;
    }

    HelpScreen .help-footer {
        text-align: center;
        color: $text-muted;
        padding-top: 1;
        border-top: solid $primary-darken-2;
    }
    """

    BINDINGS = [
        Binding("escape", "dismiss", "Fechar", show=False),
    ]

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static("Atalhos de teclado", classes="help-title")

            with Vertical(classes="help-section"):
                yield Static("Navegação", classes="section-title")
                yield self._help_row("Left / Right", "Coluna anterior / seguinte")
                yield self._help_row("Up / Down", "Tarefa anterior / seguinte")
                yield self._help_row("Home / End", "Primeira / última tarefa")

            with Vertical(classes="help-section"):
                yield Static("Tarefas", classes="section-title")
                yield self._help_row("n", "Nova tarefa (formulário)")
                yield self._help_row("Enter", "Detalhes da tarefa")
                yield self._help_row("e", "Editar tarefa")
                yield self._help_row("d", "Excluir tarefa")
                yield self._help_row("Shift+Left", "Mover para a esquerda")
                yield self._help_row("Shift+Right", "Mover para a direita")
                yield self._help_row("Mouse", "Arrastar cartão para outra coluna")

            with Vertical(classes="help-section"):
                yield Static("Geral", classes="section-title")
                yield self._help_row("r", "Recarregar tarefas")
                yield self._help_row("Escape", "Sair do formulário / fechar")
                yield self._help_row("?", "Mostrar esta ajuda")
                yield self._help_row("q", "Sair")

            yield Static("Pressione qualquer tecla para fechar", classes="help-footer")

    def _help_row(self, key: str, description: str) -> Horizontal:
        """Create a help row with key and description."""
        row = Horizontal(classes="help-row")
        row.compose_add_child(Static(key, classes="help-key"))
        row.compose_add_child(Static(description, classes="help-desc"))
        return row

    def on_key(self, event) -> None:
        """Dismiss on any key press and prevent propagation."""
        event.stop()
        self.dismiss()

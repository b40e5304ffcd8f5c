"""Kanban column widget."""

from textual import events
from textual.actions import SkipAction
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Static

from ...models import Task, TaskStatus
from .task_card import TaskCard

EMPTY_COLUMN = "Nenhuma tarefa"


class TaskListScroll(VerticalScroll):
    """Scroll container for task lists.

    Arrow and page keys raise SkipAction so they reach the App's board
    navigation instead of scrolling.
    """

    def action_scroll_up(self) -> None:
        raise SkipAction()

    def action_scroll_down(self) -> None:
        raise SkipAction()

    def action_scroll_home(self) -> None:
        raise SkipAction()

    def action_scroll_end(self) -> None:
        raise SkipAction()

    def action_page_up(self) -> None:
        raise SkipAction()

    def action_page_down(self) -> None:
        raise SkipAction()


class EmptyColumnMessage(Static):
    """Displayed when a column has no tasks."""

    pass


class KanbanColumn(Widget):
    """One status column; the whole column is a drop target.

    Cards carry no DOM id: task ids are opaque and may not map onto valid,
    distinct CSS identifiers. Cards are addressed by their position instead.
    """

    class Dropped(Message):
        """The mouse was released over this column."""

        def __init__(self, status: TaskStatus) -> None:
            super().__init__()
            self.status = status

    def __init__(self, title: str, status: TaskStatus, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.title = title
        self.status = status
        self._tasks: list[Task] = []
        self._generation = 0

    def compose(self) -> ComposeResult:
        yield Static(self._header_text, classes="column-header")
        yield TaskListScroll(EmptyColumnMessage(EMPTY_COLUMN), classes="column-content")

    @property
    def _header_text(self) -> str:
        return f"{self.title} [dim]({len(self._tasks)})[/]"

    def set_tasks(self, tasks: list[Task]) -> None:
        """Replace the column's tasks and rebuild its cards."""
        self._tasks = list(tasks)
        self._generation += 1
        self.call_after_refresh(self._rebuild, self._generation)

    async def _rebuild(self, generation: int) -> None:
        content = self.query_one(TaskListScroll)
        await content.remove_children()
        if generation != self._generation:
            # A newer set_tasks owns the rebuild
            return

        if self._tasks:
            await content.mount_all(TaskCard(task) for task in self._tasks)
        else:
            await content.mount(EmptyColumnMessage(EMPTY_COLUMN))
        self.query_one(".column-header", Static).update(self._header_text)

    def on_mouse_up(self, event: events.MouseUp) -> None:
        event.stop()
        self.post_message(self.Dropped(self.status))

    @property
    def tasks(self) -> list[Task]:
        return self._tasks

    @property
    def task_count(self) -> int:
        return len(self._tasks)

    @property
    def cards(self) -> list[TaskCard]:
        """Mounted cards, in display order."""
        return list(self.query(TaskCard))

    def focus_task(self, index: int) -> bool:
        """
        Focus the card at the given index.

        Returns:
            True if a card was focused, False otherwise
        """
        cards = self.cards
        if not 0 <= index < len(cards):
            return False
        cards[index].focus()
        cards[index].scroll_visible()
        return True

    def get_task(self, index: int) -> Task | None:
        """Get task at index."""
        if 0 <= index < len(self._tasks):
            return self._tasks[index]
        return None

"""Tests for BoardService."""

from unittest.mock import MagicMock, call, patch

import httpx
import pytest

from minikanban.api import TaskApiClient, TaskApiConnectionError, TaskApiStatusError
from minikanban.models import MoveDirection, Task, TaskCreate, TaskStatus, TaskUpdate
from minikanban.services import BoardService, TaskValidationError


def make_task(task_id=1, title="A", description="", status=TaskStatus.TODO) -> Task:
    return Task(id=task_id, title=title, description=description, status=status)


@pytest.fixture
def client() -> MagicMock:
    """Mocked API client; method_calls records every request in order."""
    client = MagicMock(spec=TaskApiClient)
    client.list_tasks.return_value = []
    return client


@pytest.fixture
def service(client: MagicMock) -> BoardService:
    return BoardService(client)


class TestBoardServiceLoad:
    """Tests for loading the task list."""

    def test_load_replaces_tasks(self, service: BoardService, client: MagicMock):
        """A successful load replaces the list and clears the error."""
        client.list_tasks.return_value = [make_task()]
        service.state.error = "old"

        assert service.load_tasks() is True

        assert service.state.tasks == [make_task()]
        assert service.state.error == ""
        assert service.state.loading is False

    def test_load_failure_sets_error_and_keeps_list(
        self, service: BoardService, client: MagicMock
    ):
        """A failed load shows the banner and leaves the previous list."""
        service.state.tasks = [make_task()]
        client.list_tasks.side_effect = TaskApiStatusError("Erro ao listar tarefas", "list", 500)

        assert service.load_tasks() is False

        assert service.state.error == "Erro ao listar tarefas"
        assert service.state.tasks == [make_task()]
        assert service.state.loading is False

    def test_load_connection_failure_uses_same_path(
        self, service: BoardService, client: MagicMock
    ):
        client.list_tasks.side_effect = TaskApiConnectionError("Erro ao listar tarefas")

        service.load_tasks()

        assert service.state.error == "Erro ao listar tarefas"

    def test_unreachable_api_shows_generic_banner(self):
        """Connection detail from httpx never reaches the banner."""
        api = TaskApiClient("http://api.example.com")
        service = BoardService(api)
        with patch.object(
            api._client, "request", side_effect=httpx.ConnectError("Connection refused")
        ):
            service.load_tasks()
        api.close()

        assert service.state.error == "Erro ao listar tarefas"

    def test_task_with_unknown_status_is_left_off_the_board(self):
        api = TaskApiClient("http://api.example.com")
        service = BoardService(api)
        response = MagicMock(status_code=200, is_success=True)
        response.json.return_value = [
            {"id": 1, "title": "A", "description": "", "status": "todo"},
            {"id": 2, "title": "B", "description": "", "status": "archived"},
        ]
        with patch.object(api._client, "request", return_value=response):
            assert service.load_tasks() is True
        api.close()

        assert service.state.error == ""
        todo = service.board.get_column(TaskStatus.TODO)
        assert [t.id for t in todo.tasks] == [1]
        assert service.board.task_count == 1

    def test_loading_flag_set_during_request(self, service: BoardService, client: MagicMock):
        seen = []
        client.list_tasks.side_effect = lambda: seen.append(service.state.loading) or []

        service.load_tasks()

        assert seen == [True]
        assert service.state.loading is False

    def test_single_todo_task_board(self, service: BoardService, client: MagicMock):
        """Loading one todo task puts one card in 'A Fazer' and none elsewhere."""
        client.list_tasks.return_value = [make_task(1, "A", status=TaskStatus.TODO)]

        service.load_tasks()
        board = service.board

        assert [c.task_count for c in board.columns] == [1, 0, 0]
        assert board.columns[0].title == "A Fazer"

    def test_subscribers_notified(self, service: BoardService):
        callback = MagicMock()
        service.subscribe(callback)

        service.load_tasks()

        assert callback.call_count == 2
        callback.assert_called_with(service.state)


class TestBoardServiceCreate:
    """Tests for creating tasks from the form."""

    @pytest.mark.parametrize("title", ["", "  ", "\t\n"])
    def test_blank_title_rejected_without_request(
        self, service: BoardService, client: MagicMock, title: str
    ):
        """Blank titles never reach the API and leave the list unchanged."""
        service.state.tasks = [make_task()]
        service.set_form(title, "desc")

        with pytest.raises(TaskValidationError, match="Título é obrigatório"):
            service.create_task()

        client.create_task.assert_not_called()
        client.list_tasks.assert_not_called()
        assert service.state.tasks == [make_task()]
        assert service.state.description == "desc"

    def test_create_trims_clears_form_and_reloads(
        self, service: BoardService, client: MagicMock
    ):
        client.create_task.return_value = make_task(5, "New", "d")
        service.set_form("  New  ", " d ")

        task = service.create_task()

        assert task.id == 5
        client.create_task.assert_called_once_with(
            TaskCreate(title="New", description="d", status=TaskStatus.TODO)
        )
        assert client.method_calls[-1] == call.list_tasks()
        assert service.state.title == ""
        assert service.state.description == ""
        assert service.state.form_resets == 1
        assert service.state.loading is False

    def test_create_failure_keeps_form(self, service: BoardService, client: MagicMock):
        """A failed create leaves the form filled in and does not reload."""
        client.create_task.side_effect = TaskApiStatusError("Erro ao criar tarefa", "create", 400)
        service.set_form("Title", "desc")

        with pytest.raises(TaskApiStatusError):
            service.create_task()

        assert service.state.title == "Title"
        assert service.state.description == "desc"
        assert service.state.form_resets == 0
        assert service.state.loading is False
        client.list_tasks.assert_not_called()


class TestBoardServiceMove:
    """Tests for moving tasks between columns."""

    def test_move_right_sends_status_title_and_description(
        self, service: BoardService, client: MagicMock
    ):
        """Moving task 1 right PUTs in_progress plus its title and description, then reloads."""
        task = make_task(1, "A", "desc", TaskStatus.TODO)

        assert service.move_task(task, MoveDirection.RIGHT) is True

        assert client.method_calls == [
            call.update_task(
                1,
                TaskUpdate(status=TaskStatus.IN_PROGRESS, title="A", description="desc"),
            ),
            call.list_tasks(),
        ]

    def test_move_left(self, service: BoardService, client: MagicMock):
        task = make_task(1, status=TaskStatus.DONE)

        service.move_task(task, "left")

        sent = client.update_task.call_args.args[1]
        assert sent.status == TaskStatus.IN_PROGRESS

    def test_move_left_from_todo_is_noop(self, service: BoardService, client: MagicMock):
        assert service.move_task(make_task(status=TaskStatus.TODO), MoveDirection.LEFT) is False
        assert client.method_calls == []

    def test_move_right_from_done_is_noop(self, service: BoardService, client: MagicMock):
        assert service.move_task(make_task(status=TaskStatus.DONE), MoveDirection.RIGHT) is False
        assert client.method_calls == []

    def test_move_failure_propagates_without_reload(
        self, service: BoardService, client: MagicMock
    ):
        client.update_task.side_effect = TaskApiStatusError(
            "Erro ao atualizar tarefa", "update", 500
        )

        with pytest.raises(TaskApiStatusError):
            service.move_task(make_task(), MoveDirection.RIGHT)

        client.list_tasks.assert_not_called()

    def test_state_is_not_patched_locally(self, service: BoardService, client: MagicMock):
        """The displayed list comes from the reload, not from the update response."""
        task = make_task(1, status=TaskStatus.TODO)
        service.state.tasks = [task]
        client.update_task.return_value = make_task(1, status=TaskStatus.IN_PROGRESS)
        client.list_tasks.return_value = [make_task(1, status=TaskStatus.DONE)]

        service.move_task(task, MoveDirection.RIGHT)

        assert service.state.tasks[0].status == TaskStatus.DONE


class TestBoardServiceDragAndDrop:
    """Tests for drag-and-drop moves."""

    def test_drop_on_other_column_moves_task(self, service: BoardService, client: MagicMock):
        task = make_task(3, "C", "", TaskStatus.TODO)
        service.start_drag(task)

        assert service.drop_task(TaskStatus.DONE) is True

        assert client.method_calls == [
            call.update_task(3, TaskUpdate(status=TaskStatus.DONE, title="C", description="")),
            call.list_tasks(),
        ]
        assert service.state.dragging_task is None

    def test_drop_on_same_column_is_noop(self, service: BoardService, client: MagicMock):
        """Dropping onto the current column sends nothing and clears the drag."""
        service.start_drag(make_task(status=TaskStatus.IN_PROGRESS))

        assert service.drop_task("in_progress") is False

        assert client.method_calls == []
        assert service.state.dragging_task is None

    def test_drop_without_drag_does_nothing(self, service: BoardService, client: MagicMock):
        assert service.drop_task(TaskStatus.DONE) is False
        assert client.method_calls == []

    def test_drop_failure_still_clears_drag(self, service: BoardService, client: MagicMock):
        client.update_task.side_effect = TaskApiConnectionError("Erro ao atualizar tarefa")
        service.start_drag(make_task())

        with pytest.raises(TaskApiConnectionError):
            service.drop_task(TaskStatus.DONE)

        assert service.state.dragging_task is None

    def test_end_drag_clears_state(self, service: BoardService):
        service.start_drag(make_task())
        service.end_drag()
        assert service.state.dragging_task is None


class TestBoardServiceEdit:
    """Tests for editing title and description."""

    def test_edit_updates_and_reloads(self, service: BoardService, client: MagicMock):
        task = make_task(4, "Old", "old", TaskStatus.DONE)

        service.edit_task(task, "  New  ", "new desc")

        assert client.method_calls == [
            call.update_task(4, TaskUpdate(title="New", description="new desc")),
            call.list_tasks(),
        ]

    def test_edit_with_empty_description(self, service: BoardService, client: MagicMock):
        service.edit_task(make_task(description="old"), "A", "")

        sent = client.update_task.call_args.args[1]
        assert sent.to_payload() == {"title": "A", "description": ""}

    def test_edit_blank_title_rejected(self, service: BoardService, client: MagicMock):
        with pytest.raises(TaskValidationError, match="Título não pode ser vazio"):
            service.edit_task(make_task(), "   ", "desc")

        assert client.method_calls == []


class TestBoardServiceDelete:
    """Tests for deleting tasks."""

    def test_delete_then_reload(self, service: BoardService, client: MagicMock):
        service.delete_task(make_task(2))

        assert client.method_calls == [call.delete_task(2), call.list_tasks()]

    def test_delete_failure_propagates(self, service: BoardService, client: MagicMock):
        client.delete_task.side_effect = TaskApiStatusError("Erro ao excluir tarefa", "delete", 404)

        with pytest.raises(TaskApiStatusError, match="Erro ao excluir tarefa"):
            service.delete_task(make_task(2))

        client.list_tasks.assert_not_called()

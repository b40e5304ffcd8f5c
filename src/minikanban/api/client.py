"""HTTP client for the task API."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx
from pydantic import ValidationError

from ..config import DEFAULT_API_URL
from ..models import Task, TaskCreate, TaskId, TaskUpdate

logger = logging.getLogger(__name__)

# Generic per-operation messages shown to the user; backend error detail is
# never surfaced.
LIST_ERROR = "Erro ao listar tarefas"
CREATE_ERROR = "Erro ao criar tarefa"
UPDATE_ERROR = "Erro ao atualizar tarefa"
DELETE_ERROR = "Erro ao excluir tarefa"


class TaskClientError(Exception):
    """Base exception for task API client errors."""

    pass


class TaskApiStatusError(TaskClientError):
    """The API answered with a non-success HTTP status."""

    def __init__(self, message: str, operation: str, status_code: int) -> None:
        super().__init__(message)
        self.operation = operation
        self.status_code = status_code


class TaskApiConnectionError(TaskClientError):
    """The request never got an HTTP response (connection refused, DNS, ...)."""

    pass


class TaskApiClient:
    """Task API client.

    A thin wrapper around the REST task resource:

    - GET /tasks, POST /tasks, PUT /tasks/{id}, DELETE /tasks/{id}
    - JSON request and response bodies
    - One generic error per operation on non-2xx responses

    There are no retries. The default is to wait indefinitely for a response.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float | None = None,
    ):
        """Initialize the task API client.

        Args:
            base_url: Origin of the task API, e.g. http://localhost:8080
            timeout: Seconds to wait for a response, None to wait indefinitely
        """
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            headers={"Accept": "application/json"},
            timeout=timeout,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> TaskApiClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def list_tasks(self) -> list[Task]:
        """Fetch every task, in the order the backend returns them.

        Items that do not parse as a task (unknown status, missing fields) are
        skipped with a warning.

        Raises:
            TaskApiStatusError: Non-success HTTP status
            TaskApiConnectionError: No response from the API
            TaskClientError: Malformed response body
        """
        response = self._request("list", "GET", "/tasks", LIST_ERROR)
        data = self._parse_json(response, "list", LIST_ERROR)
        if not isinstance(data, list):
            logger.error("list: expected a JSON array, got %s", type(data).__name__)
            raise TaskClientError(LIST_ERROR)

        tasks = []
        for item in data:
            try:
                tasks.append(Task.model_validate(item))
            except ValidationError as e:
                # Tasks that match no column are left off the board
                logger.warning("list: skipping malformed task %r: %s", item, e)
        return tasks

    def create_task(self, task: TaskCreate) -> Task:
        """Create a task and return it with its backend-assigned ID.

        Raises:
            TaskApiStatusError: Non-success HTTP status
            TaskApiConnectionError: No response from the API
            TaskClientError: Malformed response body
        """
        response = self._request("create", "POST", "/tasks", CREATE_ERROR, json=task.to_payload())
        return self._parse_task(response, "create", CREATE_ERROR)

    def update_task(self, task_id: TaskId, patch: TaskUpdate | dict[str, Any]) -> Task:
        """Update a task with the given fields and return the updated task.

        Fields missing from the patch are left to the backend's discretion, so
        callers must include every field they want preserved.

        Raises:
            TaskApiStatusError: Non-success HTTP status
            TaskApiConnectionError: No response from the API
            TaskClientError: Malformed response body
        """
        if isinstance(patch, dict):
            patch = TaskUpdate.model_validate(patch)
        response = self._request(
            "update", "PUT", f"/tasks/{task_id}", UPDATE_ERROR, json=patch.to_payload()
        )
        return self._parse_task(response, "update", UPDATE_ERROR)

    def delete_task(self, task_id: TaskId) -> None:
        """Delete a task.

        Raises:
            TaskApiStatusError: Non-success HTTP status
            TaskApiConnectionError: No response from the API
        """
        self._request("delete", "DELETE", f"/tasks/{task_id}", DELETE_ERROR)

    def _request(
        self,
        operation: str,
        method: str,
        path: str,
        error_message: str,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send one request and map failures to client errors."""
        logger.debug("%s %s: body=%s", method, path, json)

        start_time = time.monotonic()
        try:
            response = self._client.request(method, path, json=json)
        except httpx.RequestError as e:
            elapsed_ms = (time.monotonic() - start_time) * 1000
            logger.error("%s %s failed after %.0fms: %s", method, path, elapsed_ms, e)
            raise TaskApiConnectionError(error_message) from e

        elapsed_ms = (time.monotonic() - start_time) * 1000

        if not response.is_success:
            logger.error(
                "%s %s: HTTP %d (%.0fms)", method, path, response.status_code, elapsed_ms
            )
            raise TaskApiStatusError(error_message, operation, response.status_code)

        logger.info("%s %s: %d (%.0fms)", method, path, response.status_code, elapsed_ms)
        return response

    def _parse_json(self, response: httpx.Response, operation: str, error_message: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error("%s: invalid JSON response: %s", operation, e)
            raise TaskClientError(error_message) from e

    def _parse_task(self, response: httpx.Response, operation: str, error_message: str) -> Task:
        data = self._parse_json(response, operation, error_message)
        try:
            return Task.model_validate(data)
        except ValidationError as e:
            logger.error("%s: malformed task in response: %s", operation, e)
            raise TaskClientError(error_message) from e

"""Task domain model."""

from pydantic import BaseModel, ConfigDict, field_validator

from .status import TaskStatus

TaskId = int | str


class Task(BaseModel):
    """A task card as returned by the task API."""

    model_config = ConfigDict(extra="ignore")

    id: TaskId  # assigned by the backend, never changed by the client
    title: str
    description: str = ""
    status: TaskStatus

    @field_validator("description", mode="before")
    @classmethod
    def _null_description(cls, value: object) -> object:
        """The backend may send null for an empty description."""
        return "" if value is None else value

    @property
    def display_title(self) -> str:
        """Title for display - falls back to the ID when blank."""
        return self.title.strip() or f"#{self.id}"


class TaskCreate(BaseModel):
    """Fields sent when creating a task."""

    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO

    def to_payload(self) -> dict:
        """Convert to a JSON-ready request body."""
        return self.model_dump(mode="json")


class TaskUpdate(BaseModel):
    """Fields sent when updating a task.

    Only the fields that were set travel in the request body; callers that
    want a field preserved must include it.
    """

    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None

    def to_payload(self) -> dict:
        """Convert to a JSON-ready request body with only the set fields."""
        return self.model_dump(mode="json", exclude_unset=True)

"""Task API access."""

from .client import (
    CREATE_ERROR,
    DELETE_ERROR,
    LIST_ERROR,
    UPDATE_ERROR,
    TaskApiClient,
    TaskApiConnectionError,
    TaskApiStatusError,
    TaskClientError,
)

__all__ = [
    "CREATE_ERROR",
    "DELETE_ERROR",
    "LIST_ERROR",
    "UPDATE_ERROR",
    "TaskApiClient",
    "TaskApiConnectionError",
    "TaskApiStatusError",
    "TaskClientError",
]

"""minikanban - terminal Kanban client for a remote task API."""

__version__ = "0.1.0"

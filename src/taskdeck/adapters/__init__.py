"""Adapters - I/O implementations of ports."""

from .todo_api import TodoApiAdapter, ApiError, AuthenticationError
from .json_file import JsonFileTaskRepository

__all__ = [
    "TodoApiAdapter",
    "ApiError",
    "AuthenticationError",
    "JsonFileTaskRepository",
]

"""Route modules for the public API."""

from . import assets, tasks, users

__all__ = [
    "assets",
    "tasks",
    "users",
]

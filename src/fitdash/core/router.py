"""Active view selection."""

from enum import Enum
from typing import Any, Callable, Mapping


class View(Enum):
    HOME = "home"
    CALENDAR = "calendar"
    NOTES = "notes"
    TASKS = "tasks"
    CHAT = "chat"


class ViewRouter:
    """
    Holds the single active view.

    Switching views only replaces the identifier. Every other state slice
    keeps its contents across navigation.
    """

    def __init__(self, active: View = View.HOME):
        self._active = active

    @property
    def active(self) -> View:
        return self._active

    def set_active(self, view: View | str) -> View:
        """Make a view active. Strings must be one of the View values."""
        self._active = View(view)
        return self._active

    def dispatch(self, handlers: Mapping[View, Callable[[], Any]]) -> Any:
        """Call the handler registered for the active view."""
        return handlers[self._active]()

"""Functional core - dashboard state with no I/O."""

from .metrics import MetricField, Metrics, filter_numeric
from .notes import NotesBuffer
from .tasks import Task, TaskStore
from .calendar import (
    CalendarCursor,
    CalendarState,
    build_grid,
    days_in_month,
    first_weekday_of_month,
    shift_month,
)
from .chat import (
    FALLBACK_REPLY,
    ChatExchange,
    ChatMessage,
    ChatServiceError,
    ChatSession,
    ExchangeStatus,
    Sender,
)
from .router import View, ViewRouter
from .dashboard import Dashboard

__all__ = [
    # Metrics
    "MetricField",
    "Metrics",
    "filter_numeric",
    # Notes
    "NotesBuffer",
    # Tasks
    "Task",
    "TaskStore",
    # Calendar
    "CalendarCursor",
    "CalendarState",
    "build_grid",
    "days_in_month",
    "first_weekday_of_month",
    "shift_month",
    # Chat
    "FALLBACK_REPLY",
    "ChatExchange",
    "ChatMessage",
    "ChatServiceError",
    "ChatSession",
    "ExchangeStatus",
    "Sender",
    # Routing
    "View",
    "ViewRouter",
    "Dashboard",
]

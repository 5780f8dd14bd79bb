"""The top-level context object that composes every state slice."""

from dataclasses import dataclass, field

from .calendar import CalendarState
from .chat import ChatSession
from .metrics import Metrics
from .notes import NotesBuffer
from .router import ViewRouter
from .tasks import TaskStore


@dataclass
class Dashboard:
    """One owner per slice. Slices only meet here."""

    chat: ChatSession
    router: ViewRouter = field(default_factory=ViewRouter)
    metrics: Metrics = field(default_factory=Metrics)
    notes: NotesBuffer = field(default_factory=NotesBuffer)
    tasks: TaskStore = field(default_factory=TaskStore)
    calendar: CalendarState = field(default_factory=CalendarState)

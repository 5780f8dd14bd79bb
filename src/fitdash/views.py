"""Plain-text rendering for each dashboard view."""

from .core.calendar import WEEKDAY_NAMES, CalendarCursor, weeks
from .core.chat import ChatSession, Sender
from .core.dashboard import Dashboard
from .core.metrics import MetricField, Metrics
from .core.notes import NotesBuffer
from .core.router import View
from .core.tasks import TaskStore

NOTES_PLACEHOLDER = "Write your fitness notes here..."


def render_nav(active: View) -> str:
    """Navigation bar with the active view bracketed."""
    return "  ".join(f"[{v.value}]" if v is active else v.value for v in View)


def _metric_line(metric: MetricField) -> str:
    return f"  {metric.label:16} {metric.value or '0'}"


def render_home(metrics: Metrics) -> str:
    return "\n".join(
        [
            "Fitness Dashboard",
            "",
            _metric_line(metrics.steps),
            _metric_line(metrics.heart_rate),
        ]
    )


def render_month(cursor: CalendarCursor) -> str:
    """Month grid with a Sun..Sat header."""
    lines = [cursor.label(), " ".join(f"{d:>3}" for d in WEEKDAY_NAMES)]
    for week in weeks(cursor.year, cursor.month):
        lines.append(" ".join(f"{day:>3}" if day else "   " for day in week))
    return "\n".join(lines)


def render_calendar(cursor: CalendarCursor) -> str:
    return f"Fitness Calendar\n\n{render_month(cursor)}"


def render_notes(notes: NotesBuffer) -> str:
    body = NOTES_PLACEHOLDER if notes.is_empty else notes.text
    return f"Fitness Notes\n\n{body}"


def render_tasks(tasks: TaskStore) -> str:
    lines = ["Fitness Tasks", ""]
    items = tasks.list()
    if not items:
        lines.append("  No tasks yet. Add one with: add <text>")
    for position, task in enumerate(items, start=1):
        mark = "x" if task.completed else " "
        lines.append(f"  {position:>2}. [{mark}] {task.text}")
    if items:
        lines.append("")
        lines.append(f"  {len(tasks.completed())}/{len(tasks)} done")
    return "\n".join(lines)


def render_chat(chat: ChatSession) -> str:
    lines = ["Fitness AI Chat", ""]
    for msg in chat.messages:
        who = "you" if msg.sender is Sender.USER else "bot"
        lines.append(f"  {who}> {msg.text}")
    if chat.pending:
        lines.append(f"  ... waiting for {chat.pending} repl{'y' if chat.pending == 1 else 'ies'}")
    if len(lines) == 2:
        lines.append("  Ask your fitness AI with: say <text>")
    return "\n".join(lines)


def render(dashboard: Dashboard) -> str:
    """Render the navigation bar and whichever view is active."""
    body = dashboard.router.dispatch(
        {
            View.HOME: lambda: render_home(dashboard.metrics),
            View.CALENDAR: lambda: render_calendar(dashboard.calendar.cursor),
            View.NOTES: lambda: render_notes(dashboard.notes),
            View.TASKS: lambda: render_tasks(dashboard.tasks),
            View.CHAT: lambda: render_chat(dashboard.chat),
        }
    )
    return f"{render_nav(dashboard.router.active)}\n\n{body}"

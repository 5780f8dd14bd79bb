"""Interactive terminal shell for the dashboard."""

import asyncio
import logging
import threading
from dataclasses import dataclass
from typing import Callable

import click

from .core.chat import ChatMessage
from .core.dashboard import Dashboard
from .core.router import View
from .views import render

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  home | calendar | notes | tasks | chat   switch view
  steps N / hr N                           set daily steps / avg heart rate
  note TEXT                                replace notes (no text clears them)
  add TEXT / done N / rm N                 add, toggle, remove task N
  prev / next                              previous / next month
  go VIEW                                  switch to a view by name
  say TEXT                                 ask the fitness AI
  help                                     show this help
  quit                                     leave"""


@dataclass
class Command:
    verb: str
    arg: str = ""


def parse_command(line: str) -> Command:
    """Split an input line into a lowercase verb and the rest of the line."""
    verb, _, arg = line.strip().partition(" ")
    return Command(verb.lower(), arg.strip())


class Shell:
    """
    Read commands, mutate the dashboard, print the active view.

    Chat messages are sent as background tasks so the loop keeps accepting
    commands while replies are in flight.
    """

    def __init__(
        self,
        dashboard: Dashboard,
        write: Callable[[str], None] = click.echo,
        read: Callable[[str], str] = input,
    ):
        self.dashboard = dashboard
        self.write = write
        self.read = read
        self.running = True
        self._inflight: set[asyncio.Task] = set()

    def _task_id(self, arg: str) -> int | None:
        """Map a 1-based list position to a task id."""
        if not arg.isdigit():
            return None
        items = self.dashboard.tasks.list()
        position = int(arg)
        if not 1 <= position <= len(items):
            return None
        return items[position - 1].id

    def _send_chat(self, text: str) -> str:
        if not text.strip():
            return "Nothing to send."
        task = asyncio.get_running_loop().create_task(self.dashboard.chat.send(text))
        self._inflight.add(task)
        task.add_done_callback(self._on_reply)
        return ""

    def _on_reply(self, task: asyncio.Task) -> None:
        self._inflight.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(f"Chat task crashed: {exc!r}")
            return
        reply: ChatMessage | None = task.result()
        if reply is not None and self.dashboard.router.active is not View.CHAT:
            self.write("\n(new chat reply - type 'chat' to read it)")

    def execute(self, line: str) -> str:
        """Run one command line. Returns feedback text ('' when there is none)."""
        cmd = parse_command(line)
        d = self.dashboard

        if not cmd.verb:
            return ""

        match cmd.verb:
            case "home" | "calendar" | "notes" | "tasks" | "chat":
                d.router.set_active(cmd.verb)
            case "go":
                try:
                    d.router.set_active(cmd.arg.lower())
                except ValueError:
                    return f"Unknown view: {cmd.arg!r}"
            case "steps":
                if not d.metrics.set_steps(cmd.arg):
                    return "Steps must be a whole number."
                d.router.set_active(View.HOME)
            case "hr":
                if not d.metrics.set_heart_rate(cmd.arg):
                    return "Heart rate must be a whole number."
                d.router.set_active(View.HOME)
            case "note":
                d.notes.replace(cmd.arg)
                d.router.set_active(View.NOTES)
            case "add":
                if d.tasks.add(cmd.arg) is None:
                    return "Task text can't be empty."
                d.router.set_active(View.TASKS)
            case "done" | "rm":
                task_id = self._task_id(cmd.arg)
                if task_id is None:
                    return f"No task #{cmd.arg}."
                if cmd.verb == "done":
                    d.tasks.toggle(task_id)
                else:
                    d.tasks.remove(task_id)
                d.router.set_active(View.TASKS)
            case "prev" | "next":
                d.calendar.shift(-1 if cmd.verb == "prev" else 1)
                d.router.set_active(View.CALENDAR)
            case "say":
                d.router.set_active(View.CHAT)
                return self._send_chat(cmd.arg)
            case "help" | "?":
                return HELP_TEXT
            case "quit" | "exit":
                self.running = False
            case _:
                return f"Unknown command: {cmd.verb!r}. Type 'help' for commands."
        return ""

    def _read_line(self, prompt: str) -> asyncio.Future:
        """
        Read one line on a daemon thread.

        A thread stuck in input() must not keep the process alive after
        Ctrl-C, so this does not go through the loop's default executor.
        """
        loop = asyncio.get_running_loop()
        future = loop.create_future()

        def _deliver(line: str | None, error: Exception | None) -> None:
            if future.done():
                return
            if error is not None:
                future.set_exception(error)
            else:
                future.set_result(line)

        def _worker() -> None:
            line, error = None, None
            try:
                line = self.read(prompt)
            except Exception as e:
                error = e
            try:
                loop.call_soon_threadsafe(_deliver, line, error)
            except RuntimeError:
                logger.debug("Event loop closed before input arrived")

        threading.Thread(target=_worker, name="fitdash-input", daemon=True).start()
        return future

    async def run(self, prompt: str = "fitdash> ") -> None:
        """Interactive loop. Input is read off the event loop thread."""
        self.write(render(self.dashboard))
        while self.running:
            try:
                line = await self._read_line(prompt)
            except EOFError:
                break
            feedback = self.execute(line)
            if feedback:
                self.write(feedback)
            if self.running:
                self.write(render(self.dashboard))

        pending = list(self._inflight)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

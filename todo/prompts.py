"""Interactive collaborators for the command line.

Commands never talk to the terminal directly. They hand a list of
TaskOption objects to a SelectionProvider and get back the chosen subset,
or ask a TextProvider for free text. The rich-based implementations below
are used by the CLI; tests plug in scripted ones.
"""

from typing import IO, List, Optional, Protocol, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from .errors import InputCancelled, InputError
from .schema import TaskOption


class SelectionProvider(Protocol):
    """Turns a list of options into the user's chosen subset."""

    def offer(self, message: str, options: Sequence[TaskOption]) -> List[TaskOption]:
        ...


class TextProvider(Protocol):
    """Asks the user for a line of free text."""

    def prompt(self, label: str) -> str:
        ...


class RichSelectionProvider:
    """Multi-select by typing task ids at a rich prompt."""

    def __init__(self, console: Optional[Console] = None, stream: Optional[IO[str]] = None):
        self.console = console or Console()
        self.stream = stream

    def offer(self, message: str, options: Sequence[TaskOption]) -> List[TaskOption]:
        if not options:
            return []

        self.console.print(f"[bold]{escape(message)}[/bold]")
        for option in options:
            self.console.print(f"  {escape(option.label)}")

        try:
            answer = Prompt.ask(
                "Task ids (comma or space separated, blank for none)",
                console=self.console,
                default="",
                show_default=False,
                stream=self.stream,
            )
        except (KeyboardInterrupt, EOFError) as e:
            raise InputCancelled("Selection cancelled") from e

        offered = {option.task_id for option in options}
        chosen = set()
        for token in answer.replace(",", " ").split():
            try:
                task_id = int(token)
            except ValueError:
                raise InputError(f"Not a task id: {token!r}") from None
            if task_id not in offered:
                raise InputError(f"Task {task_id} is not one of the listed tasks")
            chosen.add(task_id)

        return [option for option in options if option.task_id in chosen]


class RichTextProvider:
    """Free-text prompt backed by rich."""

    def __init__(self, console: Optional[Console] = None, stream: Optional[IO[str]] = None):
        self.console = console or Console()
        self.stream = stream

    def prompt(self, label: str) -> str:
        try:
            return Prompt.ask(escape(label), console=self.console, stream=self.stream)
        except (KeyboardInterrupt, EOFError) as e:
            raise InputCancelled("Input cancelled") from e

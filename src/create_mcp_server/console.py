"""Interactive input and user facing output."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from rich.console import Console
from rich.markup import escape

__all__ = ["ConsolePrompt", "ConsoleReporter", "Prompt", "Reporter"]


class Prompt(ABC):
    """Source of answers to interactive questions."""

    @abstractmethod
    def ask(self, question: str) -> str:
        """Show ``question`` and return the line typed by the user."""


class Reporter(ABC):
    """Sink for progress and status messages."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Report progress."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Report a completed step."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Report a problem that does not stop the run."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Report a problem that stops the run."""

    @abstractmethod
    def line(self, message: str = "") -> None:
        """Print ``message`` without decoration."""

    def file_created(self, path: Path) -> None:
        self.line(f"📄 Created {path}")


class ConsolePrompt(Prompt):
    """Read answers from the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def ask(self, question: str) -> str:
        return self._console.input(escape(question))


class ConsoleReporter(Reporter):
    """Print coloured status messages with :mod:`rich`."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False)

    def _styled(self, message: str, style: str) -> None:
        self._console.print(escape(message), style=style)

    def info(self, message: str) -> None:
        self._styled(message, "cyan")

    def success(self, message: str) -> None:
        self._styled(message, "green")

    def warning(self, message: str) -> None:
        self._styled(message, "yellow")

    def error(self, message: str) -> None:
        self._styled(message, "red")

    def line(self, message: str = "") -> None:
        self._console.print(escape(message))

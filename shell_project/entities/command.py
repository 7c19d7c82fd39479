"""
Command entities shared by the dispatcher and the interactive loop.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from shell_project.entities.outcome import ErrorKind


class ShellState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class ParsedCommand:
    """Keyword and raw argument text of a command line."""

    keyword: str
    raw_args: Optional[str] = None

    @classmethod
    def parse(cls, line: str) -> "ParsedCommand":
        """
        Split a command line into its keyword and the remaining text.

        Surrounding whitespace is ignored and the remainder keeps its internal
        spacing. ``raw_args`` is None when the keyword stands alone.

        Args:
            line: Raw text typed by the user

        Returns:
            The parsed command (with an empty keyword for a blank line)
        """
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return cls(keyword="")
        if len(parts) == 1:
            return cls(keyword=parts[0])
        return cls(keyword=parts[0], raw_args=parts[1].strip())

    @property
    def has_args(self) -> bool:
        return self.raw_args is not None


@dataclass(frozen=True)
class CommandResult:
    """Rendered outcome of a dispatched command."""

    output: str = ""
    error: Optional[ErrorKind] = None
    terminate: bool = False
    clear_screen: bool = False

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def render(self) -> str:
        if self.is_error:
            return f"ERROR: {self.output}"
        return self.output

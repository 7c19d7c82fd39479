"""
Use case interpreting a command line and running it against the file system.
"""

import logging
import stat
import time
from typing import Callable, Iterable, Optional

from shell_project.config.help_text import (
    COMMAND_HELP,
    render_command_table,
    render_command_usage,
)
from shell_project.entities.command import CommandResult, ParsedCommand, ShellState
from shell_project.entities.directory_entry import DirectoryEntry
from shell_project.entities.outcome import ErrorKind, OperationOutcome
from shell_project.exceptions import ArgumentError, ShellError
from shell_project.ports.files.file_system_port import FileSystemPort
from shell_project.utils.argument_splitter import split_two
from shell_project.utils.path_resolver import PathResolver

Handler = Callable[[Optional[str]], CommandResult]

ERROR_LABELS: dict[ErrorKind, str] = {
    ErrorKind.MISSING: "Missing argument",
    ErrorKind.UNQUOTED_WHITESPACE: "Invalid argument",
    ErrorKind.INVALID_ARGUMENTS: "Invalid arguments",
    ErrorKind.NOT_FOUND: "Not found",
    ErrorKind.PERMISSION_DENIED: "Permission denied",
    ErrorKind.ALLOCATION_FAILURE: "Allocation failure",
    ErrorKind.READ_FAILURE: "Read failure",
    ErrorKind.WRITE_FAILURE: "Write failure",
    ErrorKind.OPEN_FAILURE: "Open failure",
    ErrorKind.SAME_FILE: "Same file",
    ErrorKind.FILE_FAILURE: "File failure",
    ErrorKind.INVALID_COMMAND: "Command not found",
    ErrorKind.OPERATION_FAILED: "Operation failed",
}

# ls flag -> (include hidden, long format)
LS_FLAGS: dict[str, tuple[bool, bool]] = {
    "-a": (True, False),
    "-l": (False, True),
    "-la": (True, True),
}


def _error(kind: ErrorKind, message: str) -> CommandResult:
    return CommandResult(output=message, error=kind)


def _from_outcome(outcome: OperationOutcome, output: str = "") -> CommandResult:
    if outcome.ok:
        return CommandResult(output=output)
    kind = outcome.error or ErrorKind.OPERATION_FAILED
    label = ERROR_LABELS[kind]
    return _error(kind, f"{label}: {outcome.detail}" if outcome.detail else label)


def _format_long(entry: DirectoryEntry) -> str:
    if entry.mode is None:
        return f"{'?' * 10} {'?':>8} {'?':<16} {entry.name}"
    modified = time.strftime("%Y-%m-%d %H:%M", time.localtime(entry.modified or 0))
    return f"{stat.filemode(entry.mode)} {entry.size:>8} {modified} {entry.name}"


class CommandDispatcher:
    """Route command lines to their handlers and render the results."""

    def __init__(
        self,
        file_system: FileSystemPort,
        resolver: Optional[PathResolver] = None,
        ask: Optional[Callable[[str], str]] = None,
        affirmative: Iterable[str] = ("y", "yes"),
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            file_system: Port performing the file operations
            resolver: Path resolver for path arguments
            ask: Reads the user's reply to a confirmation prompt. Without it,
                destructive confirmations are declined.
            affirmative: Replies accepted as "yes" (compared exactly)
            logger: Logger instance to use for logging
        """
        self._fs = file_system
        self._resolver = resolver or PathResolver()
        self._ask = ask
        self._affirmative = frozenset(affirmative)
        self._logger = logger or logging.getLogger(__name__)
        self.state = ShellState.RUNNING
        self._handlers: dict[str, Handler] = {
            "exit": self._exit,
            "quit": self._exit,
            "help": self._help,
            "echo": self._echo,
            "clear": self._clear,
            "cd": self._cd,
            "pwd": self._pwd,
            "ls": self._ls,
            "cat": self._cat,
            "touch": self._touch,
            "cp": self._cp,
            "mkdir": self._mkdir,
            "rmdir": self._rmdir,
            "rmfile": self._rmfile,
            "mv": self._mv,
        }

    @property
    def is_running(self) -> bool:
        return self.state is ShellState.RUNNING

    @property
    def keywords(self) -> list[str]:
        return sorted(self._handlers)

    def dispatch(self, line: str) -> CommandResult:
        """
        Run one command line.

        Failures never escape: they are rendered as error results.

        Args:
            line: Raw text typed by the user

        Returns:
            The rendered CommandResult
        """
        command = ParsedCommand.parse(line)
        if not command.keyword:
            return CommandResult()

        handler = self._handlers.get(command.keyword)
        if handler is None:
            return _error(ErrorKind.INVALID_COMMAND, f"Command not found: {line.strip()}")

        self._logger.debug(f"Dispatching {command.keyword!r} with args {command.raw_args!r}")
        try:
            return handler(command.raw_args)
        except ShellError as e:
            self._logger.debug(f"{command.keyword}: {e.message}")
            return _error(e.kind, e.message)
        except Exception as e:
            self._logger.exception(f"Unexpected error running {command.keyword!r}")
            return _error(ErrorKind.OPERATION_FAILED, f"Operation failed: {e}")

    # ------------------------- argument helpers -------------------------
    def _no_args(self, keyword: str, raw_args: Optional[str]) -> None:
        if raw_args:
            raise ArgumentError(
                ErrorKind.INVALID_ARGUMENTS, f"{keyword} takes no arguments"
            )

    def _one_path(self, raw_args: Optional[str]) -> str:
        return self._resolver.resolve(raw_args or "")

    def _two_paths(self, raw_args: Optional[str]) -> tuple[str, str]:
        first, second = split_two(raw_args or "")
        return self._resolver.resolve(first), self._resolver.resolve(second)

    def _confirm(self, prompt: str) -> bool:
        if self._ask is None:
            return False
        reply = self._ask(prompt)
        return (reply or "").strip() in self._affirmative

    # ----------------------------- handlers -----------------------------
    def _exit(self, raw_args: Optional[str]) -> CommandResult:
        self._no_args("exit", raw_args)
        self.state = ShellState.TERMINATED
        return CommandResult(terminate=True)

    def _help(self, raw_args: Optional[str]) -> CommandResult:
        if raw_args is None or raw_args == "":
            return CommandResult(output=render_command_table())
        if len(raw_args.split()) > 1:
            raise ArgumentError(
                ErrorKind.INVALID_ARGUMENTS, "help takes at most one command name"
            )
        if raw_args not in COMMAND_HELP:
            return _error(ErrorKind.NOT_FOUND, f"No help found for: {raw_args}")
        return CommandResult(output=render_command_usage(raw_args))

    def _echo(self, raw_args: Optional[str]) -> CommandResult:
        return CommandResult(output=raw_args or "")

    def _clear(self, raw_args: Optional[str]) -> CommandResult:
        self._no_args("clear", raw_args)
        return CommandResult(clear_screen=True)

    def _cd(self, raw_args: Optional[str]) -> CommandResult:
        path = self._one_path(raw_args)
        return _from_outcome(self._fs.change_directory(path))

    def _pwd(self, raw_args: Optional[str]) -> CommandResult:
        self._no_args("pwd", raw_args)
        outcome = self._fs.current_directory()
        return _from_outcome(outcome, outcome.value or "")

    def _ls(self, raw_args: Optional[str]) -> CommandResult:
        if raw_args is None or raw_args == "":
            include_hidden, long_format = False, False
        elif raw_args in LS_FLAGS:
            include_hidden, long_format = LS_FLAGS[raw_args]
        else:
            raise ArgumentError(
                ErrorKind.INVALID_ARGUMENTS, f"Unsupported ls option: {raw_args}"
            )

        outcome = self._fs.list_dir(
            ".", include_hidden=include_hidden, details=long_format
        )
        if not outcome.ok:
            return _from_outcome(outcome)
        entries = outcome.value or []
        if long_format:
            return CommandResult(output="\n".join(_format_long(e) for e in entries))
        return CommandResult(output="  ".join(e.name for e in entries))

    def _cat(self, raw_args: Optional[str]) -> CommandResult:
        outcome = self._fs.read_all(self._one_path(raw_args))
        content = (outcome.value or b"").decode("utf-8", errors="replace")
        return _from_outcome(outcome, content)

    def _touch(self, raw_args: Optional[str]) -> CommandResult:
        return _from_outcome(self._fs.create_empty(self._one_path(raw_args)))

    def _cp(self, raw_args: Optional[str]) -> CommandResult:
        source, target = self._two_paths(raw_args)
        return _from_outcome(self._fs.copy(source, target))

    def _mkdir(self, raw_args: Optional[str]) -> CommandResult:
        return _from_outcome(self._fs.create_directory_tree(self._one_path(raw_args)))

    def _rmdir(self, raw_args: Optional[str]) -> CommandResult:
        path = self._one_path(raw_args)
        if self._fs.is_symlink(path):
            # Refused before listing so the link target is never inspected
            return _from_outcome(self._fs.remove_directory_recursive(path))
        listing = self._fs.list_dir(path, include_hidden=True)
        if not listing.ok:
            return _from_outcome(listing)

        children = [e for e in listing.value or [] if e.name not in (".", "..")]
        if children:
            prompt = f"{path} is not empty. Remove it and everything inside? [y/N] "
            if not self._confirm(prompt):
                self._logger.info(f"Removal of {path} cancelled by the user")
                return CommandResult(output=f"Cancelled: {path} was not removed")
        return _from_outcome(self._fs.remove_directory_recursive(path))

    def _rmfile(self, raw_args: Optional[str]) -> CommandResult:
        return _from_outcome(self._fs.remove_file(self._one_path(raw_args)))

    def _mv(self, raw_args: Optional[str]) -> CommandResult:
        source, target = self._two_paths(raw_args)
        return _from_outcome(self._fs.move(source, target))

from __future__ import annotations

import argparse
import getpass
import logging
import os
import socket
import sys
from typing import Callable, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from shell_project.container import DependencyContainer, container as default_container
from shell_project.entities.command import CommandResult
from shell_project.ports.files.file_system_port import FileSystemPort

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _current_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "user"


def _prompt(fs: FileSystemPort, user: str, host: str) -> Text:
    cwd = fs.current_directory()
    return Text.assemble(
        (f"{user}@{host} ", "cyan"),
        (f"{cwd.value if cwd.ok else '?'}  ", "green"),
        ("$ ", "white"),
    )


def _render(console: Console, result: CommandResult) -> None:
    if result.clear_screen:
        console.clear()
    elif result.is_error:
        console.print(Text(result.render(), style="red"))
    elif result.output:
        console.print(Text(result.output))


def interactive_main(
    argv: Optional[list[str]] = None,
    console: Optional[Console] = None,
    input_func: Callable[[], str] = input,
    container: Optional[DependencyContainer] = None,
) -> int:
    parser = argparse.ArgumentParser(
        prog="shell-project",
        description="Interactive shell for navigating and editing the local filesystem.",
    )
    parser.add_argument(
        "--cwd",
        default=None,
        help="Start in this directory (default: current)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level (default: SHELL_LOG_LEVEL or WARNING)",
    )
    args = parser.parse_args(argv)

    container = container or default_container
    settings = container.get_settings()

    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    if args.cwd:
        try:
            os.chdir(args.cwd)
        except OSError as e:
            print(f"Failed to chdir to {args.cwd}: {e}", file=sys.stderr)

    console = console or Console(
        highlight=False, no_color=args.no_color or not settings.color
    )

    def _ask(prompt: str) -> str:
        console.print(Text(prompt, style="yellow"), end="")
        try:
            return input_func()
        except (EOFError, KeyboardInterrupt):
            console.print()
            return ""

    fs = container.get_file_system()
    dispatcher = container.get_dispatcher(ask=_ask)
    user, host = _current_user(), socket.gethostname()

    console.print(
        Panel(
            'Welcome to Shell Project!\nType "exit" or "quit" to leave.',
            title="Shell Project",
            border_style="cyan",
            box=box.ROUNDED,
        )
    )

    while dispatcher.is_running:
        console.print(_prompt(fs, user, host), end="")
        try:
            line = input_func()
        except EOFError:
            console.print()
            break
        except KeyboardInterrupt:
            console.print()
            continue

        try:
            _render(console, dispatcher.dispatch(line))
        except KeyboardInterrupt:
            console.print()
            console.print(Text("Cancelled.", style="yellow"))

    return 0


def main(argv: Optional[list[str]] = None) -> int:  # pragma: no cover
    return interactive_main(argv)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

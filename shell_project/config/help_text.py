"""
Static help text for the shell commands.

Built once at import time and exposed read-only.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class CommandHelp:
    name: str
    synopsis: str
    summary: str
    details: str


_COMMANDS = (
    CommandHelp(
        "cat",
        "cat <file>",
        "Show the content of a file",
        "Prints the whole content of <file>. A final line break is not shown.",
    ),
    CommandHelp(
        "cd",
        "cd <directory>",
        "Change the current directory",
        "Enters <directory>. A leading ~ stands for the home directory.",
    ),
    CommandHelp(
        "clear",
        "clear",
        "Clear the screen",
        "Clears the terminal screen.",
    ),
    CommandHelp(
        "cp",
        "cp <source> <target>",
        "Copy a file",
        "Copies the bytes of <source> into <target>, creating or replacing it.\n"
        'Wrap paths containing spaces in double quotes: cp "a b.txt" c.txt',
    ),
    CommandHelp(
        "echo",
        "echo <text>",
        "Print a text",
        "Prints <text> as typed, without the surrounding spaces.",
    ),
    CommandHelp(
        "exit",
        "exit",
        "Leave the shell",
        "Ends the session. Same as quit.",
    ),
    CommandHelp(
        "help",
        "help [command]",
        "Show help",
        "Without argument lists every command; with a command name shows its usage.",
    ),
    CommandHelp(
        "ls",
        "ls [-a | -l | -la]",
        "List the current directory",
        "Lists the entries of the current directory sorted by name.\n"
        "  -a   include hidden entries (names starting with '.')\n"
        "  -l   long format: mode, size, modification time and name\n"
        "  -la  long format including hidden entries",
    ),
    CommandHelp(
        "mkdir",
        "mkdir <directory>",
        "Create a directory",
        "Creates <directory> and any missing parent directories.",
    ),
    CommandHelp(
        "mv",
        "mv <source> <target>",
        "Move or rename",
        "Renames <source> to <target>. When <target> is an existing directory\n"
        "<source> is moved inside it; an existing file <target> is replaced.",
    ),
    CommandHelp(
        "pwd",
        "pwd",
        "Print the current directory",
        "Prints the absolute path of the current directory.",
    ),
    CommandHelp(
        "quit",
        "quit",
        "Leave the shell",
        "Ends the session. Same as exit.",
    ),
    CommandHelp(
        "rmdir",
        "rmdir <directory>",
        "Remove a directory",
        "Removes <directory> with everything it contains. Asks for confirmation\n"
        "when the directory is not empty.",
    ),
    CommandHelp(
        "rmfile",
        "rmfile <file>",
        "Remove a file",
        "Deletes <file>. Directories are refused, use rmdir.",
    ),
    CommandHelp(
        "touch",
        "touch <file>",
        "Create an empty file",
        "Creates <file> if it does not exist; an existing file is left as is.",
    ),
)

COMMAND_HELP: Mapping[str, CommandHelp] = MappingProxyType(
    {c.name: c for c in _COMMANDS}
)


def render_command_table() -> str:
    width = max(len(c.synopsis) for c in _COMMANDS)
    lines = ["Commands:"]
    for c in _COMMANDS:
        lines.append(f"  {c.synopsis:<{width}}  {c.summary}")
    return "\n".join(lines)


def render_command_usage(name: str) -> str:
    c = COMMAND_HELP[name]
    return f"Usage: {c.synopsis}\n\n{c.details}"

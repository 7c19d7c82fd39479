from __future__ import annotations

from typing import Callable, Optional

from shell_project.entities.outcome import ErrorKind
from shell_project.exceptions import PathError

"""Path argument normalization.

Rules applied to a single token:
- a token wrapped in double quotes is taken verbatim, whitespace included;
- an unquoted token must not contain whitespace;
- paths are made explicitly relative ("./") unless absolute;
- a leading "~" (seen as "./~" after prefixing) expands to the home directory.
"""

HOME_MARKER = "./~"


def _default_home() -> str:
    from shell_project.config.settings import settings

    return settings.home_directory()


def is_quoted(token: str) -> bool:
    return len(token) >= 2 and token[0] == '"' and token[-1] == '"'


class PathResolver:
    """Turn raw argument tokens into resolved paths."""

    def __init__(self, home_provider: Optional[Callable[[], str]] = None) -> None:
        self._home_provider = home_provider or _default_home

    def resolve(self, token: str) -> str:
        """
        Resolve a raw token into a path.

        No existence check is done here.

        Raises:
            PathError: MISSING for an empty token, UNQUOTED_WHITESPACE for an
                unquoted token containing whitespace
        """
        if not token:
            raise PathError(ErrorKind.MISSING, "Missing path argument")

        if is_quoted(token):
            path = token[1:-1]
            if not path:
                raise PathError(ErrorKind.MISSING, "Missing path argument")
        elif any(ch.isspace() for ch in token):
            raise PathError(
                ErrorKind.UNQUOTED_WHITESPACE,
                f"Path contains whitespace, wrap it in double quotes: {token}",
            )
        else:
            path = token

        if not path.startswith("/") and not path.startswith("./"):
            path = "./" + path

        if HOME_MARKER in path:
            path = path.replace(HOME_MARKER, self._home_provider(), 1)
        return path

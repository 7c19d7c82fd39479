from __future__ import annotations

import re
from typing import Tuple

from shell_project.entities.outcome import ErrorKind
from shell_project.exceptions import ArgumentError

# A token is either a double-quoted segment (any content but quotes) or a bare word
_TOKEN = r'("[^"]*"|[^\s"]\S*)'
_TWO_TOKENS = re.compile(rf"^{_TOKEN}\s+{_TOKEN}$")


def split_two(raw_args: str) -> Tuple[str, str]:
    """Split the arguments of a two-path command into its two tokens.

    Quoted tokens keep their quotes so the path resolver can apply its quoting
    rule to each of them.

    Raises:
        ArgumentError: INVALID_ARGUMENTS unless exactly two tokens are present
    """
    match = _TWO_TOKENS.match((raw_args or "").strip())
    if not match:
        raise ArgumentError(
            ErrorKind.INVALID_ARGUMENTS,
            "Expected exactly two paths (quote paths containing spaces)",
        )
    return match.group(1), match.group(2)

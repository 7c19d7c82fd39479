import logging
import os
from typing import Optional

from typing_extensions import override

from shell_project.ports.files.path_identity_port import PathIdentityPort


class StatPathIdentity(PathIdentityPort):
    """Compare paths by the (device, inode) pair reported by stat."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    @override
    def same_file(self, first: str, second: str) -> bool:
        try:
            a = os.stat(first)
            b = os.stat(second)
        except OSError as e:
            self._logger.debug(f"Cannot stat for identity check: {e}")
            return False
        return (a.st_dev, a.st_ino) == (b.st_dev, b.st_ino)

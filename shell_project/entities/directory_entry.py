"""
Directory entry entity.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DirectoryEntry:
    """
    Entry produced by a directory listing.

    The stat fields are only filled for detailed listings.
    """

    name: str
    mode: Optional[int] = None
    size: Optional[int] = None
    modified: Optional[float] = None

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")

    @property
    def sort_key(self) -> bytes:
        # Byte-value ordering, independent of the locale
        return self.name.encode("utf-8", "surrogateescape")

    def __str__(self) -> str:
        return self.name

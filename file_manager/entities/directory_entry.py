"""
Directory entry domain entity.
"""

import os
import stat
from typing import Any

from file_manager.exceptions import FileRepositoryError

DIRECTORY = "directory"
FILE = "file"

# Listing order: directories first, then files
KIND_ORDER = {DIRECTORY: 0, FILE: 1}


class DirectoryEntry:
    """
    Directory listing entry (file or directory) identified by name and kind.
    """

    def __init__(self, path: str):
        """
        Initialize the DirectoryEntry entity.

        Args:
            path: Path to the entry

        Raises:
            FileRepositoryError: If path is invalid, missing, or neither a
                regular file nor a directory (symlinks included)
        """
        if not path or not isinstance(path, str):
            raise FileRepositoryError("Path must be a non-empty string")

        try:
            # lstat: symlinks are classified as themselves, not their target
            mode = os.lstat(path).st_mode
        except OSError as e:
            raise FileRepositoryError(f"Entry does not exist: {path} ({e.strerror})")

        if stat.S_ISDIR(mode):
            kind = DIRECTORY
        elif stat.S_ISREG(mode):
            kind = FILE
        else:
            raise FileRepositoryError(f"Path is neither a regular file nor a directory: {path}")

        self.path = os.path.abspath(path)
        self.name = os.path.basename(self.path)
        self.kind = kind

    @property
    def is_dir(self) -> bool:
        return self.kind == DIRECTORY

    def sort_key(self) -> tuple[int, str]:
        """Key placing directories before files, then names in ascending order."""
        return KIND_ORDER[self.kind], self.name

    def get_details(self) -> dict[str, Any]:
        """
        Get the entry details as displayed by the listing.

        Returns:
            Dictionary with the entry name and kind
        """
        return {"name": self.name, "type": self.kind}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirectoryEntry):
            return NotImplemented
        return self.path == other.path and self.kind == other.kind

    def __hash__(self) -> int:
        return hash((self.path, self.kind))

    def __str__(self) -> str:
        """String representation of the DirectoryEntry."""
        return f"DirectoryEntry(name='{self.name}', kind='{self.kind}')"

    def __repr__(self) -> str:
        """Detailed string representation of the DirectoryEntry."""
        return f"DirectoryEntry(path='{self.path}')"


def sort_entries(entries: list[DirectoryEntry]) -> list[DirectoryEntry]:
    """Return entries with directories first, each group sorted by name."""
    return sorted(entries, key=lambda e: e.sort_key())

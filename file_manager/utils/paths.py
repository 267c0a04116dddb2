"""Path resolution and validation against the session's current directory.

Validation is a point-in-time check, not a lock: the target can still change
before the operation that follows it runs.
"""

from __future__ import annotations

import os
import stat

from file_manager.exceptions import InvalidInputError


def normalize_path(base: str, path: str) -> str:
    """Join ``path`` onto ``base`` unless absolute; collapse '.' and '..'.

    Symlinks are left unresolved.
    """
    s = os.path.expanduser(str(path or "").strip())
    if not os.path.isabs(s):
        s = os.path.join(base, s)
    return os.path.normpath(os.path.abspath(s))


class PathValidator:
    """Confirms that paths exist and are accessible before an operation runs."""

    def validate(self, base: str, path: str) -> str:
        """Return the normalized absolute path, or raise InvalidInputError."""
        if not str(path or "").strip():
            raise InvalidInputError("Path must be a non-empty string")
        resolved = normalize_path(base, path)
        self._stat(resolved)
        return resolved

    def validate_directory(self, base: str, path: str) -> str:
        """Like validate, and the path must denote a directory."""
        resolved = self.validate(base, path)
        if not stat.S_ISDIR(self._stat(resolved).st_mode):
            raise InvalidInputError(f"Not a directory: '{resolved}'")
        return resolved

    def _stat(self, resolved: str) -> os.stat_result:
        try:
            return os.stat(resolved)
        except OSError as e:
            reason = e.strerror or str(e)
            raise InvalidInputError(f"{reason}: '{resolved}'") from e

"""
Use cases for moving the session's current directory.

Both return the new directory and leave the session untouched.
"""

import logging
import os
from typing import Optional

from file_manager.exceptions import FileRepositoryError


def _ensure_enterable(directory: str) -> None:
    if not os.path.isdir(directory):
        raise FileRepositoryError(f"Not a directory: {directory}")
    if not os.access(directory, os.X_OK):
        raise FileRepositoryError(f"Permission denied: {directory}")


class GoUpUseCase:
    """Use case for moving to the parent directory."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, current_directory: str) -> str:
        """
        Compute the parent of ``current_directory``.

        Returns:
            The parent directory, or ``current_directory`` itself at the
            filesystem root
        """
        parent = os.path.dirname(current_directory)
        if parent == current_directory:
            self._logger.info("Already at filesystem root")
            return current_directory
        _ensure_enterable(parent)
        self._logger.info(f"Moving up to {parent}")
        return parent


class ChangeDirectoryUseCase:
    """Use case for entering a directory."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, directory: str) -> str:
        """
        Check that ``directory`` can be entered.

        Raises:
            FileRepositoryError: If it is not a directory or cannot be entered
        """
        _ensure_enterable(directory)
        self._logger.info(f"Changing directory to {directory}")
        return directory

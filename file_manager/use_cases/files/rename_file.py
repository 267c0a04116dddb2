"""
Use case for renaming a file.
"""

import logging
from typing import Optional

from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class RenameFileUseCase:
    """Use case for renaming a file within the same volume."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, old_path: str, new_path: str) -> None:
        try:
            self._logger.info(f"Renaming {old_path} to {new_path}")
            self._file_repository.rename(old_path, new_path)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error renaming file: {e}")
            raise FileRepositoryError(f"Failed to rename {old_path}: {str(e)}")

"""
Use cases for creating files and directories.
"""

import logging
from typing import Optional

from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class CreateFileUseCase:
    """Use case for creating a new file; never overwrites."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str, content: str = "") -> None:
        """
        Create a file holding exactly ``content``.

        Raises:
            AlreadyExistsError: If the path already exists
            FileRepositoryError: If creation fails
        """
        try:
            self._logger.info(f"Creating file: {path}")
            self._file_repository.create_file(path, content)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error creating file: {e}")
            raise FileRepositoryError(f"Failed to create file {path}: {str(e)}")


class CreateDirectoryUseCase:
    """Use case for creating a new directory; never reuses an existing one."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> None:
        """
        Create a directory, including missing parents.

        Raises:
            AlreadyExistsError: If the path already exists
            FileRepositoryError: If creation fails
        """
        try:
            self._logger.info(f"Creating directory: {path}")
            self._file_repository.create_directory(path)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error creating directory: {e}")
            raise FileRepositoryError(f"Failed to create directory {path}: {str(e)}")

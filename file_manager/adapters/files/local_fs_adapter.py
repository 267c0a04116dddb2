"""
Local file system adapter implementation for file operations.
"""

import logging
import os

from typing_extensions import override

from file_manager.entities.directory_entry import DirectoryEntry, sort_entries
from file_manager.exceptions import AlreadyExistsError, FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


def _describe(error: OSError) -> str:
    return error.strerror or str(error)


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            FileRepositoryError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise FileRepositoryError(f"Directory does not exist: {directory}")

        if not os.path.isdir(directory):
            raise FileRepositoryError(f"Path is not a directory: {directory}")

    def _create_entries(self, entry_paths: list[str]) -> list[DirectoryEntry]:
        """
        Create DirectoryEntry entities from a list of paths.

        Entries that are neither files nor directories are skipped.

        Args:
            entry_paths: List of paths to convert to DirectoryEntry entities

        Returns:
            List of DirectoryEntry entities
        """
        entries: list[DirectoryEntry] = []
        for entry_path in entry_paths:
            try:
                entries.append(DirectoryEntry(entry_path))
            except FileRepositoryError as e:
                # Log the error but continue with other entries
                self._logger.warning(f"Skipping entry {entry_path}: {e}")
                continue

        return entries

    @override
    def list_directory(self, directory: str) -> list[DirectoryEntry]:
        try:
            self._validate_directory(directory)

            entry_paths: list[str] = [
                os.path.join(directory, item) for item in os.listdir(directory)
            ]
            return sort_entries(self._create_entries(entry_paths))

        except FileRepositoryError:
            raise
        except Exception as e:
            raise FileRepositoryError(f"Failed to list directory {directory}: {str(e)}")

    @override
    def create_file(self, path: str, content: str = "") -> None:
        try:
            # 'x' fails atomically if the path exists
            with open(path, "x", encoding="utf-8") as f:
                f.write(content)
        except FileExistsError:
            raise AlreadyExistsError(f"File already exists: {path}")
        except OSError as e:
            raise FileRepositoryError(f"Failed to create file {path}: {_describe(e)}")

    @override
    def create_directory(self, path: str) -> None:
        # Check-then-create: a concurrent creator can still win the race,
        # in which case makedirs reports it below.
        if os.path.lexists(path):
            raise AlreadyExistsError(f"Directory already exists: {path}")
        try:
            os.makedirs(path)
        except FileExistsError:
            raise AlreadyExistsError(f"Directory already exists: {path}")
        except OSError as e:
            raise FileRepositoryError(f"Failed to create directory {path}: {_describe(e)}")

    @override
    def rename(self, old_path: str, new_path: str) -> None:
        try:
            os.replace(old_path, new_path)
        except OSError as e:
            raise FileRepositoryError(
                f"Failed to rename {old_path} to {new_path}: {_describe(e)}"
            )

    @override
    def delete_file(self, path: str) -> None:
        if os.path.isdir(path) and not os.path.islink(path):
            raise FileRepositoryError(f"Is a directory: {path}")
        try:
            os.unlink(path)
        except OSError as e:
            raise FileRepositoryError(f"Failed to delete {path}: {_describe(e)}")

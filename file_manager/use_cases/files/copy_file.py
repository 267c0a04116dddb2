"""
Use cases for copying and moving a file into another directory.
"""

import logging
import os
from typing import Optional

from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.stream_transfer_port import StreamTransferPort
from file_manager.use_cases.files.delete_file import DeleteFileUseCase


def ensure_distinct(source_path: str, destination_path: str) -> None:
    """Refuse to stream a file onto itself (opening it for writing truncates it)."""
    if os.path.exists(destination_path) and os.path.samefile(source_path, destination_path):
        raise FileRepositoryError(
            f"'{source_path}' and '{destination_path}' are the same file"
        )


class CopyFileUseCase:
    """Use case for copying a file into a directory, keeping its name."""

    def __init__(
        self,
        stream_transfer: StreamTransferPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._stream_transfer = stream_transfer
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source_path: str, target_directory: str) -> str:
        """
        Copy a file to ``target_directory/basename(source_path)``.

        An existing file with that name is overwritten. On failure the partial
        destination is left in place.

        Returns:
            Path of the copy

        Raises:
            FileRepositoryError: If the copy fails
        """
        destination = os.path.join(target_directory, os.path.basename(source_path))
        try:
            self._logger.info(f"Copying {source_path} to {destination}")
            ensure_distinct(source_path, destination)
            size = self._stream_transfer.copy(source_path, destination)
            self._logger.info(f"Copied {size} bytes")
            return destination
        except FileRepositoryError:
            raise
        except OSError as e:
            self._logger.error(f"Error copying file: {e}")
            raise FileRepositoryError(
                f"Failed to copy {source_path} to {destination}: {e.strerror or e}"
            )


class MoveFileUseCase:
    """
    Use case for moving a file: copy, then delete the original.

    Not atomic: when the delete fails after a successful copy, both files
    remain and the error is reported.
    """

    def __init__(
        self,
        copy_file: CopyFileUseCase,
        delete_file: DeleteFileUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        self._copy_file = copy_file
        self._delete_file = delete_file
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source_path: str, target_directory: str) -> str:
        destination = self._copy_file.execute(source_path, target_directory)
        try:
            self._delete_file.execute(source_path)
        except FileRepositoryError as e:
            self._logger.warning(f"Copy kept at {destination} after failed delete")
            raise FileRepositoryError(
                f"Copied to {destination} but could not remove the original: {e}"
            )
        return destination

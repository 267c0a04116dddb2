"""
Use case for streaming a file's content to a sink (the console in the shell).
"""

import logging
from typing import Optional

from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.stream_transfer_port import ByteSink, StreamTransferPort


class ReadFileUseCase:
    """Use case for displaying a file without loading it whole into memory."""

    def __init__(
        self,
        stream_transfer: StreamTransferPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._stream_transfer = stream_transfer
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str, sink: ByteSink) -> int:
        """
        Stream a file into a sink.

        Args:
            path: File to read
            sink: Destination of the file bytes

        Returns:
            Number of bytes read

        Raises:
            FileRepositoryError: If the file cannot be read
        """
        try:
            self._logger.info(f"Reading file: {path}")
            return self._stream_transfer.transfer(path, sink)
        except FileRepositoryError:
            raise
        except OSError as e:
            self._logger.error(f"Error reading file: {e}")
            raise FileRepositoryError(f"Failed to read {path}: {e.strerror or e}")

"""
Use case for computing a file's content digest.
"""

import logging
from typing import Optional

from file_manager.adapters.streams.sinks import DigestSink
from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.stream_transfer_port import StreamTransferPort

HASH_ALGORITHM = "sha256"


class HashFileUseCase:
    """Use case for hashing a file chunk by chunk (SHA-256, hex encoded)."""

    def __init__(
        self,
        stream_transfer: StreamTransferPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._stream_transfer = stream_transfer
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> str:
        """
        Compute the hex digest of a file's content.

        Raises:
            FileRepositoryError: If the file cannot be read
        """
        sink = DigestSink(HASH_ALGORITHM)
        try:
            self._logger.info(f"Hashing file: {path}")
            self._stream_transfer.transfer(path, sink)
        except OSError as e:
            self._logger.error(f"Error hashing file: {e}")
            raise FileRepositoryError(f"Failed to hash {path}: {e.strerror or e}")
        return sink.hexdigest()

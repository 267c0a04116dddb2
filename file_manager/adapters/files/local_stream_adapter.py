"""
Local stream transfer adapter: moves file bytes in bounded chunks.
"""

import logging
from typing import BinaryIO, Optional

from typing_extensions import override

from file_manager.config.settings import DEFAULT_CHUNK_SIZE
from file_manager.ports.files.stream_transfer_port import (
    ByteSink,
    StreamTransferPort,
    StreamTransform,
)


class LocalStreamTransferAdapter(StreamTransferPort):
    """
    Pull-loop implementation of the stream transfer port.

    Each chunk is read, transformed and written before the next one is read,
    so output order always matches input order and at most one chunk (plus
    whatever the transform buffers) is held in memory.
    """

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the adapter.

        Args:
            chunk_size: Maximum number of bytes read per chunk
            logger: Logger instance to use for logging
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._chunk_size = chunk_size
        self._logger = logger or logging.getLogger(__name__)

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def _pump(
        self,
        source: BinaryIO,
        sink: ByteSink,
        transform: Optional[StreamTransform],
    ) -> int:
        total = 0
        while True:
            chunk = source.read(self._chunk_size)
            if not chunk:
                break
            total += len(chunk)
            if transform is not None:
                chunk = transform.process(chunk)
            if chunk:
                sink.write(chunk)
        if transform is not None:
            tail = transform.finish()
            if tail:
                sink.write(tail)
        sink.flush()
        return total

    @override
    def transfer(
        self,
        source_path: str,
        sink: ByteSink,
        transform: Optional[StreamTransform] = None,
    ) -> int:
        with open(source_path, "rb") as source:
            total = self._pump(source, sink, transform)
        self._logger.debug(f"Transferred {total} bytes from {source_path}")
        return total

    @override
    def copy(
        self,
        source_path: str,
        destination_path: str,
        transform: Optional[StreamTransform] = None,
    ) -> int:
        # Source is opened first: a missing source never creates the destination
        with open(source_path, "rb") as source:
            with open(destination_path, "wb") as destination:
                total = self._pump(source, destination, transform)
        self._logger.debug(
            f"Copied {total} bytes from {source_path} to {destination_path}"
        )
        return total

"""
Stream transfer port: chunked byte movement from a file to a sink.
"""

from abc import ABC, abstractmethod
from typing import Optional, Protocol


class ByteSink(Protocol):
    """Destination of a transfer: files, the console, digest accumulators."""

    def write(self, data: bytes, /) -> object: ...

    def flush(self) -> None: ...


class StreamTransform(Protocol):
    """Inline transform applied to every chunk of a transfer."""

    def process(self, chunk: bytes) -> bytes: ...

    def finish(self) -> bytes: ...


class StreamTransferPort(ABC):
    """Port interface for streaming file content in bounded chunks."""

    @abstractmethod
    def transfer(
        self,
        source_path: str,
        sink: ByteSink,
        transform: Optional[StreamTransform] = None,
    ) -> int:
        """
        Stream a file into a sink, chunk by chunk and in order.

        Args:
            source_path: File to read
            sink: Receives every (transformed) chunk, flushed at the end
            transform: Optional transform; identity when None

        Returns:
            Number of bytes read from the source

        Raises:
            OSError: If reading or writing fails
            CodecError: If the transform rejects the data
        """
        pass

    @abstractmethod
    def copy(
        self,
        source_path: str,
        destination_path: str,
        transform: Optional[StreamTransform] = None,
    ) -> int:
        """
        Stream a file into a destination file, creating or truncating it.

        Args:
            source_path: File to read
            destination_path: File to write
            transform: Optional transform; identity when None

        Returns:
            Number of bytes read from the source
        """
        pass

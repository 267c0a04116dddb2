"""
Use cases for Brotli compression and decompression of a file.
"""

import logging
import os
from typing import Optional

from file_manager.adapters.streams.brotli_transforms import (
    BROTLI_SUFFIX,
    BrotliCompressTransform,
    BrotliDecompressTransform,
)
from file_manager.config.settings import DEFAULT_BROTLI_QUALITY
from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.stream_transfer_port import StreamTransferPort
from file_manager.use_cases.files.copy_file import ensure_distinct


def compressed_name(source_path: str) -> str:
    return os.path.basename(source_path) + BROTLI_SUFFIX


def decompressed_name(source_path: str) -> str:
    name = os.path.basename(source_path)
    if name.endswith(BROTLI_SUFFIX) and len(name) > len(BROTLI_SUFFIX):
        return name[: -len(BROTLI_SUFFIX)]
    return name


class CompressFileUseCase:
    """Use case writing ``target_directory/<name>.br`` from a source file."""

    def __init__(
        self,
        stream_transfer: StreamTransferPort,
        quality: int = DEFAULT_BROTLI_QUALITY,
        logger: Optional[logging.Logger] = None,
    ):
        self._stream_transfer = stream_transfer
        self._quality = quality
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source_path: str, target_directory: str) -> str:
        """
        Compress a file into a directory.

        Returns:
            Path of the compressed file

        Raises:
            FileRepositoryError: If reading, compressing or writing fails
        """
        destination = os.path.join(target_directory, compressed_name(source_path))
        try:
            self._logger.info(f"Compressing {source_path} to {destination}")
            size = self._stream_transfer.copy(
                source_path, destination, BrotliCompressTransform(self._quality)
            )
            self._logger.info(f"Compressed {size} bytes")
            return destination
        except FileRepositoryError:
            raise
        except OSError as e:
            self._logger.error(f"Error compressing file: {e}")
            raise FileRepositoryError(
                f"Failed to compress {source_path}: {e.strerror or e}"
            )


class DecompressFileUseCase:
    """Use case restoring ``target_directory/<name without .br>`` from a Brotli file."""

    def __init__(
        self,
        stream_transfer: StreamTransferPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._stream_transfer = stream_transfer
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source_path: str, target_directory: str) -> str:
        """
        Decompress a Brotli file into a directory.

        Returns:
            Path of the decompressed file

        Raises:
            CodecError: If the source is not a complete Brotli stream
            FileRepositoryError: If reading or writing fails
        """
        destination = os.path.join(target_directory, decompressed_name(source_path))
        try:
            self._logger.info(f"Decompressing {source_path} to {destination}")
            ensure_distinct(source_path, destination)
            size = self._stream_transfer.copy(
                source_path, destination, BrotliDecompressTransform()
            )
            self._logger.info(f"Decompressed {size} bytes")
            return destination
        except FileRepositoryError:
            raise
        except OSError as e:
            self._logger.error(f"Error decompressing file: {e}")
            raise FileRepositoryError(
                f"Failed to decompress {source_path}: {e.strerror or e}"
            )

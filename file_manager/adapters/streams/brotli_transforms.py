"""
Brotli stream transforms plugged into the stream transfer port.
"""

import brotli

from file_manager.config.settings import DEFAULT_BROTLI_QUALITY
from file_manager.exceptions import CodecError

BROTLI_SUFFIX = ".br"


class BrotliCompressTransform:
    """Compresses chunks into a single Brotli stream."""

    def __init__(self, quality: int = DEFAULT_BROTLI_QUALITY):
        self._compressor = brotli.Compressor(quality=quality)

    def process(self, chunk: bytes) -> bytes:
        return self._compressor.process(chunk)

    def finish(self) -> bytes:
        return self._compressor.finish()


class BrotliDecompressTransform:
    """Decompresses a Brotli stream chunk by chunk.

    Raises CodecError on malformed input and when the input ends before the
    Brotli stream is complete.
    """

    def __init__(self):
        self._decompressor = brotli.Decompressor()

    def process(self, chunk: bytes) -> bytes:
        try:
            return self._decompressor.process(chunk)
        except brotli.error as e:
            raise CodecError(f"Invalid Brotli stream: {e}") from e

    def finish(self) -> bytes:
        if not self._decompressor.is_finished():
            raise CodecError("Invalid Brotli stream: unexpected end of data")
        return b""

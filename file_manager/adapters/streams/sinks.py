"""
Byte sinks for the stream transfer port.
"""

import codecs
import hashlib

from rich.console import Console


class ConsoleSink:
    """Writes streamed bytes to a rich Console as UTF-8 text.

    Multi-byte characters split across chunk boundaries are decoded once
    complete; undecodable bytes are replaced.
    """

    def __init__(self, console: Console, encoding: str = "utf-8"):
        self._console = console
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")

    def write(self, data: bytes) -> int:
        text = self._decoder.decode(data)
        if text:
            self._console.out(text, end="", highlight=False)
        return len(data)

    def flush(self) -> None:
        text = self._decoder.decode(b"", final=True)
        if text:
            self._console.out(text, end="", highlight=False)
        self._console.file.flush()


class DigestSink:
    """Folds streamed bytes into a hashlib digest."""

    def __init__(self, algorithm: str = "sha256"):
        self._digest = hashlib.new(algorithm)

    def write(self, data: bytes) -> int:
        self._digest.update(data)
        return len(data)

    def flush(self) -> None:
        pass

    def hexdigest(self) -> str:
        return self._digest.hexdigest()

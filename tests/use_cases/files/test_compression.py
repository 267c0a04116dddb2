"""
Tests for the Brotli compression use cases.
"""

import os

import brotli
import pytest

from file_manager.adapters.files.local_stream_adapter import LocalStreamTransferAdapter
from file_manager.exceptions import CodecError, FileRepositoryError
from file_manager.use_cases.files.compression import (
    CompressFileUseCase,
    DecompressFileUseCase,
    compressed_name,
    decompressed_name,
)


@pytest.fixture
def streams():
    return LocalStreamTransferAdapter(chunk_size=16)


@pytest.fixture
def layout(tmp_path):
    source = tmp_path / "notes.txt"
    source.write_bytes(("line of text\n" * 500).encode() + bytes(range(256)))
    d1 = tmp_path / "d1"
    d2 = tmp_path / "d2"
    d1.mkdir()
    d2.mkdir()
    return source, d1, d2


def test_names():
    assert compressed_name("/a/b/notes.txt") == "notes.txt.br"
    assert decompressed_name("/a/b/notes.txt.br") == "notes.txt"
    assert decompressed_name("/a/b/plain.bin") == "plain.bin"
    assert decompressed_name("/a/.br") == ".br"


def test_compress_writes_brotli_with_suffix(layout, streams, mock_logger):
    source, d1, _ = layout

    destination = CompressFileUseCase(streams, quality=4, logger=mock_logger).execute(
        str(source), str(d1)
    )

    assert destination == os.path.join(str(d1), "notes.txt.br")
    with open(destination, "rb") as f:
        assert brotli.decompress(f.read()) == source.read_bytes()


def test_round_trip_reproduces_original(layout, streams, mock_logger):
    source, d1, d2 = layout

    compressed = CompressFileUseCase(streams, logger=mock_logger).execute(str(source), str(d1))
    restored = DecompressFileUseCase(streams, mock_logger).execute(compressed, str(d2))

    assert restored == os.path.join(str(d2), "notes.txt")
    with open(restored, "rb") as f:
        assert f.read() == source.read_bytes()


def test_decompress_invalid_stream(layout, streams, mock_logger):
    source, _, d2 = layout
    bogus = source.parent / "bogus.txt.br"
    bogus.write_bytes(b"\xff\xff\xff definitely not brotli")

    with pytest.raises(CodecError, match="Invalid Brotli stream"):
        DecompressFileUseCase(streams, mock_logger).execute(str(bogus), str(d2))


def test_decompress_without_suffix_onto_itself_is_refused(layout, streams, mock_logger):
    source, _, _ = layout
    original = source.read_bytes()

    with pytest.raises(FileRepositoryError, match="are the same file"):
        DecompressFileUseCase(streams, mock_logger).execute(str(source), str(source.parent))

    assert source.read_bytes() == original


def test_compress_missing_target_directory(layout, streams, mock_logger):
    source, _, _ = layout

    with pytest.raises(FileRepositoryError, match="Failed to compress"):
        CompressFileUseCase(streams, logger=mock_logger).execute(
            str(source), str(source.parent / "missing")
        )

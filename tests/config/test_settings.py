"""
Tests for environment-driven settings.
"""

import os

import pytest

from file_manager.config.settings import (
    DEFAULT_BROTLI_QUALITY,
    DEFAULT_CHUNK_SIZE,
    Settings,
)
from file_manager.exceptions import ConfigurationError

ENV_KEYS = [
    "FILE_MANAGER_START_DIR",
    "FILE_MANAGER_CHUNK_SIZE",
    "FILE_MANAGER_BROTLI_QUALITY",
    "FILE_MANAGER_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    settings = Settings()

    assert settings.start_directory == os.path.expanduser("~")
    assert settings.chunk_size == DEFAULT_CHUNK_SIZE == 65536
    assert settings.brotli_quality == DEFAULT_BROTLI_QUALITY == 11
    assert settings.log_level == "WARNING"


def test_values_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("FILE_MANAGER_START_DIR", str(tmp_path))
    monkeypatch.setenv("FILE_MANAGER_CHUNK_SIZE", "1024")
    monkeypatch.setenv("FILE_MANAGER_BROTLI_QUALITY", "4")
    monkeypatch.setenv("FILE_MANAGER_LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.start_directory == str(tmp_path)
    assert settings.chunk_size == 1024
    assert settings.brotli_quality == 4
    assert settings.log_level == "DEBUG"


def test_blank_integer_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("FILE_MANAGER_CHUNK_SIZE", "  ")

    assert Settings().chunk_size == DEFAULT_CHUNK_SIZE


@pytest.mark.parametrize(
    "key, value",
    [
        ("FILE_MANAGER_CHUNK_SIZE", "lots"),
        ("FILE_MANAGER_CHUNK_SIZE", "0"),
        ("FILE_MANAGER_BROTLI_QUALITY", "12"),
        ("FILE_MANAGER_BROTLI_QUALITY", "-1"),
        ("FILE_MANAGER_LOG_LEVEL", "chatty"),
    ],
)
def test_invalid_values_raise(monkeypatch, key, value):
    monkeypatch.setenv(key, value)

    with pytest.raises(ConfigurationError, match=key):
        Settings()

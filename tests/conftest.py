"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from file_manager.config.settings import Settings
from file_manager.container import DependencyContainer


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield os.path.realpath(temp_dir)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def test_settings(temp_directory):
    """
    Settings starting in the temporary directory, with tiny chunks so that
    every streamed file spans several of them.
    """
    settings = Settings()
    settings.start_directory = temp_directory
    settings.chunk_size = 4
    settings.brotli_quality = 5
    return settings


@pytest.fixture
def dependency_container(test_settings, mock_logger):
    """
    Create a dependency container bound to the temporary directory.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(settings=test_settings)
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


@pytest.fixture
def console():
    """Console writing plain text into a buffer."""
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def session(dependency_container):
    return dependency_container.create_session("tester")


@pytest.fixture
def dispatcher(dependency_container, session, console):
    return dependency_container.get_command_dispatcher(session, console)

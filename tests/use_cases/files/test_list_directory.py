"""
Tests for the ListDirectoryUseCase.
"""

from unittest.mock import MagicMock

import pytest

from file_manager.entities.directory_entry import DirectoryEntry
from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.use_cases.files.list_directory import ListDirectoryUseCase


class TestListDirectoryUseCase:
    """Test cases for the ListDirectoryUseCase."""

    def test_execute_success(self, mock_logger):
        """Test successful execution of the list directory use case."""
        mock_repository = MagicMock(spec=FileRepositoryPort)
        entry1 = MagicMock(spec=DirectoryEntry)
        entry2 = MagicMock(spec=DirectoryEntry)
        mock_repository.list_directory.return_value = [entry1, entry2]

        use_case = ListDirectoryUseCase(mock_repository, mock_logger)
        result = use_case.execute("/test/directory")

        assert result == [entry1, entry2]
        mock_repository.list_directory.assert_called_once_with("/test/directory")
        mock_logger.info.assert_any_call("Listing directory: /test/directory")
        mock_logger.info.assert_any_call("Found 2 entries")

    def test_execute_empty_directory(self, mock_logger):
        """Test execution with an empty directory."""
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.list_directory.return_value = []

        use_case = ListDirectoryUseCase(mock_repository, mock_logger)

        assert use_case.execute("/empty/directory") == []
        mock_logger.info.assert_any_call("Found 0 entries")

    def test_execute_repository_error(self, mock_logger):
        """Test a FileRepositoryError is re-raised unchanged."""
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.list_directory.side_effect = FileRepositoryError(
            "Directory not found"
        )

        use_case = ListDirectoryUseCase(mock_repository, mock_logger)

        with pytest.raises(FileRepositoryError, match="Directory not found"):
            use_case.execute("/nonexistent/directory")
        mock_logger.error.assert_not_called()

    def test_execute_unexpected_error(self, mock_logger):
        """Test an unexpected exception is wrapped and logged."""
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.list_directory.side_effect = Exception("Unexpected error")

        use_case = ListDirectoryUseCase(mock_repository, mock_logger)

        with pytest.raises(
            FileRepositoryError,
            match="Failed to list directory /test/directory: Unexpected error",
        ):
            use_case.execute("/test/directory")
        mock_logger.error.assert_called_once_with(
            "Error listing directory: Unexpected error"
        )

    def test_initialization_without_logger(self):
        """Test use case initialization without providing a logger."""
        mock_repository = MagicMock(spec=FileRepositoryPort)

        use_case = ListDirectoryUseCase(mock_repository)

        assert use_case._logger is not None
        assert use_case._file_repository == mock_repository

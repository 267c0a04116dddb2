"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod

from file_manager.entities.directory_entry import DirectoryEntry


class FileRepositoryPort(ABC):
    """Port interface for file repository operations."""

    @abstractmethod
    def list_directory(self, directory: str) -> list[DirectoryEntry]:
        """
        List the entries of a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            DirectoryEntry entities, directories first, each group sorted by name

        Raises:
            FileRepositoryError: If listing fails
        """
        pass

    @abstractmethod
    def create_file(self, path: str, content: str = "") -> None:
        """
        Create a new file holding exactly ``content``.

        Args:
            path: Path of the file to create
            content: Initial text content (UTF-8), empty by default

        Raises:
            AlreadyExistsError: If the path already exists
            FileRepositoryError: If creation fails
        """
        pass

    @abstractmethod
    def create_directory(self, path: str) -> None:
        """
        Create a directory, including missing intermediate directories.

        Args:
            path: Directory path to create

        Raises:
            AlreadyExistsError: If the path already exists
            FileRepositoryError: If creation fails
        """
        pass

    @abstractmethod
    def rename(self, old_path: str, new_path: str) -> None:
        """
        Rename a file, atomically replacing an existing file at new_path.

        Args:
            old_path: Existing file path
            new_path: New file path

        Raises:
            FileRepositoryError: If the rename fails
        """
        pass

    @abstractmethod
    def delete_file(self, path: str) -> None:
        """
        Delete a single file.

        Args:
            path: File path to delete

        Raises:
            FileRepositoryError: If the path is missing or is a directory
        """
        pass

"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from rich.console import Console

from file_manager.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_manager.adapters.files.local_stream_adapter import LocalStreamTransferAdapter
from file_manager.adapters.system.local_os_info_adapter import LocalOsInfoAdapter
from file_manager.config.settings import Settings
from file_manager.config.settings import settings as default_settings
from file_manager.entities.session import Session
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.ports.files.stream_transfer_port import StreamTransferPort
from file_manager.ports.system.os_info_port import OsInfoPort
from file_manager.use_cases.commands.command_dispatcher import CommandDispatcher
from file_manager.use_cases.files.compression import (
    CompressFileUseCase,
    DecompressFileUseCase,
)
from file_manager.use_cases.files.copy_file import CopyFileUseCase, MoveFileUseCase
from file_manager.use_cases.files.create_entries import (
    CreateDirectoryUseCase,
    CreateFileUseCase,
)
from file_manager.use_cases.files.delete_file import DeleteFileUseCase
from file_manager.use_cases.files.hash_file import HashFileUseCase
from file_manager.use_cases.files.list_directory import ListDirectoryUseCase
from file_manager.use_cases.files.read_file import ReadFileUseCase
from file_manager.use_cases.files.rename_file import RenameFileUseCase
from file_manager.use_cases.navigation.navigate import (
    ChangeDirectoryUseCase,
    GoUpUseCase,
)
from file_manager.use_cases.system.os_info import OsInfoUseCase
from file_manager.utils.paths import PathValidator


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.

    Adapters and use cases are stateless and cached; dispatchers are built
    per session.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings: Settings = settings or default_settings
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    @property
    def settings(self) -> Settings:
        return self._settings

    def _get(self, key: str, factory):
        if key not in self._instances:
            self._instances[key] = factory()
        return self._instances[key]

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        return self._get(
            "file_repository", lambda: LocalFileSystemAdapter(self._logger)
        )

    def get_stream_transfer(self) -> StreamTransferPort:
        """
        Get stream transfer adapter instance, sized from settings.

        Returns:
            StreamTransferPort implementation
        """
        return self._get(
            "stream_transfer",
            lambda: LocalStreamTransferAdapter(
                chunk_size=self.settings.chunk_size, logger=self._logger
            ),
        )

    def get_os_info(self) -> OsInfoPort:
        return self._get("os_info", lambda: LocalOsInfoAdapter(self._logger))

    def get_path_validator(self) -> PathValidator:
        return self._get("path_validator", PathValidator)

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        return self._get(
            "list_directory_use_case",
            lambda: ListDirectoryUseCase(self.get_file_repository(), self._logger),
        )

    def get_read_file_use_case(self) -> ReadFileUseCase:
        return self._get(
            "read_file_use_case",
            lambda: ReadFileUseCase(self.get_stream_transfer(), self._logger),
        )

    def get_create_file_use_case(self) -> CreateFileUseCase:
        return self._get(
            "create_file_use_case",
            lambda: CreateFileUseCase(self.get_file_repository(), self._logger),
        )

    def get_create_directory_use_case(self) -> CreateDirectoryUseCase:
        return self._get(
            "create_directory_use_case",
            lambda: CreateDirectoryUseCase(self.get_file_repository(), self._logger),
        )

    def get_rename_file_use_case(self) -> RenameFileUseCase:
        return self._get(
            "rename_file_use_case",
            lambda: RenameFileUseCase(self.get_file_repository(), self._logger),
        )

    def get_delete_file_use_case(self) -> DeleteFileUseCase:
        return self._get(
            "delete_file_use_case",
            lambda: DeleteFileUseCase(self.get_file_repository(), self._logger),
        )

    def get_copy_file_use_case(self) -> CopyFileUseCase:
        return self._get(
            "copy_file_use_case",
            lambda: CopyFileUseCase(self.get_stream_transfer(), self._logger),
        )

    def get_move_file_use_case(self) -> MoveFileUseCase:
        """
        Get move file use case, composed of the copy and delete use cases.

        Returns:
            Configured MoveFileUseCase
        """
        return self._get(
            "move_file_use_case",
            lambda: MoveFileUseCase(
                self.get_copy_file_use_case(),
                self.get_delete_file_use_case(),
                self._logger,
            ),
        )

    def get_hash_file_use_case(self) -> HashFileUseCase:
        return self._get(
            "hash_file_use_case",
            lambda: HashFileUseCase(self.get_stream_transfer(), self._logger),
        )

    def get_compress_file_use_case(self) -> CompressFileUseCase:
        return self._get(
            "compress_file_use_case",
            lambda: CompressFileUseCase(
                self.get_stream_transfer(),
                quality=self.settings.brotli_quality,
                logger=self._logger,
            ),
        )

    def get_decompress_file_use_case(self) -> DecompressFileUseCase:
        return self._get(
            "decompress_file_use_case",
            lambda: DecompressFileUseCase(self.get_stream_transfer(), self._logger),
        )

    def get_go_up_use_case(self) -> GoUpUseCase:
        return self._get("go_up_use_case", lambda: GoUpUseCase(self._logger))

    def get_change_directory_use_case(self) -> ChangeDirectoryUseCase:
        return self._get(
            "change_directory_use_case", lambda: ChangeDirectoryUseCase(self._logger)
        )

    def get_os_info_use_case(self) -> OsInfoUseCase:
        return self._get(
            "os_info_use_case", lambda: OsInfoUseCase(self.get_os_info(), self._logger)
        )

    def create_session(self, username: str) -> Session:
        """Create a session starting in the configured start directory."""
        return Session(current_directory=self.settings.start_directory, username=username)

    def get_command_dispatcher(self, session: Session, console: Console) -> CommandDispatcher:
        """
        Build a dispatcher bound to one session and console.

        Returns:
            Configured CommandDispatcher
        """
        return CommandDispatcher(
            session,
            console,
            path_validator=self.get_path_validator(),
            go_up=self.get_go_up_use_case(),
            change_directory=self.get_change_directory_use_case(),
            list_directory=self.get_list_directory_use_case(),
            read_file=self.get_read_file_use_case(),
            create_file=self.get_create_file_use_case(),
            create_directory=self.get_create_directory_use_case(),
            rename_file=self.get_rename_file_use_case(),
            copy_file=self.get_copy_file_use_case(),
            move_file=self.get_move_file_use_case(),
            delete_file=self.get_delete_file_use_case(),
            hash_file=self.get_hash_file_use_case(),
            compress_file=self.get_compress_file_use_case(),
            decompress_file=self.get_decompress_file_use_case(),
            os_info=self.get_os_info_use_case(),
            logger=self._logger,
        )

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()

"""
Command dispatcher: turns one shell input line into a validated file operation.
"""

import logging
from typing import Callable, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text
from typing_extensions import override

from file_manager.adapters.streams.sinks import ConsoleSink
from file_manager.config.messages import get_current_dir
from file_manager.entities.command import Command
from file_manager.entities.directory_entry import DirectoryEntry
from file_manager.entities.session import Session
from file_manager.exceptions import (
    CommandError,
    MissingOperandError,
    OperationFailedError,
    TooManyArgumentsError,
    UnknownCommandError,
)
from file_manager.ports.commands.command_port import CommandHandlerPort, CommandSpec
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
from file_manager.utils.paths import PathValidator, normalize_path

COMMANDS: list[CommandSpec] = [
    {"name": "up", "arity": 0, "optional": True, "usage": "up",
     "description": "Go to the parent directory"},
    {"name": "cd", "arity": 1, "optional": True, "usage": "cd [path]",
     "description": "Change the current directory (home when omitted)"},
    {"name": "ls", "arity": 0, "optional": True, "usage": "ls",
     "description": "List directories, then files, in the current directory"},
    {"name": "cat", "arity": 1, "optional": False, "usage": "cat <path>",
     "description": "Print a file's content"},
    {"name": "add", "arity": 1, "optional": False, "usage": "add <name>",
     "description": "Create an empty file"},
    {"name": "mkdir", "arity": 1, "optional": False, "usage": "mkdir <name>",
     "description": "Create a directory"},
    {"name": "rn", "arity": 2, "optional": False, "usage": "rn <old> <new>",
     "description": "Rename a file"},
    {"name": "cp", "arity": 2, "optional": False, "usage": "cp <src> <dir>",
     "description": "Copy a file into a directory"},
    {"name": "mv", "arity": 2, "optional": False, "usage": "mv <src> <dir>",
     "description": "Move a file into a directory"},
    {"name": "rm", "arity": 1, "optional": False, "usage": "rm <path>",
     "description": "Delete a file"},
    {"name": "os", "arity": 1, "optional": False, "usage": "os --<flag>",
     "description": "Show OS info: --EOL, --cpus, --homedir, --username, --architecture"},
    {"name": "hash", "arity": 1, "optional": False, "usage": "hash <path>",
     "description": "Print the SHA-256 digest of a file"},
    {"name": "compress", "arity": 2, "optional": False, "usage": "compress <src> <dir>",
     "description": "Brotli-compress a file into a directory"},
    {"name": "decompress", "arity": 2, "optional": False, "usage": "decompress <src> <dir>",
     "description": "Decompress a Brotli file into a directory"},
]


class CommandDispatcher(CommandHandlerPort):
    """
    Executes shell input lines against one Session.

    Each line goes through the same stages, and a stage only runs when the
    previous one succeeded: lookup in the closed command set, arity check,
    path resolution and validation, use case invocation. Nothing is written
    to disk before every input of the command has been validated.
    """

    def __init__(
        self,
        session: Session,
        console: Console,
        *,
        path_validator: PathValidator,
        go_up: GoUpUseCase,
        change_directory: ChangeDirectoryUseCase,
        list_directory: ListDirectoryUseCase,
        read_file: ReadFileUseCase,
        create_file: CreateFileUseCase,
        create_directory: CreateDirectoryUseCase,
        rename_file: RenameFileUseCase,
        copy_file: CopyFileUseCase,
        move_file: MoveFileUseCase,
        delete_file: DeleteFileUseCase,
        hash_file: HashFileUseCase,
        compress_file: CompressFileUseCase,
        decompress_file: DecompressFileUseCase,
        os_info: OsInfoUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        self._session = session
        self._console = console
        self._paths = path_validator
        self._go_up = go_up
        self._change_directory = change_directory
        self._list_directory = list_directory
        self._read_file = read_file
        self._create_file = create_file
        self._create_directory = create_directory
        self._rename_file = rename_file
        self._copy_file = copy_file
        self._move_file = move_file
        self._delete_file = delete_file
        self._hash_file = hash_file
        self._compress_file = compress_file
        self._decompress_file = decompress_file
        self._os_info = os_info
        self._logger = logger or logging.getLogger(__name__)

        self._specs: dict[str, CommandSpec] = {spec["name"]: spec for spec in COMMANDS}
        self._handlers: dict[str, Callable[[list[str]], None]] = {
            "up": self._handle_up,
            "cd": self._handle_cd,
            "ls": self._handle_ls,
            "cat": self._handle_cat,
            "add": self._handle_add,
            "mkdir": self._handle_mkdir,
            "rn": self._handle_rn,
            "cp": self._handle_cp,
            "mv": self._handle_mv,
            "rm": self._handle_rm,
            "os": self._handle_os,
            "hash": self._handle_hash,
            "compress": self._handle_compress,
            "decompress": self._handle_decompress,
        }

    @property
    def session(self) -> Session:
        return self._session

    @override
    def available_commands(self) -> list[CommandSpec]:
        return list(COMMANDS)

    @override
    def execute(self, line: str) -> bool:
        command = Command.parse(line)
        if command.is_empty():
            return True
        if command.is_exit():
            return False

        spec = self._specs.get(command.name)
        if spec is None:
            raise UnknownCommandError(command.name)

        args = self._check_arity(command, spec)
        try:
            self._handlers[command.name](args)
        except CommandError as e:
            raise e.bind(command.name)
        except Exception as e:
            self._logger.error(f"Command '{command.name}' failed: {e}")
            raise OperationFailedError(str(e), command.name) from e

        self.print_current_directory()
        return True

    def print_current_directory(self) -> None:
        self._echo(get_current_dir(self._session.current_directory))

    # ------------------------- internal helpers -------------------------
    def _check_arity(self, command: Command, spec: CommandSpec) -> list[str]:
        if spec["arity"] == 0:
            return []
        if not command.has_argument():
            if spec["optional"]:
                return []
            raise MissingOperandError(command.name)
        if spec["arity"] == 1:
            # single operand: the whole remainder, so names may contain spaces
            return [command.argument]
        tokens = command.paths()
        if len(tokens) < spec["arity"]:
            raise MissingOperandError(command.name)
        if len(tokens) > spec["arity"]:
            raise TooManyArgumentsError(command.name)
        return tokens

    @property
    def _cwd(self) -> str:
        return self._session.current_directory

    def _echo(self, text: str) -> None:
        self._console.print(text, markup=False, highlight=False, emoji=False)

    def _validated_pair(self, args: list[str]) -> tuple[str, str]:
        """Validate a source file and a destination directory."""
        source = self._paths.validate(self._cwd, args[0])
        target = self._paths.validate_directory(self._cwd, args[1])
        return source, target

    # ------------------------- command handlers -------------------------
    def _handle_up(self, args: list[str]) -> None:
        self._session.current_directory = self._go_up.execute(self._cwd)

    def _handle_cd(self, args: list[str]) -> None:
        target = self._paths.validate_directory(self._cwd, args[0] if args else "~")
        self._session.current_directory = self._change_directory.execute(target)

    def _handle_ls(self, args: list[str]) -> None:
        self._console.print(self._render_entries(self._list_directory.execute(self._cwd)))

    def _handle_cat(self, args: list[str]) -> None:
        path = self._paths.validate(self._cwd, args[0])
        self._read_file.execute(path, ConsoleSink(self._console))
        self._console.line()

    def _handle_add(self, args: list[str]) -> None:
        self._create_file.execute(normalize_path(self._cwd, args[0]))

    def _handle_mkdir(self, args: list[str]) -> None:
        self._create_directory.execute(normalize_path(self._cwd, args[0]))

    def _handle_rn(self, args: list[str]) -> None:
        old_path = self._paths.validate(self._cwd, args[0])
        new_path = normalize_path(self._cwd, args[1])
        self._rename_file.execute(old_path, new_path)

    def _handle_cp(self, args: list[str]) -> None:
        self._copy_file.execute(*self._validated_pair(args))

    def _handle_mv(self, args: list[str]) -> None:
        self._move_file.execute(*self._validated_pair(args))

    def _handle_rm(self, args: list[str]) -> None:
        self._delete_file.execute(self._paths.validate(self._cwd, args[0]))

    def _handle_os(self, args: list[str]) -> None:
        self._echo(self._os_info.execute(args[0]))

    def _handle_hash(self, args: list[str]) -> None:
        path = self._paths.validate(self._cwd, args[0])
        self._echo(self._hash_file.execute(path))

    def _handle_compress(self, args: list[str]) -> None:
        self._compress_file.execute(*self._validated_pair(args))

    def _handle_decompress(self, args: list[str]) -> None:
        self._decompress_file.execute(*self._validated_pair(args))

    def _render_entries(self, entries: list[DirectoryEntry]) -> Table:
        table = Table(box=box.ROUNDED)
        table.add_column("(index)", justify="right", style="dim")
        table.add_column("Name")
        table.add_column("Type")
        for index, entry in enumerate(entries):
            style = "bold blue" if entry.is_dir else ""
            table.add_row(str(index), Text(entry.name, style=style), entry.kind)
        return table

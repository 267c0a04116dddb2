"""
Custom exceptions for the application.
"""

from typing import Optional


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class AlreadyExistsError(FileRepositoryError):
    """Exception raised when a create-type operation targets an existing path."""

    pass


class CodecError(FileRepositoryError):
    """Exception raised when a compressed stream cannot be decoded."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class CommandError(BaseAppError):
    """
    Base exception for errors reported by the command dispatcher.

    Rendered as ``"<command>: <kind> - <reason>"`` when bound to a command.
    """

    kind = "Command error"

    def __init__(self, reason: str = "", command: Optional[str] = None):
        self.reason = reason
        self.command = command
        super().__init__(self._render())

    def _render(self) -> str:
        message = f"{self.kind} - {self.reason}" if self.reason else self.kind
        return f"{self.command}: {message}" if self.command else message

    def bind(self, command: str) -> "CommandError":
        """Attach the command name if the error does not carry one yet."""
        if self.command is None:
            self.command = command
            self.args = (self._render(),)
        return self


class InvalidInputError(CommandError):
    """Exception raised for bad input: unknown command, arity or path errors."""

    kind = "Invalid input"


class UnknownCommandError(InvalidInputError):
    """Exception raised for a command name outside the known command set."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown command '{name}'")


class MissingOperandError(InvalidInputError):
    """Exception raised when a command gets fewer arguments than it needs."""

    def __init__(self, command: Optional[str] = None):
        super().__init__("Missing operand", command)


class TooManyArgumentsError(InvalidInputError):
    """Exception raised when a command gets more arguments than it accepts."""

    def __init__(self, command: Optional[str] = None):
        super().__init__("Too many arguments", command)


class OperationFailedError(CommandError):
    """Exception raised when a validated command fails while executing."""

    kind = "Operation failed"

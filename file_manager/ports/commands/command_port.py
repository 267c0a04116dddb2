"""
Port and types describing shell commands, independent of the input source.
"""

from abc import ABC, abstractmethod
from typing import TypedDict


class CommandSpec(TypedDict):
    """Specification for a command the shell accepts."""

    name: str
    arity: int  # number of whitespace-separated arguments
    optional: bool  # argument may be omitted
    usage: str
    description: str


class CommandHandlerPort(ABC):
    """
    Port interface for handling shell input lines.

    This port exposes the available commands and executes input lines.
    """

    @abstractmethod
    def available_commands(self) -> list[CommandSpec]:
        """
        Get the list of available commands.

        Returns:
            List of command specifications
        """
        pass

    @abstractmethod
    def execute(self, line: str) -> bool:
        """
        Execute one input line.

        Args:
            line: Raw input line

        Returns:
            False when the line ends the session, True otherwise

        Raises:
            CommandError: If the line is invalid or the command fails
        """
        pass

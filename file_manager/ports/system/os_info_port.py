"""
OS information port interface.
"""

from abc import ABC, abstractmethod

from file_manager.entities.os_info import CpuInfo


class OsInfoPort(ABC):
    """Port interface for host operating system facts."""

    @abstractmethod
    def eol(self) -> str:
        """Return the platform line terminator."""
        pass

    @abstractmethod
    def cpus(self) -> list[CpuInfo]:
        """Return one CpuInfo per logical CPU."""
        pass

    @abstractmethod
    def homedir(self) -> str:
        """Return the current user's home directory."""
        pass

    @abstractmethod
    def username(self) -> str:
        """Return the current user's login name."""
        pass

    @abstractmethod
    def architecture(self) -> str:
        """Return the machine architecture (e.g. x86_64, arm64)."""
        pass

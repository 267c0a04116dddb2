"""
Use case answering 'os --<flag>' queries.
"""

import logging
from typing import Callable, Optional

from file_manager.exceptions import (
    FileRepositoryError,
    MissingOperandError,
    TooManyArgumentsError,
)
from file_manager.ports.system.os_info_port import OsInfoPort

FLAG_PREFIX = "--"


def parse_flags(argument: str) -> dict[str, Optional[str]]:
    """
    Parse ``--name`` / ``--name=value`` tokens; other tokens are ignored.

    >>> parse_flags("--cpus extra --user=me")
    {'cpus': None, 'user': 'me'}
    """
    flags: dict[str, Optional[str]] = {}
    for token in argument.split():
        if not token.startswith(FLAG_PREFIX) or token == FLAG_PREFIX:
            continue
        name, sep, value = token[len(FLAG_PREFIX):].partition("=")
        flags[name] = value if sep else None
    return flags


class OsInfoUseCase:
    """Use case formatting one host OS fact selected by a flag."""

    def __init__(self, os_info: OsInfoPort, logger: Optional[logging.Logger] = None):
        self._os_info = os_info
        self._logger = logger or logging.getLogger(__name__)
        self._params: dict[str, Callable[[], str]] = {
            "EOL": lambda: repr(self._os_info.eol()),
            "cpus": self._format_cpus,
            "homedir": self._os_info.homedir,
            "username": self._os_info.username,
            "architecture": self._os_info.architecture,
        }

    def available_parameters(self) -> list[str]:
        return list(self._params)

    def execute(self, argument: str) -> str:
        """
        Answer an ``os`` query.

        Args:
            argument: Raw argument string, e.g. ``"--cpus"``

        Raises:
            MissingOperandError: If no flag is given
            TooManyArgumentsError: If more than one flag is given
            FileRepositoryError: If the flag is unknown or the lookup fails
        """
        flags = list(parse_flags(argument))
        if not flags:
            raise MissingOperandError()
        if len(flags) > 1:
            raise TooManyArgumentsError()

        parameter = flags[0]
        handler = self._params.get(parameter)
        if handler is None:
            raise FileRepositoryError(f"Unknown parameter {parameter}")
        self._logger.info(f"Reading OS info: {parameter}")
        try:
            return handler()
        except Exception as e:
            self._logger.error(f"Error reading OS info: {e}")
            raise FileRepositoryError(f"Failed to read {parameter}: {str(e)}")

    def _format_cpus(self) -> str:
        cpus = self._os_info.cpus()
        lines = [f"Total number of CPUs: {len(cpus)}"]
        for index, cpu in enumerate(cpus, start=1):
            lines.append(
                f"CPU {index}: Model: {cpu.model}, Clock Rate: {cpu.speed_ghz:.2f} GHz"
            )
        return "\n".join(lines)

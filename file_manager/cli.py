from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional

from rich.console import Console

from file_manager.config.messages import (
    ANONYMOUS,
    get_current_dir,
    get_intro,
    get_outro,
)
from file_manager.container import DependencyContainer, container
from file_manager.entities.session import Session
from file_manager.exceptions import CommandError
from file_manager.ports.commands.command_port import CommandHandlerPort

PROMPT = "> "

logger = logging.getLogger(__name__)


class FileManagerShell:
    """Read-eval loop: one line is fully handled before the next is read."""

    def __init__(
        self,
        session: Session,
        handler: CommandHandlerPort,
        console: Console,
        read_line: Optional[Callable[[str], str]] = None,
    ) -> None:
        self._session = session
        self._handler = handler
        self._console = console
        self._read_line = read_line or console.input

    def _say(self, text: str, style: Optional[str] = None) -> None:
        self._console.print(text, style=style, markup=False, highlight=False, emoji=False)

    def run(self) -> int:
        self._say(get_intro(self._session.username), style="bold green")
        self._say(get_current_dir(self._session.current_directory))
        try:
            while True:
                try:
                    line = self._read_line(PROMPT)
                except (EOFError, KeyboardInterrupt):
                    self._console.line()
                    break
                try:
                    if not self._handler.execute(line):
                        break
                except KeyboardInterrupt:
                    self._console.line()
                    break
                except CommandError as e:
                    self._say(str(e), style="red")
        finally:
            self._say(get_outro(self._session.username), style="bold green")
        return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="file-manager",
        description="Interactive file manager shell (type .exit to quit).",
    )
    parser.add_argument(
        "--username",
        default=ANONYMOUS,
        help=f"Name used in the welcome and farewell messages (default: {ANONYMOUS})",
    )
    return parser


def main(
    argv: list[str] | None = None,
    *,
    deps: DependencyContainer | None = None,
    console: Console | None = None,
) -> int:
    args, unknown = _build_parser().parse_known_args(argv)
    deps = deps or container

    logging.basicConfig(
        level=deps.settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if unknown:
        logger.debug(f"Ignoring unknown arguments: {unknown}")

    console = console or Console(soft_wrap=True)
    session = deps.create_session(args.username or ANONYMOUS)
    dispatcher = deps.get_command_dispatcher(session, console)
    return FileManagerShell(session, dispatcher, console).run()


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

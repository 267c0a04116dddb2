from dataclasses import dataclass

from file_manager.config.messages import ANONYMOUS


@dataclass
class Session:
    """State of one interactive shell: where the user is and who they are."""

    current_directory: str
    username: str = ANONYMOUS

from dataclasses import dataclass

EXIT_COMMAND = ".exit"


@dataclass(frozen=True)
class Command:
    """One parsed input line: command name and its raw, unsplit argument."""

    name: str
    argument: str = ""

    @classmethod
    def parse(cls, line: str) -> "Command":
        # 'rn a b' -> name 'rn', argument 'a b'; 'ls' -> name 'ls', argument ''
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return cls("")
        if len(parts) == 1:
            return cls(parts[0])
        return cls(parts[0], parts[1].strip())

    def is_empty(self) -> bool:
        return not self.name

    def is_exit(self) -> bool:
        return self.name == EXIT_COMMAND

    def has_argument(self) -> bool:
        return bool(self.argument)

    def paths(self) -> list[str]:
        """Split the argument on single spaces; empty tokens are kept."""
        if not self.argument:
            return []
        return self.argument.split(" ")

"""
    Command model - a named console action with a minimum-argument contract
"""
from dataclasses import dataclass
from typing import Any, Callable, List

# handler(console, args) -> None; output goes through console.log_message
CommandHandler = Callable[[Any, List[str]], None]


@dataclass(frozen=True)
class ConsoleCommand:
    """
    Attributes:
        name:        Unique, case-sensitive command name.
        handler:     Callable invoked with the console and the argument list.
        min_args:    Minimum number of arguments the handler needs.
        description: One-line help text.
    """
    name: str
    handler: CommandHandler
    min_args: int = 0
    description: str = ""

    def __post_init__(self):
        if not self.name or any(ch.isspace() for ch in self.name):
            raise ValueError(f"Invalid command name: '{self.name}'")
        if self.min_args < 0:
            raise ValueError(f"min_args must be non-negative, got {self.min_args}")
        if not callable(self.handler):
            raise TypeError(f"Handler of command '{self.name}' is not callable")

    def accepts(self, args: List[str]) -> bool:
        """Whether enough arguments were supplied."""
        return len(args) >= self.min_args

    def invoke(self, console: Any, args: List[str]) -> None:
        self.handler(console, args)

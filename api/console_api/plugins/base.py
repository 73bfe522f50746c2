"""
    Abstract base classes for plugins.
    Defines the "Contract" that command packs and tokenizers must follow.
"""
from abc import ABC, abstractmethod
from typing import Any, List


class CommandPackPlugin(ABC):
    """
        Abstract base class for command pack plugins.
        Pattern: Strategy (for command registration).
    """

    @abstractmethod
    def get_plugin_name(self) -> str:
        """
            Returns the unique name of the pack.
            Example: "Builtin Commands"
        """
        pass

    @abstractmethod
    def register_all(self, console: Any) -> None:
        """
        Main method: registers every command of the pack on the console.

        Called once, during the start-up registration phase.

        Args:
            console: The Console that will own the commands.
        """
        pass


class Tokenizer(ABC):
    """
        Abstract base class for input line tokenizers.
        Pattern: Strategy (for splitting a line into tokens).
    """

    @abstractmethod
    def tokenize(self, text: str) -> List[str]:
        """
        Split a raw line into whitespace-delimited tokens, honoring quoting.

        Args:
            text: Raw input line.

        Returns:
            List[str]: Ordered tokens; empty for empty input.
        """
        pass

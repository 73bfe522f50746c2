"""
    CommandRegistry — the console's commands, always sorted by name.

    Registration happens once at start-up, so the whole list is
    re-sorted on every insert and enumeration is always ready in
    alphabetical order.  Lookup is a linear scan; registries hold tens
    of commands.
"""
from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from console_api.models.command import ConsoleCommand
from console_services.exceptions import CommandIndexError, DuplicateCommandError

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Ordered collection of ``ConsoleCommand`` objects."""

    def __init__(self):
        self._commands: List[ConsoleCommand] = []

    def register(self, command: ConsoleCommand) -> None:
        """
        Add a command and re-sort by name (ordinal, ascending).

        Raises:
            DuplicateCommandError: If a command with the same name exists.
        """
        if self.find_by_name(command.name) is not None:
            raise DuplicateCommandError(f"Command '{command.name}' is already registered.")

        self._commands.append(command)
        self._commands.sort(key=lambda c: c.name)
        logger.debug("Registered command %s (min_args=%d)", command.name, command.min_args)

    def find_by_name(self, name: str) -> Optional[ConsoleCommand]:
        """Exact, case-sensitive lookup."""
        for command in self._commands:
            if command.name == name:
                return command
        return None

    def count(self) -> int:
        return len(self._commands)

    def at(self, index: int) -> ConsoleCommand:
        """
        Command at ``index`` in alphabetical order.

        Raises:
            CommandIndexError: If ``index`` is outside ``[0, count())``.
        """
        if not 0 <= index < len(self._commands):
            raise CommandIndexError(
                f"Command index {index} out of range (0..{len(self._commands) - 1})."
            )
        return self._commands[index]

    def names(self) -> List[str]:
        return [c.name for c in self._commands]

    def __iter__(self) -> Iterator[ConsoleCommand]:
        return iter(list(self._commands))

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: str) -> bool:
        return self.find_by_name(name) is not None

    def __repr__(self) -> str:
        return f"CommandRegistry(commands={len(self._commands)})"

"""
    Transcript — append-only log of every message printed to the console.
"""
from typing import List, Tuple


class Transcript:
    """
    Ordered, newline-terminated lines; the newest line is last.
    """

    def __init__(self):
        self._lines: List[str] = []

    def append(self, message: str) -> str:
        """
        Store a message, adding a trailing newline only if it is missing.

        Returns:
            The stored (terminated) line.
        """
        if not message.endswith("\n"):
            message += "\n"
        self._lines.append(message)
        return message

    def last_line(self) -> str:
        return self._lines[-1] if self._lines else ""

    def dump_all(self) -> str:
        """Every line in insertion order, joined without separators."""
        return "".join(self._lines)

    @property
    def lines(self) -> Tuple[str, ...]:
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

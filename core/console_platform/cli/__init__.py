"""
CLI package — console dispatch, command registry and built-in commands.

Design Patterns
───────────────
• Command       – each console action is a ``ConsoleCommand`` value
                  wrapping a handler and its minimum argument count.
• Chain of Responsibility – ``Console.execute`` tries commands, then
                            variables, then reports an unknown name.
• Observer      – transcript and execution hooks for a UI.

The interactive entry point lives in ``console_platform.cli.repl`` and
is not imported here.
"""
from .console import (
    Console,
    EVENT_COMMAND_EXECUTED,
    EVENT_LOG_MESSAGE,
    MSG_MISSING_ARGUMENTS,
)
from .registry import CommandRegistry
from .transcript import Transcript
from .commands import BuiltinCommandPack, COMMANDS

__all__ = [
    'Console',
    'EVENT_COMMAND_EXECUTED',
    'EVENT_LOG_MESSAGE',
    'MSG_MISSING_ARGUMENTS',
    'CommandRegistry',
    'Transcript',
    'BuiltinCommandPack',
    'COMMANDS',
]

"""
    Console — parses raw input lines and dispatches them.

    Design Patterns
    ───────────────
    • Interpreter   – splits a line into a command name and arguments.
    • Invoker       – resolves the name against commands first, then
                      variables, and records every line in the history.
    • Observer      – ``console_execute`` / ``console_logmessage`` hooks
                      for a UI that mirrors the transcript.

    Resolution order for ``execute(line)``:
        1. a registered command   → run it (if enough arguments)
        2. a declared variable    → optionally assign, always echo
        3. anything else          → ``Unknown command: "<name>"``

    Handlers run on the caller's thread under the console lock and must
    return quickly; a blocking handler stalls the whole console.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from console_api.models.command import CommandHandler, ConsoleCommand
from console_api.plugins.base import Tokenizer
from console_services.tokenizer import ShlexTokenizer
from console_services.variable_store import VariableStore

from ..config import ConsoleConfig
from .registry import CommandRegistry
from .transcript import Transcript

logger = logging.getLogger(__name__)


# ── Observer event types ─────────────────────────────────────────
EVENT_COMMAND_EXECUTED = "console_execute"
EVENT_LOG_MESSAGE = "console_logmessage"

MSG_MISSING_ARGUMENTS = "Missing command arguments"


class Console:
    """
    Owns the command registry, the transcript and the input history.

    Variables are not owned: they are looked up by name in the
    ``VariableStore`` handed in by the platform.

    Usage:
        console = Console(VariableStore())
        console.register("echo", lambda con, args: con.log_message(args[0]), 1)
        console.execute("echo hello")
        console.last_log_line()      # "hello\\n"
    """

    def __init__(
        self,
        variables: VariableStore,
        tokenizer: Optional[Tokenizer] = None,
        config: Optional[ConsoleConfig] = None,
    ):
        self._config: ConsoleConfig = config or ConsoleConfig()
        self._variables = variables
        self._tokenizer: Tokenizer = tokenizer or ShlexTokenizer()

        self._registry = CommandRegistry()
        self._transcript = Transcript()
        # Most recent first (the transcript is most recent last)
        self._history: List[str] = []

        self._listeners: Dict[str, List[Callable[..., Any]]] = {}
        self._lock = threading.RLock()

    # ── Properties ───────────────────────────────────────────────

    @property
    def config(self) -> ConsoleConfig:
        return self._config

    @property
    def variables(self) -> VariableStore:
        return self._variables

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    @property
    def transcript(self) -> Transcript:
        return self._transcript

    @property
    def history(self) -> List[str]:
        """Copy of the input history, most recent first."""
        return list(self._history)

    # ── Registration ─────────────────────────────────────────────

    def add_command(self, command: ConsoleCommand) -> None:
        """
        Raises:
            DuplicateCommandError: If the name is already taken.
        """
        self._registry.register(command)

    def register(self, name: str, handler: CommandHandler,
                 min_args: int = 0, description: str = "") -> ConsoleCommand:
        """Build a ``ConsoleCommand`` and add it."""
        command = ConsoleCommand(name, handler, min_args, description)
        self.add_command(command)
        return command

    # ── Dispatch ─────────────────────────────────────────────────

    def execute(self, line: str) -> None:
        """
        Execute one raw input line.  A non-empty line is echoed to the
        transcript with the input prefix before it is dispatched.

        User errors (unknown name, missing arguments, read-only variable)
        are reported in the transcript, never raised.  Exceptions raised
        by a command handler propagate to the caller.
        """
        with self._lock:
            logger.info("%s%s", self._config.input_prefix, line)

            if not line:
                return

            self.log_message(f"{self._config.input_prefix}{line}")

            self._history.insert(0, line)
            if self._config.max_history is not None:
                del self._history[self._config.max_history:]

            self._notify(EVENT_COMMAND_EXECUTED, line=line)

            tokens = self._tokenizer.tokenize(line)
            name = tokens[0] if tokens else ""
            args = tokens[1:]

            command = self._registry.find_by_name(name)
            if command is not None:
                if command.accepts(args):
                    command.invoke(self, args)
                else:
                    self.log_message(MSG_MISSING_ARGUMENTS)
                return

            variable = self._variables.lookup(name)
            if variable is not None:
                if args and not self._variables.set_from_string(variable, args[0]):
                    self.log_message(f'"{name}" is read-only')
                value = self._variables.format_to_string(variable)
                self.log_message(f'"{name}" = "{value}"')
                return

            self.log_message(f'Unknown command: "{name}"')

    # ── Transcript ───────────────────────────────────────────────

    def log_message(self, message: str) -> None:
        """Append a line to the transcript and announce it."""
        with self._lock:
            line = self._transcript.append(message)
            logger.debug("%s", line.rstrip("\n"))
            self._notify(EVENT_LOG_MESSAGE, message=line)

    def last_log_line(self) -> str:
        return self._transcript.last_line()

    def dump_log(self) -> str:
        return self._transcript.dump_all()

    # ── History ──────────────────────────────────────────────────

    def last_command(self) -> str:
        """Most recently executed line, or "" if none."""
        return self._history[0] if self._history else ""

    def prev_command(self, index: int) -> str:
        """
        Line entered ``index`` steps back (0 = the most recent one).

        Returns "" when there is no such entry.
        """
        if index < 0 or index >= len(self._history):
            return ""
        return self._history[index]

    # ── Command enumeration ──────────────────────────────────────

    def num_commands(self) -> int:
        return self._registry.count()

    def command(self, index: int) -> ConsoleCommand:
        """
        Raises:
            CommandIndexError: If ``index`` is out of range.
        """
        return self._registry.at(index)

    # ── Observer pattern ─────────────────────────────────────────

    def subscribe(self, event: str, callback: Callable[..., Any]) -> None:
        """
        Register a callback for a console event.

        Events:
            - console_execute     (line=<raw input>)
            - console_logmessage  (message=<terminated transcript line>)
        """
        self._listeners.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[..., Any]) -> None:
        """Remove a previously registered callback."""
        listeners = self._listeners.get(event, [])
        if callback in listeners:
            listeners.remove(callback)

    def _notify(self, event: str, **kwargs: Any) -> None:
        """Fire all callbacks registered for the given event."""
        for cb in list(self._listeners.get(event, [])):
            try:
                cb(**kwargs)
            except Exception as exc:
                logger.error("Observer callback failed for '%s': %s", event, exc)

    # ── Dunder ───────────────────────────────────────────────────

    def __repr__(self) -> str:
        return (
            f"Console(commands={self._registry.count()}, "
            f"variables={len(self._variables)}, "
            f"log_lines={len(self._transcript)}, "
            f"history={len(self._history)})"
        )

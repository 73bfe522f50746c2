"""
    ConsolePlatform — the process-wide console context.

    Design Patterns applied
    ───────────────────────
    • Facade             – single entry-point for the host application;
                           hides the variable store, the console and
                           command pack discovery.
    • Dependency Injection – exactly one platform is built at start-up
                           (``create_platform``) and passed by reference
                           to whoever needs it; there is no hidden
                           global instance.
    • Strategy           – pluggable command packs and tokenizer.
"""
import logging
from typing import Any, Iterable, List, Optional

from console_api.models.variable import Variable, VariableFlags
from console_api.plugins.base import CommandPackPlugin, Tokenizer
from console_api.types import VariableType
from console_services.variable_store import VariableStore

from .cli.commands import BuiltinCommandPack
from .cli.console import Console
from .config import ConsoleConfig
from .plugin_loader import PluginLoader, create_command_pack_loader

logger = logging.getLogger(__name__)


class ConsolePlatform:
    """
    Central context object.

    Manages:
        • The variable store shared by the console and the host.
        • The console (commands, transcript, history).
        • Command pack discovery and registration.
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        variables: Optional[VariableStore] = None,
        tokenizer: Optional[Tokenizer] = None,
        pack_loader: Optional[PluginLoader[CommandPackPlugin]] = None,
    ):
        """
        Initialize the platform.  Prefer ``create_platform()``, which also
        runs the command registration phase.

        Args:
            config:      Console configuration.
            variables:   Existing store to share; a new one is made otherwise.
            tokenizer:   Line tokenizer; defaults to ``ShlexTokenizer``.
            pack_loader: Loader used by ``load_plugin_packs``.
        """
        self._config: ConsoleConfig = config or ConsoleConfig()
        self._variables = (
            variables if variables is not None
            else VariableStore(self._config.float_precision)
        )
        self._console = Console(self._variables, tokenizer, self._config)
        # PluginLoader defines __len__, so an empty loader is falsy
        self._pack_loader: PluginLoader[CommandPackPlugin] = (
            pack_loader if pack_loader is not None
            else create_command_pack_loader(self._config.plugin_group)
        )
        self._packs: List[str] = []

        logger.info("ConsolePlatform initialized.")

    # ── Accessors ────────────────────────────────────────────────

    @property
    def config(self) -> ConsoleConfig:
        return self._config

    @property
    def variables(self) -> VariableStore:
        return self._variables

    @property
    def console(self) -> Console:
        return self._console

    # ── Command packs ────────────────────────────────────────────

    def register_pack(self, pack: CommandPackPlugin) -> None:
        """
        Register every command of a pack.

        Raises:
            DuplicateCommandError: If the pack reuses a registered name.
        """
        before = self._console.num_commands()
        pack.register_all(self._console)
        self._packs.append(pack.get_plugin_name())
        logger.info("Registered pack '%s' (%d command(s))",
                    pack.get_plugin_name(), self._console.num_commands() - before)

    def load_plugin_packs(self) -> List[str]:
        """
        Register every command pack found under the configured
        entry-point group.

        Returns:
            Entry-point names of the registered packs.
        """
        names = self._pack_loader.get_names()
        logger.info("Found %d plugin pack(s) in '%s'",
                    len(self._pack_loader), self._config.plugin_group)
        for name in names:
            self.register_pack(self._pack_loader.get(name))
        return names

    def get_pack_names(self) -> List[str]:
        """Names of the registered packs, in registration order."""
        return list(self._packs)

    # ── Variables ────────────────────────────────────────────────

    def declare_variable(
        self,
        name: str,
        var_type: VariableType,
        initial_value: Optional[Any] = None,
        flags: VariableFlags = VariableFlags.NONE,
    ) -> Variable:
        """Shortcut for ``variables.declare``."""
        return self._variables.declare(name, var_type, initial_value, flags)

    # ── Dispatch ─────────────────────────────────────────────────

    def execute(self, line: str) -> None:
        self._console.execute(line)

    def __repr__(self) -> str:
        return f"ConsolePlatform(packs={self._packs}, console={self._console!r})"


def create_platform(
    config: Optional[ConsoleConfig] = None,
    packs: Iterable[CommandPackPlugin] = (),
    **kwargs: Any,
) -> ConsolePlatform:
    """
    Build the platform and run the start-up registration phase:
    built-in commands, then ``packs``, then installed plugin packs
    (when ``config.load_plugins`` is set).

    Raises:
        DuplicateCommandError: If two packs register the same name.
    """
    platform = ConsolePlatform(config, **kwargs)
    platform.register_pack(BuiltinCommandPack())
    for pack in packs:
        platform.register_pack(pack)
    if platform.config.load_plugins:
        platform.load_plugin_packs()
    return platform

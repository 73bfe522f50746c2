"""
    Generic plugin discovery and loading via entry_points.

    Design Pattern: Service Locator / Registry
    ────────────────────────────────────────────
    Discovers all installed command packs at runtime by scanning Python
    package entry_points.  Discovery only finds the packs; registering
    their commands is an explicit step of platform start-up.
"""
import importlib.metadata
import logging
from typing import Dict, Generic, Iterable, List, Optional, Type, TypeVar

from console_api.plugins.base import CommandPackPlugin

from .config import COMMAND_PACK_EP_GROUP

logger = logging.getLogger(__name__)

# Generic type variable bounded to plugin ABCs
TPlugin = TypeVar('TPlugin')


class PluginLoader(Generic[TPlugin]):
    """
    Finds the plugins of one base class advertised under one entry-point
    group and instantiates each of them once.

    Usage:
        loader = PluginLoader(CommandPackPlugin, 'command_console.command_pack')
        for name in loader.get_names():
            pack = loader.get(name)
    """

    def __init__(self, plugin_base_class: Type[TPlugin], group: str):
        """
        Args:
            plugin_base_class: The ABC that every discovered plugin must subclass.
            group:             The entry-point group to scan.
        """
        self._base_class = plugin_base_class
        self._group = group
        self._plugins: Dict[str, TPlugin] = {}
        self._loaded = False

    def _group_entry_points(self) -> Iterable:
        found = importlib.metadata.entry_points()
        # Python 3.10+ returns EntryPoints; 3.8/3.9 return a dict
        if hasattr(found, 'select'):
            return found.select(group=self._group)
        if isinstance(found, dict):
            return found.get(self._group, [])
        return [ep for ep in found if ep.group == self._group]

    def _instantiate(self, ep) -> Optional[TPlugin]:
        try:
            plugin_cls = ep.load()
            if not isinstance(plugin_cls, type) or not issubclass(plugin_cls, self._base_class):
                logger.warning("Plugin '%s' does not subclass %s, skipped.",
                               ep.name, self._base_class.__name__)
                return None
            plugin = plugin_cls()
        except Exception as exc:
            logger.error("Failed to load plugin '%s': %s", ep.name, exc)
            return None
        logger.info("Loaded plugin: %s (%s)", ep.name, plugin_cls.__name__)
        return plugin

    def load_all(self) -> Dict[str, TPlugin]:
        """
        Discover and instantiate every plugin of the group.  Runs once;
        later calls return the same instances.

        Returns:
            Dict mapping entry-point name → plugin instance.
        """
        if self._loaded:
            return self._plugins
        try:
            entry_points = list(self._group_entry_points())
        except Exception as exc:
            logger.error("Entry-point discovery failed: %s", exc)
            entry_points = []
        for ep in entry_points:
            plugin = self._instantiate(ep)
            if plugin is not None:
                self._plugins[ep.name] = plugin
        self._loaded = True
        return self._plugins

    def get(self, name: str) -> Optional[TPlugin]:
        """Plugin registered under ``name``, or None."""
        return self.load_all().get(name)

    def get_names(self) -> List[str]:
        """Sorted entry-point names of the usable plugins."""
        return sorted(self.load_all())

    def __len__(self) -> int:
        return len(self.load_all())

    def __repr__(self) -> str:
        return (
            f"PluginLoader(base={self._base_class.__name__}, "
            f"group='{self._group}', loaded={len(self._plugins)})"
        )


def create_command_pack_loader(group: str = COMMAND_PACK_EP_GROUP) -> PluginLoader[CommandPackPlugin]:
    """Create a loader for command pack plugins."""
    return PluginLoader(CommandPackPlugin, group)

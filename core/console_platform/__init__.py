"""
Console Platform — core package.

Public API:
    ConsolePlatform     – process-wide context object (Facade)
    create_platform     – builds the platform and registers command packs
    Console             – line dispatcher, transcript and history
    ConsoleConfig       – top-level configuration
    PluginLoader        – generic plugin discovery
"""
from .core import ConsolePlatform, create_platform
from .cli.console import Console
from .config import ConsoleConfig
from .plugin_loader import PluginLoader, create_command_pack_loader

__all__ = [
    'ConsolePlatform',
    'create_platform',
    'Console',
    'ConsoleConfig',
    'PluginLoader',
    'create_command_pack_loader',
]

# tests/conftest.py
"""
Shared test fixtures.
Stub console: built-in commands plus one variable of every type.
"""
import pytest

from console_api.models.variable import VariableFlags
from console_api.types import VariableType
from console_platform.cli.commands import BuiltinCommandPack
from console_platform.cli.console import Console
from console_platform.config import ConsoleConfig
from console_platform.core import create_platform
from console_services.variable_store import VariableStore


class SpyHandler:
    """Command handler that records every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, console, args):
        self.calls.append(list(args))

    @property
    def call_count(self) -> int:
        return len(self.calls)


# ── Variable definitions ─────────────────────────────────────────
_VARIABLES = [
    ("r_fullscreen",  VariableType.BOOLEAN, False,     VariableFlags.NONE),
    ("r_width",       VariableType.INTEGER, 640,       VariableFlags.NONE),
    ("snd_volume",    VariableType.FLOAT,   0.75,      VariableFlags.NONE),
    ("player_name",   VariableType.STRING,  "doomguy", VariableFlags.NONE),
    ("app_version",   VariableType.STRING,  "3.1.0",   VariableFlags.READ_ONLY | VariableFlags.NO_SAVE),
]


def _build_store() -> VariableStore:
    store = VariableStore()
    for name, var_type, value, flags in _VARIABLES:
        store.declare(name, var_type, value, flags)
    return store


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def store() -> VariableStore:
    """Store with one variable of every type and one read-only string."""
    return _build_store()


@pytest.fixture
def empty_store() -> VariableStore:
    return VariableStore()


@pytest.fixture
def console(store) -> Console:
    """Console over the stub store, with the built-in commands registered."""
    con = Console(store)
    BuiltinCommandPack().register_all(con)
    return con


@pytest.fixture
def bare_console(empty_store) -> Console:
    """Console with no commands and no variables."""
    return Console(empty_store)


@pytest.fixture
def platform(store):
    """Platform over the stub store; plugin discovery disabled."""
    return create_platform(ConsoleConfig(load_plugins=False), variables=store)


@pytest.fixture
def spy() -> SpyHandler:
    return SpyHandler()

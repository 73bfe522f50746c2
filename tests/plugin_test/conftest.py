import pytest

from command_pack_match.plugin import MatchCommandPack
from console_platform.cli.console import Console
from console_services.variable_store import VariableStore


@pytest.fixture
def plugin():
    return MatchCommandPack()


@pytest.fixture
def match_console(plugin):
    con = Console(VariableStore())
    plugin.register_all(con)
    return con

from fnmatch import fnmatchcase
from typing import List

from console_api.models.command import ConsoleCommand
from console_api.plugins import CommandPackPlugin


def testmatch(console, args: List[str]) -> None:
    """testmatch <text> <pattern>: shell-style wildcards (*, ?, [seq])."""
    if fnmatchcase(args[0], args[1]):
        console.log_message("Match")
    else:
        console.log_message("No Match")


class MatchCommandPack(CommandPackPlugin):

    def get_plugin_name(self) -> str:
        return "Wildcard Match"

    def register_all(self, console) -> None:
        console.add_command(ConsoleCommand(
            "testmatch",
            testmatch,
            2,
            "Check text against a wildcard pattern: testmatch <text> <pattern>",
        ))

"""
    Built-in console commands.

    Each handler takes ``(console, args)`` and reports through
    ``console.log_message``.  The ``COMMANDS`` table is registered by
    ``BuiltinCommandPack.register_all`` during platform start-up;
    nothing is registered at import time.

    Supported commands:
    ───────────────────
        echo <text>         print the first argument
        cmdlist             list every command
        cvarlist            list every variable
        help [<command>]    describe commands
"""
from __future__ import annotations

from typing import List

from console_api.models.command import ConsoleCommand
from console_api.plugins.base import CommandPackPlugin


def echo(console, args: List[str]) -> None:
    """Print the first argument; the rest are ignored."""
    console.log_message(args[0])


def cmdlist(console, args: List[str]) -> None:
    console.log_message(f"{console.num_commands()} Valid Commands:")
    for index in range(console.num_commands()):
        console.log_message(f'"{console.command(index).name}"')


def cvarlist(console, args: List[str]) -> None:
    names = console.variables.names()
    console.log_message(f"{len(names)} CVars:")
    for name in names:
        console.log_message(name)


def _summary(command) -> str:
    return f"{command.name} - {command.description or '(no description)'}"


def help_cmd(console, args: List[str]) -> None:
    if args:
        command = console.registry.find_by_name(args[0])
        if command is None:
            console.log_message(f'No help for "{args[0]}"')
            return
        console.log_message(_summary(command))
        console.log_message(f"Minimum arguments: {command.min_args}")
        return

    for command in console.registry:
        console.log_message(_summary(command))


COMMANDS = [
    ConsoleCommand("echo", echo, 1, "Print the first argument to the console"),
    ConsoleCommand("cmdlist", cmdlist, 0, "List all valid console commands"),
    ConsoleCommand("cvarlist", cvarlist, 0, "List all console variables"),
    ConsoleCommand("help", help_cmd, 0, "Describe all commands, or one: help <command>"),
]


class BuiltinCommandPack(CommandPackPlugin):

    def get_plugin_name(self) -> str:
        return "Builtin Commands"

    def register_all(self, console) -> None:
        for command in COMMANDS:
            console.add_command(command)

"""
Console models — variables and commands.
"""
from .variable import Variable, VariableFlags
from .command import ConsoleCommand, CommandHandler

__all__ = ['Variable', 'VariableFlags', 'ConsoleCommand', 'CommandHandler']

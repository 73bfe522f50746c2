"""
Command Console API — models and plugin contracts.
"""
from .types import VariableType, VariableValue, TypeCoercer
from .models.variable import Variable, VariableFlags
from .models.command import ConsoleCommand, CommandHandler
from .plugins.base import CommandPackPlugin, Tokenizer

__all__ = [
    'VariableType',
    'VariableValue',
    'TypeCoercer',
    'Variable',
    'VariableFlags',
    'ConsoleCommand',
    'CommandHandler',
    'CommandPackPlugin',
    'Tokenizer',
]

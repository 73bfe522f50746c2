"""
Console services — variable store, tokenizer, and exceptions.
"""
from .variable_store import VariableStore
from .tokenizer import ShlexTokenizer
from .exceptions import (
    ConsoleError,
    DuplicateCommandError,
    DuplicateVariableError,
    CommandIndexError,
)

__all__ = [
    'VariableStore',
    'ShlexTokenizer',
    'ConsoleError',
    'DuplicateCommandError',
    'DuplicateVariableError',
    'CommandIndexError',
]

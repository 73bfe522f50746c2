"""
Plugin contracts — abstract base classes for command packs and tokenizers.
"""
from .base import CommandPackPlugin, Tokenizer

__all__ = ['CommandPackPlugin', 'Tokenizer']

"""
    Default tokenizer — shell-like splitting of a console line.
"""
import shlex
from typing import List

from console_api.plugins.base import Tokenizer


class ShlexTokenizer(Tokenizer):
    """
    Splits on whitespace and honors single / double quotes.

    Backslashes are ordinary characters, so paths such as ``C:\\doom``
    survive unchanged.

    Example:
        >>> ShlexTokenizer().tokenize('echo "hello world" again')
        ['echo', 'hello world', 'again']
    """

    def tokenize(self, text: str) -> List[str]:
        if not text:
            return []
        lexer = shlex.shlex(text, posix=True)
        lexer.whitespace_split = True
        lexer.commenters = ''
        lexer.escape = ''
        try:
            return list(lexer)
        except ValueError:
            # Fallback: simple split if quotes are malformed
            return text.split()

"""
Tokenizer Driver
================

Runs the longest-match scanner across the whole input and collects the
tokens.

The driver starts at offset 0, asks the scanner for the token there,
appends it and moves past it, until the end of the input. If the scanner
finds nothing at some offset the whole call fails with a LexError. There
is no recovery and no partial result: the caller gets either every token
or the error.

Because every character lands in some token, joining the token texts
gives back the original source (see untokenize()).

Example Usage
-------------
>>> from clexer.lexer import tokenize
>>> for token in tokenize("char c = 3;"):
...     print(token)
Token(KEYWORD, 'char', 0)
Token(SPACE, ' ', 4)
Token(IDENTIFIER, 'c', 5)
Token(SPACE, ' ', 6)
Token(ASSIGN, '=', 7)
Token(SPACE, ' ', 8)
Token(LITERAL, '3', 9)
Token(SEMICOLON, ';', 10)
"""

from typing import Iterable
import logging

from clexer.errors import LexError, SourceLocation
from clexer.patterns import DEFAULT_TABLE, PatternTable
from clexer.scanner import longest_match
from clexer.tokens import Token

logger = logging.getLogger(__name__)


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes source text with a pattern table.

    Usage:
        lexer = Lexer(source_text, filename)
        tokens = lexer.tokenize()

    Each call to tokenize() starts from scratch, so calling it twice gives
    two equal lists. The table is only read, never modified.

    Attributes:
        source: The source text being tokenized
        filename: Name of the source (for error reporting)
        table: The pattern table used by the scanner
    """

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        table: PatternTable = DEFAULT_TABLE,
    ):
        self.source = source
        self.filename = filename
        self.table = table

    def tokenize(self) -> list[Token]:
        """
        Tokenize the whole source.

        Returns:
            Every token of the source, in order

        Raises:
            LexError: If no pattern matches at some offset
        """
        logger.debug("tokenizing %s (%d chars)", self.filename, len(self.source))

        tokens: list[Token] = []
        pos = 0
        end = len(self.source)

        while pos < end:
            found = longest_match(self.source, pos, self.table)
            if found is None:
                raise self._error(pos)

            token, length = found
            tokens.append(token)
            pos += length

        logger.debug("tokenized %s: %d tokens", self.filename, len(tokens))
        return tokens

    def _error(self, pos: int) -> LexError:
        """Create a LexError for the unmatched offset pos."""
        location = locate(self.source, pos, self.filename)
        logger.debug("no pattern matches at %s", location)
        return LexError(
            pos,
            location=location,
            char=self.source[pos],
            source_line=_line_at(self.source, pos),
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(
    source: str,
    filename: str = "<input>",
    table: PatternTable = DEFAULT_TABLE,
) -> list[Token]:
    """
    Tokenize source text.

    Args:
        source: The source text
        filename: Name used in error messages
        table: Pattern table to scan with

    Returns:
        Every token of the source, in order

    Raises:
        LexError: If no pattern matches at some offset
    """
    return Lexer(source, filename, table).tokenize()


def untokenize(tokens: Iterable[Token]) -> str:
    """Join token texts back into source text."""
    return "".join(token.text for token in tokens)


def significant_tokens(tokens: Iterable[Token]) -> list[Token]:
    """Drop whitespace and comment tokens."""
    return [token for token in tokens if not token.is_trivia()]


def locate(source: str, pos: int, filename: str = "<input>") -> SourceLocation:
    """
    Convert an offset into a 1-indexed line/column location.

    Lines are split on "\\n" only; a "\\r" counts as an ordinary column.
    """
    line = source.count("\n", 0, pos) + 1
    column = pos - (source.rfind("\n", 0, pos) + 1) + 1
    return SourceLocation(filename, line, column)


def _line_at(source: str, pos: int) -> str:
    """Return the text of the line containing pos, without its newline."""
    line_start = source.rfind("\n", 0, pos) + 1
    line_end = source.find("\n", pos)
    if line_end == -1:
        line_end = len(source)
    return source[line_start:line_end]

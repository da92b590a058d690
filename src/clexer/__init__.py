"""
clexer - Longest-Match Tokenizer for a Small C-like Language
============================================================

This package turns source text into a flat list of classified tokens.
It does no parsing: whitespace, newlines and comments come out as tokens
too, so the token texts joined together give back the input exactly.

Main Components
---------------
- **tokens**: TokenKind enumeration and the immutable Token record
- **patterns**: The ordered pattern table (keyword before identifier)
- **scanner**: Longest anchored match at an offset, ties by table order
- **lexer**: The driver that scans the whole input, or raises LexError
- **cli**: The ``clex`` command-line tool

Quick Start
-----------
    >>> from clexer import tokenize
    >>> [t.kind.name for t in tokenize("x++;")]
    ['IDENTIFIER', 'INCREMENT', 'SEMICOLON']

Or use the command-line tool:
    $ clex hello.c
    $ clex --format json --significant hello.c
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from clexer.config import LexerConfig
from clexer.errors import ClexerError, LexError, SourceLocation
from clexer.lexer import Lexer, locate, significant_tokens, tokenize, untokenize
from clexer.patterns import DEFAULT_TABLE, Pattern, PatternTable, build_pattern_table
from clexer.scanner import longest_match
from clexer.tokens import DEFAULT_KEYWORDS, Token, TokenKind

__all__ = [
    # Version
    "__version__",
    # Tokens
    "Token",
    "TokenKind",
    "DEFAULT_KEYWORDS",
    # Pattern table
    "Pattern",
    "PatternTable",
    "DEFAULT_TABLE",
    "build_pattern_table",
    # Scanning
    "longest_match",
    "Lexer",
    "tokenize",
    "untokenize",
    "significant_tokens",
    "locate",
    # Configuration
    "LexerConfig",
    # Errors
    "ClexerError",
    "LexError",
    "SourceLocation",
]

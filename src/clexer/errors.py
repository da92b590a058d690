"""
clexer Error Hierarchy
======================

This module defines the exception hierarchy for the clexer package.
All exceptions inherit from ClexerError, allowing callers to catch every
lexer-related failure with a single except clause.

Exception Hierarchy
-------------------
ClexerError (base)
└── LexError - no pattern matches at the current position

Error Message Format
--------------------
Errors that know where they happened follow this format:

    filename:line:column: error: description
        source_line_text
            ^ (pointer to error location)
    hint: suggestion for fixing (when available)

Example:
    hello.c:1:9: error: no pattern matches input at offset 8
        int a = @;
                ^
    hint: '@' (0x40) is not part of the language alphabet
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class ClexerError(Exception):
    """
    Base exception for all clexer errors.

    All exceptions in the package inherit from this class:

        try:
            tokens = tokenize(source)
        except ClexerError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source text for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexError(ClexerError):
    """
    No pattern in the table matches at the current position.

    This is the only failure the tokenizer reports. Scanning stops at
    the first unmatched position; no partial token list is returned.

    Attributes:
        offset: Zero-based offset where scanning stopped
        location: Line/column of the offset (optional)
        char: The character found at the offset (optional)
        source_line: The source text of the offending line (optional)
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        offset: int,
        location: Optional[SourceLocation] = None,
        char: Optional[str] = None,
        source_line: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.offset = offset
        self.location = location
        self.char = char
        self.source_line = source_line

        if hint is None and char:
            hint = _describe_char(char)
        self.hint = hint

        self.message = f"no pattern matches input at offset {offset}"
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            hello.c:2:5: error: no pattern matches input at offset 12
                x = #3;
                    ^
            hint: '#' (0x23) is not part of the language alphabet
        """
        parts = []

        # Location prefix
        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


def _describe_char(char: str) -> str:
    """Build the default hint for an unmatched character."""
    if char == '"':
        return "unterminated string literal"
    if char == "'":
        return "unterminated or malformed character literal"
    if char == "\\":
        return "'\\' cannot start a token; backslashes are only valid inside literals"
    if char == "/":
        return "unterminated block comment or stray '/'"
    return f"{char!r} (0x{ord(char):02X}) is not part of the language alphabet"

"""
Longest-Match Scanner
=====================

Picks the token that starts at a given offset.

Every entry of the pattern table is tried anchored at the offset. The
longest match wins; on equal length the entry that comes first in the
table wins. That is how "++" beats "+" and how "int" comes out as a
keyword rather than an identifier.

Example
-------
>>> from clexer.scanner import longest_match
>>> longest_match("x++;", 1)
(Token(INCREMENT, '++', 1), 2)
>>> longest_match("x @", 2) is None
True
"""

from typing import Optional

from clexer.patterns import DEFAULT_TABLE, PatternTable
from clexer.tokens import Token


def longest_match(
    source: str,
    pos: int,
    table: PatternTable = DEFAULT_TABLE,
) -> Optional[tuple[Token, int]]:
    """
    Find the longest anchored match at pos.

    Args:
        source: The full source text
        pos: Offset to scan from; must be a valid index into source
        table: Pattern table to choose from

    Returns:
        (token, length) for the winning entry, or None if nothing matches

    Raises:
        ValueError: If pos is outside the source
    """
    if not 0 <= pos < len(source):
        raise ValueError(f"scan offset {pos} out of range for source of length {len(source)}")

    best_pattern = None
    best_length = 0

    for pattern in table:
        length = pattern.match_at(source, pos)
        # Strictly greater: on a tie the earlier entry keeps the win
        if length > best_length:
            best_pattern = pattern
            best_length = length

    if best_pattern is None:
        return None

    token = Token(best_pattern.kind, pos, source[pos:pos + best_length])
    return token, best_length

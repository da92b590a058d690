"""
Pattern Table
=============

The ordered list of (regex, kind) pairs the scanner chooses among.

Order is part of the contract. The scanner prefers the longest match and
breaks ties by table position, so the KEYWORD entry has to come before the
IDENTIFIER entry: "int" matches both with length 3 and must come out as a
keyword. The single-character operators do not need to follow their
two-character forms, since "++" is longer than "+" and wins on length.

Tables are built once and never modified. DEFAULT_TABLE is built at import
time for the default keyword set; build_pattern_table() makes a separate
table for another keyword set.

| #  | Kind            | Regex                                      |
|----|-----------------|--------------------------------------------|
| 1  | ASSIGN          | =                                          |
| 2  | LPAREN          | \\(                                        |
| 3  | RPAREN          | \\)                                        |
| 4  | LBRACE          | \\{                                        |
| 5  | RBRACE          | \\}                                        |
| 6  | SEMICOLON       | ;                                          |
| 7  | PLUS            | \\+                                        |
| 8  | MINUS           | -                                          |
| 9  | INCREMENT       | \\+\\+                                     |
| 10 | DECREMENT       | --                                         |
| 11 | KEYWORD         | char|int                                   |
| 12 | IDENTIFIER      | [a-zA-Z_]\\w*                              |
| 13 | LITERAL         | string, char or decimal integer            |
| 14 | COMMENT         | // to end of line, or /* ... */            |
| 15 | SPACE           | one or more ' '                            |
| 16 | NEWLINE         | \\n                                        |
| 17 | CARRIAGE_RETURN | \\r                                        |
| 18 | TAB             | \\t                                        |
"""

from dataclasses import dataclass
from typing import Iterable, Iterator
import re

from clexer.tokens import DEFAULT_KEYWORDS, TokenKind


IDENTIFIER_REGEX = r"[a-zA-Z_]\w*"

LITERAL_REGEX = "|".join((
    r'"(?:\\.|[^\\"])*?"',      # string literal, escapes allowed
    r"'[^']?'",                 # plain char literal: '', 'a', '\'
    r"'\\.+?'",                 # escaped char literal: '\n', '\x41'
    r"\d+",                     # decimal integer
))

COMMENT_REGEX = "|".join((
    r"//.*",                    # single-line comment, stops before \n
    r"/\*[\s\S]*?\*/",          # block comment, may span lines
))


# =============================================================================
# Table Entries
# =============================================================================

@dataclass(frozen=True)
class Pattern:
    """
    One entry of the pattern table.

    Attributes:
        regex: Compiled regular expression for the lexeme
        kind: Token kind assigned to text matched by regex
    """
    regex: re.Pattern
    kind: TokenKind

    def match_at(self, source: str, pos: int) -> int:
        """
        Return the length of the match anchored at pos, or 0 for none.

        re.Pattern.match(source, pos) only matches at pos itself, so a
        lexeme further along in the text is never a candidate.
        """
        found = self.regex.match(source, pos)
        if found is None:
            return 0
        return found.end() - pos


class PatternTable:
    """
    Immutable, ordered sequence of Pattern entries.

    The table is read-only once constructed and can be shared between
    any number of concurrent tokenize calls.

    Attributes:
        keywords: The reserved words recognised by the KEYWORD entry
    """

    __slots__ = ("_entries", "keywords")

    def __init__(self, entries: Iterable[Pattern], keywords: tuple[str, ...]):
        object.__setattr__(self, "_entries", tuple(entries))
        object.__setattr__(self, "keywords", keywords)

    def __setattr__(self, name, value):
        raise AttributeError("PatternTable is immutable")

    def __iter__(self) -> Iterator[Pattern]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> Pattern:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"PatternTable({len(self._entries)} entries, keywords={self.keywords!r})"

    def kinds(self) -> list[TokenKind]:
        """Return the entry kinds in priority order."""
        return [entry.kind for entry in self._entries]


# =============================================================================
# Table Construction
# =============================================================================

def _keyword_regex(keywords: tuple[str, ...]) -> str:
    """
    Build the alternation for the KEYWORD entry.

    Alternation takes the first branch that matches, so longer keywords
    go first; otherwise "in" would shadow "int".
    """
    ordered = sorted(keywords, key=lambda word: (-len(word), word))
    return "|".join(re.escape(word) for word in ordered)


def _validate_keywords(keywords: Iterable[str]) -> tuple[str, ...]:
    """Deduplicate keywords, keeping order, and reject unusable ones."""
    result: list[str] = []
    for word in keywords:
        if not word:
            raise ValueError("keywords must be non-empty")
        if not re.fullmatch(IDENTIFIER_REGEX, word):
            raise ValueError(f"keyword {word!r} is not a valid identifier")
        if word not in result:
            result.append(word)

    if not result:
        raise ValueError("at least one keyword is required")
    return tuple(result)


def build_pattern_table(keywords: Iterable[str] = DEFAULT_KEYWORDS) -> PatternTable:
    """
    Build a pattern table for the given keyword set.

    Args:
        keywords: Reserved words to classify as KEYWORD instead of IDENTIFIER

    Returns:
        A new immutable PatternTable

    Raises:
        ValueError: If the keyword set is empty or holds a non-identifier
    """
    words = _validate_keywords(keywords)

    definitions = (
        (r"=", TokenKind.ASSIGN),
        (r"\(", TokenKind.LPAREN),
        (r"\)", TokenKind.RPAREN),
        (r"\{", TokenKind.LBRACE),
        (r"\}", TokenKind.RBRACE),
        (r";", TokenKind.SEMICOLON),
        (r"\+", TokenKind.PLUS),
        (r"-", TokenKind.MINUS),
        (r"\+\+", TokenKind.INCREMENT),
        (r"--", TokenKind.DECREMENT),
        (_keyword_regex(words), TokenKind.KEYWORD),
        # KEYWORD must stay ahead of IDENTIFIER
        (IDENTIFIER_REGEX, TokenKind.IDENTIFIER),
        (LITERAL_REGEX, TokenKind.LITERAL),
        (COMMENT_REGEX, TokenKind.COMMENT),
        (r" +", TokenKind.SPACE),
        (r"\n", TokenKind.NEWLINE),
        (r"\r", TokenKind.CARRIAGE_RETURN),
        (r"\t", TokenKind.TAB),
    )

    return PatternTable(
        (Pattern(re.compile(regex), kind) for regex, kind in definitions),
        words,
    )


DEFAULT_TABLE: PatternTable = build_pattern_table()

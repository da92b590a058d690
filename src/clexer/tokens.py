"""
Token Model
===========

Token kinds and the immutable token record produced by the lexer.

Every byte of input ends up in exactly one token, so whitespace and
comments are tokens too. Use Token.is_trivia() to tell them apart from
the tokens a parser cares about.
"""

from dataclasses import dataclass
from enum import Enum, auto


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Lexical categories of the language.

    This is a closed set: the pattern table maps every entry onto one of
    these members, and nothing else can appear in a token stream.
    """

    # === Assignment and Delimiters ===
    ASSIGN = auto()             # =
    LPAREN = auto()             # (
    RPAREN = auto()             # )
    LBRACE = auto()             # {
    RBRACE = auto()             # }
    SEMICOLON = auto()          # ;

    # === Arithmetic Operators ===
    PLUS = auto()               # +
    MINUS = auto()              # -
    INCREMENT = auto()          # ++
    DECREMENT = auto()          # --

    # === Words and Literals ===
    KEYWORD = auto()            # reserved words (char, int)
    IDENTIFIER = auto()         # variable names
    LITERAL = auto()            # "string", 'c', 123

    # === Trivia ===
    COMMENT = auto()            # // ... or /* ... */
    SPACE = auto()              # run of ' '
    NEWLINE = auto()            # \n
    CARRIAGE_RETURN = auto()    # \r
    TAB = auto()                # \t


# Reserved words recognised by the default pattern table
DEFAULT_KEYWORDS: tuple[str, ...] = ("char", "int")

TRIVIA_KINDS = frozenset({
    TokenKind.COMMENT,
    TokenKind.SPACE,
    TokenKind.NEWLINE,
    TokenKind.CARRIAGE_RETURN,
    TokenKind.TAB,
})


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified piece of source text.

    Attributes:
        kind: The TokenKind classification
        pos: Zero-based offset of the first character in the source, counted
            in characters (code points) of the str, not in encoded bytes
        text: The exact source text matched for this token
    """
    kind: TokenKind
    pos: int
    text: str

    def __repr__(self) -> str:
        """Format token for debugging output."""
        return f"Token({self.kind.name}, {self.text!r}, {self.pos})"

    @property
    def end(self) -> int:
        """Offset just past the last character of this token."""
        return self.pos + len(self.text)

    def is_trivia(self) -> bool:
        """Return True for whitespace and comment tokens."""
        return self.kind in TRIVIA_KINDS

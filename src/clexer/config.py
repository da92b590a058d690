"""
Lexer Configuration
===================

Settings for a tokenize run. Configuration can come from:
- Default values (defined here)
- Environment variables (LexerConfig.from_env)
- Command-line options (the clex tool overrides individual fields)

Environment variables:
    CLEXER_KEYWORDS: Comma-separated keyword list, e.g. "char,int,void"
"""

from dataclasses import dataclass
import os

from clexer.patterns import DEFAULT_TABLE, PatternTable, build_pattern_table
from clexer.tokens import DEFAULT_KEYWORDS


@dataclass
class LexerConfig:
    """
    Configuration for tokenizing source text.

    Attributes:
        keywords: Reserved words classified as KEYWORD (default: char, int)
        filename: Name reported in error messages (default: "<input>")
    """
    keywords: tuple[str, ...] = DEFAULT_KEYWORDS
    filename: str = "<input>"

    @classmethod
    def from_env(cls) -> "LexerConfig":
        """
        Create a LexerConfig from environment variables.

        Unset or blank variables leave the defaults in place.
        """
        config = cls()

        if keywords := os.environ.get("CLEXER_KEYWORDS"):
            words = tuple(word.strip() for word in keywords.split(",") if word.strip())
            if words:
                config.keywords = words

        return config

    def build_table(self) -> PatternTable:
        """
        Return the pattern table for these settings.

        The default keyword set reuses DEFAULT_TABLE instead of compiling
        a new one.

        Raises:
            ValueError: If the keyword set is unusable
        """
        if tuple(self.keywords) == DEFAULT_TABLE.keywords:
            return DEFAULT_TABLE
        return build_pattern_table(self.keywords)

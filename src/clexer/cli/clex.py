"""
clex - Tokenizer Command-Line Interface
=======================================

This module implements the command-line interface for the tokenizer.
It reads a source file, tokenizes it and prints the tokens, or reports
the position where tokenizing failed.

Usage Examples
--------------
Print every token:
    $ clex hello.c

Skip whitespace and comments:
    $ clex -s hello.c

JSON output for other tools:
    $ clex --format json hello.c

Extra keywords:
    $ clex -k char -k int -k void hello.c
"""

import json
import logging
from pathlib import Path

import click

from clexer import __version__
from clexer.cli.errors import handle_cli_exception
from clexer.config import LexerConfig
from clexer.lexer import Lexer, significant_tokens
from clexer.tokens import Token

logger = logging.getLogger(__name__)


# =============================================================================
# Output Formatting
# =============================================================================

def format_text(tokens: list[Token]) -> str:
    """One line per token: offset, kind and quoted text, tab separated."""
    return "\n".join(
        f"{token.pos}\t{token.kind.name}\t{token.text!r}" for token in tokens
    )


def format_json(tokens: list[Token]) -> str:
    """
    JSON list of {"kind", "pos", "text"} objects.

    "pos" is a character offset into the decoded source, not a byte offset.
    """
    return json.dumps(
        [{"kind": token.kind.name, "pos": token.pos, "text": token.text} for token in tokens],
        indent=2,
    )


FORMATTERS = {
    "text": format_text,
    "json": format_json,
}


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(sorted(FORMATTERS), case_sensitive=False),
    default="text",
    help="Output format (default: text)",
)
@click.option(
    "-s", "--significant",
    is_flag=True,
    help="Omit whitespace and comment tokens",
)
@click.option(
    "-k", "--keyword",
    multiple=True,
    help="Keyword to recognise (can be repeated; replaces the default set)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="clex")
def main(
    input_file: Path,
    output_format: str,
    significant: bool,
    keyword: tuple[str, ...],
    verbose: bool,
) -> None:
    """
    Tokenize a source file of the small C-like language.

    INPUT_FILE is the source file to tokenize.
    Token offsets are character offsets into the UTF-8 decoded text.

    Every character of the file ends up in exactly one token, including
    spaces, newlines and comments. Tokenizing stops at the first
    character no pattern accepts, and the error reports its position.

    \b
    Examples:
        clex hello.c                 # All tokens as text
        clex -s hello.c              # Skip whitespace and comments
        clex -f json hello.c         # JSON output
        clex -k char -k void a.c     # Custom keyword set

    \b
    Keywords can also be set with CLEXER_KEYWORDS=char,int,void
    """
    setup_logging(verbose)

    try:
        config = LexerConfig.from_env()
        config.filename = str(input_file)
        if keyword:
            config.keywords = keyword

        table = config.build_table()
        logger.debug("keywords: %s", ", ".join(table.keywords))

        # Decode bytes directly so \r\n line endings reach the lexer intact
        source = input_file.read_bytes().decode("utf-8")

        tokens = Lexer(source, config.filename, table).tokenize()
        if significant:
            tokens = significant_tokens(tokens)

        output = FORMATTERS[output_format.lower()](tokens)
        if output:
            click.echo(output)

        logger.debug("printed %d tokens", len(tokens))

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()

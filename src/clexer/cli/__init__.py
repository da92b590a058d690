"""
clexer Command-Line Interface
=============================

This package provides the command-line tool for clexer:

- **clex**: Tokenize a source file and print its tokens

The tool is a Click-based CLI application with exit codes shared
through clexer.cli.errors.
"""

__all__ = ["clex"]

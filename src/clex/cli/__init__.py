"""
clex Command-Line Interface
===========================

This package provides the command-line tools for clex:

- **ctok**: tokenize a source file and print the tokens by line

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["ctok"]

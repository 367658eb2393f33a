"""
Scanner Configuration
=====================

Options that change how sources are read and which tokens are kept.
Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line flags (applied by the CLI on top of the environment)

Environment variables (all optional):
    CLEX_KEEP_COMMENTS: "0", "false", "no" or "off" to drop comment tokens
    CLEX_ENCODING: Encoding used to read source files
"""

from dataclasses import dataclass
import codecs
import os


_FALSE_VALUES = ("0", "false", "no", "off")
_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class ScannerOptions:
    """
    Scanner configuration options.

    Attributes:
        keep_comments: Emit comment tokens. When False, comments are still
                       scanned (an unterminated block comment is still an
                       error) but are not added to the token stream.
        encoding: Encoding used when reading source files from disk
    """
    keep_comments: bool = True
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> "ScannerOptions":
        """
        Create ScannerOptions from environment variables.

        Unrecognized values are ignored and the default is kept.

        Returns:
            ScannerOptions with values from environment variables
        """
        options = cls()

        if keep := os.environ.get("CLEX_KEEP_COMMENTS"):
            keep = keep.strip().lower()
            if keep in _FALSE_VALUES:
                options.keep_comments = False
            elif keep in _TRUE_VALUES:
                options.keep_comments = True

        if encoding := os.environ.get("CLEX_ENCODING"):
            try:
                codecs.lookup(encoding)
            except LookupError:
                pass  # Ignore unknown encodings
            else:
                options.encoding = encoding

        return options

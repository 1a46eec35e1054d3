"""Low-level scanning support for the signature grammar."""

from jvmsig.parser.cursor import END, Cursor, open_cursor

__all__ = ["END", "Cursor", "open_cursor"]

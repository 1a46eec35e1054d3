"""Forward-only cursor over signature text.

The grammar built on top of this is LL(1): every production can be
selected by looking at a single character, so the cursor never offers
more than one character of lookahead.
"""

from __future__ import annotations

from typing import Any

from jvmsig.core.config import get_config
from jvmsig.core.errors import GrammarError

# Returned by peek() once the input is exhausted.
END = ""

# Characters that can never appear inside an identifier.
_IDENTIFIER_TERMINATORS = frozenset(".;[/<>:")


class Cursor:
    """Scanner state for a single parse call.

    Besides the text and the current position, the cursor carries a side
    channel of objects recorded while parsing. The grammar layer treats it
    as opaque; the method and class signature parsers use it to collect
    type variable occurrences for back-link resolution.
    """

    def __init__(self, text: str) -> None:
        """Initialize a cursor at the start of the text.

        Args:
            text: The signature text to scan.
        """
        self._text = text
        self._position = 0
        self._recorded: list[Any] = []

    @property
    def text(self) -> str:
        return self._text

    @property
    def position(self) -> int:
        return self._position

    def peek(self) -> str:
        """Return the current character, or END if input is exhausted."""
        if self._position >= len(self._text):
            return END
        return self._text[self._position]

    def has_more(self) -> bool:
        return self._position < len(self._text)

    def advance(self) -> str:
        """Consume and return the current character.

        Raises:
            GrammarError: If the input is already exhausted.
        """
        if not self.has_more():
            raise self.error("Unexpected end of input")
        ch = self._text[self._position]
        self._position += 1
        return ch

    def expect(self, literal: str) -> None:
        """Consume the current character, which must equal ``literal``.

        Raises:
            GrammarError: If the current character is anything else.
        """
        ch = self.peek()
        if ch != literal:
            found = repr(ch) if ch else "end of input"
            raise self.error(f"Expected '{literal}', found {found}")
        self._position += 1

    def read_identifier(self) -> str:
        """Consume an identifier, stopping at the first terminator character.

        Raises:
            GrammarError: If no identifier character is present.
        """
        start = self._position
        while self.has_more() and self._text[self._position] not in _IDENTIFIER_TERMINATORS:
            self._position += 1
        if self._position == start:
            raise self.error("Expected identifier")
        return self._text[start:self._position]

    def record(self, item: Any) -> None:
        """Append an object to the side channel."""
        self._recorded.append(item)

    def take_recorded(self) -> list[Any]:
        """Return everything recorded so far, in order, and clear the channel."""
        recorded, self._recorded = self._recorded, []
        return recorded

    def error(self, message: str) -> GrammarError:
        """Build a GrammarError located at the current position."""
        return GrammarError(message, self._text, self._position)

    def __repr__(self) -> str:
        return f"Cursor(position={self._position}, text={self._text!r})"


def open_cursor(text: str) -> Cursor:
    """Create a cursor for a top-level parse call.

    Raises:
        GrammarError: If the text is longer than the configured maximum.
    """
    max_length = get_config().max_signature_length
    if len(text) > max_length:
        raise GrammarError(
            f"Signature exceeds maximum length of {max_length} characters", text, max_length
        )
    return Cursor(text)

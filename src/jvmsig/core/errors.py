"""Error types raised while parsing and serializing signatures."""

from __future__ import annotations


class GrammarError(Exception):
    """Malformed signature text.

    Raised as soon as a grammar production that has already committed
    finds input it cannot accept. The whole parse call is aborted.
    """

    def __init__(self, message: str, text: str, position: int) -> None:
        super().__init__(message)
        self.message = message
        self.text = text
        self.position = position

    def __str__(self) -> str:
        marked = f"{self.text[:self.position]} -->{self.text[self.position:]}"
        return f"{self.message} (at position {self.position}): {marked}"


class SerializationError(Exception):
    """Error during serialization or deserialization."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

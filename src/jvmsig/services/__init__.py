"""Services built on top of the signature parser."""

from jvmsig.services.batch_service import (
    BatchParseService,
    BatchResult,
    ParsedEntry,
    ParseFailure,
)

__all__ = [
    "BatchParseService",
    "BatchResult",
    "ParseFailure",
    "ParsedEntry",
]

"""Batch parsing of method signatures.

This module provides the BatchParseService, which parses many method
signatures in one go and records the ones that fail instead of stopping,
the way a classpath scan treats an unparseable signature as a skipped
symbol rather than a fatal error.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from jvmsig.core.config import get_config
from jvmsig.core.errors import GrammarError
from jvmsig.signatures.method import ClassContext, MethodTypeSignature

logger = logging.getLogger(__name__)


@dataclass
class ParsedEntry:
    """A signature that parsed successfully."""

    line: int
    text: str
    signature: MethodTypeSignature


@dataclass
class ParseFailure:
    """A signature that was skipped because of a grammar error."""

    line: int
    text: str
    message: str
    position: int


@dataclass
class BatchResult:
    """Result of a batch parse operation."""

    parsed: list[ParsedEntry] = field(default_factory=list)
    failures: list[ParseFailure] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Check if every signature parsed."""
        return len(self.failures) == 0

    @property
    def total(self) -> int:
        return len(self.parsed) + len(self.failures)

    def referenced_class_names(self) -> set[str]:
        """Union of the class names referenced by every parsed signature."""
        class_names: set[str] = set()
        for entry in self.parsed:
            entry.signature.get_all_referenced_class_names(class_names)
        return class_names


class BatchParseService:
    """Service for parsing many method signatures.

    Each signature is parsed independently; a grammar error either skips
    the entry or, with ``fail_fast``, is re-raised to the caller.
    """

    def __init__(
        self,
        class_info: ClassContext | None = None,
        fail_fast: bool | None = None,
    ) -> None:
        """Initialize the batch service.

        Args:
            class_info: Optional enclosing class context for every parse.
            fail_fast: Re-raise the first grammar error. Defaults to the
                ``fail_fast`` configuration setting.
        """
        self._class_info = class_info
        self._fail_fast = get_config().fail_fast if fail_fast is None else fail_fast

    def parse_lines(self, lines: Iterable[str]) -> BatchResult:
        """Parse one method signature per line.

        Blank lines and lines starting with ``#`` are ignored. Surrounding
        whitespace is stripped.

        Args:
            lines: Signature lines.

        Returns:
            BatchResult with parsed entries and failures, in input order.

        Raises:
            GrammarError: On the first malformed signature, if fail_fast is set,
                or once, before any line is parsed, if the class context
                signature is malformed.
        """
        if self._class_info is not None:
            class_signature = self._class_info.type_signature
            logger.debug(f"Using class context {class_signature}")
        result = BatchResult()
        for line_number, raw_line in enumerate(lines, start=1):
            text = raw_line.strip()
            if not text or text.startswith("#"):
                continue
            try:
                signature = MethodTypeSignature.parse(text, self._class_info)
            except GrammarError as e:
                if self._fail_fast:
                    raise
                logger.warning(f"Skipping signature on line {line_number}: {e}")
                result.failures.append(
                    ParseFailure(
                        line=line_number,
                        text=text,
                        message=e.message,
                        position=e.position,
                    )
                )
                continue
            result.parsed.append(ParsedEntry(line=line_number, text=text, signature=signature))
        logger.debug(f"Parsed {len(result.parsed)} of {result.total} signature(s)")
        return result

    def parse_file(self, path: Path) -> BatchResult:
        """Parse a file containing one method signature per line."""
        with path.open(encoding="utf-8") as f:
            return self.parse_lines(f)

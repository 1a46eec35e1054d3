"""Class type signatures and the class context used by method parses.

A class signature is the ``Signature`` attribute of a generic class, e.g.
``<K:Ljava/lang/Object;>Ljava/lang/Object;Ljava/lang/Comparable<TK;>;``.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from jvmsig.parser.cursor import open_cursor
from jvmsig.signatures.base import HierarchicalTypeSignature
from jvmsig.signatures.resolution import resolve_scope
from jvmsig.signatures.type_parameter import OBJECT_CLASS_NAME, TypeParameter
from jvmsig.signatures.types import ClassRefTypeSignature

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassTypeSignature(HierarchicalTypeSignature):
    """A parsed class signature: type parameters, superclass and interfaces."""

    type_parameters: tuple[TypeParameter, ...]
    superclass_signature: ClassRefTypeSignature
    superinterface_signatures: tuple[ClassRefTypeSignature, ...] = ()

    @property
    def descriptor(self) -> str:
        parts: list[str] = []
        if self.type_parameters:
            parts.append("<" + "".join(tp.descriptor for tp in self.type_parameters) + ">")
        parts.append(self.superclass_signature.descriptor)
        parts.extend(iface.descriptor for iface in self.superinterface_signatures)
        return "".join(parts)

    def get_all_referenced_class_names(self, class_names: set[str]) -> None:
        for type_parameter in self.type_parameters:
            type_parameter.get_all_referenced_class_names(class_names)
        self.superclass_signature.get_all_referenced_class_names(class_names)
        for iface in self.superinterface_signatures:
            iface.get_all_referenced_class_names(class_names)

    def __str__(self) -> str:
        parts: list[str] = []
        if self.type_parameters:
            parts.append("<" + ", ".join(str(tp) for tp in self.type_parameters) + ">")
        superclass = str(self.superclass_signature)
        if superclass != OBJECT_CLASS_NAME:
            parts.append(f"extends {superclass}")
        if self.superinterface_signatures:
            parts.append(
                "implements " + ", ".join(str(iface) for iface in self.superinterface_signatures)
            )
        return " ".join(parts)

    @staticmethod
    def parse(text: str) -> ClassTypeSignature:
        """Parse a class signature and link its type variables to it.

        Raises:
            GrammarError: If the text is not a valid class signature.
        """
        logger.debug(f"Parsing class signature {text!r}")
        cursor = open_cursor(text)
        type_parameters = TypeParameter.parse_list(cursor)
        superclass_signature = ClassRefTypeSignature.parse(cursor)
        if superclass_signature is None:
            raise cursor.error("Missing superclass type signature")
        superinterface_signatures: list[ClassRefTypeSignature] = []
        while cursor.has_more():
            iface = ClassRefTypeSignature.parse(cursor)
            if iface is None:
                raise cursor.error("Extra characters at end of type descriptor")
            superinterface_signatures.append(iface)

        class_signature = ClassTypeSignature(
            type_parameters=type_parameters,
            superclass_signature=superclass_signature,
            superinterface_signatures=tuple(superinterface_signatures),
        )
        resolve_scope(cursor.take_recorded(), class_signature=class_signature)
        return class_signature


def parse_class_signature(text: str) -> ClassTypeSignature:
    """Parse a class signature. See ClassTypeSignature.parse."""
    return ClassTypeSignature.parse(text)


@dataclass
class ClassInfo:
    """Minimal class metadata usable as the context of a method parse.

    Attributes:
        name: Dotted class name.
        type_signature_str: Raw class ``Signature`` attribute, if the class
            has one.
    """

    name: str
    type_signature_str: str | None = None
    _type_signature: ClassTypeSignature | None = field(
        default=None, init=False, repr=False, compare=False
    )
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    @property
    def type_signature(self) -> ClassTypeSignature | None:
        """The parsed class signature, or None if the class is not generic.

        Parsed on first access, once, even when several threads share this
        ClassInfo. Every method parsed against it links to the same object.
        """
        if self.type_signature_str is None:
            return None
        with self._lock:
            if self._type_signature is None:
                self._type_signature = ClassTypeSignature.parse(self.type_signature_str)
            return self._type_signature

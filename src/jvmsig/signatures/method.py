"""Method type signatures.

A method signature is the ``Signature`` attribute of a generic method, for
example ``<T:Ljava/lang/Object;>(Ljava/util/List<TT;>;I)TT;^Ljava/io/IOException;``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from jvmsig.parser.cursor import open_cursor
from jvmsig.signatures.base import HierarchicalTypeSignature
from jvmsig.signatures.resolution import resolve_scope
from jvmsig.signatures.type_parameter import TypeParameter
from jvmsig.signatures.types import (
    ClassRefOrTypeVariableSignature,
    ClassRefTypeSignature,
    TypeSignature,
    TypeVariableSignature,
)

if TYPE_CHECKING:
    from jvmsig.signatures.class_signature import ClassTypeSignature

logger = logging.getLogger(__name__)


class ClassContext(Protocol):
    """Anything that can supply the signature of the enclosing class."""

    @property
    def type_signature(self) -> ClassTypeSignature | None: ...


@dataclass(frozen=True)
class MethodTypeSignature(HierarchicalTypeSignature):
    """A parsed method signature.

    Attributes:
        type_parameters: Generic type parameters, in declaration order.
        parameter_type_signatures: Parameter types, in declaration order.
        result_type: The result type (``void`` is a base type).
        throws_signatures: Declared thrown types, in declaration order.
    """

    type_parameters: tuple[TypeParameter, ...]
    parameter_type_signatures: tuple[TypeSignature, ...]
    result_type: TypeSignature
    throws_signatures: tuple[ClassRefOrTypeVariableSignature, ...] = ()

    @property
    def descriptor(self) -> str:
        parts: list[str] = []
        if self.type_parameters:
            parts.append("<" + "".join(tp.descriptor for tp in self.type_parameters) + ">")
        parts.append("(")
        parts.extend(param.descriptor for param in self.parameter_type_signatures)
        parts.append(")")
        parts.append(self.result_type.descriptor)
        parts.extend("^" + throws.descriptor for throws in self.throws_signatures)
        return "".join(parts)

    def get_all_referenced_class_names(self, class_names: set[str]) -> None:
        for type_parameter in self.type_parameters:
            type_parameter.get_all_referenced_class_names(class_names)
        for param in self.parameter_type_signatures:
            param.get_all_referenced_class_names(class_names)
        self.result_type.get_all_referenced_class_names(class_names)
        for throws in self.throws_signatures:
            throws.get_all_referenced_class_names(class_names)

    def __str__(self) -> str:
        rendered = ""
        if self.type_parameters:
            rendered = "<" + ", ".join(str(tp) for tp in self.type_parameters) + "> "
        rendered += f"{self.result_type} ("
        rendered += ", ".join(str(param) for param in self.parameter_type_signatures)
        rendered += ")"
        if self.throws_signatures:
            rendered += " throws " + ", ".join(str(throws) for throws in self.throws_signatures)
        return rendered

    @staticmethod
    def parse(text: str, class_info: ClassContext | None = None) -> MethodTypeSignature:
        """Parse a method signature and link its type variables.

        Args:
            text: The method signature text.
            class_info: Optional provider of the enclosing class signature.
                Without it, type variables are linked to the method only.

        Returns:
            The parsed method signature.

        Raises:
            GrammarError: If the text is not a valid method signature.
        """
        logger.debug(f"Parsing method signature {text!r}")
        # Resolved first, so class signature errors carry the class text.
        class_signature = class_info.type_signature if class_info is not None else None
        cursor = open_cursor(text)
        type_parameters = TypeParameter.parse_list(cursor)
        cursor.expect("(")
        parameter_types: list[TypeSignature] = []
        while cursor.peek() != ")":
            if not cursor.has_more():
                raise cursor.error("Ran out of input while parsing method signature")
            param = TypeSignature.parse(cursor)
            if param is None:
                raise cursor.error("Missing method parameter type signature")
            parameter_types.append(param)
        cursor.expect(")")
        result_type = TypeSignature.parse(cursor)
        if result_type is None:
            raise cursor.error("Missing method result type signature")
        throws_signatures: list[ClassRefOrTypeVariableSignature] = []
        while cursor.peek() == "^":
            cursor.expect("^")
            throws: ClassRefOrTypeVariableSignature | None = ClassRefTypeSignature.parse(cursor)
            if throws is None:
                throws = TypeVariableSignature.parse(cursor)
            if throws is None:
                raise cursor.error("Missing type variable signature")
            throws_signatures.append(throws)
        if cursor.has_more():
            raise cursor.error("Extra characters at end of type descriptor")

        method_signature = MethodTypeSignature(
            type_parameters=type_parameters,
            parameter_type_signatures=tuple(parameter_types),
            result_type=result_type,
            throws_signatures=tuple(throws_signatures),
        )
        linked = resolve_scope(cursor.take_recorded(), method_signature, class_signature)
        logger.debug(f"Linked {linked} type variable(s) in {method_signature}")
        return method_signature


def parse_method_signature(text: str, class_info: ClassContext | None = None) -> MethodTypeSignature:
    """Parse a method signature. See MethodTypeSignature.parse."""
    return MethodTypeSignature.parse(text, class_info)

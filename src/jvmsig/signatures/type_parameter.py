"""Type parameter declarations, e.g. ``<T:Ljava/lang/Object;>``."""

from __future__ import annotations

from dataclasses import dataclass

from jvmsig.parser.cursor import Cursor
from jvmsig.signatures.base import HierarchicalTypeSignature
from jvmsig.signatures.types import ReferenceTypeSignature

OBJECT_CLASS_NAME = "java.lang.Object"


@dataclass(frozen=True)
class TypeParameter(HierarchicalTypeSignature):
    """A generic type parameter with its bounds.

    ``class_bound`` is None when the declaration has an empty class bound,
    which is how interface-only bounds such as ``<T::Ljava/lang/Comparable;>``
    are encoded.
    """

    name: str
    class_bound: ReferenceTypeSignature | None = None
    interface_bounds: tuple[ReferenceTypeSignature, ...] = ()

    @property
    def descriptor(self) -> str:
        class_bound = self.class_bound.descriptor if self.class_bound is not None else ""
        return "".join(
            [self.name, ":", class_bound, *(":" + bound.descriptor for bound in self.interface_bounds)]
        )

    def get_all_referenced_class_names(self, class_names: set[str]) -> None:
        if self.class_bound is not None:
            self.class_bound.get_all_referenced_class_names(class_names)
        for bound in self.interface_bounds:
            bound.get_all_referenced_class_names(class_names)

    def __str__(self) -> str:
        bounds = [str(bound) for bound in self.interface_bounds]
        if self.class_bound is not None and str(self.class_bound) != OBJECT_CLASS_NAME:
            bounds.insert(0, str(self.class_bound))
        if not bounds:
            return self.name
        return f"{self.name} extends {' & '.join(bounds)}"

    @staticmethod
    def parse(cursor: Cursor) -> TypeParameter | None:
        """Parse one type parameter: ``Identifier ':' Bound? (':' Bound)*``."""
        if cursor.peek() in ("", ">", ":"):
            return None
        name = cursor.read_identifier()
        cursor.expect(":")
        # Empty class bound, as in "T::Ljava/lang/Comparable<TT;>;"
        class_bound = ReferenceTypeSignature.parse(cursor)
        if class_bound is None and cursor.peek() not in (":", ">"):
            raise cursor.error("Missing type parameter class bound")
        interface_bounds: list[ReferenceTypeSignature] = []
        while cursor.peek() == ":":
            cursor.expect(":")
            bound = ReferenceTypeSignature.parse(cursor)
            if bound is None:
                raise cursor.error("Missing type parameter interface bound")
            interface_bounds.append(bound)
        return TypeParameter(name, class_bound, tuple(interface_bounds))

    @staticmethod
    def parse_list(cursor: Cursor) -> tuple[TypeParameter, ...]:
        """Parse an optional ``<...>`` type parameter list.

        Returns:
            The type parameters in declaration order, or an empty tuple if
            the text does not start with ``<``.
        """
        if cursor.peek() != "<":
            return ()
        cursor.expect("<")
        type_parameters: list[TypeParameter] = []
        while cursor.peek() != ">":
            if not cursor.has_more():
                raise cursor.error("Ran out of input while parsing type parameters")
            type_parameter = TypeParameter.parse(cursor)
            if type_parameter is None:
                raise cursor.error("Missing type parameter")
            type_parameters.append(type_parameter)
        if not type_parameters:
            raise cursor.error("Empty type parameter list")
        cursor.expect(">")
        return tuple(type_parameters)

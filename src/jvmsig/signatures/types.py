"""Type signature nodes and their grammar.

Every node type exposes a static ``parse(cursor)`` that returns the parsed
node, or ``None`` when the production does not start at the current
position. ``None`` is only returned before any input has been consumed;
once a production has committed, malformed input raises GrammarError.

Grammar (JVMS 4.7.9.1)::

    TypeSignature          = BaseType | ReferenceTypeSignature
    ReferenceTypeSignature = ClassRefTypeSignature | TypeVariableSignature
                           | ArrayTypeSignature
    ClassRefTypeSignature  = 'L' Package* Identifier TypeArguments?
                             ('.' Identifier TypeArguments?)* ';'
    TypeVariableSignature  = 'T' Identifier ';'
    ArrayTypeSignature     = '['+ TypeSignature
    TypeArguments          = '<' TypeArgument+ '>'
    TypeArgument           = '*' | ('+' | '-')? ReferenceTypeSignature
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from jvmsig.parser.cursor import Cursor, open_cursor
from jvmsig.signatures.base import HierarchicalTypeSignature

if TYPE_CHECKING:
    from jvmsig.signatures.class_signature import ClassTypeSignature
    from jvmsig.signatures.method import MethodTypeSignature

logger = logging.getLogger(__name__)


class TypeSignature(HierarchicalTypeSignature):
    """A base type or a reference type."""

    @staticmethod
    def parse(cursor: Cursor) -> TypeSignature | None:
        base_type = BaseTypeSignature.parse(cursor)
        if base_type is not None:
            return base_type
        return ReferenceTypeSignature.parse(cursor)


class ReferenceTypeSignature(TypeSignature):
    """A class reference, type variable or array type."""

    @staticmethod
    def parse(cursor: Cursor) -> ReferenceTypeSignature | None:
        class_ref = ClassRefTypeSignature.parse(cursor)
        if class_ref is not None:
            return class_ref
        type_variable = TypeVariableSignature.parse(cursor)
        if type_variable is not None:
            return type_variable
        return ArrayTypeSignature.parse(cursor)


class ClassRefOrTypeVariableSignature(ReferenceTypeSignature):
    """A class reference or a type variable (the two legal throws types)."""


class BaseType(str, Enum):
    """Primitive types, keyed by their descriptor character."""

    BYTE = "B"
    CHAR = "C"
    DOUBLE = "D"
    FLOAT = "F"
    INT = "I"
    LONG = "J"
    SHORT = "S"
    BOOLEAN = "Z"
    VOID = "V"

    @property
    def type_name(self) -> str:
        return self.name.lower()


_BASE_TYPES = {base_type.value: base_type for base_type in BaseType}


@dataclass(frozen=True)
class BaseTypeSignature(TypeSignature):
    """A primitive type, or void."""

    base_type: BaseType

    @property
    def type_name(self) -> str:
        return self.base_type.type_name

    @property
    def descriptor(self) -> str:
        return self.base_type.value

    def get_all_referenced_class_names(self, class_names: set[str]) -> None:
        pass

    def __str__(self) -> str:
        return self.type_name

    @staticmethod
    def parse(cursor: Cursor) -> BaseTypeSignature | None:
        base_type = _BASE_TYPES.get(cursor.peek())
        if base_type is None:
            return None
        cursor.advance()
        return BaseTypeSignature(base_type)


class Wildcard(str, Enum):
    """Wildcard marker of a type argument."""

    NONE = ""
    ANY = "*"
    EXTENDS = "+"
    SUPER = "-"


@dataclass(frozen=True)
class TypeArgument(HierarchicalTypeSignature):
    """A type argument of a parameterized class reference.

    ``type_signature`` is None only for the unbounded wildcard ``?``.
    """

    wildcard: Wildcard
    type_signature: ReferenceTypeSignature | None = None

    @property
    def descriptor(self) -> str:
        if self.type_signature is None:
            return self.wildcard.value
        return self.wildcard.value + self.type_signature.descriptor

    def get_all_referenced_class_names(self, class_names: set[str]) -> None:
        if self.type_signature is not None:
            self.type_signature.get_all_referenced_class_names(class_names)

    def __str__(self) -> str:
        if self.wildcard == Wildcard.ANY:
            return "?"
        if self.wildcard == Wildcard.EXTENDS:
            return f"? extends {self.type_signature}"
        if self.wildcard == Wildcard.SUPER:
            return f"? super {self.type_signature}"
        return str(self.type_signature)

    @staticmethod
    def parse(cursor: Cursor) -> TypeArgument | None:
        ch = cursor.peek()
        if ch == Wildcard.ANY.value:
            cursor.advance()
            return TypeArgument(Wildcard.ANY)
        if ch in (Wildcard.EXTENDS.value, Wildcard.SUPER.value):
            cursor.advance()
            bound = ReferenceTypeSignature.parse(cursor)
            if bound is None:
                raise cursor.error("Missing wildcard bound type signature")
            return TypeArgument(Wildcard(ch), bound)
        type_signature = ReferenceTypeSignature.parse(cursor)
        if type_signature is None:
            return None
        return TypeArgument(Wildcard.NONE, type_signature)

    @staticmethod
    def parse_list(cursor: Cursor) -> tuple[TypeArgument, ...]:
        """Parse an optional ``<...>`` type argument list.

        Returns:
            The type arguments, or an empty tuple if no ``<`` is present.
        """
        if cursor.peek() != "<":
            return ()
        cursor.expect("<")
        type_arguments: list[TypeArgument] = []
        while cursor.peek() != ">":
            if not cursor.has_more():
                raise cursor.error("Ran out of input while parsing type arguments")
            type_argument = TypeArgument.parse(cursor)
            if type_argument is None:
                raise cursor.error("Missing type argument")
            type_arguments.append(type_argument)
        if not type_arguments:
            raise cursor.error("Empty type argument list")
        cursor.expect(">")
        return tuple(type_arguments)


def _render_type_arguments(type_arguments: tuple[TypeArgument, ...]) -> str:
    if not type_arguments:
        return ""
    return "<" + ", ".join(str(arg) for arg in type_arguments) + ">"


def _type_arguments_descriptor(type_arguments: tuple[TypeArgument, ...]) -> str:
    if not type_arguments:
        return ""
    return "<" + "".join(arg.descriptor for arg in type_arguments) + ">"


@dataclass(frozen=True)
class ClassRefTypeSignature(ClassRefOrTypeVariableSignature):
    """A reference to a (possibly parameterized, possibly nested) class.

    ``suffixes`` holds the nested class names that follow the outer class,
    and ``suffix_type_arguments`` the type arguments of each of them, in the
    same order.
    """

    class_name: str
    type_arguments: tuple[TypeArgument, ...] = ()
    suffixes: tuple[str, ...] = ()
    suffix_type_arguments: tuple[tuple[TypeArgument, ...], ...] = ()

    @property
    def fully_qualified_class_name(self) -> str:
        """The binary class name, with nested classes joined by ``$``."""
        return "$".join((self.class_name, *self.suffixes))

    @property
    def descriptor(self) -> str:
        parts = ["L", self.class_name.replace(".", "/")]
        parts.append(_type_arguments_descriptor(self.type_arguments))
        for suffix, suffix_args in zip(self.suffixes, self.suffix_type_arguments):
            parts.append("." + suffix + _type_arguments_descriptor(suffix_args))
        parts.append(";")
        return "".join(parts)

    def get_all_referenced_class_names(self, class_names: set[str]) -> None:
        class_names.add(self.fully_qualified_class_name)
        for type_argument in self.type_arguments:
            type_argument.get_all_referenced_class_names(class_names)
        for suffix_args in self.suffix_type_arguments:
            for type_argument in suffix_args:
                type_argument.get_all_referenced_class_names(class_names)

    def __str__(self) -> str:
        rendered = self.class_name + _render_type_arguments(self.type_arguments)
        for suffix, suffix_args in zip(self.suffixes, self.suffix_type_arguments):
            rendered += "." + suffix + _render_type_arguments(suffix_args)
        return rendered

    @staticmethod
    def parse(cursor: Cursor) -> ClassRefTypeSignature | None:
        if cursor.peek() != "L":
            return None
        cursor.expect("L")
        class_name = cursor.read_identifier()
        while cursor.peek() == "/":
            cursor.expect("/")
            class_name += "." + cursor.read_identifier()
        type_arguments = TypeArgument.parse_list(cursor)
        suffixes: list[str] = []
        suffix_type_arguments: list[tuple[TypeArgument, ...]] = []
        while cursor.peek() == ".":
            cursor.expect(".")
            suffixes.append(cursor.read_identifier())
            suffix_type_arguments.append(TypeArgument.parse_list(cursor))
        cursor.expect(";")
        return ClassRefTypeSignature(
            class_name=class_name,
            type_arguments=type_arguments,
            suffixes=tuple(suffixes),
            suffix_type_arguments=tuple(suffix_type_arguments),
        )


@dataclass(frozen=True)
class TypeVariableSignature(ClassRefOrTypeVariableSignature):
    """A use of a type variable, e.g. ``T``.

    The two scope back-links are filled in once, by the method or class
    signature parse that produced this node, after the enclosing signature
    has been built. They take no part in equality, hashing or repr.
    """

    name: str
    _containing_method_signature: MethodTypeSignature | None = field(
        default=None, init=False, repr=False, compare=False
    )
    _containing_class_signature: ClassTypeSignature | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def containing_method_signature(self) -> MethodTypeSignature | None:
        return self._containing_method_signature

    @property
    def containing_class_signature(self) -> ClassTypeSignature | None:
        return self._containing_class_signature

    def _bind_scope(
        self,
        method_signature: MethodTypeSignature | None = None,
        class_signature: ClassTypeSignature | None = None,
    ) -> None:
        """Set the scope back-links. Each link can be set only once.

        Raises:
            RuntimeError: If a link that is being set was already set.
        """
        if method_signature is not None:
            if self._containing_method_signature is not None:
                raise RuntimeError(f"Method back-link of type variable {self.name} already set")
            object.__setattr__(self, "_containing_method_signature", method_signature)
        if class_signature is not None:
            if self._containing_class_signature is not None:
                raise RuntimeError(f"Class back-link of type variable {self.name} already set")
            object.__setattr__(self, "_containing_class_signature", class_signature)

    @property
    def descriptor(self) -> str:
        return f"T{self.name};"

    def get_all_referenced_class_names(self, class_names: set[str]) -> None:
        pass

    def __str__(self) -> str:
        return self.name

    @staticmethod
    def parse(cursor: Cursor) -> TypeVariableSignature | None:
        if cursor.peek() != "T":
            return None
        cursor.expect("T")
        name = cursor.read_identifier()
        cursor.expect(";")
        type_variable = TypeVariableSignature(name)
        cursor.record(type_variable)
        return type_variable


@dataclass(frozen=True)
class ArrayTypeSignature(ReferenceTypeSignature):
    """An array of ``num_dimensions`` dimensions over a non-array element type."""

    element_type_signature: TypeSignature
    num_dimensions: int = 1

    @property
    def descriptor(self) -> str:
        return "[" * self.num_dimensions + self.element_type_signature.descriptor

    def get_all_referenced_class_names(self, class_names: set[str]) -> None:
        self.element_type_signature.get_all_referenced_class_names(class_names)

    def __str__(self) -> str:
        return str(self.element_type_signature) + "[]" * self.num_dimensions

    @staticmethod
    def parse(cursor: Cursor) -> ArrayTypeSignature | None:
        num_dimensions = 0
        while cursor.peek() == "[":
            cursor.expect("[")
            num_dimensions += 1
        if num_dimensions == 0:
            return None
        element_type_signature = TypeSignature.parse(cursor)
        if element_type_signature is None:
            raise cursor.error("Missing array element type signature")
        return ArrayTypeSignature(element_type_signature, num_dimensions)


def parse_type_signature(text: str) -> TypeSignature:
    """Parse a complete standalone type signature, such as a field signature.

    Type variables in the result are left without scope back-links.

    Args:
        text: The signature text, e.g. ``Ljava/util/List<TE;>;``.

    Returns:
        The parsed type signature.

    Raises:
        GrammarError: If the text is not exactly one type signature.
    """
    logger.debug(f"Parsing type signature {text!r}")
    cursor = open_cursor(text)
    type_signature = TypeSignature.parse(cursor)
    if type_signature is None:
        raise cursor.error("Missing type signature")
    if cursor.has_more():
        raise cursor.error("Extra characters at end of type signature")
    cursor.take_recorded()
    return type_signature

"""Parsed generic signature nodes and their grammar."""

from jvmsig.signatures.base import HierarchicalTypeSignature
from jvmsig.signatures.class_signature import (
    ClassInfo,
    ClassTypeSignature,
    parse_class_signature,
)
from jvmsig.signatures.method import ClassContext, MethodTypeSignature, parse_method_signature
from jvmsig.signatures.type_parameter import TypeParameter
from jvmsig.signatures.types import (
    ArrayTypeSignature,
    BaseType,
    BaseTypeSignature,
    ClassRefOrTypeVariableSignature,
    ClassRefTypeSignature,
    ReferenceTypeSignature,
    TypeArgument,
    TypeSignature,
    TypeVariableSignature,
    Wildcard,
    parse_type_signature,
)

__all__ = [
    "ArrayTypeSignature",
    "BaseType",
    "BaseTypeSignature",
    "ClassContext",
    "ClassInfo",
    "ClassRefOrTypeVariableSignature",
    "ClassRefTypeSignature",
    "ClassTypeSignature",
    "HierarchicalTypeSignature",
    "MethodTypeSignature",
    "ReferenceTypeSignature",
    "TypeArgument",
    "TypeParameter",
    "TypeSignature",
    "TypeVariableSignature",
    "Wildcard",
    "parse_class_signature",
    "parse_method_signature",
    "parse_type_signature",
]

"""jvmsig - parser for JVM generic type signatures."""

from jvmsig.core.errors import GrammarError
from jvmsig.signatures import (
    ClassInfo,
    ClassTypeSignature,
    MethodTypeSignature,
    TypeParameter,
    TypeSignature,
    TypeVariableSignature,
    parse_class_signature,
    parse_method_signature,
    parse_type_signature,
)

__version__ = "0.1.0"

__all__ = [
    "ClassInfo",
    "ClassTypeSignature",
    "GrammarError",
    "MethodTypeSignature",
    "TypeParameter",
    "TypeSignature",
    "TypeVariableSignature",
    "parse_class_signature",
    "parse_method_signature",
    "parse_type_signature",
]

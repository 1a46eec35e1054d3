"""Back-link resolution for type variables.

Type variable nodes are built before the signature that encloses them, so
their scope links are filled in afterwards from the occurrences the cursor
recorded during the parse.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from jvmsig.signatures.types import TypeVariableSignature

if TYPE_CHECKING:
    from jvmsig.signatures.class_signature import ClassTypeSignature
    from jvmsig.signatures.method import MethodTypeSignature


def resolve_scope(
    type_variables: Iterable[object],
    method_signature: MethodTypeSignature | None = None,
    class_signature: ClassTypeSignature | None = None,
) -> int:
    """Link every recorded type variable to its enclosing signatures.

    Args:
        type_variables: Objects recorded on the cursor during the parse.
        method_signature: Enclosing method signature, if any.
        class_signature: Enclosing class signature, if any.

    Returns:
        Number of type variables linked.
    """
    linked = 0
    for type_variable in type_variables:
        if not isinstance(type_variable, TypeVariableSignature):
            continue
        type_variable._bind_scope(method_signature, class_signature)
        linked += 1
    return linked

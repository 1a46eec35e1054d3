"""Serializable summaries of parsed signatures.

The AST itself is made of frozen dataclasses; these pydantic models are the
flat, JSON-friendly view used for export and by the CLI.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from jvmsig.signatures.method import MethodTypeSignature
from jvmsig.signatures.type_parameter import TypeParameter


class TypeParameterModel(BaseModel):
    """Type parameter representation."""

    name: str = Field(..., description="Type parameter name")
    class_bound: str | None = Field(None, description="Rendered class bound")
    interface_bounds: list[str] = Field(
        default_factory=list, description="Rendered interface bounds"
    )

    @classmethod
    def from_type_parameter(cls, type_parameter: TypeParameter) -> TypeParameterModel:
        return cls(
            name=type_parameter.name,
            class_bound=(
                str(type_parameter.class_bound) if type_parameter.class_bound is not None else None
            ),
            interface_bounds=[str(bound) for bound in type_parameter.interface_bounds],
        )


class MethodSignatureModel(BaseModel):
    """Method signature representation.

    ``descriptor`` is authoritative: deserialization re-parses it, and the
    other fields are derived views.
    """

    descriptor: str = Field(..., description="Signature in classfile grammar form")
    display: str = Field(..., description="Java-like rendering")
    type_parameters: list[TypeParameterModel] = Field(default_factory=list)
    parameter_types: list[str] = Field(default_factory=list, description="Rendered parameter types")
    result_type: str = Field(..., description="Rendered result type")
    throws: list[str] = Field(default_factory=list, description="Rendered thrown types")
    referenced_classes: list[str] = Field(
        default_factory=list, description="Sorted names of all referenced classes"
    )

    @classmethod
    def from_signature(cls, signature: MethodTypeSignature) -> MethodSignatureModel:
        return cls(
            descriptor=signature.descriptor,
            display=str(signature),
            type_parameters=[
                TypeParameterModel.from_type_parameter(tp) for tp in signature.type_parameters
            ],
            parameter_types=[str(param) for param in signature.parameter_type_signatures],
            result_type=str(signature.result_type),
            throws=[str(throws) for throws in signature.throws_signatures],
            referenced_classes=sorted(signature.referenced_class_names()),
        )

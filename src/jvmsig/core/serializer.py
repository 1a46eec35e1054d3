"""Method signature serialization and deserialization.

This module converts parsed method signatures to JSON and back. The JSON
form carries the signature descriptor, so deserialization re-parses it
and yields a fully linked MethodTypeSignature.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from jvmsig.core.errors import GrammarError, SerializationError
from jvmsig.core.models import MethodSignatureModel
from jvmsig.signatures.method import MethodTypeSignature


def _validation_details(error: ValidationError) -> str:
    error_details = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"])
        error_details.append(f"{loc}: {err['msg']}")
    return "; ".join(error_details)


def serialize_to_dict(signature: MethodTypeSignature) -> dict[str, Any]:
    """Serialize a method signature to a dictionary.

    Args:
        signature: The parsed method signature.

    Returns:
        Dictionary representation of the signature.
    """
    return MethodSignatureModel.from_signature(signature).model_dump(mode="json")


def serialize(signature: MethodTypeSignature) -> str:
    """Serialize a method signature to a JSON string.

    Raises:
        SerializationError: If serialization fails.
    """
    try:
        return json.dumps(serialize_to_dict(signature), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(
            message="Failed to serialize method signature",
            details=str(e),
        ) from e


def deserialize_from_dict(data: dict[str, Any]) -> MethodTypeSignature:
    """Deserialize a dictionary to a method signature.

    Raises:
        SerializationError: If the data is not a valid serialized signature.
    """
    try:
        model = MethodSignatureModel.model_validate(data)
    except ValidationError as e:
        raise SerializationError(
            message="Method signature validation failed",
            details=_validation_details(e),
        ) from e
    try:
        return MethodTypeSignature.parse(model.descriptor)
    except GrammarError as e:
        raise SerializationError(
            message="Invalid method signature descriptor",
            details=str(e),
        ) from e


def deserialize(json_str: str) -> MethodTypeSignature:
    """Deserialize a JSON string to a method signature.

    Raises:
        SerializationError: If deserialization fails with detailed error info.
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(
            message="Invalid JSON format",
            details=f"Line {e.lineno}, column {e.colno}: {e.msg}",
        ) from e
    if not isinstance(data, dict):
        raise SerializationError(
            message="Invalid JSON format",
            details=f"Expected an object, got {type(data).__name__}",
        )
    return deserialize_from_dict(data)

"""Decoding and validation of the pattern to environment mapping."""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping

from pydantic import StrictStr, TypeAdapter, ValidationError

from .errors import InvalidMappingError

__all__ = ["load_mapping", "validate_mapping"]

NON_STRING_MESSAGE = "Environments in mapping should be strings."

_MAPPING_ADAPTER: TypeAdapter[Dict[str, StrictStr]] = TypeAdapter(Dict[str, StrictStr])


def validate_mapping(raw: Any) -> dict[str, str]:
    """Return ``raw`` as a ``dict[str, str]`` keeping its key order.

    Raises
    ------
    InvalidMappingError
        If ``raw`` is not an object or any of its values is not a string.
    """

    if not isinstance(raw, Mapping):
        raise InvalidMappingError(
            f"Mapping should be a JSON object, got {type(raw).__name__}."
        )
    try:
        return _MAPPING_ADAPTER.validate_python(dict(raw))
    except ValidationError as exc:
        raise InvalidMappingError(NON_STRING_MESSAGE) from exc


def load_mapping(text: str) -> dict[str, str]:
    """Decode ``text`` as JSON and validate the result."""

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidMappingError(f"Invalid JSON in mapping: {exc}") from exc
    return validate_mapping(raw)

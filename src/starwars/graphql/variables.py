"""Parsing of the ``variables`` request parameter."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .errors import InvalidVariablesError


def parse_variables(raw: Any) -> dict[str, Any]:
    """Turn the transport's ``variables`` value into a dict.

    ``None``, a blank string and the literal ``"null"`` all mean no variables.
    Strings must decode to a JSON object; any other non-mapping value is
    rejected.

    Raises:
        InvalidVariablesError: If the value is not valid JSON or not an object
    """
    if raw is None:
        return {}
    if isinstance(raw, Mapping):
        return dict(raw)
    if not isinstance(raw, str):
        raise InvalidVariablesError(_not_an_object(raw))

    text = raw.strip()
    if text in ("", "null"):
        return {}

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidVariablesError(f"Variables are not valid JSON: {e.msg}.") from e

    if not isinstance(parsed, dict):
        raise InvalidVariablesError(_not_an_object(parsed))
    return parsed


def _not_an_object(value: Any) -> str:
    return f"Variables must be a JSON object, got {type(value).__name__}."

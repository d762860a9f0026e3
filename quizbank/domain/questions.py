"""Domain types for the question collection.

Questions are opaque JSON values: the service stores and returns them
verbatim and never looks at their fields. ``NaN`` and ``Infinity`` are not
JSON, so they are rejected on the way in and never written.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Union

JSONValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]
Question = JSONValue
Collection = List[Question]


def is_collection(value: Any) -> bool:
    """Return True when value has the shape of a collection (a JSON array)."""
    return isinstance(value, list)


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not a valid JSON value")


def loads(raw: str | bytes) -> JSONValue:
    """Strict ``json.loads``; raises ValueError on NaN/Infinity."""
    return json.loads(raw, parse_constant=_reject_constant)


def dumps(value: Any, **kwargs: Any) -> str:
    """Strict ``json.dumps``; raises ValueError on non-finite floats."""
    return json.dumps(value, allow_nan=False, **kwargs)

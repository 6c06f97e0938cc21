"""Human-readable descriptions of runtime values for issue messages.

Kind names follow the JSON vocabulary (``string``, ``number``,
``boolean``, ``array``, ``object``, ``null``) plus ``date`` and
``undefined``, so that ``expected`` and ``received`` on an issue read
in the same terms.  Values of any other type are described by their
Python type name.
"""

from __future__ import annotations

import datetime
import json
import math
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from shape_validator.config import get_settings
from shape_validator.sentinels import UNDEFINED

PathSegment = str | int
Path = tuple[PathSegment, ...]

_TRUNCATION_SUFFIX = "..."


def describe_kind(value: Any) -> str:
    """Return the runtime kind of *value*."""
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    # bool is a subclass of int, check it first.
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, datetime.date):
        return "date"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def _json_default(value: Any) -> Any:
    if value is UNDEFINED:
        return None
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    return repr(value)


def _finite(value: Any) -> Any:
    """Replace NaN and infinities with ``None`` so they render as ``null``."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, Mapping):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


def render_value(value: Any) -> str:
    """Render *value* as JSON for inclusion in an issue message.

    Non-finite floats render as ``null``.  Falls back to ``repr`` for
    values JSON cannot express (non-string keys, circular references).
    Long renderings are truncated according to ``max_rendered_value_length``.
    """
    if value is UNDEFINED:
        rendered = "undefined"
    else:
        try:
            rendered = json.dumps(_finite(value), default=_json_default, allow_nan=False)
        except (TypeError, ValueError, RecursionError):
            rendered = repr(value)

    limit = get_settings().max_rendered_value_length
    if limit is not None and len(rendered) > limit:
        rendered = rendered[:limit] + _TRUNCATION_SUFFIX
    return rendered


def format_path(path: Sequence[PathSegment]) -> str:
    """Join path segments with the configured separator (``""`` at the root)."""
    return get_settings().path_separator.join(str(segment) for segment in path)

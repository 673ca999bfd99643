"""
Setting value helpers shared by validation, matching and naming.

Values arrive from JSON, so equality follows JSON semantics: ``true`` is not
``1`` and ``1`` equals ``1.0``.
"""

import math
from typing import Any, Dict, Optional

_MISSING = object()


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    if isinstance(value, float):
        return math.isfinite(value)
    return is_number(value)


def is_whole_number(value: Any) -> bool:
    if isinstance(value, float):
        return value.is_integer()
    return is_number(value)


def values_equal(left: Any, right: Any) -> bool:
    """Strict equality for setting values (booleans never equal numbers)."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    if is_number(left) and is_number(right):
        return left == right
    return type(left) is type(right) and left == right


def first_settings_difference(expected: Dict[str, Any], actual: Dict[str, Any],
                              whole: bool = False) -> Optional[str]:
    """Return the first key whose value differs, or None.

    Required keys are checked in order. With ``whole`` set, keys present only
    in ``actual`` count as differences too.
    """
    for key, value in expected.items():
        if not values_equal(value, actual.get(key, _MISSING)):
            return key
    if whole:
        for key in actual:
            if key not in expected:
                return key
    return None


def format_number(value: Any) -> str:
    """Render a number the way the established name convention does (2.0 -> "2")."""
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def display_value(value: Any = _MISSING) -> str:
    """Human-readable rendering used in failure reasons and error messages."""
    if value is _MISSING or value is None:
        return "unset"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return format_number(value)
    return str(value)


def lookup_display(settings: Dict[str, Any], key: str) -> str:
    return display_value(settings.get(key, _MISSING))

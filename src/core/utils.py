"""
Core Utility Functions.

Defensive accessors for payloads of unknown shape. None of these raise:
a value of the wrong type degrades to the supplied default.
"""

import math
from collections.abc import Mapping
from typing import Any, Dict, List, Optional


# =============================================================================
# Nested Access
# =============================================================================

def safe_get(obj: Any, *keys: str, default: Any = None) -> Any:
    """
    Safely get nested mapping values.

    Args:
        obj: Mapping (or anything else, which yields the default)
        *keys: Keys to traverse
        default: Value returned when a key is missing or its value is None

    Returns:
        Value at the nested key path, or default

    Example:
        >>> safe_get({'a': {'b': 1}}, 'a', 'b')
        1
        >>> safe_get({'a': {}}, 'a', 'b', default=0)
        0
        >>> safe_get({'a': [1, 2]}, 'a', 'b', default=0)
        0
    """
    current = obj
    for key in keys:
        if not isinstance(current, Mapping):
            return default
        current = current.get(key)
        if current is None:
            return default
    return current


# =============================================================================
# Type Coercion
# =============================================================================

def as_mapping(value: Any) -> Mapping:
    """Return ``value`` if it is a mapping, else an empty dict."""
    return value if isinstance(value, Mapping) else {}


def as_mapping_list(value: Any) -> List[Dict[str, Any]]:
    """Keep only the mapping entries of a list; anything else yields []."""
    if not isinstance(value, (list, tuple)):
        return []
    return [dict(item) for item in value if isinstance(item, Mapping)]


def as_number(value: Any) -> Optional[float]:
    """Return a finite int/float as float, else None. Booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return float(value)


def as_count(value: Any) -> Optional[int]:
    """
    Return a non-negative whole count, else None.

    Integral floats (``5.0``) are accepted since JSON decoders may produce them.
    """
    number = as_number(value)
    if number is None or number < 0 or not number.is_integer():
        return None
    return int(number)

"""
gendiff.formats — Convert between parsed documents and value types.

Supported conversions:
    • Python objects (dict, list, str, int, float, bool, None) ↔ AVal
    • JSON strings ↔ AVal
"""

import json
from typing import Any

from .core import AAtom, AMap, AVal


# ═══════════════════════════════════════════════════════════════════
#  PYTHON OBJECTS ↔ VALUES
# ═══════════════════════════════════════════════════════════════════

def from_python(obj: Any) -> AVal:
    """
    Convert a Python object to a value.

    Mapping:
        dict       → AMap(...)   (keys coerced to str)
        list/tuple → AAtom(tuple of converted items)
        anything   → AAtom(obj)

    Nested structures are converted recursively.  Sequences stay
    atoms: they are compared as a whole, never element by element.
    """
    if isinstance(obj, AVal):
        return obj
    if isinstance(obj, dict):
        return AMap({str(k): from_python(v) for k, v in obj.items()})
    if isinstance(obj, (list, tuple)):
        return AAtom(tuple(from_python(item) for item in obj))
    return AAtom(obj)


def to_python(val: AVal) -> Any:
    """
    Convert a value back to a plain Python object.

    Inverse of from_python for JSON-compatible objects (sequences come
    back as lists).
    """
    if isinstance(val, AMap):
        return {k: to_python(v) for k, v in val.entries.items()}
    if isinstance(val, AAtom):
        if isinstance(val.val, tuple):
            return [to_python(item) for item in val.val]
        return val.val
    raise TypeError(f"Unknown AVal type: {type(val)}")


# ═══════════════════════════════════════════════════════════════════
#  JSON STRINGS ↔ VALUES
# ═══════════════════════════════════════════════════════════════════

def from_json(text: str) -> AVal:
    """Parse a JSON string into a value."""
    return from_python(json.loads(text))


def to_json(val: AVal, **kwargs) -> str:
    """Convert a value to a JSON string.  Non-JSON atoms (dates) go through str."""
    kwargs.setdefault("default", str)
    return json.dumps(to_python(val), **kwargs)

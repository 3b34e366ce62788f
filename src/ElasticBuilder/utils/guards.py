"""Small value predicates shared by validation and option building.

None of these functions raise; they answer questions about arbitrary values
so builders can decide which keys to emit.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

_SCALAR_TYPES = (str, bytes, int, float, bool)


def is_nil(value: Any) -> bool:
    """Return True if value is the absent marker."""
    return value is None


def is_string(value: Any) -> bool:
    """Return True if value is a string."""
    return isinstance(value, str)


def is_object(value: Any) -> bool:
    """Return True for object-shaped values.

    Mappings and arbitrary instances qualify; None, ordered sequences and
    scalars do not.
    """
    if value is None or isinstance(value, (list, tuple)):
        return False
    return not isinstance(value, _SCALAR_TYPES)


def has(obj: Any, key: str) -> bool:
    """Return True if obj directly holds key.

    Mappings are checked for key membership, other objects for an entry in
    their instance dictionary. A nil object never holds anything.
    """
    if obj is None:
        return False
    if isinstance(obj, Mapping):
        return key in obj
    return key in getattr(obj, "__dict__", {})


def has_in(obj: Any, key: str) -> bool:
    """Return True if obj holds key directly or through its class."""
    if obj is None:
        return False
    if isinstance(obj, Mapping):
        return key in obj
    return hasattr(obj, key)


def omit(obj: Mapping[str, Any] | None, keys: Iterable[str]) -> dict[str, Any]:
    """Copy a mapping without the given keys.

    Args:
        obj: Source mapping, may be None.
        keys: Keys to leave out.

    Returns:
        New dict in the source's key order; empty dict for a nil source.
    """
    if obj is None:
        return {}
    excluded = set(keys)
    return {k: v for k, v in obj.items() if k not in excluded}


def is_empty(value: Any) -> bool:
    """Return True for None, empty strings, empty sequences and empty mappings.

    Numbers and booleans are never empty, including 0 and False.
    """
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, Mapping)):
        return len(value) == 0
    return False


def head(seq: Any) -> Any:
    """Return the first element of seq, or None when it is nil or empty."""
    if not seq:
        return None
    return seq[0]

"""Validation and serialization helpers shared by every builder.

Two concerns live here:

- Parameter validation: `check_type` for nominal capability checks and
  `invalid_param` / `check_enum` for enumerated string tokens.
- Serialization: `recursive_to_json` flattens a graph of builder objects into
  plain JSON-compatible data.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Callable, Collection, Mapping, NoReturn

from ElasticBuilder.utils.guards import has_in, is_nil
from ElasticBuilder.utils.log import log

ParamRaiser = Callable[..., NoReturn]


def _type_name(expected: type | tuple[type, ...]) -> str:
    """Return the class name(s) of `expected` for error messages."""
    if isinstance(expected, tuple):
        return " or ".join(t.__name__ for t in expected)
    return expected.__name__


def check_type(value: Any, expected: type | tuple[type, ...]) -> None:
    """Ensure value is an instance of the expected class.

    The check is nominal: a value only passes if its class derives from
    `expected`, never because it happens to expose the same methods.

    Args:
        value: Value to check.
        expected: Class or tuple of classes the value must belong to.

    Raises:
        TypeError: If value is None or not an instance of `expected`.
    """
    if value is None or not isinstance(value, expected):
        raise TypeError(f"Argument must be an instance of {_type_name(expected)}")


def _describe_allowed(allowed: str | Collection[str]) -> str:
    """Describe the allowed values for error messages."""
    if isinstance(allowed, str):
        return f"should be one of {allowed}"
    return f"should belong to {sorted(allowed)}"


def invalid_param(ref_url: str, param_name: str, allowed: str | Collection[str]) -> ParamRaiser:
    """Build the raiser used when a parameter is outside its allowed set.

    Call sites test membership themselves and only invoke the returned
    function on mismatch (or use `check_enum`, which does both).

    Args:
        ref_url: Documentation URL for the parameter; may be empty.
        param_name: Wire name of the parameter, e.g. ``score_mode``.
        allowed: Human readable description or the set of allowed tokens.

    Returns:
        Function ``(value, ref_url=None)`` that logs and raises ValueError.
    """
    description = _describe_allowed(allowed)

    def raiser(value: Any, reference_url: str | None = None) -> NoReturn:
        """Log the allowed values and raise.

        Raises:
            ValueError: Always.
        """
        url = reference_url or ref_url
        if url:
            log.info("See %s", url)
        log.warning("Got '%s' - %s", param_name, value)
        message = f"The '{param_name}' parameter {description}. Got {value!r}."
        if url:
            message = f"{message} See {url}"
        raise ValueError(message)

    return raiser


def check_enum(
    value: Any,
    allowed: Collection[str],
    raiser: ParamRaiser,
    *,
    ref_url: str | None = None,
) -> str:
    """Validate a case-insensitive enumerated token.

    Args:
        value: Candidate token.
        allowed: Allowed lower-case tokens.
        raiser: Raiser built by `invalid_param` for this parameter.
        ref_url: Optional documentation URL overriding the raiser's own.

    Returns:
        The lower-cased token.

    Raises:
        ValueError: If value is None, not a string, or not in `allowed`.
    """
    if not isinstance(value, str):
        raiser(value, ref_url)
    lowered = value.lower()
    if lowered not in allowed:
        raiser(value, ref_url)
    return lowered


def set_default(mapping: dict[str, Any], key: str, default: Any) -> bool:
    """Insert default under key only if key is absent.

    Returns:
        True when the default was inserted.
    """
    if key in mapping:
        return False
    mapping[key] = default
    return True


def first_digit_pos(text: str) -> int:
    """Return the index of the first digit in text, or -1."""
    for idx, char in enumerate(text):
        if char.isdigit():
            return idx
    return -1


def recursive_to_json(value: Any) -> Any:
    """Flatten a builder graph into plain JSON-compatible data.

    - None passes through.
    - Objects exposing ``to_json()`` are serialized and the result is walked
      again, so nested builders at any depth are resolved.
    - Lists and tuples become lists with the same order and length.
    - Mappings become dicts with the same keys in insertion order.
    - Dates and datetimes become ISO-8601 strings.
    - Other scalars are returned unchanged.

    Args:
        value: Any value, possibly containing builder objects.

    Returns:
        Structure made of dicts, lists, strings, numbers, booleans and None.
    """
    if is_nil(value):
        return None
    if isinstance(value, Mapping):
        return {key: recursive_to_json(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [recursive_to_json(item) for item in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if has_in(value, "to_json") and not isinstance(value, type) and callable(value.to_json):
        return recursive_to_json(value.to_json())
    return value


def unsupported(owner: str, param_name: str, ref_url: str | None = None) -> NoReturn:
    """Reject a setter that a node kind inherits but does not accept.

    Raises:
        ValueError: Always.
    """
    if ref_url:
        log.info("See %s", ref_url)
    raise ValueError(f"{param_name} is not supported in {owner}")

"""Runtime field definitions for `runtime_mappings`."""

from __future__ import annotations

from typing import Any

from ElasticBuilder.core.consts import RUNTIME_FIELD_TYPES
from ElasticBuilder.core.util import recursive_to_json


class RuntimeField:
    """A field computed at query time by a script.

    Both the type and the script are required, but the check happens when the
    field is serialized, so either may be set in any order after construction.
    """

    def __init__(self, type: str | None = None, script: str | None = None) -> None:  # noqa: A002
        """Initialize a runtime field."""
        self._body: dict[str, Any] = {}
        self._is_type_set = False
        self._is_script_set = False
        if type is not None:
            self.type(type)
        if script is not None:
            self.script(script)

    def script(self, script: str) -> RuntimeField:
        """Set the Painless source that emits the field values."""
        self._body["script"] = {"source": script}
        self._is_script_set = True
        return self

    def type(self, type_name: str) -> RuntimeField:  # noqa: A003
        """Set the field type.

        Raises:
            ValueError: If the type is not a supported runtime field type.
        """
        type_lower = type_name.lower() if isinstance(type_name, str) else type_name
        if type_lower not in RUNTIME_FIELD_TYPES:
            raise ValueError(f"`type` must be one of {', '.join(RUNTIME_FIELD_TYPES)}")
        self._body["type"] = type_lower
        self._is_type_set = True
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize the runtime field.

        Raises:
            ValueError: If type or script is missing.
        """
        if not self._is_type_set:
            raise ValueError("`type` should be set")
        if not self._is_script_set:
            raise ValueError("`script` should be set")
        return recursive_to_json(self._body)

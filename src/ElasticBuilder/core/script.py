"""Script clause used by scripted queries, sorts, fields and aggregations."""

from __future__ import annotations

from typing import Any

from ElasticBuilder.core.util import recursive_to_json
from ElasticBuilder.utils.log import log

_SOURCE_KEYS = ("inline", "source", "stored", "id", "file")


class Script:
    """A script given inline, by stored id, or by file name.

    Only one way of providing the script body is kept; setting a second one
    logs a warning and replaces the first.

    Args:
        type: Optional source kind: ``inline``, ``source``, ``stored``, ``id``
            or ``file``. Requires `source` as well.
        source: Script code, stored script id or file name.

    Raises:
        ValueError: If `type` is not a recognised source kind.
    """

    def __init__(self, type: str | None = None, source: str | None = None) -> None:  # noqa: A002
        """Initialize the script, setting its source when both arguments are given."""
        self._is_type_set = False
        self._body: dict[str, Any] = {}

        if type is None or source is None:
            return
        kind = type.lower()
        if kind not in _SOURCE_KEYS:
            raise ValueError("`type` must be one of `inline`, `source`, `stored`, `id`, `file`")
        getattr(self, kind)(source)

    def _set_source(self, key: str, value: str) -> Script:
        """Set the script source under `key`, replacing any previous one."""
        if self._is_type_set:
            log.warning("[Script] Script source(`%s`) was already specified!", "`/`".join(_SOURCE_KEYS))
            log.warning("[Script] Overwriting.")
            for old_key in _SOURCE_KEYS:
                self._body.pop(old_key, None)
        self._body[key] = value
        self._is_type_set = True
        return self

    def inline(self, script_code: str) -> Script:
        """Set the inline script code (legacy key)."""
        return self._set_source("inline", script_code)

    def source(self, script_code: str) -> Script:
        """Set the inline script code."""
        return self._set_source("source", script_code)

    def stored(self, script_id: str) -> Script:
        """Reference a stored script (legacy key)."""
        return self._set_source("stored", script_id)

    def id(self, script_id: str) -> Script:  # noqa: A003
        """Reference a stored script by id."""
        return self._set_source("id", script_id)

    def file(self, file_name: str) -> Script:
        """Reference a script file on the nodes."""
        return self._set_source("file", file_name)

    def lang(self, lang: str) -> Script:
        """Set the script language, e.g. ``painless``."""
        self._body["lang"] = lang
        return self

    def params(self, params: dict[str, Any]) -> Script:
        """Set the named parameters passed to the script."""
        self._body["params"] = params
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize the script into a fresh mapping."""
        return recursive_to_json(self._body)

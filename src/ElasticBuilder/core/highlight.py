"""Highlighting options for search requests."""

from __future__ import annotations

from typing import Any, Sequence

from ElasticBuilder.core.consts import ES_REF_BASE
from ElasticBuilder.core.query import Query
from ElasticBuilder.core.util import check_enum, check_type, invalid_param, recursive_to_json

ES_REF_URL = f"{ES_REF_BASE}/highlighting.html"

_invalid_encoder_param = invalid_param(ES_REF_URL, "encoder", "'default' or 'html'")
_invalid_type_param = invalid_param(ES_REF_URL, "type", "'plain', 'unified' or 'fvh'")
_invalid_fragmenter_param = invalid_param(ES_REF_URL, "fragmenter", "'simple' or 'span'")


class Highlight:
    """Highlight configuration.

    Most options can be set globally or for one field: pass `field` to scope
    the option, leave it out to set it for all fields.

    Args:
        fields: A field name or a list of field names to highlight.
    """

    def __init__(self, fields: str | Sequence[str] | None = None) -> None:
        """Initialize the highlight, optionally for the given field(s)."""
        self._fields: dict[str, dict[str, Any]] = {}
        self._highlight: dict[str, Any] = {"fields": self._fields}
        if isinstance(fields, str):
            self.field(fields)
        elif fields is not None:
            self.fields(fields)

    def _set_field_option(self, field: str | None, option: str, value: Any) -> None:
        """Set an option on one field, or globally when `field` is None."""
        if field is None:
            self._highlight[option] = value
            return
        self.field(field)
        self._fields[field][option] = value

    def field(self, field: str) -> Highlight:
        """Add a field to highlight."""
        if field is not None and field not in self._fields:
            self._fields[field] = {}
        return self

    def fields(self, fields: Sequence[str]) -> Highlight:
        """Add several fields to highlight."""
        check_type(fields, (list, tuple))
        for field in fields:
            self.field(field)
        return self

    def pre_tags(self, tags: str | list[str], field: str | None = None) -> Highlight:
        """Set the tag(s) inserted before each highlighted term."""
        self._set_field_option(field, "pre_tags", [tags] if isinstance(tags, str) else tags)
        return self

    def post_tags(self, tags: str | list[str], field: str | None = None) -> Highlight:
        """Set the tag(s) inserted after each highlighted term."""
        self._set_field_option(field, "post_tags", [tags] if isinstance(tags, str) else tags)
        return self

    def styled_tags_schema(self) -> Highlight:
        """Use the built-in styled tags."""
        self._highlight["tags_schema"] = "styled"
        return self

    def score_order(self, field: str | None = None) -> Highlight:
        """Order highlighted fragments by score."""
        self._set_field_option(field, "order", "score")
        return self

    def fragment_size(self, size: int, field: str | None = None) -> Highlight:
        """Set the size of each fragment in characters."""
        self._set_field_option(field, "fragment_size", size)
        return self

    def number_of_fragments(self, count: int, field: str | None = None) -> Highlight:
        """Set the maximum number of fragments returned."""
        self._set_field_option(field, "number_of_fragments", count)
        return self

    def no_match_size(self, size: int, field: str | None = None) -> Highlight:
        """Return this much text from the start when nothing matches."""
        self._set_field_option(field, "no_match_size", size)
        return self

    def highlight_query(self, query: Query, field: str | None = None) -> Highlight:
        """Highlight using a query other than the search query."""
        check_type(query, Query)
        self._set_field_option(field, "highlight_query", query)
        return self

    def matched_fields(self, fields: Sequence[str], field: str) -> Highlight:
        """Combine matches on several fields into one field (fvh only).

        Raises:
            ValueError: If no field name is given.
        """
        check_type(fields, (list, tuple))
        if not field:
            raise ValueError("`matched_fields` requires field name to be passed")
        self.type("fvh", field)
        self._set_field_option(field, "matched_fields", list(fields))
        return self

    def encoder(self, encoder: str) -> Highlight:
        """Set how snippets are encoded: ``default`` or ``html``.

        Raises:
            ValueError: If `encoder` is not one of them.
        """
        self._highlight["encoder"] = check_enum(encoder, ("default", "html"), _invalid_encoder_param)
        return self

    def require_field_match(self, require: bool, field: str | None = None) -> Highlight:
        """Only highlight fields the query matched on."""
        self._set_field_option(field, "require_field_match", require)
        return self

    def boundary_max_scan(self, count: int, field: str | None = None) -> Highlight:
        """Set how far to scan for boundary characters."""
        self._set_field_option(field, "boundary_max_scan", count)
        return self

    def boundary_chars(self, chars: str, field: str | None = None) -> Highlight:
        """Set the characters that count as boundaries."""
        self._set_field_option(field, "boundary_chars", chars)
        return self

    def type(self, type_name: str, field: str | None = None) -> Highlight:  # noqa: A003
        """Set the highlighter: ``plain``, ``unified`` or ``fvh``.

        Raises:
            ValueError: If `type_name` is not one of them.
        """
        self._set_field_option(
            field, "type", check_enum(type_name, ("plain", "unified", "fvh"), _invalid_type_param)
        )
        return self

    def force_source(self, force: bool, field: str | None = None) -> Highlight:
        """Highlight from ``_source`` even if the field is stored."""
        self._set_field_option(field, "force_source", force)
        return self

    def fragmenter(self, fragmenter: str, field: str | None = None) -> Highlight:
        """Set how text is split into fragments: ``simple`` or ``span``.

        Raises:
            ValueError: If `fragmenter` is not one of them.
        """
        self._set_field_option(
            field, "fragmenter", check_enum(fragmenter, ("simple", "span"), _invalid_fragmenter_param)
        )
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize the highlight options."""
        return recursive_to_json(self._highlight)

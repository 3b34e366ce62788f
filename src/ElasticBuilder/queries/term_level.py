"""Term-level queries: exact values on structured fields."""

from __future__ import annotations

from typing import Any, Sequence

from ElasticBuilder.core.consts import ES_REF_BASE
from ElasticBuilder.core.query import MultiTermQuery, Query
from ElasticBuilder.core.script import Script
from ElasticBuilder.core.util import check_enum, check_type, invalid_param, recursive_to_json
from ElasticBuilder.queries.helper import validate_rewrite_method
from ElasticBuilder.utils.guards import has

_RANGE_REF_URL = f"{ES_REF_BASE}/query-dsl-range-query.html"

_invalid_relation_param = invalid_param(_RANGE_REF_URL, "relation", "'WITHIN', 'CONTAINS' or 'INTERSECTS'")


class ValueTermOptions:
    """Shape shared by queries of the form ``{type: {field: value}}``.

    The value is kept in the options mapping. When it is the only option the
    serialized form collapses to ``{type: {field: value}}``; otherwise it is
    ``{type: {field: {"value": value, ...}}}``. The value is required, but
    only checked when the query is serialized.
    """

    _query_opts: dict[str, Any]
    query_type: str

    def __init__(self, query_type: str, field: str | None = None, value: Any = None) -> None:
        """Initialize the query on `field` with the value to look for."""
        super().__init__(query_type)  # type: ignore[call-arg]
        self._field = field
        if value is not None:
            self._query_opts["value"] = value

    def field(self, field: str):
        """Set the field to search."""
        self._field = field
        return self

    def value(self, value: Any):
        """Set the value to look for."""
        self._query_opts["value"] = value
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize, collapsing a lone value.

        Raises:
            ValueError: If no value was set.
        """
        if not has(self._query_opts, "value"):
            raise ValueError("Value is required for term level query!")
        opts = self._query_opts["value"] if len(self._query_opts) == 1 else self._query_opts
        return recursive_to_json({self.query_type: {self._field: opts}})


class TermQuery(ValueTermOptions, Query):
    """Exact term match on a field."""

    def __init__(self, field: str | None = None, value: Any = None) -> None:
        """Initialize a term query."""
        super().__init__("term", field, value)

    def case_insensitive(self, enable: bool) -> TermQuery:
        """Match the term regardless of case."""
        self._query_opts["case_insensitive"] = enable
        return self


class PrefixQuery(ValueTermOptions, MultiTermQuery):
    """Matches terms starting with a prefix."""

    _REF_URL = f"{ES_REF_BASE}/query-dsl-prefix-query.html"

    def __init__(self, field: str | None = None, value: str | None = None) -> None:
        """Initialize a prefix query."""
        super().__init__("prefix", field, value)

    def rewrite(self, method: str) -> PrefixQuery:
        """Set how the prefix is rewritten into term queries.

        Raises:
            ValueError: If `method` is not a valid rewrite method.
        """
        validate_rewrite_method(method, "rewrite", self._REF_URL)
        self._query_opts["rewrite"] = method
        return self

    def case_insensitive(self, enable: bool) -> PrefixQuery:
        """Match the prefix regardless of case."""
        self._query_opts["case_insensitive"] = enable
        return self


class WildcardQuery(ValueTermOptions, MultiTermQuery):
    """Matches terms against a ``*`` / ``?`` pattern."""

    _REF_URL = f"{ES_REF_BASE}/query-dsl-wildcard-query.html"

    def __init__(self, field: str | None = None, value: str | None = None) -> None:
        """Initialize a wildcard query."""
        super().__init__("wildcard", field, value)

    def case_insensitive(self, enable: bool) -> WildcardQuery:
        """Match the pattern regardless of case."""
        self._query_opts["case_insensitive"] = enable
        return self

    def rewrite(self, method: str) -> WildcardQuery:
        """Set how the pattern is rewritten into term queries.

        Raises:
            ValueError: If `method` is not a valid rewrite method.
        """
        validate_rewrite_method(method, "rewrite", self._REF_URL)
        self._query_opts["rewrite"] = method
        return self


class RegexpQuery(ValueTermOptions, MultiTermQuery):
    """Matches terms against a regular expression."""

    _REF_URL = f"{ES_REF_BASE}/query-dsl-regexp-query.html"

    def __init__(self, field: str | None = None, value: str | None = None) -> None:
        """Initialize a regexp query."""
        super().__init__("regexp", field, value)

    def flags(self, flags: str) -> RegexpQuery:
        """Enable optional operators, e.g. ``INTERSECTION|COMPLEMENT``."""
        self._query_opts["flags"] = flags
        return self

    def case_insensitive(self, enable: bool) -> RegexpQuery:
        """Match the expression regardless of case."""
        self._query_opts["case_insensitive"] = enable
        return self

    def max_determinized_states(self, limit: int) -> RegexpQuery:
        """Limit the automaton states the expression may need."""
        self._query_opts["max_determinized_states"] = limit
        return self

    def rewrite(self, method: str) -> RegexpQuery:
        """Set how the expression is rewritten into term queries.

        Raises:
            ValueError: If `method` is not a valid rewrite method.
        """
        validate_rewrite_method(method, "rewrite", self._REF_URL)
        self._query_opts["rewrite"] = method
        return self


class FuzzyQuery(ValueTermOptions, MultiTermQuery):
    """Matches terms within an edit distance of the value."""

    def __init__(self, field: str | None = None, value: str | None = None) -> None:
        """Initialize a fuzzy query."""
        super().__init__("fuzzy", field, value)

    def fuzziness(self, factor: int | str) -> FuzzyQuery:
        """Set the maximum edit distance, e.g. ``2`` or ``AUTO``."""
        self._query_opts["fuzziness"] = factor
        return self

    def prefix_length(self, length: int) -> FuzzyQuery:
        """Set how many leading characters must match exactly."""
        self._query_opts["prefix_length"] = length
        return self

    def max_expansions(self, limit: int) -> FuzzyQuery:
        """Set the maximum number of variations considered."""
        self._query_opts["max_expansions"] = limit
        return self

    def transpositions(self, enable: bool) -> FuzzyQuery:
        """Count swapping two adjacent characters as one edit."""
        self._query_opts["transpositions"] = enable
        return self


class TermsQuery(Query):
    """Matches any of several exact terms, or terms fetched from a document.

    Giving any lookup option (`index`, `id`, `path`, `routing`,
    `terms_lookup`) switches the query into terms-lookup mode, in which the
    explicit values are ignored.
    """

    def __init__(self, field: str | None = None, values: Any = None) -> None:
        """Initialize a terms query."""
        super().__init__("terms")
        self._is_terms_lookup = False
        self._terms_lookup_opts: dict[str, Any] = {}
        self._values: list[Any] = []
        self._field = field
        if values is not None:
            if isinstance(values, (list, tuple)):
                self.values(values)
            else:
                self.value(values)

    def _set_terms_lookup_opt(self, key: str, value: Any) -> None:
        """Record one terms lookup option and switch to lookup mode."""
        self._is_terms_lookup = True
        self._terms_lookup_opts[key] = value

    def field(self, field: str) -> TermsQuery:
        """Set the field to match."""
        self._field = field
        return self

    def value(self, value: Any) -> TermsQuery:
        """Append one term."""
        self._values.append(value)
        return self

    def values(self, values: Sequence[Any]) -> TermsQuery:
        """Append several terms."""
        check_type(values, (list, tuple))
        self._values.extend(values)
        return self

    def terms_lookup(self, lookup_opts: dict[str, Any]) -> TermsQuery:
        """Set all terms-lookup options at once."""
        check_type(lookup_opts, dict)
        self._is_terms_lookup = True
        self._terms_lookup_opts.update(lookup_opts)
        return self

    def index(self, index: str) -> TermsQuery:
        """Set the index of the lookup document."""
        self._set_terms_lookup_opt("index", index)
        return self

    def id(self, doc_id: str) -> TermsQuery:  # noqa: A003
        """Set the ID of the lookup document."""
        self._set_terms_lookup_opt("id", doc_id)
        return self

    def path(self, path: str) -> TermsQuery:
        """Set the field of the lookup document holding the terms."""
        self._set_terms_lookup_opt("path", path)
        return self

    def routing(self, routing: str) -> TermsQuery:
        """Set the routing of the lookup document."""
        self._set_terms_lookup_opt("routing", routing)
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize with either the values or the lookup under the field."""
        terms = self._terms_lookup_opts if self._is_terms_lookup else self._values
        return recursive_to_json({self.query_type: {**self._query_opts, self._field: terms}})


class TermsSetQuery(Query):
    """Matches documents containing a minimum number of the given terms."""

    def __init__(self, field: str | None = None, terms: Any = None) -> None:
        """Initialize a terms set query."""
        super().__init__("terms_set")
        self._query_opts["terms"] = []
        self._field = field
        if terms is not None:
            if isinstance(terms, (list, tuple)):
                self.terms(terms)
            else:
                self.term(terms)

    def field(self, field: str) -> TermsSetQuery:
        """Set the field to match."""
        self._field = field
        return self

    def term(self, term: Any) -> TermsSetQuery:
        """Append one term."""
        self._query_opts["terms"].append(term)
        return self

    def terms(self, terms: Sequence[Any]) -> TermsSetQuery:
        """Append several terms.

        Raises:
            TypeError: If `terms` is not a list or tuple.
        """
        check_type(terms, (list, tuple))
        self._query_opts["terms"].extend(terms)
        return self

    def minimum_should_match_field(self, field_name: str) -> TermsSetQuery:
        """Read the number of terms that must match from this field."""
        self._query_opts["minimum_should_match_field"] = field_name
        return self

    def minimum_should_match_script(self, script: Script | dict[str, Any]) -> TermsSetQuery:
        """Compute the number of terms that must match with a script."""
        self._query_opts["minimum_should_match_script"] = script
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize with the options under the field name."""
        return recursive_to_json({self.query_type: {self._field: self._query_opts}})


class RangeQuery(MultiTermQuery):
    """Matches values within a range."""

    def __init__(self, field: str | None = None) -> None:
        """Initialize a range query."""
        super().__init__("range")
        self._field = field

    def field(self, field: str) -> RangeQuery:
        """Set the field to match."""
        self._field = field
        return self

    def gte(self, value: Any) -> RangeQuery:
        """Match values greater than or equal to `value`."""
        self._query_opts["gte"] = value
        return self

    def lte(self, value: Any) -> RangeQuery:
        """Match values less than or equal to `value`."""
        self._query_opts["lte"] = value
        return self

    def gt(self, value: Any) -> RangeQuery:
        """Match values greater than `value`."""
        self._query_opts["gt"] = value
        return self

    def lt(self, value: Any) -> RangeQuery:
        """Match values less than `value`."""
        self._query_opts["lt"] = value
        return self

    def format(self, fmt: str) -> RangeQuery:  # noqa: A003
        """Set the date format used to parse date values in the query."""
        self._query_opts["format"] = fmt
        return self

    def time_zone(self, zone: str) -> RangeQuery:
        """Set the time zone used to convert date values."""
        self._query_opts["time_zone"] = zone
        return self

    def relation(self, relation: str) -> RangeQuery:
        """Set how range fields match: WITHIN, CONTAINS or INTERSECTS.

        The value is matched case-insensitively and sent upper-case.
        """
        lowered = check_enum(relation, ("within", "contains", "intersects"), _invalid_relation_param)
        self._query_opts["relation"] = lowered.upper()
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize with the bounds under the field name."""
        return recursive_to_json({self.query_type: {self._field: self._query_opts}})


class ExistsQuery(Query):
    """Matches documents with an indexed value for a field."""

    def __init__(self, field: str | None = None) -> None:
        """Initialize an exists query."""
        super().__init__("exists")
        if field is not None:
            self._query_opts["field"] = field

    def field(self, field: str) -> ExistsQuery:
        """Set the field that must hold a value."""
        self._query_opts["field"] = field
        return self


class IdsQuery(Query):
    """Matches documents by ``_id``."""

    def __init__(self, ids: Sequence[str] | None = None) -> None:
        """Initialize an ids query."""
        super().__init__("ids")
        if ids is not None:
            self.values(ids)

    def values(self, ids: Sequence[str]) -> IdsQuery:
        """Set the document IDs to match.

        Raises:
            TypeError: If `ids` is not a list or tuple.
        """
        check_type(ids, (list, tuple))
        self._query_opts["values"] = list(ids)
        return self

    def ids(self, ids: Sequence[str]) -> IdsQuery:
        """Alias for `values`."""
        return self.values(ids)

"""Full-text queries: analyzed text matched against one or more fields."""

from __future__ import annotations

from typing import Any, Sequence

from ElasticBuilder.core.consts import ES_REF_BASE, MULTI_MATCH_TYPE
from ElasticBuilder.core.query import Query
from ElasticBuilder.core.util import check_enum, check_type, invalid_param, recursive_to_json
from ElasticBuilder.queries.helper import validate_rewrite_method
from ElasticBuilder.utils.guards import has, is_string

_MATCH_REF_URL = f"{ES_REF_BASE}/query-dsl-match-query.html"
_MULTI_MATCH_REF_URL = f"{ES_REF_BASE}/query-dsl-multi-match-query.html"
_QUERY_STRING_REF_URL = f"{ES_REF_BASE}/query-dsl-query-string-query.html"

_OPERATOR_SET = frozenset({"and", "or"})
_ZERO_TERMS_SET = frozenset({"all", "none"})

_invalid_operator_param = invalid_param(_MATCH_REF_URL, "operator", "'and' or 'or'")
_invalid_zero_terms_param = invalid_param(_MATCH_REF_URL, "zero_terms_query", "'all' or 'none'")
_invalid_multi_match_type = invalid_param(_MULTI_MATCH_REF_URL, "type", MULTI_MATCH_TYPE)
_invalid_default_operator = invalid_param(_QUERY_STRING_REF_URL, "default_operator", "'AND' or 'OR'")


class FullTextOptions:
    """Options every full-text query accepts."""

    _query_opts: dict[str, Any]

    def query(self, query_string: str):
        """Set the text to analyze and search for."""
        self._query_opts["query"] = query_string
        return self

    def analyzer(self, analyzer: str):
        """Set the analyzer used to convert the query text into tokens."""
        self._query_opts["analyzer"] = analyzer
        return self

    def minimum_should_match(self, min_match: int | str):
        """Set the minimum number of optional clauses that must match."""
        self._query_opts["minimum_should_match"] = min_match
        return self


class MonoFieldOptions(FullTextOptions):
    """Shape of full-text queries against a single field.

    Serializes as ``{type: {field: {...}}}``, or ``{type: {field: query}}``
    when the query text is the only option. The query text is required, but
    only checked when the query is serialized.
    """

    query_type: str

    def __init__(self, query_type: str, field: str | None = None, query_str: str | None = None) -> None:
        """Initialize the query on `field` with the query text."""
        super().__init__(query_type)  # type: ignore[call-arg]
        self._field = field
        if query_str is not None:
            self._query_opts["query"] = query_str

    def field(self, field: str):
        """Set the field to search."""
        self._field = field
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize, collapsing a lone query string.

        Raises:
            ValueError: If no query text was set.
        """
        if not has(self._query_opts, "query"):
            raise ValueError("Query is required for full text query!")
        opts = self._query_opts["query"] if len(self._query_opts) == 1 else self._query_opts
        return recursive_to_json({self.query_type: {self._field: opts}})


class MatchQuery(MonoFieldOptions, Query):
    """Standard analyzed match against one field."""

    def __init__(self, field: str | None = None, query_str: str | None = None) -> None:
        """Initialize a match query."""
        super().__init__("match", field, query_str)

    def operator(self, operator: str) -> MatchQuery:
        """Set the boolean logic between analyzed terms: ``and`` or ``or``."""
        self._query_opts["operator"] = check_enum(operator, _OPERATOR_SET, _invalid_operator_param)
        return self

    def lenient(self, enable: bool) -> MatchQuery:
        """Ignore format-based failures such as text against a numeric field."""
        self._query_opts["lenient"] = enable
        return self

    def fuzziness(self, factor: int | str) -> MatchQuery:
        """Set the allowed edit distance, e.g. ``AUTO`` or ``2``."""
        self._query_opts["fuzziness"] = factor
        return self

    def prefix_length(self, length: int) -> MatchQuery:
        """Set how many leading characters are left unchanged for fuzzy matching."""
        self._query_opts["prefix_length"] = length
        return self

    def max_expansions(self, limit: int) -> MatchQuery:
        """Set the maximum number of terms a fuzzy term expands to."""
        self._query_opts["max_expansions"] = limit
        return self

    def rewrite(self, method: str) -> MatchQuery:
        """Set the rewrite method of the multi-term parts of the query."""
        validate_rewrite_method(method, "rewrite", _MATCH_REF_URL)
        self._query_opts["rewrite"] = method
        return self

    def fuzzy_rewrite(self, method: str) -> MatchQuery:
        """Set the rewrite method used for fuzzy terms."""
        validate_rewrite_method(method, "fuzzy_rewrite", _MATCH_REF_URL)
        self._query_opts["fuzzy_rewrite"] = method
        return self

    def fuzzy_transpositions(self, enable: bool) -> MatchQuery:
        """Count swapping two adjacent characters as one edit."""
        self._query_opts["fuzzy_transpositions"] = enable
        return self

    def zero_terms_query(self, behavior: str) -> MatchQuery:
        """Decide what matches when the analyzer removes every token."""
        self._query_opts["zero_terms_query"] = check_enum(behavior, _ZERO_TERMS_SET, _invalid_zero_terms_param)
        return self

    def cutoff_frequency(self, frequency: float) -> MatchQuery:
        """Set the frequency above which terms are treated as optional."""
        self._query_opts["cutoff_frequency"] = frequency
        return self

    def auto_generate_synonyms_phrase_query(self, enable: bool) -> MatchQuery:
        """Create phrase queries for multi-term synonyms."""
        self._query_opts["auto_generate_synonyms_phrase_query"] = enable
        return self


class MatchPhraseQuery(MonoFieldOptions, Query):
    """Matches the analyzed text as a phrase."""

    def __init__(self, field: str | None = None, query_str: str | None = None, *, query_type: str = "match_phrase") -> None:
        """Initialize a match phrase query."""
        super().__init__(query_type, field, query_str)

    def minimum_should_match(self, min_match: int | str) -> MatchPhraseQuery:
        """Not available on phrase queries.

        Raises:
            ValueError: Always.
        """
        raise ValueError(f"minimum_should_match is not supported in {type(self).__name__}")

    def slop(self, slop: int) -> MatchPhraseQuery:
        """Set how far apart terms may be and still count as a phrase."""
        self._query_opts["slop"] = slop
        return self


class MatchPhrasePrefixQuery(MatchPhraseQuery):
    """Phrase match treating the last term as a prefix."""

    def __init__(self, field: str | None = None, query_str: str | None = None) -> None:
        """Initialize a match phrase prefix query."""
        super().__init__(field, query_str, query_type="match_phrase_prefix")

    def max_expansions(self, limit: int) -> MatchPhrasePrefixQuery:
        """Set how many terms the final prefix may expand to."""
        self._query_opts["max_expansions"] = limit
        return self


class MultiFieldOptions(FullTextOptions):
    """Field list handling for full-text queries over several fields.

    The query text is inserted before the field list, and ``fields`` is
    seeded with an empty list unless the subclass clears `_seed_fields`.
    """

    _seed_fields = True

    def __init__(self, query_type: str, fields: Sequence[str] | str | None = None, query_str: str | None = None) -> None:
        """Initialize the query with the query text and the field(s) to search."""
        super().__init__(query_type)  # type: ignore[call-arg]
        if query_str is not None:
            self._query_opts["query"] = query_str
        if self._seed_fields:
            self._query_opts["fields"] = []
        if fields is not None:
            if is_string(fields):
                self.field(fields)  # type: ignore[arg-type]
            else:
                self.fields(fields)  # type: ignore[arg-type]

    def field(self, field: str):
        """Append a field; ``^`` boosts such as ``title^3`` are allowed."""
        self._query_opts.setdefault("fields", []).append(field)
        return self

    def fields(self, fields: Sequence[str]):
        """Append several fields.

        Raises:
            TypeError: If `fields` is not a list or tuple.
        """
        check_type(fields, (list, tuple))
        self._query_opts.setdefault("fields", []).extend(fields)
        return self


class MultiMatchQuery(MultiFieldOptions, Query):
    """Match query over several fields."""

    def __init__(self, fields: Sequence[str] | str | None = None, query_str: str | None = None) -> None:
        """Initialize a multi match query."""
        super().__init__("multi_match", fields, query_str)

    def type(self, match_type: str) -> MultiMatchQuery:  # noqa: A003
        """Set how the fields are combined, e.g. ``best_fields`` or ``cross_fields``."""
        self._query_opts["type"] = check_enum(match_type, MULTI_MATCH_TYPE, _invalid_multi_match_type)
        return self

    def tie_breaker(self, factor: float) -> MultiMatchQuery:
        """Set how much the non-best fields add to the score."""
        self._query_opts["tie_breaker"] = factor
        return self

    def operator(self, operator: str) -> MultiMatchQuery:
        """Set the boolean logic between analyzed terms: ``and`` or ``or``."""
        self._query_opts["operator"] = check_enum(operator, _OPERATOR_SET, _invalid_operator_param)
        return self

    def lenient(self, enable: bool) -> MultiMatchQuery:
        """Ignore format-based failures such as text against a numeric field."""
        self._query_opts["lenient"] = enable
        return self

    def slop(self, slop: int) -> MultiMatchQuery:
        """Set the phrase slop for the ``phrase`` types."""
        self._query_opts["slop"] = slop
        return self

    def fuzziness(self, factor: int | str) -> MultiMatchQuery:
        """Set the allowed edit distance, e.g. ``AUTO`` or ``2``."""
        self._query_opts["fuzziness"] = factor
        return self

    def prefix_length(self, length: int) -> MultiMatchQuery:
        """Set how many leading characters are left unchanged for fuzzy matching."""
        self._query_opts["prefix_length"] = length
        return self

    def max_expansions(self, limit: int) -> MultiMatchQuery:
        """Set the maximum number of terms a fuzzy term expands to."""
        self._query_opts["max_expansions"] = limit
        return self

    def rewrite(self, method: str) -> MultiMatchQuery:
        """Set the rewrite method of the multi-term parts of the query."""
        validate_rewrite_method(method, "rewrite", _MULTI_MATCH_REF_URL)
        self._query_opts["rewrite"] = method
        return self

    def fuzzy_rewrite(self, method: str) -> MultiMatchQuery:
        """Set the rewrite method used for fuzzy terms."""
        validate_rewrite_method(method, "fuzzy_rewrite", _MULTI_MATCH_REF_URL)
        self._query_opts["fuzzy_rewrite"] = method
        return self

    def zero_terms_query(self, behavior: str) -> MultiMatchQuery:
        """Decide what matches when the analyzer removes every token."""
        self._query_opts["zero_terms_query"] = check_enum(behavior, _ZERO_TERMS_SET, _invalid_zero_terms_param)
        return self

    def cutoff_frequency(self, frequency: float) -> MultiMatchQuery:
        """Set the frequency above which terms are treated as optional."""
        self._query_opts["cutoff_frequency"] = frequency
        return self


class QueryStringOptions(MultiFieldOptions):
    """Options shared by the two query-string flavours.

    ``fields`` is only sent once a field was given.
    """

    _seed_fields = False

    def default_operator(self, operator: str):
        """Set the operator used when none is given explicitly: ``AND`` or ``OR``."""
        lowered = check_enum(operator, _OPERATOR_SET, _invalid_default_operator)
        self._query_opts["default_operator"] = lowered.upper()
        return self

    def analyze_wildcard(self, enable: bool):
        """Analyze wildcard and prefix terms as well."""
        self._query_opts["analyze_wildcard"] = enable
        return self

    def lenient(self, enable: bool):
        """Ignore format-based failures such as text against a numeric field."""
        self._query_opts["lenient"] = enable
        return self

    def quote_field_suffix(self, suffix: str):
        """Set the suffix appended to field names for quoted text."""
        self._query_opts["quote_field_suffix"] = suffix
        return self

    def auto_generate_synonyms_phrase_query(self, enable: bool):
        """Create phrase queries for multi-term synonyms."""
        self._query_opts["auto_generate_synonyms_phrase_query"] = enable
        return self


class QueryStringQuery(QueryStringOptions, Query):
    """Query written in the Lucene query-string syntax."""

    def __init__(self, query_str: str | None = None) -> None:
        """Initialize a query string query."""
        super().__init__("query_string", None, query_str)

    def default_field(self, field: str) -> QueryStringQuery:
        """Set the field searched when the query names none."""
        self._query_opts["default_field"] = field
        return self

    def allow_leading_wildcard(self, enable: bool) -> QueryStringQuery:
        """Allow ``*`` or ``?`` as the first character of a term."""
        self._query_opts["allow_leading_wildcard"] = enable
        return self

    def enable_position_increments(self, enable: bool) -> QueryStringQuery:
        """Keep position increments in the resulting queries."""
        self._query_opts["enable_position_increments"] = enable
        return self

    def fuzzy_max_expansions(self, limit: int) -> QueryStringQuery:
        """Set the maximum number of terms a fuzzy term expands to."""
        self._query_opts["fuzzy_max_expansions"] = limit
        return self

    def fuzziness(self, factor: int | str) -> QueryStringQuery:
        """Set the edit distance used by fuzzy terms."""
        self._query_opts["fuzziness"] = factor
        return self

    def fuzzy_prefix_length(self, length: int) -> QueryStringQuery:
        """Set the unchanged prefix length for fuzzy terms."""
        self._query_opts["fuzzy_prefix_length"] = length
        return self

    def rewrite(self, method: str) -> QueryStringQuery:
        """Set the rewrite method of multi-term parts of the query."""
        validate_rewrite_method(method, "rewrite", _QUERY_STRING_REF_URL)
        self._query_opts["rewrite"] = method
        return self

    def fuzzy_rewrite(self, method: str) -> QueryStringQuery:
        """Set the rewrite method used for fuzzy terms."""
        validate_rewrite_method(method, "fuzzy_rewrite", _QUERY_STRING_REF_URL)
        self._query_opts["fuzzy_rewrite"] = method
        return self

    def auto_generate_phrase_queries(self, enable: bool) -> QueryStringQuery:
        """Turn whitespace-free runs of several tokens into phrase queries."""
        self._query_opts["auto_generate_phrase_queries"] = enable
        return self

    def max_determinized_states(self, limit: int) -> QueryStringQuery:
        """Cap the automaton states a regexp term may produce."""
        self._query_opts["max_determinized_states"] = limit
        return self

    def time_zone(self, zone: str) -> QueryStringQuery:
        """Set the time zone applied to date ranges in the query."""
        self._query_opts["time_zone"] = zone
        return self

    def split_on_whitespace(self, enable: bool) -> QueryStringQuery:
        """Split the text on whitespace before analysis."""
        self._query_opts["split_on_whitespace"] = enable
        return self

    def use_dis_max(self, enable: bool) -> QueryStringQuery:
        """Combine per-field queries with ``dis_max`` instead of ``bool``."""
        self._query_opts["use_dis_max"] = enable
        return self

    def tie_breaker(self, factor: float) -> QueryStringQuery:
        """Set the ``dis_max`` tie breaker."""
        self._query_opts["tie_breaker"] = factor
        return self

    def quote_analyzer(self, analyzer: str) -> QueryStringQuery:
        """Set the analyzer used for quoted text."""
        self._query_opts["quote_analyzer"] = analyzer
        return self

    def phrase_slop(self, slop: int) -> QueryStringQuery:
        """Set the default slop of phrases."""
        self._query_opts["phrase_slop"] = slop
        return self

    def escape(self, enable: bool) -> QueryStringQuery:
        """Escape reserved characters in the query text."""
        self._query_opts["escape"] = enable
        return self


class SimpleQueryStringQuery(QueryStringOptions, Query):
    """Query-string syntax that never raises on malformed input."""

    def __init__(self, query_str: str | None = None) -> None:
        """Initialize a simple query string query."""
        super().__init__("simple_query_string", None, query_str)

    def flags(self, flags: str) -> SimpleQueryStringQuery:
        """Restrict the enabled operators, e.g. ``OR|AND|PREFIX``."""
        self._query_opts["flags"] = flags
        return self


class CombinedFieldsQuery(MultiFieldOptions, Query):
    """Searches several text fields as if they were one combined field."""

    def __init__(self, fields: Sequence[str] | str | None = None, query_str: str | None = None) -> None:
        """Initialize a combined fields query."""
        super().__init__("combined_fields", fields, query_str)

    def auto_generate_synonyms_phrase_query(self, enable: bool) -> CombinedFieldsQuery:
        """Create phrase queries for multi-term synonyms."""
        self._query_opts["auto_generate_synonyms_phrase_query"] = enable
        return self

    def operator(self, operator: str) -> CombinedFieldsQuery:
        """Set the boolean logic between analyzed terms: ``and`` or ``or``."""
        self._query_opts["operator"] = check_enum(operator, _OPERATOR_SET, _invalid_operator_param)
        return self

    def zero_terms_query(self, behavior: str) -> CombinedFieldsQuery:
        """Decide what matches when the analyzer removes every token."""
        self._query_opts["zero_terms_query"] = check_enum(behavior, _ZERO_TERMS_SET, _invalid_zero_terms_param)
        return self

"""Suggesters that analyze a suggest text: the shared base and `term`."""

from __future__ import annotations

from ElasticBuilder.core.consts import ES_REF_BASE, STRING_DISTANCE_SET, SUGGEST_MODE_SET
from ElasticBuilder.core.suggester import Suggester
from ElasticBuilder.core.util import check_enum, invalid_param
from ElasticBuilder.utils.guards import is_nil

_TERM_REF_URL = f"{ES_REF_BASE}/search-suggesters.html#term-suggester"

_invalid_sort_param = invalid_param(_TERM_REF_URL, "sort", "'score' or 'frequency'")
_invalid_suggest_mode_param = invalid_param(_TERM_REF_URL, "suggest_mode", SUGGEST_MODE_SET)
_invalid_string_distance_param = invalid_param(_TERM_REF_URL, "string_distance", STRING_DISTANCE_SET)


class AnalyzedSuggester(Suggester):
    """Suggester working on an analyzed suggest text.

    The text belongs to the suggestion itself, so it is written beside the
    typed options rather than inside them.
    """

    def __init__(self, suggester_type: str, name: str, field: str | None = None, text: str | None = None) -> None:
        """Initialize the suggester with the text to suggest for."""
        super().__init__(suggester_type, name, field)
        if not is_nil(text):
            self._opts["text"] = text

    def text(self, text: str) -> AnalyzedSuggester:
        """Set the text to provide suggestions for."""
        self._opts["text"] = text
        return self

    def analyzer(self, analyzer: str) -> AnalyzedSuggester:
        """Set the analyzer applied to the suggest text."""
        self._suggest_opts["analyzer"] = analyzer
        return self

    def shard_size(self, size: int) -> AnalyzedSuggester:
        """Set how many candidates each shard returns."""
        self._suggest_opts["shard_size"] = size
        return self


class TermSuggester(AnalyzedSuggester):
    """Suggests corrections for each term of the text by edit distance."""

    def __init__(self, name: str, field: str | None = None, text: str | None = None) -> None:
        """Initialize a term suggester."""
        super().__init__("term", name, field, text)

    def sort(self, sort: str) -> TermSuggester:
        """Order suggestions by ``score`` or ``frequency``.

        Raises:
            ValueError: If sort is neither.
        """
        self._suggest_opts["sort"] = check_enum(sort, ("score", "frequency"), _invalid_sort_param)
        return self

    def suggest_mode(self, mode: str) -> TermSuggester:
        """Decide which terms get suggestions: ``missing``, ``popular`` or ``always``."""
        self._suggest_opts["suggest_mode"] = check_enum(mode, SUGGEST_MODE_SET, _invalid_suggest_mode_param)
        return self

    def max_edits(self, max_edits: int) -> TermSuggester:
        """Set the maximum edit distance of candidates, 1 or 2."""
        self._suggest_opts["max_edits"] = max_edits
        return self

    def prefix_length(self, length: int) -> TermSuggester:
        """Set how many leading characters must match."""
        self._suggest_opts["prefix_length"] = length
        return self

    def min_word_length(self, length: int) -> TermSuggester:
        """Set the minimum length of a suggested term."""
        self._suggest_opts["min_word_length"] = length
        return self

    def max_inspections(self, factor: int) -> TermSuggester:
        """Multiply `shard_size` by this to inspect more candidates."""
        self._suggest_opts["max_inspections"] = factor
        return self

    def min_doc_freq(self, limit: float) -> TermSuggester:
        """Set the minimum document count (or ratio) of a suggestion."""
        self._suggest_opts["min_doc_freq"] = limit
        return self

    def max_term_freq(self, limit: float) -> TermSuggester:
        """Skip suggest terms found in more documents than this."""
        self._suggest_opts["max_term_freq"] = limit
        return self

    def string_distance(self, method: str) -> TermSuggester:
        """Set how similar terms are compared, e.g. ``jaro_winkler``."""
        self._suggest_opts["string_distance"] = check_enum(
            method, STRING_DISTANCE_SET, _invalid_string_distance_param
        )
        return self

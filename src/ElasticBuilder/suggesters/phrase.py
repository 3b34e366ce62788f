"""Phrase suggester and its candidate generators."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ElasticBuilder.core.consts import ES_REF_BASE, SMOOTHING_MODEL_SET, SUGGEST_MODE_SET
from ElasticBuilder.core.util import check_enum, check_type, invalid_param, recursive_to_json
from ElasticBuilder.suggesters.analyzed import AnalyzedSuggester
from ElasticBuilder.utils.guards import is_nil

_PHRASE_REF_URL = f"{ES_REF_BASE}/search-suggesters.html#phrase-suggester"

_invalid_smoothing_param = invalid_param(_PHRASE_REF_URL, "smoothing", SMOOTHING_MODEL_SET)
_invalid_suggest_mode_param = invalid_param(_PHRASE_REF_URL, "suggest_mode", SUGGEST_MODE_SET)


class DirectGenerator:
    """Candidate generator feeding a phrase suggester."""

    def __init__(self, field: str | None = None) -> None:
        """Initialize a direct generator."""
        self._body: dict[str, Any] = {}
        if not is_nil(field):
            self._body["field"] = field

    def field(self, field: str) -> DirectGenerator:
        """Set the field to fetch candidates from."""
        self._body["field"] = field
        return self

    def size(self, size: int) -> DirectGenerator:
        """Set the number of candidates per term."""
        self._body["size"] = size
        return self

    def suggest_mode(self, mode: str) -> DirectGenerator:
        """Decide which terms get candidates: ``missing``, ``popular`` or ``always``."""
        self._body["suggest_mode"] = check_enum(mode, SUGGEST_MODE_SET, _invalid_suggest_mode_param)
        return self

    def max_edits(self, max_edits: int) -> DirectGenerator:
        """Set the maximum edit distance of candidates."""
        self._body["max_edits"] = max_edits
        return self

    def prefix_length(self, length: int) -> DirectGenerator:
        """Set how many leading characters must match."""
        self._body["prefix_length"] = length
        return self

    def min_word_length(self, length: int) -> DirectGenerator:
        """Set the minimum length of a candidate."""
        self._body["min_word_length"] = length
        return self

    def max_inspections(self, factor: int) -> DirectGenerator:
        """Multiply the shard size by this to inspect more candidates."""
        self._body["max_inspections"] = factor
        return self

    def min_doc_freq(self, limit: float) -> DirectGenerator:
        """Set the minimum document count (or ratio) of a candidate."""
        self._body["min_doc_freq"] = limit
        return self

    def max_term_freq(self, limit: float) -> DirectGenerator:
        """Skip terms found in more documents than this."""
        self._body["max_term_freq"] = limit
        return self

    def pre_filter(self, analyzer: str) -> DirectGenerator:
        """Set the analyzer applied to each token before generating candidates."""
        self._body["pre_filter"] = analyzer
        return self

    def post_filter(self, analyzer: str) -> DirectGenerator:
        """Set the analyzer applied to each generated candidate."""
        self._body["post_filter"] = analyzer
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize the generator options."""
        return recursive_to_json(self._body)


class PhraseSuggester(AnalyzedSuggester):
    """Suggests whole corrected phrases using n-gram language models."""

    def __init__(self, name: str, field: str | None = None, text: str | None = None) -> None:
        """Initialize a phrase suggester."""
        super().__init__("phrase", name, field, text)
        self._collate_prune: bool | None = None

    def gram_size(self, size: int) -> PhraseSuggester:
        """Set the maximum n-gram size of the field."""
        self._suggest_opts["gram_size"] = size
        return self

    def real_word_error_likelihood(self, factor: float) -> PhraseSuggester:
        """Set the likelihood that a dictionary term is misspelled."""
        self._suggest_opts["real_word_error_likelihood"] = factor
        return self

    def confidence(self, level: float) -> PhraseSuggester:
        """Only return suggestions scoring above the input phrase times this."""
        self._suggest_opts["confidence"] = level
        return self

    def max_errors(self, limit: float) -> PhraseSuggester:
        """Set the maximum number (or ratio) of terms treated as misspelled."""
        self._suggest_opts["max_errors"] = limit
        return self

    def separator(self, sep: str) -> PhraseSuggester:
        """Set the separator between terms in the bigram field."""
        self._suggest_opts["separator"] = sep
        return self

    def highlight(self, pre_tag: str, post_tag: str) -> PhraseSuggester:
        """Wrap changed tokens in the given tags."""
        self._suggest_opts["highlight"] = {"pre_tag": pre_tag, "post_tag": post_tag}
        return self

    def collate(self, search_template: Mapping[str, Any], prune: bool | None = None) -> PhraseSuggester:
        """Check each suggestion against a query template.

        Args:
            search_template: Mapping with ``query`` and optional ``params``.
            prune: When set, keep non-matching suggestions and flag them.
        """
        check_type(search_template, Mapping)
        self._suggest_opts["collate"] = dict(search_template)
        self._collate_prune = prune
        return self

    def smoothing(self, model: str) -> PhraseSuggester:
        """Set the smoothing model, e.g. ``laplace`` or ``stupid_backoff``."""
        self._suggest_opts["smoothing"] = check_enum(model, SMOOTHING_MODEL_SET, _invalid_smoothing_param)
        return self

    def direct_generator(self, generators: DirectGenerator | Sequence[DirectGenerator]) -> PhraseSuggester:
        """Set one or several candidate generators; always sent as a list.

        Raises:
            TypeError: If an entry is not a DirectGenerator.
        """
        if not isinstance(generators, (list, tuple)):
            generators = [generators]
        for generator in generators:
            check_type(generator, DirectGenerator)
        self._suggest_opts["direct_generator"] = list(generators)
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize the suggestion, folding `prune` into ``collate``."""
        json = super().to_json()
        if not is_nil(self._collate_prune):
            json[self.name][self.suggester_type]["collate"]["prune"] = self._collate_prune
        return json

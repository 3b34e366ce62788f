"""Completion suggester for search-as-you-type."""

from __future__ import annotations

from typing import Any

from ElasticBuilder.core.suggester import Suggester
from ElasticBuilder.core.util import set_default
from ElasticBuilder.utils.guards import is_object


class CompletionSuggester(Suggester):
    """Prefix or regex completion against a ``completion`` field.

    The fuzzy sub-options (`fuzziness`, `transpositions` and friends) turn
    ``fuzzy`` into a mapping, replacing a plain ``fuzzy(True)``.
    """

    def __init__(self, name: str, field: str | None = None) -> None:
        """Initialize a completion suggester."""
        super().__init__("completion", name, field)

    def prefix(self, prefix: str) -> CompletionSuggester:
        """Set the prefix to complete."""
        self._opts["prefix"] = prefix
        return self

    def skip_duplicates(self, skip: bool = True) -> CompletionSuggester:
        """Drop suggestions with the same text."""
        self._suggest_opts["skip_duplicates"] = skip
        return self

    def _fuzzy_opts(self) -> dict[str, Any]:
        """Return the fuzzy options, replacing a plain ``fuzzy: true`` flag."""
        if not is_object(self._suggest_opts.get("fuzzy")):
            self._suggest_opts["fuzzy"] = {}
        return self._suggest_opts["fuzzy"]

    def fuzzy(self, fuzzy: bool = True) -> CompletionSuggester:
        """Enable fuzzy completion with default settings."""
        self._suggest_opts["fuzzy"] = fuzzy
        return self

    def fuzziness(self, factor: int | str) -> CompletionSuggester:
        """Set the fuzzy edit distance, e.g. ``AUTO``."""
        self._fuzzy_opts()["fuzziness"] = factor
        return self

    def transpositions(self, enable: bool) -> CompletionSuggester:
        """Count swapping two adjacent characters as one edit."""
        self._fuzzy_opts()["transpositions"] = enable
        return self

    def min_length(self, length: int) -> CompletionSuggester:
        """Set the input length below which fuzzy suggestions are not returned."""
        self._fuzzy_opts()["min_length"] = length
        return self

    def prefix_length(self, length: int) -> CompletionSuggester:
        """Set how many leading characters are not checked for fuzzy alternatives."""
        self._fuzzy_opts()["prefix_length"] = length
        return self

    def unicode_aware(self, enable: bool) -> CompletionSuggester:
        """Measure edits in unicode code points instead of bytes."""
        self._fuzzy_opts()["unicode_aware"] = enable
        return self

    def regex(self, expr: str) -> CompletionSuggester:
        """Complete with a regular expression instead of a prefix."""
        self._opts["regex"] = expr
        return self

    def flags(self, flags: str) -> CompletionSuggester:
        """Enable regex operators, e.g. ``INTERSECTION|COMPLEMENT``."""
        set_default(self._suggest_opts, "regex", {})
        self._suggest_opts["regex"]["flags"] = flags
        return self

    def max_determinized_states(self, limit: int) -> CompletionSuggester:
        """Cap the automaton states the regex may produce."""
        set_default(self._suggest_opts, "regex", {})
        self._suggest_opts["regex"]["max_determinized_states"] = limit
        return self

    def contexts(self, name: str, ctx: Any) -> CompletionSuggester:
        """Filter or boost suggestions by the named context."""
        set_default(self._suggest_opts, "contexts", {})
        self._suggest_opts["contexts"][name] = ctx
        return self

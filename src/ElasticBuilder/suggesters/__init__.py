"""Suggester builders for the ``suggest`` section of a search."""

from __future__ import annotations

from ElasticBuilder.suggesters.analyzed import AnalyzedSuggester, TermSuggester
from ElasticBuilder.suggesters.completion import CompletionSuggester
from ElasticBuilder.suggesters.phrase import DirectGenerator, PhraseSuggester

__all__ = [
    "AnalyzedSuggester",
    "CompletionSuggester",
    "DirectGenerator",
    "PhraseSuggester",
    "TermSuggester",
]

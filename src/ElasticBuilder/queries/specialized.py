"""Specialized queries that fit no other family."""

from __future__ import annotations

from typing import Any, Sequence

from ElasticBuilder.core.query import Query
from ElasticBuilder.core.script import Script
from ElasticBuilder.core.util import check_type


class ScriptQuery(Query):
    """Filters documents with a script returning a boolean."""

    def __init__(self, script: Script | None = None) -> None:
        """Initialize a script query."""
        super().__init__("script")
        if script is not None:
            self.script(script)

    def script(self, script: Script) -> ScriptQuery:
        """Set the script documents must satisfy.

        Raises:
            TypeError: If `script` is not a Script.
        """
        check_type(script, Script)
        self._query_opts["script"] = script
        return self


class ScriptScoreQuery(Query):
    """Recomputes the score of each match with a script."""

    def __init__(self) -> None:
        """Initialize a script score query."""
        super().__init__("script_score")

    def query(self, query: Query) -> ScriptScoreQuery:
        """Set the query whose matches are rescored.

        Raises:
            TypeError: If `query` is not a Query.
        """
        check_type(query, Query)
        self._query_opts["query"] = query
        return self

    def script(self, script: Script) -> ScriptScoreQuery:
        """Set the script computing the score.

        Raises:
            TypeError: If `script` is not a Script.
        """
        check_type(script, Script)
        self._query_opts["script"] = script
        return self

    def min_score(self, limit: float) -> ScriptScoreQuery:
        """Drop documents scoring below this value."""
        self._query_opts["min_score"] = limit
        return self


class DistanceFeatureQuery(Query):
    """Boosts documents closer to an origin date or geo point."""

    def __init__(self, field: str | None = None) -> None:
        """Initialize a distance feature query."""
        super().__init__("distance_feature")
        if field is not None:
            self._query_opts["field"] = field

    def field(self, field: str) -> DistanceFeatureQuery:
        """Set the date or geo point field."""
        self._query_opts["field"] = field
        return self

    def origin(self, origin: Any) -> DistanceFeatureQuery:
        """Set the date or point distances are measured from."""
        self._query_opts["origin"] = origin
        return self

    def pivot(self, distance: str) -> DistanceFeatureQuery:
        """Set the distance at which the score is half the boost."""
        self._query_opts["pivot"] = distance
        return self


class RankFeatureQuery(Query):
    """Boosts documents by a ``rank_feature`` or ``rank_features`` field.

    `linear`, `saturation`, `log` and `sigmoid` select the scoring function.
    """

    def __init__(self, field: str | None = None) -> None:
        """Initialize a rank feature query."""
        super().__init__("rank_feature")
        if field is not None:
            self._query_opts["field"] = field

    def field(self, field: str) -> RankFeatureQuery:
        """Set the rank feature field."""
        self._query_opts["field"] = field
        return self

    def linear(self) -> RankFeatureQuery:
        """Use the linear scoring function."""
        self._query_opts["linear"] = {}
        return self

    def saturation(self) -> RankFeatureQuery:
        """Use the saturation function with the default pivot."""
        self._query_opts["saturation"] = {}
        return self

    def saturation_pivot(self, pivot: float) -> RankFeatureQuery:
        """Use the saturation function with the given pivot."""
        self._query_opts["saturation"] = {"pivot": pivot}
        return self

    def log(self, scaling_factor: float) -> RankFeatureQuery:
        """Use the logarithmic function."""
        self._query_opts["log"] = {"scaling_factor": scaling_factor}
        return self

    def sigmoid(self, pivot: float, exponent: float) -> RankFeatureQuery:
        """Use the sigmoid function."""
        self._query_opts["sigmoid"] = {"pivot": pivot, "exponent": exponent}
        return self


class MoreLikeThisQuery(Query):
    """Finds documents similar to given texts or documents.

    `like` and `unlike` accept a single item or a list. A list replaces the
    current value; single items accumulate, turning the value into a list
    from the second item on.
    """

    def __init__(self) -> None:
        """Initialize a more like this query."""
        super().__init__("more_like_this")

    def _set_search_clause(self, clause: str, items: Any) -> None:
        """Store a like or unlike clause, keeping lists as lists."""
        if isinstance(items, (list, tuple)):
            self._query_opts[clause] = list(items)
        elif clause not in self._query_opts:
            self._query_opts[clause] = items
        else:
            if not isinstance(self._query_opts[clause], list):
                self._query_opts[clause] = [self._query_opts[clause]]
            self._query_opts[clause].append(items)

    def fields(self, fields: Sequence[str]) -> MoreLikeThisQuery:
        """Set the fields to pull terms from.

        Raises:
            TypeError: If `fields` is not a list or tuple.
        """
        check_type(fields, (list, tuple))
        self._query_opts["fields"] = list(fields)
        return self

    def like(self, like: Any) -> MoreLikeThisQuery:
        """Add free text or a ``{_index, _id}`` document to find similar documents to."""
        self._set_search_clause("like", like)
        return self

    def unlike(self, unlike: Any) -> MoreLikeThisQuery:
        """Set the text or documents whose terms are excluded."""
        self._set_search_clause("unlike", unlike)
        return self

    def like_text(self, text: str) -> MoreLikeThisQuery:
        """Set the free text to find similar documents for."""
        self._query_opts["like_text"] = text
        return self

    def ids(self, ids: Sequence[str]) -> MoreLikeThisQuery:
        """Find documents similar to these IDs.

        Raises:
            TypeError: If `ids` is not a list or tuple.
        """
        check_type(ids, (list, tuple))
        self._query_opts["ids"] = list(ids)
        return self

    def docs(self, docs: Sequence[Any]) -> MoreLikeThisQuery:
        """Find documents similar to these documents.

        Raises:
            TypeError: If `docs` is not a list or tuple.
        """
        check_type(docs, (list, tuple))
        self._query_opts["docs"] = list(docs)
        return self

    def max_query_terms(self, limit: int) -> MoreLikeThisQuery:
        """Set the maximum number of query terms selected."""
        self._query_opts["max_query_terms"] = limit
        return self

    def min_term_freq(self, limit: int) -> MoreLikeThisQuery:
        """Ignore terms rarer than this in the input."""
        self._query_opts["min_term_freq"] = limit
        return self

    def min_doc_freq(self, limit: int) -> MoreLikeThisQuery:
        """Ignore terms found in fewer documents."""
        self._query_opts["min_doc_freq"] = limit
        return self

    def max_doc_freq(self, limit: int) -> MoreLikeThisQuery:
        """Ignore terms found in more documents."""
        self._query_opts["max_doc_freq"] = limit
        return self

    def min_word_length(self, limit: int) -> MoreLikeThisQuery:
        """Ignore shorter words."""
        self._query_opts["min_word_length"] = limit
        return self

    def max_word_length(self, limit: int) -> MoreLikeThisQuery:
        """Ignore longer words."""
        self._query_opts["max_word_length"] = limit
        return self

    def stop_words(self, words: Sequence[str]) -> MoreLikeThisQuery:
        """Set words that are ignored."""
        self._query_opts["stop_words"] = words
        return self

    def analyzer(self, analyzer: str) -> MoreLikeThisQuery:
        """Set the analyzer applied to the input text."""
        self._query_opts["analyzer"] = analyzer
        return self

    def minimum_should_match(self, min_match: int | str) -> MoreLikeThisQuery:
        """Set how many selected terms must match."""
        self._query_opts["minimum_should_match"] = min_match
        return self

    def boost_terms(self, boost: float) -> MoreLikeThisQuery:
        """Boost each term by its tf-idf score times this factor."""
        self._query_opts["boost_terms"] = boost
        return self

    def include(self, enable: bool) -> MoreLikeThisQuery:
        """Include the input documents in the results."""
        self._query_opts["include"] = enable
        return self


class PercolateQuery(Query):
    """Matches stored queries against a document."""

    def __init__(self, field: str | None = None, doc_type: str | None = None) -> None:
        """Initialize a percolate query."""
        super().__init__("percolate")
        self._query_opts["documents"] = []
        if field is not None:
            self._query_opts["field"] = field
        if doc_type is not None:
            self._query_opts["document_type"] = doc_type

    def field(self, field: str) -> PercolateQuery:
        """Set the percolator field."""
        self._query_opts["field"] = field
        return self

    def document_type(self, doc_type: str) -> PercolateQuery:
        """Set the type of the document being percolated."""
        self._query_opts["document_type"] = doc_type
        return self

    def document(self, doc: dict[str, Any]) -> PercolateQuery:
        """Append a document to percolate."""
        self._query_opts["documents"].append(doc)
        return self

    def documents(self, docs: Sequence[dict[str, Any]]) -> PercolateQuery:
        """Append several documents to percolate.

        Raises:
            TypeError: If `docs` is not a list or tuple.
        """
        check_type(docs, (list, tuple))
        self._query_opts["documents"].extend(docs)
        return self

    def index(self, index: str) -> PercolateQuery:
        """Percolate an indexed document instead: its index."""
        self._query_opts["index"] = index
        return self

    def type(self, doc_type: str) -> PercolateQuery:  # noqa: A003
        """Set the type of the stored document to percolate."""
        self._query_opts["type"] = doc_type
        return self

    def id(self, doc_id: str) -> PercolateQuery:  # noqa: A003
        """Set the ID of the stored document to percolate."""
        self._query_opts["id"] = doc_id
        return self

    def routing(self, routing: str) -> PercolateQuery:
        """Set the routing of the stored document."""
        self._query_opts["routing"] = routing
        return self

    def preference(self, preference: str) -> PercolateQuery:
        """Set the preference used to fetch the stored document."""
        self._query_opts["preference"] = preference
        return self

    def version(self, version: int) -> PercolateQuery:
        """Set the expected version of the stored document."""
        self._query_opts["version"] = version
        return self

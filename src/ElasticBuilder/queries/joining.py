"""Joining queries: nested documents and parent/child relations."""

from __future__ import annotations

from typing import NoReturn

from ElasticBuilder.core.consts import ES_REF_BASE, NESTED_SCORE_MODE_SET
from ElasticBuilder.core.inner_hits import InnerHits
from ElasticBuilder.core.query import Query
from ElasticBuilder.core.util import check_enum, check_type, invalid_param
from ElasticBuilder.utils.log import log

_invalid_score_mode_param = invalid_param("", "score_mode", NESTED_SCORE_MODE_SET)


class JoiningOptions:
    """Options shared by `nested`, `has_child` and `has_parent`.

    Subclasses set ``_REF_URL`` to their documentation page; it is reported
    when `score_mode` is given an unknown value.
    """

    _REF_URL = ""

    def __init__(self, query_type: str, query: Query | None = None) -> None:
        """Initialize the query, wrapping `query` if given."""
        super().__init__(query_type)  # type: ignore[call-arg]
        if query is not None:
            self.query(query)

    def query(self, query: Query):
        """Set the query run against the joined documents."""
        check_type(query, Query)
        self._query_opts["query"] = query  # type: ignore[attr-defined]
        return self

    def score_mode(self, mode: str):
        """Set how scores of joined documents feed the parent score.

        Args:
            mode: One of ``none``, ``sum``, ``min``, ``max``, ``avg``;
                matched case-insensitively.

        Raises:
            ValueError: If mode is None or not one of the above.
        """
        self._query_opts["score_mode"] = check_enum(  # type: ignore[attr-defined]
            mode, NESTED_SCORE_MODE_SET, _invalid_score_mode_param, ref_url=self._REF_URL
        )
        return self

    def ignore_unmapped(self, enable: bool):
        """Match nothing instead of failing when the path or type is unmapped."""
        self._query_opts["ignore_unmapped"] = enable  # type: ignore[attr-defined]
        return self

    def inner_hits(self, inner_hits: InnerHits):
        """Return the joined documents that caused each hit."""
        check_type(inner_hits, InnerHits)
        self._query_opts["inner_hits"] = inner_hits  # type: ignore[attr-defined]
        return self


class NestedQuery(JoiningOptions, Query):
    """Searches nested objects as if they were separate documents."""

    _REF_URL = f"{ES_REF_BASE}/query-dsl-nested-query.html"

    def __init__(self, query: Query | None = None, path: str | None = None) -> None:
        """Initialize a nested query."""
        super().__init__("nested", query)
        if path is not None:
            self._query_opts["path"] = path

    def path(self, path: str) -> NestedQuery:
        """Set the path of the nested object to search."""
        self._query_opts["path"] = path
        return self


class HasChildQuery(JoiningOptions, Query):
    """Matches parents whose children match the query."""

    _REF_URL = f"{ES_REF_BASE}/query-dsl-has-child-query.html"

    def __init__(self, query: Query | None = None, type: str | None = None) -> None:  # noqa: A002
        """Initialize a has child query."""
        super().__init__("has_child", query)
        if type is not None:
            self._query_opts["type"] = type

    def type(self, child_type: str) -> HasChildQuery:  # noqa: A003
        """Set the name of the child relationship."""
        self._query_opts["type"] = child_type
        return self

    def child_type(self, child_type: str) -> HasChildQuery:
        """Deprecated alias for `type`."""
        log.warning("[HasChildQuery] Field `child_type` is deprecated. Use `type` instead.")
        return self.type(child_type)

    def min_children(self, limit: int) -> HasChildQuery:
        """Set the minimum number of matching children."""
        self._query_opts["min_children"] = limit
        return self

    def max_children(self, limit: int) -> HasChildQuery:
        """Set the maximum number of matching children."""
        self._query_opts["max_children"] = limit
        return self


class HasParentQuery(JoiningOptions, Query):
    """Matches children whose parent matches the query."""

    _REF_URL = f"{ES_REF_BASE}/query-dsl-has-parent-query.html"

    def __init__(self, query: Query | None = None, type: str | None = None) -> None:  # noqa: A002
        """Initialize a has parent query."""
        super().__init__("has_parent", query)
        if type is not None:
            self._query_opts["parent_type"] = type

    def score_mode(self, mode: str) -> NoReturn:
        """Not available; use `score`.

        Raises:
            ValueError: Always.
        """
        log.warning("`score_mode` is deprecated. Use `score` instead")
        log.info("See %s", self._REF_URL)
        raise ValueError("score_mode is not supported in HasParentQuery")

    def type(self, parent_type: str) -> HasParentQuery:  # noqa: A003
        """Alias for `parent_type`."""
        return self.parent_type(parent_type)

    def parent_type(self, parent_type: str) -> HasParentQuery:
        """Set the name of the parent relationship."""
        self._query_opts["parent_type"] = parent_type
        return self

    def score(self, enable: bool) -> HasParentQuery:
        """Use the parent's relevance score for matching children."""
        self._query_opts["score"] = enable
        return self


class ParentIdQuery(Query):
    """Matches children of one particular parent document."""

    def __init__(self, type: str | None = None, id: str | None = None) -> None:  # noqa: A002
        """Initialize a parent id query."""
        super().__init__("parent_id")
        if type is not None:
            self._query_opts["type"] = type
        if id is not None:
            self._query_opts["id"] = id

    def type(self, child_type: str) -> ParentIdQuery:  # noqa: A003
        """Set the name of the child relationship."""
        self._query_opts["type"] = child_type
        return self

    def id(self, parent_id: str) -> ParentIdQuery:  # noqa: A003
        """Set the ID of the parent document."""
        self._query_opts["id"] = parent_id
        return self

    def ignore_unmapped(self, enable: bool) -> ParentIdQuery:
        """Match nothing instead of failing when the type is unmapped."""
        self._query_opts["ignore_unmapped"] = enable
        return self

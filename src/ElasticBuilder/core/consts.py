"""Enumerated tokens accepted by the query DSL.

Every set holds the lower-case spelling the engine documents, except
`UNIT_SET` (where `NM` is significant) and `REWRITE_METHOD_SET` (where `N`
stands for a positive integer suffix).
"""

from __future__ import annotations

from typing import Final

ES_REF_BASE: Final[str] = "https://www.elastic.co/guide/en/elasticsearch/reference/current"

SORT_MODE_SET: Final = frozenset({"min", "max", "sum", "avg", "median"})

UNIT_SET: Final = frozenset(
    {
        "in", "inch",
        "yd", "yards",
        "ft", "feet",
        "km", "kilometers",
        "NM", "nmi", "nauticalmiles",
        "mm", "millimeters",
        "cm", "centimeters",
        "mi", "miles",
        "m", "meters",
    }
)

# function_score
SCORE_MODE_SET: Final = frozenset({"multiply", "sum", "first", "min", "max", "avg"})
BOOST_MODE_SET: Final = frozenset({"multiply", "replace", "sum", "avg", "max", "min"})
FIELD_MODIFIER_SET: Final = frozenset(
    {"none", "log", "log1p", "log2p", "ln", "ln1p", "ln2p", "square", "sqrt", "reciprocal"}
)

# nested / has_child
NESTED_SCORE_MODE_SET: Final = frozenset({"none", "sum", "min", "max", "avg"})

MULTI_MATCH_TYPE: Final = frozenset(
    {"best_fields", "most_fields", "cross_fields", "phrase", "phrase_prefix", "bool_prefix"}
)

REWRITE_METHOD_SET: Final = frozenset(
    {
        "constant_score",
        "constant_score_boolean",
        "constant_score_filter",
        "scoring_boolean",
        "top_terms_boost_N",
        "top_terms_N",
        "top_terms_blended_freqs_N",
    }
)

EXECUTION_HINT_SET: Final = frozenset(
    {"map", "global_ordinals", "global_ordinals_hash", "global_ordinals_low_cardinality"}
)

RESCORE_MODE_SET: Final = frozenset({"total", "multiply", "min", "max", "avg"})

GAP_POLICY_SET: Final = frozenset({"skip", "insert_zeros", "keep_values"})

RUNTIME_FIELD_TYPES: Final = (
    "boolean",
    "composite",
    "date",
    "double",
    "geo_point",
    "ip",
    "keyword",
    "long",
    "lookup",
)

# suggesters
SUGGEST_MODE_SET: Final = frozenset({"missing", "popular", "always"})
STRING_DISTANCE_SET: Final = frozenset(
    {"internal", "damerau_levenshtein", "levenshtein", "jaro_winkler", "ngram"}
)
SMOOTHING_MODEL_SET: Final = frozenset({"stupid_backoff", "laplace", "linear_interpolation"})

# geo queries; both are sent upper-case
GEO_RELATION_SET: Final = frozenset({"within", "contains", "disjoint", "intersects"})
VALIDATION_METHOD_SET: Final = frozenset({"ignore_malformed", "coerce", "strict"})

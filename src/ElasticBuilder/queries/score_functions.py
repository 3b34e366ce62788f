"""Score functions combined by `FunctionScoreQuery`.

A score function serializes as ``{name: options, **body}``: the function's
own options sit under its name, while ``filter`` and ``weight`` are siblings
at the same level.
"""

from __future__ import annotations

from typing import Any

from ElasticBuilder.core.consts import ES_REF_BASE, FIELD_MODIFIER_SET
from ElasticBuilder.core.query import Query
from ElasticBuilder.core.script import Script
from ElasticBuilder.core.util import check_enum, check_type, invalid_param, recursive_to_json

_FUNCTION_SCORE_REF_URL = f"{ES_REF_BASE}/query-dsl-function-score-query.html"

_DECAY_MODES = ("linear", "exp", "gauss")

_invalid_decay_mode_param = invalid_param(
    f"{_FUNCTION_SCORE_REF_URL}#function-decay", "mode", "'linear', 'exp' or 'gauss'"
)
_invalid_modifier_param = invalid_param(
    f"{_FUNCTION_SCORE_REF_URL}#function-field-value-factor", "modifier", FIELD_MODIFIER_SET
)


class ScoreFunction:
    """Base of every score function.

    Args:
        name: Wire name of the function, e.g. ``random_score``. None for a
            bare function that only carries ``filter`` / ``weight``.
    """

    def __init__(self, name: str | None) -> None:
        """Initialize the function.

        Args:
            name: Wire name of the function; None for a bare weight.
        """
        self._name = name
        self._body: dict[str, Any] = {}
        self._opts: dict[str, Any] = {}

    def filter(self, filter_query: Query) -> ScoreFunction:  # noqa: A003
        """Only apply this function to documents matching the query."""
        check_type(filter_query, Query)
        self._body["filter"] = filter_query
        return self

    def weight(self, weight: float) -> ScoreFunction:
        """Multiply the function's score by a constant."""
        self._body["weight"] = weight
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize with the function options under its name."""
        return recursive_to_json({self._name: self._opts, **self._body})

    def __repr__(self) -> str:
        """Return a short description for debugging."""
        return f"{type(self).__name__}(name={self._name!r})"


class ScriptScoreFunction(ScoreFunction):
    """Computes the score with a script."""

    def __init__(self, script: Script | str | None = None) -> None:
        """Initialize a script score function."""
        super().__init__("script_score")
        if script is not None:
            self._opts["script"] = script

    def script(self, script: Script | str) -> ScriptScoreFunction:
        """Set the script computing the score."""
        self._opts["script"] = script
        return self


class WeightScoreFunction(ScoreFunction):
    """A bare weight, optionally restricted by a filter."""

    def __init__(self, weight: float | None = None) -> None:
        """Initialize a weight score function."""
        super().__init__(None)
        if weight is not None:
            self._body["weight"] = weight

    def to_json(self) -> dict[str, Any]:
        """Serialize as a bare ``weight`` entry."""
        return recursive_to_json(self._body)


class RandomScoreFunction(ScoreFunction):
    """Scores documents uniformly at random, reproducibly for a given seed."""

    def __init__(self) -> None:
        """Initialize a random score function."""
        super().__init__("random_score")

    def seed(self, seed: int | str) -> RandomScoreFunction:
        """Set the seed for reproducible scores."""
        self._opts["seed"] = seed
        return self

    def field(self, field: str) -> RandomScoreFunction:
        """Set the field whose values are hashed together with the seed."""
        self._opts["field"] = field
        return self


class FieldValueFactorFunction(ScoreFunction):
    """Scores documents from the value of a numeric field."""

    def __init__(self, field: str | None = None) -> None:
        """Initialize a field value factor function."""
        super().__init__("field_value_factor")
        if field is not None:
            self._opts["field"] = field

    def field(self, field: str) -> FieldValueFactorFunction:
        """Set the field whose value feeds the score."""
        self._opts["field"] = field
        return self

    def factor(self, factor: float) -> FieldValueFactorFunction:
        """Set the factor the field value is multiplied by."""
        self._opts["factor"] = factor
        return self

    def modifier(self, modifier: str) -> FieldValueFactorFunction:
        """Set the function applied to the field value, e.g. ``log1p`` or ``sqrt``."""
        self._opts["modifier"] = check_enum(modifier, FIELD_MODIFIER_SET, _invalid_modifier_param)
        return self

    def missing(self, value: float) -> FieldValueFactorFunction:
        """Set the value used for documents lacking the field."""
        self._opts["missing"] = value
        return self


class DecayScoreFunction(ScoreFunction):
    """Scores documents by their distance from an origin.

    Serializes as ``{mode: {field: {origin, scale, ...}}, **body}``.

    Args:
        mode: Decay curve: ``linear``, ``exp`` or ``gauss``.
        field: Numeric, date or geo-point field to measure the distance on.
    """

    def __init__(self, mode: str = "gauss", field: str | None = None) -> None:
        """Initialize a decay score function."""
        super().__init__(check_enum(mode, _DECAY_MODES, _invalid_decay_mode_param))
        self._field = field

    def mode(self, mode: str) -> DecayScoreFunction:
        """Set the decay curve: ``linear``, ``exp`` or ``gauss``.

        Raises:
            ValueError: If `mode` is not one of them.
        """
        self._name = check_enum(mode, _DECAY_MODES, _invalid_decay_mode_param)
        return self

    def linear(self) -> DecayScoreFunction:
        """Use the linear decay curve."""
        self._name = "linear"
        return self

    def exp(self) -> DecayScoreFunction:
        """Use the exponential decay curve."""
        self._name = "exp"
        return self

    def gauss(self) -> DecayScoreFunction:
        """Use the gaussian decay curve."""
        self._name = "gauss"
        return self

    def field(self, field: str) -> DecayScoreFunction:
        """Set the field the distance is measured on."""
        self._field = field
        return self

    def origin(self, origin: Any) -> DecayScoreFunction:
        """Set the point from which distances are measured."""
        self._opts["origin"] = origin
        return self

    def scale(self, scale: Any) -> DecayScoreFunction:
        """Set the distance at which the score equals `decay`."""
        self._opts["scale"] = scale
        return self

    def offset(self, offset: Any) -> DecayScoreFunction:
        """Set the distance from the origin within which no decay applies."""
        self._opts["offset"] = offset
        return self

    def decay(self, decay: float) -> DecayScoreFunction:
        """Set the score at `scale` distance from the origin."""
        self._opts["decay"] = decay
        return self

    def to_json(self) -> dict[str, Any]:
        """Serialize with the options under the curve and field names."""
        return recursive_to_json({self._name: {self._field: self._opts}, **self._body})

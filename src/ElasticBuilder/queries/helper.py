"""Validation shared by several query families."""

from __future__ import annotations

from ElasticBuilder.core.consts import REWRITE_METHOD_SET
from ElasticBuilder.core.util import first_digit_pos, invalid_param


def validate_rewrite_method(method: str, param_name: str, ref_url: str) -> None:
    """Validate a multi-term rewrite method.

    Methods ending in a number (``top_terms_10``) are matched against the
    ``..._N`` template. The comparison is case-sensitive.

    Args:
        method: Rewrite method to validate.
        param_name: Wire name of the parameter (``rewrite``, ``fuzzy_rewrite``).
        ref_url: Documentation URL for the calling query.

    Raises:
        ValueError: If the method is not a known rewrite method.
    """
    if isinstance(method, str):
        if method in REWRITE_METHOD_SET:
            return
        digit_pos = first_digit_pos(method)
        if digit_pos != -1 and method[digit_pos:].isdigit() and f"{method[:digit_pos]}N" in REWRITE_METHOD_SET:
            return
    invalid_param(ref_url, param_name, REWRITE_METHOD_SET)(method)

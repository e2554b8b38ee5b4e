"""Casing classification and locale-sensitive case transforms."""

from __future__ import annotations

from .classifier import Casing, classify_casing, has_uppercase_at_compound_word_boundary
from .service import DEFAULT_CASING_SERVICE, CasingService, IcuCasingService
from .transform import to_lower, to_title, to_upper

__all__ = [
    "DEFAULT_CASING_SERVICE",
    "Casing",
    "CasingService",
    "IcuCasingService",
    "classify_casing",
    "has_uppercase_at_compound_word_boundary",
    "to_lower",
    "to_title",
    "to_upper",
]

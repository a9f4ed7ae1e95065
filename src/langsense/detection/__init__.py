"""Language detection over a fixed table of language signatures."""

from __future__ import annotations

from .detector import (
    MAX_RESULTS,
    LanguageDetector,
    correct_rounding,
    detect_language,
    get_most_likely_language,
    normalize_scores,
    score_text,
    top_candidates,
)
from .signatures import SIGNATURES, get_signature

__all__ = [
    "MAX_RESULTS",
    "SIGNATURES",
    "LanguageDetector",
    "correct_rounding",
    "detect_language",
    "get_most_likely_language",
    "get_signature",
    "normalize_scores",
    "score_text",
    "top_candidates",
]

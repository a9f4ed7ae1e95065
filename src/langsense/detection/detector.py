"""Heuristic language detection over the fixed signature table.

Each language gets a raw score from its signature: one point per matching
script character, two per affix or keyword match, three per whole-word
common-word match. The best-scoring languages are kept and their scores
turned into integer percentages that always sum to 100.
"""

from __future__ import annotations

import math
import time
from collections.abc import Mapping

from langsense.core.config import settings
from langsense.core.models import DetectionResult, LanguageSignature
from langsense.detection.signatures import SIGNATURES
from langsense.utils.logger import get_logger, log_detection_metrics

logger = get_logger(__name__)

MAX_RESULTS = 5

CHAR_WEIGHT = 1
AFFIX_WEIGHT = 2
WORD_WEIGHT = 3


def normalize_text(text: str) -> str:
    """Lower-case and trim the input once for all matchers."""
    return text.lower().strip()


def _count(pattern, text: str) -> int:
    return sum(1 for _ in pattern.finditer(text))


def score_signature(text: str, signature: LanguageSignature) -> int:
    """Raw score of already-normalized text against one signature."""
    own_chars = sum(_count(pattern, text) for pattern in signature.char_patterns)
    score = own_chars * CHAR_WEIGHT
    if own_chars:
        for pattern in signature.shared_patterns:
            score += _count(pattern, text) * (CHAR_WEIGHT + AFFIX_WEIGHT)
    for pattern in signature.affix_patterns:
        score += _count(pattern, text) * AFFIX_WEIGHT
    for pattern in signature.word_patterns:
        score += _count(pattern, text) * WORD_WEIGHT
    return score


def score_text(
    text: str, signatures: Mapping[str, LanguageSignature] = SIGNATURES
) -> dict[str, int]:
    """Raw scores per language code, in table order.

    Languages that match nothing are left out.
    """
    raw: dict[str, int] = {}
    for code, signature in signatures.items():
        score = score_signature(text, signature)
        if score > 0:
            raw[code] = score
    return raw


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def normalize_scores(raw: Mapping[str, int]) -> dict[str, int]:
    """Convert raw scores into rounded percentages of their total."""
    total = sum(raw.values())
    if total <= 0:
        return {}
    return {code: _round_half_up(score / total * 100) for code, score in raw.items()}


def correct_rounding(confidences: Mapping[str, int], top_code: str) -> dict[str, int]:
    """Give the rounding remainder to ``top_code`` so the total is exactly 100.

    ``top_code`` is the candidate with the highest raw score. Its value is
    clamped at 0.
    """
    corrected = dict(confidences)
    if not corrected:
        return corrected
    difference = 100 - sum(corrected.values())
    if difference:
        corrected[top_code] = max(0, corrected[top_code] + difference)
    return corrected


def top_candidates(raw: Mapping[str, int], limit: int) -> dict[str, int]:
    """The ``limit`` highest raw scores, highest first.

    Equal scores keep table order.
    """
    ranked = sorted(raw.items(), key=lambda item: item[1], reverse=True)
    return dict(ranked[:max(limit, 0)])


def detect_language(
    text: str,
    max_results: int = MAX_RESULTS,
    signatures: Mapping[str, LanguageSignature] = SIGNATURES,
) -> list[DetectionResult]:
    """Rank candidate languages for ``text``.

    Args:
        text: Arbitrary input; may be empty or mix scripts
        max_results: Maximum number of results to return
        signatures: Signature table to score against

    Returns:
        Results sorted by confidence, highest first. Empty when the input is
        blank or nothing matched. Confidences of a non-empty result set sum
        to exactly 100.
    """
    if not text or not text.strip():
        return []

    started = time.perf_counter()
    clean_text = normalize_text(text)

    raw = score_text(clean_text, signatures)
    candidates = top_candidates(raw, max_results)
    if not candidates:
        logger.debug("No language signature matched", text_length=len(clean_text))
        return []

    # candidates is ordered by raw score, so its first key is the top one
    confidences = correct_rounding(
        normalize_scores(candidates), next(iter(candidates))
    )

    results = [
        DetectionResult(
            code=code,
            display_name=signatures[code].display_name,
            flag=signatures[code].flag,
            confidence=confidence,
        )
        for code, confidence in confidences.items()
    ]
    results.sort(key=lambda result: result.confidence, reverse=True)

    logger.debug(
        "Detected languages",
        candidates=len(raw),
        top=results[0].code,
        confidence=results[0].confidence,
    )
    if settings.enable_performance_logging:
        log_detection_metrics(
            text_length=len(clean_text),
            candidates=len(raw),
            top_language=results[0].code,
            processing_time_ms=(time.perf_counter() - started) * 1000,
        )
    return results


def get_most_likely_language(text: str) -> DetectionResult | None:
    """Return the top detection result, or None when nothing matched."""
    detections = detect_language(text)
    return detections[0] if detections else None


class LanguageDetector:
    """Language detection with configurable defaults."""

    def __init__(
        self,
        default_language: str | None = None,
        max_results: int | None = None,
        signatures: Mapping[str, LanguageSignature] | None = None,
    ) -> None:
        """Initialize language detector.

        Args:
            default_language: Code returned by ``detect`` when nothing matched
            max_results: Maximum number of ranked results
            signatures: Signature table, the built-in one by default
        """
        self.default_language = default_language or settings.default_language
        self.max_results = (
            settings.max_results if max_results is None else max_results
        )
        self.signatures = signatures if signatures is not None else SIGNATURES

    def detect_all(self, text: str) -> list[DetectionResult]:
        """Ranked results for the given text."""
        return detect_language(
            text, max_results=self.max_results, signatures=self.signatures
        )

    def detect(self, text: str) -> str:
        """Detect the language of the given text.

        Returns:
            Language code of the top result, or the default language
        """
        code, _ = self.detect_with_confidence(text)
        return code

    def detect_with_confidence(self, text: str) -> tuple[str, int]:
        """Detect language with confidence score.

        Returns:
            Tuple of (language_code, confidence percent); the default language
            with confidence 0 when nothing matched
        """
        results = self.detect_all(text)
        if not results:
            return self.default_language, 0
        return results[0].code, results[0].confidence

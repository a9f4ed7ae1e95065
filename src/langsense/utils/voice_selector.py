"""Pick a TTS voice and locale for text based on detected language."""

from __future__ import annotations

from langsense.core.config import settings
from langsense.core.models import VoiceSelection
from langsense.detection.detector import LanguageDetector
from langsense.utils.language_mapper import LanguageMapper
from langsense.utils.logger import get_logger

logger = get_logger(__name__)


class VoiceSelector:
    """Detects the language of text and chooses a voice for it.

    The top detection result is used when it reaches ``min_confidence``;
    otherwise the selection falls back to the detector's default language
    and the mapper's default voice and locale.
    """

    def __init__(
        self,
        detector: LanguageDetector | None = None,
        mapper: LanguageMapper | None = None,
        min_confidence: int | None = None,
    ) -> None:
        self.detector = detector or LanguageDetector()
        self.mapper = mapper or LanguageMapper()
        self.min_confidence = (
            settings.min_confidence if min_confidence is None else min_confidence
        )

    def select(self, text: str) -> VoiceSelection:
        """Choose a voice for ``text``."""
        results = self.detector.detect_all(text)
        top = results[0] if results else None

        if top is not None and top.confidence >= self.min_confidence:
            return VoiceSelection(
                text=text,
                detection=top,
                language_code=top.code,
                voice=self.mapper.get_supported_voice(top.code),
                locale=self.mapper.get_primary_locale(top.code),
            )

        logger.debug(
            "Falling back to default voice",
            detected=top.code if top else None,
            confidence=top.confidence if top else 0,
            min_confidence=self.min_confidence,
        )
        return VoiceSelection(
            text=text,
            detection=top,
            language_code=self.detector.default_language,
            voice=self.mapper.default_voice,
            locale=self.mapper.default_locale,
            is_fallback=True,
        )

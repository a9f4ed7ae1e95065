"""Language code mapping utilities for text-to-speech."""

from __future__ import annotations

import re

from langsense.core.config import settings
from langsense.core.exceptions import UnsupportedLanguageError
from langsense.core.models import VoiceInfo

# Locale identifiers accepted by TTS services, preferred locale first
TTS_LOCALES: dict[str, tuple[str, ...]] = {
    "en": ("en-US", "en-GB", "en-AU"),
    "es": ("es-ES", "es-MX", "es-AR"),
    "fr": ("fr-FR", "fr-CA"),
    "de": ("de-DE", "de-AT"),
    "it": ("it-IT",),
    "pt": ("pt-PT", "pt-BR"),
    "tr": ("tr-TR",),
    "ar": ("ar-SA", "ar-EG"),
    "ru": ("ru-RU",),
    "zh": ("zh-CN", "zh-TW"),
    "ja": ("ja-JP",),
    "ko": ("ko-KR",),
}

VOICE_MAPPING: dict[str, str] = {
    "en": "aria",
    "es": "monica",
    "fr": "celine",
    "de": "marlene",
    "it": "carla",
    "pt": "ines",
    "tr": "filiz",
    "ar": "zeina",
    "ru": "tatyana",
    "zh": "zhiyu",
    "ja": "mizuki",
    "ko": "seoyeon",
}

LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "tr": "Turkish",
    "ar": "Arabic",
    "ru": "Russian",
    "zh": "Chinese",
    "ja": "Japanese",
    "ko": "Korean",
}

DEFAULT_VOICE_DESCRIPTION = "Natural female voice"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9]")


class LanguageMapper:
    """Maps detected language codes to TTS locales and voices."""

    def __init__(
        self,
        default_voice: str | None = None,
        default_locale: str | None = None,
    ) -> None:
        """Initialize mapper.

        Args:
            default_voice: Voice used for unsupported codes
            default_locale: Locale used for unsupported codes
        """
        self.default_voice = default_voice or settings.default_voice
        self.default_locale = default_locale or settings.default_locale

    def get_locales(self, lang_code: str) -> tuple[str, ...]:
        """Locales for a language code, or the default locale alone."""
        return TTS_LOCALES.get(lang_code, (self.default_locale,))

    def get_primary_locale(self, lang_code: str) -> str:
        """Preferred locale for a language code."""
        return self.get_locales(lang_code)[0]

    def get_supported_voice(self, lang_code: str) -> str:
        """Default TTS voice for a language code, falling back to the default voice."""
        return VOICE_MAPPING.get(lang_code, self.default_voice)

    def get_voice_info(self, lang_code: str) -> VoiceInfo:
        """Voice, description and locales for a language code."""
        voice = self.get_supported_voice(lang_code)
        name = LANGUAGE_NAMES.get(lang_code)
        if lang_code in VOICE_MAPPING and name:
            description = f"Natural {name} female voice"
        else:
            description = DEFAULT_VOICE_DESCRIPTION
        return VoiceInfo(
            voice=voice,
            description=description,
            locales=self.get_locales(lang_code),
        )

    def get_supported_languages(self) -> dict[str, str]:
        """Get supported language codes and their names."""
        return LANGUAGE_NAMES.copy()

    def is_supported(self, lang_code: str) -> bool:
        """Check if language has a dedicated voice."""
        return lang_code in VOICE_MAPPING

    def require_supported(self, lang_code: str) -> str:
        """Return ``lang_code`` or raise if there is no voice for it.

        Raises:
            UnsupportedLanguageError: If the code has no dedicated voice
        """
        if not self.is_supported(lang_code):
            raise UnsupportedLanguageError(
                f"No TTS voice for language '{lang_code}'",
                language_code=lang_code,
                supported_languages=list(VOICE_MAPPING),
            )
        return lang_code

    @staticmethod
    def audio_filename(text: str, locale: str, extension: str = "m4a") -> str:
        """File name for generated audio, e.g. ``hello_world_en-US.m4a``."""
        stem = _UNSAFE_FILENAME_CHARS.sub("_", text.strip())
        return f"{stem}_{locale}.{extension}"

"""Core Pydantic models for language detection and voice selection."""

import re
from enum import Enum
from functools import cached_property
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class LanguageCode(str, Enum):
    """Supported language codes."""

    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    GERMAN = "de"
    ITALIAN = "it"
    PORTUGUESE = "pt"
    TURKISH = "tr"
    ARABIC = "ar"
    RUSSIAN = "ru"
    CHINESE = "zh"
    JAPANESE = "ja"
    KOREAN = "ko"

    @classmethod
    def is_valid(cls, code: str) -> bool:
        """Check if a language code is valid."""
        return code in [lang.value for lang in cls]

    @classmethod
    def get_supported_codes(cls) -> list[str]:
        """Get all supported language codes."""
        return [lang.value for lang in cls]


class LanguageSignature(BaseModel):
    """Matchers that characterise one language.

    Character patterns count script characters (weight 1), affix patterns
    count morphological markers and function-word alternations (weight 2),
    and common words are matched as whole tokens (weight 3). Shared patterns
    score like a character plus an affix match, but only in text where the
    signature's own characters appear.
    """

    model_config = ConfigDict(frozen=True)

    code: LanguageCode = Field(description="Language code")
    display_name: str = Field(min_length=1, description="Human-readable name")
    flag: str = Field(default="", description="Flag emoji for display")
    char_patterns: tuple[re.Pattern[str], ...] = Field(
        default=(),
        description="Character-class matchers"
    )
    affix_patterns: tuple[re.Pattern[str], ...] = Field(
        default=(),
        description="Affix and keyword matchers"
    )
    common_words: tuple[str, ...] = Field(
        default=(),
        description="Highest-frequency function words"
    )
    shared_patterns: tuple[re.Pattern[str], ...] = Field(
        default=(),
        description="Characters of a script shared with another language, "
        "counted only when a character pattern also matches"
    )

    @field_validator("common_words")
    @classmethod
    def lowercase_words(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Common words are matched against lower-cased text."""
        return tuple(word.lower() for word in v)

    @model_validator(mode="after")
    def validate_has_matchers(self) -> "LanguageSignature":
        """Ensure the signature can score at least something."""
        if not (self.char_patterns or self.affix_patterns or self.common_words):
            raise ValueError(
                f"Signature for {self.code.value} needs at least one matcher"
            )
        return self

    @cached_property
    def word_patterns(self) -> tuple[re.Pattern[str], ...]:
        """Whole-token matchers for the common words."""
        return tuple(
            re.compile(rf"\b{re.escape(word)}\b") for word in self.common_words
        )


class DetectionResult(BaseModel):
    """One candidate language for a given input."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(description="Language code")
    display_name: str = Field(description="Human-readable language name")
    flag: str = Field(default="", description="Flag emoji for display")
    confidence: int = Field(
        ge=0,
        le=100,
        description="Share of the total raw score, in percent"
    )

    @property
    def label(self) -> str:
        """Display label such as '🇺🇸 English (87%)'."""
        prefix = f"{self.flag} " if self.flag else ""
        return f"{prefix}{self.display_name} ({self.confidence}%)"


class VoiceInfo(BaseModel):
    """TTS voice details for a language."""

    model_config = ConfigDict(frozen=True)

    voice: str = Field(description="TTS voice identifier")
    description: str = Field(description="Human-readable voice description")
    locales: tuple[str, ...] = Field(
        default=(),
        description="Locale identifiers the voice can be used with"
    )


class VoiceSelection(BaseModel):
    """Voice chosen for a piece of text after language detection."""

    text: str = Field(description="Text the selection was made for")
    detection: Optional[DetectionResult] = Field(
        default=None,
        description="Top detection result, if any"
    )
    language_code: str = Field(description="Language the voice was chosen for")
    voice: str = Field(description="Selected TTS voice")
    locale: str = Field(description="Selected TTS locale")
    is_fallback: bool = Field(
        default=False,
        description="True when defaults were used instead of the detection"
    )

    @property
    def confidence(self) -> int:
        """Confidence of the detection backing this selection."""
        return self.detection.confidence if self.detection else 0

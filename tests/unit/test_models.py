"""Unit tests for core models."""

import re

import pytest
from pydantic import ValidationError

from langsense.core.models import (
    DetectionResult,
    LanguageCode,
    LanguageSignature,
    VoiceInfo,
    VoiceSelection,
)


class TestLanguageCode:
    """Test LanguageCode enum."""

    def test_is_valid(self) -> None:
        assert LanguageCode.is_valid("en")
        assert LanguageCode.is_valid("ko")
        assert not LanguageCode.is_valid("invalid")

    def test_get_supported_codes(self) -> None:
        codes = LanguageCode.get_supported_codes()

        assert len(codes) == 12
        assert "tr" in codes


class TestLanguageSignature:
    """Test LanguageSignature model."""

    def test_strings_compiled(self) -> None:
        signature = LanguageSignature(
            code="de", display_name="German", char_patterns=["[äöüß]"]
        )

        assert isinstance(signature.char_patterns[0], re.Pattern)
        assert signature.code == LanguageCode.GERMAN

    def test_requires_a_matcher(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            LanguageSignature(code="en", display_name="English")

        assert "at least one matcher" in str(exc_info.value)

    def test_invalid_code(self) -> None:
        with pytest.raises(ValidationError):
            LanguageSignature(code="xx", display_name="X", common_words=("x",))

    def test_common_words_lowercased(self) -> None:
        signature = LanguageSignature(
            code="en", display_name="English", common_words=("The", "AND")
        )

        assert signature.common_words == ("the", "and")
        assert len(signature.word_patterns) == 2


class TestDetectionResult:
    """Test DetectionResult model."""

    def test_label(self) -> None:
        result = DetectionResult(
            code="en", display_name="English", flag="🇺🇸", confidence=87
        )

        assert result.label == "🇺🇸 English (87%)"

    def test_label_without_flag(self) -> None:
        result = DetectionResult(code="en", display_name="English", confidence=5)

        assert result.label == "English (5%)"

    @pytest.mark.parametrize("confidence", [-1, 101])
    def test_confidence_range(self, confidence: int) -> None:
        with pytest.raises(ValidationError):
            DetectionResult(code="en", display_name="English", confidence=confidence)

    def test_serialization(self) -> None:
        result = DetectionResult(code="es", display_name="Spanish", confidence=60)

        assert result.model_dump() == {
            "code": "es",
            "display_name": "Spanish",
            "flag": "",
            "confidence": 60,
        }


class TestVoiceModels:
    """Test voice-related models."""

    def test_voice_info(self) -> None:
        info = VoiceInfo(voice="aria", description="d", locales=("en-US",))

        assert info.locales == ("en-US",)

    def test_selection_confidence(self) -> None:
        detection = DetectionResult(code="es", display_name="Spanish", confidence=70)
        selection = VoiceSelection(
            text="hola",
            detection=detection,
            language_code="es",
            voice="monica",
            locale="es-ES",
        )

        assert selection.confidence == 70
        assert not selection.is_fallback

    def test_selection_without_detection(self) -> None:
        selection = VoiceSelection(
            text="",
            language_code="en",
            voice="aria",
            locale="en-US",
            is_fallback=True,
        )

        assert selection.confidence == 0

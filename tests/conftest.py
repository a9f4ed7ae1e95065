"""Test configuration and fixtures."""

from typing import Any, Generator

import pytest

from langsense.core.config import settings
from langsense.detection.detector import LanguageDetector
from langsense.utils.language_mapper import LanguageMapper
from langsense.utils.voice_selector import VoiceSelector

ENGLISH_TEXT = "the quick brown fox and the lazy dog"
CHINESE_TEXT = "的一是不了人我在有他"


@pytest.fixture
def detector() -> LanguageDetector:
    """Detector with default settings."""
    return LanguageDetector()


@pytest.fixture
def mapper() -> LanguageMapper:
    """Mapper with default fallbacks."""
    return LanguageMapper()


@pytest.fixture
def voice_selector(detector: LanguageDetector, mapper: LanguageMapper) -> VoiceSelector:
    """Voice selector without a confidence threshold."""
    return VoiceSelector(detector=detector, mapper=mapper, min_confidence=0)


@pytest.fixture
def sample_texts() -> dict[str, str]:
    """Inputs with a clear expected top language."""
    return {
        "en": ENGLISH_TEXT,
        "zh": CHINESE_TEXT,
        "ru": "Привет, как дела? Это очень хорошо",
        "ar": "مرحبا كيف حالك",
        "ko": "안녕하세요",
        "ja": "こんにちは",
    }


@pytest.fixture(autouse=True)
def restore_settings() -> Generator[None, None, None]:
    """Undo changes tests make to the global settings."""
    original = settings.model_dump()
    yield
    for key, value in original.items():
        setattr(settings, key, value)


# Pytest configuration
def pytest_configure(config: Any) -> None:
    """Configure pytest."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )

"""Configuration management using pydantic-settings."""

from typing import Any, Dict, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from langsense.core.exceptions import ConfigurationError
from langsense.core.models import LanguageCode

SUPPORTED_LANGUAGES = tuple(LanguageCode.get_supported_codes())


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LANGSENSE_",
        case_sensitive=False,
        extra="forbid",
        validate_assignment=True,
    )

    # Detection settings
    max_results: int = Field(
        default=5,
        ge=1,
        le=len(SUPPORTED_LANGUAGES),
        description="Maximum number of ranked detection results"
    )
    min_confidence: int = Field(
        default=0,
        ge=0,
        le=100,
        description="Minimum confidence for automatic voice selection"
    )

    # Language and voice defaults
    default_language: str = Field(
        default="en",
        description="Language used when detection returns nothing"
    )
    default_voice: str = Field(
        default="aria",
        description="Fallback TTS voice for unsupported languages"
    )
    default_locale: str = Field(
        default="en-US",
        description="Fallback TTS locale for unsupported languages"
    )

    # Logging settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: Literal["json", "structured", "simple"] = Field(
        default="structured",
        description="Log format style"
    )
    enable_performance_logging: bool = Field(
        default=False,
        description="Enable performance metrics logging"
    )

    @field_validator("default_language")
    @classmethod
    def validate_default_language(cls, v: str) -> str:
        """Ensure the fallback language is one the detector knows."""
        v = v.lower()
        if v not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language code: {v}")
        return v

    @field_validator("default_voice", "default_locale")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject blank voice or locale identifiers."""
        if not v.strip():
            raise ValueError("Value must not be blank")
        return v.strip()

    def get_detection_config(self) -> Dict[str, Any]:
        """Get detection configuration."""
        return {
            "max_results": self.max_results,
            "min_confidence": self.min_confidence,
            "default_language": self.default_language,
        }

    def get_voice_config(self) -> Dict[str, Any]:
        """Get TTS fallback configuration."""
        return {
            "default_voice": self.default_voice,
            "default_locale": self.default_locale,
        }

    def is_language_supported(self, lang_code: str) -> bool:
        """Check if a language code is supported."""
        return lang_code in SUPPORTED_LANGUAGES


def load_settings(**overrides: Any) -> Settings:
    """Build settings from the environment, .env and ``overrides``.

    Raises:
        ConfigurationError: If any value fails validation
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        first = e.errors()[0]
        raise ConfigurationError.from_exception(
            e,
            message=f"Invalid configuration: {first['msg']}",
            config_key=".".join(str(part) for part in first["loc"]),
        ) from e


# Global settings instance
settings = load_settings()

"""Custom exceptions for langsense."""

from typing import Any, Dict, Optional, Type


class LangSenseError(Exception):
    """Base exception for all langsense errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__.upper()
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
        }

    @classmethod
    def from_exception(
        cls: Type["LangSenseError"],
        exc: Exception,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        **details: Any,
    ) -> "LangSenseError":
        """Wrap another exception, keeping it as the cause."""
        return cls(
            message=message or str(exc),
            error_code=error_code,
            details=details,
            cause=exc,
        )

    def __str__(self) -> str:
        base = f"{self.error_code}: {self.message}"
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            base += f" ({details_str})"
        return base


class ConfigurationError(LangSenseError):
    """Raised when settings cannot be loaded or are inconsistent."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details=details, **kwargs)


class UnsupportedLanguageError(LangSenseError):
    """Raised when a strict lookup is made for an unknown language code."""

    def __init__(
        self,
        message: str,
        language_code: Optional[str] = None,
        supported_languages: Optional[list[str]] = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if language_code:
            details["language_code"] = language_code
        if supported_languages:
            details["supported_languages"] = supported_languages
        super().__init__(message, details=details, **kwargs)


class InvalidInputError(LangSenseError):
    """Raised when CLI or API input cannot be used."""

    def __init__(
        self,
        message: str,
        input_type: Optional[str] = None,
        validation_rule: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if input_type:
            details["input_type"] = input_type
        if validation_rule:
            details["validation_rule"] = validation_rule
        super().__init__(message, details=details, **kwargs)

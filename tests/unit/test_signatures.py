"""Unit tests for the signature table."""

import re

import pytest
from pydantic import ValidationError

from langsense.core.models import LanguageCode
from langsense.detection.signatures import SIGNATURES, get_signature


class TestSignatureTable:
    """Test the fixed signature table."""

    def test_all_languages_present(self) -> None:
        assert list(SIGNATURES) == LanguageCode.get_supported_codes()

    def test_every_signature_has_matchers(self) -> None:
        for signature in SIGNATURES.values():
            assert signature.char_patterns
            assert signature.affix_patterns
            assert signature.common_words

    def test_patterns_compiled(self) -> None:
        for signature in SIGNATURES.values():
            for pattern in signature.char_patterns + signature.affix_patterns:
                assert isinstance(pattern, re.Pattern)

    def test_common_words_unique(self) -> None:
        for signature in SIGNATURES.values():
            assert len(set(signature.common_words)) == len(signature.common_words)

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            SIGNATURES["xx"] = SIGNATURES["en"]  # type: ignore[index]

    def test_signature_is_frozen(self) -> None:
        with pytest.raises(ValidationError):
            SIGNATURES["en"].display_name = "Changed"  # type: ignore[misc]

    def test_get_signature(self) -> None:
        signature = get_signature("ko")

        assert signature is not None
        assert signature.display_name == "Korean"
        assert get_signature("xx") is None

    def test_japanese_kanji_are_shared(self) -> None:
        japanese = SIGNATURES["ja"]

        assert not any(p.search("的一是") for p in japanese.char_patterns)
        assert all(p.search("ひらがなカタカナ") for p in japanese.char_patterns)
        assert all(p.search("漢字") for p in japanese.shared_patterns)
        assert SIGNATURES["zh"].shared_patterns == ()

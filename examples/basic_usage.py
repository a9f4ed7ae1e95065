#!/usr/bin/env python3
"""
Example script demonstrating langsense usage.

Detects the language of a few vocabulary entries and picks a TTS voice for each.
"""

from langsense.detection import detect_language
from langsense.utils.language_mapper import LanguageMapper
from langsense.utils.voice_selector import VoiceSelector


def main() -> None:
    """Main example function."""
    print("🚀 langsense - Example Script")
    print("=" * 50)

    print("📝 Example 1: Ranked detection")
    print("-" * 30)

    for text in [
        "the quick brown fox and the lazy dog",
        "El perro y el gato están en la casa",
        "的一是不了人我在有他",
    ]:
        results = detect_language(text)
        ranking = ", ".join(result.label for result in results)
        print(f"🗣️  {text}")
        print(f"🔍 {ranking}")
        print()

    print("🎙️  Example 2: Voice selection")
    print("-" * 30)

    selector = VoiceSelector(min_confidence=40)
    for text in ["Привет, как дела?", "안녕하세요", "ok"]:
        selection = selector.select(text)
        fallback = " (fallback)" if selection.is_fallback else ""
        filename = LanguageMapper.audio_filename(text, selection.locale)
        print(f"🗣️  {text} → {selection.voice} / {selection.locale}{fallback}")
        print(f"💾 {filename}")

    print()
    print("✅ Done!")


if __name__ == "__main__":
    main()

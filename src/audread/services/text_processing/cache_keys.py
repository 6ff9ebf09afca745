"""Cache key derivation for text-to-speech audio and dictionary lookups."""

from audread.services.text_processing.text_normalization import fast_hash, normalize_text

DEFAULT_VOICE = "alloy"


def audio_cache_key(text: str, voice: str = DEFAULT_VOICE) -> str:
    """Key for the synthesized audio of ``text`` spoken by ``voice``."""
    normalized = normalize_text(text)
    return f"tts_{fast_hash(f'{normalized}:{voice.strip()}')}"


def dictionary_cache_key(term: str, language: str = "en") -> str:
    """Key for the dictionary entry of ``term``; terms are case-insensitive."""
    lang = language.strip().lower() or "und"
    normalized = normalize_text(term).lower()
    return f"dict_{lang}_{fast_hash(normalized)}"

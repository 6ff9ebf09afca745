"""Unit tests for cache key derivation."""

from audread.services import audio_cache_key, dictionary_cache_key


class TestAudioCacheKey:
    def test_prefix(self):
        assert audio_cache_key("Hello.", "alloy").startswith("tts_")

    def test_whitespace_insensitive(self):
        assert audio_cache_key("  Hello\n world. ", "nova") == audio_cache_key("Hello world.", "nova")

    def test_voice_changes_key(self):
        assert audio_cache_key("Hello.", "alloy") != audio_cache_key("Hello.", "echo")

    def test_default_voice(self):
        assert audio_cache_key("Hello.") == audio_cache_key("Hello.", "alloy")


class TestDictionaryCacheKey:
    def test_language_in_key(self):
        assert dictionary_cache_key("Haus", "de").startswith("dict_de_")

    def test_term_case_and_whitespace_insensitive(self):
        assert dictionary_cache_key(" Haus ", "DE") == dictionary_cache_key("haus", "de")

    def test_language_changes_key(self):
        assert dictionary_cache_key("gift", "en") != dictionary_cache_key("gift", "de")

    def test_blank_language(self):
        assert dictionary_cache_key("word", " ").startswith("dict_und_")

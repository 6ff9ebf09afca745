"""Services layer - caching, configuration and text processing."""

from audread.services.settings_manager import SettingsManager

# Text processing services
from audread.services.text_processing import (
	DocumentParser,
	audio_cache_key,
	detect_language,
	dictionary_cache_key,
	extract_title,
	fast_hash,
	normalize_text,
	segment_sentences,
)

# Caching services
from audread.services.caching import AudioCache, CacheSweeper, DictionaryCache, TtlCacheTable

__all__ = [
	"AudioCache",
	"CacheSweeper",
	"DictionaryCache",
	"DocumentParser",
	"SettingsManager",
	"TtlCacheTable",
	"audio_cache_key",
	"detect_language",
	"dictionary_cache_key",
	"extract_title",
	"fast_hash",
	"normalize_text",
	"segment_sentences",
]

"""Tests for DictionaryCache - JSON lookup results with lazy ttl expiry."""

import pytest

from audread.services import DictionaryCache, dictionary_cache_key


@pytest.fixture
def dictionary(handle, clock):
    return DictionaryCache(handle, clock=clock)


@pytest.fixture
def lookup():
    return {"term": "Haus", "lang": "de", "definitions": [{"sense": "house"}, {"sense": "home"}]}


class TestDictionaryCache:
    def test_get_missing_returns_none(self, dictionary):
        assert dictionary.get_dictionary_cache("dict_de_x") is None

    def test_put_and_get_json(self, dictionary, lookup):
        key = dictionary_cache_key("Haus", "de")
        dictionary.put_dictionary_cache(key, lookup, ttl_seconds=3600)
        assert dictionary.get_dictionary_cache(key) == lookup

    def test_unicode_data_survives(self, dictionary):
        dictionary.put_dictionary_cache("dict_ja_1", {"term": "猫", "reading": "ねこ"})
        assert dictionary.get_dictionary_cache("dict_ja_1") == {"term": "猫", "reading": "ねこ"}

    def test_entry_expires_after_ttl(self, dictionary, clock, lookup):
        dictionary.put_dictionary_cache("dict_de_haus", lookup, ttl_seconds=60)
        clock.advance(59)
        assert dictionary.get_dictionary_cache("dict_de_haus") == lookup
        clock.advance(2)
        assert dictionary.get_dictionary_cache("dict_de_haus") is None
        assert not dictionary.contains("dict_de_haus")

    def test_non_json_data_rejected(self, dictionary):
        with pytest.raises(ValueError, match="JSON"):
            dictionary.put_dictionary_cache("dict_en_x", {"when": object()})
        assert not dictionary.contains("dict_en_x")

    def test_delete_and_list_keys(self, dictionary):
        dictionary.put_dictionary_cache("dict_en_b", [1])
        dictionary.put_dictionary_cache("dict_en_a", [2])
        assert dictionary.list_keys() == ["dict_en_a", "dict_en_b"]

        dictionary.delete_dictionary_cache("dict_en_a")
        assert dictionary.list_keys() == ["dict_en_b"]

import pytest

from spell_checker import Dictionary, SuggestionCache, find_match


class CountingDictionary(Dictionary):
    def __init__(self, words=()):
        self.scans = 0
        super().__init__(words)

    def __iter__(self):
        self.scans += 1
        return super().__iter__()


def test_dictionary_add_reports_novelty_and_normalizes() -> None:
    d = Dictionary()
    assert d.add("Hello!") is True
    assert d.add("hello") is False
    assert d.add("123") is False
    assert "hello" in d
    assert len(d) == 1


def test_dictionary_update_counts_new_words() -> None:
    d = Dictionary(["the", "fox"])
    assert d.update(["The", "quick", "fox", "brown"]) == 2
    assert sorted(d) == ["brown", "fox", "quick", "the"]


def test_dictionary_iteration_is_a_snapshot() -> None:
    d = Dictionary(["alpha", "beta"])
    seen = []
    for word in d:
        d.add(word + "x")
        seen.append(word)
    assert sorted(seen) == ["alpha", "beta"]
    assert len(d) == 4


def test_find_match_returns_word_within_threshold() -> None:
    assert find_match("teh", Dictionary(["the", "quick", "fox"])) == "the"
    assert find_match("zzzzzzzzzz", Dictionary(["the", "quick", "fox"])) is None
    assert find_match("anything", Dictionary()) is None


def test_find_match_first_policy_stops_at_first_acceptable() -> None:
    assert find_match("helo", ["halt", "help"], policy="first") == "halt"
    assert find_match("helo", ["halt", "help"], policy="best") == "help"


def test_find_match_respects_max_distance() -> None:
    assert find_match("helo", ["halt"], max_distance=1) is None


def test_find_match_rejects_unknown_policy() -> None:
    with pytest.raises(ValueError):
        find_match("helo", ["help"], policy="closest")


def test_cache_hit_does_not_rescan_dictionary() -> None:
    d = CountingDictionary(["the", "quick", "fox"])
    cache = SuggestionCache()

    assert cache.lookup_or_search("teh", d) == "the"
    assert d.scans == 1
    assert cache.lookup_or_search("teh", d) == "the"
    assert d.scans == 1
    assert "teh" in cache


def test_purge_forces_fresh_search() -> None:
    d = CountingDictionary(["the", "quick", "fox"])
    cache = SuggestionCache()
    cache.lookup_or_search("teh", d)
    cache.lookup_or_search("quikc", d)

    assert cache.purge() == 2
    assert len(cache) == 0
    assert cache.get("teh") is None

    cache.lookup_or_search("teh", d)
    assert d.scans == 3


def test_no_match_is_not_cached() -> None:
    d = Dictionary(["fox"])
    cache = SuggestionCache()
    assert cache.lookup_or_search("zebra", d) is None
    assert "zebra" not in cache

    d.add("zebras")
    assert cache.lookup_or_search("zebra", d) == "zebras"


def test_cached_match_stays_pinned_after_dictionary_grows() -> None:
    d = Dictionary(["help"])
    cache = SuggestionCache()
    assert cache.lookup_or_search("helo", d) == "help"

    d.add("hello")
    assert cache.lookup_or_search("helo", d) == "help"


def test_find_match_never_returns_the_word_itself() -> None:
    assert find_match("the", ["the", "tha"]) == "tha"
    assert find_match("the", ["the"]) is None


def test_cache_hit_ignores_search_settings() -> None:
    cache = SuggestionCache()
    assert cache.lookup_or_search("helo", ["halt"], max_distance=2) == "halt"
    assert cache.lookup_or_search("helo", ["halt"], max_distance=1) == "halt"
    assert find_match("helo", ["halt"], max_distance=1) is None

import pytest

from dsbox.trie import Trie

KEYS = ["the", "a", "there", "answer", "any", "by", "bye", "their"]


@pytest.fixture
def trie():
    t = Trie()
    for key in KEYS:
        t.insert(key)
    return t


@pytest.mark.parametrize(
    "word, present",
    [("the", True), ("these", False), ("their", True), ("thaw", False)],
)
def test_source_queries(trie, word, present):
    assert trie.search(word) is present


def test_every_inserted_key_is_found(trie):
    assert all(trie.search(key) for key in KEYS)
    assert all(key in trie for key in KEYS)


def test_prefixes_are_not_words(trie):
    assert trie.search("th") is False
    assert trie.search("ans") is False
    assert trie.search("b") is False


def test_empty_string_only_after_insert():
    t = Trie()
    assert t.search("") is False
    t.insert("")
    assert t.search("") is True


def test_invalid_characters_raise():
    t = Trie()
    with pytest.raises(ValueError):
        t.insert("Hello")
    with pytest.raises(ValueError):
        t.search("a1")


def test_contains_is_false_for_invalid_input(trie):
    assert ("THE" in trie) is False
    assert (42 in trie) is False
import itertools

import pytest

from stringsorts.counter import END_OF_STRING, CharCompareCounter

WORDS = ["", "a", "ab", "abc", "abd", "b", "ba", "Z", "0", "aa", "a!"]


def test_compare_equal_strings():
    counter = CharCompareCounter()
    assert counter.compare("", "") == 0
    assert counter.count == 1


@pytest.mark.parametrize("a,b", list(itertools.product(WORDS, WORDS)))
def test_compare_sign_matches_ordering(a, b):
    counter = CharCompareCounter()
    expected = (a > b) - (a < b)
    assert counter.compare(a, b) == expected


@pytest.mark.parametrize("a,b", list(itertools.product(WORDS, WORDS)))
def test_compare_is_antisymmetric(a, b):
    counter = CharCompareCounter()
    assert counter.compare(a, b) == -counter.compare(b, a)


@pytest.mark.parametrize("a,b", list(itertools.product(WORDS, WORDS)))
def test_less_agrees_with_ordering(a, b):
    counter = CharCompareCounter()
    assert counter.less(a, b) == (a < b)


def test_compare_counts_at_most_shorter_length_plus_one():
    counter = CharCompareCounter()
    for a, b in itertools.product(WORDS, WORDS):
        counter.reset()
        counter.compare(a, b)
        assert 1 <= counter.count <= min(len(a), len(b)) + 1


def test_compare_identical_strings_counts_every_character_plus_one():
    counter = CharCompareCounter()
    text = "same text"
    assert counter.compare(text, text) == 0
    assert counter.count == len(text) + 1


def test_counts_accumulate_until_reset():
    counter = CharCompareCounter()
    counter.compare("abc", "abc")
    first = counter.count
    counter.compare("abc", "abc")
    assert counter.count == 2 * first
    counter.reset()
    assert counter.count == 0


def test_char_at_returns_character_code():
    counter = CharCompareCounter()
    assert counter.char_at("A", 0) == ord("A")
    assert counter.char_at("xyz", 2) == ord("z")
    assert counter.count == 2


def test_char_at_past_end_returns_marker():
    counter = CharCompareCounter()
    assert counter.char_at("A", 1) == END_OF_STRING
    assert counter.char_at("", 0) == -1
    assert counter.count == 2
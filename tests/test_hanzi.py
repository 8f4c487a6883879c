"""Tests for the Chinese substring scan."""

import pytest

from services.hanzi import scan_substrings

DICTIONARY = {
    "說": {"d": "speak"},
    "佛": {"d": "Buddha"},
    "佛法": {"d": "Buddhadharma"},
    "法": {"d": "dharma"},
    "無": {"d": "not have"},
}


def test_finds_each_key():
    dictionary = {"佛": {"d": "Buddha"}, "法": {"d": "dharma"}}
    result = scan_substrings(["說佛法"], dictionary, {})
    assert result == {"佛": {"d": "Buddha"}, "法": {"d": "dharma"}}


def test_deduplicated():
    result = scan_substrings(["佛法佛法", "佛"], DICTIONARY, {})
    assert list(result) == ["佛", "佛法", "法"]


def test_order_leftmost_then_shortest():
    result = scan_substrings(["說佛法"], DICTIONARY, {})
    assert list(result) == ["說", "佛", "佛法", "法"]


@pytest.mark.parametrize("text", ["說佛法", "無無無", "如是我聞", "佛說無法", ""])
def test_exhaustive(text):
    expected = {
        text[i:j]
        for i in range(len(text))
        for j in range(i + 1, len(text) + 1)
        if text[i:j] in DICTIONARY
    }
    assert set(scan_substrings([text], DICTIONARY, {})) == expected


def test_words_are_joined():
    dictionary = {"佛法": {"d": "Buddhadharma"}}
    assert list(scan_substrings(["佛", "法"], dictionary, {})) == ["佛法"]


def test_variants_normalized():
    result = scan_substrings(["仏法"], DICTIONARY, {"仏": "佛"})
    assert "佛" in result
    assert "佛法" in result


def test_max_length():
    dictionary = {"佛法僧": {"d": "three jewels"}}
    assert scan_substrings(["佛法僧"], dictionary, {}, max_length=2) == {}
    assert list(scan_substrings(["佛法僧"], dictionary, {}, max_length=3)) == ["佛法僧"]


def test_empty_input():
    assert scan_substrings([], DICTIONARY, {}) == {}

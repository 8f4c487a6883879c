"""Tests for DPD headword resolution."""

from services.inflection import first_component, headword_of, lookup_inflected


def test_headword_of():
    assert headword_of("ta 1.1") == "ta"
    assert headword_of("dhamma") == "dhamma"


def test_first_component():
    assert first_component("dhamma + vinaya") == "dhamma"
    assert first_component("dhamma+vinaya") == "dhamma"


class TestLookupInflected:

    def test_distinct_headwords(self):
        dictionary = {"ta": {"d": "that"}}
        inflections = {"naṃ": ["ta 1.1", "ta 2.1"]}
        matches = lookup_inflected("naṃ", dictionary, inflections, {})
        assert [m.to_dict() for m in matches] == [{"base": "ta", "entry": {"d": "that"}}]

    def test_headword_converted_to_dictionary_convention(self):
        dictionary = {"evaṁ": {"d": "thus"}}
        matches = lookup_inflected("evaṃ", dictionary, {"evaṃ": ["evaṃ 1"]}, {})
        assert [m.base for m in matches] == ["evaṁ"]

    def test_decomposition_gloss_and_component(self):
        dictionary = {"dhamma": {"d": "teaching"}}
        decompositions = {"dhammavinayo": "dhamma + vinayo"}
        matches = lookup_inflected("dhammavinayo", dictionary, {}, decompositions)
        assert [m.to_dict() for m in matches] == [
            {"base": "dhammavinayo", "meaning": "dhamma + vinayo"},
            {"base": "dhamma", "entry": {"d": "teaching"}},
        ]

    def test_headwords_in_discovery_order(self):
        dictionary = {"ta": {"d": "that"}, "eta": {"d": "this"}, "na": {"d": "not"}}
        inflections = {"word": ["eta 1", "ta 1", "eta 2"]}
        decompositions = {"word": "na + x"}
        matches = lookup_inflected("word", dictionary, inflections, decompositions)
        assert [m.base for m in matches] == ["word", "eta", "ta", "na"]

    def test_headword_missing_from_dictionary(self):
        matches = lookup_inflected("naṃ", {}, {"naṃ": ["ta 1.1"]}, {})
        assert matches == []

    def test_word_in_neither_table(self, pali_dict):
        assert lookup_inflected("buddha", pali_dict, {}, {}) == []
        assert lookup_inflected("", pali_dict, {}, {}) == []

    def test_single_tag_as_string(self):
        dictionary = {"ta": {"d": "that"}}
        matches = lookup_inflected("naṃ", dictionary, {"naṃ": "ta 1.1"}, {})
        assert [m.base for m in matches] == ["ta"]

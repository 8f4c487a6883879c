"""Tests for the dictionary fetch script's record conversion."""

import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "fetch_dictionaries.py"


@pytest.fixture(scope="module")
def fetch_script():
    spec = importlib.util.spec_from_file_location("fetch_dictionaries", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestCompactEntries:

    def test_compact_fields(self, fetch_script):
        records = [{"entry": "buddha", "definition": "awakened", "grammar": "masc", "xr": "bodhi"}]
        assert fetch_script.compact_entries(records, "pli") == {
            "buddha": {"d": "awakened", "g": "masc", "x": "bodhi"},
        }

    def test_null_definition(self, fetch_script):
        records = [{"entry": "buddha", "definition": None}]
        assert fetch_script.compact_entries(records, "pli") == {"buddha": {"d": ""}}

    def test_pronunciation_only_for_chinese(self, fetch_script):
        records = [{"entry": "佛", "definition": "Buddha", "pronunciation": "fó"}]
        assert fetch_script.compact_entries(records, "lzh")["佛"]["p"] == "fó"
        assert "p" not in fetch_script.compact_entries(records, "pli")["佛"]

    def test_records_without_headword_skipped(self, fetch_script):
        assert fetch_script.compact_entries([{"definition": "x"}], "pli") == {}


def test_parse_js_export(fetch_script):
    source = 'export const dpd_i2h = {"naṃ": ["ta 1.1"]};\n'
    assert fetch_script.parse_js_export(source) == {"naṃ": ["ta 1.1"]}

"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def pali_dict():
    """Small Pali-English dictionary in compact form."""
    return {
        "buddha": {"d": "the awakened one", "g": "masc"},
        "dhamma": {"d": ["teaching", "nature"]},
        "vinaya": {"d": "discipline"},
    }


@pytest.fixture
def data_dir(tmp_path, pali_dict):
    """Data directory with Pali (en, nl) and Chinese dictionaries."""
    tables = {
        "lookup-pli-en.json": pali_dict,
        "lookup-pli-nl.json": {"sutta": {"d": "tekst"}},
        "lookup-lzh-en.json": {
            "佛": {"d": "Buddha", "p": "fó"},
            "法": {"d": "dharma", "p": "fǎ"},
        },
    }
    for name, data in tables.items():
        (tmp_path / name).write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return tmp_path


@pytest.fixture
def tables(data_dir):
    from services.tables import LookupTables

    return LookupTables(data_dir)


@pytest.fixture
def client(tables):
    """API client backed by the temporary data directory."""
    from fastapi.testclient import TestClient

    from main import app, get_tables

    app.dependency_overrides[get_tables] = lambda: tables
    yield TestClient(app)
    app.dependency_overrides.clear()

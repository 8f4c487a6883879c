"""Tests for service settings."""

import config
from config import Settings


class TestDataDir:

    def test_checkout_data_directory(self, tmp_path, monkeypatch):
        monkeypatch.delenv("DATA_DIR", raising=False)
        (tmp_path / "data").mkdir()
        monkeypatch.setattr(config, "PROJECT_ROOT", tmp_path)
        assert Settings().DATA_DIR == tmp_path / "data"

    def test_installed_package_uses_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.delenv("DATA_DIR", raising=False)
        monkeypatch.setattr(config, "PROJECT_ROOT", tmp_path / "site-packages")
        monkeypatch.chdir(tmp_path)
        assert Settings().DATA_DIR == tmp_path / "data"

    def test_environment_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DATA_DIR", str(tmp_path / "tables"))
        assert Settings().DATA_DIR == tmp_path / "tables"

"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from memepen.config import Config, StorageConfig, load_config

CONFIG_TOML = """
[server]
port = 9000
public_base_url = "https://memes.example.com"

[storage]
uploader = "http"
url = "https://bucket.example.com/memes-bucket"
timeout = 10

[fonts]
directories = ["/usr/share/fonts/truetype"]
google_fallback = true

[templates]
include_defaults = false
"""


class TestLoadConfig:
    """Test suite for load_config()."""

    def test_defaults_without_config_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        cfg = load_config()

        assert cfg == Config()
        assert cfg.server.port == 8080
        assert cfg.storage.uploader == "local"
        assert "Impact" in cfg.fonts.paths
        assert "yall-got-any-more-of-them" in cfg.images.paths
        assert cfg.templates.include_defaults is True

    def test_picks_up_config_in_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / "memepen.toml").write_text("[server]\nport = 9999\n")
        monkeypatch.chdir(tmp_path)
        assert load_config().server.port == 9999

    def test_explicit_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_parses_all_sections(self, tmp_path):
        path = tmp_path / "memepen.toml"
        path.write_text(CONFIG_TOML)

        cfg = load_config(path)

        assert cfg.server.port == 9000
        assert cfg.server.public_base_url == "https://memes.example.com"
        assert cfg.storage.uploader == "http"
        assert cfg.storage.timeout == 10
        assert [str(d) for d in cfg.fonts.directories] == ["/usr/share/fonts/truetype"]
        assert cfg.fonts.google_fallback is True
        assert cfg.templates.include_defaults is False
        # Untouched sections keep their defaults
        assert "two-buttons" in cfg.images.paths

    def test_unknown_uploader_rejected(self, tmp_path):
        path = tmp_path / "memepen.toml"
        path.write_text('[storage]\nuploader = "ftp"\n')
        with pytest.raises(ValidationError):
            load_config(path)


class TestStorageConfig:
    def test_http_uploader_requires_url(self):
        with pytest.raises(ValidationError):
            StorageConfig(uploader="http")

    def test_local_uploader_needs_no_url(self):
        assert StorageConfig(uploader="local").url is None

"""Tests for ubix.config.manager module."""

import logging

import pytest

from ubix.config.manager import ConfigManager
from ubix.utils.errors import ConfigError


@pytest.fixture
def global_config(tmp_path):
    """Path of the global config file used by ConfigManager()."""
    return tmp_path / ".ubix-config"


class TestConfigManagerLoad:
    """Tests for ConfigManager.load."""

    def test_defaults_without_files(self):
        manager = ConfigManager()

        settings = manager.load()

        assert settings.default_author == ""
        assert settings.default_version == "0.0.0"
        assert manager.local_config_path is None
        assert manager.get_config_source("UBIX_DEFAULT_AUTHOR") == "default"

    def test_global_file(self, global_config):
        global_config.write_text("UBIX_DEFAULT_AUTHOR=Jane Doe\nUBIX_DEFAULT_API=2.1.0\n")
        manager = ConfigManager()

        settings = manager.load()

        assert settings.default_author == "Jane Doe"
        assert settings.default_api == "2.1.0"
        assert manager.get_config_source("UBIX_DEFAULT_AUTHOR") == "global"

    def test_explicit_global_path(self, tmp_path):
        custom = tmp_path / "custom-config"
        custom.write_text("UBIX_ARCHIVE_NAME=bundle.zip\n")

        settings = ConfigManager(global_config_path=custom).load()

        assert settings.archive_name == "bundle.zip"

    def test_local_overrides_global(self, global_config, workdir):
        global_config.write_text("UBIX_DEFAULT_AUTHOR=Global\nUBIX_DEFAULT_VERSION=1.0.0\n")
        (workdir / ".ubix").write_text("UBIX_DEFAULT_AUTHOR=Team\n")
        manager = ConfigManager()

        settings = manager.load()

        assert settings.default_author == "Team"
        assert settings.default_version == "1.0.0"
        assert manager.local_config_path == workdir / ".ubix"
        assert manager.get_config_source("UBIX_DEFAULT_AUTHOR").startswith("local")

    def test_local_found_in_parent_directory(self, workdir, monkeypatch):
        (workdir / ".ubix").write_text("UBIX_DEFAULT_AUTHOR=Team\n")
        nested = workdir / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        assert ConfigManager().load().default_author == "Team"

    def test_search_stops_at_repository_root(self, workdir, monkeypatch):
        (workdir / ".ubix").write_text("UBIX_DEFAULT_AUTHOR=Outside\n")
        repo = workdir / "repo"
        (repo / ".git").mkdir(parents=True)
        monkeypatch.chdir(repo)

        manager = ConfigManager()

        assert manager.load().default_author == ""
        assert manager.local_config_path is None

    def test_environment_overrides_files(self, global_config, workdir, monkeypatch):
        global_config.write_text("UBIX_DEFAULT_AUTHOR=Global\n")
        (workdir / ".ubix").write_text("UBIX_DEFAULT_AUTHOR=Team\n")
        monkeypatch.setenv("UBIX_DEFAULT_AUTHOR", "Env")
        manager = ConfigManager()

        assert manager.load().default_author == "Env"
        assert manager.get_config_source("UBIX_DEFAULT_AUTHOR") == "environment"

    def test_unrelated_environment_ignored(self, monkeypatch):
        monkeypatch.setenv("UBIX_SOMETHING_ELSE", "x")
        manager = ConfigManager()
        manager.load()

        assert manager.get("UBIX_SOMETHING_ELSE") == ""

    def test_comments_blank_lines_and_quotes(self, global_config):
        global_config.write_text(
            "# defaults\n"
            "\n"
            'UBIX_DEFAULT_AUTHOR="Jane \\"JD\\" Doe"\n'
            "UBIX_ARCHIVE_NAME='my $pkg.zip'\n"
            "not a setting\n"
        )
        settings = ConfigManager().load()

        assert settings.default_author == 'Jane "JD" Doe'
        assert settings.archive_name == "my $pkg.zip"

    @pytest.mark.parametrize("raw,expected", [("true", True), ("1", True), ("YES", True), ("no", False)])
    def test_boolean_values(self, global_config, raw, expected):
        global_config.write_text(f"UBIX_ASSUME_DEFAULTS={raw}\n")
        assert ConfigManager().load().assume_defaults is expected

    def test_invalid_default_version_ignored(self, global_config, caplog):
        global_config.write_text("UBIX_DEFAULT_VERSION=1.0\nUBIX_DEFAULT_API=newest\n")

        with caplog.at_level(logging.WARNING):
            settings = ConfigManager().load()

        assert settings.default_version == "0.0.0"
        assert settings.default_api == "latest"
        assert "UBIX_DEFAULT_VERSION" in caplog.text

    def test_reload_starts_from_defaults(self, global_config):
        global_config.write_text("UBIX_DEFAULT_AUTHOR=Jane\n")
        manager = ConfigManager()
        manager.load()
        global_config.unlink()

        assert manager.load().default_author == ""

    def test_non_utf8_file_is_config_error(self, workdir):
        (workdir / ".ubix").write_bytes(b"UBIX_DEFAULT_AUTHOR=J\xf6rg\n")

        with pytest.raises(ConfigError, match="Cannot read configuration file"):
            ConfigManager().load()

    def test_unreadable_global_config_is_config_error(self, global_config):
        global_config.mkdir()

        with pytest.raises(ConfigError):
            ConfigManager().load()

    def test_get_raw_value(self, global_config):
        global_config.write_text("UBIX_DEFAULT_VERSION=1.0\n")
        manager = ConfigManager()
        manager.load()

        assert manager.get("UBIX_DEFAULT_VERSION") == "1.0"
        assert manager.get("MISSING", "fallback") == "fallback"


class TestConfigManagerShow:
    """Tests for ConfigManager.show."""

    def test_show_lists_values_and_sources(self, global_config, capsys):
        global_config.write_text("UBIX_DEFAULT_AUTHOR=[Jane]\n")
        manager = ConfigManager()
        manager.load()

        manager.show()

        output = capsys.readouterr().out
        assert "Current Configuration" in output
        assert "Author: [Jane] (global)" in output
        assert "Version: 0.0.0 (default)" in output
        assert "Local config:  (not found)" in output
        assert "Archive Name: ubix.zip" in output

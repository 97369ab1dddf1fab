"""Tests for relnotes.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from relnotes.core.config import (
    ChangelogConfig,
    Config,
    PathsConfig,
    ProductConfig,
    load_config,
    load_config_or_default,
)
from relnotes.core.result import Err, Ok


class TestDefaults:
    def test_paths(self) -> None:
        """Paths default to the upstream repository layout."""
        config = PathsConfig()
        assert config.changes == "changes"
        assert config.fragments == "utility/release-note-fragments"
        assert config.archives == "release-archives"

    def test_product(self) -> None:
        """Product names default to Iosevka."""
        config = ProductConfig()
        assert config.token == "iosevka"
        assert config.display_name == "Iosevka"

    def test_changelog_baseline(self) -> None:
        """The changelog caption baseline defaults to 2.x."""
        assert ChangelogConfig().baseline == "2.x"

    def test_frozen(self) -> None:
        """Config sections are immutable."""
        config = ProductConfig()
        with pytest.raises(AttributeError):
            config.token = "other"  # type: ignore[misc]


class TestConfig:
    def test_from_dict_empty(self) -> None:
        """An empty table gives the default config."""
        config = Config.from_dict({})
        assert config == Config()

    def test_from_dict_partial(self) -> None:
        """Missing keys fall back to their defaults."""
        data = {
            "product": {"token": "fira"},
            "changelog": {"baseline": "3.x"},
        }
        config = Config.from_dict(data)
        assert config.product.token == "fira"
        assert config.product.display_name == "Iosevka"  # default
        assert config.changelog.baseline == "3.x"
        assert config.paths.changes == "changes"  # default

    def test_from_dict_ignores_blank_and_wrong_types(self) -> None:
        """Blank strings and non-table sections are ignored."""
        data = {
            "paths": {"changes": "   ", "archives": 3},
            "product": "not a table",
        }
        config = Config.from_dict(data)
        assert config.paths.changes == "changes"
        assert config.paths.archives == "release-archives"
        assert config.product == ProductConfig()


class TestLoadConfig:
    def test_load_valid_config(self, tmp_path: Path) -> None:
        """A valid file overrides the given keys."""
        config_file = tmp_path / "release-notes.toml"
        config_file.write_text(
            """
[paths]
changes = "notes/changes"

[product]
display_name = "Iosevka Test"
""",
            encoding="utf-8",
        )
        result = load_config(config_file)
        assert isinstance(result, Ok)
        assert result.value.paths.changes == "notes/changes"
        assert result.value.product.display_name == "Iosevka Test"

    def test_load_missing_file(self, tmp_path: Path) -> None:
        """A missing file is an error for load_config."""
        result = load_config(tmp_path / "missing.toml")
        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_load_invalid_toml(self, tmp_path: Path) -> None:
        """Malformed TOML is reported with its path."""
        config_file = tmp_path / "release-notes.toml"
        config_file.write_text("this is not valid toml [[[", encoding="utf-8")
        result = load_config(config_file)
        assert isinstance(result, Err)
        assert "TOML" in result.error.message
        assert result.error.path == config_file


class TestLoadConfigOrDefault:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """A missing file yields the default config."""
        result = load_config_or_default(tmp_path / "release-notes.toml")
        assert result == Ok(Config())

    def test_broken_file_is_still_an_error(self, tmp_path: Path) -> None:
        """A present but malformed file is still an error."""
        config_file = tmp_path / "release-notes.toml"
        config_file.write_text("[paths\n", encoding="utf-8")
        assert isinstance(load_config_or_default(config_file), Err)

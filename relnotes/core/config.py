"""Typed configuration for release-notes generation.

The project root may carry a `release-notes.toml`:

    [paths]
    changes = "changes"
    fragments = "utility/release-note-fragments"
    archives = "release-archives"

    [product]
    token = "iosevka"
    display_name = "Iosevka"

    [changelog]
    baseline = "2.x"

Every key is optional; missing keys fall back to the defaults below.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "CONFIG_FILE_NAME",
    "Config",
    "ConfigError",
    "ChangelogConfig",
    "PathsConfig",
    "ProductConfig",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILE_NAME = "release-notes.toml"

DEFAULT_CHANGES_DIR = "changes"
DEFAULT_FRAGMENTS_DIR = "utility/release-note-fragments"
DEFAULT_ARCHIVES_DIR = "release-archives"

DEFAULT_PRODUCT_TOKEN = "iosevka"
DEFAULT_PRODUCT_DISPLAY_NAME = "Iosevka"

DEFAULT_CHANGELOG_BASELINE = "2.x"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class PathsConfig:
    """Directories, relative to the project root."""

    changes: str = DEFAULT_CHANGES_DIR
    fragments: str = DEFAULT_FRAGMENTS_DIR
    archives: str = DEFAULT_ARCHIVES_DIR


@dataclass(frozen=True, slots=True)
class ProductConfig:
    """Names used when deriving package file and menu names."""

    token: str = DEFAULT_PRODUCT_TOKEN
    display_name: str = DEFAULT_PRODUCT_DISPLAY_NAME


@dataclass(frozen=True, slots=True)
class ChangelogConfig:
    # Shown in the "Modifications since version ..." caption.
    baseline: str = DEFAULT_CHANGELOG_BASELINE


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    paths: PathsConfig = field(default_factory=PathsConfig)
    product: ProductConfig = field(default_factory=ProductConfig)
    changelog: ChangelogConfig = field(default_factory=ChangelogConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        paths: StrDict = get_table(data, "paths") or {}
        product: StrDict = get_table(data, "product") or {}
        changelog: StrDict = get_table(data, "changelog") or {}

        return cls(
            paths=PathsConfig(
                changes=get_str(paths, "changes") or DEFAULT_CHANGES_DIR,
                fragments=get_str(paths, "fragments") or DEFAULT_FRAGMENTS_DIR,
                archives=get_str(paths, "archives") or DEFAULT_ARCHIVES_DIR,
            ),
            product=ProductConfig(
                token=get_str(product, "token") or DEFAULT_PRODUCT_TOKEN,
                display_name=get_str(product, "display_name") or DEFAULT_PRODUCT_DISPLAY_NAME,
            ),
            changelog=ChangelogConfig(
                baseline=get_str(changelog, "baseline") or DEFAULT_CHANGELOG_BASELINE,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to release-notes.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return Ok(Config.from_dict(result.value))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Load config if the file exists, otherwise return the defaults.

    A file that exists but cannot be parsed is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)

"""Configuration loading for citation rendering."""

import os
from pathlib import Path
from typing import Any

import msgspec
import yaml


class CitationConfig(msgspec.Struct, frozen=True, kw_only=True):
    """Rendering settings."""

    default_locale: str = "en"
    bundle_dir: str | None = None
    file_name_requires_direct: bool = True
    escape_html: bool = False


class Config:
    """Configuration file handling."""

    @staticmethod
    def from_file(path: Path) -> dict[str, Any]:
        """Load configuration from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}") from e
        except OSError as e:
            raise ValueError(f"Error reading config file: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        return data

    @staticmethod
    def get_config_paths() -> list[Path]:
        """Get the default configuration file paths in precedence order."""
        paths = []

        xdg_config_home = Path(
            os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        )
        paths.append(xdg_config_home / "citeformats" / "config.yaml")

        # Project config
        paths.append(Path(".citeformats.yaml"))
        paths.append(Path("citeformats.yaml"))

        return paths

    @staticmethod
    def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
        """Merge configuration dictionaries, later ones winning."""
        result: dict[str, Any] = {}
        for config in configs:
            result.update(config)
        return result


def build_config(data: dict[str, Any]) -> CitationConfig:
    """Validate a configuration mapping."""
    try:
        return msgspec.convert(data, CitationConfig)
    except msgspec.ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e


def load_config(path: Path | None = None) -> CitationConfig:
    """Load configuration from files and environment variables.

    Args:
        path: Explicit config file; replaces the default search paths
    """
    config: dict[str, Any] = {}

    paths = [path] if path else Config.get_config_paths()
    for config_path in paths:
        if config_path.exists():
            config = Config.merge_configs(config, Config.from_file(config_path))

    env_overrides = {}
    if locale := os.environ.get("CITEFORMATS_LOCALE"):
        env_overrides["default_locale"] = locale
    if bundle_dir := os.environ.get("CITEFORMATS_BUNDLE_DIR"):
        env_overrides["bundle_dir"] = bundle_dir

    return build_config(Config.merge_configs(config, env_overrides))

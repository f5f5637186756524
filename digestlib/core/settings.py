"""
Pydantic Settings for digestlib configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .di import get_logger
from .exceptions import ConfigFileError
from .models.config import LoggingConfig, ProvidersConfig

CONFIG_DIR_NAME = ".digestlib"
CONFIG_FILE_NAME = "config.toml"


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .digestlib/config.toml by walking up from start_dir (or cwd).

    A pyproject.toml carrying a [tool.digestlib] table also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if "digestlib" in data.get("tool", {}):
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                get_logger().debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                get_logger().debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data.

        A discovered file that cannot be read or parsed is skipped with a
        warning. An explicit config_path must load.

        Raises:
            ConfigFileError: If the explicit config_path is unreadable or
                not valid TOML
        """
        if self._data is not None:
            return self._data

        self._data = {}

        if self._config_path is not None:
            path = Path(self._config_path)
        else:
            path = find_config_file(self._start_dir)
        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            if self._config_path is not None:
                raise ConfigFileError(
                    f"Failed to parse config file: {e}", file_path=str(path), cause=e
                ) from e
            get_logger().warning("Failed to parse config file %s: %s", path, e)
            return self._data
        except OSError as e:
            if self._config_path is not None:
                raise ConfigFileError(
                    f"Failed to read config file: {e}", file_path=str(path), cause=e
                ) from e
            get_logger().warning("Failed to read config file %s: %s", path, e)
            return self._data

        if path.name == "pyproject.toml":
            data = data.get("tool", {}).get("digestlib", {})

        self._data = data
        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        field_value = self._load_toml().get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return dict(self._load_toml())


class DigestSettings(BaseSettings):
    """digestlib settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (DIGESTLIB_<section>__<field>)
    3. TOML config file (.digestlib/config.toml or pyproject.toml [tool.digestlib])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "DIGESTLIB_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    logging: LoggingConfig = LoggingConfig()
    providers: ProvidersConfig = ProvidersConfig()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Add TOML loading below environment variables.

        config_path/start_dir cannot be threaded through here, so
        load_settings() passes them via module-level variables.
        """
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return (
            init_settings,
            env_settings,
            toml_source,
        )


_current_config_path: Path | None = None
_current_start_dir: str | None = None


def load_settings(
    config_path: Path | None = None,
    start_dir: str | None = None,
    **overrides: Any,
) -> DigestSettings:
    """Load digestlib settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        **overrides: Explicit section values, highest priority

    Returns:
        DigestSettings instance with all sources merged

    Raises:
        ConfigFileError: If config_path is given but cannot be loaded
    """
    global _current_config_path, _current_start_dir

    _current_config_path = config_path
    _current_start_dir = start_dir
    try:
        return DigestSettings(**overrides)
    finally:
        _current_config_path = None
        _current_start_dir = None

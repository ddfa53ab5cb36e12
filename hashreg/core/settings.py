"""
Pydantic Settings for hashreg configuration.

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

from .exceptions import ConfigFileError
from .models.config import LoggingConfig, ProvidersConfig, RegistryConfig


def _get_logger():
    from ..services.logging import NullLogger
    from .di import resolve_or_default
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .hashreg/config.toml by walking up from start_dir (or cwd).

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / ".hashreg" / "config.toml"
        if config_path.exists():
            return config_path

        # Also check for pyproject.toml with [tool.hashreg] section
        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if "tool" in data and "hashreg" in data["tool"]:
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                _get_logger().debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                _get_logger().debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config files."""

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
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        explicit = path is not None
        if path is None:
            path = find_config_file(self._start_dir)

        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (tomllib.TOMLDecodeError, OSError) as e:
            # An explicitly requested file must load; a discovered one may not
            if explicit:
                raise ConfigFileError(
                    "Failed to load config file", file_path=str(path), cause=e
                ) from e
            _get_logger().warning("Failed to load config file %s: %s", path, e)
            return self._data

        if path.name == "pyproject.toml":
            data = data.get("tool", {}).get("hashreg", {})

        self._data = data
        return self._data

    @property
    def config_file(self) -> Path | None:
        """The file that supplied the data, if any."""
        if self._config_path is not None:
            return self._config_path
        return find_config_file(self._start_dir)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        field_value = data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return self._load_toml()


class HashregSettings(BaseSettings):
    """hashreg configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (HASHREG_<section>__<field>)
    3. TOML config file (.hashreg/config.toml or pyproject.toml [tool.hashreg])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "HASHREG_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    registry: RegistryConfig = RegistryConfig()
    providers: ProvidersConfig = ProvidersConfig()
    logging: LoggingConfig = LoggingConfig()

    _config_file: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading.

        Note: settings_customise_sources cannot take arguments, so the config
        location is passed through module-level variables set by
        load_settings().
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

    @property
    def config_file(self) -> str | None:
        """Path of the TOML file the settings were loaded from."""
        return self._config_file

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a plain nested dict."""
        result: dict[str, Any] = {
            "registry": self.registry.model_dump(),
            "providers": self.providers.model_dump(),
            "logging": self.logging.model_dump(),
        }
        if self._config_file:
            result["_config_file"] = self._config_file
        return result


# Module-level variables for passing to settings_customise_sources
_current_config_path: Path | None = None
_current_start_dir: str | None = None


def load_settings(
    config_path: Path | None = None,
    start_dir: str | None = None,
    **overrides: Any,
) -> HashregSettings:
    """Load hashreg settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        **overrides: Explicit section values, highest priority

    Returns:
        HashregSettings instance with all sources merged

    Raises:
        ConfigFileError: If config_path is given and cannot be loaded
    """
    global _current_config_path, _current_start_dir

    _current_config_path = config_path
    _current_start_dir = start_dir

    try:
        settings = HashregSettings(**overrides)

        source = TomlConfigSource(HashregSettings, config_path, start_dir)
        path = source.config_file
        if path is not None:
            settings._config_file = str(path)

        return settings
    finally:
        _current_config_path = None
        _current_start_dir = None

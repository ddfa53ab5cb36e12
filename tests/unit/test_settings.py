"""
Tests for hashreg settings loading.

Tests verify:
- Defaults when no config file or environment is present
- .hashreg/config.toml and pyproject.toml [tool.hashreg] discovery
- HASHREG_* environment variables override TOML
- Invalid values are rejected
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from hashreg.core.exceptions import ConfigFileError
from hashreg.core.identity import Hash
from hashreg.core.settings import find_config_file, load_settings


def _write_config(root: Path, body: str) -> Path:
    config_dir = root / ".hashreg"
    config_dir.mkdir(parents=True, exist_ok=True)
    path = config_dir / "config.toml"
    path.write_text(body)
    return path


class TestDefaults:
    """Tests for settings with no config present."""

    def test_defaults(self, isolated_env):
        settings = load_settings(start_dir=str(isolated_env))
        assert settings.registry.duplicates == "replace"
        assert settings.registry.freeze is True
        assert settings.providers.disabled == []
        assert settings.logging.level == "warning"
        assert settings.logging.console is False
        assert settings.logging.file is False
        assert settings.config_file is None

    def test_to_dict_sections(self, isolated_env):
        data = load_settings(start_dir=str(isolated_env)).to_dict()
        assert set(data) == {"registry", "providers", "logging"}


class TestTomlLoading:
    """Tests for TOML config files."""

    def test_config_toml_discovered(self, isolated_env):
        path = _write_config(
            isolated_env,
            '[registry]\nduplicates = "reject"\n\n[logging]\nlevel = "debug"\n',
        )
        settings = load_settings(start_dir=str(isolated_env))
        assert settings.registry.duplicates == "reject"
        assert settings.logging.level == "debug"
        assert settings.config_file == str(path)

    def test_config_found_from_subdirectory(self, isolated_env):
        path = _write_config(isolated_env, "[registry]\nfreeze = false\n")
        subdir = isolated_env / "a" / "b"
        subdir.mkdir(parents=True)
        assert find_config_file(str(subdir)) == path
        assert load_settings(start_dir=str(subdir)).registry.freeze is False

    def test_pyproject_tool_section(self, isolated_env):
        (isolated_env / "pyproject.toml").write_text(
            '[project]\nname = "x"\n\n[tool.hashreg.providers]\ndisabled = ["md4", "sha1"]\n'
        )
        settings = load_settings(start_dir=str(isolated_env))
        assert settings.providers.disabled == ["md4", "sha1"]
        assert settings.providers.disabled_identities() == [Hash.MD4, Hash.SHA1]

    def test_pyproject_without_section_ignored(self, isolated_env):
        (isolated_env / "pyproject.toml").write_text('[project]\nname = "x"\n')
        assert find_config_file(str(isolated_env)) is None

    def test_comma_separated_disabled(self, isolated_env):
        _write_config(isolated_env, '[providers]\ndisabled = "MD4, SHA-1"\n')
        settings = load_settings(start_dir=str(isolated_env))
        assert settings.providers.disabled_identities() == [Hash.MD4, Hash.SHA1]

    def test_unknown_hash_name_rejected(self, isolated_env):
        _write_config(isolated_env, '[providers]\ndisabled = ["whirlpool"]\n')
        with pytest.raises(ValidationError):
            load_settings(start_dir=str(isolated_env))

    def test_invalid_policy_rejected(self, isolated_env):
        _write_config(isolated_env, '[registry]\nduplicates = "ignore"\n')
        with pytest.raises(ValidationError):
            load_settings(start_dir=str(isolated_env))

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('[logging]\nconsole = true\n')
        settings = load_settings(config_path=path)
        assert settings.logging.console is True
        assert settings.config_file == str(path)

    def test_explicit_broken_file_raises(self, tmp_path):
        path = tmp_path / "broken.toml"
        path.write_text("[registry\n")
        with pytest.raises(ConfigFileError):
            load_settings(config_path=path)

    def test_discovered_broken_file_falls_back_to_defaults(self, isolated_env):
        _write_config(isolated_env, "[registry\n")
        settings = load_settings(start_dir=str(isolated_env))
        assert settings.registry.duplicates == "replace"


class TestEnvironment:
    """Tests for HASHREG_* environment variables."""

    def test_env_overrides_toml(self, isolated_env, monkeypatch):
        _write_config(isolated_env, '[registry]\nduplicates = "replace"\n')
        monkeypatch.setenv("HASHREG_REGISTRY__DUPLICATES", "reject")
        settings = load_settings(start_dir=str(isolated_env))
        assert settings.registry.duplicates == "reject"

    def test_env_logging_level(self, isolated_env, monkeypatch):
        monkeypatch.setenv("HASHREG_LOGGING__LEVEL", "info")
        settings = load_settings(start_dir=str(isolated_env))
        assert settings.logging.level == "info"

    def test_init_overrides_env(self, isolated_env, monkeypatch):
        monkeypatch.setenv("HASHREG_REGISTRY__FREEZE", "false")
        settings = load_settings(start_dir=str(isolated_env), registry={"freeze": True})
        assert settings.registry.freeze is True

    def test_env_comma_separated_disabled(self, isolated_env, monkeypatch):
        monkeypatch.setenv("HASHREG_PROVIDERS__DISABLED", "MD4,SHA-1")
        settings = load_settings(start_dir=str(isolated_env))
        assert settings.providers.disabled == ["MD4", "SHA-1"]
        assert settings.providers.disabled_identities() == [Hash.MD4, Hash.SHA1]

    def test_env_json_list_disabled(self, isolated_env, monkeypatch):
        monkeypatch.setenv("HASHREG_PROVIDERS__DISABLED", '["MD4", "sha3_256"]')
        settings = load_settings(start_dir=str(isolated_env))
        assert settings.providers.disabled_identities() == [Hash.MD4, Hash.SHA3_256]

    def test_env_unknown_disabled_name_rejected(self, isolated_env, monkeypatch):
        monkeypatch.setenv("HASHREG_PROVIDERS__DISABLED", "MD4,whirlpool")
        with pytest.raises(ValidationError):
            load_settings(start_dir=str(isolated_env))

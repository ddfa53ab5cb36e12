"""
Shared pytest fixtures for hashreg tests.

- registry: fresh registry with the default providers, frozen
- empty_registry: registry with nothing registered yet
- isolated_env: keeps HASHREG_* variables and stray config files out of tests
"""

import os
from pathlib import Path

import pytest

from hashreg.core.bootstrap import reset as reset_bootstrap
from hashreg.core.registry import HashRegistry
from hashreg.providers import register_defaults


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Run every test from an empty directory with no HASHREG_* variables.

    Also resets the process-wide container so bootstrap() starts clean.
    """
    for key in list(os.environ):
        if key.startswith("HASHREG_"):
            monkeypatch.delenv(key)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    reset_bootstrap()
    yield workdir
    reset_bootstrap()


@pytest.fixture
def empty_registry() -> HashRegistry:
    """Registry still in its registration phase, with nothing registered."""
    return HashRegistry()


@pytest.fixture
def registry() -> HashRegistry:
    """Registry with the default providers registered and frozen."""
    reg = HashRegistry()
    register_defaults(reg)
    reg.freeze()
    return reg

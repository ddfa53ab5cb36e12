"""
Click context extension for hashreg CLI.

Provides HashregContext dataclass that holds the data passed through the
Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..core.bootstrap import bootstrap
from ..core.registry import HashRegistry


@dataclass
class HashregContext:
    """Extended context passed through Click command chain.

    Attributes:
        config_path: Explicit config file from --config, if any
    """

    config_path: Path | None = None
    _registry: HashRegistry | None = field(default=None, repr=False)

    @property
    def registry(self) -> HashRegistry:
        """The process-wide registry, bootstrapped on first access."""
        if self._registry is None:
            self._registry = bootstrap(config_path=self.config_path)
        return self._registry

"""
Application bootstrap for hashreg.

Builds the process-wide hash registry: loads settings, creates the logger,
runs the provider registration phase and freezes the registry. Call once at
startup and hand the registry to whatever needs lookups.
"""

from __future__ import annotations

import threading
from pathlib import Path

from .container import ServiceContainer, get_container
from .identity import Hash
from .interfaces.logger import ILogger
from .registry import HashRegistry
from .settings import HashregSettings, load_settings

_initialized = False
_lock = threading.Lock()


def bootstrap(
    settings: HashregSettings | None = None,
    config_path: Path | None = None,
) -> HashRegistry:
    """
    Bootstrap hashreg and return the default registry.

    Registers in the container:
    - ILogger built from the logging section
    - HashRegistry with the default providers registered

    Only the first call builds anything. Later calls return the same registry
    and ignore settings and config_path (logged at debug level); call reset()
    first to rebuild from different settings.

    Args:
        settings: Pre-loaded settings (loaded from disk/env if omitted)
        config_path: Explicit config file, used only when settings is None

    Returns:
        The process-wide HashRegistry
    """
    global _initialized

    with _lock:
        container = get_container()
        if not _initialized:
            if settings is None:
                settings = load_settings(config_path=config_path)
            _register_core_services(container, settings)
            _initialized = True
        elif settings is not None or config_path is not None:
            container.resolve(ILogger).debug(  # type: ignore[type-abstract]
                "hashreg already bootstrapped; ignoring settings and config_path"
            )

    return container.resolve(HashRegistry)


def _register_core_services(container: ServiceContainer, settings: HashregSettings) -> None:
    """Register core application services."""
    from ..providers import register_defaults
    from ..services.logging import HashregLogger

    logger = HashregLogger(settings.logging)
    container.register_singleton(ILogger, implementation=logger)  # type: ignore[type-abstract]

    def create_registry() -> HashRegistry:
        registry = HashRegistry(duplicates=settings.registry.duplicates, logger=logger)
        register_defaults(registry, disabled=settings.providers.disabled_identities())
        if settings.registry.freeze:
            registry.freeze()
        logger.info(
            "Hash registry ready: %d of %d identities available",
            len(registry.available_identities),
            len(Hash),
        )
        return registry

    container.register_singleton(HashRegistry, factory=create_registry)


def get_default_registry() -> HashRegistry:
    """Return the process-wide registry, bootstrapping on first use."""
    return bootstrap()


def reset() -> None:
    """
    Reset the application state.

    Closes the logger's handlers and drops the container, so the next
    bootstrap() starts clean. Used by the tests between cases.
    """
    global _initialized
    with _lock:
        logger = get_container().try_resolve(ILogger)  # type: ignore[type-abstract]
        if logger is not None:
            logger.close()
        ServiceContainer.reset()
        _initialized = False


def is_initialized() -> bool:
    """Check if the application has been bootstrapped."""
    return _initialized

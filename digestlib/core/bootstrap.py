"""
Application bootstrap for digestlib.

Registers the configured logger and algorithm registry in the service
container. Library use works without it (no logging, registry built
from settings on first use); the CLI calls it at startup.
"""

from pathlib import Path

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .settings import DigestSettings, load_settings

_initialized = False


def bootstrap(
    config_path: Path | None = None,
    settings: DigestSettings | None = None,
) -> ServiceContainer:
    """
    Bootstrap digestlib.

    Args:
        config_path: Optional explicit config file
        settings: Pre-loaded settings (skips config discovery)

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()
    if _initialized:
        return container

    if settings is None:
        settings = load_settings(config_path=config_path)

    _register_core_services(container, settings)

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer, settings: DigestSettings) -> None:
    from ..engines.registry import AlgorithmRegistry
    from ..services.logging import DigestLogger

    def create_logger() -> ILogger:
        return DigestLogger.from_config(settings.logging)

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]
    container.register_singleton(
        AlgorithmRegistry,
        factory=lambda: AlgorithmRegistry.from_config(settings.providers),
    )


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    from ..engines.registry import reset_registry

    ServiceContainer.reset()
    reset_registry()
    _initialized = False


def is_initialized() -> bool:
    """Check if digestlib has been bootstrapped."""
    return _initialized

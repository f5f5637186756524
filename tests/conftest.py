"""
Shared pytest fixtures for digestlib tests.

- Resets the service container and shared registry around every test
- Strips DIGESTLIB_* environment variables so local config can't leak in
- Provides registries with restricted provider chains
"""

import os

import pytest

from digestlib.core.bootstrap import reset
from digestlib.engines import AlgorithmRegistry, HashlibProvider


@pytest.fixture(autouse=True)
def clean_digestlib_state(monkeypatch: pytest.MonkeyPatch):
    """Give each test a fresh container and registry."""
    for key in list(os.environ):
        if key.startswith("DIGESTLIB_"):
            monkeypatch.delenv(key)
    reset()
    yield
    reset()


@pytest.fixture
def hashlib_registry() -> AlgorithmRegistry:
    """Registry with only the hashlib provider: no prototypes, no extended provider."""
    registry = AlgorithmRegistry(register_defaults=False)
    registry.register(HashlibProvider())
    return registry

"""
Logger interface for internal diagnostic output.

Engine probing, provider fallback, config discovery and algorithm
registration report through ILogger. Digest results are never logged.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """Sink for the framework's %-style diagnostic messages."""

    @abstractmethod
    def debug(self, message: str, *args: Any) -> None:
        """Per-algorithm detail: probes, constructions, registrations."""

    @abstractmethod
    def info(self, message: str, *args: Any) -> None:
        """Environment facts, such as a missing extended provider."""

    @abstractmethod
    def warning(self, message: str, *args: Any) -> None:
        """Degraded behavior: skipped config files, failed prototype copies."""

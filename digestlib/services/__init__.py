"""
Service implementations for digestlib.
"""

from .logging import DigestLogger, NullLogger

__all__ = ["DigestLogger", "NullLogger"]

"""
Service interfaces for digestlib.
"""

from .logger import ILogger

__all__ = ["ILogger"]

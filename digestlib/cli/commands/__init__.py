"""
CLI commands for digestlib.
"""

from .algorithms import algorithms
from .digest import digest

COMMANDS = [algorithms, digest]

__all__ = ["COMMANDS", "algorithms", "digest"]

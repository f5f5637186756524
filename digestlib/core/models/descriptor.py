"""
Algorithm descriptor model.

A descriptor binds a digest type to the canonical name of the engine
that backs it and to the algorithm's structural block length.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from .base import ImmutableModel


class AlgorithmDescriptor(ImmutableModel):
    """Immutable ``{name, block_length}`` pair attached to a digest type.

    Attributes:
        name: Canonical engine identifier (e.g. ``"SHA-256"``)
        block_length: Block size in bytes, or None when the algorithm
            has no meaningful block size
    """

    name: Annotated[str, Field(min_length=1)]
    block_length: Annotated[int, Field(gt=0)] | None = None

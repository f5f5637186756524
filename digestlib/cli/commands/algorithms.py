"""
Native Click implementation of the algorithms command.

Usage: digestlib algorithms
"""

from __future__ import annotations

import click

from ... import algorithm_types
from ...digests.metadata import DESCRIPTORS
from ...engines.registry import get_registry


@click.command("algorithms")
def algorithms() -> None:
    """List digest types usable on this machine.

    Shows each type with its canonical algorithm, digest and block
    length in bytes, and where its engines come from (a cached
    prototype or a named provider).
    """
    registry = get_registry()
    types = algorithm_types()

    name_w = 12
    algo_w = 12
    click.echo(f"{'TYPE':<{name_w}}  {'ALGORITHM':<{algo_w}}  {'DIGEST':>6}  {'BLOCK':>5}  SOURCE")
    click.echo("-" * 56)

    for type_name, cls in types.items():
        descriptor = DESCRIPTORS.resolve(cls)
        if descriptor is None:
            continue
        instance = cls()
        block = descriptor.block_length if descriptor.block_length is not None else "-"
        source = registry.provider_for(descriptor.name) or "?"
        click.echo(
            f"{type_name:<{name_w}}  "
            f"{descriptor.name:<{algo_w}}  "
            f"{instance.digest_length():>6}  "
            f"{block:>5}  "
            f"{source}"
        )

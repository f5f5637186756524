"""
Click-based CLI for digestlib.

Usage:
    from digestlib.cli import cli
    cli()
"""

from __future__ import annotations

from pathlib import Path

import click

from .. import __version__
from ..core.bootstrap import bootstrap
from ..core.exceptions import ConfigFileError


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="digestlib")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Config file (default: .digestlib/config.toml found from cwd)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """digestlib - message digests from the command line

    \b
    Examples:
        digestlib algorithms             List supported algorithms
        digestlib digest sha256 FILE     Hex digest of a file
        digestlib digest md5 -s abc      Hex digest of a string
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    try:
        ctx.obj = bootstrap(config_path=config_path)
    except ConfigFileError as e:
        raise click.BadParameter(str(e), param_hint="'--config'") from e


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = ["cli"]

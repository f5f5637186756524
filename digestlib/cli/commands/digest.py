"""
Native Click implementation of the digest command.

Usage: digestlib digest ALGORITHM [PATH]... [--string TEXT] [--format FORMAT]
"""

from __future__ import annotations

import click

from ... import algorithm_types
from ...core.exceptions import AlgorithmUnavailable
from ...digests import DigestBase
from ...engines.providers import canonical_name

FORMATS = ("hex", "bubblebabble")


def _resolve_type(algorithm: str) -> type[DigestBase]:
    """Find the digest type for a type name or algorithm name."""
    types = algorithm_types()
    for type_name, cls in types.items():
        if type_name.lower() == algorithm.lower():
            return cls
    wanted = canonical_name(algorithm)
    for cls in types.values():
        if cls().algorithm == wanted:
            return cls
    raise click.BadParameter(
        f"unsupported algorithm {algorithm!r} (available: {', '.join(types)})",
        param_hint="ALGORITHM",
    )


def _render(instance: DigestBase, fmt: str) -> str:
    if fmt == "bubblebabble":
        return instance.bubblebabble()
    return instance.hexdigest()


@click.command("digest")
@click.argument("algorithm")
@click.argument("paths", nargs=-1, type=click.Path(allow_dash=True, dir_okay=False))
@click.option("--string", "-s", "text", help="Digest this string instead of files")
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(FORMATS),
    default="hex",
    show_default=True,
    help="Output encoding",
)
def digest(algorithm: str, paths: tuple[str, ...], text: str | None, fmt: str) -> None:
    """Print the digest of files, stdin or a string.

    \b
    Examples:

        digestlib digest sha256 data.csv
        digestlib digest md5 -s abc
        cat data.csv | digestlib digest sha1
        digestlib digest sha1 -f bubblebabble data.csv
    """
    try:
        cls = _resolve_type(algorithm)
    except AlgorithmUnavailable as e:
        raise click.ClickException(str(e)) from e

    if text is not None:
        if paths:
            raise click.UsageError("--string cannot be combined with paths")
        click.echo(_render(cls().update(text), fmt))
        return

    if not paths:
        paths = ("-",)

    for path in paths:
        instance = cls()
        if path == "-":
            stream = click.get_binary_stream("stdin")
            for chunk in iter(lambda: stream.read(1024 * 1024), b""):
                instance.update(chunk)
        else:
            try:
                instance.file(path)
            except OSError as e:
                raise click.FileError(path, hint=e.strerror or str(e)) from e
        click.echo(f"{_render(instance, fmt)}  {path}")


__all__ = ["digest"]

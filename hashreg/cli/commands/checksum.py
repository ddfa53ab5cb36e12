"""
Native Click implementation of the sum command.

Usage: hashreg sum -a <name> [FILE...]
"""

from __future__ import annotations

import click

from ..context import HashregContext
from ..decorators import HASH_NAME, handle_registry_errors

CHUNK_SIZE = 64 * 1024


@click.command("sum")
@click.option(
    "-a",
    "--algorithm",
    "identity",
    type=HASH_NAME,
    default="SHA-256",
    show_default=True,
    help="Hash function name (e.g. SHA-256, sha3_512, BLAKE2b-256)",
)
@click.argument("files", nargs=-1, type=click.File("rb"))
@click.pass_obj
@handle_registry_errors
def checksum(ctx: HashregContext, identity, files) -> None:
    """Print the digest of each FILE ('-' or nothing reads stdin)."""
    registry = ctx.registry

    if not files:
        files = (click.open_file("-", "rb"),)

    for f in files:
        accumulator = registry.new(identity)
        while chunk := f.read(CHUNK_SIZE):
            accumulator.update(chunk)
        name = getattr(f, "name", "-")
        if name == "<stdin>":
            name = "-"
        click.echo(f"{accumulator.hexdigest()}  {name}")

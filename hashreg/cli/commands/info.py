"""
Native Click implementation of the info command.

Usage: hashreg info <name>
"""

from __future__ import annotations

import click

from ..context import HashregContext
from ..decorators import HASH_NAME, handle_registry_errors


@click.command("info")
@click.argument("identity", metavar="NAME", type=HASH_NAME)
@click.pass_obj
@handle_registry_errors
def info(ctx: HashregContext, identity) -> None:
    """Show identity, digest size and availability of one hash function."""
    registry = ctx.registry

    click.echo(f"Name:      {registry.display_name(identity)}")
    click.echo(f"Identity:  {int(identity)}")
    click.echo(f"Size:      {registry.digest_size(identity)} bytes")
    click.echo(f"Available: {'yes' if registry.available(identity) else 'no'}")

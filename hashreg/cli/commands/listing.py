"""
Native Click implementation of the list command.

Usage: hashreg list [--available-only]
"""

from __future__ import annotations

import click

from ...core.identity import Hash
from ..context import HashregContext


@click.command("list")
@click.option("--available-only", is_flag=True, help="Only show hash functions with an implementation")
@click.pass_obj
def listing(ctx: HashregContext, available_only: bool) -> None:
    """Show every known hash function with its digest size."""
    registry = ctx.registry

    click.echo(f"{'ID':>3}  {'NAME':<13}{'SIZE':>5}  AVAILABLE")
    for h in Hash:
        available = registry.available(h)
        if available_only and not available:
            continue
        mark = "yes" if available else "no"
        click.echo(f"{int(h):>3}  {h.display_name:<13}{registry.digest_size(h):>5}  {mark}")

"""
Click-based CLI for hashreg.

Usage:
    from hashreg.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from .context import HashregContext

# Version is loaded from package metadata
try:
    from importlib.metadata import version

    __version__ = version("hashreg")
except Exception:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="hashreg")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: .hashreg/config.toml or [tool.hashreg] in pyproject.toml)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """hashreg - cryptographic hash function registry

    \b
    Commands:
        hashreg list             Show every known hash function
        hashreg info <name>      Show one hash function
        hashreg sum -a <name> F  Hash files with the given function
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    else:
        ctx.obj = HashregContext(config_path=config_path)


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "HashregContext",
    "__version__",
    "cli",
    "register_commands",
]

"""
Click decorators for hashreg CLI commands.

- handle_registry_errors: Turns hashreg exceptions into clean CLI errors
- HASH_NAME: Parameter type resolving hash names to identities
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..core.exceptions import HashregException
from ..core.identity import Hash

F = TypeVar("F", bound=Callable[..., Any])


def handle_registry_errors(f: F) -> F:
    """Decorator that reports HashregException as a ClickException.

    Usage:
        @click.command()
        @click.pass_obj
        @handle_registry_errors
        def info(ctx: HashregContext, name: str):
            ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except HashregException as e:
            err = click.ClickException(str(e))
            err.exit_code = e.exit_code
            raise err from e

    return wrapper  # type: ignore[return-value]


class HashNameType(click.ParamType):
    """Click parameter type that resolves a hash name to a Hash identity."""

    name = "hash"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, Hash):
            return value
        try:
            return Hash.from_name(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


HASH_NAME = HashNameType()

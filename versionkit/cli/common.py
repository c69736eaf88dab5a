"""Helpers shared by the CLI commands."""

from typing import Optional

import click

from versionkit.exceptions import VersioningError
from versionkit.registry import SchemeRegistry
from versionkit.schemes import VersionScheme


def fail(ctx: click.Context, message: str):
    """Report ``message`` on stderr and exit with status 1."""
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)


def get_registry(ctx: click.Context) -> SchemeRegistry:
    return ctx.obj["registry"]


def resolve_scheme(
    ctx: click.Context, scheme_name: Optional[str], version_string: Optional[str] = None
) -> VersionScheme:
    """Scheme named on the command line, or the one detected for ``version_string``."""
    registry = get_registry(ctx)
    if scheme_name:
        try:
            return registry.get(scheme_name)
        except VersioningError as e:
            fail(ctx, str(e))

    scheme = registry.detect_from(version_string, ctx.obj.get("priority"))
    if scheme is None:
        fail(ctx, f"No registered scheme accepts '{version_string}'")
    return scheme

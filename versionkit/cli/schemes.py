"""CLI command listing registered schemes."""

import click

from .common import get_registry


@click.command("schemes")
@click.pass_context
def schemes(ctx):
    """List registered schemes."""
    registry = get_registry(ctx)
    for name in registry.registered():
        scheme = registry.get(name)
        click.echo(f"{name:<12} {scheme.description or ''}".rstrip())

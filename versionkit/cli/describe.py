"""CLI commands looking at a single version string."""

import click

from versionkit.exceptions import VersioningError

from .common import fail, get_registry, resolve_scheme


@click.command("parse")
@click.argument("version_string", metavar="VERSION")
@click.option("--scheme", "-s", "scheme_name", help="Scheme name (detected if omitted).")
@click.pass_context
def parse(ctx, version_string: str, scheme_name: str):
    """Parse VERSION and print its components."""
    scheme = resolve_scheme(ctx, scheme_name, version_string)
    try:
        version = scheme.parse(version_string)
    except VersioningError as e:
        fail(ctx, str(e))

    click.echo(f"scheme: {scheme.name}")
    for component in version.components:
        if component.value is None:
            continue
        click.echo(f"{component.name}: {component}")


@click.command("detect")
@click.argument("version_string", metavar="VERSION")
@click.pass_context
def detect(ctx, version_string: str):
    """Print the name of the first registered scheme accepting VERSION."""
    scheme = get_registry(ctx).detect_from(version_string, ctx.obj.get("priority"))
    if scheme is None:
        fail(ctx, f"No registered scheme accepts '{version_string}'")
    click.echo(scheme.name)


@click.command("check")
@click.argument("version_string", metavar="VERSION")
@click.option("--scheme", "-s", "scheme_name", required=True, help="Scheme name.")
@click.pass_context
def check(ctx, version_string: str, scheme_name: str):
    """Exit 0 when VERSION is valid for the scheme, 1 otherwise."""
    scheme = resolve_scheme(ctx, scheme_name)
    if scheme.is_valid(version_string):
        click.echo(f"'{version_string}' is a valid {scheme.name} version")
        return
    click.echo(f"'{version_string}' is not a valid {scheme.name} version")
    ctx.exit(1)

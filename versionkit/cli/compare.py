"""CLI commands ordering versions."""

import click

from versionkit.exceptions import VersioningError
from versionkit.range import RangeKind, VersionRange

from .common import fail, resolve_scheme


@click.command("compare")
@click.argument("left", metavar="A")
@click.argument("right", metavar="B")
@click.option("--scheme", "-s", "scheme_name", help="Scheme name (detected from A if omitted).")
@click.pass_context
def compare(ctx, left: str, right: str, scheme_name: str):
    """Print -1, 0 or 1 as A sorts before, equal to or after B."""
    scheme = resolve_scheme(ctx, scheme_name, left)
    try:
        result = scheme.compare(left, right)
    except VersioningError as e:
        fail(ctx, str(e))
    click.echo(str(result))


@click.command("range")
@click.argument("version_string", metavar="VERSION")
@click.option(
    "--kind",
    "-k",
    required=True,
    type=click.Choice([kind.value for kind in RangeKind]),
    help="Range predicate.",
)
@click.option("--version", "boundary", help="Boundary for equals/before/after.")
@click.option("--from", "from_", help="Lower bound for between (inclusive).")
@click.option("--to", "to", help="Upper bound for between (inclusive).")
@click.option("--scheme", "-s", "scheme_name", help="Scheme name (detected if omitted).")
@click.pass_context
def range_(ctx, version_string: str, kind: str, boundary, from_, to, scheme_name: str):
    """Exit 0 when VERSION falls inside the range, 1 otherwise."""
    scheme = resolve_scheme(ctx, scheme_name, version_string)
    try:
        version_range = VersionRange(kind, scheme, version=boundary, from_=from_, to=to)
    except ValueError as e:
        fail(ctx, str(e))

    try:
        matched = version_range.matches(version_string)
    except VersioningError as e:
        fail(ctx, str(e))

    click.echo(f"{version_string} {'matches' if matched else 'does not match'} {version_range}")
    if not matched:
        ctx.exit(1)

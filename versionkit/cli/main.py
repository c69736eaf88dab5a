"""versionkit CLI"""

import click

from versionkit import __version__
from versionkit.config import ConfigAccessor
from versionkit.exceptions import VersioningError
from versionkit.loader import SchemeLoader
from versionkit.registry import default_registry

from .compare import compare, range_
from .debug import add_debug_option
from .describe import check, detect, parse
from .schemes import schemes
from .utils.logging import logger


@click.group()
@click.version_option(__version__, prog_name="versionkit")
@click.option(
    "--schemes-dir",
    "schemes_dirs",
    multiple=True,
    type=click.Path(exists=True, file_okay=False),
    help="Directory of YAML scheme files to register (repeatable).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Settings file (defaults to the user config directory).",
    envvar="VERSIONKIT_CONFIG",
)
@click.pass_context
def cli(ctx, schemes_dirs, config_path):
    """
    Parse, compare and classify version strings.
    """
    ctx.ensure_object(dict)

    config = ConfigAccessor(config_path)
    registry = default_registry()
    loader = SchemeLoader()

    directories = [*config.scheme_paths(), *schemes_dirs]
    try:
        for directory in directories:
            for scheme in loader.load_directory(directory):
                registry.register(scheme.name, scheme)
    except VersioningError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    logger.debug(f"Registered schemes: {', '.join(registry.registered())}")
    ctx.obj["registry"] = registry
    ctx.obj["priority"] = config.detect_priority()


cli.add_command(add_debug_option(parse))
cli.add_command(add_debug_option(detect))
cli.add_command(add_debug_option(check))
cli.add_command(add_debug_option(compare))
cli.add_command(add_debug_option(range_))
cli.add_command(add_debug_option(schemes))

add_debug_option(cli)

if __name__ == "__main__":
    cli(obj={})

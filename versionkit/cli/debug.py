import click

from .utils.logging import configure_logging


def add_debug_option(cmd: click.Command) -> click.Command:
    """Give a command or group its own ``--debug/--no-debug`` flag."""
    if not any(param.name == "debug" for param in cmd.params):
        cmd.params.insert(
            0,
            click.Option(
                ["--debug/--no-debug"],
                is_eager=True,
                expose_value=False,
                callback=lambda ctx, param, value: _set_debug(ctx, value),
                help="Enable debug mode",
            ),
        )
    return cmd


def _set_debug(ctx: click.Context, value: bool) -> bool:
    """
    Record the flag on the root context and reconfigure logging.

    Any level may switch debug on; only the top-level group switches it off,
    so ``versionkit --debug detect ...`` stays in debug mode.
    """
    root_ctx = ctx.find_root()
    root_ctx.ensure_object(dict)
    root_ctx.obj.setdefault("debug", False)

    if value or ctx is root_ctx:
        root_ctx.obj["debug"] = value

    configure_logging(root_ctx.obj["debug"])
    return root_ctx.obj["debug"]

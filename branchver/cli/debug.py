import click

from .utils.logging import configure_logging


def _set_debug(ctx, param, value: bool):
    """Callback for the debug flag; once enabled, a nested command cannot turn it off."""
    root_ctx = ctx.find_root()
    root_ctx.ensure_object(dict)
    debug = bool(value) or root_ctx.obj.get("DEBUG", False)
    root_ctx.obj["DEBUG"] = debug
    configure_logging(debug)
    return debug


def add_debug_option(cmd):
    """Add the ``--debug/--no-debug`` option to a click command or group."""
    if not any(param.name == "debug" for param in cmd.params):
        cmd.params.insert(
            0,
            click.Option(
                ["--debug/--no-debug"],
                is_eager=True,
                expose_value=False,
                callback=_set_debug,
                help="Enable debug mode",
            ),
        )
    return cmd

"""branchver CLI"""

import click

from branchver import __version__
from branchver.cli.versions import apply, show

from .debug import add_debug_option


@click.group()
@click.version_option(__version__, prog_name="branchver")
@click.pass_context
def cli(ctx):
    """
    Branch-based versioning for multi-module builds.
    """
    ctx.ensure_object(dict)


cli.add_command(add_debug_option(show))
cli.add_command(add_debug_option(apply))

add_debug_option(cli)

if __name__ == "__main__":
    cli(obj={})

"""CLI commands computing and applying branch versions."""

import configparser
from pathlib import Path

import click

from branchver.cli.error_formatting import format_versioning_error
from branchver.cli.utils.args import parse_properties
from branchver.cli.utils.logging import logger
from branchver.config import load_config
from branchver.exceptions import VersioningError
from branchver.reactor import load_session
from branchver.versioning import BranchVersioningExtension


def session_options(func):
    """Options shared by the commands that load a build session."""
    func = click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Path to an alternate branchver.cfg.",
    )(func)
    func = click.option(
        "-D",
        "--define",
        "properties",
        multiple=True,
        callback=parse_properties,
        help="User property key=value, e.g. -D disableBranchVersioning=true.",
    )(func)
    func = click.option(
        "--root",
        "-r",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        default=Path("."),
        show_default=True,
        help="Root directory of the build.",
        envvar="BRANCHVER_ROOT",
    )(func)
    return func


def _build(root: Path, properties, config_path):
    session = load_session(root, properties)
    config = load_config(session.execution_root, properties, config_path)
    return session, BranchVersioningExtension(config=config)


@click.command("show")
@session_options
@click.pass_context
def show(ctx, root: Path, properties, config_path):
    """Show the branch version of every module without changing anything."""
    try:
        session, extension = _build(root, properties, config_path)
        if extension.is_disabled(session):
            logger.info("Branch versioning disabled")
            return
        version_map = extension.compute_versions(session)
    except (VersioningError, ValueError, configparser.Error) as e:
        logger.error(f"Error: {format_versioning_error(e)}")
        ctx.exit(1)

    for module in session.modules:
        click.echo(f"{module.key}  {module.version} -> {version_map[module.gav]}")


@click.command("apply")
@session_options
@click.option(
    "--keep/--no-keep",
    default=False,
    help="Keep the rewritten descriptors after exit.",
)
@click.pass_context
def apply(ctx, root: Path, properties, config_path, keep: bool):
    """Apply branch versions and write the rewritten module descriptors."""
    try:
        session, extension = _build(root, properties, config_path)
        extension.cleanup = not keep
        version_map = extension.after_projects_read(session)
    except (VersioningError, ValueError, configparser.Error) as e:
        logger.error(f"Error: {format_versioning_error(e)}")
        ctx.exit(1)

    if version_map is None:
        return

    for module in session.modules:
        click.echo(f"{module.key}  {module.version}  {module.descriptor_file}")
    if session.active_profiles:
        click.echo(f"active profiles: {', '.join(session.active_profiles)}")

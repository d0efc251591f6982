from __future__ import annotations

import os
from typing import Annotated

import typer

from assoc_files.common import ApplicationIdentity, DirectoryClass, create_logger, setup_cli_logging
from assoc_files.constants import APP_NAME
from assoc_files.resolver import resolve
from assoc_files.settings import settings

from .commands import install as install_commands
from .commands import where as where_commands

logger = create_logger("cli")

app = typer.Typer(help="Install files into per-user config and data directories.")
app.command("install")(install_commands.install)
app.command("where")(where_commands.where)


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _setup_logging() -> None:
    logging_config = settings.logging
    if not logging_config.enabled:
        return

    own_identity = ApplicationIdentity(name=APP_NAME, version=settings.app.version)
    log_dir = resolve(DirectoryClass.DATA, own_identity).unwrap_or(None)
    setup_cli_logging(app_info=settings.app, config=logging_config, default_log_dir=log_dir)
    logger.debug("CLI logging initialized", config=logging_config.model_dump())


def main() -> None:
    """Entrypoint for the assoc-files CLI."""
    _setup_logging()
    app()

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from result import Ok, Result, is_err

from assoc_files.common import ApplicationIdentity, DirectoryClass
from assoc_files.plan import PlanError, load_pyproject_identity
from assoc_files.resolver import resolve

from .errors import echo_error

NameOption = Annotated[str | None, typer.Option("--name", help="Application name.")]
VersionOption = Annotated[str | None, typer.Option("--version", help="Application version.")]
PyprojectOption = Annotated[
    Path,
    typer.Option("--pyproject", help="Read name and version from this pyproject.toml."),
]


def where(
    directory_class: Annotated[DirectoryClass, typer.Argument(case_sensitive=False, help="config or data")],
    name: NameOption = None,
    version: VersionOption = None,
    pyproject: PyprojectOption = Path("pyproject.toml"),
) -> None:
    """Print the installation directory for an application."""
    identity_result = _identity(name, version, pyproject)
    if is_err(identity_result):
        echo_error(identity_result.unwrap_err())
        raise typer.Exit(code=1)

    result = resolve(directory_class, identity_result.unwrap())
    if is_err(result):
        echo_error(result.unwrap_err())
        raise typer.Exit(code=1)

    typer.echo(str(result.unwrap()))


def _identity(name: str | None, version: str | None, pyproject: Path) -> Result[ApplicationIdentity, PlanError]:
    if name is None and version is None:
        return load_pyproject_identity(pyproject)
    if name is None or version is None:
        typer.secho("--name and --version must be given together", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=2)
    try:
        return Ok(ApplicationIdentity(name=name, version=version))
    except ValueError as e:
        typer.secho(f"Invalid application identity: {e}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=2) from e

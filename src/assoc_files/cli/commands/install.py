from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from result import is_err

from assoc_files.plan import run_plan_file
from assoc_files.settings import settings

from .errors import echo_error

PlanOption = Annotated[
    Path | None,
    typer.Option("--plan", "-p", help="Install plan file (defaults to ./assoc-files.yaml)."),
]


def install(plan: PlanOption = None) -> None:
    """Install the files listed in an install plan."""
    plan_path = plan or Path(settings.plan_filename)
    result = run_plan_file(plan_path)
    if is_err(result):
        echo_error(result.unwrap_err())
        raise typer.Exit(code=1)

    report = result.unwrap()
    if not report.reports:
        typer.echo(f"Nothing to install for {report.identity}")
        return

    for directory_class, install_report in report.reports.items():
        typer.echo(
            f"{directory_class.value}: installed {install_report.files_installed} file(s) "
            f"into {install_report.destination}"
        )

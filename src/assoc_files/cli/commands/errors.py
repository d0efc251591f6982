from __future__ import annotations

import typer
from pydantic import BaseModel


def echo_error(error: BaseModel) -> None:
    message = getattr(error, "message", str(error))
    expected_path = getattr(error, "expected_path", None)
    error_path = getattr(error, "path", None)
    line = getattr(error, "line", None)
    field = getattr(error, "field", None)

    if field:
        message = f"{field}: {message}"
    if expected_path is not None:
        message = f"{message} (expected at {expected_path})"
    elif error_path is not None:
        location = f"{error_path}:{line}" if line is not None else str(error_path)
        message = f"{message} ({location})"

    typer.secho(message, err=True, fg=typer.colors.RED)

"""Install plan loading and validation helpers."""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml
from packaging.version import InvalidVersion, Version
from pydantic import ValidationError
from result import Err, Ok, Result

from assoc_files.common import ApplicationIdentity

from .models import (
    InstallPlan,
    PlanError,
    PlanIOError,
    PlanNotFoundError,
    PlanValidationError,
    PlanYamlError,
)


def load_plan(path: Path) -> Result[InstallPlan, PlanError]:
    """Load and validate an install plan from a YAML file."""
    if not path.exists() or not path.is_file():
        return Err(
            PlanNotFoundError(
                expected_path=path,
                message="Install plan not found.",
            ),
        )

    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        return Err(PlanIOError(path=path, message=str(exc)))

    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = getattr(mark, "line", None)
        column = getattr(mark, "column", None)
        return Err(
            PlanYamlError(
                path=path,
                line=(line + 1) if line is not None else None,
                column=(column + 1) if column is not None else None,
                message=str(exc),
            ),
        )

    if data is None:
        data = {}

    if not isinstance(data, dict):
        return Err(
            PlanValidationError(
                path=path,
                field=None,
                message="Install plan root must be a mapping of keys to values.",
            ),
        )

    return _validate(path, InstallPlan, data)


def load_pyproject_identity(path: Path) -> Result[ApplicationIdentity, PlanError]:
    """Read the application identity from a pyproject.toml ``[project]`` table.

    The version is normalized the way build backends write it into the
    distribution metadata, so it matches ``ApplicationIdentity.from_distribution``.
    """
    if not path.is_file():
        return Err(
            PlanNotFoundError(
                expected_path=path,
                message="pyproject.toml not found; set 'name' and 'version' in the plan instead.",
            ),
        )

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except OSError as exc:
        return Err(PlanIOError(path=path, message=str(exc)))
    except tomllib.TOMLDecodeError as exc:
        return Err(PlanValidationError(path=path, field=None, message=f"Invalid TOML: {exc}"))

    project = data.get("project")
    if not isinstance(project, dict):
        return Err(PlanValidationError(path=path, field="project", message="Missing [project] table."))

    # distribution metadata always holds the PEP 440 normalized version
    version = project.get("version")
    if isinstance(version, str):
        try:
            version = str(Version(version))
        except InvalidVersion as exc:
            return Err(PlanValidationError(path=path, field="version", message=str(exc)))

    return _validate(path, ApplicationIdentity, {"name": project.get("name"), "version": version})


def _validate[T: (InstallPlan, ApplicationIdentity)](
    path: Path,
    model_cls: type[T],
    data: dict,
) -> Result[T, PlanError]:
    try:
        model = model_cls.model_validate(data)
    except ValidationError as exc:
        error_details = exc.errors()
        field = None
        message = str(exc)
        if error_details:
            first = error_details[0]
            loc = first.get("loc") or ()
            field = ".".join(str(part) for part in loc) or None
            message = first.get("msg", message)
        return Err(
            PlanValidationError(
                path=path,
                field=field,
                message=message,
            ),
        )

    return Ok(model)

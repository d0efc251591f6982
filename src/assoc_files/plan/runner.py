"""Run an install plan at build time."""

from __future__ import annotations

from pathlib import Path

from result import Ok, Result, is_err

from assoc_files.common import ApplicationIdentity, create_logger
from assoc_files.installer import InstallError, install_user_dir
from assoc_files.resolver import BaseDirectoryProvider, PlatformDirectoryUnavailable, platform_base_directory

from .loader import load_plan, load_pyproject_identity
from .models import InstallPlan, PlanError, PlanReport

logger = create_logger("plan")

type PlanResult = Result[PlanReport, PlanError | InstallError | PlatformDirectoryUnavailable]


def run_plan(
    plan: InstallPlan,
    *,
    base_dir: Path,
    provider: BaseDirectoryProvider = platform_base_directory,
) -> PlanResult:
    """Install every group of a plan, config first, stopping at the first failure.

    Relative source paths are taken relative to ``base_dir``. When the plan has
    no identity, it is read from ``base_dir / "pyproject.toml"``.
    """
    identity_result = _plan_identity(plan, base_dir)
    if is_err(identity_result):
        return identity_result

    identity = identity_result.unwrap()
    report = PlanReport(identity=identity)
    logger.info("Running install plan", identity=str(identity), base_dir=str(base_dir))

    for directory_class, sources in plan.groups():
        if not sources:
            logger.debug("Skipping empty group", directory_class=directory_class.value)
            continue

        result = install_user_dir(
            directory_class,
            [base_dir / source for source in sources],
            identity,
            provider=provider,
        )
        if is_err(result):
            return result
        report.reports[directory_class] = result.unwrap()

    logger.success("Install plan complete", identity=str(identity), files=report.files_installed)
    return Ok(report)


def run_plan_file(
    path: Path,
    *,
    provider: BaseDirectoryProvider = platform_base_directory,
) -> PlanResult:
    """Load a plan file and run it relative to the file's directory."""
    base_dir = path.parent.resolve()
    return load_plan(path).and_then(lambda plan: run_plan(plan, base_dir=base_dir, provider=provider))


def _plan_identity(plan: InstallPlan, base_dir: Path) -> Result[ApplicationIdentity, PlanError]:
    if (identity := plan.identity()) is not None:
        return Ok(identity)
    return load_pyproject_identity(base_dir / "pyproject.toml")

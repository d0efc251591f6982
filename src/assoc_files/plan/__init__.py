"""Build-time install plans.

A plan lists the files to install per directory class, e.g.::

    # assoc-files.yaml
    config:
      - data/config.toml
    data:
      - templates
"""

from __future__ import annotations

from .loader import load_plan, load_pyproject_identity
from .models import (
    InstallPlan,
    PlanError,
    PlanIOError,
    PlanNotFoundError,
    PlanReport,
    PlanValidationError,
    PlanYamlError,
)
from .runner import PlanResult, run_plan, run_plan_file

__all__ = [
    "InstallPlan",
    "PlanError",
    "PlanIOError",
    "PlanNotFoundError",
    "PlanReport",
    "PlanResult",
    "PlanValidationError",
    "PlanYamlError",
    "load_plan",
    "load_pyproject_identity",
    "run_plan",
    "run_plan_file",
]

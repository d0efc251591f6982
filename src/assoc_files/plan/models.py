"""Pydantic models for install plans and their errors."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator

from assoc_files.common import ApplicationIdentity, DirectoryClass, PathSegment
from assoc_files.installer import InstallReport


class PlanNotFoundError(BaseModel):
    """Plan file not found at expected location."""

    model_config = ConfigDict(extra="forbid")

    expected_path: Path
    message: str


class PlanYamlError(BaseModel):
    """YAML parsing error in plan file."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    line: int | None = None
    column: int | None = None
    message: str


class PlanValidationError(BaseModel):
    """Schema validation error in plan."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    field: str | None = None
    message: str


class PlanIOError(BaseModel):
    """File I/O error reading a plan or its pyproject.toml."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


type PlanError = PlanNotFoundError | PlanYamlError | PlanValidationError | PlanIOError


class InstallPlan(BaseModel):
    """Files to install at build time, grouped by directory class (assoc-files.yaml)."""

    model_config = ConfigDict(extra="forbid")

    name: PathSegment | None = None
    version: PathSegment | None = None
    config: list[Path] = Field(default_factory=list)
    data: list[Path] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_identity_pair(self) -> InstallPlan:
        if (self.name is None) != (self.version is None):
            raise ValueError("'name' and 'version' must be given together or both omitted")
        return self

    def identity(self) -> ApplicationIdentity | None:
        if self.name is None or self.version is None:
            return None
        return ApplicationIdentity(name=self.name, version=self.version)

    def groups(self) -> list[tuple[DirectoryClass, list[Path]]]:
        return [(DirectoryClass.CONFIG, self.config), (DirectoryClass.DATA, self.data)]


class PlanReport(BaseModel):
    """Installation reports for each non-empty group of a plan."""

    model_config = ConfigDict(extra="forbid")

    identity: ApplicationIdentity
    reports: dict[DirectoryClass, InstallReport] = Field(default_factory=dict)

    @property
    def files_installed(self) -> int:
        return sum(report.files_installed for report in self.reports.values())

"""Common models used across assoc_files."""

from __future__ import annotations

from enum import Enum
from importlib import metadata
from typing import Literal

from pydantic import BaseModel, ConfigDict

from assoc_files.constants import APP_NAME

from .fields import PathSegment


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = "0.1.0"
    environment: Literal["test", "dev", "prod"] = "dev"


class DirectoryClass(str, Enum):
    """Which per-user OS-convention root an installation targets."""

    CONFIG = "config"
    DATA = "data"


class ApplicationIdentity(BaseModel):
    """Name and version that namespace an installation directory.

    Both values are used verbatim as path segments, so the identity computed at
    build time must equal the one computed at run time for the paths to match.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: PathSegment
    version: PathSegment

    @classmethod
    def from_distribution(cls, dist_name: str) -> ApplicationIdentity:
        """Read the name and version of an installed distribution.

        Raises:
            importlib.metadata.PackageNotFoundError: if the distribution is not installed
        """
        dist = metadata.distribution(dist_name)
        return cls(name=dist.metadata["Name"], version=dist.version)

    def __str__(self) -> str:
        return f"{self.name} {self.version}"

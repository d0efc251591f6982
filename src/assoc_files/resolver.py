"""Installation directory resolution.

The same function runs at build time (to find where files go) and at run time
(to find them again). Nothing is persisted between the two; agreement comes
from both sides computing ``<OS root for class>/<name>/<version>`` from the
same identity.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import platformdirs
from pydantic import BaseModel, ConfigDict
from result import Err, Ok, Result

from assoc_files.common import ApplicationIdentity, DirectoryClass, create_logger

logger = create_logger("resolver")

type BaseDirectoryProvider = Callable[[DirectoryClass], Path]


class PlatformDirectoryUnavailable(BaseModel):
    """The OS could not report a convention root for a directory class."""

    model_config = ConfigDict(extra="forbid")

    directory_class: DirectoryClass
    message: str


def platform_base_directory(directory_class: DirectoryClass) -> Path:
    """Return the per-user convention root for the current platform."""
    match directory_class:
        case DirectoryClass.CONFIG:
            return platformdirs.user_config_path(appname=None, roaming=False)
        case DirectoryClass.DATA:
            return platformdirs.user_data_path(appname=None, roaming=False)


def resolve(
    directory_class: DirectoryClass,
    identity: ApplicationIdentity,
    *,
    provider: BaseDirectoryProvider = platform_base_directory,
) -> Result[Path, PlatformDirectoryUnavailable]:
    """Compute the installation directory for an identity.

    Does not touch the filesystem and does not create the directory.
    """
    try:
        base = provider(directory_class)
    except (OSError, KeyError, RuntimeError) as e:
        return Err(
            PlatformDirectoryUnavailable(
                directory_class=directory_class,
                message=f"Could not determine user {directory_class.value} directory: {e}",
            )
        )

    if not base.is_absolute():
        return Err(
            PlatformDirectoryUnavailable(
                directory_class=directory_class,
                message=f"User {directory_class.value} directory is not absolute: {base}",
            )
        )

    target = base / identity.name / identity.version
    logger.trace("Resolved installation directory", directory_class=directory_class.value, path=str(target))
    return Ok(target)


def user_config_dir(
    identity: ApplicationIdentity,
    *,
    provider: BaseDirectoryProvider = platform_base_directory,
) -> Result[Path, PlatformDirectoryUnavailable]:
    return resolve(DirectoryClass.CONFIG, identity, provider=provider)


def user_data_dir(
    identity: ApplicationIdentity,
    *,
    provider: BaseDirectoryProvider = platform_base_directory,
) -> Result[Path, PlatformDirectoryUnavailable]:
    return resolve(DirectoryClass.DATA, identity, provider=provider)

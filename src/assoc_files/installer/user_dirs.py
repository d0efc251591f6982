"""Install into the per-user config or data directory of an application."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from result import Result

from assoc_files.common import ApplicationIdentity, DirectoryClass
from assoc_files.resolver import BaseDirectoryProvider, PlatformDirectoryUnavailable, platform_base_directory, resolve

from .files import install_files
from .models import InstallError, InstallReport

type UserInstallResult = Result[InstallReport, InstallError | PlatformDirectoryUnavailable]


def install_user_dir(
    directory_class: DirectoryClass,
    sources: Iterable[Path | str],
    identity: ApplicationIdentity,
    *,
    provider: BaseDirectoryProvider = platform_base_directory,
) -> UserInstallResult:
    return resolve(directory_class, identity, provider=provider).and_then(
        lambda destination: install_files(sources, destination)
    )


def install_user_config(
    sources: Iterable[Path | str],
    identity: ApplicationIdentity,
    *,
    provider: BaseDirectoryProvider = platform_base_directory,
) -> UserInstallResult:
    """Install into ``<user config dir>/<name>/<version>``."""
    return install_user_dir(DirectoryClass.CONFIG, sources, identity, provider=provider)


def install_user_data(
    sources: Iterable[Path | str],
    identity: ApplicationIdentity,
    *,
    provider: BaseDirectoryProvider = platform_base_directory,
) -> UserInstallResult:
    """Install into ``<user data dir>/<name>/<version>``."""
    return install_user_dir(DirectoryClass.DATA, sources, identity, provider=provider)

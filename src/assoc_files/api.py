"""Public API class bundling build-time installation and run-time lookup."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from result import Result

from .common import ApplicationIdentity, DirectoryClass
from .installer import UserInstallResult, install_user_dir
from .resolver import BaseDirectoryProvider, PlatformDirectoryUnavailable, platform_base_directory, resolve


class AssociatedFiles:
    """Files associated with one application identity.

    Build scripts call :meth:`install_config` / :meth:`install_data`; the
    application later calls :meth:`config_dir` / :meth:`data_dir` (or the
    ``*_file`` helpers) with an equal identity to find the same files.
    """

    def __init__(
        self,
        identity: ApplicationIdentity,
        *,
        provider: BaseDirectoryProvider = platform_base_directory,
    ) -> None:
        self._identity = identity
        self._provider = provider

    @classmethod
    def for_distribution(cls, dist_name: str) -> AssociatedFiles:
        return cls(ApplicationIdentity.from_distribution(dist_name))

    @property
    def identity(self) -> ApplicationIdentity:
        return self._identity

    def directory(self, directory_class: DirectoryClass) -> Result[Path, PlatformDirectoryUnavailable]:
        return resolve(directory_class, self._identity, provider=self._provider)

    def config_dir(self) -> Result[Path, PlatformDirectoryUnavailable]:
        return self.directory(DirectoryClass.CONFIG)

    def data_dir(self) -> Result[Path, PlatformDirectoryUnavailable]:
        return self.directory(DirectoryClass.DATA)

    def config_file(self, *parts: str) -> Result[Path, PlatformDirectoryUnavailable]:
        return self.config_dir().map(lambda base: base.joinpath(*parts))

    def data_file(self, *parts: str) -> Result[Path, PlatformDirectoryUnavailable]:
        return self.data_dir().map(lambda base: base.joinpath(*parts))

    def install_config(self, sources: Iterable[Path | str]) -> UserInstallResult:
        return install_user_dir(DirectoryClass.CONFIG, sources, self._identity, provider=self._provider)

    def install_data(self, sources: Iterable[Path | str]) -> UserInstallResult:
        return install_user_dir(DirectoryClass.DATA, sources, self._identity, provider=self._provider)

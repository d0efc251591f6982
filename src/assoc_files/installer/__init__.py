"""assoc_files installer module."""

from .files import install_files
from .models import (
    CopyFailed,
    DestinationUnwritable,
    InstallError,
    InstallErrorType,
    InstallReport,
    SelfInstallationRejected,
    SourceKind,
    SourceNameCollision,
    SourceNotFound,
    UnsupportedEntryKind,
)
from .user_dirs import UserInstallResult, install_user_config, install_user_data, install_user_dir

__all__ = [
    "CopyFailed",
    "DestinationUnwritable",
    "InstallError",
    "InstallErrorType",
    "InstallReport",
    "SelfInstallationRejected",
    "SourceKind",
    "SourceNameCollision",
    "SourceNotFound",
    "UnsupportedEntryKind",
    "UserInstallResult",
    "install_files",
    "install_user_config",
    "install_user_data",
    "install_user_dir",
]

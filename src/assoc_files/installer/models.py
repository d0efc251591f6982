"""Installer report and error models."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class SourceKind(str, Enum):
    """Filesystem object kinds, as seen through symbolic links."""

    FILE = "file"
    DIRECTORY = "directory"
    FIFO = "fifo"
    SOCKET = "socket"
    CHAR_DEVICE = "char-device"
    BLOCK_DEVICE = "block-device"
    SYMLINK_LOOP = "symlink-loop"
    UNKNOWN = "unknown"


class InstallReport(BaseModel):
    """Outcome of a successful installation."""

    model_config = ConfigDict(extra="forbid")

    destination: Path
    files_installed: int = 0
    directories_created: int = 0
    installed: list[Path] = Field(default_factory=list)


class InstallError(BaseModel):
    """Base installer error."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


class DestinationUnwritable(InstallError):
    """Destination directory could not be created."""

    cause: str


class SourceNotFound(InstallError):
    """Source path does not exist (or is a dangling link)."""

    pass


class UnsupportedEntryKind(InstallError):
    """Source is neither a regular file nor a directory."""

    kind: SourceKind


class SelfInstallationRejected(InstallError):
    """Source would be copied into itself."""

    destination: Path


class SourceNameCollision(InstallError):
    """Two different sources would land on the same name in the destination."""

    other: Path


class CopyFailed(InstallError):
    """I/O error while copying a file or creating a nested directory."""

    cause: str


type InstallErrorType = (
    DestinationUnwritable
    | SourceNotFound
    | UnsupportedEntryKind
    | SelfInstallationRejected
    | SourceNameCollision
    | CopyFailed
)

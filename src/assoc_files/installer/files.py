"""Copy files and directory trees into an installation directory."""

from __future__ import annotations

import errno
import shutil
import stat
from collections.abc import Iterable
from pathlib import Path
from typing import NamedTuple

from result import Err, Ok, Result, is_err

from assoc_files.common import create_logger

from .models import (
    CopyFailed,
    DestinationUnwritable,
    InstallError,
    InstallReport,
    SelfInstallationRejected,
    SourceKind,
    SourceNameCollision,
    SourceNotFound,
    UnsupportedEntryKind,
)

logger = create_logger("installer")


class _Entry(NamedTuple):
    source: Path
    kind: SourceKind
    name: str


def install_files(sources: Iterable[Path | str], destination: Path) -> Result[InstallReport, InstallError]:
    """Install files and directories into ``destination``.

    Files land directly under the destination. Directories are copied
    recursively under a subdirectory named after themselves. Symbolic links are
    followed. Existing files are replaced and nothing else is ever removed.

    All top-level sources are checked before anything is written. Copying
    stops at the first failure and files already copied stay in place.
    """
    source_paths = [Path(source) for source in sources]
    logger.info("Installing files", sources=len(source_paths), destination=str(destination))

    def copy_entries(entries: list[_Entry]) -> Result[InstallReport, InstallError]:
        return _ensure_destination(destination).and_then(lambda _: _copy_entries(entries, destination))

    def log_success(report: InstallReport) -> None:
        logger.success(
            "Files installed",
            destination=str(report.destination),
            files=report.files_installed,
            directories=report.directories_created,
        )

    def log_error(error: InstallError) -> None:
        logger.error("Installation failed", path=str(error.path), error=error.message)

    return (
        _validate_sources(source_paths, destination)
        .and_then(copy_entries)
        .inspect(log_success)
        .inspect_err(log_error)
    )


def _validate_sources(sources: list[Path], destination: Path) -> Result[list[_Entry], InstallError]:
    destination_result = _resolve_destination(destination)
    if is_err(destination_result):
        return destination_result

    destination_real = destination_result.unwrap()
    entries: list[_Entry] = []
    seen: dict[str, Path] = {}

    for source in sources:
        kind_result = _source_kind(source)
        if is_err(kind_result):
            return kind_result

        kind = kind_result.unwrap()
        if kind not in (SourceKind.FILE, SourceKind.DIRECTORY):
            return Err(_unsupported(source, kind))

        real = source.resolve()
        name = source.name if source.name not in ("", "..") else real.name

        if kind is SourceKind.DIRECTORY and _is_same_or_ancestor(real, destination_real):
            return Err(_self_installation(source, destination))
        if destination_real / name == real:
            return Err(_self_installation(source, destination))

        if name in seen:
            if seen[name] == real:
                logger.debug("Skipping duplicate source", source=str(source))
                continue
            return Err(
                SourceNameCollision(
                    path=source,
                    other=seen[name],
                    message=f"Source '{source}' would overwrite '{seen[name]}' as '{name}' in {destination}",
                )
            )

        seen[name] = real
        entries.append(_Entry(source, kind, name))

    return Ok(entries)


def _resolve_destination(destination: Path) -> Result[Path, InstallError]:
    try:
        return Ok(destination.resolve())
    except (OSError, RuntimeError) as e:
        return Err(
            DestinationUnwritable(
                path=destination,
                cause=str(e),
                message=f"Cannot resolve destination directory {destination}: {e}",
            )
        )


def _ensure_destination(destination: Path) -> Result[Path, InstallError]:
    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return Err(
            DestinationUnwritable(
                path=destination,
                cause=str(e),
                message=f"Cannot create destination directory {destination}: {e}",
            )
        )
    return Ok(destination)


def _copy_entries(entries: list[_Entry], destination: Path) -> Result[InstallReport, InstallError]:
    destination_result = _resolve_destination(destination)
    if is_err(destination_result):
        return destination_result

    report = InstallReport(destination=destination)
    destination_real = destination_result.unwrap()

    for entry in entries:
        relative = Path(entry.name)
        if entry.kind is SourceKind.DIRECTORY:
            result = _copy_tree(entry.source, destination, relative, report, destination_real, frozenset())
        else:
            result = _copy_file(entry.source, destination, relative, report)
        if is_err(result):
            return result

    return Ok(report)


def _copy_file(source: Path, destination: Path, relative: Path, report: InstallReport) -> Result[None, InstallError]:
    target = destination / relative
    try:
        # replace rather than open existing files: links may point outside the
        # destination and earlier copies may be read-only
        if target.is_symlink() or target.is_file():
            target.unlink()
        shutil.copyfile(source, target)
        shutil.copymode(source, target)
    except OSError as e:
        return Err(CopyFailed(path=source, cause=str(e), message=f"Failed to copy {source} to {target}: {e}"))

    logger.debug("Copied file", source=str(source), target=str(target))
    report.files_installed += 1
    report.installed.append(relative)
    return Ok(None)


def _copy_tree(
    source: Path,
    destination: Path,
    relative: Path,
    report: InstallReport,
    destination_real: Path,
    ancestors: frozenset[Path],
) -> Result[None, InstallError]:
    real = source.resolve()
    if real in ancestors:
        return Err(_unsupported(source, SourceKind.SYMLINK_LOOP))
    if _is_same_or_ancestor(real, destination_real):
        return Err(_self_installation(source, destination))

    target = destination / relative
    try:
        if target.is_symlink():
            raise NotADirectoryError(errno.ENOTDIR, "Refusing to write through symbolic link", str(target))
        if not target.is_dir():
            target.mkdir()
            report.directories_created += 1
        children = sorted(source.iterdir())
    except OSError as e:
        return Err(CopyFailed(path=source, cause=str(e), message=f"Failed to copy directory {source}: {e}"))

    for child in children:
        kind_result = _source_kind(child)
        if is_err(kind_result):
            return kind_result

        child_relative = relative / child.name
        match kind_result.unwrap():
            case SourceKind.FILE:
                result = _copy_file(child, destination, child_relative, report)
            case SourceKind.DIRECTORY:
                result = _copy_tree(child, destination, child_relative, report, destination_real, ancestors | {real})
            case kind:
                result = Err(_unsupported(child, kind))

        if is_err(result):
            return result

    return Ok(None)


def _source_kind(path: Path) -> Result[SourceKind, InstallError]:
    try:
        mode = path.stat().st_mode
    except (FileNotFoundError, NotADirectoryError):
        return Err(SourceNotFound(path=path, message=f"Source not found: {path}"))
    except OSError as e:
        if e.errno == errno.ELOOP:
            return Ok(SourceKind.SYMLINK_LOOP)
        return Err(CopyFailed(path=path, cause=str(e), message=f"Cannot read {path}: {e}"))

    if stat.S_ISREG(mode):
        return Ok(SourceKind.FILE)
    if stat.S_ISDIR(mode):
        return Ok(SourceKind.DIRECTORY)
    if stat.S_ISFIFO(mode):
        return Ok(SourceKind.FIFO)
    if stat.S_ISSOCK(mode):
        return Ok(SourceKind.SOCKET)
    if stat.S_ISCHR(mode):
        return Ok(SourceKind.CHAR_DEVICE)
    if stat.S_ISBLK(mode):
        return Ok(SourceKind.BLOCK_DEVICE)
    return Ok(SourceKind.UNKNOWN)


def _is_same_or_ancestor(path: Path, other: Path) -> bool:
    return path == other or path in other.parents


def _unsupported(path: Path, kind: SourceKind) -> UnsupportedEntryKind:
    return UnsupportedEntryKind(path=path, kind=kind, message=f"Unsupported source kind '{kind.value}': {path}")


def _self_installation(path: Path, destination: Path) -> SelfInstallationRejected:
    return SelfInstallationRejected(
        path=path,
        destination=destination,
        message=f"Refusing to install {path} into itself ({destination})",
    )

from __future__ import annotations

from pathlib import Path

import pytest

from assoc_files.common import ApplicationIdentity, DirectoryClass
from assoc_files.resolver import BaseDirectoryProvider


@pytest.fixture
def base_dirs(tmp_path: Path) -> dict[DirectoryClass, Path]:
    return {
        DirectoryClass.CONFIG: tmp_path / "home" / ".config",
        DirectoryClass.DATA: tmp_path / "home" / ".local" / "share",
    }


@pytest.fixture
def provider(base_dirs: dict[DirectoryClass, Path]) -> BaseDirectoryProvider:
    def _provider(directory_class: DirectoryClass) -> Path:
        return base_dirs[directory_class]

    return _provider


@pytest.fixture
def identity() -> ApplicationIdentity:
    return ApplicationIdentity(name="sample-app", version="1.2.0")

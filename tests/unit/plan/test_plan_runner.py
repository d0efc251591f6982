from __future__ import annotations

from pathlib import Path

import pytest
from result import is_err, is_ok

from assoc_files.common import ApplicationIdentity, DirectoryClass
from assoc_files.installer import SourceNotFound
from assoc_files.plan import InstallPlan, PlanNotFoundError, run_plan, run_plan_file
from assoc_files.resolver import BaseDirectoryProvider


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _project(root: Path) -> Path:
    _write(root / "pyproject.toml", '[project]\nname = "sample-app"\nversion = "1.2.0"\n')
    _write(root / "data" / "config.toml", "debug = false\n")
    _write(root / "templates" / "index.html", "<html></html>")
    _write(root / "templates" / "partials" / "nav.html", "<nav></nav>")
    return root


def test_run_plan_installs_each_group(
    tmp_path: Path, provider: BaseDirectoryProvider, base_dirs: dict[DirectoryClass, Path]
) -> None:
    project = _project(tmp_path / "project")
    plan = InstallPlan(config=[Path("data/config.toml")], data=[Path("templates")])

    result = run_plan(plan, base_dir=project, provider=provider)

    assert is_ok(result)
    report = result.unwrap()
    assert report.identity == ApplicationIdentity(name="sample-app", version="1.2.0")
    assert report.files_installed == 3
    config_dir = base_dirs[DirectoryClass.CONFIG] / "sample-app" / "1.2.0"
    data_dir = base_dirs[DirectoryClass.DATA] / "sample-app" / "1.2.0"
    assert report.reports[DirectoryClass.CONFIG].destination == config_dir
    assert (config_dir / "config.toml").read_text() == "debug = false\n"
    assert (data_dir / "templates" / "partials" / "nav.html").read_text() == "<nav></nav>"


def test_run_plan_prefers_explicit_identity(
    tmp_path: Path, provider: BaseDirectoryProvider, base_dirs: dict[DirectoryClass, Path]
) -> None:
    project = _project(tmp_path / "project")
    plan = InstallPlan(name="renamed", version="3.0", config=[Path("data/config.toml")])

    report = run_plan(plan, base_dir=project, provider=provider).unwrap()

    assert report.identity.name == "renamed"
    assert (base_dirs[DirectoryClass.CONFIG] / "renamed" / "3.0" / "config.toml").is_file()


def test_run_plan_skips_empty_groups(
    tmp_path: Path, provider: BaseDirectoryProvider, base_dirs: dict[DirectoryClass, Path]
) -> None:
    project = _project(tmp_path / "project")

    report = run_plan(InstallPlan(data=[Path("templates")]), base_dir=project, provider=provider).unwrap()

    assert list(report.reports) == [DirectoryClass.DATA]
    assert not base_dirs[DirectoryClass.CONFIG].exists()


def test_run_plan_stops_at_first_failing_group(
    tmp_path: Path, provider: BaseDirectoryProvider, base_dirs: dict[DirectoryClass, Path]
) -> None:
    project = _project(tmp_path / "project")
    plan = InstallPlan(config=[Path("missing.toml")], data=[Path("templates")])

    result = run_plan(plan, base_dir=project, provider=provider)

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, SourceNotFound)
    assert error.path == project / "missing.toml"
    assert not base_dirs[DirectoryClass.DATA].exists()


def test_run_plan_without_identity_needs_pyproject(tmp_path: Path, provider: BaseDirectoryProvider) -> None:
    result = run_plan(InstallPlan(), base_dir=tmp_path, provider=provider)

    assert isinstance(result.unwrap_err(), PlanNotFoundError)


def test_run_plan_file_resolves_sources_next_to_plan(
    tmp_path: Path,
    provider: BaseDirectoryProvider,
    base_dirs: dict[DirectoryClass, Path],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    project = _project(tmp_path / "project")
    plan_file = _write(project / "assoc-files.yaml", "config:\n  - data/config.toml\n")
    monkeypatch.chdir(tmp_path)

    result = run_plan_file(plan_file, provider=provider)

    assert is_ok(result)
    assert (base_dirs[DirectoryClass.CONFIG] / "sample-app" / "1.2.0" / "config.toml").is_file()


def test_run_plan_file_missing_plan(tmp_path: Path, provider: BaseDirectoryProvider) -> None:
    result = run_plan_file(tmp_path / "assoc-files.yaml", provider=provider)

    assert isinstance(result.unwrap_err(), PlanNotFoundError)

from __future__ import annotations

from pathlib import Path

from result import is_err, is_ok

from assoc_files.common import ApplicationIdentity
from assoc_files.plan import (
    InstallPlan,
    PlanNotFoundError,
    PlanValidationError,
    PlanYamlError,
    load_plan,
    load_pyproject_identity,
)


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_load_plan_reads_groups(tmp_path: Path) -> None:
    plan_file = _write(
        tmp_path / "assoc-files.yaml",
        """
name: sample-app
version: "1.2.0"
config:
  - data/config.toml
data:
  - templates
  - data/defaults.json
""",
    )

    result = load_plan(plan_file)

    assert is_ok(result)
    plan = result.unwrap()
    assert plan.identity() == ApplicationIdentity(name="sample-app", version="1.2.0")
    assert plan.config == [Path("data/config.toml")]
    assert plan.data == [Path("templates"), Path("data/defaults.json")]


def test_empty_plan_file_is_an_empty_plan(tmp_path: Path) -> None:
    plan_file = _write(tmp_path / "assoc-files.yaml", "")

    plan = load_plan(plan_file).unwrap()

    assert plan == InstallPlan()
    assert plan.identity() is None


def test_load_plan_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "assoc-files.yaml"

    result = load_plan(missing)

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, PlanNotFoundError)
    assert error.expected_path == missing


def test_load_plan_reports_yaml_position(tmp_path: Path) -> None:
    plan_file = _write(tmp_path / "assoc-files.yaml", "config:\n  - a.txt\n  b: [\n")

    result = load_plan(plan_file)

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, PlanYamlError)
    assert error.path == plan_file
    assert error.line is not None


def test_load_plan_rejects_non_mapping_root(tmp_path: Path) -> None:
    plan_file = _write(tmp_path / "assoc-files.yaml", "- a.txt\n- b.txt\n")

    result = load_plan(plan_file)

    assert isinstance(result.unwrap_err(), PlanValidationError)


def test_load_plan_rejects_unknown_keys(tmp_path: Path) -> None:
    plan_file = _write(tmp_path / "assoc-files.yaml", "cache:\n  - a.txt\n")

    error = load_plan(plan_file).unwrap_err()

    assert isinstance(error, PlanValidationError)
    assert error.field == "cache"


def test_load_plan_requires_name_and_version_together(tmp_path: Path) -> None:
    plan_file = _write(tmp_path / "assoc-files.yaml", "name: sample-app\n")

    error = load_plan(plan_file).unwrap_err()

    assert isinstance(error, PlanValidationError)
    assert "together" in error.message


def test_load_pyproject_identity(tmp_path: Path) -> None:
    pyproject = _write(tmp_path / "pyproject.toml", '[project]\nname = "sample-app"\nversion = "0.9.0"\n')

    result = load_pyproject_identity(pyproject)

    assert result.unwrap() == ApplicationIdentity(name="sample-app", version="0.9.0")


def test_load_pyproject_identity_missing_project_table(tmp_path: Path) -> None:
    pyproject = _write(tmp_path / "pyproject.toml", '[tool.other]\nkey = "value"\n')

    error = load_pyproject_identity(pyproject).unwrap_err()

    assert isinstance(error, PlanValidationError)
    assert error.field == "project"


def test_load_pyproject_identity_with_dynamic_version(tmp_path: Path) -> None:
    pyproject = _write(tmp_path / "pyproject.toml", '[project]\nname = "sample-app"\ndynamic = ["version"]\n')

    error = load_pyproject_identity(pyproject).unwrap_err()

    assert isinstance(error, PlanValidationError)
    assert error.field == "version"


def test_load_pyproject_identity_invalid_toml(tmp_path: Path) -> None:
    pyproject = _write(tmp_path / "pyproject.toml", "[project\n")

    assert isinstance(load_pyproject_identity(pyproject).unwrap_err(), PlanValidationError)


def test_load_pyproject_identity_missing_file(tmp_path: Path) -> None:
    assert isinstance(load_pyproject_identity(tmp_path / "pyproject.toml").unwrap_err(), PlanNotFoundError)


def test_load_pyproject_identity_normalizes_version_like_installed_metadata(tmp_path: Path) -> None:
    pyproject = _write(tmp_path / "pyproject.toml", '[project]\nname = "sample-app"\nversion = "v1.2.0-beta"\n')

    identity = load_pyproject_identity(pyproject).unwrap()

    assert identity == ApplicationIdentity(name="sample-app", version="1.2.0b0")


def test_load_pyproject_identity_keeps_canonical_version(tmp_path: Path) -> None:
    pyproject = _write(tmp_path / "pyproject.toml", '[project]\nname = "sample-app"\nversion = "1.0.post1"\n')

    assert load_pyproject_identity(pyproject).unwrap().version == "1.0.post1"


def test_load_pyproject_identity_rejects_invalid_version(tmp_path: Path) -> None:
    pyproject = _write(tmp_path / "pyproject.toml", '[project]\nname = "sample-app"\nversion = "not a version"\n')

    error = load_pyproject_identity(pyproject).unwrap_err()

    assert isinstance(error, PlanValidationError)
    assert error.field == "version"

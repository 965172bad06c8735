from __future__ import annotations

import json
from pathlib import Path

import pytest

from jnlp_version.config import CONFIG_PATH_ENV_VAR, ConfigError, load_constraints


def _write(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_constraints(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "constraints.json",
        {
            "constraints": [
                {"id": "runtime", "specification": "1.6+", "description": "JRE"},
                {"id": "legacy", "specification": "1.4* 1.5*", "enabled": False},
            ]
        },
    )

    constraint_set = load_constraints(path)

    assert [c.id for c in constraint_set.constraints] == ["runtime", "legacy"]
    assert [c.id for c in constraint_set.get_enabled()] == ["runtime"]
    legacy = constraint_set.get_by_id("legacy")
    assert legacy is not None
    assert str(legacy.specification) == "1.4* 1.5*"
    assert legacy.to_dict()["enabled"] is False
    assert constraint_set.get_by_id("missing") is None


def test_path_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _write(tmp_path / "custom.json", {"constraints": [{"id": "a", "specification": "2.0"}]})
    monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(path))

    assert load_constraints().get_by_id("a") is not None


def test_default_path_is_working_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write(tmp_path / "constraints.json", {"constraints": [{"id": "a", "specification": "2.0"}]})
    monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)

    assert len(load_constraints().constraints) == 1


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_constraints(tmp_path / "nope.json")


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "constraints.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_constraints(path)


@pytest.mark.parametrize(
    "document",
    [
        [],
        {},
        {"constraints": []},
        {"constraints": [{"id": "a"}]},
        {"constraints": [{"id": "", "specification": "1.0"}]},
        {"constraints": [{"id": "a", "specification": "1.0", "enabled": "yes"}]},
        {"constraints": [{"id": "a", "specification": "1.0", "extra": 1}]},
    ],
)
def test_schema_violations(tmp_path: Path, document: object) -> None:
    path = _write(tmp_path / "constraints.json", document)
    with pytest.raises(ConfigError, match="failed validation"):
        load_constraints(path)


def test_duplicate_ids(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "constraints.json",
        {
            "constraints": [
                {"id": "a", "specification": "1.0"},
                {"id": "a", "specification": "2.0"},
            ]
        },
    )
    with pytest.raises(ConfigError, match="Duplicate"):
        load_constraints(path)


def test_unparsable_specification(tmp_path: Path) -> None:
    path = _write(tmp_path / "constraints.json", {"constraints": [{"id": "bad", "specification": "1.0&"}]})
    with pytest.raises(ConfigError, match="'bad' has an invalid specification"):
        load_constraints(path)

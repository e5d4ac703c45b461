"""Tests for reading generation results and saving classifications."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from appsketch.classification.heuristic import classify
from appsketch.io.result_reader import (
    load_classification,
    load_generation_result,
    save_classification,
)
from appsketch.models.classification import Domain


def _write_result(path: Path) -> Path:
    path.write_text(
        json.dumps(
            {
                "appName": "Team Hub",
                "entities": [
                    {"name": "User", "attributes": ["email", "role_id"]},
                    {"name": "Team", "attributes": ["name"]},
                ],
                "userRoles": [{"name": "Admin", "description": "Manages teams"}],
                "features": [],
            }
        )
    )
    return path


class TestLoadGenerationResult:
    def test_load(self, tmp_path: Path) -> None:
        result = load_generation_result(_write_result(tmp_path / "result.json"))
        assert result.app_name == "Team Hub"
        assert [e.name for e in result.entities] == ["User", "Team"]

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        path = _write_result(tmp_path / "result.json")
        assert load_generation_result(str(path)).user_roles[0].name == "Admin"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_generation_result(tmp_path / "missing.json")

    def test_invalid_content(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"entities": [{"attributes": []}]}))
        with pytest.raises(ValidationError):
            load_generation_result(path)


class TestClassificationPersistence:
    def test_save_then_load(self, tmp_path: Path) -> None:
        generated = load_generation_result(_write_result(tmp_path / "result.json"))
        result = classify(generated.entities)
        out = tmp_path / "nested" / "classification.json"

        save_classification(result, out)

        assert out.exists()
        restored = load_classification(out)
        assert restored == result
        assert restored.primary_domain == Domain.USER_MANAGEMENT

    def test_load_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_classification(tmp_path / "nope.json")

"""Shared pytest fixtures for UBIX tests."""

import json
from pathlib import Path

import pytest

from ubix.config.settings import Settings


@pytest.fixture(autouse=True)
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run every test in an empty working directory without user configuration."""
    for key in Settings.get_config_keys():
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("ubix.config.manager.CONFIG_FILE", tmp_path / ".ubix-config")
    # Local config discovery stops at a repository root
    (tmp_path / ".git").mkdir()

    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def manifest_data() -> dict:
    """Manifest content of an existing solution, including a user-added key."""
    return {
        "name": "Churn Model",
        "author": "Data Team",
        "version": "1.2.3",
        "api": "latest",
        "path": "srv/solutions/Churn Model",
        "fileName": "Churn Model",
        "lastUpdate": "Mon Oct 19 2026 10:00:00 GMT+0000 (UTC)",
        "owner": {"team": "analytics", "contacts": ["ops@example.com"]},
    }


def write_manifest(path: Path, data: dict) -> Path:
    path.write_text(json.dumps(data, indent=4) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def manifest_file(workdir: Path, manifest_data: dict) -> Path:
    """A ubix.json in the working directory."""
    return write_manifest(workdir / "ubix.json", manifest_data)


@pytest.fixture
def solution_dir(workdir: Path, manifest_data: dict) -> Path:
    """A complete solution folder with some content in every subfolder."""
    root = workdir / "Churn Model"
    (root / "data").mkdir(parents=True)
    (root / "data" / "train.csv").write_text("id,label\n1,0\n")
    (root / "scripts" / "R").mkdir(parents=True)
    (root / "scripts" / "R" / "model.R").write_text("fit <- glm(label ~ ., data)\n")
    (root / "scripts" / "py").mkdir()
    (root / "dsl").mkdir()
    (root / "dsl" / "flow.dsl").write_text("load data/train.csv\n")
    write_manifest(root / "ubix.json", manifest_data)
    return root


class ScriptedPrompter:
    """Prompter answering from a dict (default otherwise) and recording questions."""

    def __init__(self, answers: dict | None = None, confirm: bool = True) -> None:
        self.answers = answers or {}
        self.confirm_answer = confirm
        self.asked: list[tuple[str, str]] = []
        self.confirmations: list[str] = []

    def ask(self, prompt_field, default: str) -> str:
        self.asked.append((prompt_field.name, default))
        return self.answers.get(prompt_field.name, default)

    def confirm(self, message: str, default: bool = True) -> bool:
        self.confirmations.append(message)
        return self.confirm_answer


@pytest.fixture
def scripted_prompter():
    """Factory for ScriptedPrompter instances."""
    return ScriptedPrompter

"""Shared fixtures for the create-dojo test suite."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import pytest

from create_dojo.config import DEFAULT_CONFIG, ScaffoldConfig

T = TypeVar("T")


class FakeFetcher:
    """Records fetch calls and writes a package.json into client destinations."""

    def __init__(
        self,
        statuses: dict[str, int] | None = None,
        manifest: dict[str, Any] | None = None,
    ) -> None:
        self.statuses = statuses or {}
        self.manifest = manifest
        self.calls: list[tuple[str, Path]] = []

    def fetch(self, ref: str, dest: Path) -> int:
        self.calls.append((ref, dest))
        status = self.statuses.get(ref, 0)
        if status == 0 and self.manifest is not None and dest.name == "client":
            (dest / "package.json").write_text(json.dumps(self.manifest, indent=2))
        return status


class FakePrompter:
    """Answers prompts from canned values."""

    def __init__(self, selection: int = 0, answers: list[str] | None = None) -> None:
        self.selection = selection
        self.answers = list(answers or [""])
        self.errors: list[str] = []
        self.defaults: list[str] = []
        self.labels: list[str] = []

    def select(self, question: str, options: list[T], labels: list[str]) -> T:
        self.labels = labels
        return options[self.selection]

    def text(self, question: str, default: str, validate: Callable[[str], str | None]) -> str:
        self.defaults.append(default)
        while True:
            answer = self.answers.pop(0) or default
            error = validate(answer)
            if error is None:
                return answer
            self.errors.append(error)


@pytest.fixture
def config() -> ScaffoldConfig:
    return DEFAULT_CONFIG


@pytest.fixture
def sample_manifest() -> dict[str, Any]:
    return {
        "name": "react-app",
        "version": "0.0.0",
        "private": True,
        "scripts": {"dev": "vite"},
        "dependencies": {
            "@dojoengine/core": "workspace:*",
            "@dojoengine/sdk": "^1.0.0",
            "@dojoengine/torii-client": "workspace:^",
            "react": "^18.2.0",
            "other/c": "workspace:*",
        },
        "devDependencies": {"@dojoengine/create-burner": "workspace:*"},
    }


@pytest.fixture
def client_dir(tmp_path: Path, sample_manifest: dict[str, Any]) -> Path:
    client = tmp_path / "client"
    client.mkdir()
    (client / "package.json").write_text(json.dumps(sample_manifest, indent=2))
    return client

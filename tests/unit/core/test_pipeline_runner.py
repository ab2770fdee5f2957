"""Unit tests for MigrationRunner with fake collaborators."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from connect_to_forge.config import ConverterSettings
from connect_to_forge.core.pipeline_runner import MigrationRunner
from connect_to_forge.exceptions import DescriptorDownloadError, OperatorAbort
from connect_to_forge.models.descriptor import ConnectDescriptor
from connect_to_forge.prompts.scripted import ScriptedPromptSurface


class FakeLoader:
    def __init__(self, raw: dict[str, Any] | None = None, fail: bool = False) -> None:
        self.raw = raw or {"key": "abc", "baseUrl": "https://x", "scopes": ["READ"]}
        self.fail = fail
        self.urls: list[str] = []

    def fetch(self, url: str) -> ConnectDescriptor:
        self.urls.append(url)
        if self.fail:
            raise DescriptorDownloadError("boom", url=url)
        return ConnectDescriptor.model_validate(self.raw)


class FakeStore:
    def __init__(self, existing: dict[str, Any] | None = None) -> None:
        self.existing = existing
        self.saved: list[tuple[Path, dict[str, Any]]] = []

    def load(self, path: Path) -> dict[str, Any] | None:
        return self.existing

    def save(self, path: Path, manifest: dict[str, Any]) -> None:
        self.saved.append((path, manifest))


def make_runner(
    loader: FakeLoader | None = None,
    store: FakeStore | None = None,
    answers: dict[str, Any] | None = None,
    settings: ConverterSettings | None = None,
) -> tuple[MigrationRunner, FakeStore, ScriptedPromptSurface]:
    store = store or FakeStore()
    prompts = ScriptedPromptSurface(answers)
    runner = MigrationRunner(
        loader=loader or FakeLoader(), store=store, prompts=prompts, settings=settings
    )
    return runner, store, prompts


class TestExecute:
    def test_happy_path_writes_manifest(self, tmp_path: Path) -> None:
        runner, store, prompts = make_runner()
        out = tmp_path / "manifest.yml"
        manifest = runner.execute("https://x/d.json", "jira", out)
        assert store.saved == [(out, manifest)]
        assert manifest["permissions"]["scopes"] == ["read:connect-jira"]
        assert prompts.asked == []

    def test_download_failure_writes_nothing(self, tmp_path: Path) -> None:
        runner, store, _ = make_runner(loader=FakeLoader(fail=True))
        with pytest.raises(DescriptorDownloadError):
            runner.execute("https://x/d.json", "jira", tmp_path / "m.yml")
        assert store.saved == []

    def test_existing_manifest_is_merged(self, tmp_path: Path) -> None:
        store = FakeStore({"resources": [{"key": "main", "path": "static"}]})
        runner, store, _ = make_runner(store=store)
        manifest = runner.execute("u", "confluence", tmp_path / "m.yml")
        assert manifest["resources"] == [{"key": "main", "path": "static"}]
        assert manifest["permissions"]["scopes"] == ["read:connect-confluence"]

    def test_conflict_abort_writes_nothing(self, tmp_path: Path) -> None:
        store = FakeStore({"app": {"connect": {"key": "old"}}})
        runner, store, _ = make_runner(
            store=store, answers={"existing_manifest_action": "Abort"}
        )
        with pytest.raises(OperatorAbort):
            runner.execute("u", "jira", tmp_path / "m.yml")
        assert store.saved == []


class TestWarningGate:
    SETTINGS = ConverterSettings(unsupported_modules=frozenset({"jiraReports"}))
    RAW = {"key": "abc", "baseUrl": "https://x", "modules": {"jiraReports": [{}]}}

    def test_declining_writes_nothing(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        runner, store, prompts = make_runner(
            loader=FakeLoader(self.RAW), settings=self.SETTINGS
        )
        with pytest.raises(OperatorAbort):
            runner.execute("u", "jira", tmp_path / "m.yml")
        assert store.saved == []
        assert prompts.asked_ids() == ["proceed_with_warnings"]
        out = capsys.readouterr().out
        assert "Warnings detected:" in out
        assert "- jiraReports is not currently supported" in out

    def test_accepting_writes(self, tmp_path: Path) -> None:
        runner, store, _ = make_runner(
            loader=FakeLoader(self.RAW),
            settings=self.SETTINGS,
            answers={"proceed_with_warnings": True},
        )
        runner.execute("u", "jira", tmp_path / "m.yml")
        assert len(store.saved) == 1

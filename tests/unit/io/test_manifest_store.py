"""Unit tests for YamlManifestStore."""

from __future__ import annotations

from pathlib import Path

from connect_to_forge.io.manifest_store import YamlManifestStore

MANIFEST = {
    "permissions": {"scopes": ["read:connect-jira"]},
    "connectModules": {"jira:webhooks": [{"event": "e", "key": "webhook-1"}]},
    "remotes": [{"key": "connect", "baseUrl": "https://app"}],
    "app": {
        "id": "ari:placeholder",
        "connect": {"key": "k", "remote": "connect", "authentication": "jwt"},
        "runtime": {"name": "nodejs20.x"},
    },
}


class TestLoad:
    def test_missing_file_is_absent(self, tmp_path: Path) -> None:
        assert YamlManifestStore().load(tmp_path / "manifest.yml") is None

    def test_broken_yaml_is_absent(self, tmp_path: Path) -> None:
        path = tmp_path / "manifest.yml"
        path.write_text("app: [unclosed\n  - : :")
        assert YamlManifestStore().load(path) is None

    def test_non_mapping_is_absent(self, tmp_path: Path) -> None:
        path = tmp_path / "manifest.yml"
        path.write_text("- just\n- a list\n")
        assert YamlManifestStore().load(path) is None

    def test_loads_plain_dicts(self, tmp_path: Path) -> None:
        path = tmp_path / "manifest.yml"
        path.write_text(
            "app:\n  id: ari:x\nmodules:\n  jira:issuePanel:\n    - key: panel\n"
        )
        data = YamlManifestStore().load(path)
        assert data == {
            "app": {"id": "ari:x"},
            "modules": {"jira:issuePanel": [{"key": "panel"}]},
        }
        assert type(data) is dict
        assert type(data["modules"]["jira:issuePanel"]) is list


class TestSave:
    def test_round_trip(self, tmp_path: Path) -> None:
        store = YamlManifestStore()
        path = tmp_path / "out" / "manifest.yml"
        store.save(path, MANIFEST)
        assert path.exists()
        assert store.load(path) == MANIFEST

    def test_top_level_key_order(self) -> None:
        content = YamlManifestStore().dumps(MANIFEST)
        top_level = [
            line.split(":")[0]
            for line in content.splitlines()
            if line and not line.startswith(" ")
        ]
        assert top_level == ["app", "remotes", "connectModules", "permissions"]

    def test_block_style(self) -> None:
        content = YamlManifestStore().dumps(MANIFEST)
        assert "{" not in content
        assert "  jira:webhooks:\n" in content

"""Unit tests for ManifestBuilder."""

from __future__ import annotations

from connect_to_forge.config import PLACEHOLDER_APP_ID, ConverterSettings
from connect_to_forge.models.builder import ManifestBuilder, connect_module_key
from connect_to_forge.models.descriptor import ConnectDescriptor
from connect_to_forge.models.manifest import ForgeManifest


def _descriptor() -> ConnectDescriptor:
    return ConnectDescriptor.model_validate(
        {"key": "my-app", "baseUrl": "https://app.example.com"}
    )


class TestSkeleton:
    def test_from_descriptor(self) -> None:
        builder = ManifestBuilder.from_descriptor(_descriptor(), ConverterSettings())
        assert builder.to_dict() == {
            "app": {
                "id": PLACEHOLDER_APP_ID,
                "connect": {"key": "my-app", "remote": "connect"},
                "runtime": {"name": "nodejs20.x"},
            },
            "remotes": [{"key": "connect", "baseUrl": "https://app.example.com"}],
            "connectModules": {},
            "permissions": {"scopes": []},
        }

    def test_settings_override_identity_constants(self) -> None:
        settings = ConverterSettings(app_id="ari:x", runtime_name="nodejs22.x")
        data = ManifestBuilder.from_descriptor(_descriptor(), settings).to_dict()
        assert data["app"]["id"] == "ari:x"
        assert data["app"]["runtime"]["name"] == "nodejs22.x"

    def test_build_validates(self) -> None:
        manifest = ManifestBuilder.from_descriptor(
            _descriptor(), ConverterSettings()
        ).build()
        assert isinstance(manifest, ForgeManifest)
        assert manifest.remotes[0].key == "connect"
        assert manifest.app.connect.authentication is None


class TestBuilderMethods:
    def test_connect_module_key(self) -> None:
        assert connect_module_key("jira", "webhooks") == "jira:webhooks"

    def test_with_remote_replaces_same_key(self) -> None:
        builder = ManifestBuilder("id", "k", "rt").with_remote("connect", "https://a")
        builder.with_remote(
            "connect", {"default": "https://a"}, operations=["storage"], in_scope_eud=False
        )
        assert builder.to_dict()["remotes"] == [
            {
                "key": "connect",
                "baseUrl": {"default": "https://a"},
                "operations": ["storage"],
                "storage": {"inScopeEUD": False},
            }
        ]

    def test_with_remote_omits_empty_operations(self) -> None:
        builder = ManifestBuilder("id", "k", "rt").with_remote("connect", "https://a", [])
        assert builder.get_remote("connect") == {"key": "connect", "baseUrl": "https://a"}

    def test_to_dict_is_a_copy(self) -> None:
        builder = ManifestBuilder("id", "k", "rt").with_scope("read:connect-jira")
        data = builder.to_dict()
        data["permissions"]["scopes"].append("mutated")
        assert builder.to_dict()["permissions"]["scopes"] == ["read:connect-jira"]

    def test_modules_section_only_when_used(self) -> None:
        builder = ManifestBuilder("id", "k", "rt")
        assert "modules" not in builder.to_dict()
        builder.with_module("migration:dataResidency", [{"key": "dare"}])
        assert builder.to_dict()["modules"] == {
            "migration:dataResidency": [{"key": "dare"}]
        }

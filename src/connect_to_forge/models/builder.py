import copy
from typing import TYPE_CHECKING, Any

from .manifest import ForgeManifest

if TYPE_CHECKING:
    from connect_to_forge.config import ConverterSettings
    from connect_to_forge.models.descriptor import ConnectDescriptor


def connect_module_key(platform: str, module_type: str) -> str:
    """Namespaced connectModules key, e.g. 'jira:webhooks'."""
    return f"{platform}:{module_type}"


class ManifestBuilder:
    """Fluent builder for creating a Forge manifest"""

    def __init__(self, app_id: str, connect_key: str, runtime_name: str):
        self._data: dict[str, Any] = {
            "app": {
                "id": app_id,
                "connect": {"key": connect_key, "remote": "connect"},
                "runtime": {"name": runtime_name},
            },
            "remotes": [],
            "connectModules": {},
            "permissions": {"scopes": []},
        }

    @classmethod
    def from_descriptor(
        cls, descriptor: "ConnectDescriptor", settings: "ConverterSettings"
    ) -> "ManifestBuilder":
        """Creates the minimal manifest seeded from the descriptor identity"""
        builder = cls(settings.app_id, descriptor.key, settings.runtime_name)
        builder.with_remote("connect", descriptor.baseUrl)
        return builder

    # ===== APP SECTION =====

    def with_connect_authentication(self, scheme: str) -> "ManifestBuilder":
        """Sets app.connect.authentication"""
        self._data["app"]["connect"]["authentication"] = scheme
        return self

    def with_licensing(self, enabled: bool = True) -> "ManifestBuilder":
        """Sets app.licensing.enabled"""
        self._data["app"]["licensing"] = {"enabled": enabled}
        return self

    # ===== REMOTES =====

    def with_remote(
        self,
        key: str,
        base_url: str | dict[str, Any],
        operations: list[str] | None = None,
        in_scope_eud: bool | None = None,
    ) -> "ManifestBuilder":
        """Adds a remote, or replaces the remote with the same key in place"""
        remote: dict[str, Any] = {"key": key, "baseUrl": base_url}
        if operations:
            remote["operations"] = list(operations)
        if in_scope_eud is not None:
            remote["storage"] = {"inScopeEUD": in_scope_eud}

        remotes = self._data["remotes"]
        for i, existing in enumerate(remotes):
            if existing["key"] == key:
                remotes[i] = remote
                return self
        remotes.append(remote)
        return self

    def get_remote(self, key: str) -> dict[str, Any] | None:
        """Returns the remote with the given key, if any"""
        for remote in self._data["remotes"]:
            if remote["key"] == key:
                return remote
        return None

    # ===== MODULES =====

    def with_module(self, name: str, entries: list[dict[str, Any]]) -> "ManifestBuilder":
        """Sets a Forge-native module list (e.g. 'migration:dataResidency')"""
        if "modules" not in self._data:
            self._data["modules"] = {}
        self._data["modules"][name] = entries
        return self

    def with_connect_module(
        self, platform: str, module_type: str, entries: list[Any]
    ) -> "ManifestBuilder":
        """Sets connectModules['<platform>:<module_type>']"""
        self._data["connectModules"][connect_module_key(platform, module_type)] = list(
            entries
        )
        return self

    def get_connect_module(self, platform: str, module_type: str) -> list[Any] | None:
        """Returns the live list stored for a connect module, if any"""
        return self._data["connectModules"].get(
            connect_module_key(platform, module_type)
        )

    # ===== PERMISSIONS =====

    def with_scope(self, scope: str) -> "ManifestBuilder":
        """Appends a Forge scope"""
        self._data["permissions"]["scopes"].append(scope)
        return self

    # ===== OUTPUT =====

    def build(self) -> ForgeManifest:
        """Builds the final ForgeManifest object"""
        return ForgeManifest(**copy.deepcopy(self._data))

    def to_dict(self) -> dict[str, Any]:
        """Converts the builder data to a dictionary for YAML serialization"""
        return copy.deepcopy(self._data)

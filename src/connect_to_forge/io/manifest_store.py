"""Reading and writing manifest.yml with ruamel.yaml."""

import logging
from io import StringIO
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

logger = logging.getLogger(__name__)

MANIFEST_KEY_ORDER = ["app", "remotes", "modules", "connectModules", "permissions"]


def _to_plain(data: Any) -> Any:
    """Convert ruamel's CommentedMap/CommentedSeq into dict/list."""
    if isinstance(data, dict):
        return {str(k): _to_plain(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_to_plain(v) for v in data]
    return data


class YamlManifestStore:
    """Loads and saves Forge manifests as block-style YAML."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self._logger = logger.getChild(self.__class__.__name__)
        self._yaml = YAML(typ="rt")
        self._configure_yaml()

    def _configure_yaml(self) -> None:
        self._yaml.indent(mapping=2, sequence=4, offset=2)
        self._yaml.default_flow_style = False
        self._yaml.allow_unicode = True
        self._yaml.width = 4096

        # Top-level manifest keys in the order Forge documents them
        def represent_manifest_dict(dumper, data):
            if "app" in data:
                ordered = {k: data[k] for k in MANIFEST_KEY_ORDER if k in data}
                ordered.update({k: v for k, v in data.items() if k not in ordered})
                data = ordered
            return dumper.represent_mapping("tag:yaml.org,2002:map", data)

        self._yaml.representer.add_representer(dict, represent_manifest_dict)

    def load(self, path: Path) -> dict[str, Any] | None:
        """
        Load an existing manifest.

        A missing, unreadable or unparseable file, or one whose top level is
        not a mapping, is reported and treated as absent.
        """
        try:
            content = path.read_text(encoding=self.encoding)
            data = self._yaml.load(content)
        except FileNotFoundError:
            print(f"No existing {path} file detected, will create one.")
            print()
            return None
        except (OSError, UnicodeDecodeError, YAMLError) as e:
            self._logger.warning(f"Could not read existing manifest {path}: {e}")
            print(f"No existing {path} file detected, will create one.")
            print()
            return None

        if not isinstance(data, dict):
            self._logger.warning(f"Existing manifest {path} is not a mapping, ignoring")
            print(f"No existing {path} file detected, will create one.")
            print()
            return None

        print(f"Existing {path} file detected, will merge your Connect Modules in.")
        print()
        return _to_plain(data)

    def dumps(self, manifest: dict[str, Any]) -> str:
        """Serialize a manifest to a YAML string"""
        stream = StringIO()
        self._yaml.dump(manifest, stream)
        return stream.getvalue()

    def save(self, path: Path, manifest: dict[str, Any]) -> None:
        """Write the manifest, creating parent directories as needed"""
        content = self.dumps(manifest)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding=self.encoding)
        self._logger.debug(f"Manifest written to {path}")

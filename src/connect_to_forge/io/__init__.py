"""Descriptor download and manifest file persistence."""

from .descriptor_loader import HttpDescriptorLoader
from .manifest_store import YamlManifestStore

__all__ = ["HttpDescriptorLoader", "YamlManifestStore"]

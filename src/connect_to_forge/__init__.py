"""Convert Atlassian Connect descriptors into Forge manifests."""

__version__ = "0.3.0"

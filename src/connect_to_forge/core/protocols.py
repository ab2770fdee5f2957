from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from connect_to_forge.conversion.context import ConversionContext
    from connect_to_forge.models.builder import ManifestBuilder
    from connect_to_forge.models.descriptor import ConnectDescriptor
    from connect_to_forge.prompts.questions import Question


class DescriptorLoader(Protocol):
    """Defines the contract for retrieving a Connect descriptor."""

    def fetch(self, url: str) -> "ConnectDescriptor":
        """
        Download and parse the descriptor at the given URL.

        Raises:
            DescriptorDownloadError: If the resource cannot be retrieved
            DescriptorParseError: If the payload is not a Connect descriptor
        """
        ...


class ManifestStore(Protocol):
    """Defines the contract for reading and writing manifest files."""

    def load(self, path: Path) -> dict[str, Any] | None:
        """
        Load an existing manifest.

        Returns:
            The manifest as a dict, or None if it is missing or unreadable
        """
        ...

    def save(self, path: Path, manifest: dict[str, Any]) -> None:
        """Write the manifest to the given path."""
        ...


class PromptSurface(Protocol):
    """Defines the contract for asking the operator a closed-ended question."""

    def ask(self, question: "Question") -> Any:
        """
        Ask a question and block until it is answered.

        Returns:
            str for text/select questions, list[str] for checkbox questions,
            bool for confirm questions

        Raises:
            OperatorAbort: If the operator cancels the prompt
        """
        ...


class ConversionRule(Protocol):
    """Defines the contract for one descriptor-to-manifest mapping rule."""

    def can_apply(self, descriptor: "ConnectDescriptor") -> bool:
        """
        Checks whether the descriptor contains what this rule converts.

        Args:
            descriptor: The Connect descriptor being converted

        Returns:
            True if apply() should run, False otherwise
        """
        ...

    def apply(
        self,
        descriptor: "ConnectDescriptor",
        builder: "ManifestBuilder",
        context: "ConversionContext",
    ) -> None:
        """
        Write this rule's part of the manifest using the builder.

        Args:
            descriptor: The Connect descriptor being converted
            builder: The ManifestBuilder to populate
            context: Platform, prompt surface, settings and the warning list
        """
        ...

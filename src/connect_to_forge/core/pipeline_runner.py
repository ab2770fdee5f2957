"""Pipeline runner for a single Connect-to-Forge conversion."""

import logging
from pathlib import Path
from typing import Any

from connect_to_forge.config import LIMITATIONS_URL, ConverterSettings
from connect_to_forge.conversion.context import ConversionContext, Platform
from connect_to_forge.conversion.engine import ConversionEngine
from connect_to_forge.exceptions import OperatorAbort
from connect_to_forge.merge import resolve_existing_manifest
from connect_to_forge.models.builder import ManifestBuilder
from connect_to_forge.prompts.questions import proceed_with_warnings_question

from .protocols import DescriptorLoader, ManifestStore, PromptSurface

logger = logging.getLogger(__name__)


class MigrationRunner:
    """
    Coordinates download, conversion, merge, warning review and write.

    Steps run strictly in order; a prompt blocks until it is answered and
    the manifest is written only after every prompt is resolved. An
    OperatorAbort raised at any step leaves the output untouched.
    """

    def __init__(
        self,
        loader: DescriptorLoader,
        store: ManifestStore,
        prompts: PromptSurface,
        settings: ConverterSettings | None = None,
        engine: ConversionEngine | None = None,
    ):
        self._logger = logger.getChild(self.__class__.__name__)
        self._loader = loader
        self._store = store
        self._prompts = prompts
        self._settings = settings or ConverterSettings()
        self._engine = engine or ConversionEngine()

    def execute(self, url: str, platform: Platform, output_file: Path) -> dict[str, Any]:
        """
        Run the whole conversion.

        Args:
            url: Connect descriptor URL
            platform: Target product, 'jira' or 'confluence'
            output_file: Manifest path to merge with and write

        Returns:
            The manifest that was written

        Raises:
            DescriptorDownloadError, DescriptorParseError: If the descriptor
                cannot be loaded
            OperatorAbort: If the operator aborts; nothing is written
        """
        self._logger.info("Starting conversion pipeline")

        descriptor = self._loader.fetch(url)

        builder = ManifestBuilder.from_descriptor(descriptor, self._settings)
        context = ConversionContext(
            platform=platform, prompts=self._prompts, settings=self._settings
        )
        result = self._engine.convert(descriptor, builder, context)

        prior = self._store.load(output_file)
        manifest = resolve_existing_manifest(
            result.manifest, prior, self._prompts, output_name=str(output_file)
        )

        if result.warnings:
            self._review_warnings(result.warnings)

        self._store.save(output_file, manifest)
        self._logger.info(f"Manifest saved to: {output_file}")
        return manifest

    def _review_warnings(self, warnings: list[str]) -> None:
        """Show the warnings as a batch and ask whether to continue."""
        print("Warnings detected:")
        for warning in warnings:
            print(f"- {warning}")
        print()
        print(f"For more information about these limitations: {LIMITATIONS_URL}")
        print()

        if not self._prompts.ask(proceed_with_warnings_question()):
            raise OperatorAbort("Manifest generation cancelled due to warnings.")

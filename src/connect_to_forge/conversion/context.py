"""Shared state handed to every conversion rule."""

import logging
from dataclasses import dataclass, field
from typing import Literal

from connect_to_forge.config import ConverterSettings
from connect_to_forge.core.protocols import PromptSurface

logger = logging.getLogger(__name__)

Platform = Literal["jira", "confluence"]
SUPPORTED_PLATFORMS: tuple[str, ...] = ("jira", "confluence")


@dataclass
class ConversionContext:
    """
    Context for a single conversion run.

    Holds the target product, the prompt surface used for disambiguation,
    the settings, and the ordered list of warnings the rules produce.
    """

    platform: Platform
    prompts: PromptSurface
    settings: ConverterSettings = field(default_factory=ConverterSettings)
    warnings: list[str] = field(default_factory=list)

    def warn(self, message: str) -> None:
        """Record an advisory warning for the operator."""
        logger.debug(f"Conversion warning: {message}")
        self.warnings.append(message)

    def report(self, message: str) -> None:
        """Print a progress line for the operator."""
        print(f" - {message}")

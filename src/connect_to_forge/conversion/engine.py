"""Conversion engine applying the registered rules to a manifest skeleton."""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from connect_to_forge.core.protocols import ConversionRule

from .context import SUPPORTED_PLATFORMS, ConversionContext

if TYPE_CHECKING:
    from connect_to_forge.models.builder import ManifestBuilder
    from connect_to_forge.models.descriptor import ConnectDescriptor

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """The generated manifest and the warnings collected while building it."""

    manifest: dict[str, Any]
    warnings: list[str] = field(default_factory=list)


class ConversionEngine:
    """
    Turns a manifest skeleton into a full Forge manifest.

    Rules run in registration order. Every anomaly a rule finds is recorded
    as a warning on the context; the engine does not raise for a well-formed
    descriptor. Whether warnings stop the run is up to the caller.
    """

    def __init__(self, rules: list[ConversionRule] | None = None):
        self._logger = logger.getChild(self.__class__.__name__)
        if rules is None:
            from .rules import default_rules

            rules = default_rules()
        self._rules: list[ConversionRule] = list(rules)

    def register_rule(self, rule: ConversionRule) -> "ConversionEngine":
        """
        Append a rule to the end of the pipeline.

        Returns:
            Self for method chaining
        """
        self._logger.info(f"Registering rule '{rule.__class__.__name__}'")
        self._rules.append(rule)
        return self

    def get_rules(self) -> list[ConversionRule]:
        return self._rules.copy()

    def convert(
        self,
        descriptor: "ConnectDescriptor",
        builder: "ManifestBuilder",
        context: ConversionContext,
    ) -> ConversionResult:
        """
        Apply every rule to the builder.

        Args:
            descriptor: Parsed Connect descriptor
            builder: Manifest skeleton created from the descriptor
            context: Platform, prompts, settings and the warning list

        Returns:
            ConversionResult with the manifest dict and ordered warnings
        """
        if context.platform not in SUPPORTED_PLATFORMS:
            raise ValueError(
                f"Unknown platform '{context.platform}'. "
                f"Expected one of: {', '.join(SUPPORTED_PLATFORMS)}"
            )

        print(f"Conversion begun for '{descriptor.display_name}':")
        print()

        for rule in self._rules:
            rule_name = rule.__class__.__name__
            if not rule.can_apply(descriptor):
                self._logger.debug(f"Skipping {rule_name}: nothing to convert")
                continue
            self._logger.debug(f"Applying {rule_name}")
            rule.apply(descriptor, builder, context)

        print()

        # validates the generated structure against the manifest model
        builder.build()

        self._logger.info(
            f"Conversion finished with {len(context.warnings)} warning(s)"
        )
        return ConversionResult(builder.to_dict(), list(context.warnings))

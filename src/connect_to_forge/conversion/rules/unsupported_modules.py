import logging
from typing import TYPE_CHECKING

from connect_to_forge.conversion.base_rule import BaseConversionRule

if TYPE_CHECKING:
    from connect_to_forge.conversion.context import ConversionContext
    from connect_to_forge.models.builder import ManifestBuilder
    from connect_to_forge.models.descriptor import ConnectDescriptor

logger = logging.getLogger(__name__)


class UnsupportedModulesRule(BaseConversionRule):
    """Warn about module types Forge cannot host.

    The block-list comes from ConverterSettings.unsupported_modules and is
    empty unless configured.
    """

    name = "unsupported-modules"

    def can_apply(self, descriptor: "ConnectDescriptor") -> bool:
        return bool(descriptor.modules)

    def apply(
        self,
        descriptor: "ConnectDescriptor",
        builder: "ManifestBuilder",
        context: "ConversionContext",
    ) -> None:
        blocked = context.settings.unsupported_modules
        if not blocked:
            self._logger.debug("No unsupported module types configured")
            return

        for module_type in descriptor.modules:
            if module_type in blocked:
                context.warn(
                    f"{module_type} is not currently supported in a Forge manifest."
                )

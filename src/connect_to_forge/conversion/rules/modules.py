import logging
from typing import TYPE_CHECKING

from connect_to_forge.conversion.base_rule import BaseConversionRule
from connect_to_forge.models.descriptor import ConnectModule, normalize_module_entries

if TYPE_CHECKING:
    from connect_to_forge.conversion.context import ConversionContext
    from connect_to_forge.models.builder import ManifestBuilder
    from connect_to_forge.models.descriptor import ConnectDescriptor

logger = logging.getLogger(__name__)


class ModulesRule(BaseConversionRule):
    """Copy every Connect module into connectModules as a list."""

    name = "modules"

    def can_apply(self, descriptor: "ConnectDescriptor") -> bool:
        return bool(descriptor.modules)

    def apply(
        self,
        descriptor: "ConnectDescriptor",
        builder: "ManifestBuilder",
        context: "ConversionContext",
    ) -> None:
        copied = 0
        for module_type, value in descriptor.present_modules().items():
            entries = normalize_module_entries(module_type, value)
            payloads = [
                entry.to_payload() if isinstance(entry, ConnectModule) else entry
                for entry in entries
            ]
            builder.with_connect_module(context.platform, module_type, payloads)
            self._logger.debug(
                f"Copied {len(payloads)} '{module_type}' module(s) "
                f"as {type(entries[0]).__name__ if entries else 'nothing'}"
            )
            copied += 1

        context.report(f"Moved {copied} modules into connectModules in the manifest")

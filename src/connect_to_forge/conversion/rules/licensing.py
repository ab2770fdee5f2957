from typing import TYPE_CHECKING

from connect_to_forge.conversion.base_rule import BaseConversionRule

if TYPE_CHECKING:
    from connect_to_forge.conversion.context import ConversionContext
    from connect_to_forge.models.builder import ManifestBuilder
    from connect_to_forge.models.descriptor import ConnectDescriptor


class LicensingRule(BaseConversionRule):
    """Enable Forge licensing for paid Connect apps."""

    name = "licensing"

    def can_apply(self, descriptor: "ConnectDescriptor") -> bool:
        return bool(descriptor.enableLicensing)

    def apply(
        self,
        descriptor: "ConnectDescriptor",
        builder: "ManifestBuilder",
        context: "ConversionContext",
    ) -> None:
        builder.with_licensing(True)
        context.report("Enabled licensing in Manifest.")

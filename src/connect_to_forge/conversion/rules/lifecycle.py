import logging
from typing import TYPE_CHECKING

from connect_to_forge.conversion.base_rule import BaseConversionRule
from connect_to_forge.models.builder import connect_module_key
from connect_to_forge.models.descriptor import DARE_MIGRATION_EVENT

if TYPE_CHECKING:
    from connect_to_forge.conversion.context import ConversionContext
    from connect_to_forge.models.builder import ManifestBuilder
    from connect_to_forge.models.descriptor import ConnectDescriptor

logger = logging.getLogger(__name__)

LIFECYCLE_MODULE_KEY = "lifecycle-events"


class LifecycleRule(BaseConversionRule):
    """Move Connect lifecycle callbacks into a single lifecycle connect module.

    Keeping Connect lifecycle callbacks requires JWT authentication, so the
    rule also sets app.connect.authentication. The dare-migration hook is
    left out; it becomes the migration:dataResidency module instead.
    """

    name = "lifecycle"

    def can_apply(self, descriptor: "ConnectDescriptor") -> bool:
        return descriptor.lifecycle is not None

    def apply(
        self,
        descriptor: "ConnectDescriptor",
        builder: "ManifestBuilder",
        context: "ConversionContext",
    ) -> None:
        events = {
            event: path
            for event, path in (descriptor.lifecycle or {}).items()
            if event != DARE_MIGRATION_EVENT
        }
        builder.with_connect_module(
            context.platform, "lifecycle", [{"key": LIFECYCLE_MODULE_KEY, **events}]
        )
        builder.with_connect_authentication("jwt")

        module_name = connect_module_key(context.platform, "lifecycle")
        context.report(f"Moved all lifecycle events into connectModules.{module_name}.")

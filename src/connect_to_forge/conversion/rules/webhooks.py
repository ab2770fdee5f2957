from typing import TYPE_CHECKING

from connect_to_forge.conversion.base_rule import BaseConversionRule

if TYPE_CHECKING:
    from connect_to_forge.conversion.context import ConversionContext
    from connect_to_forge.models.builder import ManifestBuilder
    from connect_to_forge.models.descriptor import ConnectDescriptor


class WebhookKeyRule(BaseConversionRule):
    """Give every webhook a generated key: webhook-1 .. webhook-N.

    Runs after ModulesRule, so the webhooks value is already a list even if
    the descriptor declared a single object. Existing keys are overwritten.
    """

    name = "webhook-keys"

    def can_apply(self, descriptor: "ConnectDescriptor") -> bool:
        return descriptor.modules.get("webhooks") is not None

    def apply(
        self,
        descriptor: "ConnectDescriptor",
        builder: "ManifestBuilder",
        context: "ConversionContext",
    ) -> None:
        webhooks = builder.get_connect_module(context.platform, "webhooks")
        if not webhooks:
            return

        for index, webhook in enumerate(webhooks, start=1):
            if isinstance(webhook, dict):
                webhook["key"] = f"webhook-{index}"
            else:
                self._logger.warning(
                    f"Webhook #{index} is not an object, cannot assign a key"
                )
        context.report("Ensured all webhooks have automatically generated keys.")

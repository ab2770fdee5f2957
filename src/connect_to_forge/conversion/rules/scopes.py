from typing import TYPE_CHECKING

from connect_to_forge.conversion.base_rule import BaseConversionRule

if TYPE_CHECKING:
    from connect_to_forge.conversion.context import ConversionContext
    from connect_to_forge.models.builder import ManifestBuilder
    from connect_to_forge.models.descriptor import ConnectDescriptor


def to_forge_scope(scope: str, platform: str) -> str:
    """Map a Connect scope to its Forge name, e.g. ACT_AS_USER -> act-as-user:connect-jira."""
    forge_scope = scope.lower().replace("_", "-")
    return f"{forge_scope}:connect-{platform}"


class ScopesRule(BaseConversionRule):
    """Convert every Connect scope, keeping order. No scope is dropped."""

    name = "scopes"

    def can_apply(self, descriptor: "ConnectDescriptor") -> bool:
        return len(descriptor.scopes) > 0

    def apply(
        self,
        descriptor: "ConnectDescriptor",
        builder: "ManifestBuilder",
        context: "ConversionContext",
    ) -> None:
        for scope in descriptor.scopes:
            builder.with_scope(to_forge_scope(scope, context.platform))
        context.report(
            f"Converted {len(descriptor.scopes)} connect scopes into correct "
            "format in manifest."
        )

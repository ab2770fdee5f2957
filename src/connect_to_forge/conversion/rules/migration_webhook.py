from typing import TYPE_CHECKING

from connect_to_forge.conversion.base_rule import BaseConversionRule
from connect_to_forge.models.builder import connect_module_key

if TYPE_CHECKING:
    from connect_to_forge.conversion.context import ConversionContext
    from connect_to_forge.models.builder import ManifestBuilder
    from connect_to_forge.models.descriptor import ConnectDescriptor

APP_MIGRATION_MODULE_KEY = "app-migration"


class MigrationWebhookRule(BaseConversionRule):
    """Copy the cloud app migration webhook into a cloudAppMigration module."""

    name = "cloud-app-migration"

    def can_apply(self, descriptor: "ConnectDescriptor") -> bool:
        migration = descriptor.cloudAppMigration
        return bool(migration and migration.migrationWebhookPath)

    def apply(
        self,
        descriptor: "ConnectDescriptor",
        builder: "ManifestBuilder",
        context: "ConversionContext",
    ) -> None:
        migration = descriptor.cloudAppMigration
        if migration is None:
            return
        builder.with_connect_module(
            context.platform,
            "cloudAppMigration",
            [
                {
                    "migrationWebhookPath": migration.migrationWebhookPath,
                    "key": APP_MIGRATION_MODULE_KEY,
                }
            ],
        )
        module_name = connect_module_key(context.platform, "cloudAppMigration")
        context.report(f"Moved app migration webhook into connectModules.{module_name}")

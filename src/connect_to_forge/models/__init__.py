from .builder import ManifestBuilder, connect_module_key
from .descriptor import (
    DARE_MIGRATION_EVENT,
    CloudAppMigration,
    ConnectBase,
    ConnectDescriptor,
    ConnectModule,
    DataResidency,
    PageModule,
    Translations,
    WebhookModule,
    WebItemModule,
    WebPanelModule,
    module_shape_for,
    normalize_module_entries,
)
from .manifest import (
    App,
    AppConnect,
    AppLicensing,
    AppRuntime,
    ForgeBase,
    ForgeManifest,
    Permissions,
    Remote,
    RemoteStorage,
)

__all__ = [
    "DARE_MIGRATION_EVENT",
    "App",
    "AppConnect",
    "AppLicensing",
    "AppRuntime",
    "CloudAppMigration",
    "ConnectBase",
    "ConnectDescriptor",
    "ConnectModule",
    "DataResidency",
    "ForgeBase",
    "ForgeManifest",
    "ManifestBuilder",
    "PageModule",
    "Permissions",
    "Remote",
    "RemoteStorage",
    "Translations",
    "WebItemModule",
    "WebPanelModule",
    "WebhookModule",
    "connect_module_key",
    "module_shape_for",
    "normalize_module_entries",
]

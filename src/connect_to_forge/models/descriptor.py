"""Pydantic models for the Atlassian Connect descriptor (atlassian-connect.json)."""

import copy
from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidationError,
    field_validator,
)

# Lifecycle event whose hook is moved into the migration:dataResidency module
DARE_MIGRATION_EVENT = "dare-migration"


class ConnectBase(BaseModel):
    """
    Base class for descriptor elements.

    Unknown fields are kept so that newer descriptor features pass through
    the conversion untouched.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


# ===== MODULE PAYLOADS =====


class ConnectModule(ConnectBase):
    """
    Generic passthrough shape for a single Connect module object.

    Any module type without a dedicated shape is carried with this class.
    Validation is strict, so a payload only gets a typed shape when its
    values already have the declared types. `to_payload()` returns a copy
    of the object exactly as the descriptor declared it.
    """

    kind: ClassVar[str] = "generic"

    key: str | None = Field(
        default=None, description="Optional module key, unique within the app."
    )

    _source: dict[str, Any] = PrivateAttr(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "ConnectModule":
        """Validate a raw module object and keep a copy of it."""
        module = cls.model_validate(payload, strict=True)
        module._source = copy.deepcopy(payload)
        return module

    def to_payload(self) -> dict[str, Any]:
        """Return the module as a plain dict, as declared in the descriptor."""
        return copy.deepcopy(self._source)


class WebhookModule(ConnectModule):
    """A webhook subscription (`modules.webhooks[]`)."""

    kind: ClassVar[str] = "webhook"

    event: str | None = Field(default=None, description="Product event name.")
    url: str | None = Field(default=None, description="Relative callback URL.")
    excludeBody: bool | None = Field(
        default=None, description="Send the webhook without a request body."
    )
    filter: str | None = Field(default=None, description="JQL or event filter.")
    propertyKeys: list[str] | None = Field(
        default=None, description="Entity property keys to include."
    )


class PageModule(ConnectModule):
    """General, admin, configure and post-install pages."""

    kind: ClassVar[str] = "page"

    name: dict[str, Any] | None = Field(
        default=None, description="i18n property with the page title."
    )
    url: str | None = Field(default=None, description="Relative page URL.")
    location: str | None = Field(default=None, description="Product location.")


class WebItemModule(ConnectModule):
    """A link or button added to a product location."""

    kind: ClassVar[str] = "web-item"

    name: dict[str, Any] | None = Field(default=None, description="Item label.")
    url: str | None = Field(default=None, description="Link target.")
    location: str | None = Field(default=None, description="Product location.")
    context: str | None = Field(
        default=None, description="Whether url is relative to the app or product."
    )
    target: dict[str, Any] | None = Field(
        default=None, description="How the link opens (page, dialog, inline)."
    )


class WebPanelModule(ConnectModule):
    """An iframe panel rendered in a product location."""

    kind: ClassVar[str] = "web-panel"

    name: dict[str, Any] | None = Field(default=None, description="Panel title.")
    url: str | None = Field(default=None, description="Relative panel URL.")
    location: str | None = Field(default=None, description="Product location.")


# Closed set of module shapes; anything else is a generic ConnectModule
MODULE_SHAPES: dict[str, type[ConnectModule]] = {
    "webhooks": WebhookModule,
    "generalPages": PageModule,
    "adminPages": PageModule,
    "configurePage": PageModule,
    "postInstallPage": PageModule,
    "webItems": WebItemModule,
    "webPanels": WebPanelModule,
}


def module_shape_for(module_type: str) -> type[ConnectModule]:
    """Return the payload class used for a Connect module type."""
    return MODULE_SHAPES.get(module_type, ConnectModule)


def normalize_module_entries(module_type: str, value: Any) -> list[Any]:
    """
    Turn a descriptor module value into a list of typed module entries.

    There are no singleton modules in a Forge manifest, so a single object
    becomes a one-element list. Items that are not objects, or objects that
    do not fit the shape of their module type, are passed through as copies.

    Args:
        module_type: Connect module type (e.g. 'webhooks')
        value: The module value from the descriptor, an object or a list

    Returns:
        List of ConnectModule instances (or raw items for non-object values)
    """
    items = value if isinstance(value, list) else [value]
    shape = module_shape_for(module_type)

    entries: list[Any] = []
    for item in items:
        if not isinstance(item, dict):
            entries.append(item)
            continue
        try:
            entries.append(shape.from_payload(item))
        except ValidationError:
            # shape did not match, carry a copy of the object through untyped
            entries.append(copy.deepcopy(item))
    return entries


# ===== DESCRIPTOR SECTIONS =====


class Translations(ConnectBase):
    paths: dict[str, str] | None = Field(
        default=None, description="Locale to translation file path."
    )


class CloudAppMigration(ConnectBase):
    migrationWebhookPath: str | None = Field(
        default=None, description="Path receiving cloud-to-cloud migration events."
    )


class DataResidency(ConnectBase):
    maxMigrationDurationHours: int | float | None = Field(
        default=None, description="Upper bound for a realm migration, in hours."
    )


class ConnectDescriptor(ConnectBase):
    """
    Represents an Atlassian Connect app descriptor.

    Only the fields the converter reads are declared; everything else is
    accepted and ignored.
    """

    key: str = Field(..., description="Required app key.")
    baseUrl: str = Field(..., description="Required base URL of the app backend.")
    name: str | None = Field(default=None, description="Human readable app name.")
    scopes: list[str] = Field(
        default_factory=list, description="Ordered list of Connect scopes."
    )
    lifecycle: dict[str, str] | None = Field(
        default=None, description="Lifecycle event name to callback path."
    )
    modules: dict[str, Any] = Field(
        default_factory=dict,
        description="Module type to a module object or a list of module objects.",
    )
    translations: Translations | None = Field(default=None)
    regionBaseUrls: dict[str, Any] | None = Field(
        default=None, description="Region name to regional base URL."
    )
    cloudAppMigration: CloudAppMigration | None = Field(default=None)
    enableLicensing: bool | None = Field(default=None)
    dataResidency: DataResidency | None = Field(default=None)

    @field_validator("scopes", mode="before")
    @classmethod
    def _null_scopes_to_empty(cls, v: Any) -> Any:
        # "scopes": null declares no scopes
        return [] if v is None else v

    @property
    def display_name(self) -> str:
        return self.name or self.key

    @property
    def dare_migration_path(self) -> str | None:
        """Callback path of the data residency migration hook, if declared."""
        if not self.lifecycle:
            return None
        return self.lifecycle.get(DARE_MIGRATION_EVENT) or None

    def present_modules(self) -> dict[str, Any]:
        """Module entries whose value is not null."""
        return {k: v for k, v in self.modules.items() if v is not None}

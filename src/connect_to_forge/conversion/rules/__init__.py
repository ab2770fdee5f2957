"""Conversion rules, one per descriptor feature."""

from .data_residency import DataResidencyRule
from .licensing import LicensingRule
from .lifecycle import LifecycleRule
from .migration_webhook import MigrationWebhookRule
from .modules import ModulesRule
from .scopes import ScopesRule, to_forge_scope
from .translations import TranslationsRule
from .unsupported_modules import UnsupportedModulesRule
from .webhooks import WebhookKeyRule

__all__ = [
    "DataResidencyRule",
    "LicensingRule",
    "LifecycleRule",
    "MigrationWebhookRule",
    "ModulesRule",
    "ScopesRule",
    "TranslationsRule",
    "UnsupportedModulesRule",
    "WebhookKeyRule",
    "default_rules",
    "to_forge_scope",
]


def default_rules() -> list:
    """Built-in rules in application order.

    WebhookKeyRule must run after ModulesRule, and DataResidencyRule last
    because it rewrites the connect remote.
    """
    return [
        LifecycleRule(),
        LicensingRule(),
        ModulesRule(),
        TranslationsRule(),
        MigrationWebhookRule(),
        UnsupportedModulesRule(),
        WebhookKeyRule(),
        ScopesRule(),
        DataResidencyRule(),
    ]

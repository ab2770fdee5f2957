from typing import TYPE_CHECKING

from connect_to_forge.conversion.base_rule import BaseConversionRule
from connect_to_forge.models.builder import connect_module_key

if TYPE_CHECKING:
    from connect_to_forge.conversion.context import ConversionContext
    from connect_to_forge.models.builder import ManifestBuilder
    from connect_to_forge.models.descriptor import ConnectDescriptor

TRANSLATIONS_MODULE_KEY = "connect-translations"


class TranslationsRule(BaseConversionRule):
    """Carry translation file paths over as a translations connect module."""

    name = "translations"

    def can_apply(self, descriptor: "ConnectDescriptor") -> bool:
        translations = descriptor.translations
        return bool(translations and translations.paths)

    def apply(
        self,
        descriptor: "ConnectDescriptor",
        builder: "ManifestBuilder",
        context: "ConversionContext",
    ) -> None:
        translations = descriptor.translations
        if translations is None:
            return
        builder.with_connect_module(
            context.platform,
            "translations",
            [
                {
                    "paths": dict(translations.paths or {}),
                    "key": TRANSLATIONS_MODULE_KEY,
                }
            ],
        )
        module_name = connect_module_key(context.platform, "translations")
        context.report(f"Moved translations into connectModules.{module_name}.")

import logging
from typing import TYPE_CHECKING, Any

from connect_to_forge.config import CONNECT_REMOTE_KEY
from connect_to_forge.conversion.base_rule import BaseConversionRule
from connect_to_forge.models.descriptor import DARE_MIGRATION_EVENT
from connect_to_forge.prompts.questions import (
    egress_operations_question,
    in_scope_eud_question,
    migration_path_question,
)

if TYPE_CHECKING:
    from connect_to_forge.conversion.context import ConversionContext
    from connect_to_forge.models.builder import ManifestBuilder
    from connect_to_forge.models.descriptor import ConnectDescriptor

logger = logging.getLogger(__name__)

DATA_RESIDENCY_MODULE = "migration:dataResidency"
DATA_RESIDENCY_MODULE_KEY = "dare"

MISSING_HOOK_WARNING = (
    "Region base URLs are present but no lifecycle hook for "
    f"{DARE_MIGRATION_EVENT} event is defined."
)
DEFAULT_MIGRATION_PATH_WARNING = (
    "You should specify a new migration path because JWT auth is not "
    "supported on migration endpoints."
)
NO_OPERATIONS_NOTE = (
    "No operations selected, Forge will assume that the app is egressing "
    "end-user data to be stored on a remote back end."
)


class DataResidencyRule(BaseConversionRule):
    """Convert regionBaseUrls and the dare-migration hook for data residency.

    Forge calls the realm migration hook with its own authentication, which
    cannot be JWT, so the operator is asked for a replacement path. The
    regional base URLs become a baseUrl mapping on the connect remote, and
    the operator declares which kinds of data egress the remote performs.
    """

    name = "data-residency"

    def can_apply(self, descriptor: "ConnectDescriptor") -> bool:
        return descriptor.regionBaseUrls is not None

    def apply(
        self,
        descriptor: "ConnectDescriptor",
        builder: "ManifestBuilder",
        context: "ConversionContext",
    ) -> None:
        hook_path = descriptor.dare_migration_path
        if hook_path is None:
            context.warn(MISSING_HOOK_WARNING)
            return

        migration_path = self._resolve_migration_path(hook_path, context)
        builder.with_module(
            DATA_RESIDENCY_MODULE,
            [self._build_residency_module(descriptor, migration_path)],
        )
        context.report(f"Added {DATA_RESIDENCY_MODULE} module with path {migration_path}")

        regions = descriptor.regionBaseUrls or {}
        if not regions:
            self._logger.info("regionBaseUrls is empty, keeping the scalar baseUrl")
            return

        base_url = self._build_regional_base_url(descriptor.baseUrl, regions, context)
        operations = self._ask_operations(context)

        in_scope_eud: bool | None = None
        if "storage" in operations:
            in_scope_eud = bool(context.prompts.ask(in_scope_eud_question()))
        elif not operations:
            # operations stays unset; Forge applies its own default
            context.report(NO_OPERATIONS_NOTE)

        builder.with_remote(
            CONNECT_REMOTE_KEY,
            base_url,
            operations=operations or None,
            in_scope_eud=in_scope_eud,
        )

    def _resolve_migration_path(
        self, hook_path: str, context: "ConversionContext"
    ) -> str:
        answer = context.prompts.ask(migration_path_question())
        migration_path = str(answer or "").strip()
        if not migration_path:
            context.warn(DEFAULT_MIGRATION_PATH_WARNING)
            self._logger.debug(f"Falling back to Connect migration path {hook_path}")
            return hook_path
        return migration_path

    @staticmethod
    def _build_residency_module(
        descriptor: "ConnectDescriptor", migration_path: str
    ) -> dict[str, Any]:
        module: dict[str, Any] = {
            "key": DATA_RESIDENCY_MODULE_KEY,
            "remote": CONNECT_REMOTE_KEY,
            "path": migration_path,
        }
        residency = descriptor.dataResidency
        if residency and residency.maxMigrationDurationHours is not None:
            module["maxMigrationDurationHours"] = residency.maxMigrationDurationHours
        return module

    @staticmethod
    def _build_regional_base_url(
        default_url: str, regions: dict[str, Any], context: "ConversionContext"
    ) -> dict[str, Any]:
        base_url: dict[str, Any] = {"default": default_url}
        for region, url in regions.items():
            base_url[region] = url
            context.report(f"Added region base URL for region: {region}")
        return base_url

    @staticmethod
    def _ask_operations(context: "ConversionContext") -> list[str]:
        question = egress_operations_question()
        answer = context.prompts.ask(question) or []
        return [op for op in question.choices if op in answer]

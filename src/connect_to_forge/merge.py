"""Merging a freshly generated manifest with one that already exists on disk."""

import copy
import logging
from typing import TYPE_CHECKING, Any

from .exceptions import OperatorAbort
from .prompts.questions import ACTION_ABORT, existing_manifest_question

if TYPE_CHECKING:
    from .core.protocols import PromptSurface

logger = logging.getLogger(__name__)


def merge_manifests(fresh: Any, prior: Any) -> Any:
    """
    Recursively merge a prior manifest into a freshly generated one.

    Precedence rules, applied at every level:
    - mapping + mapping: keys of both are kept; shared keys merge recursively;
      keys only in `prior` are added after the fresh keys
    - list + list: fresh items first, then the prior items that are not
      already present, so merging a manifest into itself changes nothing
    - anything else: the fresh value wins; `prior` only fills a value that
      is missing (None) in `fresh`

    Neither argument is modified.

    Args:
        fresh: Value generated from the Connect descriptor
        prior: Value loaded from the existing manifest

    Returns:
        The merged value
    """
    if fresh is None:
        return copy.deepcopy(prior)

    if isinstance(fresh, dict) and isinstance(prior, dict):
        merged = {key: copy.deepcopy(value) for key, value in fresh.items()}
        for key, prior_value in prior.items():
            if key in merged:
                merged[key] = merge_manifests(merged[key], prior_value)
            else:
                merged[key] = copy.deepcopy(prior_value)
        return merged

    if isinstance(fresh, list) and isinstance(prior, list):
        merged_list = copy.deepcopy(fresh)
        for item in prior:
            if item not in merged_list:
                merged_list.append(copy.deepcopy(item))
        return merged_list

    return copy.deepcopy(fresh)


def has_connect_section(manifest: dict[str, Any] | None) -> bool:
    """True if the manifest already declares app.connect."""
    if not isinstance(manifest, dict):
        return False
    app = manifest.get("app")
    return isinstance(app, dict) and app.get("connect") is not None


def resolve_existing_manifest(
    fresh: dict[str, Any],
    prior: dict[str, Any] | None,
    prompts: "PromptSurface",
    output_name: str = "manifest.yml",
) -> dict[str, Any]:
    """
    Combine the generated manifest with whatever already exists at the output.

    If the prior manifest already has an app.connect section the operator
    chooses between overriding it with the fresh manifest and aborting.

    Raises:
        OperatorAbort: If the operator chooses to abort
    """
    if prior is None:
        return fresh

    if has_connect_section(prior):
        action = prompts.ask(existing_manifest_question(output_name))
        if action == ACTION_ABORT:
            raise OperatorAbort()
        print(
            "Overriding your existing manifest with a freshly generated one "
            "based on the Connect Descriptor."
        )
        print()
        logger.info(f"Discarded existing {output_name} in favour of the fresh one")
        return fresh

    logger.info(f"Merging generated manifest into existing {output_name}")
    return merge_manifests(fresh, prior)

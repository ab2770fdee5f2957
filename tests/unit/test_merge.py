"""Unit tests for manifest merging and conflict resolution."""

from __future__ import annotations

import copy

import pytest

from connect_to_forge.exceptions import OperatorAbort
from connect_to_forge.merge import (
    has_connect_section,
    merge_manifests,
    resolve_existing_manifest,
)
from connect_to_forge.prompts.scripted import ScriptedPromptSurface

FRESH = {
    "app": {
        "id": "ari:placeholder",
        "connect": {"key": "k", "remote": "connect"},
        "runtime": {"name": "nodejs20.x"},
    },
    "remotes": [{"key": "connect", "baseUrl": "https://app"}],
    "connectModules": {"jira:webhooks": [{"event": "e", "key": "webhook-1"}]},
    "permissions": {"scopes": ["read:connect-jira"]},
}


class TestMergeManifests:
    def test_merge_into_itself_is_identity(self) -> None:
        assert merge_manifests(FRESH, copy.deepcopy(FRESH)) == FRESH

    def test_prior_only_fields_are_added(self) -> None:
        prior = {
            "app": {"id": "ari:cloud:ecosystem::app/real-id"},
            "modules": {"jira:issuePanel": [{"key": "panel"}]},
            "resources": [{"key": "main", "path": "static/build"}],
        }
        merged = merge_manifests(FRESH, prior)
        assert merged["modules"] == prior["modules"]
        assert merged["resources"] == prior["resources"]

    def test_fresh_scalars_win(self) -> None:
        prior = {"app": {"id": "ari:cloud:ecosystem::app/real-id"}}
        merged = merge_manifests(FRESH, prior)
        assert merged["app"]["id"] == "ari:placeholder"

    def test_prior_fills_missing_scalar(self) -> None:
        merged = merge_manifests({"a": None, "b": 1}, {"a": 2, "b": 3})
        assert merged == {"a": 2, "b": 1}

    def test_lists_concatenate_without_duplicates(self) -> None:
        prior = {
            "permissions": {
                "scopes": ["read:connect-jira", "storage:app"],
                "external": {"fetch": {"backend": ["https://api"]}},
            }
        }
        merged = merge_manifests(FRESH, prior)
        assert merged["permissions"]["scopes"] == ["read:connect-jira", "storage:app"]
        assert merged["permissions"]["external"] == {
            "fetch": {"backend": ["https://api"]}
        }

    def test_type_mismatch_keeps_fresh(self) -> None:
        assert merge_manifests({"x": [1]}, {"x": {"y": 1}}) == {"x": [1]}

    def test_inputs_are_not_modified(self) -> None:
        fresh = copy.deepcopy(FRESH)
        prior = {"permissions": {"scopes": ["other"]}}
        merged = merge_manifests(fresh, prior)
        merged["permissions"]["scopes"].append("later")
        assert fresh == FRESH
        assert prior == {"permissions": {"scopes": ["other"]}}


class TestHasConnectSection:
    @pytest.mark.parametrize(
        "manifest,expected",
        [
            (None, False),
            ({}, False),
            ({"app": {"id": "x"}}, False),
            ({"app": "weird"}, False),
            ({"app": {"connect": {"key": "k"}}}, True),
        ],
    )
    def test_detection(self, manifest, expected: bool) -> None:
        assert has_connect_section(manifest) is expected


class TestResolveExistingManifest:
    def test_no_prior(self) -> None:
        prompts = ScriptedPromptSurface()
        assert resolve_existing_manifest(FRESH, None, prompts) is FRESH
        assert prompts.asked == []

    def test_prior_without_connect_is_merged(self) -> None:
        prompts = ScriptedPromptSurface()
        prior = {"app": {"id": "ari:real"}, "resources": [{"key": "r"}]}
        result = resolve_existing_manifest(FRESH, prior, prompts)
        assert result["resources"] == [{"key": "r"}]
        assert prompts.asked == []

    def test_conflict_override_discards_prior(self) -> None:
        prompts = ScriptedPromptSurface({"existing_manifest_action": "Override"})
        prior = {"app": {"connect": {"key": "old"}}, "resources": [{"key": "r"}]}
        result = resolve_existing_manifest(FRESH, prior, prompts)
        assert result == FRESH
        assert prompts.asked_ids() == ["existing_manifest_action"]

    def test_conflict_abort(self) -> None:
        prompts = ScriptedPromptSurface({"existing_manifest_action": "Abort"})
        prior = {"app": {"connect": {"key": "old"}}}
        with pytest.raises(OperatorAbort):
            resolve_existing_manifest(FRESH, prior, prompts)

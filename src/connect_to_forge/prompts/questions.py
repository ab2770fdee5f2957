"""Catalogue of the questions the converter can ask the operator."""

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

QuestionKind = Literal["text", "select", "checkbox", "confirm"]

MIGRATION_PATH = "migration_path"
EGRESS_OPERATIONS = "egress_operations"
IN_SCOPE_EUD = "in_scope_eud"
EXISTING_MANIFEST_ACTION = "existing_manifest_action"
PROCEED_WITH_WARNINGS = "proceed_with_warnings"

EGRESS_OPERATION_CHOICES = ["storage", "compute", "fetch", "other"]

ACTION_OVERRIDE = "Override"
ACTION_ABORT = "Abort"


class Question(BaseModel):
    """A closed-ended prompt together with its documented default answer."""

    id: str = Field(..., description="Stable identifier used by scripted answers.")
    kind: QuestionKind
    message: str
    choices: list[str] = Field(default_factory=list)
    default: Any = None

    @model_validator(mode="after")
    def _check_choices(self) -> "Question":
        if self.kind in ("select", "checkbox") and not self.choices:
            raise ValueError(f"Question '{self.id}' of kind {self.kind} needs choices")
        if self.kind == "select" and self.default not in self.choices:
            raise ValueError(
                f"Default '{self.default}' of question '{self.id}' is not a choice"
            )
        return self


def migration_path_question() -> Question:
    return Question(
        id=MIGRATION_PATH,
        kind="text",
        message=(
            "JWT auth is not supported on migration endpoints. Enter the new "
            "migrations path (leave empty to use the default path same as "
            "Connect and update it later):"
        ),
        default="",
    )


def egress_operations_question() -> Question:
    return Question(
        id=EGRESS_OPERATIONS,
        kind="checkbox",
        message=(
            "What is the purpose of the data being egressed? See "
            "https://developer.atlassian.com/platform/forge/manifest-reference/"
            "remotes/#properties for more information."
        ),
        choices=list(EGRESS_OPERATION_CHOICES),
        default=[],
    )


def in_scope_eud_question() -> Question:
    return Question(
        id=IN_SCOPE_EUD,
        kind="confirm",
        message="Does your app egress end-user data to store it on a remote location?",
        default=True,
    )


def existing_manifest_question(output: str) -> Question:
    return Question(
        id=EXISTING_MANIFEST_ACTION,
        kind="select",
        message=(
            f"We have detected that you already have a app.connect section in "
            f"your {output}. How do you want your {output} to be modified?"
        ),
        choices=[ACTION_OVERRIDE, ACTION_ABORT],
        default=ACTION_OVERRIDE,
    )


def proceed_with_warnings_question() -> Question:
    return Question(
        id=PROCEED_WITH_WARNINGS,
        kind="confirm",
        message="Do you wish to proceed with manifest generation despite the warnings?",
        default=False,
    )

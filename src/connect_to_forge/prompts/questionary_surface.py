"""Interactive prompt surface backed by questionary."""

import logging
from typing import Any

import questionary
from questionary import Style

from connect_to_forge.exceptions import OperatorAbort

from .questions import Question

logger = logging.getLogger(__name__)

custom_style = Style(
    [
        ("qmark", "fg:#0052cc bold"),
        ("question", "bold"),
        ("answer", "fg:#0052cc bold"),
        ("pointer", "fg:#0052cc bold"),
        ("highlighted", "fg:#0052cc bold"),
        ("selected", "fg:#0052cc"),
    ]
)


class QuestionaryPromptSurface:
    """Asks questions on the terminal and blocks until they are answered."""

    def __init__(self, style: Style | None = None):
        self._style = style or custom_style
        self._logger = logger.getChild(self.__class__.__name__)

    def ask(self, question: Question) -> Any:
        """
        Render the question and return the operator's answer.

        Raises:
            OperatorAbort: If the prompt is cancelled (Ctrl-C / EOF)
        """
        if question.kind == "text":
            prompt = questionary.text(
                question.message,
                default=question.default or "",
                style=self._style,
            )
        elif question.kind == "select":
            prompt = questionary.select(
                question.message,
                choices=question.choices,
                default=question.default,
                style=self._style,
            )
        elif question.kind == "checkbox":
            prompt = questionary.checkbox(
                question.message,
                choices=[
                    questionary.Choice(c, checked=c in (question.default or []))
                    for c in question.choices
                ],
                style=self._style,
            )
        else:
            prompt = questionary.confirm(
                question.message,
                default=bool(question.default),
                style=self._style,
            )

        answer = prompt.ask()

        # questionary returns None when the prompt is cancelled
        if answer is None:
            raise OperatorAbort("Prompt cancelled, aborting without writing output.")

        self._logger.debug(f"Operator answered '{question.id}' with {answer!r}")
        return answer

import logging
from collections.abc import Mapping
from typing import Any

from .questions import Question

logger = logging.getLogger(__name__)


class ScriptedPromptSurface:
    """
    Deterministic prompt surface for tests and non-interactive runs.

    Answers come from a prepared mapping keyed by question id; any question
    without a prepared answer receives its documented default.
    """

    def __init__(self, answers: Mapping[str, Any] | None = None):
        self._answers = dict(answers or {})
        self._logger = logger.getChild(self.__class__.__name__)
        self.asked: list[Question] = []

    def ask(self, question: Question) -> Any:
        self.asked.append(question)
        if question.id in self._answers:
            answer = self._answers[question.id]
        else:
            answer = question.default

        if question.kind == "checkbox":
            answer = [choice for choice in answer or [] if choice in question.choices]
        elif question.kind == "confirm":
            answer = bool(answer)
        elif answer is None:
            answer = ""

        self._logger.debug(f"Answered '{question.id}' with {answer!r}")
        return answer

    def asked_ids(self) -> list[str]:
        return [q.id for q in self.asked]

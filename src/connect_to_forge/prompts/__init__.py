"""Operator prompts used to disambiguate the conversion."""

from .questions import Question
from .scripted import ScriptedPromptSurface

__all__ = ["Question", "ScriptedPromptSurface"]

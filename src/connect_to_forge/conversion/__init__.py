"""Connect descriptor to Forge manifest conversion engine."""

from .base_rule import BaseConversionRule
from .context import SUPPORTED_PLATFORMS, ConversionContext
from .engine import ConversionEngine, ConversionResult

__all__ = [
    "BaseConversionRule",
    "ConversionContext",
    "ConversionEngine",
    "ConversionResult",
    "SUPPORTED_PLATFORMS",
]

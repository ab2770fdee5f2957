import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from connect_to_forge.core.protocols import ConversionRule

if TYPE_CHECKING:
    from connect_to_forge.conversion.context import ConversionContext
    from connect_to_forge.models.builder import ManifestBuilder
    from connect_to_forge.models.descriptor import ConnectDescriptor

logger = logging.getLogger(__name__)


class BaseConversionRule(ConversionRule, ABC):
    """
    Base class for conversion rules.

    Subclasses must implement:
    - can_apply(): whether the descriptor has anything for this rule
    - apply(): write the rule's part of the manifest
    """

    name: str = "rule"

    def __init__(self):
        self._logger = logger.getChild(self.__class__.__name__)

    @abstractmethod
    def can_apply(self, descriptor: "ConnectDescriptor") -> bool:
        pass

    @abstractmethod
    def apply(
        self,
        descriptor: "ConnectDescriptor",
        builder: "ManifestBuilder",
        context: "ConversionContext",
    ) -> None:
        pass

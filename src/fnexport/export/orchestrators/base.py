"""
Pipeline Generator Interface

All CI engine implementations must inherit from this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

from fnexport.export.domain.models import PipelineConfig
from fnexport.shared.domain.exceptions import GeneratorNotInitializedError

G = TypeVar("G", bound="PipelineGenerator")


class PipelineGenerator(ABC):
    """
    Interface for CI engine manifest builders.

    A builder is init()-ed once from a PipelineConfig, which builds its
    whole manifest tree, and generate() then serializes that tree.
    Calling init() again replaces the tree.
    """

    @abstractmethod
    def init(self: G, config: PipelineConfig) -> G:
        """
        Build the manifest tree for a config.

        Args:
            config: Engine-agnostic pipeline description

        Returns:
            The builder itself, so init and generate can be chained
        """
        pass

    @abstractmethod
    def generate(self) -> bytes:
        """
        Serialize the manifest tree.

        Returns:
            UTF-8 encoded YAML, possibly holding several documents

        Raises:
            GeneratorNotInitializedError: If init() was never called
            ManifestSerializationError: If the tree cannot be serialized
        """
        pass

    @property
    @abstractmethod
    def is_initialized(self) -> bool:
        """True once init() has built a tree."""
        pass

    def _require_initialized(self) -> None:
        if not self.is_initialized:
            raise GeneratorNotInitializedError(
                f"{type(self).__name__}.generate() called before init()"
            )

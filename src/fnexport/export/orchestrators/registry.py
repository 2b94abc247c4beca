"""
Orchestrator Registry for pipeline generators.

Registry-based factory pattern to eliminate if/elif chains.
Generators self-register on module import.
"""

from collections.abc import Callable
from typing import Any

from fnexport.export.domain.enums import Orchestrator
from fnexport.shared.domain.exceptions import UnsupportedOrchestratorError

from .base import PipelineGenerator


class OrchestratorRegistry:
    """Registry-based factory for pipeline generators."""

    _generators: dict[Orchestrator, Callable[..., PipelineGenerator]] = {}

    @classmethod
    def register(cls, orchestrator: Orchestrator, factory: Callable[..., PipelineGenerator]) -> None:
        """
        Register a generator factory.

        Args:
            orchestrator: The engine enum value
            factory: Callable returning a fresh PipelineGenerator

        Example:
            OrchestratorRegistry.register(Orchestrator.TEKTON, TektonPipelineGenerator)
        """
        cls._generators[orchestrator] = factory

    @classmethod
    def create(cls, orchestrator: Orchestrator | str, **kwargs: Any) -> PipelineGenerator:
        """
        Create a generator instance using the registered factory.

        Args:
            orchestrator: Engine enum value or name
            **kwargs: Naming constants forwarded to the generator

        Returns:
            A fresh, un-initialized PipelineGenerator

        Raises:
            UnsupportedOrchestratorError: If the engine is unknown or not registered
        """
        if isinstance(orchestrator, str):
            orchestrator = Orchestrator.from_string(orchestrator)

        if orchestrator not in cls._generators:
            available = [o.value for o in cls.available()]
            raise UnsupportedOrchestratorError(
                f"No generator registered for: {orchestrator.value}. Available: {available}",
                {"orchestrator": orchestrator.value},
            )

        factory = cls._generators[orchestrator]
        return factory(**kwargs)

    @classmethod
    def available(cls) -> list[Orchestrator]:
        """Get list of registered engines."""
        return list(cls._generators.keys())

    @classmethod
    def is_registered(cls, orchestrator: Orchestrator) -> bool:
        """Check if an engine is registered."""
        return orchestrator in cls._generators

    @classmethod
    def unregister(cls, orchestrator: Orchestrator) -> None:
        """Remove a registration (mainly for testing)."""
        cls._generators.pop(orchestrator, None)

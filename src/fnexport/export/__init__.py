"""
Export module - CI pipeline manifest generation.

Public API:
- PipelineConfig: Engine-agnostic job description
- Orchestrator: Enum of supported CI engines
- PipelineGenerator / OrchestratorRegistry: Generator contract and lookup
- PipelineExporter: Select, generate and write a manifest
"""

from fnexport.export.domain.enums import Orchestrator
from fnexport.export.domain.models import PipelineConfig
from fnexport.export.orchestrators import (
    GitHubActionsGenerator,
    GitLabCIGenerator,
    OrchestratorRegistry,
    PipelineGenerator,
    TektonPipelineGenerator,
)
from fnexport.export.application.exporter import PipelineExporter

__all__ = [
    "PipelineConfig",
    "Orchestrator",
    "PipelineGenerator",
    "OrchestratorRegistry",
    "TektonPipelineGenerator",
    "GitHubActionsGenerator",
    "GitLabCIGenerator",
    "PipelineExporter",
]

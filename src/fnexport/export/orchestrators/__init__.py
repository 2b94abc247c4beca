"""
Pipeline generators, one per CI engine.

Importing this package registers every built-in generator with
OrchestratorRegistry.
"""

from .base import PipelineGenerator
from .registry import OrchestratorRegistry
from .tekton import TektonPipelineGenerator
from .github_actions import GitHubActionsGenerator
from .gitlab_ci import GitLabCIGenerator

__all__ = [
    "PipelineGenerator",
    "OrchestratorRegistry",
    "TektonPipelineGenerator",
    "GitHubActionsGenerator",
    "GitLabCIGenerator",
]

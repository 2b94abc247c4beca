"""
GitHub Actions workflow generator.

Runs the function image as a docker action. GitHub mounts the checked-out
repository as the container's working directory, so paths stay relative.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Final, List, Optional

from fnexport.export.application.documents import dump_document, join_documents
from fnexport.export.application.paths import join_workspace_path
from fnexport.export.domain.enums import Orchestrator
from fnexport.export.domain.models import PipelineConfig
from fnexport.shared.domain.base_model import BaseManifestModel, manifest_field

from .base import PipelineGenerator
from .registry import OrchestratorRegistry

DEFAULT_WORKFLOW_NAME: Final[str] = "kpt"
DEFAULT_JOB_ID: Final[str] = "Kpt"
DEFAULT_BRANCHES: Final[tuple[str, ...]] = ("master",)
RUNNER: Final[str] = "ubuntu-latest"
CHECKOUT_ACTION: Final[str] = "actions/checkout@v2"
WORKSPACE_ROOT: Final[str] = "."


@dataclass
class GitHubActionsTrigger(BaseManifestModel):
    branches: List[str] = field(default_factory=list)


@dataclass
class GitHubActionsStepArgs(BaseManifestModel):
    args: str = ""


@dataclass
class GitHubActionsStep(BaseManifestModel):
    name: str = ""
    uses: str = ""
    with_: Optional[GitHubActionsStepArgs] = manifest_field(key="with")


@dataclass
class GitHubActionsJob(BaseManifestModel):
    runs_on: str = manifest_field(key="runs-on", default="")
    steps: List[GitHubActionsStep] = field(default_factory=list)


@dataclass
class GitHubActionsWorkflow(BaseManifestModel):
    """Workflow file under .github/workflows."""

    name: str = ""
    on: Dict[str, GitHubActionsTrigger] = field(default_factory=dict)
    jobs: Dict[str, GitHubActionsJob] = field(default_factory=dict)


def build_command(config: PipelineConfig, workspace_root: str = WORKSPACE_ROOT) -> str:
    """Space-joined function command with paths relative to the checkout."""
    parts = ["run", join_workspace_path(workspace_root, config.dir)]
    for fn_path in config.fn_paths:
        parts.extend(["--fn-path", join_workspace_path(workspace_root, fn_path)])
    return " ".join(parts)


class GitHubActionsGenerator(PipelineGenerator):
    """Generates a single GitHub Actions workflow document."""

    def __init__(
        self,
        workflow_name: str = DEFAULT_WORKFLOW_NAME,
        job_id: str = DEFAULT_JOB_ID,
        branches: tuple[str, ...] = DEFAULT_BRANCHES,
    ) -> None:
        self.workflow_name = workflow_name
        self.job_id = job_id
        self.branches = tuple(branches)
        self._workflow: Optional[GitHubActionsWorkflow] = None

    @property
    def is_initialized(self) -> bool:
        return self._workflow is not None

    @property
    def workflow(self) -> Optional[GitHubActionsWorkflow]:
        return self._workflow

    def init(self, config: PipelineConfig) -> GitHubActionsGenerator:
        steps = [
            GitHubActionsStep(name="Checkout", uses=CHECKOUT_ACTION),
            GitHubActionsStep(
                name="Run all kpt functions",
                uses=f"docker://{config.image}",
                with_=GitHubActionsStepArgs(args=build_command(config)),
            ),
        ]

        self._workflow = GitHubActionsWorkflow(
            name=self.workflow_name,
            on={"push": GitHubActionsTrigger(branches=list(self.branches))},
            jobs={self.job_id: GitHubActionsJob(runs_on=RUNNER, steps=steps)},
        )
        return self

    def generate(self) -> bytes:
        self._require_initialized()
        return join_documents([dump_document(self._workflow)])


OrchestratorRegistry.register(Orchestrator.GITHUB_ACTIONS, GitHubActionsGenerator)

"""
GitLab CI pipeline generator.

The job runs docker-in-docker and starts the function image with the
project directory mounted at /app.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Final, List, Optional

from fnexport.export.application.documents import dump_document, join_documents
from fnexport.export.application.paths import join_workspace_path
from fnexport.export.domain.enums import Orchestrator
from fnexport.export.domain.models import PipelineConfig
from fnexport.shared.domain.base_model import BaseManifestModel
from fnexport.shared.domain.exceptions import ValidationError

from .base import PipelineGenerator
from .registry import OrchestratorRegistry

DEFAULT_STAGE: Final[str] = "run-kpt-functions"
DEFAULT_JOB_ID: Final[str] = "kpt"
DOCKER_IMAGE: Final[str] = "docker"
DIND_SERVICE: Final[str] = "docker:dind"
WORKSPACE_ROOT: Final[str] = "/app"
DOCKER_SOCKET_PATH: Final[str] = "/var/run/docker.sock"
# Top-level keys GitLab reads as pipeline settings rather than jobs
RESERVED_KEYS: Final[frozenset[str]] = frozenset(
    {"default", "include", "stages", "variables", "workflow", "image", "services", "cache", "before_script", "after_script"}
)


@dataclass
class GitLabJob(BaseManifestModel):
    stage: str = ""
    image: str = ""
    services: List[str] = field(default_factory=list)
    script: List[str] = field(default_factory=list)


@dataclass
class GitLabPipeline(BaseManifestModel):
    """.gitlab-ci.yml document. Jobs sit at the top level next to stages."""

    stages: List[str] = field(default_factory=list)
    jobs: Dict[str, GitLabJob] = field(default_factory=dict)

    def to_manifest(self) -> Dict[str, Any]:
        result = super().to_manifest()
        jobs = result.pop("jobs", {})
        result.update(jobs)
        return result


def build_script(config: PipelineConfig, workspace_root: str = WORKSPACE_ROOT) -> str:
    """docker run command for the function image."""
    parts = [
        "docker",
        "run",
        "-v",
        f"$PWD:{workspace_root}",
        "-v",
        f"{DOCKER_SOCKET_PATH}:{DOCKER_SOCKET_PATH}",
        config.image,
        "run",
        join_workspace_path(workspace_root, config.dir),
    ]
    for fn_path in config.fn_paths:
        parts.extend(["--fn-path", join_workspace_path(workspace_root, fn_path)])
    return " ".join(parts)


class GitLabCIGenerator(PipelineGenerator):
    """Generates a single .gitlab-ci.yml document."""

    def __init__(self, stage: str = DEFAULT_STAGE, job_id: str = DEFAULT_JOB_ID) -> None:
        if not job_id or job_id in RESERVED_KEYS:
            raise ValidationError(
                f"Invalid GitLab job id: '{job_id}'",
                {"job_id": job_id, "reserved": sorted(RESERVED_KEYS)},
            )
        self.stage = stage
        self.job_id = job_id
        self._pipeline: Optional[GitLabPipeline] = None

    @property
    def is_initialized(self) -> bool:
        return self._pipeline is not None

    @property
    def pipeline(self) -> Optional[GitLabPipeline]:
        return self._pipeline

    def init(self, config: PipelineConfig) -> GitLabCIGenerator:
        job = GitLabJob(
            stage=self.stage,
            image=DOCKER_IMAGE,
            services=[DIND_SERVICE],
            script=[build_script(config)],
        )
        self._pipeline = GitLabPipeline(stages=[self.stage], jobs={self.job_id: job})
        return self

    def generate(self) -> bytes:
        self._require_initialized()
        return join_documents([dump_document(self._pipeline)])


OrchestratorRegistry.register(Orchestrator.GITLAB_CI, GitLabCIGenerator)

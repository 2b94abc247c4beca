"""
Tekton pipeline generator.

Emits two documents: a Task that runs the function image against the
workspace, and a Pipeline that references the Task by name. Tekton needs
both as separately registered objects, so the Task is a sibling document
rather than being embedded.

See:
    https://github.com/tektoncd/pipeline/blob/main/docs/pipelines.md
    https://github.com/tektoncd/pipeline/blob/main/docs/tasks.md
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, List, Optional

from fnexport.export.application.documents import dump_document, join_documents
from fnexport.export.application.paths import join_workspace_path
from fnexport.export.domain.enums import Orchestrator
from fnexport.export.domain.models import PipelineConfig
from fnexport.shared.domain.base_model import BaseManifestModel
from fnexport.shared.domain.exceptions import ValidationError

from .base import PipelineGenerator
from .registry import OrchestratorRegistry

TEKTON_API_VERSION: Final[str] = "tekton.dev/v1beta1"

DEFAULT_TASK_NAME: Final[str] = "run-kpt-functions"
DEFAULT_PIPELINE_TASK_NAME: Final[str] = "kpt"
SHARED_WORKSPACE_NAME: Final[str] = "shared-workspace"
SOURCE_WORKSPACE_NAME: Final[str] = "source"
SOURCE_MOUNT_PATH: Final[str] = "/source"

# Substituted by Tekton with the mounted path of the "source" workspace
WORKSPACE_ROOT: Final[str] = "$(workspaces.source.path)"

DOCKER_SOCKET_VOLUME: Final[str] = "docker-socket"
DOCKER_SOCKET_PATH: Final[str] = "/var/run/docker.sock"


# =============================================================================
# Manifest nodes
# =============================================================================


@dataclass
class TektonMetadata(BaseManifestModel):
    """Metadata describing a resource object."""

    name: str = ""


@dataclass
class TektonWorkspace(BaseManifestModel):
    """
    A shared workspace.

    Owned by a task it declares a mount path; bound in a pipeline task it
    references a pipeline-level workspace by name. Never both.
    """

    name: str = ""
    mount_path: Optional[str] = None
    workspace: Optional[str] = None

    def __post_init__(self) -> None:
        if self.mount_path and self.workspace:
            raise ValidationError(
                f"Workspace '{self.name}' cannot both declare a mount path and reference a workspace"
            )


@dataclass
class TektonPipelineTaskRef(BaseManifestModel):
    """taskRef of a pipeline task."""

    name: str = ""


@dataclass
class TektonPipelineTask(BaseManifestModel):
    """A task entry in a Pipeline spec."""

    name: str = ""
    task_ref: Optional[TektonPipelineTaskRef] = None
    run_after: List[str] = field(default_factory=list)
    workspaces: List[TektonWorkspace] = field(default_factory=list)


@dataclass
class TektonPipelineSpec(BaseManifestModel):
    workspaces: List[TektonWorkspace] = field(default_factory=list)
    tasks: List[TektonPipelineTask] = field(default_factory=list)


@dataclass
class TektonPipeline(BaseManifestModel):
    """Pipeline object."""

    api_version: str = TEKTON_API_VERSION
    kind: str = "Pipeline"
    metadata: Optional[TektonMetadata] = None
    spec: Optional[TektonPipelineSpec] = None


@dataclass
class TektonVolumeMount(BaseManifestModel):
    """Mounts a volume to a path."""

    name: str = ""
    mount_path: str = ""


@dataclass
class TektonVolumeHostPath(BaseManifestModel):
    """Path and file type of a file on the host."""

    path: str = ""
    type: str = ""


@dataclass
class TektonVolume(BaseManifestModel):
    """A mountable volume on the host."""

    name: str = ""
    host_path: Optional[TektonVolumeHostPath] = None


@dataclass
class TektonStep(BaseManifestModel):
    """A step in a Task spec."""

    name: str = ""
    image: str = ""
    args: List[str] = field(default_factory=list)
    volume_mounts: List[TektonVolumeMount] = field(default_factory=list)


@dataclass
class TektonTaskSpec(BaseManifestModel):
    workspaces: List[TektonWorkspace] = field(default_factory=list)
    steps: List[TektonStep] = field(default_factory=list)
    volumes: List[TektonVolume] = field(default_factory=list)


@dataclass
class TektonTask(BaseManifestModel):
    """Task object."""

    api_version: str = TEKTON_API_VERSION
    kind: str = "Task"
    metadata: Optional[TektonMetadata] = None
    spec: Optional[TektonTaskSpec] = None


@dataclass(frozen=True)
class TektonTaskConfig:
    """Everything needed to build the Task document."""

    pipeline_config: PipelineConfig
    name: str
    workspace_name: str = SOURCE_WORKSPACE_NAME
    workspace_root: str = WORKSPACE_ROOT


# =============================================================================
# Generator
# =============================================================================


def build_step_args(config: PipelineConfig, workspace_root: str = WORKSPACE_ROOT) -> List[str]:
    """
    Command line for the function image.

    ["run", <root>/<dir>] followed by one "--fn-path <root>/<path>" pair per
    fn path, in input order.
    """
    args = ["run", join_workspace_path(workspace_root, config.dir)]
    for fn_path in config.fn_paths:
        args.extend(["--fn-path", join_workspace_path(workspace_root, fn_path)])
    return args


def build_task(config: TektonTaskConfig) -> TektonTask:
    """Build the Task running the function image with the docker socket mounted."""
    volume_mount = TektonVolumeMount(name=DOCKER_SOCKET_VOLUME, mount_path=DOCKER_SOCKET_PATH)

    step = TektonStep(
        name=config.name,
        image=config.pipeline_config.image,
        args=build_step_args(config.pipeline_config, config.workspace_root),
        volume_mounts=[volume_mount],
    )

    volume = TektonVolume(
        name=DOCKER_SOCKET_VOLUME,
        host_path=TektonVolumeHostPath(path=DOCKER_SOCKET_PATH, type="Socket"),
    )

    workspace = TektonWorkspace(name=config.workspace_name, mount_path=SOURCE_MOUNT_PATH)

    return TektonTask(
        metadata=TektonMetadata(name=config.name),
        spec=TektonTaskSpec(
            workspaces=[workspace],
            steps=[step],
            volumes=[volume],
        ),
    )


class TektonPipelineGenerator(PipelineGenerator):
    """Generates a Tekton Task + Pipeline multi-document manifest."""

    def __init__(
        self,
        task_name: str = DEFAULT_TASK_NAME,
        pipeline_task_name: str = DEFAULT_PIPELINE_TASK_NAME,
        workspace_name: str = SHARED_WORKSPACE_NAME,
    ) -> None:
        self.task_name = task_name
        self.pipeline_task_name = pipeline_task_name
        self.workspace_name = workspace_name
        self._pipeline: Optional[TektonPipeline] = None
        self._task: Optional[TektonTask] = None

    @property
    def is_initialized(self) -> bool:
        return self._pipeline is not None and self._task is not None

    @property
    def pipeline(self) -> Optional[TektonPipeline]:
        return self._pipeline

    @property
    def task(self) -> Optional[TektonTask]:
        return self._task

    def init(self, config: PipelineConfig) -> TektonPipelineGenerator:
        pipeline_workspace = TektonWorkspace(name=self.workspace_name)

        task = build_task(TektonTaskConfig(pipeline_config=config, name=self.task_name))

        # Threads the pipeline-level workspace into the task's "source" slot
        pipeline_task_workspace = TektonWorkspace(
            name=SOURCE_WORKSPACE_NAME,
            workspace=self.workspace_name,
        )
        pipeline_task = TektonPipelineTask(
            name=self.pipeline_task_name,
            task_ref=TektonPipelineTaskRef(name=self.task_name),
            workspaces=[pipeline_task_workspace],
        )

        self._task = task
        self._pipeline = TektonPipeline(
            metadata=TektonMetadata(name=self.task_name),
            spec=TektonPipelineSpec(
                workspaces=[pipeline_workspace],
                tasks=[pipeline_task],
            ),
        )
        return self

    def documents(self) -> List[BaseManifestModel]:
        """Documents in output order: Task first, then Pipeline."""
        self._require_initialized()
        return [self._task, self._pipeline]

    def generate(self) -> bytes:
        """Multi-doc YAML holding the Task and the Pipeline that references it."""
        return join_documents([dump_document(document) for document in self.documents()])


OrchestratorRegistry.register(Orchestrator.TEKTON, TektonPipelineGenerator)

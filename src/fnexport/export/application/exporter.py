"""
Pipeline Exporter - selects a generator and writes its manifest.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, TextIO

from fnexport.export.domain.enums import Orchestrator
from fnexport.export.domain.models import PipelineConfig
from fnexport.export.orchestrators import OrchestratorRegistry
from fnexport.shared.infrastructure.config import Settings, settings as default_settings
from fnexport.shared.infrastructure.file_operations import atomic_write
from fnexport.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class PipelineExporter:
    """
    Generates a CI manifest for one engine.

    Errors from the generator propagate unchanged.
    """

    def __init__(
        self,
        orchestrator: Orchestrator | str | None = None,
        config: Optional[Settings] = None,
        **generator_options: Any,
    ) -> None:
        self._settings = config or default_settings
        name = orchestrator or self._settings.default_orchestrator
        self._orchestrator = name if isinstance(name, Orchestrator) else Orchestrator.from_string(name)
        self._generator_options = generator_options

    @property
    def orchestrator(self) -> Orchestrator:
        return self._orchestrator

    def build_config(self, dir: str, fn_paths: Optional[list[str]] = None, image: Optional[str] = None) -> PipelineConfig:
        """PipelineConfig with the configured default image unless one is given."""
        return PipelineConfig(
            dir=dir,
            fn_paths=tuple(fn_paths or ()),
            image=image or self._settings.default_image,
        )

    def export(self, config: PipelineConfig) -> bytes:
        """Generate the manifest bytes for config."""
        generator = OrchestratorRegistry.create(self._orchestrator, **self._generator_options)
        return generator.init(config).generate()

    def export_to_file(self, config: PipelineConfig, path: Path) -> Path:
        """Generate and atomically write the manifest to path."""
        output = self.export(config)
        path = Path(path)

        with atomic_write(path, binary=True) as f:
            f.write(output)

        logger.info(
            "pipeline_exported",
            orchestrator=self._orchestrator.value,
            size=len(output),
            target=str(path),
        )
        return path

    def export_to_stream(self, config: PipelineConfig, stream: TextIO) -> None:
        """Generate and write the manifest as text to stream."""
        output = self.export(config)
        stream.write(output.decode("utf-8"))

        logger.info(
            "pipeline_exported",
            orchestrator=self._orchestrator.value,
            size=len(output),
            target="stream",
        )

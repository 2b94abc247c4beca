"""
Export domain models.

PipelineConfig is the engine-agnostic description of the job every
generated pipeline runs: a directory of configuration inside the
workspace, extra function-search paths, and the image to execute.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from fnexport.export.application.paths import escapes_root
from fnexport.shared.domain.exceptions import SecurityError, ValidationError


@dataclass(frozen=True)
class PipelineConfig:
    """
    Immutable input for pipeline generators.

    Attributes:
        dir: Directory relative to the workspace root ("" is the root itself)
        fn_paths: Ordered function-search paths relative to the workspace root
        image: Container image run by the generated step
    """

    dir: str
    fn_paths: Sequence[str] = field(default_factory=tuple)
    image: str = ""

    def __post_init__(self) -> None:
        """Validate on creation (fail fast)."""
        if not isinstance(self.dir, str):
            raise ValidationError("dir must be a string", {"dir": repr(self.dir)})
        if not self.image or not isinstance(self.image, str):
            raise ValidationError("image must be a non-empty string")
        if isinstance(self.fn_paths, str):
            raise ValidationError("fn_paths must be a sequence of strings, not a string")

        fn_paths = tuple(self.fn_paths)
        for fn_path in fn_paths:
            if not isinstance(fn_path, str):
                raise ValidationError("fn_paths entries must be strings", {"fn_path": repr(fn_path)})

        for path in (self.dir, *fn_paths):
            if escapes_root(path):
                raise SecurityError(f"Path escapes the workspace root: {path}")

        object.__setattr__(self, "fn_paths", fn_paths)

"""
Kptfile model.

Written at the root of a materialized package; the upstream section keeps
the literal input and the filename pattern so the package can be traced
back to (and rebuilt from) the stream it came from.
"""

from dataclasses import dataclass
from typing import Final, Optional

from fnexport.shared.domain.base_model import BaseManifestModel

KPTFILE_NAME: Final[str] = "Kptfile"
KPTFILE_API_VERSION: Final[str] = "kpt.dev/v1alpha1"
STDIN_ORIGIN: Final[str] = "stdin"


@dataclass
class KptfileStdin(BaseManifestModel):
    filename_pattern: str = ""
    original: str = ""


@dataclass
class KptfileUpstream(BaseManifestModel):
    type: str = ""
    stdin: Optional[KptfileStdin] = None


@dataclass
class KptfileMetadata(BaseManifestModel):
    name: str = ""


@dataclass
class Kptfile(BaseManifestModel):
    api_version: str = KPTFILE_API_VERSION
    kind: str = "Kptfile"
    metadata: Optional[KptfileMetadata] = None
    upstream: Optional[KptfileUpstream] = None


def stdin_kptfile(name: str, original: str, filename_pattern: str) -> Kptfile:
    """Kptfile recording a package read from an input stream."""
    return Kptfile(
        metadata=KptfileMetadata(name=name),
        upstream=KptfileUpstream(
            type=STDIN_ORIGIN,
            stdin=KptfileStdin(filename_pattern=filename_pattern, original=original),
        ),
    )

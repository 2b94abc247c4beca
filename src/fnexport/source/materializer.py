"""
Resource Stream Materializer

Reads a stream of YAML resources into a local package directory: one file
per resource (named from a filename pattern), plus a Kptfile recording the
literal input and the pattern used.
"""

from __future__ import annotations

import copy
import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Any, Dict, Final, List, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from fnexport.export.application.documents import dump_document, join_documents
from fnexport.printers.base import Event
from fnexport.shared.domain.exceptions import ManifestSerializationError, MaterializeError
from fnexport.shared.infrastructure.file_operations import atomic_write, validate_path_within_root
from fnexport.shared.infrastructure.logging import get_logger

from .kptfile import KPTFILE_NAME, stdin_kptfile

logger = get_logger(__name__)

DEFAULT_FILENAME_PATTERN: Final[str] = "%n_%k.yaml"
PATH_ANNOTATION: Final[str] = "config.kubernetes.io/path"
INDEX_ANNOTATION: Final[str] = "config.kubernetes.io/index"

KIND_FMT: Final[str] = "%k"
NAME_FMT: Final[str] = "%n"
NAMESPACE_FMT: Final[str] = "%s"

DIR_MODE: Final[int] = 0o700
FILE_MODE: Final[int] = 0o600


@dataclass
class MaterializeResult:
    """Outcome of materializing a resource stream."""

    package_path: Path
    files: List[str] = field(default_factory=list)
    resource_count: int = 0
    kptfile_path: Optional[Path] = None

    def events(self) -> List[Event]:
        """Progress events for printers."""
        events = [
            Event(type="resource_written", message=name, fields={"package": str(self.package_path)})
            for name in self.files
        ]
        if self.kptfile_path:
            events.append(
                Event(
                    type="kptfile_written",
                    message=str(self.kptfile_path),
                    fields={"resources": self.resource_count, "files": len(self.files)},
                )
            )
        return events


def expand_filename_pattern(pattern: str, resource: Dict[str, Any]) -> str:
    """
    Expand %k, %n and %s with the resource's kind, name and namespace.

    All substituted values are lower-cased; missing values expand to "".
    """
    metadata = resource.get("metadata") or {}
    replacements = {
        KIND_FMT: str(resource.get("kind") or "").lower(),
        NAME_FMT: str(metadata.get("name") or "").lower(),
        NAMESPACE_FMT: str(metadata.get("namespace") or "").lower(),
    }

    result = pattern
    for token, value in replacements.items():
        result = result.replace(token, value)
    return result


def _annotations(resource: Dict[str, Any]) -> Dict[str, Any]:
    metadata = resource.get("metadata")
    if not isinstance(metadata, dict):
        return {}
    annotations = metadata.get("annotations")
    return annotations if isinstance(annotations, dict) else {}


def strip_reader_annotations(resource: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of resource without path/index annotations."""
    cleaned = copy.deepcopy(resource)
    annotations = _annotations(cleaned)
    if not annotations:
        return cleaned

    annotations.pop(PATH_ANNOTATION, None)
    annotations.pop(INDEX_ANNOTATION, None)
    if not annotations:
        del cleaned["metadata"]["annotations"]
    return cleaned


def _round_trip_yaml() -> YAML:
    rt = YAML(typ="rt")
    rt.preserve_quotes = True
    rt.width = 4096
    return rt


def read_resources(text: str) -> List[Dict[str, Any]]:
    """
    Parse multi-document YAML into resource mappings.

    Mappings keep their comments and key order so they can be written back
    unchanged apart from the stripped annotations.

    Raises:
        MaterializeError: If the text is not valid YAML or a document is not a mapping
    """
    try:
        documents = list(_round_trip_yaml().load_all(text))
    except YAMLError as e:
        raise MaterializeError(f"Invalid resource stream: {e}") from e

    resources = []
    for index, document in enumerate(documents):
        if document is None:
            continue
        if not isinstance(document, dict):
            raise MaterializeError(
                f"Document {index} is not a mapping",
                {"index": index, "type": type(document).__name__},
            )
        resources.append(document)
    return resources


def dump_resource(resource: Dict[str, Any]) -> bytes:
    """
    Serialize one resource, keeping its comments and key order.

    Raises:
        ManifestSerializationError: If the resource holds a value YAML cannot represent
    """
    buffer = io.StringIO()
    try:
        _round_trip_yaml().dump(resource, buffer)
    except YAMLError as e:
        raise ManifestSerializationError(f"Failed to serialize resource: {e}") from e
    return buffer.getvalue().encode("utf-8")


def _read_text(input_stream: IO[Any]) -> str:
    try:
        raw = input_stream.read()
        return raw.decode("utf-8") if isinstance(raw, bytes) else raw
    except UnicodeDecodeError as e:
        raise MaterializeError("Resource stream is not valid UTF-8", {"position": e.start}) from e


def resource_filename(resource: Dict[str, Any], pattern: str, root: Path) -> str:
    """
    Package-relative file name for resource.

    Raises:
        SecurityError: If the name escapes root
        MaterializeError: If the name is empty, names the package itself or the Kptfile
    """
    name = str(_annotations(resource).get(PATH_ANNOTATION) or expand_filename_pattern(pattern, resource))
    target = validate_path_within_root(name, root)

    metadata = resource.get("metadata") or {}
    context = {"file": name, "kind": resource.get("kind"), "name": metadata.get("name")}

    if not name.strip() or name.endswith("/") or target == root:
        raise MaterializeError(f"Resource does not resolve to a file name: '{name}'", context)
    if target == root / KPTFILE_NAME:
        raise MaterializeError(f"Resource file name collides with {KPTFILE_NAME}", context)

    return target.relative_to(root).as_posix()


def materialize(
    path: Path | str,
    input_stream: IO[Any],
    pattern: Optional[str] = None,
) -> MaterializeResult:
    """
    Write the resources read from input_stream into the package at path.

    Args:
        path: Package directory (created if missing)
        input_stream: Text or binary stream of UTF-8 YAML resources
        pattern: Filename pattern; defaults to "%n_%k.yaml"

    Returns:
        MaterializeResult listing written files

    Raises:
        MaterializeError: If the stream cannot be decoded or parsed, or a file name is unusable
        SecurityError: If a resource file would land outside the package
        FileOperationError: If a file cannot be written
    """
    pattern = pattern or DEFAULT_FILENAME_PATTERN
    package_path = Path(path)
    package_path.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    root = package_path.resolve()

    original = _read_text(input_stream)
    resources = read_resources(original)

    # Resources sharing a file name are written together, in input order
    grouped: Dict[str, List[Dict[str, Any]]] = {}
    for resource in resources:
        filename = resource_filename(resource, pattern, root)
        grouped.setdefault(filename, []).append(strip_reader_annotations(resource))

    result = MaterializeResult(package_path=package_path, resource_count=len(resources))

    for filename, members in grouped.items():
        with atomic_write(Path(filename), root=root, binary=True, permissions=FILE_MODE) as f:
            f.write(join_documents([dump_resource(member) for member in members]))
        result.files.append(filename)
        logger.debug("resource_file_written", path=filename, resources=len(members))

    kptfile = stdin_kptfile(name=root.name, original=original, filename_pattern=pattern)
    kptfile_path = root / KPTFILE_NAME
    with atomic_write(Path(KPTFILE_NAME), root=root, binary=True, permissions=FILE_MODE) as f:
        f.write(dump_document(kptfile))
    result.kptfile_path = kptfile_path

    logger.info(
        "package_materialized",
        path=str(root),
        resources=result.resource_count,
        files=len(result.files),
    )
    return result

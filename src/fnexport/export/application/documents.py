"""
Multi-document YAML assembly.

Each sub-manifest is serialized on its own into a block; blocks are then
joined in the order given with the YAML document separator between them.
"""

from __future__ import annotations

from typing import Any, Final, Mapping, Sequence

import yaml

from fnexport.shared.domain.base_model import BaseManifestModel
from fnexport.shared.domain.exceptions import ManifestSerializationError

DOCUMENT_SEPARATOR: Final[str] = "---\n"


class ManifestDumper(yaml.SafeDumper):
    """SafeDumper that writes multi-line strings as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, value: str) -> yaml.ScalarNode:
    if "\n" in value:
        return dumper.represent_scalar("tag:yaml.org,2002:str", value, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", value)


ManifestDumper.add_representer(str, _represent_str)


def dump_document(document: BaseManifestModel | Mapping[str, Any]) -> bytes:
    """
    Serialize one manifest document as block-style YAML.

    Key order follows the model's field order.

    Raises:
        ManifestSerializationError: If the tree holds a value YAML cannot represent
    """
    data = document.to_manifest() if isinstance(document, BaseManifestModel) else dict(document)

    try:
        text = yaml.dump(
            data,
            Dumper=ManifestDumper,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as e:
        raise ManifestSerializationError(
            f"Failed to serialize {type(document).__name__}: {e}",
            {"document": type(document).__name__},
        ) from e

    return text.encode("utf-8")


def join_documents(blocks: Sequence[bytes]) -> bytes:
    """
    Concatenate serialized documents with exactly one separator between each pair.

    No separator is written before the first or after the last block.
    """
    parts: list[bytes] = []
    separator = DOCUMENT_SEPARATOR.encode("utf-8")

    for index, block in enumerate(blocks):
        if index:
            if not parts[-1].endswith(b"\n"):
                parts.append(b"\n")
            parts.append(separator)
        parts.append(block)

    return b"".join(parts)

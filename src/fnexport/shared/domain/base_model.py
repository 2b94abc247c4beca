"""
Base manifest model with schema-style key conversion.

Provides automatic snake_case -> camelCase key conversion and per-field
omission rules, so manifest nodes serialize the way CI engine schemas
expect (empty optional fields are left out rather than emitted as nulls).
All manifest nodes should inherit from BaseManifestModel.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional

# Field metadata keys
KEY_METADATA = "manifest_key"
KEEP_EMPTY_METADATA = "manifest_keep_empty"


def to_camel_case(snake_str: str) -> str:
    """
    Convert snake_case to camelCase.

    Examples:
        >>> to_camel_case("mount_path")
        'mountPath'
        >>> to_camel_case("volume_mounts")
        'volumeMounts'
    """
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def manifest_field(
    *,
    key: Optional[str] = None,
    keep_empty: bool = False,
    default: Any = None,
    default_factory: Any = dataclasses.MISSING,
) -> Any:
    """
    Declare a manifest field with serialization metadata.

    Args:
        key: Explicit output key (defaults to the camelCase field name)
        keep_empty: Omit the field only when absent (None), so an empty
            sequence or mapping is emitted as-is
        default: Default value when no factory is given
        default_factory: Factory for mutable defaults
    """
    metadata = {KEY_METADATA: key, KEEP_EMPTY_METADATA: keep_empty}
    if default_factory is not dataclasses.MISSING:
        return dataclasses.field(default_factory=default_factory, metadata=metadata)
    return dataclasses.field(default=default, metadata=metadata)


def is_empty(value: Any) -> bool:
    """Zero-value check used by the default omission rule."""
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


def _convert(value: Any) -> Any:
    if isinstance(value, BaseManifestModel):
        return value.to_manifest()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_convert(item) for item in value]
    if isinstance(value, dict):
        return {k: _convert(v) for k, v in value.items()}
    return value


@dataclass
class BaseManifestModel:
    """
    Base class for all manifest nodes.

    - to_manifest() returns an ordered dict in field declaration order
    - keys are camelCase unless a field declares an explicit key
    - a field at its zero value is omitted; keep_empty fields are omitted
      only when None
    - nested models, lists and dicts are converted recursively
    """

    def to_manifest(self) -> Dict[str, Any]:
        """
        Convert the node into a plain mapping ready for YAML serialization.

        Returns:
            Dictionary with schema keys and omitted empty fields
        """
        result: Dict[str, Any] = {}

        for field in fields(self):
            if field.name.startswith("_"):
                continue

            value = getattr(self, field.name)
            keep_empty = field.metadata.get(KEEP_EMPTY_METADATA, False)

            if value is None:
                continue
            if not keep_empty and is_empty(value):
                continue

            key = field.metadata.get(KEY_METADATA) or to_camel_case(field.name)
            converted = _convert(value)

            # A nested node whose fields were all omitted is itself empty
            if not keep_empty and isinstance(value, BaseManifestModel) and not converted:
                continue

            result[key] = converted

        return result

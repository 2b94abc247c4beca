"""
File Operations Module

Atomic file writes and root containment checks.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any

from fnexport.shared.domain.exceptions import FileOperationError, SecurityError
from fnexport.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


def validate_path_within_root(path: Path | str, root: Path) -> Path:
    """
    Ensure path stays within root (prevent traversal).

    Raises:
        SecurityError: If path escapes root
    """
    root = root.resolve()
    resolved = (root / path).resolve()

    try:
        resolved.relative_to(root)
    except ValueError:
        raise SecurityError(f"Path traversal detected: {path}", {"root": str(root)})

    return resolved


@contextmanager
def atomic_write(
    target_path: Path,
    root: Path | None = None,
    binary: bool = False,
    permissions: int = 0o644,
) -> Generator[IO[Any], None, None]:
    """
    Context manager for atomic file writes.

    Uses temp file + rename pattern for crash safety. When root is given the
    target must resolve inside it.
    """
    safe_path = validate_path_within_root(target_path, root) if root else Path(target_path)

    safe_path.parent.mkdir(parents=True, exist_ok=True)

    temp_path = None

    try:
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=safe_path.parent,
            prefix=".fnexport_",
            suffix=".tmp",
        )
        temp_path = Path(temp_path_str)

        mode = "wb" if binary else "w"
        encoding = None if binary else "utf-8"
        with os.fdopen(temp_fd, mode, encoding=encoding) as f:
            yield f

        os.chmod(temp_path, permissions)
        shutil.move(str(temp_path), str(safe_path))
        temp_path = None

        logger.debug("atomic_write_success", path=str(safe_path))

    except OSError as e:
        logger.error("atomic_write_failed", path=str(safe_path), error=str(e))
        raise FileOperationError(f"Failed to write {safe_path}: {e}") from e
    finally:
        if temp_path and temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                pass

"""
Workspace path helpers.

Paths in generated manifests are joined lexically with POSIX separators.
They are never resolved against the local filesystem: the root is usually
a placeholder the CI engine substitutes at run time.
"""

import posixpath


def clean_path(path: str) -> str:
    """
    Lexically clean a slash-separated path.

    Collapses duplicate separators, drops "." elements and trailing
    separators, and resolves ".." against preceding elements.

    Examples:
        >>> clean_path("resources/")
        'resources'
        >>> clean_path("")
        '.'
    """
    cleaned = posixpath.normpath(path)
    # normpath keeps a leading "//"
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def join_path(*elements: str) -> str:
    """
    Join path elements, ignoring empty ones, and clean the result.

    Unlike os.path.join, a later absolute element does not discard the
    earlier ones: join_path("root", "/abs") == "root/abs".
    """
    parts = [element for element in elements if element]
    if not parts:
        return ""
    return clean_path("/".join(parts))


def join_workspace_path(workspace_root: str, relative: str) -> str:
    """Join a workspace-relative path onto a workspace root or placeholder."""
    return join_path(workspace_root, relative)


def escapes_root(relative: str) -> bool:
    """True if the cleaned relative path climbs above its root."""
    cleaned = clean_path(relative) if relative else "."
    return cleaned == ".." or cleaned.startswith("../")

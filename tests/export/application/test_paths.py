"""
Tests for lexical workspace path joining.
"""

import pytest

from fnexport.export.application.paths import (
    clean_path,
    escapes_root,
    join_path,
    join_workspace_path,
)

ROOT = "$(workspaces.source.path)"


class TestJoinWorkspacePath:
    """Test joining workspace-relative paths onto the placeholder root."""

    def test_empty_relative_returns_root_unchanged(self):
        assert join_workspace_path(ROOT, "") == ROOT

    def test_simple_join(self):
        assert join_workspace_path(ROOT, "resources") == f"{ROOT}/resources"

    @pytest.mark.parametrize("relative", ["resources/", "resources//", "./resources", "resources/."])
    def test_trailing_and_dot_segments_are_normalized(self, relative):
        assert join_workspace_path(ROOT, relative) == f"{ROOT}/resources"

    def test_duplicate_separators_collapse(self):
        assert join_workspace_path(ROOT, "extra//fns") == f"{ROOT}/extra/fns"

    def test_absolute_relative_is_appended_not_substituted(self):
        assert join_workspace_path("/app", "/resources") == "/app/resources"

    def test_dot_root(self):
        assert join_workspace_path(".", "") == "."
        assert join_workspace_path(".", "resources/") == "resources"


class TestCleanAndJoin:
    def test_clean_empty_is_dot(self):
        assert clean_path("") == "."

    def test_clean_leading_double_slash(self):
        assert clean_path("//a//b/") == "/a/b"

    def test_join_no_elements(self):
        assert join_path("", "") == ""


class TestEscapesRoot:
    @pytest.mark.parametrize("path", ["..", "../x", "a/../../x"])
    def test_escaping_paths(self, path):
        assert escapes_root(path)

    @pytest.mark.parametrize("path", ["", ".", "a/..", "a/../b", "x/y", "/abs"])
    def test_contained_paths(self, path):
        assert not escapes_root(path)

"""
Tests for multi-document assembly.
"""

from dataclasses import dataclass

import pytest
import yaml

from fnexport.export.application.documents import (
    DOCUMENT_SEPARATOR,
    dump_document,
    join_documents,
)
from fnexport.shared.domain.base_model import BaseManifestModel
from fnexport.shared.domain.exceptions import ManifestSerializationError


@dataclass
class Doc(BaseManifestModel):
    name: str = ""
    payload: object = None


class TestDumpDocument:
    def test_block_style_in_field_order(self):
        output = dump_document({"kind": "Task", "apiVersion": "v1", "items": ["a"]})
        assert output == b"kind: Task\napiVersion: v1\nitems:\n- a\n"

    def test_accepts_manifest_models(self):
        assert dump_document(Doc(name="x")) == b"name: x\n"

    def test_multiline_strings_use_literal_blocks(self):
        output = dump_document({"original": "a: 1\nb: 2\n"})
        assert output.startswith(b"original: |")
        assert yaml.safe_load(output) == {"original": "a: 1\nb: 2\n"}

    def test_unrepresentable_value_raises(self):
        with pytest.raises(ManifestSerializationError) as exc_info:
            dump_document(Doc(name="x", payload=object()))
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)


class TestJoinDocuments:
    """Test separator placement."""

    def test_single_block_has_no_separator(self):
        assert join_documents([b"a: 1\n"]) == b"a: 1\n"

    def test_separator_only_between_blocks(self):
        output = join_documents([b"a: 1\n", b"b: 2\n", b"c: 3\n"])
        assert output == b"a: 1\n---\nb: 2\n---\nc: 3\n"
        assert not output.startswith(DOCUMENT_SEPARATOR.encode())
        assert not output.endswith(DOCUMENT_SEPARATOR.encode())

    def test_missing_trailing_newline_is_added_before_separator(self):
        assert join_documents([b"a: 1", b"b: 2\n"]) == b"a: 1\n---\nb: 2\n"

    def test_empty_list(self):
        assert join_documents([]) == b""

"""
Tests: Export filenames and payloads.

Run with:
    pytest archgen/tests/test_export.py -v
"""

from archgen.models.schemas import RequirementsRecord
from archgen.services.document_composer import compose_document
from archgen.services.export_service import (
    artifact_basename,
    build_diagram_export,
    build_document_export,
    content_disposition,
    diagram_filename,
    disk_filename,
    document_filename,
)


class TestFilenames:
    def test_whitespace_runs_become_underscores(self):
        assert artifact_basename("E-commerce  Platform\tv2") == "E-commerce_Platform_v2"

    def test_document_filename(self):
        assert document_filename("My Shop") == "My_Shop_Architecture.md"

    def test_diagram_filename(self):
        assert diagram_filename("My Shop") == "My_Shop_Architecture_Diagram.svg"

    def test_empty_system_name(self):
        assert document_filename("") == "_Architecture.md"

    def test_disk_filename_drops_path_separators(self):
        assert disk_filename("../escaped_Architecture.md") == ".._escaped_Architecture.md"
        assert disk_filename("a\\b/c.md") == "a_b_c.md"


class TestContentDisposition:
    def test_ascii_name(self):
        assert content_disposition("Shop_Architecture.md") == (
            "attachment; filename=\"Shop_Architecture.md\"; filename*=UTF-8''Shop_Architecture.md"
        )

    def test_header_is_latin1_encodable(self):
        header = content_disposition("日本_🚀_Architecture.md")
        header.encode("latin-1")
        assert "filename*=UTF-8''%E6%97%A5%E6%9C%AC_%F0%9F%9A%80_Architecture.md" in header

    def test_quotes_and_backslashes_replaced_in_fallback(self):
        header = content_disposition('a"b\\c.md')
        assert 'filename="a_b_c.md"' in header
        assert "filename*=UTF-8''a%22b%5Cc.md" in header


class TestArtifacts:
    def test_document_export(self):
        record = RequirementsRecord(systemName="My Shop", backend="Go")
        artifact = build_document_export(record)
        assert artifact.filename == "My_Shop_Architecture.md"
        assert artifact.media_type == "text/markdown"
        assert artifact.content == compose_document(record)

    def test_diagram_export(self):
        artifact = build_diagram_export("<svg/>", RequirementsRecord(systemName="My Shop"))
        assert artifact.filename == "My_Shop_Architecture_Diagram.svg"
        assert artifact.media_type == "image/svg+xml"
        assert artifact.content == "<svg/>"

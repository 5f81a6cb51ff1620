"""
Unit tests for title and header field extraction.
"""

from el2md.core.models import ConversionConfig, Metadata
from el2md.processing.cursor import Cursor
from el2md.processing.ingest import make_document
from el2md.processing.metadata import (
    extract_declared_fields,
    extract_metadata,
    extract_title,
    find_commentary,
)

HEADER = [
    ";;; foo.el --- Do foo things  -*- lexical-binding: t -*-",
    "",
    ";; Author: Jane Doe <jane@example.org>",
    ";; Version: 0.3",
    ";; URL: https://example.org/foo",
    "",
    ";;; Commentary:",
    "",
    ";; Author: Not Me",
    "",
    ";;; Code:",
]


class TestExtractTitle:
    """Title line matching."""

    def test_title_and_package(self):
        metadata = Metadata()
        cursor = Cursor(make_document(HEADER).lines)

        assert extract_title(cursor, metadata)
        assert metadata.title == "Do foo things"
        assert metadata.package_name == "foo"
        assert cursor.position == 1

    def test_no_match_does_not_advance(self):
        metadata = Metadata()
        cursor = Cursor([";; Just a comment", ";;; Commentary:"])

        assert not extract_title(cursor, metadata)
        assert metadata.title is None
        assert metadata.package_name is None
        assert cursor.position == 0

    def test_title_without_mode_line(self):
        metadata = Metadata()
        extract_title(Cursor([";;; bar-baz.el --- Bar the baz."]), metadata)

        assert metadata.title == "Bar the baz."
        assert metadata.package_name == "bar-baz"

    def test_mode_line_only_title_is_absent(self):
        metadata = Metadata()
        cursor = Cursor([";;; foo.el --- -*- lexical-binding: t -*-"])

        assert extract_title(cursor, metadata)
        assert metadata.title is None
        assert metadata.package_name == "foo"
        assert cursor.position == 1

    def test_other_extension(self):
        config = ConversionConfig(source_extension="py")
        metadata = Metadata()

        assert extract_title(Cursor([";;; tool.py --- A tool"]), metadata, config)
        assert not extract_title(Cursor([";;; tool.el --- A tool"]), Metadata(), config)


class TestExtractDeclaredFields:
    """Header-region fields."""

    def test_fields_found(self):
        metadata = extract_declared_fields(make_document(HEADER), Metadata())

        assert metadata.author == "Jane Doe <jane@example.org>"
        assert metadata.version == "0.3"
        assert metadata.url == "[https://example.org/foo](https://example.org/foo)"
        assert metadata.has_header_region

    def test_fields_after_commentary_are_ignored(self):
        lines = [";;; Commentary:", ";; Author: Not Me", ";;; Code:"]
        metadata = extract_declared_fields(make_document(lines), Metadata())

        assert metadata.author is None
        assert metadata.has_header_region

    def test_missing_fields_absent(self):
        lines = [";; Version: 2", ";;; Commentary:"]
        metadata = extract_declared_fields(make_document(lines), Metadata())

        assert metadata.author is None
        assert metadata.version == "2"
        assert metadata.url is None

    def test_no_commentary_no_header_region(self):
        lines = [";; Author: Jane", ";; Version: 1"]
        metadata = extract_declared_fields(make_document(lines), Metadata())

        assert metadata.author is None
        assert not metadata.has_header_region

    def test_malformed_field_is_skipped(self):
        lines = [";; Author Jane", ";;; Commentary:"]

        assert extract_declared_fields(make_document(lines), Metadata()).author is None


class TestExtractMetadata:
    def test_combined(self):
        document = make_document(HEADER)
        metadata = extract_metadata(document)

        assert metadata.title == "Do foo things"
        assert metadata.version == "0.3"
        assert find_commentary(document) == 6

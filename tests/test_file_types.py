"""Tests for the filename classifier."""

import pytest

from docvault.domains.documents.file_types import (
    SUPPORTED_FILE_TYPES,
    classify,
    content_types,
    extract_extension,
    get_mime_type,
    get_resource_type,
    is_supported,
    supported_extensions,
    validate_file_type,
)


class TestExtractExtension:
    @pytest.mark.parametrize(
        "filename, expected",
        [
            ("report.pdf", "pdf"),
            ("Photo.JPG", "jpg"),
            ("archive.tar.gz", "gz"),
            ("README", ""),
            ("", ""),
            (None, ""),
            ("trailing.", ""),
        ],
    )
    def test_extension(self, filename, expected):
        assert extract_extension(filename) == expected


class TestClassify:
    @pytest.mark.parametrize("ext", sorted(SUPPORTED_FILE_TYPES))
    def test_supported_extensions_have_known_category_and_mime(self, ext):
        info = classify(f"file.{ext.upper()}")

        assert info.extension == ext
        assert info.category in {"document", "image"}
        assert info.mime_type != "application/octet-stream"
        assert info.is_supported

    @pytest.mark.parametrize("filename", ["data.csv", "binary", "", None, "movie.mp4"])
    def test_unknown_files_fall_back_to_defaults(self, filename):
        info = classify(filename)

        assert info.category == "unknown"
        assert info.mime_type == "application/octet-stream"
        assert info.resource_type == "auto"
        assert info.can_preview is False
        assert info.icon == "fas fa-file"
        assert not info.is_supported

    def test_pdf_is_stored_as_raw_and_previewable(self):
        info = classify("report.pdf")

        assert info.resource_type == "raw"
        assert info.can_preview is True
        assert info.icon == "fas fa-file-pdf"

    def test_word_documents_are_not_previewable(self):
        assert classify("letter.docx").can_preview is False
        assert classify("letter.doc").can_preview is False

    def test_images_use_image_resource_type(self):
        assert classify("cat.png").resource_type == "image"
        assert classify("logo.svg").mime_type == "image/svg+xml"


class TestHelpers:
    def test_lookup_helpers_are_case_insensitive(self):
        assert get_mime_type("PDF") == "application/pdf"
        assert get_resource_type("Jpeg") == "image"
        assert is_supported("TXT")

    def test_lookup_helpers_defaults(self):
        assert get_mime_type("exe") == "application/octet-stream"
        assert get_resource_type(None) == "auto"
        assert not is_supported("")

    def test_validate_file_type(self):
        result = validate_file_type("notes.txt")

        assert result["is_valid"] is True
        assert result["extension"] == "txt"
        assert result["supported_types"] == supported_extensions()
        assert validate_file_type("song.mp3")["is_valid"] is False

    def test_content_types_table(self):
        table = content_types()

        assert table["jpeg"] == "image/jpeg"
        assert table["docx"].startswith("application/vnd.openxmlformats")
        assert set(table) == set(SUPPORTED_FILE_TYPES)

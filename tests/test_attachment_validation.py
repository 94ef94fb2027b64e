import pytest

from app.core.errors import ValidationError
from app.modules.attachments.models import (
    MAX_FILE_SIZE, Attachment, file_extension, format_size, validate_upload
)


def test_exactly_max_size_is_accepted():
    assert validate_upload("report.pdf", MAX_FILE_SIZE) == "pdf"


def test_one_byte_over_is_rejected_citing_the_limit():
    with pytest.raises(ValidationError) as exc_info:
        validate_upload("report.pdf", MAX_FILE_SIZE + 1)
    assert exc_info.value.message == "File size exceeds maximum allowed size of 10 MB"


def test_extension_match_is_case_insensitive():
    assert validate_upload("SCAN.PDF", 10) == "pdf"
    assert validate_upload("photo.JpEg", 10) == "jpeg"


@pytest.mark.parametrize("filename,extension", [
    ("virus.EXE", "exe"),
    ("script.sh", "sh"),
    ("README", ""),
    ("archive.tar.gz", "gz"),
])
def test_disallowed_extensions(filename, extension):
    with pytest.raises(ValidationError) as exc_info:
        validate_upload(filename, 10)
    assert exc_info.value.message == f"File type '{extension}' is not allowed"


def test_extension_uses_last_dot():
    assert file_extension("a.b.c.DOCX") == "docx"
    assert file_extension("no_dot") == ""
    assert file_extension("trailing.") == ""


def test_format_size():
    assert format_size(512) == "512 B"
    assert format_size(2048) == "2.00 KB"
    assert format_size(5 * 1024 * 1024) == "5.00 MB"
    assert format_size(3 * 1024 ** 3) == "3.00 GB"


def test_attachment_helpers():
    attachment = Attachment(
        id="a-1",
        task_id="t-1",
        uploaded_by="u-1",
        filename="a-1.png",
        original_filename="diagram.png",
        content_type="image/png",
        size_bytes=1536,
        storage_path="t-1/a-1.png",
        created_at="2025-01-01T00:00:00+00:00",
    )
    assert attachment.is_image
    assert attachment.formatted_size == "1.50 KB"

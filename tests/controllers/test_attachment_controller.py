# -*- coding: utf-8 -*-
"""
Tests for AttachmentController.
"""

from pathlib import Path

import pytest

from app.config import Config
from controllers import AttachmentController
from models.attachment import AttachmentFile
from services.translation_manager import tr
from services.validation.rules import attachment_validator, file_size, file_type, required_file


@pytest.fixture
def attachments(qapp):
    return AttachmentController(["logo_image", "contract_pdf"])


@pytest.fixture
def validators():
    return {
        "logo_image": attachment_validator(
            required_file(),
            file_type(Config.IMAGE_TYPES),
            file_size(Config.MAX_IMAGE_SIZE),
        ),
    }


class TestFileState:
    """Test set/clear/get."""

    def test_initially_empty(self, attachments):
        assert attachments.files == {"logo_image": None, "contract_pdf": None}
        assert attachments.payload() == {}

    def test_set_file(self, attachments, spy):
        changes = spy(attachments.file_changed)
        logo = AttachmentFile(name="logo.png", data=b"png")

        attachments.set_file("logo_image", logo)

        assert attachments.get_file("logo_image") is logo
        assert attachments.has_file("logo_image")
        assert changes.calls == [("logo_image", logo)]
        assert attachments.payload() == {"logo_image": logo}

    def test_clear_file(self, attachments):
        attachments.set_file("logo_image", AttachmentFile(name="logo.png", data=b"png"))
        attachments.clear_file("logo_image")
        assert attachments.payload() == {}

    def test_preview_source(self, attachments, tmp_path):
        path = tmp_path / "contract.pdf"
        path.write_bytes(b"%PDF-1.4")
        attachments.set_file("contract_pdf", AttachmentFile.from_path(path))

        assert attachments.preview_source("contract_pdf") == str(path)
        assert attachments.get_file("contract_pdf").size == 8
        assert attachments.preview_source("logo_image") is None


class TestValidateFiles:
    """Test validate_files()."""

    def test_missing_required_file(self, attachments, validators):
        assert attachments.validate_files(validators) is False
        assert attachments.file_errors == {"logo_image": tr("validation.file_required")}

    def test_wrong_type(self, attachments, validators):
        attachments.set_file("logo_image", AttachmentFile(name="logo.pdf", data=b"%PDF"))
        assert attachments.validate_files(validators) is False
        assert attachments.file_errors == {"logo_image": tr("validation.invalid_file_type")}

    def test_too_large(self, attachments, validators):
        attachments.set_file("logo_image", AttachmentFile(name="logo.png", size=Config.MAX_IMAGE_SIZE + 1))
        assert attachments.validate_files(validators) is False
        assert attachments.file_errors["logo_image"] == "File size must not exceed 5 MB"

    def test_valid_file(self, attachments, validators):
        attachments.set_file("logo_image", AttachmentFile(name="logo.png", data=b"png"))
        assert attachments.validate_files(validators) is True
        assert attachments.file_errors == {}

    def test_set_file_clears_field_error(self, attachments, validators, spy):
        attachments.validate_files(validators)
        errors = spy(attachments.file_errors_changed)

        attachments.set_file("logo_image", AttachmentFile(name="logo.png", data=b"png"))

        assert attachments.file_errors == {}
        assert errors.calls == [{}]

    def test_raising_validator_counts_as_failure(self, attachments):
        def broken(file):
            raise RuntimeError("boom")

        assert attachments.validate_files({"contract_pdf": broken}) is False
        assert attachments.file_errors == {"contract_pdf": tr("validation.invalid_value")}

    def test_reset(self, attachments, validators):
        attachments.set_file("contract_pdf", AttachmentFile(name="c.pdf", data=b"%PDF"))
        attachments.validate_files(validators)
        attachments.reset()

        assert attachments.payload() == {}
        assert attachments.file_errors == {}

    def test_disposed_controller_ignores_files(self, attachments):
        attachments.dispose()
        attachments.set_file("logo_image", AttachmentFile(name="logo.png", data=b"png"))
        assert attachments.payload() == {}


class TestAttachmentFile:
    """Test the attachment model."""

    def test_derives_size_and_type(self):
        file = AttachmentFile(name="scan.jpg", data=b"12345")
        assert file.size == 5
        assert file.content_type == "image/jpeg"
        assert file.is_image

    def test_read_bytes_from_path(self, tmp_path):
        path = tmp_path / "doc.pdf"
        path.write_bytes(b"%PDF")
        file = AttachmentFile.from_path(str(path))
        assert isinstance(file.path, Path)
        assert file.read_bytes() == b"%PDF"
        assert file.to_dict()["name"] == "doc.pdf"

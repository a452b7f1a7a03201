# tests/test_services/test_attachment_service.py

import asyncio
import io

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from app.core.config import settings
from app.core.exceptions import AttachmentRejectedError
from app.services.attachment_service import discard_attachment, stage_attachment


def make_upload(filename: str, content: bytes, content_type: str) -> UploadFile:
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


def test_nothing_uploaded():
    assert asyncio.run(stage_attachment(None)) is None


def test_stage_and_discard(upload_dir):
    staged = asyncio.run(stage_attachment(make_upload("receipt.jpg", b"jpeg-bytes", "image/jpeg")))

    assert staged.original_name == "receipt.jpg"
    assert staged.public_path.startswith("/uploads/")
    assert staged.public_path.endswith(".jpg")
    assert open(staged.path, "rb").read() == b"jpeg-bytes"

    discard_attachment(staged)
    assert list(upload_dir.iterdir()) == []


def test_rejects_unsupported_type(upload_dir):
    with pytest.raises(AttachmentRejectedError):
        asyncio.run(stage_attachment(make_upload("notes.txt", b"hello", "text/plain")))


def test_rejects_oversized_file(upload_dir, monkeypatch):
    monkeypatch.setattr(settings, "MAX_ATTACHMENT_SIZE", 10)
    with pytest.raises(AttachmentRejectedError):
        asyncio.run(stage_attachment(make_upload("big.pdf", b"x" * 11, "application/pdf")))
    assert not upload_dir.exists()


def test_discard_tolerates_missing():
    discard_attachment(None)

# app/services/attachment_service.py - Complaint attachment staging

import os
import random
import time
import logging
import aiofiles
from dataclasses import dataclass
from typing import Optional
from fastapi import UploadFile

from app.core.config import settings
from app.core.exceptions import AttachmentRejectedError

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "/uploads"


@dataclass
class StagedAttachment:
    path: str           # location on disk
    public_path: str    # what the complaint stores, served under /uploads
    original_name: str


def _unique_filename(original_name: str) -> str:
    ext = os.path.splitext(original_name)[1]
    return f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}{ext}"


async def stage_attachment(file: Optional[UploadFile]) -> Optional[StagedAttachment]:
    """Write an uploaded file into UPLOAD_DIR. Returns None when nothing was uploaded."""
    if file is None or not file.filename:
        return None

    if file.content_type not in settings.attachment_types:
        raise AttachmentRejectedError(
            "Invalid file type. Only images, PDFs, and documents are allowed."
        )

    content = await file.read()
    if len(content) > settings.MAX_ATTACHMENT_SIZE:
        raise AttachmentRejectedError(
            f"File too large. Maximum size is {settings.MAX_ATTACHMENT_SIZE // (1024 * 1024)}MB."
        )

    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    filename = _unique_filename(file.filename)
    path = os.path.join(settings.UPLOAD_DIR, filename)

    async with aiofiles.open(path, "wb") as f:
        await f.write(content)

    logger.info(f"Staged attachment {file.filename} as {filename}")
    return StagedAttachment(
        path=path,
        public_path=f"{PUBLIC_PREFIX}/{filename}",
        original_name=file.filename,
    )


def discard_attachment(staged: Optional[StagedAttachment]):
    if staged and os.path.exists(staged.path):
        os.remove(staged.path)
        logger.warning(f"Removed staged attachment {staged.path}")

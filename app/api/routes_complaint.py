# app/api/routes_complaint.py
# Contact form submissions with an optional single attachment

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError

from app.core.exceptions import AttachmentRejectedError
from app.db.deps import get_session_id, get_storage, require_session_id
from app.db.storage import IStorage
from app.models.complaint import Complaint
from app.schemas.complaint import ComplaintCreate, ComplaintSubmitted
from app.services.attachment_service import discard_attachment, stage_attachment

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("", response_model=ComplaintSubmitted, status_code=status.HTTP_201_CREATED)
async def submit_complaint(
    customer_name: str = Form(default=""),
    customer_email: str = Form(default=""),
    customer_phone: str = Form(default=""),
    subject: str = Form(default=""),
    description: str = Form(default=""),
    order_number: Optional[str] = Form(default=None),
    attachment: Optional[UploadFile] = File(default=None),
    session_id: str = Depends(get_session_id),
    storage: IStorage = Depends(get_storage),
):
    try:
        staged = await stage_attachment(attachment)
    except AttachmentRejectedError as e:
        raise HTTPException(status_code=400, detail=e.message)

    try:
        complaint_data = ComplaintCreate(
            session_id=session_id,
            customer_name=customer_name,
            customer_email=customer_email,
            customer_phone=customer_phone,
            subject=subject,
            description=description,
            order_number=order_number or None,
            attachment=staged.public_path if staged else None,
            attachment_name=staged.original_name if staged else None,
        )
    except ValidationError as e:
        # The file is useless without a complaint to hang it on
        discard_attachment(staged)
        raise HTTPException(
            status_code=400,
            detail={"message": "Invalid complaint data", "errors": jsonable_encoder(e.errors())},
        )

    try:
        complaint = storage.create_complaint(complaint_data)
    except Exception:
        logger.exception("Complaint submission error")
        discard_attachment(staged)
        raise HTTPException(status_code=500, detail="Failed to submit complaint")

    logger.info(f"Complaint {complaint.id} submitted by session {session_id}")
    return ComplaintSubmitted(id=complaint.id)

@router.get("", response_model=List[Complaint])
def list_my_complaints(
    session_id: str = Depends(require_session_id),
    storage: IStorage = Depends(get_storage),
):
    return storage.get_complaints_by_session_id(session_id)

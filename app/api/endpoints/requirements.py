# api/endpoints/requirements.py

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlmodel import Session
from typing import List, Optional

from app.database import get_session
from app.schemas.comment import CommentRead
from app.schemas.requirement import (
    RequirementRead,
    RequirementDetailsUpdate,
    RequirementStatusUpdate,
)
from app.services import requirement_service
from app.services.media_uploader import MediaFile, MediaUploader, get_media_uploader

router = APIRouter()


def read_media_files(media: Optional[List[UploadFile]]) -> List[MediaFile]:
    # Un <input type="file"> vacío llega como parte sin nombre de fichero
    return [
        MediaFile(content=upload.file.read(), mime_type=upload.content_type or "", filename=upload.filename)
        for upload in (media or [])
        if upload.filename
    ]


@router.get("", response_model=List[RequirementRead])
def list_requirements(session: Session = Depends(get_session)):
    return requirement_service.list_requirements(session)


@router.post("", response_model=RequirementRead, status_code=status.HTTP_201_CREATED)
def create_requirement(
    customer: Optional[str] = Form(None),
    contact: Optional[str] = Form(None),
    type: Optional[str] = Form(None),
    details: Optional[str] = Form(None),
    follow_up: Optional[str] = Form(None, alias="followUp"),
    media: Optional[List[UploadFile]] = File(None),
    session: Session = Depends(get_session),
    uploader: MediaUploader = Depends(get_media_uploader),
):
    requirement_service.validate_requirement_fields(customer, type, details)
    uploaded = uploader.upload(read_media_files(media))
    return requirement_service.create_requirement(
        session,
        customer=customer,
        contact=contact,
        type=type,
        details=details,
        follow_up=follow_up,
        images=uploaded.images,
        videos=uploaded.videos,
    )


@router.put("/{requirement_id}/status", response_model=RequirementRead)
def update_requirement_status(
    requirement_id: int,
    status_in: RequirementStatusUpdate,
    session: Session = Depends(get_session),
):
    return requirement_service.update_status(session, requirement_id, status_in.status)


@router.put("/{requirement_id}", response_model=RequirementRead)
def update_requirement(
    requirement_id: int,
    requirement_in: RequirementDetailsUpdate,
    session: Session = Depends(get_session),
):
    return requirement_service.update_details(
        session,
        requirement_id,
        customer=requirement_in.customer,
        contact=requirement_in.contact,
        type=requirement_in.type,
        details=requirement_in.details,
    )


@router.delete("/{requirement_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_requirement(requirement_id: int, session: Session = Depends(get_session)):
    requirement_service.delete_requirement(session, requirement_id)


@router.post("/{requirement_id}/comments", response_model=CommentRead, status_code=status.HTTP_201_CREATED)
def add_comment(
    requirement_id: int,
    text: Optional[str] = Form(None),
    media: Optional[List[UploadFile]] = File(None),
    session: Session = Depends(get_session),
    uploader: MediaUploader = Depends(get_media_uploader),
):
    files = read_media_files(media)
    requirement_service.validate_comment_content(text, len(files))
    # Requisito inexistente: 404 en vez del fallo de clave foránea (500), y sin subir nada
    requirement_service.get_requirement(session, requirement_id)
    uploaded = uploader.upload(files)
    return requirement_service.add_comment(
        session,
        requirement_id,
        text=text,
        images=uploaded.images,
        videos=uploaded.videos,
    )

from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import List

from app.database import get_session
from app.schemas.requirement_type import RequirementTypeCreate, RequirementTypeRead
from app.services import requirement_type_service

router = APIRouter()

@router.get("", response_model=List[RequirementTypeRead])
def list_types(session: Session = Depends(get_session)):
    return requirement_type_service.list_types(session)

@router.post("", response_model=RequirementTypeRead, status_code=status.HTTP_201_CREATED)
def create_type(type_in: RequirementTypeCreate, session: Session = Depends(get_session)):
    return requirement_type_service.create_type(session, type_in.name)

@router.delete("/{type_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_type(type_id: int, session: Session = Depends(get_session)):
    requirement_type_service.delete_type(session, type_id)

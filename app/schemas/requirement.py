# schemas/requirement.py

from pydantic import BaseModel, field_validator
from typing import Optional, List
from datetime import datetime

from app.schemas.comment import CommentRead

class RequirementRead(BaseModel):
    id: int
    customer: str
    contact: Optional[str]
    type: str
    details: str
    follow_up: Optional[str]
    status: str
    images: List[str] = []
    videos: List[str] = []
    created_at: datetime
    comments: List[CommentRead] = []

    class Config:
        from_attributes = True

    @field_validator("images", "videos", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        # filas antiguas pueden tener NULL en las columnas de media
        return value or []

# Los campos obligatorios se declaran opcionales: su ausencia la valida el servicio (400, no 422)
class RequirementDetailsUpdate(BaseModel):
    customer: Optional[str] = None
    contact: Optional[str] = None
    type: Optional[str] = None
    details: Optional[str] = None

class RequirementStatusUpdate(BaseModel):
    status: Optional[str] = None

from pydantic import BaseModel, field_validator
from typing import Optional, List
from datetime import datetime

class CommentRead(BaseModel):
    id: int
    requirement_id: int
    text: Optional[str]
    images: List[str] = []
    videos: List[str] = []
    created_at: datetime

    class Config:
        from_attributes = True

    @field_validator("images", "videos", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return value or []

from typing import List, Optional, TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship, Column
from datetime import datetime, timezone

from app.models.media import MediaUrls

if TYPE_CHECKING:
    from app.models.comment import Comment


class Requirement(SQLModel, table=True):
    __tablename__ = "requirements"

    id: Optional[int] = Field(default=None, primary_key=True)
    customer: str = Field(max_length=255)
    contact: Optional[str] = Field(default=None, max_length=255)
    type: str = Field(max_length=255)          # texto libre, no es FK a requirement_types
    details: str
    follow_up: Optional[str] = None
    status: str = Field(default="Pending", max_length=50)
    images: List[str] = Field(default_factory=list, sa_column=Column(MediaUrls))
    videos: List[str] = Field(default_factory=list, sa_column=Column(MediaUrls))
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)

    comments: List["Comment"] = Relationship(
        back_populates="requirement",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )

from typing import List, Optional, TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship, Column
from datetime import datetime, timezone

from app.models.media import MediaUrls

if TYPE_CHECKING:
    from app.models.requirement import Requirement


class Comment(SQLModel, table=True):
    __tablename__ = "comments"

    id: Optional[int] = Field(default=None, primary_key=True)
    requirement_id: int = Field(foreign_key="requirements.id", ondelete="CASCADE", index=True)
    text: Optional[str] = None
    images: List[str] = Field(default_factory=list, sa_column=Column(MediaUrls))
    videos: List[str] = Field(default_factory=list, sa_column=Column(MediaUrls))
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    requirement: Optional["Requirement"] = Relationship(back_populates="comments")

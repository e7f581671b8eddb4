from typing import Optional
from sqlmodel import SQLModel, Field


class RequirementType(SQLModel, table=True):
    __tablename__ = "requirement_types"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, unique=True)

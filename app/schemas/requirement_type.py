from pydantic import BaseModel
from typing import Optional

class RequirementTypeCreate(BaseModel):
    name: Optional[str] = None

class RequirementTypeRead(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True

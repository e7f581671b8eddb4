from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, delete, select

from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.models.requirement_type import RequirementType


def list_types(session: Session) -> List[RequirementType]:
    return session.exec(select(RequirementType).order_by(RequirementType.name)).all()


def create_type(session: Session, name: Optional[str]) -> RequirementType:
    if name is None or not name.strip():
        raise ValidationError("Type name is required.")
    if session.exec(select(RequirementType).where(RequirementType.name == name)).first():
        raise ConflictError(f"Type '{name}' already exists.")
    requirement_type = RequirementType(name=name)
    session.add(requirement_type)
    try:
        session.commit()
    except IntegrityError as exc:
        # otra petición creó el mismo nombre entre la comprobación y el commit
        session.rollback()
        raise ConflictError(f"Type '{name}' already exists.") from exc
    session.refresh(requirement_type)
    return requirement_type


def delete_type(session: Session, type_id: int) -> None:
    if session.exec(delete(RequirementType).where(RequirementType.id == type_id)).rowcount == 0:
        session.rollback()
        raise NotFoundError("Type not found.")
    session.commit()

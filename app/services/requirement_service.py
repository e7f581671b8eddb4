from collections import defaultdict
from typing import Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, delete, select, update

from app.core.errors import NotFoundError, ValidationError
from app.models.comment import Comment
from app.models.requirement import Requirement
from app.schemas.comment import CommentRead
from app.schemas.requirement import RequirementRead

DEFAULT_STATUS = "Pending"
REQUIRED_FIELDS_MESSAGE = "Customer, type, and details are required."
COMMENT_CONTENT_MESSAGE = "Comment text or media is required."
NOT_FOUND_MESSAGE = "Requirement not found."


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_requirement_fields(customer: Optional[str], type: Optional[str], details: Optional[str]) -> None:
    if _blank(customer) or _blank(type) or _blank(details):
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)


def validate_comment_content(text: Optional[str], media_count: int) -> None:
    if _blank(text) and media_count == 0:
        raise ValidationError(COMMENT_CONTENT_MESSAGE)


def _comments_for(session: Session, requirement_ids: List[int]) -> Dict[int, List[CommentRead]]:
    grouped: Dict[int, List[CommentRead]] = defaultdict(list)
    if not requirement_ids:
        return grouped
    comments = session.exec(
        select(Comment)
        .where(Comment.requirement_id.in_(requirement_ids))
        .order_by(Comment.created_at, Comment.id)
    ).all()
    for comment in comments:
        grouped[comment.requirement_id].append(CommentRead.model_validate(comment))
    return grouped


def _to_read(requirement: Requirement, comments: List[CommentRead]) -> RequirementRead:
    data = requirement.model_dump()
    data["comments"] = comments
    return RequirementRead.model_validate(data)


def get_requirement(session: Session, requirement_id: int) -> Requirement:
    requirement = session.get(Requirement, requirement_id)
    if not requirement:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return requirement


def list_requirements(session: Session) -> List[RequirementRead]:
    """Todos los requisitos, del más nuevo al más antiguo, con sus comentarios en orden cronológico."""
    requirements = session.exec(
        select(Requirement).order_by(Requirement.created_at.desc(), Requirement.id.desc())
    ).all()
    comments = _comments_for(session, [r.id for r in requirements])
    return [_to_read(r, comments.get(r.id, [])) for r in requirements]


def read_requirement(session: Session, requirement_id: int) -> RequirementRead:
    requirement = get_requirement(session, requirement_id)
    return _to_read(requirement, _comments_for(session, [requirement.id]).get(requirement.id, []))


def create_requirement(
    session: Session,
    customer: Optional[str],
    type: Optional[str],
    details: Optional[str],
    contact: Optional[str] = None,
    follow_up: Optional[str] = None,
    images: Optional[List[str]] = None,
    videos: Optional[List[str]] = None,
) -> RequirementRead:
    validate_requirement_fields(customer, type, details)
    requirement = Requirement(
        customer=customer,
        contact=contact,
        type=type,
        details=details,
        follow_up=follow_up,
        status=DEFAULT_STATUS,
        images=list(images or []),
        videos=list(videos or []),
    )
    session.add(requirement)
    session.commit()
    session.refresh(requirement)
    return _to_read(requirement, [])


def _apply(session: Session, statement) -> None:
    """Ejecuta un UPDATE/DELETE por id; si no afecta a ninguna fila el requisito no existe."""
    if session.exec(statement).rowcount == 0:
        session.rollback()
        raise NotFoundError(NOT_FOUND_MESSAGE)
    session.commit()


def update_status(session: Session, requirement_id: int, status: Optional[str]) -> RequirementRead:
    if _blank(status):
        raise ValidationError("Status is required.")
    _apply(session, update(Requirement).where(Requirement.id == requirement_id).values(status=status))
    return read_requirement(session, requirement_id)


def update_details(
    session: Session,
    requirement_id: int,
    customer: Optional[str],
    type: Optional[str],
    details: Optional[str],
    contact: Optional[str] = None,
) -> RequirementRead:
    """Reescribe customer/contact/type/details; estado y media no se tocan."""
    validate_requirement_fields(customer, type, details)
    _apply(
        session,
        update(Requirement)
        .where(Requirement.id == requirement_id)
        .values(customer=customer, contact=contact, type=type, details=details),
    )
    return read_requirement(session, requirement_id)


def delete_requirement(session: Session, requirement_id: int) -> None:
    # Comentarios y requisito en la misma transacción, también donde la BD no aplica ON DELETE CASCADE.
    # La media subida se queda en el servicio externo
    session.exec(delete(Comment).where(Comment.requirement_id == requirement_id))
    _apply(session, delete(Requirement).where(Requirement.id == requirement_id))


def add_comment(
    session: Session,
    requirement_id: int,
    text: Optional[str] = None,
    images: Optional[List[str]] = None,
    videos: Optional[List[str]] = None,
) -> CommentRead:
    images = list(images or [])
    videos = list(videos or [])
    validate_comment_content(text, len(images) + len(videos))
    get_requirement(session, requirement_id)
    comment = Comment(requirement_id=requirement_id, text=text, images=images, videos=videos)
    session.add(comment)
    try:
        session.commit()
    except IntegrityError as exc:
        # el requisito se borró entre la comprobación y el insert
        session.rollback()
        raise NotFoundError(NOT_FOUND_MESSAGE) from exc
    session.refresh(comment)
    return CommentRead.model_validate(comment)

import sys
import os
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

os.environ.setdefault("database_url", "sqlite:///:memory:")

import pytest
from sqlmodel import SQLModel, Session, create_engine, delete, select
from sqlalchemy.pool import StaticPool

from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.models.comment import Comment
from app.models.requirement import Requirement
from app.services import requirement_service, requirement_type_service


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


def test_create_requirement_defaults(session):
    req = requirement_service.create_requirement(session, customer="Acme", type="Bug", details="X")
    assert req.status == "Pending"
    assert req.images == [] and req.videos == []
    assert req.contact is None and req.follow_up is None


@pytest.mark.parametrize(
    "fields",
    [
        {"customer": None, "type": "Bug", "details": "X"},
        {"customer": "Acme", "type": "", "details": "X"},
        {"customer": "Acme", "type": "Bug", "details": "  "},
    ],
)
def test_create_requirement_missing_field(session, fields):
    with pytest.raises(ValidationError):
        requirement_service.create_requirement(session, **fields)
    assert requirement_service.list_requirements(session) == []


def test_update_status_requires_value(session):
    req = requirement_service.create_requirement(session, customer="Acme", type="Bug", details="X")
    with pytest.raises(ValidationError):
        requirement_service.update_status(session, req.id, "")


def test_not_found_operations(session):
    with pytest.raises(NotFoundError):
        requirement_service.update_status(session, 42, "Resolved")
    with pytest.raises(NotFoundError):
        requirement_service.update_details(session, 42, customer="a", type="b", details="c")
    with pytest.raises(NotFoundError):
        requirement_service.delete_requirement(session, 42)
    with pytest.raises(NotFoundError):
        requirement_service.add_comment(session, 42, text="hi")
    with pytest.raises(NotFoundError):
        requirement_type_service.delete_type(session, 42)


def test_add_comment_with_media_and_no_text(session):
    req = requirement_service.create_requirement(session, customer="Acme", type="Bug", details="X")
    comment = requirement_service.add_comment(session, req.id, text=None, videos=["https://media.test/v.mp4"])
    assert comment.text is None
    assert comment.videos == ["https://media.test/v.mp4"]

    with pytest.raises(ValidationError):
        requirement_service.add_comment(session, req.id, text="", images=[], videos=[])


def test_delete_requirement_removes_comments(session):
    req = requirement_service.create_requirement(session, customer="Acme", type="Bug", details="X")
    requirement_service.add_comment(session, req.id, text="a")
    requirement_service.add_comment(session, req.id, text="b")

    requirement_service.delete_requirement(session, req.id)

    assert session.exec(select(Comment)).all() == []


def test_create_type_conflict(session):
    requirement_type_service.create_type(session, "Bug")
    with pytest.raises(ConflictError):
        requirement_type_service.create_type(session, "Bug")
    assert [t.name for t in requirement_type_service.list_types(session)] == ["Bug"]


def test_new_rows_get_timezone_aware_timestamps():
    assert Requirement(customer="Acme", type="Bug", details="X").created_at.tzinfo is not None
    assert Comment(requirement_id=1, text="hi").created_at.tzinfo is not None


def test_row_deleted_elsewhere_is_not_found(engine, session):
    req = requirement_service.create_requirement(session, customer="Acme", type="Bug", details="X")
    session.get(Requirement, req.id)

    with Session(engine) as other:
        other.exec(delete(Requirement).where(Requirement.id == req.id))
        other.commit()

    with pytest.raises(NotFoundError):
        requirement_service.update_status(session, req.id, "Resolved")
    with pytest.raises(NotFoundError):
        requirement_service.update_details(session, req.id, customer="a", type="b", details="c")
    with pytest.raises(NotFoundError):
        requirement_service.delete_requirement(session, req.id)

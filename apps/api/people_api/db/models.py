import uuid

from sqlalchemy import JSON, Column, String, Index
from sqlalchemy.dialects.postgresql import UUID, JSONB

from people_api.core.constants import NICKNAME_MAX_LENGTH, NAME_MAX_LENGTH

from .session import Base


def uuid4_str():
    return str(uuid.uuid4())


class Person(Base):
    """A persisted person. ``id`` is assigned by the service right before insert, never by the caller."""

    __tablename__ = "people"

    id = Column(String(36).with_variant(UUID(as_uuid=False), "postgresql"), primary_key=True)
    nickname = Column(String(NICKNAME_MAX_LENGTH), nullable=False)
    name = Column(String(NAME_MAX_LENGTH), nullable=False)
    birth_date = Column(String(10), nullable=False)  # YYYY-MM-DD, kept as submitted
    # NULL when the caller omitted it, so reads return exactly what was written
    stack = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=True)

    __table_args__ = (
        Index("ix_people_nickname", "nickname", unique=True),
        Index("ix_people_name", "name"),
    )

    def __repr__(self) -> str:
        return f"<Person id={self.id} nickname={self.nickname!r}>"

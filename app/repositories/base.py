import uuid
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.db.base import utcnow
from app.db.utils import apply_dict_updates

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    """
    Keyed CRUD over a single ORM model, bound to one Session.

    Every entity kind gets its own instance (see StudyStore). Operations only
    flush; committing the unit of work belongs to the caller.
    """

    immutable_fields = {"id", "created_at"}

    def __init__(self, session: Session, model: type[ModelT]):
        self.session = session
        self.model = model

    def default_order(self) -> tuple:
        """Insertion order: creation time, then id for a stable tie-break."""
        return (self.model.created_at, self.model.id)

    def create(self, data: dict[str, Any]) -> ModelT:
        """Stores a new record with a fresh id and creation (and update) stamps."""
        entity = self.model()
        apply_dict_updates(entity, data, self.immutable_fields)

        now = utcnow()
        entity.id = uuid.uuid4()
        entity.created_at = now
        if hasattr(self.model, "updated_at"):
            entity.updated_at = now

        self.session.add(entity)
        self.session.flush()
        return entity

    def get(self, entity_id) -> ModelT | None:
        return self.session.get(self.model, entity_id)

    def update(self, entity_id, data: dict[str, Any]) -> ModelT | None:
        """Merges fields into an existing record. Returns None if it is missing."""
        entity = self.get(entity_id)
        if entity is None:
            return None

        apply_dict_updates(entity, data, self.immutable_fields)
        if hasattr(self.model, "updated_at"):
            entity.updated_at = utcnow()

        self.session.flush()
        return entity

    def delete(self, entity_id) -> bool:
        entity = self.get(entity_id)
        if entity is None:
            return False
        self.session.delete(entity)
        self.session.flush()
        return True

    def list_by(self, *criteria) -> Sequence[ModelT]:
        stmt = select(self.model).where(*criteria).order_by(*self.default_order())
        return self.session.scalars(stmt).all()

    def count(self, *criteria) -> int:
        stmt = select(func.count()).select_from(self.model).where(*criteria)
        return self.session.scalar(stmt) or 0

import uuid
from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.models.link import CharacterLink, ClassLink, LinkedTo
from app.models.study import Bookmark, Note, Progress
from app.repositories.base import Repository


class PersonalRecordRepository(Repository):
    """Shared lookups for user-owned records that link to a class or character."""

    def _link_criteria(self, link: LinkedTo) -> tuple:
        if isinstance(link, ClassLink):
            return (self.model.class_id == link.id,)
        if isinstance(link, CharacterLink):
            return (self.model.character_id == link.id,)
        return (self.model.class_id.is_(None), self.model.character_id.is_(None))

    def list_for_user(self, user_id: uuid.UUID) -> Sequence:
        return self.list_by(self.model.user_id == user_id)

    def count_for_user(self, user_id: uuid.UUID) -> int:
        return self.count(self.model.user_id == user_id)

    def find_for(self, user_id: uuid.UUID, link: LinkedTo):
        """First record owned by user_id that points at link, or None."""
        stmt = (
            select(self.model)
            .where(self.model.user_id == user_id, *self._link_criteria(link))
            .order_by(*self.default_order())
            .limit(1)
        )
        return self.session.scalars(stmt).first()

    def delete_linked(self, link: LinkedTo) -> int:
        """Removes every record (any owner) linked to a class or character."""
        if not isinstance(link, (ClassLink, CharacterLink)):
            return 0
        result = self.session.execute(
            delete(self.model)
            .where(*self._link_criteria(link))
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount or 0


class ProgressRepository(PersonalRecordRepository):
    def __init__(self, session: Session):
        super().__init__(session, Progress)


class BookmarkRepository(PersonalRecordRepository):
    def __init__(self, session: Session):
        super().__init__(session, Bookmark)


class NoteRepository(PersonalRecordRepository):
    def __init__(self, session: Session):
        super().__init__(session, Note)

    def list_filtered(
        self,
        user_id: uuid.UUID,
        *,
        class_id: uuid.UUID | None = None,
        character_id: uuid.UUID | None = None,
    ) -> Sequence[Note]:
        """Notes of one user, optionally narrowed to a class and/or character."""
        criteria = [Note.user_id == user_id]
        if class_id is not None:
            criteria.append(Note.class_id == class_id)
        if character_id is not None:
            criteria.append(Note.character_id == character_id)
        return self.list_by(*criteria)

from sqlalchemy.orm import Session

from app.models.lesson import Character, StudyClass
from app.repositories.base import Repository


class ClassRepository(Repository[StudyClass]):
    """Classes list in catalog order: `order` ascending, ties by insertion."""

    def __init__(self, session: Session):
        super().__init__(session, StudyClass)

    def default_order(self) -> tuple:
        return (StudyClass.order, StudyClass.created_at, StudyClass.id)

    def list_published(self):
        return self.list_by(StudyClass.is_published.is_(True))


class CharacterRepository(Repository[Character]):
    def __init__(self, session: Session):
        super().__init__(session, Character)

    def list_published(self):
        return self.list_by(Character.is_published.is_(True))

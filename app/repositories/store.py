from sqlalchemy.orm import Session

from app.repositories.content import CharacterRepository, ClassRepository
from app.repositories.study import BookmarkRepository, NoteRepository, ProgressRepository
from app.repositories.user import UserRepository


class StudyStore:
    """
    The entity store: one repository per collection over a shared Session.

    Created per request by app.core.deps.get_store and handed explicitly to
    services, so every collection of a request sees the same transaction.
    """

    def __init__(self, session: Session):
        self.session = session
        self.users = UserRepository(session)
        self.classes = ClassRepository(session)
        self.characters = CharacterRepository(session)
        self.progress = ProgressRepository(session)
        self.bookmarks = BookmarkRepository(session)
        self.notes = NoteRepository(session)

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.user import User
from app.repositories.base import Repository


class UserRepository(Repository[User]):
    def __init__(self, session: Session):
        super().__init__(session, User)

    def get_by_email(self, email: str) -> User | None:
        """Retrieves a User by their unique email (login ID), compared as stored."""
        stmt = select(User).where(User.email == email)
        return self.session.scalars(stmt).one_or_none()

from .base import Repository
from .content import CharacterRepository, ClassRepository
from .store import StudyStore
from .study import BookmarkRepository, NoteRepository, ProgressRepository
from .user import UserRepository

__all__ = [
    "Repository",
    "StudyStore",
    "UserRepository",
    "ClassRepository",
    "CharacterRepository",
    "ProgressRepository",
    "BookmarkRepository",
    "NoteRepository",
]

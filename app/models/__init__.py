# Base.metadata에 모든 테이블 등록
from app.models.user import User, Role
from app.models.lesson import StudyClass, Character
from app.models.study import Progress, Bookmark, Note
from app.models.admin_log import AdminAction, AdminActionLog
from app.models.link import ClassLink, CharacterLink, Unlinked, LinkedTo

__all__ = [
    "User",
    "Role",
    "StudyClass",
    "Character",
    "Progress",
    "Bookmark",
    "Note",
    "AdminAction",
    "AdminActionLog",
    "ClassLink",
    "CharacterLink",
    "Unlinked",
    "LinkedTo",
]

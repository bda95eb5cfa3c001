"""
link.py

개인 학습 기록(Progress / Bookmark / Note)이 가리키는 대상(Link) 정의.

대상은 태그드 변형(tagged variant)으로 표현한다.

- ClassLink(id)      : 수업(StudyClass)에 연결
- CharacterLink(id)  : 성경 인물(Character)에 연결
- Unlinked           : 연결 없음 (노트에서만 허용)

DB에는 class_id / character_id 두 nullable 컬럼으로 저장하고, CHECK 제약으로 동시에 설정되는 것을 막는다.

"""

import uuid
from dataclasses import dataclass
from typing import ClassVar, Union

from sqlalchemy import CheckConstraint, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column


@dataclass(frozen=True)
class ClassLink:
    kind: ClassVar[str] = "class"
    id: uuid.UUID


@dataclass(frozen=True)
class CharacterLink:
    kind: ClassVar[str] = "character"
    id: uuid.UUID


@dataclass(frozen=True)
class Unlinked:
    kind: ClassVar[str] = "none"


LinkedTo = Union[ClassLink, CharacterLink, Unlinked]


def link_columns(link: LinkedTo) -> dict:
    """Column values (class_id, character_id) for a link."""
    return {
        "class_id": link.id if isinstance(link, ClassLink) else None,
        "character_id": link.id if isinstance(link, CharacterLink) else None,
    }


def single_link_check(table: str) -> CheckConstraint:
    return CheckConstraint(
        "class_id IS NULL OR character_id IS NULL",
        name=f"ck_{table}_single_link",
    )


class LinkedRecordMixin:
    """class_id / character_id 컬럼과 linked_to 변환을 제공하는 믹스인."""

    class_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("classes.id", ondelete="CASCADE"), nullable=True, index=True
    )
    character_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("characters.id", ondelete="CASCADE"), nullable=True, index=True
    )

    @property
    def linked_to(self) -> LinkedTo:
        if self.class_id is not None:
            return ClassLink(self.class_id)
        if self.character_id is not None:
            return CharacterLink(self.character_id)
        return Unlinked()

"""
study.py

사용자 소유 학습 기록 모델: 진도(Progress), 북마크(Bookmark), 노트(Note).

- 모든 레코드는 user_id 소유자만 조회/수정 가능 (app.core.policy)
- 대상은 LinkedRecordMixin(class_id / character_id)으로 표현
- Progress는 (user, class), (user, character) 당 최대 1개
  → 서비스 계층의 잠금 upsert가 주 보장, UniqueConstraint는 다중 프로세스 대비
- Bookmark는 저장소 차원의 유일성 제약 없음 (라우터에서 중복 확인)

"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Text, UniqueConstraint, Uuid, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, utcnow
from app.models.link import LinkedRecordMixin, single_link_check


class Progress(LinkedRecordMixin, Base):
    __tablename__ = "user_progress"
    __table_args__ = (
        UniqueConstraint("user_id", "class_id", name="uq_user_progress_user_class"),
        UniqueConstraint("user_id", "character_id", name="uq_user_progress_user_character"),
        CheckConstraint("reading_progress BETWEEN 0 AND 100", name="ck_user_progress_percentage"),
        single_link_check("user_progress"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    is_completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    reading_progress: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # percentage
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)


class Bookmark(LinkedRecordMixin, Base):
    __tablename__ = "bookmarks"
    __table_args__ = (single_link_check("bookmarks"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)


class Note(LinkedRecordMixin, Base):
    __tablename__ = "notes"
    __table_args__ = (single_link_check("notes"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    content: Mapped[str] = mapped_column(Text, nullable=False)
    is_private: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)

"""

admin_log.py

관리자(Admin) 행위 기록(Audit Log) 모델 정의 파일.

관리자에 의해 수행된 주요 관리 행위
(권한 변경, 수업/인물 콘텐츠 생성·수정·삭제)를
DB에 영구적으로 기록하기 위한 로그 테이블을 정의한다.

설계 원칙:
- 실제 데이터 변경과 로그 기록을 분리
- 로그 데이터는 수정/삭제하지 않는 것을 전제로 설계
- actor(행위자)와 target(대상 사용자 / 대상 콘텐츠)을 명확히 구분

"""

import uuid
from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, Enum as SAEnum, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, utcnow


class AdminAction(str, Enum):
    SET_ROLE = "SET_ROLE"
    CREATE_CLASS = "CREATE_CLASS"
    UPDATE_CLASS = "UPDATE_CLASS"
    DELETE_CLASS = "DELETE_CLASS"
    CREATE_CHARACTER = "CREATE_CHARACTER"
    UPDATE_CHARACTER = "UPDATE_CHARACTER"
    DELETE_CHARACTER = "DELETE_CHARACTER"


"""
관리자 행위 로그 모델

- actor_id       : 행위를 수행한 관리자 ID
- target_user_id : 권한 변경 대상 사용자 ID (없을 수 있음)
- target_id      : 대상 수업/인물 ID (삭제 후에도 남도록 FK 없음)
- before / after : 변경 전후 값 요약 (권한 값, 제목 등)

"""

class AdminActionLog(Base):
    __tablename__ = "admin_action_logs"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    actor_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id"), nullable=False)
    target_user_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("users.id"), nullable=True)
    target_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)

    action: Mapped[AdminAction] = mapped_column(SAEnum(AdminAction, name="admin_action"), nullable=False)

    before: Mapped[str | None] = mapped_column(String(255), nullable=True)
    after: Mapped[str | None] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

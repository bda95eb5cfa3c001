"""
user.py

사용자(User) 및 권한(Role) 모델 정의 파일.

모든 인증, 권한, 학습 진도, 관리자 기능의 기준이 되는 핵심 모델이다.

"""

import uuid
import datetime
from enum import Enum

from sqlalchemy import String, DateTime, Uuid, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, utcnow


"""
사용자 권한(Role) 정의

- USER        : 일반 학습자
- ADMIN       : 수업/인물 콘텐츠 관리자
- SUPER_ADMIN : 최고 관리자 (전체 회원 조회, 권한 변경)

"""

class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    role: Mapped[Role] = mapped_column(
        SAEnum(Role, name="user_role", values_callable=lambda roles: [r.value for r in roles]),
        nullable=False,
        default=Role.USER,
    )

    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

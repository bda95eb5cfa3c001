"""
base.py

SQLAlchemy ORM Base 정의 파일.

모든 모델(User, StudyClass, Progress 등)은 이 Base를 기준으로
테이블 메타데이터가 관리되며, Alembic 마이그레이션 또한 이 Base를 기준으로 동작한다.

"""

from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base

# 모든 ORM 모델이 상속받는 Base 클래스
Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)

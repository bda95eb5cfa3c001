"""
services/admin_log.py

관리자 행위(Audit) 로그 기록.

권한 변경과 수업/인물 생성·수정·삭제가 호출한다.
before / after 에는 권한 값이나 제목처럼 짧은 요약만 남긴다.

NOTE:
- flush / commit 은 호출 측 트랜잭션에 맡김 (데이터 변경과 같은 commit 으로 저장)

"""

import uuid

from sqlalchemy.orm import Session

from app.models.admin_log import AdminAction, AdminActionLog

SUMMARY_MAX_LENGTH = 255


def _summary(value: str | None) -> str | None:
    if value is None:
        return None
    return value[:SUMMARY_MAX_LENGTH]


def write_admin_log(
    db: Session,
    *,
    actor_id: uuid.UUID,
    action: AdminAction,
    target_user_id: uuid.UUID | None = None,
    target_id: uuid.UUID | None = None,
    before: str | None = None,
    after: str | None = None,
) -> AdminActionLog:
    entry = AdminActionLog(
        actor_id=actor_id,
        action=action,
        target_user_id=target_user_id,
        target_id=target_id,
        before=_summary(before),
        after=_summary(after),
    )
    db.add(entry)
    return entry

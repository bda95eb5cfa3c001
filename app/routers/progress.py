"""
progress.py

학습 진도(Progress) API 모음.

주요 기능:
- 내 진도 목록 조회
- 진도 기록 (사용자 + 대상 당 1개, 있으면 병합 / 없으면 생성)
- 진도 기록 단건 수정 (본인만)

설계 원칙:
- 완료 처리 시 reading_progress=100, completed_at 자동 기록
- 동일 대상에 대한 동시 요청도 기록은 1개만 남음

관련 파일:
- app.services.progress    : upsert 규칙 + 통계 계산
- app.core.policy          : 소유자 확인

"""

import uuid

from fastapi import APIRouter, Depends

from app.core.deps import get_aggregator, get_current_user, get_store
from app.core.exceptions import InvalidInputError, NotFoundError
from app.core.policy import Action, authorize
from app.models.user import User
from app.repositories.store import StudyStore
from app.schemas.study import ProgressRecordRequest, ProgressResponse, ProgressUpdateRequest
from app.services.progress import ProgressAggregator

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("", response_model=list[ProgressResponse])
def my_progress(
    store: StudyStore = Depends(get_store),
    user: User = Depends(get_current_user),
):
    return store.progress.list_for_user(user.id)


"""
진도 기록 API

- target: {"kind": "class" | "character", "id": ...}
- 대상이 없으면 404
- 같은 대상으로 다시 보내면 기존 기록에 병합

"""

@router.post("", response_model=ProgressResponse)
def record_progress(
    body: ProgressRecordRequest,
    user: User = Depends(get_current_user),
    aggregator: ProgressAggregator = Depends(get_aggregator),
):
    return aggregator.record_progress(
        user.id,
        body.target.to_link(),
        is_completed=body.is_completed,
        reading_progress=body.reading_progress,
    )


@router.patch("/{progress_id}", response_model=ProgressResponse)
def update_progress(
    progress_id: uuid.UUID,
    body: ProgressUpdateRequest,
    store: StudyStore = Depends(get_store),
    user: User = Depends(get_current_user),
    aggregator: ProgressAggregator = Depends(get_aggregator),
):
    record = store.progress.get(progress_id)
    if not record:
        raise NotFoundError("Progress not found")

    authorize(user, Action.ACCESS_OWN_DATA, owner_id=record.user_id)

    if body.is_completed is None and body.reading_progress is None:
        raise InvalidInputError("No changes provided")

    return aggregator.update_progress(
        record,
        is_completed=body.is_completed,
        reading_progress=body.reading_progress,
    )

"""
classes.py

수업(StudyClass) API 모음.

주요 기능:
- 공개된 수업 목록 / 상세 조회 (로그인 필요)
- 섹션별 내 학습 상태 조회
- 수업 생성 / 수정 / 삭제 (ADMIN 이상)

설계 원칙:
- 비공개 수업은 일반 조회 API에서 404로 취급
- 삭제 시 연결된 개인 기록은 서비스 계층에서 함께 삭제

관련 파일:
- app.services.content     : 생성/수정/삭제 + 관리자 로그
- app.services.progress    : 섹션 상태 계산

"""

import uuid

from fastapi import APIRouter, Depends

from app.core.deps import get_aggregator, get_current_admin, get_current_user, get_store
from app.core.exceptions import NotFoundError
from app.models.user import User
from app.repositories.store import StudyStore
from app.schemas.lesson import ClassCreateRequest, ClassResponse, ClassUpdateRequest
from app.schemas.stats import SectionSummary
from app.services import content
from app.services.progress import ProgressAggregator

router = APIRouter(prefix="/classes", tags=["classes"])


@router.get("", response_model=list[ClassResponse])
def list_published_classes(
    store: StudyStore = Depends(get_store),
    _: User = Depends(get_current_user),
):
    return store.classes.list_published()


@router.get("/sections", response_model=list[SectionSummary])
def my_sections(
    user: User = Depends(get_current_user),
    aggregator: ProgressAggregator = Depends(get_aggregator),
):
    return aggregator.section_overview(user.id)


@router.get("/{class_id}", response_model=ClassResponse)
def get_class(
    class_id: uuid.UUID,
    store: StudyStore = Depends(get_store),
    _: User = Depends(get_current_user),
):
    study_class = store.classes.get(class_id)
    if not study_class or not study_class.is_published:
        raise NotFoundError("Class not found")
    return study_class


@router.post("", response_model=ClassResponse)
def create_class(
    body: ClassCreateRequest,
    store: StudyStore = Depends(get_store),
    admin: User = Depends(get_current_admin),
):
    study_class = content.create_class(store, data=body.model_dump(), actor_id=admin.id)
    store.commit()
    return study_class


@router.patch("/{class_id}", response_model=ClassResponse)
def update_class(
    class_id: uuid.UUID,
    body: ClassUpdateRequest,
    store: StudyStore = Depends(get_store),
    admin: User = Depends(get_current_admin),
):
    study_class = content.update_class(store, class_id, data=body.changes(), actor_id=admin.id)
    store.commit()
    return study_class


@router.delete("/{class_id}")
def delete_class(
    class_id: uuid.UUID,
    store: StudyStore = Depends(get_store),
    admin: User = Depends(get_current_admin),
):
    removed = content.delete_class(store, class_id, actor_id=admin.id)
    store.commit()
    return {"message": "Class deleted", "removed": removed}

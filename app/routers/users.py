"""
users.py

사용자별 개인 기록 조회 API 모음.

경로에 user_id 를 받지만, 접근은 본인(user_id == 로그인 사용자)만 가능하다.
관리자라도 다른 사용자의 진도 / 북마크 / 노트는 조회할 수 없다.
관리자용 사용자 관리 기능은 admin.py 에서 담당한다.

주요 기능:
- 사용자 진도 목록 조회
- 사용자 북마크 목록 조회
- 사용자 노트 목록 조회

관련 파일:
- app.core.policy          : 소유자 확인(ACCESS_OWN_DATA)
- app.repositories.study   : 개인 기록 저장소

"""

import uuid

from fastapi import APIRouter, Depends

from app.core.deps import get_current_user, get_store
from app.core.policy import Action, authorize
from app.models.user import User
from app.repositories.store import StudyStore
from app.schemas.study import BookmarkResponse, NoteResponse, ProgressResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}/progress", response_model=list[ProgressResponse])
def list_user_progress(
    user_id: uuid.UUID,
    store: StudyStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    authorize(current_user, Action.ACCESS_OWN_DATA, owner_id=user_id)
    return store.progress.list_for_user(user_id)


@router.get("/{user_id}/bookmarks", response_model=list[BookmarkResponse])
def list_user_bookmarks(
    user_id: uuid.UUID,
    store: StudyStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    authorize(current_user, Action.ACCESS_OWN_DATA, owner_id=user_id)
    return store.bookmarks.list_for_user(user_id)


@router.get("/{user_id}/notes", response_model=list[NoteResponse])
def list_user_notes(
    user_id: uuid.UUID,
    store: StudyStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    authorize(current_user, Action.ACCESS_OWN_DATA, owner_id=user_id)
    return store.notes.list_for_user(user_id)

"""
notes.py

노트(Note) API 모음.

- 노트는 수업 / 인물에 연결하거나 연결 없이 작성 가능
- 조회 / 수정 / 삭제는 작성자 본인만 (관리자도 예외 없음)
- is_private 는 기록용 플래그, 접근 범위에는 영향 없음

"""

import uuid
from typing import Optional

from fastapi import APIRouter, Depends

from app.core.deps import get_current_user, get_store
from app.core.exceptions import InvalidInputError, NotFoundError
from app.core.policy import Action, authorize
from app.models.link import link_columns
from app.models.study import Note
from app.models.user import User
from app.repositories.store import StudyStore
from app.schemas.study import NoteCreateRequest, NoteResponse, NoteUpdateRequest
from app.services.content import ensure_link_target

router = APIRouter(prefix="/notes", tags=["notes"])


def _get_own_note(store: StudyStore, user: User, note_id: uuid.UUID) -> Note:
    note = store.notes.get(note_id)
    if not note:
        raise NotFoundError("Note not found")

    authorize(user, Action.ACCESS_OWN_DATA, owner_id=note.user_id)
    return note


# class_id / character_id 로 내 노트 필터링
@router.get("", response_model=list[NoteResponse])
def my_notes(
    class_id: Optional[uuid.UUID] = None,
    character_id: Optional[uuid.UUID] = None,
    store: StudyStore = Depends(get_store),
    user: User = Depends(get_current_user),
):
    return store.notes.list_filtered(user.id, class_id=class_id, character_id=character_id)


@router.post("", response_model=NoteResponse)
def create_note(
    body: NoteCreateRequest,
    store: StudyStore = Depends(get_store),
    user: User = Depends(get_current_user),
):
    link = body.target.to_link()
    ensure_link_target(store, link)

    note = store.notes.create(
        {
            "user_id": user.id,
            **link_columns(link),
            "content": body.content,
            "is_private": body.is_private,
        }
    )
    store.commit()
    return note


@router.get("/{note_id}", response_model=NoteResponse)
def get_note(
    note_id: uuid.UUID,
    store: StudyStore = Depends(get_store),
    user: User = Depends(get_current_user),
):
    return _get_own_note(store, user, note_id)


@router.patch("/{note_id}", response_model=NoteResponse)
def update_note(
    note_id: uuid.UUID,
    body: NoteUpdateRequest,
    store: StudyStore = Depends(get_store),
    user: User = Depends(get_current_user),
):
    _get_own_note(store, user, note_id)

    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        raise InvalidInputError("No changes provided")

    note = store.notes.update(note_id, changes)
    store.commit()
    return note


@router.delete("/{note_id}")
def delete_note(
    note_id: uuid.UUID,
    store: StudyStore = Depends(get_store),
    user: User = Depends(get_current_user),
):
    _get_own_note(store, user, note_id)

    store.notes.delete(note_id)
    store.commit()
    return {"message": "Note deleted"}

import uuid

from fastapi import APIRouter, Depends

from app.core.deps import get_current_admin, get_current_user, get_store
from app.core.exceptions import NotFoundError
from app.models.user import User
from app.repositories.store import StudyStore
from app.schemas.lesson import CharacterCreateRequest, CharacterResponse, CharacterUpdateRequest
from app.services import content

router = APIRouter(prefix="/characters", tags=["characters"])


# 공개된 성경 인물 목록 (생성 순)
@router.get("", response_model=list[CharacterResponse])
def list_published_characters(
    store: StudyStore = Depends(get_store),
    _: User = Depends(get_current_user),
):
    return store.characters.list_published()


@router.get("/{character_id}", response_model=CharacterResponse)
def get_character(
    character_id: uuid.UUID,
    store: StudyStore = Depends(get_store),
    _: User = Depends(get_current_user),
):
    character = store.characters.get(character_id)
    if not character or not character.is_published:
        raise NotFoundError("Character not found")
    return character


@router.post("", response_model=CharacterResponse)
def create_character(
    body: CharacterCreateRequest,
    store: StudyStore = Depends(get_store),
    admin: User = Depends(get_current_admin),
):
    character = content.create_character(store, data=body.model_dump(), actor_id=admin.id)
    store.commit()
    return character


@router.patch("/{character_id}", response_model=CharacterResponse)
def update_character(
    character_id: uuid.UUID,
    body: CharacterUpdateRequest,
    store: StudyStore = Depends(get_store),
    admin: User = Depends(get_current_admin),
):
    character = content.update_character(store, character_id, data=body.changes(), actor_id=admin.id)
    store.commit()
    return character


@router.delete("/{character_id}")
def delete_character(
    character_id: uuid.UUID,
    store: StudyStore = Depends(get_store),
    admin: User = Depends(get_current_admin),
):
    removed = content.delete_character(store, character_id, actor_id=admin.id)
    store.commit()
    return {"message": "Character deleted", "removed": removed}

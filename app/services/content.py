"""
services/content.py

수업(StudyClass) / 성경 인물(Character) 콘텐츠 관리 비즈니스 로직.

주요 기능:
- 개인 기록이 가리킬 대상(수업/인물) 존재 및 공개 여부 확인
- 콘텐츠 생성 / 수정 / 삭제 + 관리자 로그 기록
- 삭제 시 연결된 진도/북마크/노트를 같은 트랜잭션에서 함께 삭제 (cascade)

설계 원칙:
- HTTP / FastAPI 의존성 없음
- 트랜잭션 제어(commit)는 라우터에서 수행
- 고아(orphan) 개인 기록을 남기지 않음

"""

import logging
import uuid

from app.core.exceptions import NotFoundError
from app.models.admin_log import AdminAction
from app.models.lesson import Character, StudyClass
from app.models.link import CharacterLink, ClassLink, LinkedTo
from app.repositories.store import StudyStore
from app.services.admin_log import write_admin_log

logger = logging.getLogger(__name__)


# 비공개(draft) 콘텐츠는 공개 조회와 같이 404 로 취급
def ensure_link_target(store: StudyStore, link: LinkedTo) -> None:
    if isinstance(link, ClassLink):
        study_class = store.classes.get(link.id)
        if study_class is None or not study_class.is_published:
            raise NotFoundError("Class not found")
    if isinstance(link, CharacterLink):
        character = store.characters.get(link.id)
        if character is None or not character.is_published:
            raise NotFoundError("Character not found")


def _remove_linked_records(store: StudyStore, link: LinkedTo) -> dict[str, int]:
    removed = {
        "progress": store.progress.delete_linked(link),
        "bookmarks": store.bookmarks.delete_linked(link),
        "notes": store.notes.delete_linked(link),
    }
    if any(removed.values()):
        logger.info("cascade delete for %s %s: %s", link.kind, link.id, removed)
    return removed


def create_class(store: StudyStore, *, data: dict, actor_id: uuid.UUID) -> StudyClass:
    study_class = store.classes.create(data)
    write_admin_log(
        store.session,
        actor_id=actor_id,
        action=AdminAction.CREATE_CLASS,
        target_id=study_class.id,
        after=study_class.title,
    )
    logger.info("class created id=%s title=%r", study_class.id, study_class.title)
    return study_class


def update_class(store: StudyStore, class_id: uuid.UUID, *, data: dict, actor_id: uuid.UUID) -> StudyClass:
    existing = store.classes.get(class_id)
    if existing is None:
        raise NotFoundError("Class not found")

    before = existing.title
    study_class = store.classes.update(class_id, data)
    write_admin_log(
        store.session,
        actor_id=actor_id,
        action=AdminAction.UPDATE_CLASS,
        target_id=class_id,
        before=before,
        after=study_class.title,
    )
    return study_class


def delete_class(store: StudyStore, class_id: uuid.UUID, *, actor_id: uuid.UUID) -> dict[str, int]:
    existing = store.classes.get(class_id)
    if existing is None:
        raise NotFoundError("Class not found")

    title = existing.title
    removed = _remove_linked_records(store, ClassLink(class_id))
    store.classes.delete(class_id)
    write_admin_log(
        store.session,
        actor_id=actor_id,
        action=AdminAction.DELETE_CLASS,
        target_id=class_id,
        before=title,
    )
    logger.info("class deleted id=%s", class_id)
    return removed


def create_character(store: StudyStore, *, data: dict, actor_id: uuid.UUID) -> Character:
    character = store.characters.create(data)
    write_admin_log(
        store.session,
        actor_id=actor_id,
        action=AdminAction.CREATE_CHARACTER,
        target_id=character.id,
        after=character.name,
    )
    logger.info("character created id=%s name=%r", character.id, character.name)
    return character


def update_character(store: StudyStore, character_id: uuid.UUID, *, data: dict, actor_id: uuid.UUID) -> Character:
    existing = store.characters.get(character_id)
    if existing is None:
        raise NotFoundError("Character not found")

    before = existing.name
    character = store.characters.update(character_id, data)
    write_admin_log(
        store.session,
        actor_id=actor_id,
        action=AdminAction.UPDATE_CHARACTER,
        target_id=character_id,
        before=before,
        after=character.name,
    )
    return character


def delete_character(store: StudyStore, character_id: uuid.UUID, *, actor_id: uuid.UUID) -> dict[str, int]:
    existing = store.characters.get(character_id)
    if existing is None:
        raise NotFoundError("Character not found")

    name = existing.name
    removed = _remove_linked_records(store, CharacterLink(character_id))
    store.characters.delete(character_id)
    write_admin_log(
        store.session,
        actor_id=actor_id,
        action=AdminAction.DELETE_CHARACTER,
        target_id=character_id,
        before=name,
    )
    logger.info("character deleted id=%s", character_id)
    return removed

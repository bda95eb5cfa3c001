"""
services/progress.py

학습 진도(Progress) 도메인의 비즈니스 로직 모음.

원시 진도/북마크/노트/수업 레코드로부터 파생 통계를 계산하고,
진도 기록의 정식 upsert 규칙을 정의한다.

주요 기능:
- 진도 기록 upsert (사용자 + 대상 당 1개)
- 사용자 통계 (완료 수, 진행 중 수, 북마크/노트 수, 완료율)
- 섹션 상태 (complete / in_progress / not_started)
- 관리자 대시보드 통계 및 사용자별 리포트

설계 원칙:
- 통계는 저장하지 않고 요청 시점에 항상 원본 레코드에서 재계산
- 데이터가 없으면 0 값 통계를 반환, 예외를 던지지 않음
- find-then-write upsert는 (user, 대상) 키 단위 잠금 안에서 commit까지 수행
  (다른 세션이 아직 commit되지 않은 레코드를 보지 못하기 때문)

관련 파일:
- app.repositories.store  : StudyStore
- app.routers.progress    : 진도 API
- app.routers.auth        : /auth/me 통계

"""

import logging
import threading
import uuid
from collections.abc import Hashable, Iterable, Mapping
from contextlib import contextmanager
from datetime import timedelta

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from app.core.exceptions import ConflictError, InvalidInputError
from app.db.base import utcnow
from app.models.lesson import StudyClass
from app.models.link import LinkedTo, Unlinked, link_columns
from app.models.study import Progress
from app.models.user import User
from app.repositories.store import StudyStore
from app.schemas.stats import AdminStats, SectionStatus, SectionSummary, UserStats
from app.services.content import ensure_link_target

logger = logging.getLogger(__name__)

ACTIVE_WINDOW = timedelta(days=7)


class KeyedLock:
    """One mutex per key, created on demand and dropped when nobody holds or waits on it."""

    def __init__(self):
        self._guard = threading.Lock()
        self._entries: dict[Hashable, list] = {}  # key -> [lock, holders+waiters]

    @contextmanager
    def hold(self, key: Hashable):
        with self._guard:
            entry = self._entries.setdefault(key, [threading.Lock(), 0])
            entry[1] += 1

        entry[0].acquire()
        try:
            yield
        finally:
            entry[0].release()
            with self._guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._entries[key]

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)


def percent_half_up(part: int, whole: int) -> int:
    """round(part / whole * 100) with halves rounded up; 0 when whole is 0."""
    if whole <= 0:
        return 0
    return (part * 200 + whole) // (2 * whole)


def _normalized_changes(existing: Progress | None, is_completed: bool | None, reading_progress: int | None) -> dict:
    changes = {}
    if reading_progress is not None:
        if not 0 <= reading_progress <= 100:
            raise InvalidInputError("reading_progress must be between 0 and 100")
        changes["reading_progress"] = reading_progress

    if is_completed is True:
        changes.update(is_completed=True, reading_progress=100, completed_at=utcnow())
    elif is_completed is False:
        changes.update(is_completed=False, completed_at=None)
    elif existing is not None and existing.is_completed and "reading_progress" in changes:
        # 완료된 기록은 읽기 진도 100 유지
        changes["reading_progress"] = 100
    return changes


class ProgressAggregator:
    def __init__(self, store: StudyStore, locks: KeyedLock):
        self.store = store
        self.locks = locks

    """
    진도 기록 upsert

    - (user_id, link) 기록이 있으면 병합, 없으면 기본값(is_completed=False, reading_progress=0)으로 생성
    - is_completed=True 는 reading_progress=100, completed_at=now 로 정규화
    - commit까지 이 메서드가 수행

    """

    def record_progress(
        self,
        user_id: uuid.UUID,
        link: LinkedTo,
        *,
        is_completed: bool | None = None,
        reading_progress: int | None = None,
    ) -> Progress:
        if isinstance(link, Unlinked):
            raise InvalidInputError("Progress must point at a class or a character")
        ensure_link_target(self.store, link)

        with self.locks.hold((user_id, link)):
            existing = self.store.progress.find_for(user_id, link)
            changes = _normalized_changes(existing, is_completed, reading_progress)

            try:
                if existing is None:
                    values = {
                        "user_id": user_id,
                        **link_columns(link),
                        "is_completed": False,
                        "reading_progress": 0,
                        "completed_at": None,
                    }
                    values.update(changes)
                    record = self.store.progress.create(values)
                else:
                    record = self.store.progress.update(existing.id, changes)
                self.store.commit()
            except IntegrityError:
                self.store.rollback()
                raise ConflictError("Progress for this target already exists")

        logger.debug(
            "progress recorded user=%s target=%s:%s completed=%s reading=%s",
            user_id, link.kind, getattr(link, "id", None), record.is_completed, record.reading_progress,
        )
        return record

    def update_progress(
        self,
        record: Progress,
        *,
        is_completed: bool | None = None,
        reading_progress: int | None = None,
    ) -> Progress:
        """Applies the same normalisation to an already loaded record and commits."""
        changes = _normalized_changes(record, is_completed, reading_progress)
        updated = self.store.progress.update(record.id, changes)
        self.store.commit()
        return updated

    def compute_user_stats(self, user_id: uuid.UUID) -> UserStats:
        progress = self.store.progress
        completed = progress.count(
            Progress.user_id == user_id,
            Progress.is_completed.is_(True),
            Progress.class_id.is_not(None),
        )
        in_progress = progress.count(
            Progress.user_id == user_id,
            Progress.is_completed.is_(False),
            Progress.reading_progress > 0,
            Progress.class_id.is_not(None),
        )
        total_published = self.store.classes.count(StudyClass.is_published.is_(True))

        return UserStats(
            completed_classes=completed,
            in_progress_classes=in_progress,
            total_bookmarks=self.store.bookmarks.count_for_user(user_id),
            total_notes=self.store.notes.count_for_user(user_id),
            progress_percentage=percent_half_up(completed, total_published),
        )

    @staticmethod
    def compute_section_status(
        section_classes: Iterable[StudyClass],
        progress_by_class_id: Mapping[uuid.UUID, Progress],
    ) -> SectionStatus:
        records = [progress_by_class_id.get(c.id) for c in section_classes]

        if all(p is not None and p.is_completed for p in records):
            return SectionStatus.COMPLETE
        if any(p is not None and p.reading_progress > 0 for p in records):
            return SectionStatus.IN_PROGRESS
        return SectionStatus.NOT_STARTED

    def section_overview(self, user_id: uuid.UUID) -> list[SectionSummary]:
        """Status of every section of the published catalog, in catalog order."""
        sections: dict[str, list[StudyClass]] = {}
        for study_class in self.store.classes.list_published():
            sections.setdefault(study_class.section, []).append(study_class)

        progress_by_class_id = {
            p.class_id: p for p in self.store.progress.list_for_user(user_id) if p.class_id is not None
        }

        summaries = []
        for name, classes in sections.items():
            completed = sum(
                1 for c in classes
                if c.id in progress_by_class_id and progress_by_class_id[c.id].is_completed
            )
            summaries.append(
                SectionSummary(
                    section=name,
                    status=self.compute_section_status(classes, progress_by_class_id),
                    completed_classes=completed,
                    total_classes=len(classes),
                )
            )
        return summaries

    def compute_admin_stats(self) -> AdminStats:
        session = self.store.session
        cutoff = utcnow() - ACTIVE_WINDOW

        active_users = session.scalar(
            select(func.count(func.distinct(Progress.user_id))).where(Progress.created_at >= cutoff)
        ) or 0
        total, count = session.execute(
            select(func.coalesce(func.sum(Progress.reading_progress), 0), func.count(Progress.id))
        ).one()

        return AdminStats(
            total_users=self.store.users.count(),
            active_users=active_users,
            completed_classes=self.store.progress.count(Progress.is_completed.is_(True)),
            average_progress=percent_half_up(int(total), int(count) * 100),
        )

    def user_report(self) -> list[tuple[User, UserStats]]:
        """Every user with their current statistics, oldest account first."""
        return [(user, self.compute_user_stats(user.id)) for user in self.store.users.list_by()]

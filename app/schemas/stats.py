from enum import Enum

from pydantic import BaseModel


class SectionStatus(str, Enum):
    COMPLETE = "complete"
    IN_PROGRESS = "in_progress"
    NOT_STARTED = "not_started"


class UserStats(BaseModel):
    completed_classes: int = 0
    in_progress_classes: int = 0
    total_bookmarks: int = 0
    total_notes: int = 0
    progress_percentage: int = 0


class SectionSummary(BaseModel):
    section: str
    status: SectionStatus
    completed_classes: int
    total_classes: int


class AdminStats(BaseModel):
    total_users: int
    active_users: int  # 최근 7일 내 진도 기록이 생성된 사용자
    completed_classes: int
    average_progress: int

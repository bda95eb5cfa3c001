"""
admin.py

관리자 전용 API 모음.

주요 기능:
- 대시보드 통계 (전체 회원 수, 최근 7일 활동 회원 수, 완료 수, 평균 진도)
- 비공개 포함 전체 수업 목록
- 관리자 활동 로그 조회
- 회원별 학습 통계 CSV / Excel(xlsx) 내보내기
- 전체 회원 목록 / 권한 변경 (SUPER_ADMIN 전용)
- 최초 SUPER_ADMIN 생성 (설정된 setup secret 필요)

설계 원칙:
- 통계/콘텐츠 조회는 ADMIN 이상, 회원 관리는 SUPER_ADMIN 만
- 통계 계산은 service 계층(app.services.progress)에 위임
- 라우터는 요청/응답 처리와 commit 만 담당

관련 파일:
- app.services.progress    : 통계 / 리포트 계산
- app.services.admin       : 권한 변경, bootstrap
- app.models.admin_log     : 관리자 행위 로그

"""

import csv
import io
import logging
import secrets
import uuid

from fastapi import APIRouter, Depends
from openpyxl import Workbook
from sqlalchemy import desc, select
from sqlalchemy.orm import aliased
from starlette.responses import Response, StreamingResponse

from app.core.config import settings
from app.core.deps import get_aggregator, get_current_super_admin, get_role_manager, get_stats_viewer, get_store
from app.core.exceptions import ForbiddenError
from app.models.admin_log import AdminActionLog
from app.models.user import User
from app.repositories.store import StudyStore
from app.schemas.auth import BootstrapRequest
from app.schemas.lesson import ClassResponse
from app.schemas.stats import AdminStats
from app.schemas.user import RoleUpdate, UserResponse
from app.services.admin import bootstrap_super_admin, set_role
from app.services.progress import ProgressAggregator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])

REPORT_COLUMNS = [
    "email",
    "name",
    "role",
    "completed_classes",
    "in_progress_classes",
    "total_bookmarks",
    "total_notes",
    "progress_percentage",
]


def _report_rows(aggregator: ProgressAggregator):
    for user, stats in aggregator.user_report():
        yield [
            user.email,
            user.name,
            user.role.value,
            stats.completed_classes,
            stats.in_progress_classes,
            stats.total_bookmarks,
            stats.total_notes,
            stats.progress_percentage,
        ]


@router.get("/stats", response_model=AdminStats)
def admin_stats(
    aggregator: ProgressAggregator = Depends(get_aggregator),
    _: User = Depends(get_stats_viewer),
):
    return aggregator.compute_admin_stats()


# 비공개(draft) 수업 포함 전체 목록, 카탈로그 순서
@router.get("/classes", response_model=list[ClassResponse])
def list_all_classes(
    store: StudyStore = Depends(get_store),
    _: User = Depends(get_stats_viewer),
):
    return store.classes.list_by()


"""
관리자 활동 로그 조회 API

- 최신 로그부터 limit 개 (1 ~ 200)
- 권한 변경 로그는 대상 사용자 정보 포함

"""

@router.get("/logs")
def list_admin_logs(
    limit: int = 50,
    store: StudyStore = Depends(get_store),
    _: User = Depends(get_stats_viewer),
):
    limit = max(1, min(limit, 200))

    Actor = aliased(User)
    Target = aliased(User)

    rows = store.session.execute(
        select(AdminActionLog, Actor, Target)
        .join(Actor, Actor.id == AdminActionLog.actor_id)
        .outerjoin(Target, Target.id == AdminActionLog.target_user_id)
        .order_by(desc(AdminActionLog.created_at))
        .limit(limit)
    ).all()

    result = [
        {
            "id": str(log.id),
            "created_at": log.created_at.isoformat(),
            "action": log.action.value,
            "target_id": str(log.target_id) if log.target_id else None,
            "before": log.before,
            "after": log.after,
            "actor": {"id": str(actor.id), "email": actor.email, "name": actor.name},
            "target_user": (
                {"id": str(target.id), "email": target.email, "name": target.name}
                if target
                else None
            ),
        }
        for log, actor, target in rows
    ]
    return {"data": result, "meta": {"limit": limit, "count": len(result)}}


"""
회원별 학습 통계 CSV 다운로드 API

- 회원 1명당 1행, 가입 순
- UTF-8 BOM 을 먼저 보내 Excel 에서 한글이 깨지지 않도록 처리

"""

@router.get("/stats/export")
def export_report_csv(
    aggregator: ProgressAggregator = Depends(get_aggregator),
    _: User = Depends(get_stats_viewer),
):
    rows = list(_report_rows(aggregator))

    def generate():
        yield "\ufeff"

        output = io.StringIO()
        writer = csv.writer(output)

        writer.writerow(REPORT_COLUMNS)
        yield output.getvalue()
        output.seek(0)
        output.truncate(0)

        for row in rows:
            writer.writerow(row)
            yield output.getvalue()
            output.seek(0)
            output.truncate(0)

    headers = {"Content-Disposition": 'attachment; filename="user_progress.csv"'}
    return StreamingResponse(generate(), media_type="text/csv; charset=utf-8", headers=headers)


@router.get("/stats/export.xlsx")
def export_report_xlsx(
    aggregator: ProgressAggregator = Depends(get_aggregator),
    _: User = Depends(get_stats_viewer),
):
    wb = Workbook()
    ws = wb.active
    ws.title = "user_progress"

    ws.append(REPORT_COLUMNS)
    for row in _report_rows(aggregator):
        ws.append(row)

    buf = io.BytesIO()
    wb.save(buf)

    headers = {"Content-Disposition": 'attachment; filename="user_progress.xlsx"'}
    return Response(
        content=buf.getvalue(),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers=headers,
    )


@router.get("/users", response_model=list[UserResponse])
def list_all_users(
    store: StudyStore = Depends(get_store),
    _: User = Depends(get_current_super_admin),
):
    return store.users.list_by()


"""
회원 권한 변경 API (SUPER_ADMIN 전용)

- 자기 자신 권한 변경 불가
- 이미 같은 권한이면 400
- 변경 내역은 관리자 로그에 기록

"""

@router.patch("/users/{user_id}/role")
def change_role(
    user_id: uuid.UUID,
    data: RoleUpdate,
    store: StudyStore = Depends(get_store),
    super_admin: User = Depends(get_role_manager),
):
    user = set_role(store, actor=super_admin, user_id=user_id, role=data.role)
    store.commit()

    return {"message": "Role updated", "data": UserResponse.model_validate(user)}


"""
최초 SUPER_ADMIN 생성 API

- ADMIN_SETUP_SECRET 이 설정되지 않았으면 비활성화(403)
- secret_key 불일치 시 403
- 관리자가 이미 있으면 409

"""

@router.post("/bootstrap", response_model=UserResponse)
def bootstrap(data: BootstrapRequest, store: StudyStore = Depends(get_store)):
    expected = settings.ADMIN_SETUP_SECRET
    if not expected:
        raise ForbiddenError("Bootstrap is disabled")

    if not secrets.compare_digest(data.secret_key.encode(), expected.encode()):
        raise ForbiddenError("Invalid setup secret")

    user = bootstrap_super_admin(store, email=data.email, password=data.password, name=data.name)
    store.commit()

    logger.info("super admin bootstrapped id=%s", user.id)
    return user

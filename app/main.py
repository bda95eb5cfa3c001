"""
main.py

FastAPI 애플리케이션 진입점(Entry Point).

이 파일은 서버 실행 시 가장 먼저 로드되며,
애플리케이션 전반의 설정과 라우터 등록을 담당한다.

주요 역할:
- 로깅 초기화 및 FastAPI 앱 인스턴스 생성
- CORS 미들웨어 설정
- 도메인 예외(StudyError) → HTTP 응답 변환 핸들러 등록
- 각 도메인별 라우터(auth, classes, characters, progress, bookmarks, notes, users, admin) 등록
- 진도 upsert 용 키 단위 잠금(app.state.progress_locks) 생성
- 헬스 체크 및 DB 연결 상태 확인용 엔드포인트 제공

설계 원칙:
- 비즈니스 로직은 포함하지 않고 설정/조립 역할만 수행
- 실제 기능은 routers / services 계층에 위임
- 스키마 생성은 Alembic 마이그레이션으로만 수행

관련 파일:
- app.core.config        : 환경 변수 및 설정 로드
- app.core.exceptions    : 도메인 예외 정의
- app.routers.*          : 기능별 API 라우터

"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.deps import get_db
from app.core.exceptions import StudyError, UnauthorizedError
from app.db.session import SessionLocal
from app.repositories.store import StudyStore
from app.routers import admin, auth, bookmarks, characters, classes, notes, progress, users
from app.services.progress import KeyedLock
from app.services.seed import seed_catalog

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.SEED_CONTENT:
        db = SessionLocal()
        try:
            seed_catalog(StudyStore(db))
        finally:
            db.close()
    logger.info("application started")
    yield


app = FastAPI(title="Bible Study Backend", lifespan=lifespan)
app.state.progress_locks = KeyedLock()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StudyError)
async def study_error_handler(request: Request, exc: StudyError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=headers)


app.include_router(auth.router)
app.include_router(classes.router)
app.include_router(characters.router)
app.include_router(progress.router)
app.include_router(bookmarks.router)
app.include_router(notes.router)
app.include_router(users.router)
app.include_router(admin.router)

"""
서버 헬스 체크 엔드포인트

- 애플리케이션 프로세스가 정상 동작 중인지 확인

"""
@app.get("/health")
def health():
    return {"status": "ok"}

"""
데이터베이스 연결 상태 확인 엔드포인트

- 간단한 SELECT 1 쿼리를 통해 DB 연결 여부 확인

"""
@app.get("/db-ping")
def db_ping(db: Session = Depends(get_db)):
    value = db.execute(text("SELECT 1")).scalar_one()
    return {"db": "ok", "value": value}

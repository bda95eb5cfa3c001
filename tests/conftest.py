import os

# Settings() 는 import 시점에 로드되므로 app import 전에 테스트용 환경 변수 지정
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ADMIN_SETUP_SECRET", "test-setup-secret")
os.environ["SEED_CONTENT"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app as fastapi_app
from app.core.deps import get_db
from app.db.base import Base
from app.repositories.store import StudyStore
from app.services.progress import KeyedLock, ProgressAggregator

# ✅ 모델 import (Base.metadata에 테이블 등록)
import app.models  # noqa: F401


# 인메모리 SQLite 를 모든 세션이 같은 연결로 공유
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_test_db():
    """테스트마다 스키마 생성/삭제"""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session():
    """테스트에서 직접 DB 조작할 때 쓰는 세션"""
    session = TestingSessionLocal()
    try:
        yield session
        session.commit()
    finally:
        session.close()


@pytest.fixture()
def store(db_session):
    return StudyStore(db_session)


@pytest.fixture()
def aggregator(store):
    return ProgressAggregator(store, KeyedLock())


@pytest.fixture()
def client():
    fastapi_app.dependency_overrides[get_db] = override_get_db
    with TestClient(fastapi_app) as c:
        yield c
    fastapi_app.dependency_overrides.clear()

"""
config.py

애플리케이션 전역 설정(Configuration) 관리 파일.

.env 환경 변수들을 Pydantic BaseSettings를 통해 로드하여
애플리케이션 전반에서 공통으로 사용하는 설정 값을 제공한다.

주요 설정 항목:
- 데이터베이스 연결 정보
- JWT 인증 관련 시크릿 및 만료 정책
- 비밀번호 해시 비용(bcrypt rounds)
- 최초 관리자 생성용 setup secret
- CORS 허용 도메인 목록 / 로그 레벨

관련 파일:
- app.main               : CORS, 로깅 초기화 시 설정 사용
- app.core.security      : JWT 시크릿 / 만료 설정 사용
- app.db.session         : DATABASE_URL 사용

"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


# extra="ignore" 옵션으로 정의되지 않은 환경 변수는 무시
class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str = "sqlite:///./bible_study.db"

    SECRET_KEY: str
    ALGORITHM: str = "HS256"

    # access token 7일 유지 (refresh token 없음)
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7

    BCRYPT_ROUNDS: int = 12

    # POST /admin/bootstrap 에서 요구하는 값. 비어 있으면 엔드포인트 비활성
    ADMIN_SETUP_SECRET: str | None = None

    # 카탈로그가 비어 있을 때 시작 시 샘플 수업/인물 데이터 적재
    SEED_CONTENT: bool = False

    LOG_LEVEL: str = "INFO"

    # CORS 허용 도메인 (프론트엔드 주소)
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]


# 애플리케이션 전역에서 import하여 사용하는 Settings 인스턴스
settings = Settings()

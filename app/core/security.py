"""
security.py

비밀번호 해싱 및 JWT 토큰 생성/검증을 담당하는 보안 유틸리티 모음.

인증(auth) 로직에서 사용하는 저수준(low-level) 보안 기능만 제공하며,
라우터나 비즈니스 로직은 포함하지 않는다.

주요 기능:
- 비밀번호 해싱 및 검증 (bcrypt)
- JWT Access Token 생성
- Access Token 검증 (실패 시 예외 대신 None 반환)

설계 원칙:
- 토큰 검증은 순수 함수: 만료/위조/형식 오류 모두 None
- 호출 측(app.core.deps)이 None을 인증 실패로 변환
- 시간 기반(exp) 만료는 UTC 기준으로 처리

관련 파일:
- app.core.config        : JWT 시크릿 키 및 만료 설정
- app.core.deps          : 요청 단위 인증 의존성

"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from passlib.context import CryptContext

from app.core.config import settings


# bcrypt 기반 비밀번호 해싱 컨텍스트
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


@dataclass(frozen=True)
class TokenClaims:
    user_id: uuid.UUID
    expires_at: datetime


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


"""
Access Token 생성 함수

- subject(sub): 사용자 식별자(user_id)
- type: access 고정
- exp: 만료 시각 (UTC timestamp)

"""

def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    payload = {
        "sub": subject,
        "type": "access",
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


"""
Access Token 검증 함수

- 서명/만료(exp) 검증은 jose가 수행
- type이 access가 아니거나 sub가 UUID가 아니면 무효
- 어떤 경우에도 예외를 밖으로 던지지 않고 None 반환

"""

def verify_token(token: str) -> TokenClaims | None:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None

    if payload.get("type") != "access":
        return None

    try:
        user_id = uuid.UUID(str(payload["sub"]))
        expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc)
    except (KeyError, TypeError, ValueError):
        return None

    return TokenClaims(user_id=user_id, expires_at=expires_at)

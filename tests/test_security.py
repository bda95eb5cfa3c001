import uuid
from datetime import timedelta

from jose import jwt

from app.core.config import settings
from app.core.security import create_access_token, get_password_hash, verify_password, verify_token


def test_token_roundtrip_returns_claims():
    user_id = uuid.uuid4()
    claims = verify_token(create_access_token(subject=str(user_id)))

    assert claims is not None
    assert claims.user_id == user_id


def test_expired_token_is_none():
    token = create_access_token(subject=str(uuid.uuid4()), expires_delta=timedelta(seconds=-10))
    assert verify_token(token) is None


def test_malformed_or_foreign_tokens_are_none():
    assert verify_token("") is None
    assert verify_token("abc.def.ghi") is None

    other_key = jwt.encode({"sub": str(uuid.uuid4()), "type": "access"}, "another-secret", algorithm="HS256")
    assert verify_token(other_key) is None

    refresh = jwt.encode({"sub": str(uuid.uuid4()), "type": "refresh"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    assert verify_token(refresh) is None

    bad_sub = create_access_token(subject="not-a-uuid")
    assert verify_token(bad_sub) is None


def test_password_hash():
    hashed = get_password_hash("Passw0rd!")
    assert hashed != "Passw0rd!"
    assert verify_password("Passw0rd!", hashed)
    assert not verify_password("wrong", hashed)

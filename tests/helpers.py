# tests/helpers.py
import uuid
from sqlalchemy.orm import Session

from app.models.lesson import Character, StudyClass
from app.models.user import User, Role
from app.core.security import get_password_hash

PASSWORD = "Passw0rd!"


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def create_user_in_db(db: Session, *, role: Role = Role.USER, email: str | None = None, password: str = PASSWORD) -> User:
    user = User(
        email=email or f"{role.value}_{uuid.uuid4().hex[:6]}@test.com",
        password_hash=get_password_hash(password),
        name=role.value.upper(),
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def login(client, email: str, password: str = PASSWORD) -> str:
    r = client.post("/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return r.json()["access_token"]


def token_for(client, db: Session, role: Role = Role.USER) -> tuple[User, str]:
    user = create_user_in_db(db, role=role)
    return user, login(client, user.email)


def register(client, *, name: str = "테스트유저") -> tuple[str, str]:
    """회원가입 후 (user_id, access_token) 반환"""
    r = client.post(
        "/auth/register",
        json={
            "email": f"user_{uuid.uuid4().hex[:6]}@test.com",
            "password": PASSWORD,
            "name": name,
        },
    )
    assert r.status_code == 200, r.text
    body = r.json()
    return body["user"]["id"], body["access_token"]


def create_class_in_db(db: Session, *, order: int = 1, section: str = "Foundations", is_published: bool = True, **overrides) -> StudyClass:
    study_class = StudyClass(
        title=overrides.pop("title", f"Class {order}"),
        content=overrides.pop("content", "본문"),
        section=section,
        order=order,
        estimated_time=overrides.pop("estimated_time", 30),
        activities=overrides.pop("activities", 2),
        is_published=is_published,
        **overrides,
    )
    db.add(study_class)
    db.commit()
    db.refresh(study_class)
    return study_class


def create_character_in_db(db: Session, *, name: str = "Moses", is_published: bool = True) -> Character:
    character = Character(name=name, title="The Lawgiver", content="...", is_published=is_published)
    db.add(character)
    db.commit()
    db.refresh(character)
    return character

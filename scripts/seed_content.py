"""

샘플 카탈로그(수업 / 성경 인물) 적재 스크립트.

- 수업이나 인물이 하나라도 있으면 아무것도 하지 않는다.
- 마이그레이션(alembic upgrade head) 이후 실행

사용 방법
- (.venv) ~\backend~$ python -m scripts.seed_content

"""

from dotenv import load_dotenv
load_dotenv()

from app.db.session import SessionLocal
from app.repositories.store import StudyStore
from app.services.seed import seed_catalog


def main():
    db = SessionLocal()
    try:
        if seed_catalog(StudyStore(db)):
            print("🌱 Sample catalog created")
        else:
            print("✅ Catalog already present. Skip seeding.")
    finally:
        db.close()


if __name__ == "__main__":
    main()

"""

SUPER_ADMIN 초기 계정 생성 스크립트.

- 서버 최초 세팅 시 단 한 번 실행하는 용도
- .env에 정의된 SUPERADMIN_* 환경 변수를 읽어
  SUPER_ADMIN 계정을 생성한다.
- ADMIN / SUPER_ADMIN 계정이 이미 존재하면 생성하지 않고 종료한다.

사용 방법
- 가상환경 접속
- (.venv) ~\backend~$ python -m scripts.create_superadmin

"""

import os
from dotenv import load_dotenv
load_dotenv()

from app.core.exceptions import ConflictError
from app.db.session import SessionLocal
from app.repositories.store import StudyStore
from app.services.admin import bootstrap_super_admin


def main():
    db = SessionLocal()
    try:
        store = StudyStore(db)

        email = os.environ["SUPERADMIN_EMAIL"]
        password = os.environ["SUPERADMIN_PASSWORD"]
        name = os.environ.get("SUPERADMIN_NAME", "Super Admin")

        try:
            user = bootstrap_super_admin(store, email=email, password=password, name=name)
        except ConflictError as e:
            print(f"✅ {e.detail}. Skip creation.")
            return

        store.commit()
        print(f"🚀 SUPER_ADMIN created: {user.email}")

    finally:
        db.close()


if __name__ == "__main__":
    main()

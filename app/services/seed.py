"""
services/seed.py

샘플 카탈로그(수업 6개 섹션 × 4개, 성경 인물 4명) 적재.

- 수업/인물이 하나라도 있으면 아무것도 하지 않음
- scripts/seed_content.py 또는 SEED_CONTENT=true 일 때 앱 시작 시 호출

"""

import logging

from app.repositories.store import StudyStore

logger = logging.getLogger(__name__)

# (section name, classes in section)
SECTIONS_SEED_DATA: list[tuple[str, int]] = [
    ("Foundations of Faith", 4),
    ("Old Testament Study", 4),
    ("New Testament Study", 4),
    ("Christian Living", 4),
    ("Theology and Doctrine", 4),
    ("Spiritual Growth", 4),
]

# (name, title, content)
CHARACTERS_SEED_DATA: list[tuple[str, str, str]] = [
    ("Moses", "The Lawgiver", "Moses was chosen by God to lead the Israelites out of Egypt..."),
    ("David", "The King", "David was a man after God's own heart, known for his psalms..."),
    ("Paul", "The Apostle", "Paul was transformed from persecutor to preacher..."),
    ("Mary", "Mother of Jesus", "Mary exemplified faith and obedience to God's will..."),
]


def _class_content(section: str, part: int, order: int) -> str:
    return (
        f"# {section} - Part {part}\n\n"
        f"This is the content for class {order}. It covers important aspects of {section.lower()}.\n\n"
        "## Learning Objectives\n"
        "- Understand key concepts\n"
        "- Apply practical principles\n"
        "- Develop spiritual insights\n"
    )


def seed_catalog(store: StudyStore) -> bool:
    """Loads the sample catalog into an empty store. Returns True if anything was created."""
    if store.classes.count() or store.characters.count():
        logger.info("catalog already present, skipping seed")
        return False

    order = 1
    for section, class_count in SECTIONS_SEED_DATA:
        for part in range(1, class_count + 1):
            store.classes.create(
                {
                    "title": f"Class {order}: {section} - Part {part}",
                    "content": _class_content(section, part, order),
                    "section": section,
                    "order": order,
                    "estimated_time": 30 + (order * 7) % 30,
                    "activities": 2 + order % 5,
                    "is_published": True,
                }
            )
            order += 1

    for name, title, content in CHARACTERS_SEED_DATA:
        store.characters.create(
            {"name": name, "title": title, "content": content, "image_url": None, "is_published": True}
        )

    store.commit()
    logger.info("seeded %d classes and %d characters", order - 1, len(CHARACTERS_SEED_DATA))
    return True

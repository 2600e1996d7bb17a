# backend/seed.py
"""Demo data loaded at startup: the admin account, the three safety courses,
two notices and a sample question."""
import logging

from config import settings
from services import assessments, catalog, identity, notices

logger = logging.getLogger(__name__)

DEFAULT_COURSES = [
    {
        "course_id": "course-1",
        "title": "고소작업대 안전관리 교육",
        "description": "고소작업대 사용 시 필수 안전 수칙과 비상 상황 대응 방법을 학습합니다.",
        "type": "workplace-safety",
        "duration": 7,
        "video_url": "/videos/workplace-safety.mp4",
        "document_url": "/documents/workplace-safety.pdf",
        "color": "blue",
    },
    {
        "course_id": "course-2",
        "title": "굴착기 안전수칙 개정 및 사고 예방 교육",
        "description": "개정된 산업안전보건법에 따른 굴착기 관련 최신 안전 수칙을 교육합니다.",
        "type": "hazard-prevention",
        "duration": 7,
        "video_url": "/videos/hazard-prevention.mp4",
        "document_url": "/documents/hazard-prevention.pdf",
        "color": "orange",
    },
    {
        "course_id": "course-3",
        "title": "TBM 교육 프로그램",
        "description": "효과적인 작업 전 안전점검회의(TBM)를 진행하는 방법과 리더십을 학습합니다.",
        "type": "tbm",
        "duration": 7,
        "video_url": "/videos/tbm.mp4",
        "document_url": "/documents/tbm.pdf",
        "color": "green",
    },
]

DEFAULT_NOTICES = [
    ("플랫폼 정식 오픈 안내", "안전관리 통합 교육 플랫폼이 정식으로 오픈했습니다. 많은 이용 바랍니다."),
    ("TBM 기능 업데이트", "TBM 안전점검 기능이 개선되었습니다. 이제 모바일에서도 편리하게 사용하세요."),
]

DEFAULT_QUESTIONS = [
    {
        "assessment_id": "assessment-1",
        "course_id": "course-1",
        "question": "고소작업대 사용 시 가장 중요한 안전수칙은 무엇입니까?",
        "options": ["안전벨트 착용", "작업시간 단축", "빠른 작업 완료", "장비 점검 생략"],
        "correct_answer": 0,
        "difficulty": "medium",
    },
]


def seed_demo_data(store) -> bool:
    """Load the demo data once; returns False when it is already there."""
    if store.get_user_by_email(settings.ADMIN_EMAIL):
        logger.info("Demo data already present, skipping seed")
        return False

    admin = identity.register(
        store,
        username="관리자",
        email=settings.ADMIN_EMAIL,
        password=settings.ADMIN_PASSWORD,
        department="IT",
        role="admin",
    )

    for course in DEFAULT_COURSES:
        if not store.get_course(course["course_id"]):
            catalog.create_course(store, **course)

    for title, content in DEFAULT_NOTICES:
        notices.create_notice(store, admin.id, title=title, content=content)

    for question in DEFAULT_QUESTIONS:
        payload = dict(question)
        course_id = payload.pop("course_id")
        assessments.create_question(store, course_id, **payload)

    logger.info("Seeded %d courses, %d notices, %d questions",
                len(DEFAULT_COURSES), len(DEFAULT_NOTICES), len(DEFAULT_QUESTIONS))
    return True

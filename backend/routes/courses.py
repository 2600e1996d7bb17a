# backend/routes/courses.py
from typing import List

from fastapi import APIRouter, Depends, Request, status

from models.users import User
from schemas.assessment import AssessmentCreate, AssessmentResponse
from schemas.course import CourseCreate, CourseResponse
from services import assessments, catalog
from storage.provider import get_store
from utils.audit import write_log, client_ip
from utils.tokenJWT import role_required

router = APIRouter(prefix="/api/courses", tags=["Courses"])


# List active courses
@router.get("", response_model=List[CourseResponse])
def list_courses(store=Depends(get_store)):
    return catalog.list_active(store)


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
def create_course(
    payload: CourseCreate,
    request: Request,
    store=Depends(get_store),
    current_user: User = Depends(role_required("admin")),
):
    course = catalog.create_course(store, **payload.model_dump())
    write_log(store, user_id=current_user.id, action="COURSE_CREATE", resource="course",
              ip=client_ip(request), meta={"course_id": course.id})
    return course


@router.get("/{course_id}", response_model=CourseResponse)
def get_course(course_id: str, store=Depends(get_store)):
    return catalog.get_course(store, course_id)


# Quiz questions for a course, correct answers included
@router.get("/{course_id}/assessments", response_model=List[AssessmentResponse])
def list_assessments(course_id: str, store=Depends(get_store)):
    return assessments.list_for_course(store, course_id)


@router.post("/{course_id}/assessments", response_model=AssessmentResponse, status_code=status.HTTP_201_CREATED)
def create_assessment(
    course_id: str,
    payload: AssessmentCreate,
    request: Request,
    store=Depends(get_store),
    current_user: User = Depends(role_required("admin")),
):
    question = assessments.create_question(store, course_id, **payload.model_dump())
    write_log(store, user_id=current_user.id, action="ASSESSMENT_CREATE", resource="assessment",
              ip=client_ip(request), meta={"course_id": course_id, "assessment_id": question.id})
    return question

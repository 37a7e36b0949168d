"""
Student and Lesson API Endpoints

- POST /api/v1/students
- GET /api/v1/students
- GET /api/v1/students/lookup?name=
- GET /api/v1/students/{student_id}
- POST /api/v1/students/{student_id}/lessons
- DELETE /api/v1/students/{student_id}/lessons/{lesson_id}
- PUT /api/v1/students/{student_id}/lessons/{lesson_id}/review
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Path, Query, status
from pydantic import BaseModel, Field

from tuition.api.routes.tutors import lookup_tutor
from tuition.models.student import Student
from tuition.models.subject import Subject
from tuition.services.tuition_system import get_tuition_system

router = APIRouter(prefix="/api/v1/students", tags=["students"])


class StudentCreateRequest(BaseModel):
    """Request model for registering a student"""
    name: str = Field(..., min_length=1)
    gender: str = ""
    dob: Optional[str] = Field(None, description="Date of birth, stored as given (YYYY-MM-DD)")
    emergency_contact: str = ""


class BookLessonRequest(BaseModel):
    """Request model for booking a lesson"""
    subject: str = Field(..., description="Subject name, e.g. MATH")
    tutor: str = Field(..., description="Registered tutor name")
    date: Optional[str] = Field(None, description="Lesson date, stored as given (YYYY-MM-DD)")
    hour: int = Field(..., description="Hour in 24-hour format")


class ReviewRequest(BaseModel):
    """Post-lesson review; a rating above zero marks the lesson attended"""
    review: Optional[str] = None
    rating: Optional[int] = None


class StudentResponse(BaseModel):
    """Standard response wrapper"""
    data: Dict[str, Any]


class StudentListResponse(BaseModel):
    data: List[Dict[str, Any]]


def lookup_student(student_id: str) -> Student:
    student = get_tuition_system().get_student(student_id)
    if student is None:
        raise HTTPException(status_code=404, detail=f"Student '{student_id}' not found")
    return student


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
async def create_student(request: StudentCreateRequest):
    """Register a student; names need not be unique"""
    student = get_tuition_system().add_student(Student(
        name=request.name,
        gender=request.gender,
        dob=request.dob,
        emergency_contact=request.emergency_contact,
    ))
    return StudentResponse(data=student.to_dict())


@router.get("", response_model=StudentListResponse)
async def list_students():
    return StudentListResponse(data=[s.to_dict() for s in get_tuition_system().get_students()])


@router.get("/lookup", response_model=StudentResponse)
async def find_student(name: str = Query(..., min_length=1)):
    """First registered student with this name, ignoring case"""
    student = get_tuition_system().find_student(name)
    if student is None:
        raise HTTPException(status_code=404, detail=f"Student '{name}' not found")
    return StudentResponse(data=student.to_dict())


@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(student_id: str = Path(...)):
    return StudentResponse(data=lookup_student(student_id).to_dict())


@router.post("/{student_id}/lessons", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
async def book_lesson(request: BookLessonRequest, student_id: str = Path(...)):
    """
    Book a lesson for a student with a registered tutor.

    The tutor's specialties and timetable are not enforced.
    """
    subject = Subject.parse(request.subject)
    student = lookup_student(student_id)
    tutor = lookup_tutor(request.tutor)

    lesson = get_tuition_system().book_lesson(student, subject, tutor, request.date, request.hour)
    data = lesson.to_dict()
    data["subject"] = subject.name
    return StudentResponse(data=data)


@router.delete("/{student_id}/lessons/{lesson_id}", response_model=StudentResponse)
async def cancel_lesson(student_id: str = Path(...), lesson_id: str = Path(...)):
    """Cancel a booked lesson; an unknown lesson id is a no-op"""
    student = lookup_student(student_id)
    canceled = get_tuition_system().cancel_lesson_by_id(student, lesson_id)
    return StudentResponse(data={"lesson_id": lesson_id, "canceled": canceled})


@router.put("/{student_id}/lessons/{lesson_id}/review", response_model=StudentResponse)
async def review_lesson(request: ReviewRequest, student_id: str = Path(...), lesson_id: str = Path(...)):
    """Record review text and rating for a lesson"""
    found = get_tuition_system().find_lesson(lookup_student(student_id), lesson_id)
    if found is None:
        raise HTTPException(status_code=404, detail=f"Lesson '{lesson_id}' not found")

    subject, lesson = found
    get_tuition_system().record_review(lesson, request.review, request.rating)

    data = lesson.to_dict()
    data["subject"] = subject.name
    return StudentResponse(data=data)

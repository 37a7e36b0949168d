"""
Reporting API Endpoints

- GET /api/v1/reports/students/{student_id}/summary
- GET /api/v1/reports/tutors/{name}/reviews
"""
from typing import Any, Dict

from fastapi import APIRouter, Path
from pydantic import BaseModel

from tuition.api.routes.students import lookup_student
from tuition.api.routes.tutors import lookup_tutor
from tuition.services.reporting import render_lesson_summary, render_tutor_reviews
from tuition.services.tuition_system import get_tuition_system

router = APIRouter(prefix="/api/v1/reports", tags=["reports"])


class ReportResponse(BaseModel):
    """Structured report plus its console rendering"""
    data: Dict[str, Any]
    text: str


@router.get("/students/{student_id}/summary", response_model=ReportResponse)
async def get_lesson_summary(student_id: str = Path(...)):
    """
    Lesson summary for a student.

    Returns booked/attended/canceled counts per subject, in the order the
    subjects were first booked.
    """
    student = lookup_student(student_id)
    summary = get_tuition_system().lesson_summary(student)

    return ReportResponse(
        data={
            "student_id": student.student_id,
            "student": student.name,
            "subjects": {subject.name: counts.to_dict() for subject, counts in summary.items()},
        },
        text=render_lesson_summary(student.name, summary),
    )


@router.get("/tutors/{name}/reviews", response_model=ReportResponse)
async def get_tutor_reviews(name: str = Path(...)):
    """Rated lessons for a tutor across all students"""
    tutor = lookup_tutor(name)
    reviews = get_tuition_system().tutor_reviews(tutor)

    return ReportResponse(
        data={
            "tutor": tutor.name,
            "reviews": [entry.to_dict() for entry in reviews],
        },
        text=render_tutor_reviews(tutor.name, reviews),
    )

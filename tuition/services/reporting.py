"""
Lesson Summary and Tutor Review Reporting

Result types produced by TuitionSystem queries and the text renderers that
turn them into the console listings. Rendering is kept separate so the same
results can be served as JSON.
"""
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

from tuition.models.subject import Subject


@dataclass
class SubjectSummary:
    """Lesson counts for one subject; booked == attended + canceled"""
    booked: int = 0
    attended: int = 0
    canceled: int = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass
class TutorReview:
    """One rated lesson for a tutor"""
    student: str
    review: Optional[str]
    rating: int

    def to_dict(self) -> dict:
        return asdict(self)


def _heading(title: str, rule_length: int) -> List[str]:
    return [title, "-" * rule_length]


def render_lesson_summary(student_name: str, summary: Dict[Subject, SubjectSummary]) -> str:
    """
    Render a student's lesson summary.

    Args:
        student_name: Name shown in the heading
        summary: Per-subject counts in subject booking order

    Returns:
        Text block with one paragraph per subject
    """
    lines = _heading(f"Lesson Summary for Student: {student_name}", 31)
    for subject, counts in summary.items():
        lines.extend([
            f"Subject: {subject.name}",
            f"Booked Lessons: {counts.booked}",
            f"Attended Lessons: {counts.attended}",
            f"Canceled Lessons: {counts.canceled}",
            "",
        ])
    return "\n".join(lines)


def render_tutor_reviews(tutor_name: str, reviews: List[TutorReview]) -> str:
    """Render the review listing for a tutor, one paragraph per review"""
    lines = _heading(f"Reviews for Tutor: {tutor_name}", 27)
    for entry in reviews:
        lines.extend([
            f"Student: {entry.student}",
            f"Review: {entry.review}",
            f"Rating: {entry.rating}",
            "",
        ])
    return "\n".join(lines)

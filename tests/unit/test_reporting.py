"""
Unit tests for report rendering
"""

from tuition.models.subject import Subject
from tuition.services.reporting import (
    SubjectSummary,
    TutorReview,
    render_lesson_summary,
    render_tutor_reviews,
)


class TestRenderLessonSummary:
    """Test lesson summary text"""

    def test_render_subjects(self):
        summary = {
            Subject.MATH: SubjectSummary(booked=2, attended=1, canceled=1),
            Subject.ENGLISH_WRITING: SubjectSummary(booked=1, attended=0, canceled=1),
        }

        assert render_lesson_summary("Bob", summary) == "\n".join([
            "Lesson Summary for Student: Bob",
            "-------------------------------",
            "Subject: MATH",
            "Booked Lessons: 2",
            "Attended Lessons: 1",
            "Canceled Lessons: 1",
            "",
            "Subject: ENGLISH_WRITING",
            "Booked Lessons: 1",
            "Attended Lessons: 0",
            "Canceled Lessons: 1",
            "",
        ])

    def test_render_empty_summary(self):
        assert render_lesson_summary("Bob", {}) == (
            "Lesson Summary for Student: Bob\n"
            "-------------------------------"
        )


class TestRenderTutorReviews:
    """Test tutor review text"""

    def test_render_reviews(self):
        reviews = [
            TutorReview(student="Bob", review="Great", rating=5),
            TutorReview(student="Cara", review=None, rating=3),
        ]

        assert render_tutor_reviews("Amy", reviews) == "\n".join([
            "Reviews for Tutor: Amy",
            "---------------------------",
            "Student: Bob",
            "Review: Great",
            "Rating: 5",
            "",
            "Student: Cara",
            "Review: None",
            "Rating: 3",
            "",
        ])


class TestResultTypes:
    """Test result serialization"""

    def test_subject_summary_to_dict(self):
        assert SubjectSummary(3, 2, 1).to_dict() == {"booked": 3, "attended": 2, "canceled": 1}

    def test_tutor_review_to_dict(self):
        assert TutorReview("Bob", "Great", 5).to_dict() == {"student": "Bob", "review": "Great", "rating": 5}

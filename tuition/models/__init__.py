"""In-memory domain models for the tuition system"""
from tuition.models.subject import Subject, parse_subjects
from tuition.models.tutor import Tutor
from tuition.models.lesson import Lesson
from tuition.models.student import Student

__all__ = [
    "Subject",
    "parse_subjects",
    "Tutor",
    "Lesson",
    "Student",
]

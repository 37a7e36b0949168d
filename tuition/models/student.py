"""Student model - identity fields and lessons booked per subject"""
import uuid
from typing import Dict, List, Optional, Tuple

from tuition.models.lesson import Lesson
from tuition.models.subject import Subject


class Student:
    """Student with per-subject lesson lists in booking order"""

    def __init__(
        self,
        name: str,
        gender: str = "",
        dob: Optional[str] = None,
        emergency_contact: str = "",
    ):
        self.student_id = str(uuid.uuid4())
        self.name = name
        self.gender = gender
        self.dob = dob
        self.emergency_contact = emergency_contact
        # Subject keys are only created by a booking
        self.lessons: Dict[Subject, List[Lesson]] = {}

    def book_lesson(self, subject: Subject, lesson: Lesson) -> None:
        self.lessons.setdefault(subject, []).append(lesson)

    def cancel_lesson(self, subject: Subject, lesson: Lesson) -> bool:
        """
        Remove the given lesson instance from the subject's list.

        Returns:
            True if a lesson was removed, False if it was not booked
        """
        booked = self.lessons.get(subject)
        if not booked:
            return False
        for index, existing in enumerate(booked):
            if existing is lesson:
                del booked[index]
                return True
        return False

    def find_lesson(self, lesson_id: str) -> Optional[Tuple[Subject, Lesson]]:
        for subject, booked in self.lessons.items():
            for lesson in booked:
                if lesson.lesson_id == lesson_id:
                    return subject, lesson
        return None

    def to_dict(self) -> dict:
        return {
            "student_id": self.student_id,
            "name": self.name,
            "gender": self.gender,
            "dob": self.dob,
            "emergency_contact": self.emergency_contact,
            "lessons": {
                subject.name: [lesson.to_dict() for lesson in booked]
                for subject, booked in self.lessons.items()
            },
        }

    def __repr__(self):
        return f"<Student(id={self.student_id}, name={self.name!r})>"

"""
Tuition System Service

Aggregate registry of tutors and students. Owns lesson booking and
cancellation plus the lesson summary and tutor review queries.
"""
import logging
import threading
from typing import Dict, List, Optional, TextIO, Tuple

from tuition.config import get_duplicate_policy, validate_duplicate_policy
from tuition.exceptions import DuplicateTutorError
from tuition.models.lesson import Lesson
from tuition.models.student import Student
from tuition.models.subject import Subject
from tuition.models.tutor import Tutor
from tuition.services.reporting import (
    SubjectSummary,
    TutorReview,
    render_lesson_summary,
    render_tutor_reviews,
)

logger = logging.getLogger(__name__)


class TuitionSystem:
    """
    In-memory registry of tutors (keyed by name) and students (in
    registration order).

    Every public operation takes the same lock, so one instance can back a
    threaded server. Lookups that miss return None instead of raising.
    """

    def __init__(self, duplicate_policy: Optional[str] = None):
        if duplicate_policy is None:
            self.duplicate_policy = get_duplicate_policy()
        else:
            self.duplicate_policy = validate_duplicate_policy(duplicate_policy)
        self._tutors: Dict[str, Tutor] = {}
        self._students: List[Student] = []
        self._lock = threading.RLock()

    # Registry

    def add_tutor(self, tutor: Tutor) -> Tutor:
        """
        Register a tutor under its name.

        Raises:
            DuplicateTutorError: If the name is taken and the policy is "reject"
        """
        with self._lock:
            if tutor.name in self._tutors:
                if self.duplicate_policy == "reject":
                    raise DuplicateTutorError(tutor.name)
                logger.warning(f"Tutor '{tutor.name}' already registered, replacing it")
            self._tutors[tutor.name] = tutor
            logger.debug(f"Registered tutor {tutor!r}")
            return tutor

    def get_tutor(self, name: str) -> Optional[Tutor]:
        """Exact, case-sensitive lookup by name"""
        with self._lock:
            return self._tutors.get(name)

    def get_tutors(self) -> List[Tutor]:
        with self._lock:
            return list(self._tutors.values())

    def add_student(self, student: Student) -> Student:
        with self._lock:
            self._students.append(student)
            logger.debug(f"Registered student {student!r}")
            return student

    def get_students(self) -> List[Student]:
        with self._lock:
            return list(self._students)

    def find_student(self, name: str) -> Optional[Student]:
        """First student whose name matches case-insensitively, in registration order"""
        wanted = name.casefold()
        with self._lock:
            for student in self._students:
                if student.name.casefold() == wanted:
                    return student
        return None

    def get_student(self, student_id: str) -> Optional[Student]:
        with self._lock:
            for student in self._students:
                if student.student_id == student_id:
                    return student
        return None

    # Booking

    def book_lesson(
        self,
        student: Student,
        subject: Subject,
        tutor: Tutor,
        date: Optional[str],
        hour: int,
    ) -> Lesson:
        """
        Book a new lesson for the student.

        Neither the tutor's specialties nor its timetable are enforced; a
        mismatch is only logged.

        Returns:
            The new Lesson, also appended to student.lessons[subject]
        """
        if not tutor.teaches(subject):
            logger.warning(f"Tutor '{tutor.name}' has no {subject.name} specialty, booking anyway")
        if tutor.is_available(hour) is False:
            logger.warning(f"Tutor '{tutor.name}' is unavailable at hour {hour}, booking anyway")

        lesson = Lesson(tutor, date, hour)
        with self._lock:
            student.book_lesson(subject, lesson)

        logger.info(
            f"Booked {subject.name} lesson {lesson.lesson_id} for {student.name} "
            f"with {tutor.name} on {date} at {hour}:00"
        )
        return lesson

    def cancel_lesson(self, student: Student, subject: Subject, lesson: Lesson) -> bool:
        """Remove the lesson instance; cancelling a lesson that is not booked is a no-op"""
        with self._lock:
            removed = student.cancel_lesson(subject, lesson)
        if removed:
            logger.info(f"Canceled {subject.name} lesson {lesson.lesson_id} for {student.name}")
        return removed

    def find_lesson(self, student: Student, lesson_id: str) -> Optional[Tuple[Subject, Lesson]]:
        with self._lock:
            return student.find_lesson(lesson_id)

    def cancel_lesson_by_id(self, student: Student, lesson_id: str) -> bool:
        with self._lock:
            found = self.find_lesson(student, lesson_id)
            if found is None:
                return False
            subject, lesson = found
            return self.cancel_lesson(student, subject, lesson)

    def set_availability(self, tutor: Tutor, hour: int, available: bool) -> None:
        with self._lock:
            tutor.set_availability(hour, available)

    def record_review(self, lesson: Lesson, review: Optional[str], rating: Optional[int]) -> None:
        """Set review text and rating together; a rating above zero marks the lesson attended"""
        with self._lock:
            lesson.set_review(review)
            lesson.set_rating(rating)
        logger.info(f"Recorded review for lesson {lesson.lesson_id}: rating={rating}")

    # Reporting

    def lesson_summary(self, student: Student) -> Dict[Subject, SubjectSummary]:
        """
        Per-subject booked/attended/canceled counts for a student.

        Subjects appear in the order they were first booked. A lesson counts
        as attended when its rating is above zero, otherwise as canceled.
        """
        summary: Dict[Subject, SubjectSummary] = {}
        with self._lock:
            for subject, booked in student.lessons.items():
                attended = sum(1 for lesson in booked if lesson.attended)
                summary[subject] = SubjectSummary(
                    booked=len(booked),
                    attended=attended,
                    canceled=len(booked) - attended,
                )
        return summary

    def tutor_reviews(self, tutor: Tutor) -> List[TutorReview]:
        """
        Rated lessons taught by this tutor instance.

        Ordered by student registration, then subject booking order, then
        lesson booking order.
        """
        reviews: List[TutorReview] = []
        with self._lock:
            for student in self._students:
                for booked in student.lessons.values():
                    for lesson in booked:
                        if lesson.tutor is tutor and lesson.attended:
                            reviews.append(TutorReview(
                                student=student.name,
                                review=lesson.review,
                                rating=lesson.rating,
                            ))
        return reviews

    def print_lesson_summary(self, student: Student, file: Optional[TextIO] = None) -> None:
        print(render_lesson_summary(student.name, self.lesson_summary(student)), file=file)

    def print_tutor_reviews(self, tutor: Tutor, file: Optional[TextIO] = None) -> None:
        print(render_tutor_reviews(tutor.name, self.tutor_reviews(tutor)), file=file)


# Global system instance
_system: Optional[TuitionSystem] = None


def get_tuition_system() -> TuitionSystem:
    """Get or create global TuitionSystem instance."""
    global _system
    if _system is None:
        _system = TuitionSystem()
    return _system


def reset_tuition_system() -> TuitionSystem:
    """Replace the global instance with an empty one"""
    global _system
    _system = TuitionSystem()
    return _system

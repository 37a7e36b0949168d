"""
Demo Data Generator Service

Populates a TuitionSystem with realistic tutors, students, bookings and
reviews for demos and manual testing.
"""
import logging
import random
from datetime import date, timedelta
from typing import Any, Dict, List

from faker import Faker

from tuition.models.student import Student
from tuition.models.subject import Subject
from tuition.models.tutor import Tutor
from tuition.services.tuition_system import TuitionSystem

logger = logging.getLogger(__name__)

SUBJECTS = list(Subject)

# Lessons run from 9:00 to 20:00
TEACHING_HOURS = range(9, 21)

REVIEW_PHRASES = [
    "Great lesson, very clear explanations",
    "Helpful and patient",
    "Covered a lot of practice questions",
    "Good pace, would book again",
    "Explained the tricky parts well",
    "Fun and engaging session",
]


class DemoDataGenerator:
    """Main demo data generator class"""

    def __init__(
        self,
        num_tutors: int = 4,
        num_students: int = 6,
        lessons_per_student: int = 4,
        review_rate: float = 0.6,
        seed: int = None,
    ):
        if not 0 <= review_rate <= 1:
            raise ValueError(f"review_rate must be between 0 and 1, got {review_rate}")

        self.num_tutors = num_tutors
        self.num_students = num_students
        self.lessons_per_student = lessons_per_student
        self.review_rate = review_rate
        self.seed = seed

        self.random = random.Random(seed)
        self.fake = Faker("en_GB")
        if seed is not None:
            self.fake.seed_instance(seed)

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> "DemoDataGenerator":
        return cls(
            num_tutors=int(settings["num_tutors"]),
            num_students=int(settings["num_students"]),
            lessons_per_student=int(settings["lessons_per_student"]),
            review_rate=float(settings["review_rate"]),
            seed=settings.get("seed"),
        )

    def _generate_tutor(self, system: TuitionSystem) -> Tutor:
        # Never reuse a registered tutor name
        name = self.fake.unique.name()
        while system.get_tutor(name) is not None:
            name = self.fake.unique.name()

        specialties = self.random.sample(SUBJECTS, k=self.random.randint(1, 3))
        tutor = Tutor(name, specialties)
        for hour in TEACHING_HOURS:
            tutor.set_availability(hour, self.random.random() < 0.7)
        return tutor

    def _generate_student(self) -> Student:
        dob = self.fake.date_of_birth(minimum_age=7, maximum_age=16)
        return Student(
            name=self.fake.unique.first_name(),
            gender=self.random.choice(["Female", "Male"]),
            dob=dob.isoformat(),
            emergency_contact=self.fake.phone_number(),
        )

    def _lesson_date(self) -> str:
        return (date.today() + timedelta(days=self.random.randint(-60, 30))).isoformat()

    def populate(self, system: TuitionSystem) -> Dict[str, int]:
        """
        Register generated tutors and students and book lessons between them.

        Each lesson is booked with a tutor teaching its subject at an hour the
        tutor is free; review_rate of the lessons get a rating and review. Tutor
        names already in the system are never reused.

        Returns:
            Counts of tutors, students, lessons and reviews created
        """
        tutors: List[Tutor] = [system.add_tutor(self._generate_tutor(system)) for _ in range(self.num_tutors)]
        students: List[Student] = [system.add_student(self._generate_student()) for _ in range(self.num_students)]

        lessons_created = 0
        reviews_created = 0
        if tutors:
            for student in students:
                for _ in range(self.lessons_per_student):
                    tutor = self.random.choice(tutors)
                    subject = self.random.choice(sorted(tutor.specialties, key=lambda s: s.name))
                    free_hours = [h for h, available in tutor.timetable.items() if available]
                    hour = self.random.choice(free_hours or list(TEACHING_HOURS))

                    lesson = system.book_lesson(student, subject, tutor, self._lesson_date(), hour)
                    lessons_created += 1

                    if self.random.random() < self.review_rate:
                        lesson.set_rating(self.random.randint(3, 5))
                        lesson.set_review(self.random.choice(REVIEW_PHRASES))
                        reviews_created += 1

        logger.info(
            f"Generated demo data: {len(tutors)} tutors, {len(students)} students, "
            f"{lessons_created} lessons, {reviews_created} reviews"
        )

        return {
            "tutors": len(tutors),
            "students": len(students),
            "lessons": lessons_created,
            "reviews": reviews_created,
        }

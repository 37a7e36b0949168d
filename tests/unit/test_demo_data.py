"""
Unit tests for DemoDataGenerator

Tests generated registry sizes, bookings and seeded reproducibility.
"""

import pytest

from tuition.services.demo_data import DemoDataGenerator, TEACHING_HOURS
from tuition.services.tuition_system import TuitionSystem


def populated(**kwargs):
    system = TuitionSystem(duplicate_policy="overwrite")
    counts = DemoDataGenerator(**kwargs).populate(system)
    return system, counts


class TestDemoDataGenerator:
    """Test DemoDataGenerator class"""

    def test_initialization(self):
        generator = DemoDataGenerator(num_tutors=3, num_students=5, lessons_per_student=2, seed=1)

        assert generator.num_tutors == 3
        assert generator.num_students == 5
        assert generator.lessons_per_student == 2
        assert generator.seed == 1

    def test_invalid_review_rate(self):
        with pytest.raises(ValueError, match="review_rate"):
            DemoDataGenerator(review_rate=1.5)

    def test_from_settings(self):
        generator = DemoDataGenerator.from_settings({
            "num_tutors": "2",
            "num_students": 3,
            "lessons_per_student": 1,
            "review_rate": "0.5",
            "seed": 9,
        })
        assert generator.num_tutors == 2
        assert generator.review_rate == 0.5

    def test_populate_counts(self):
        system, counts = populated(num_tutors=3, num_students=4, lessons_per_student=5, seed=7)

        assert counts["tutors"] == len(system.get_tutors()) == 3
        assert counts["students"] == len(system.get_students()) == 4
        assert counts["lessons"] == 20
        booked = sum(len(lessons) for s in system.get_students() for lessons in s.lessons.values())
        assert booked == 20

    def test_lessons_match_tutor_specialties(self):
        system, _ = populated(num_tutors=3, num_students=4, lessons_per_student=5, seed=7)

        for student in system.get_students():
            for subject, lessons in student.lessons.items():
                for lesson in lessons:
                    assert lesson.tutor.teaches(subject)
                    assert lesson.hour in TEACHING_HOURS

    def test_reviews_have_positive_ratings(self):
        system, counts = populated(num_tutors=2, num_students=5, lessons_per_student=4, review_rate=1.0, seed=3)

        assert counts["reviews"] == counts["lessons"]
        total_reviews = sum(len(system.tutor_reviews(t)) for t in system.get_tutors())
        assert total_reviews == counts["reviews"]

    def test_no_reviews_when_rate_zero(self):
        system, counts = populated(num_tutors=2, num_students=2, lessons_per_student=3, review_rate=0.0, seed=3)
        assert counts["reviews"] == 0

    def test_no_tutors_books_nothing(self):
        _, counts = populated(num_tutors=0, num_students=2, seed=3)
        assert counts["lessons"] == 0

    def test_seed_reproducible(self):
        first, _ = populated(seed=11)
        second, _ = populated(seed=11)

        assert [t.name for t in first.get_tutors()] == [t.name for t in second.get_tutors()]
        assert [s.name for s in first.get_students()] == [s.name for s in second.get_students()]

    def test_repeat_populate_adds_new_tutors(self):
        """Test a second run with the same seed adds tutors instead of replacing them"""
        system = TuitionSystem(duplicate_policy="reject")
        first = DemoDataGenerator(num_tutors=3, num_students=2, review_rate=1.0, seed=11)
        first.populate(system)
        first_batch = system.get_tutors()
        DemoDataGenerator(num_tutors=3, num_students=2, review_rate=1.0, seed=11).populate(system)

        tutors = system.get_tutors()
        assert len({t.name for t in tutors}) == 6
        for tutor in first_batch:
            assert system.get_tutor(tutor.name) is tutor
        # 2 runs x 2 students x 4 lessons, all rated
        assert sum(len(system.tutor_reviews(t)) for t in tutors) == 16

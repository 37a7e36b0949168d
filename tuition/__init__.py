"""Tuition record-keeping: tutors, students, lesson bookings and reviews"""

__version__ = "1.0.0"

"""Lesson model - a single booking with a tutor"""
import uuid
from typing import Optional

from tuition.models.tutor import Tutor


class Lesson:
    """
    Booking of one tutor at a date and hour.

    Review and rating start unset. A rating above zero marks the lesson as
    attended; anything else counts as canceled in reports. Equality is
    object identity, so two lessons with the same fields are distinct;
    ``lesson_id`` is the stable handle for addressing one from outside.
    """

    def __init__(self, tutor: Tutor, date: Optional[str], hour: int):
        self.lesson_id = str(uuid.uuid4())
        self.tutor = tutor
        self.date = date
        self.hour = hour
        self.review: Optional[str] = None
        self.rating: Optional[int] = None

    def set_review(self, review: Optional[str]) -> None:
        self.review = review

    def set_rating(self, rating: Optional[int]) -> None:
        self.rating = rating

    @property
    def attended(self) -> bool:
        return self.rating is not None and self.rating > 0

    def to_dict(self) -> dict:
        return {
            "lesson_id": self.lesson_id,
            "tutor": self.tutor.name,
            "date": self.date,
            "hour": self.hour,
            "review": self.review,
            "rating": self.rating,
            "attended": self.attended,
        }

    def __repr__(self):
        return (
            f"<Lesson(id={self.lesson_id}, tutor={self.tutor.name!r}, "
            f"date={self.date!r}, hour={self.hour}, rating={self.rating})>"
        )

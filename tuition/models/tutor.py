"""Tutor model - name, specialties and hourly availability"""
from typing import Dict, FrozenSet, Iterable, Optional

from tuition.models.subject import Subject


class Tutor:
    """Tutor with specialty subjects and an hour-keyed timetable"""

    def __init__(self, name: str, specialties: Iterable[Subject] = ()):
        self.name = name
        # Copied so later changes to the caller's set are not seen here
        self._specialties: FrozenSet[Subject] = frozenset(specialties)
        self.timetable: Dict[int, bool] = {}

    @property
    def specialties(self) -> FrozenSet[Subject]:
        return self._specialties

    def set_availability(self, hour: int, available: bool) -> None:
        """Insert or overwrite the availability flag for an hour (not range checked)"""
        self.timetable[hour] = available

    def is_available(self, hour: int) -> Optional[bool]:
        """Availability flag for the hour, or None if it was never set"""
        return self.timetable.get(hour)

    def teaches(self, subject: Subject) -> bool:
        return subject in self._specialties

    def __repr__(self):
        specialties = sorted(s.name for s in self._specialties)
        return f"<Tutor(name={self.name!r}, specialties={specialties})>"

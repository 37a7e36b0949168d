"""Subject catalog - the fixed set of tutoring subjects"""
from enum import Enum
from typing import Optional, Set

from tuition.exceptions import InvalidSubjectError


class Subject(Enum):
    """Tutoring subject; the value is the display label"""

    ENGLISH_COMPREHENSION = "English Comprehension"
    ENGLISH_WRITING = "English Writing"
    MATH = "Math"
    NUMERICAL_REASONING = "Numerical Reasoning"
    VERBAL_REASONING = "Verbal Reasoning"
    NON_VERBAL_REASONING = "Non-Verbal Reasoning"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: Optional[str]) -> "Subject":
        """
        Parse free text into a Subject.

        Matching is case-insensitive on the enum name after trimming
        surrounding whitespace, so "math" and " Non_Verbal_Reasoning " parse
        but "Non-Verbal Reasoning" does not.

        Raises:
            InvalidSubjectError: If the text names no subject
        """
        if text is not None:
            key = text.strip().upper()
            if key in cls.__members__:
                return cls.__members__[key]
        raise InvalidSubjectError(text, cls.__members__.keys())

    def __str__(self) -> str:
        return self.name


def parse_subjects(text: str) -> Set[Subject]:
    """Parse a comma-separated subject list, ignoring blank items"""
    return {Subject.parse(item) for item in text.split(",") if item.strip()}

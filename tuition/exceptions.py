"""Domain errors raised by the tuition core"""
from typing import Iterable, Optional


class InvalidSubjectError(ValueError):
    """Free text did not name one of the fixed subjects"""

    def __init__(self, text: Optional[str], choices: Iterable[str]):
        self.text = text
        self.choices = list(choices)
        super().__init__(
            f"Invalid subject: {text!r}. Must be one of: {', '.join(self.choices)}"
        )


class DuplicateTutorError(ValueError):
    """A tutor with the same name is already registered"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Tutor '{name}' is already registered")

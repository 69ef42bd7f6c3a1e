# models/student.py
from dataclasses import dataclass
# Student model with a letter grade derived from the score.

@dataclass(frozen=True)
class Student:
    id: int
    full_name: str
    score: int

    def grade(self) -> str:
        if 80 <= self.score <= 100:
            return "A"
        elif 70 <= self.score <= 79:
            return "B"
        elif 60 <= self.score <= 69:
            return "C"
        elif 50 <= self.score <= 59:
            return "D"
        else:
            return "F"

"""Report cards with numeric or alphabetical grades."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ReportCard:
    """A student's report card; the grade may be a number or a letter grade."""

    grade: float | str
    student_name: str
    student_age: int

    def __post_init__(self) -> None:
        if not 0 <= self.student_age <= 255:
            raise ValueError(f"student age {self.student_age} is out of range 0..=255")

    def render(self) -> str:
        """Return the printable line of the report card."""
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"
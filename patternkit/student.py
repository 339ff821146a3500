"""A student record assembled with a fluent builder."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Student:
    """An immutable student record."""

    name: str = ""
    email: str = ""
    roll_no: int = 0
    age: int = 0
    subjects: tuple[str, ...] = ()

    def render(self) -> str:
        """Return the record as printable lines."""
        subjects = "".join(f"{subject} " for subject in self.subjects)
        return (
            f"Name: {self.name}\n"
            f"Email: {self.email}\n"
            f"Roll No: {self.roll_no}\n"
            f"Age: {self.age}\n"
            f"Subjects: {subjects}\n"
        )


@dataclass
class StudentBuilder:
    """Collects student fields step by step; every step returns the builder."""

    name: str = ""
    email: str = ""
    roll_no: int = 0
    age: int = 0
    subjects: list[str] = field(default_factory=list)

    def with_name(self, name: str) -> StudentBuilder:
        self.name = name
        return self

    def with_email(self, email: str) -> StudentBuilder:
        self.email = email
        return self

    def with_roll_no(self, roll_no: int) -> StudentBuilder:
        self.roll_no = roll_no
        return self

    def with_age(self, age: int) -> StudentBuilder:
        self.age = age
        return self

    def add_subject(self, subject: str) -> StudentBuilder:
        self.subjects.append(subject)
        return self

    def build(self) -> Student:
        """Return a student holding a copy of the collected fields."""
        return Student(
            name=self.name,
            email=self.email,
            roll_no=self.roll_no,
            age=self.age,
            subjects=tuple(self.subjects),
        )
"""Building classes from teachers and students, each created on its own."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field


@dataclass
class Teacher:
    name: str
    class_room: int = 0
    classes: list[int] = field(default_factory=list)


@dataclass
class Student:
    name: str
    class_room: int = 0


@dataclass
class SchoolClass:
    teacher: Teacher
    student: Student


def bad_create_class(teacher_name: str, student_name: str, class_room: int) -> SchoolClass:
    """Create teacher, student and class together, tying the teacher to one room."""
    teacher = Teacher(teacher_name, class_room=class_room)
    student = Student(student_name, class_room=class_room)
    return SchoolClass(teacher, student)


def create_teacher(name: str, classes: list[int]) -> Teacher:
    """Create a teacher who may teach several classes."""
    return Teacher(name, classes=list(classes))


def create_student(name: str, class_room: int) -> Student:
    return Student(name, class_room=class_room)


def create_class(teacher: Teacher, student: Student) -> SchoolClass:
    return SchoolClass(teacher, student)


def main(argv: list[str] | None = None) -> int:
    bad_create_class("John", "Doe", 1)
    school_class = create_class(create_teacher("John", [1, 2]), create_student("Doe", 1))
    print("Teacher:", school_class.teacher.name, file=sys.stderr)
    print("Student:", school_class.student.name, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Student records sorted by CGPA, with ties broken by name."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import groupby
from operator import attrgetter

from algonotes.sorting import _merge_sort_by, _quick_sort_by

_by_cgpa = attrgetter("cgpa")
_by_name = attrgetter("name")


@dataclass(frozen=True)
class Student:
    """A student record."""

    id: int
    name: str
    cgpa: float


def parse_student(line: str) -> Student:
    """Parse ``"<id> <name> <cgpa>"``; raise ValueError on malformed input."""
    parts = line.split()
    if len(parts) != 3:
        raise ValueError(f"expected 'id name cgpa', got {line!r}")
    ident, name, cgpa = parts
    return Student(int(ident), name, float(cgpa))


def format_student(student: Student) -> str:
    """Render a student as ``"<id> <name> <cgpa>"``."""
    return f"{student.id} {student.name} {student.cgpa:g}"


def name_sort(students: Iterable[Student]) -> list[Student]:
    """Within each run of equal CGPA, order students by name."""
    result: list[Student] = []
    for _, run in groupby(students, key=_by_cgpa):
        result.extend(sorted(run, key=_by_name))
    return result


def merge_sort_students(students: Iterable[Student]) -> list[Student]:
    """Stable merge sort by ascending CGPA."""
    return _merge_sort_by(list(students), _by_cgpa)


def quick_sort_students(students: Iterable[Student]) -> list[Student]:
    """Quicksort by ascending CGPA."""
    return _quick_sort_by(students, _by_cgpa)
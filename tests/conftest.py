"""Shared fixtures: a pinned clock and a small seeded store."""

from datetime import date

import pytest

from degreeplan import InMemoryRecordStore, SemesterCalendar

# Mid-October 2025 -> current semester is Fall 2025
FALL_2025 = date(2025, 10, 15)

CS_REQUIREMENTS = [
    {"requirement_type": "course", "course_code": "CS 2011", "label": "Programming", "sequence": 1},
    {"requirement_type": "course", "course_code": "CS 2028C", "label": "Data Structures", "sequence": 2},
    {"requirement_type": "course", "course_code": None, "label": "MATH 1061", "sequence": 3},
    {"requirement_type": "gen_ed", "course_code": None, "label": "Humanities", "sequence": 4},
    {"requirement_type": "course", "course_code": None, "label": "General Education", "sequence": 5},
]


@pytest.fixture
def today():
    return lambda: FALL_2025


@pytest.fixture
def calendar(today):
    return SemesterCalendar(today)


@pytest.fixture
def store():
    store = InMemoryRecordStore()
    store.add_program("CS", "Computer Science", requirements=CS_REQUIREMENTS)
    store.add_catalog_course("CS2011", "CS", "Fundamentals of Programming", 3)
    store.add_catalog_course("CS2028C", "CS", "Data Structures", 4)
    store.add_catalog_course("MATH1061", "MATH", "Calculus I", 4)
    store.set_profile("alice", "Fall 2024", "Summer 2028", "CS")
    return store

"""
Student record data models.

Contains the two per-student ledgers (completions and schedule), the
student profile that bounds the planning window, and catalog entries.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .semester import parse_profile_semester

_WHITESPACE = re.compile(r"\s+")


def normalize_course_code(code: str) -> str:
    """
    Canonical form used for every course-code equality check.

    'CS 2011' -> 'CS2011', 'cs 2028c' -> 'CS2028C'
    """
    return _WHITESPACE.sub("", code or "").upper()


@dataclass
class CompletionRecord:
    """
    A course the student has finished.

    Created when an enrollment is placed into a past semester, or entered
    directly. The semester may be unknown for hand-entered history.
    """
    student_id: str
    course_code: str                      # Stored as entered, e.g. "CS 2011"
    semester_label: Optional[str] = None  # "Spring 2025", or None if unknown

    @property
    def normalized_code(self) -> str:
        return normalize_course_code(self.course_code)


@dataclass
class ScheduleAssignment:
    """
    A course the student intends to take in the current or a future term.

    Same shape as CompletionRecord but it records intent, not fact. A course
    appears at most once in a student's schedule.
    """
    student_id: str
    course_code: str
    semester_label: str

    @property
    def normalized_code(self) -> str:
        return normalize_course_code(self.course_code)


@dataclass
class StudentProfile:
    """
    The profile fields the planner reads.

    freshman_semester and graduation_semester bound the planning grid;
    major selects the degree program to audit.
    """
    student_id: str
    freshman_semester: Optional[str] = None
    graduation_semester: Optional[str] = None
    major: Optional[str] = None

    @property
    def has_planning_window(self) -> bool:
        """True when both bounds are set and well-formed."""
        return (
            parse_profile_semester(self.freshman_semester) is not None
            and parse_profile_semester(self.graduation_semester) is not None
        )


@dataclass
class CatalogCourse:
    """One entry of the course catalog."""
    course_id: str        # Primary identifier, e.g. "CS1100"
    subject: str
    title: str
    credits: float

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on id, title or subject."""
        q = query.strip().lower()
        if not q:
            return True
        return (
            q in self.course_id.lower()
            or q in self.title.lower()
            or bool(self.subject) and q in self.subject.lower()
        )

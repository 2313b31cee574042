"""
Semester value models.

Contains the Term and SemesterStatus enums and the Semester value type, plus
the pure parsing and comparison helpers that every other component uses.
Semester labels are persisted as plain strings ("Spring 2025"); a Semester
is built from the label whenever it is needed and never stored.
"""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Optional, Tuple

from ..config import TERM_ORDER


class Term(Enum):
    """
    The three terms of an academic year, in chronological order.

    FALL opens the academic year; SPRING and SUMMER of the following
    calendar year close it.
    """
    FALL = "Fall"
    SPRING = "Spring"
    SUMMER = "Summer"

    @property
    def index(self) -> int:
        """Position within the academic year (Fall=0, Spring=1, Summer=2)."""
        return TERM_ORDER.index(self.value)

    @classmethod
    def from_name(cls, name: str) -> Optional["Term"]:
        """Exact, case-sensitive lookup. Returns None for anything else."""
        for term in cls:
            if term.value == name:
                return term
        return None


class SemesterStatus(Enum):
    """
    Position of a semester relative to the current one.

    PAST: Strictly before the current semester (enrollments become completions)
    CURRENT: The semester containing today's date
    FUTURE: Strictly after the current semester
    """
    PAST = "past"
    CURRENT = "current"
    FUTURE = "future"

    @property
    def badge(self) -> str:
        """Short tag shown on a planning-grid cell."""
        return {
            SemesterStatus.PAST: "Done",
            SemesterStatus.CURRENT: "Active",
            SemesterStatus.FUTURE: "Plan",
        }[self]


# =============================================================================
# LABEL PARSING
# =============================================================================

def parse_semester_label(label: str) -> Optional[Tuple[str, int]]:
    """
    Split a label like "Spring 2025" into ("Spring", 2025).

    The first token is the term name (not validated here), the second must
    be an integer year. Anything after the second token is ignored.
    Returns None instead of raising so callers can skip dirty entries.
    """
    if not isinstance(label, str):
        return None
    parts = label.split()
    if len(parts) < 2:
        return None
    try:
        year = int(parts[1])
    except ValueError:
        return None
    return parts[0], year


def format_semester_label(term: str, year: int) -> str:
    """Inverse of parse_semester_label for well-formed labels."""
    return f"{term} {year}"


def to_academic_state(label: str) -> Optional[Tuple[int, int]]:
    """
    Map a label to its (academic_year, term_index) pair.

        Fall 2024   -> (2024, 0)
        Spring 2025 -> (2024, 1)
        Summer 2025 -> (2024, 2)

    Unrecognized term names are given Spring's offset so that a typo in
    user-entered data sorts somewhere sensible instead of failing.
    """
    parsed = parse_semester_label(label)
    if parsed is None:
        return None
    term_name, year = parsed
    term = Term.from_name(term_name)
    if term is Term.FALL:
        return year, 0
    if term is Term.SUMMER:
        return year - 1, 2
    # SPRING, and the fallback for unknown names
    return year - 1, 1


def compare_semesters(a: str, b: str) -> int:
    """
    Compare two labels chronologically.

    Returns a negative number if a is earlier, positive if later and 0 if
    they are the same semester. Also returns 0 when either label fails to
    parse, so the result is not a total order over arbitrary strings.
    """
    state_a = to_academic_state(a)
    state_b = to_academic_state(b)
    if state_a is None or state_b is None:
        return 0
    if state_a[0] != state_b[0]:
        return state_a[0] - state_b[0]
    return state_a[1] - state_b[1]


# =============================================================================
# VALUE TYPE
# =============================================================================

@total_ordering
@dataclass(frozen=True, eq=False)
class Semester:
    """
    One academic term, e.g. Spring 2025.

    Attributes:
        term: Term name as written in the label ("Fall", "Spring", "Summer")
        calendar_year: The year printed in the label

    Ordering is by (academic_year, term_index), so Fall 2024 < Spring 2025
    < Summer 2025 < Fall 2025. Equality and hashing use the same key, so an
    unrecognized term name equals the Spring of its year, as in
    compare_semesters.
    """
    term: str
    calendar_year: int

    @classmethod
    def from_label(cls, label: str) -> Optional["Semester"]:
        parsed = parse_semester_label(label)
        if parsed is None:
            return None
        return cls(*parsed)

    @classmethod
    def from_state(cls, academic_year: int, term_index: int) -> "Semester":
        """Build the semester at (academic_year, term_index)."""
        if term_index == 0:
            return cls(Term.FALL.value, academic_year)
        if term_index == 1:
            return cls(Term.SPRING.value, academic_year + 1)
        return cls(Term.SUMMER.value, academic_year + 1)

    @property
    def label(self) -> str:
        return format_semester_label(self.term, self.calendar_year)

    @property
    def academic_year(self) -> int:
        return self.sort_key[0]

    @property
    def term_index(self) -> int:
        return self.sort_key[1]

    @property
    def sort_key(self) -> Tuple[int, int]:
        return to_academic_state(self.label)

    def next(self) -> "Semester":
        """The semester immediately after this one."""
        year, index = self.sort_key
        if index < 2:
            return Semester.from_state(year, index + 1)
        return Semester.from_state(year + 1, 0)

    def __lt__(self, other: "Semester") -> bool:
        if not isinstance(other, Semester):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Semester):
            return NotImplemented
        return self.sort_key == other.sort_key

    def __hash__(self) -> int:
        return hash(self.sort_key)

    def __str__(self) -> str:
        return self.label


def parse_profile_semester(label: Optional[str]) -> Optional[Semester]:
    """
    Strict parse used for the profile's freshman/graduation semesters.

    Unlike parse_semester_label, the term must be one of the three known
    names. Returns None for missing or malformed values.
    """
    if not label:
        return None
    semester = Semester.from_label(label)
    if semester is None or Term.from_name(semester.term) is None:
        return None
    return semester

"""
Semester Calendar Engine.

This module handles all temporal reasoning over semester labels: which
semester is current, whether a label is past/current/future, and which
semesters lie between two bounds.
"""

import logging
from datetime import date
from typing import Callable, List, Optional, Tuple

from ..config import FALL_START_MONTH, MAX_RANGE_STEPS, SUMMER_START_MONTH
from ..models import (
    Semester,
    SemesterStatus,
    Term,
    compare_semesters,
    parse_semester_label,
    to_academic_state,
)

logger = logging.getLogger(__name__)


class SemesterCalendar:
    """
    Calendar arithmetic over "<Term> <Year>" labels.

    ACADEMIC YEAR MODEL:
    -------------------
    Each academic year is a cycle of three terms anchored by Fall:

        (y, 0) = Fall y
        (y, 1) = Spring y+1
        (y, 2) = Summer y+1

    Chronological order and grouping into school years both reduce to
    integer arithmetic on (y, t), so no calendar library is needed.

    CURRENT SEMESTER:
    ----------------
    Derived from today's date: Sep-Dec is Fall, May-Aug is Summer and
    Jan-Apr is Spring, all of the current calendar year. The clock is a
    constructor argument so tests can pin "today".
    """

    def __init__(self, today: Callable[[], date] = date.today):
        self._today = today

    # -------------------------------------------------------------------------
    # Pure label operations
    # -------------------------------------------------------------------------

    @staticmethod
    def parse(label: str) -> Optional[Tuple[str, int]]:
        return parse_semester_label(label)

    @staticmethod
    def to_academic_state(label: str) -> Optional[Tuple[int, int]]:
        return to_academic_state(label)

    @staticmethod
    def compare(a: str, b: str) -> int:
        return compare_semesters(a, b)

    # -------------------------------------------------------------------------
    # Clock-dependent operations
    # -------------------------------------------------------------------------

    def current_semester(self) -> str:
        today = self._today()
        if today.month >= FALL_START_MONTH:
            term = Term.FALL
        elif today.month >= SUMMER_START_MONTH:
            term = Term.SUMMER
        else:
            term = Term.SPRING
        return Semester(term.value, today.year).label

    def status(self, label: str) -> SemesterStatus:
        """
        Classify a semester relative to today.

        A label that fails to parse compares equal to everything and is
        therefore reported as CURRENT.
        """
        cmp = compare_semesters(label, self.current_semester())
        if cmp < 0:
            return SemesterStatus.PAST
        if cmp == 0:
            return SemesterStatus.CURRENT
        return SemesterStatus.FUTURE

    def is_past(self, label: str) -> bool:
        return self.status(label) is SemesterStatus.PAST

    def _current_academic_year(self) -> int:
        return to_academic_state(self.current_semester())[0]

    def academic_year_label(self) -> str:
        """Label of the current academic year, e.g. "2025-26"."""
        start_year = self._current_academic_year()
        end_year = start_year + 1
        return f"{start_year}-{str(end_year)[-2:]}"

    def academic_year_semesters(self) -> List[str]:
        """
        The three semesters of the current academic year, Fall first.

        Fall 2025 and Spring 2026 both give
        ["Fall 2025", "Spring 2026", "Summer 2026"].
        """
        start_year = self._current_academic_year()
        return [Semester.from_state(start_year, t).label for t in range(3)]

    # -------------------------------------------------------------------------
    # Enumeration
    # -------------------------------------------------------------------------

    def range(self, start_label: str, end_label: str) -> List[str]:
        """
        Every semester from start to end, both inclusive.

        Returns [] when either bound fails to parse or start is after end.
        At most MAX_RANGE_STEPS labels are produced; a longer window is
        truncated at the cap.
        """
        start = to_academic_state(start_label)
        end = to_academic_state(end_label)
        if start is None or end is None or compare_semesters(start_label, end_label) > 0:
            return []

        out = []
        semester = Semester.from_state(*start)
        for _ in range(MAX_RANGE_STEPS):
            if semester.sort_key > end:
                break
            out.append(semester.label)
            semester = semester.next()
        else:
            if semester.sort_key <= end:
                logger.warning(
                    "Semester range %s..%s exceeds %d entries; truncated",
                    start_label, end_label, MAX_RANGE_STEPS,
                )
        return out

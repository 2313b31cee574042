"""
Course Placement Policy.

This module decides which ledger an "add course to semester" action writes
to, purely from the target semester's position on the calendar.
"""

import logging
from enum import Enum

from ..data import RecordStore
from .semester_calendar import SemesterCalendar

logger = logging.getLogger(__name__)


class Ledger(Enum):
    """
    The two per-student record sets.

    COMPLETIONS: Courses already finished (historical fact)
    SCHEDULE: Courses planned for the current or a future term (intent)
    """
    COMPLETIONS = "completions"
    SCHEDULE = "schedule"


class CoursePlacementPolicy:
    """
    Routes a course placement to the completions or schedule ledger.

    ROUTING RULE:
    ------------
    Past semester              -> upsert into COMPLETIONS
    Current or future semester -> upsert into SCHEDULE

    Upserts are keyed by (student, course): placing a course the ledger
    already holds moves it to the new semester instead of duplicating it.

    KNOWN GAP:
    ---------
    The policy writes exactly one ledger and never reconciles the other.
    Moving a scheduled course into a past semester leaves the schedule row
    in place, and a schedule row is not re-filed as a completion once its
    term ends. Callers wanting a move must remove the old row themselves.
    """

    def __init__(self, store: RecordStore, calendar: SemesterCalendar):
        self.store = store
        self.calendar = calendar

    def ledger_for(self, semester_label: str) -> Ledger:
        if self.calendar.is_past(semester_label):
            return Ledger.COMPLETIONS
        return Ledger.SCHEDULE

    def place(self, student_id: str, course_code: str, semester_label: str) -> Ledger:
        """
        Record a course in the ledger matching the semester's status.

        Returns the ledger written. RecordStoreError from the store is
        propagated unchanged.
        """
        ledger = self.ledger_for(semester_label)
        if ledger is Ledger.COMPLETIONS:
            self.store.upsert_completion(student_id, course_code, semester_label)
        else:
            self.store.upsert_schedule(student_id, course_code, semester_label)
        logger.info("Placed %s in %s for %s (%s)", course_code, semester_label, student_id, ledger.value)
        return ledger

    def unschedule(self, student_id: str, course_code: str) -> bool:
        """Remove a course from the schedule ledger. Returns True if a row was deleted."""
        removed = self.store.delete_schedule(student_id, course_code)
        if removed:
            logger.info("Removed %s from schedule for %s", course_code, student_id)
        return removed

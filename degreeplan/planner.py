"""
Degree Planner - Main Orchestrator.

This module contains the DegreePlanner class that connects the record store
to the calendar, placement and audit engines.
"""

import logging
from datetime import date
from typing import Callable, List, Optional

from .data import RecordParser, RecordStore
from .engines import (
    CoursePlacementPolicy,
    DegreeAuditEngine,
    Ledger,
    PlanningGridBuilder,
    ProgressEngine,
    SemesterCalendar,
)
from .models import AuditSummary, CatalogCourse, PlanningYear, ProgressStats, StudentProfile

logger = logging.getLogger(__name__)


class DegreePlanner:
    """
    Main interface for the degree planning engine.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    This class is what a presentation layer talks to:

    1. Receives a user action (open planning page, add course, open dashboard)
    2. Reads the records it needs from the RecordStore
    3. Calls the engines and returns plain dataclasses

    Nothing here prints or renders. Three outcomes stay distinguishable:
    - data-access failure:   RecordStoreError is raised
    - nothing configured:    empty AuditSummary / empty grid / needs_setup()
    - dirty rows:            silently skipped by RecordParser

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        planner = DegreePlanner(store)

        if planner.needs_setup("student-1"):
            ...  # ask for freshman/graduation semesters

        grid = planner.planning_grid("student-1")
        planner.add_course_to_semester("student-1", "CS 2011", "Spring 2026")
        summary = planner.audit_summary("student-1")
    """

    def __init__(self, store: RecordStore, today: Callable[[], date] = date.today):
        self.store = store
        self.parser = RecordParser()
        self.calendar = SemesterCalendar(today)
        self.placement = CoursePlacementPolicy(store, self.calendar)
        self.audit_engine = DegreeAuditEngine(store, self.parser)
        self.grid_builder = PlanningGridBuilder(self.calendar)
        self.progress_engine = ProgressEngine(self.calendar)

    # -------------------------------------------------------------------------
    # Profile
    # -------------------------------------------------------------------------

    def profile(self, student_id: str) -> StudentProfile:
        return self.parser.parse_profile(student_id, self.store.get_profile(student_id))

    def needs_setup(self, student_id: str) -> bool:
        """True until the profile has both planning-window bounds."""
        return not self.profile(student_id).has_planning_window

    # -------------------------------------------------------------------------
    # Planning page
    # -------------------------------------------------------------------------

    def planning_semesters(self, student_id: str) -> List[str]:
        """Semesters a course may be placed into (the whole planning window)."""
        return self.grid_builder.semesters(self.profile(student_id))

    def planning_grid(self, student_id: str) -> List[PlanningYear]:
        profile = self.profile(student_id)
        completions = self.parser.parse_completions(student_id, self.store.list_completions(student_id))
        schedule = self.parser.parse_schedule(student_id, self.store.list_schedule(student_id))
        return self.grid_builder.build(profile, completions, schedule)

    def add_course_to_semester(self, student_id: str, course_code: str, semester_label: str) -> Ledger:
        return self.placement.place(student_id, course_code, semester_label)

    def remove_from_schedule(self, student_id: str, course_code: str) -> bool:
        return self.placement.unschedule(student_id, course_code)

    def search_catalog(self, query: str) -> List[CatalogCourse]:
        """Catalog entries matching the query; an empty query matches nothing."""
        if not query.strip():
            return []
        catalog = self.parser.parse_catalog(self.store.list_catalog())
        return [course for course in catalog if course.matches(query)]

    # -------------------------------------------------------------------------
    # Requirements and dashboard
    # -------------------------------------------------------------------------

    def audit_summary(self, student_id: str, program_code: Optional[str] = None) -> AuditSummary:
        """
        Audit against program_code, or the profile's major when omitted.

        Falls back to DEFAULT_PROGRAM_CODE when neither is set.
        """
        if program_code is None:
            program_code = self.profile(student_id).major
        return self.audit_engine.audit(student_id, program_code)

    def progress(self, student_id: str, program_code: Optional[str] = None) -> ProgressStats:
        summary = self.audit_summary(student_id, program_code)
        completions = self.parser.parse_completions(student_id, self.store.list_completions(student_id))
        schedule = self.parser.parse_schedule(student_id, self.store.list_schedule(student_id))
        catalog = self.parser.parse_catalog(self.store.list_catalog())
        stats = self.progress_engine.summarize(summary, completions, schedule, catalog)
        logger.debug("Progress for %s: %s", student_id, stats)
        return stats

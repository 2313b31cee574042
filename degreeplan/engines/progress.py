"""
Progress Dashboard Engine.

This module computes the headline numbers on the student's home page from
an audit summary and the two ledgers.
"""

from typing import Iterable, List

from ..config import CREDITS_TARGET_PER_YEAR
from ..models import (
    AuditSummary,
    CatalogCourse,
    CompletionRecord,
    ProgressStats,
    ScheduleAssignment,
    normalize_course_code,
    percent,
)
from .semester_calendar import SemesterCalendar


class ProgressEngine:
    """
    Summarizes degree and yearly progress.

    CREDIT LOOKUP:
    -------------
    Credits come from the catalog, matched on normalized course code.
    Completions for courses missing from the catalog contribute 0 credits.
    """

    def __init__(self, calendar: SemesterCalendar):
        self.calendar = calendar

    def summarize(self, audit: AuditSummary, completions: Iterable[CompletionRecord],
                  schedule: Iterable[ScheduleAssignment],
                  catalog: List[CatalogCourse]) -> ProgressStats:
        completions = list(completions)
        credits_by_code = {normalize_course_code(c.course_id): c.credits for c in catalog}

        def credits_of(record: CompletionRecord) -> float:
            return credits_by_code.get(record.normalized_code, 0.0)

        year_semesters = set(self.calendar.academic_year_semesters())
        year_credits = sum(
            credits_of(r) for r in completions
            if r.semester_label and r.semester_label in year_semesters
        )
        year_pct = min(100, percent(year_credits, CREDITS_TARGET_PER_YEAR))

        upcoming = sum(
            1 for a in schedule
            if a.semester_label and not self.calendar.is_past(a.semester_label)
        )

        return ProgressStats(
            academic_year_label=self.calendar.academic_year_label(),
            completion_rate=audit.completion_rate,
            credits_earned=sum(credits_of(r) for r in completions),
            year_credits=year_credits,
            year_progress_pct=year_pct,
            upcoming_courses=upcoming,
        )

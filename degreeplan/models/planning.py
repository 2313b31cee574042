"""
Planning grid and dashboard data models.

These dataclasses are what the presentation layer renders: the semester
grid grouped by year in school, and the headline progress numbers.
"""

from dataclasses import dataclass, field

from .semester import SemesterStatus


@dataclass
class SemesterCell:
    """
    One semester card on the planning grid.

    taken holds CompletionRecords filed under this semester. scheduled holds
    ScheduleAssignments and is left empty for past semesters, which only
    show history.
    """
    label: str                                  # "Spring 2025"
    term: str                                   # "Spring"
    status: SemesterStatus
    taken: list = field(default_factory=list)
    scheduled: list = field(default_factory=list)

    @property
    def badge(self) -> str:
        return self.status.badge

    @property
    def is_past(self) -> bool:
        return self.status is SemesterStatus.PAST


@dataclass
class PlanningYear:
    """A block of up to three semesters labelled by year in school."""
    label: str                                  # "Freshman", "Sophomore", ...
    semesters: list = field(default_factory=list)  # SemesterCell objects, Fall→Summer


@dataclass
class ProgressStats:
    """Headline numbers for the student's home dashboard."""
    academic_year_label: str      # "2025-26"
    completion_rate: int          # % of program requirements completed
    credits_earned: float         # All completed credits
    year_credits: float           # Credits completed in the current academic year
    year_progress_pct: int        # year_credits against the yearly target, capped at 100
    upcoming_courses: int         # Scheduled courses in current/future semesters

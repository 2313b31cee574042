"""
Planning Grid Builder.

This module lays out the student's planning window as year-in-school blocks
of Fall/Spring/Summer cells, each holding the courses taken or scheduled in
that semester.
"""

from collections import defaultdict
from typing import Dict, Iterable, List

from ..config import UNKNOWN_SEMESTER_KEY, YEAR_IN_SCHOOL_LABELS
from ..models import (
    CompletionRecord,
    PlanningYear,
    ScheduleAssignment,
    SemesterCell,
    StudentProfile,
    parse_semester_label,
)
from .semester_calendar import SemesterCalendar


def year_in_school_label(index: int) -> str:
    """0 -> "Freshman", ..., 4 -> "Senior", 5 -> "Year 6"."""
    if index < len(YEAR_IN_SCHOOL_LABELS):
        return YEAR_IN_SCHOOL_LABELS[index]
    return f"Year {index + 1}"


def group_by_year_in_school(semesters: List[str]) -> List[tuple]:
    """
    Chunk an ordered semester list into blocks of three.

    Returns [(label, [semester, ...]), ...]. Blocks follow the position in
    the window, not the academic year, so a window starting in Spring puts
    Spring/Summer/Fall in the first block.
    """
    return [
        (year_in_school_label(i // 3), semesters[i:i + 3])
        for i in range(0, len(semesters), 3)
    ]


def completions_by_semester(completions: Iterable[CompletionRecord]) -> Dict[str, list]:
    """Group completions by semester label; unknown semesters share one bucket."""
    grouped = defaultdict(list)
    for record in completions:
        grouped[record.semester_label or UNKNOWN_SEMESTER_KEY].append(record)
    return dict(grouped)


def schedule_by_semester(schedule: Iterable[ScheduleAssignment]) -> Dict[str, list]:
    grouped = defaultdict(list)
    for assignment in schedule:
        grouped[assignment.semester_label].append(assignment)
    return dict(grouped)


class PlanningGridBuilder:
    """
    Builds the planning grid shown on the planning page.

    LAYOUT:
    ------
    The window runs from the profile's freshman semester to its graduation
    semester (inclusive). Every three semesters form one PlanningYear.

    CELL CONTENTS:
    -------------
    - taken: completions recorded for that semester
    - scheduled: schedule rows for that semester, only for current/future
      cells (past cells show history only)
    """

    def __init__(self, calendar: SemesterCalendar):
        self.calendar = calendar

    def semesters(self, profile: StudentProfile) -> List[str]:
        if not profile.has_planning_window:
            return []
        return self.calendar.range(profile.freshman_semester, profile.graduation_semester)

    def build(self, profile: StudentProfile, completions: Iterable[CompletionRecord],
              schedule: Iterable[ScheduleAssignment]) -> List[PlanningYear]:
        taken = completions_by_semester(completions)
        planned = schedule_by_semester(schedule)

        years = []
        for label, block in group_by_year_in_school(self.semesters(profile)):
            cells = []
            for semester in block:
                status = self.calendar.status(semester)
                term, _ = parse_semester_label(semester)
                cell = SemesterCell(
                    label=semester,
                    term=term,
                    status=status,
                    taken=list(taken.get(semester, [])),
                )
                if not cell.is_past:
                    cell.scheduled = list(planned.get(semester, []))
                cells.append(cell)
            years.append(PlanningYear(label=label, semesters=cells))
        return years

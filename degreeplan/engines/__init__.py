"""
Calendar, placement and audit engines.

This package contains all the engines that perform the core business
logic of the degree planner.
"""

from .semester_calendar import SemesterCalendar
from .placement import CoursePlacementPolicy, Ledger
from .degree_audit import DegreeAuditEngine
from .planning_grid import PlanningGridBuilder, group_by_year_in_school
from .progress import ProgressEngine

__all__ = [
    "SemesterCalendar",
    "CoursePlacementPolicy",
    "Ledger",
    "DegreeAuditEngine",
    "PlanningGridBuilder",
    "group_by_year_in_school",
    "ProgressEngine",
]

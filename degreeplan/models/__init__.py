"""
Data models for the degree planning engine.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between the engines, the record store and the
presentation layer.
"""

from .semester import (
    Term,
    SemesterStatus,
    Semester,
    parse_semester_label,
    format_semester_label,
    to_academic_state,
    compare_semesters,
    parse_profile_semester,
)
from .records import (
    CompletionRecord,
    ScheduleAssignment,
    StudentProfile,
    CatalogCourse,
    normalize_course_code,
)
from .requirement import DegreeProgram, ProgramRequirement
from .audit import AuditSummary, percent
from .planning import SemesterCell, PlanningYear, ProgressStats

__all__ = [
    # Semester values
    "Term",
    "SemesterStatus",
    "Semester",
    "parse_semester_label",
    "format_semester_label",
    "to_academic_state",
    "compare_semesters",
    "parse_profile_semester",
    # Student records
    "CompletionRecord",
    "ScheduleAssignment",
    "StudentProfile",
    "CatalogCourse",
    "normalize_course_code",
    # Programs
    "DegreeProgram",
    "ProgramRequirement",
    # Results
    "AuditSummary",
    "percent",
    "SemesterCell",
    "PlanningYear",
    "ProgressStats",
]

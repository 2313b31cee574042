"""
Degree Planning Package
=======================

Academic calendar and degree-audit engine for a student's multi-year plan.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                           ENGINE LAYER                                   │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌──────────────────┐  ┌────────────────────────┐  ┌─────────────────┐  │
│  │ SemesterCalendar │  │ CoursePlacementPolicy  │  │DegreeAuditEngine│  │
│  │ (term arithmetic)│  │ (completions/schedule) │  │ (requirements)  │  │
│  └──────────────────┘  └────────────────────────┘  └─────────────────┘  │
│                                                                         │
│  ┌─────────────────────────┐  ┌─────────────────────────────────────┐  │
│  │   PlanningGridBuilder   │  │          ProgressEngine             │  │
│  │ (year-in-school layout) │  │      (dashboard statistics)         │  │
│  └─────────────────────────┘  └─────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Reads/writes raw rows
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                          RECORD STORE                                    │
│     RecordStore protocol • InMemoryRecordStore • DataLoader (seed)      │
└─────────────────────────────────────────────────────────────────────────┘
                                   ▲
                                   │
┌─────────────────────────────────────────────────────────────────────────┐
│                          DegreePlanner                                   │
│        (Orchestrator - what a presentation layer calls into)            │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

degreeplan/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── exceptions.py        # RecordStoreError
├── log.py               # setup_logging()
├── planner.py           # DegreePlanner orchestrator
│
├── models/              # Data classes and enums
│   ├── semester.py      # Term, SemesterStatus, Semester, label helpers
│   ├── records.py       # CompletionRecord, ScheduleAssignment, StudentProfile, CatalogCourse
│   ├── requirement.py   # DegreeProgram, ProgramRequirement
│   ├── audit.py         # AuditSummary
│   └── planning.py      # SemesterCell, PlanningYear, ProgressStats
│
├── data/                # Record store access
│   ├── store.py         # RecordStore, InMemoryRecordStore
│   ├── loader.py        # DataLoader
│   └── parser.py        # RecordParser
│
└── engines/
    ├── semester_calendar.py  # SemesterCalendar
    ├── placement.py          # CoursePlacementPolicy, Ledger
    ├── degree_audit.py       # DegreeAuditEngine
    ├── planning_grid.py      # PlanningGridBuilder
    └── progress.py           # ProgressEngine

USAGE
-----

    from degreeplan import DataLoader, DegreePlanner, setup_logging

    setup_logging()
    store = DataLoader("data/seed.json").build_store()
    planner = DegreePlanner(store)

    for year in planner.planning_grid("student-1"):
        print(year.label, [cell.label for cell in year.semesters])

    planner.add_course_to_semester("student-1", "CS 2011", "Spring 2027")
    print(planner.audit_summary("student-1").to_dict())

"""

# Version
__version__ = "1.0.0"

# Main exports
from .planner import DegreePlanner
from .log import setup_logging
from .exceptions import RecordStoreError

# Model exports (for programmatic use)
from .models import (
    Term,
    SemesterStatus,
    Semester,
    CompletionRecord,
    ScheduleAssignment,
    StudentProfile,
    CatalogCourse,
    DegreeProgram,
    ProgramRequirement,
    AuditSummary,
    SemesterCell,
    PlanningYear,
    ProgressStats,
    parse_semester_label,
    compare_semesters,
    normalize_course_code,
)

# Engine exports (for advanced use)
from .engines import (
    SemesterCalendar,
    CoursePlacementPolicy,
    Ledger,
    DegreeAuditEngine,
    PlanningGridBuilder,
    ProgressEngine,
)

# Data exports
from .data import RecordStore, InMemoryRecordStore, DataLoader, RecordParser

# Configuration exports
from .config import (
    DATA_DIR,
    TERM_ORDER,
    MAX_RANGE_STEPS,
    DEFAULT_PROGRAM_CODE,
    CREDITS_TARGET_PER_YEAR,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "DegreePlanner",
    "setup_logging",
    "RecordStoreError",
    # Models
    "Term",
    "SemesterStatus",
    "Semester",
    "CompletionRecord",
    "ScheduleAssignment",
    "StudentProfile",
    "CatalogCourse",
    "DegreeProgram",
    "ProgramRequirement",
    "AuditSummary",
    "SemesterCell",
    "PlanningYear",
    "ProgressStats",
    "parse_semester_label",
    "compare_semesters",
    "normalize_course_code",
    # Engines
    "SemesterCalendar",
    "CoursePlacementPolicy",
    "Ledger",
    "DegreeAuditEngine",
    "PlanningGridBuilder",
    "ProgressEngine",
    # Data
    "RecordStore",
    "InMemoryRecordStore",
    "DataLoader",
    "RecordParser",
    # Config
    "DATA_DIR",
    "TERM_ORDER",
    "MAX_RANGE_STEPS",
    "DEFAULT_PROGRAM_CODE",
    "CREDITS_TARGET_PER_YEAR",
]

"""
Configuration constants for the degree planning engine.

This module contains all configuration values and constants used throughout
the calendar, placement and audit logic. Centralizing these makes it easy to
adjust behavior as registrar policies change.
"""

import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
DEFAULT_SEED_FILE = DATA_DIR / "seed.json"


# =============================================================================
# ACADEMIC CALENDAR
# =============================================================================
# An academic year is anchored by its Fall term and runs through the
# following Spring and Summer:
#   - Fall 2024   -> academic year 2024, term index 0
#   - Spring 2025 -> academic year 2024, term index 1
#   - Summer 2025 -> academic year 2024, term index 2

TERM_ORDER = ("Fall", "Spring", "Summer")

# First month (1-12) of each term when deriving the current semester from
# today's date. Jan-Apr is Spring, May-Aug is Summer, Sep-Dec is Fall.
SUMMER_START_MONTH = 5
FALL_START_MONTH = 9

# Upper bound on the number of semesters a range enumeration may produce.
# 80 semesters is more than 26 academic years.
MAX_RANGE_STEPS = 80


# =============================================================================
# PLANNING GRID
# =============================================================================

# Labels for each block of three semesters in the planning window.
# Windows longer than five years fall back to "Year N".
YEAR_IN_SCHOOL_LABELS = ("Freshman", "Sophomore", "Pre-junior", "Junior", "Senior")

# Bucket used for completions recorded without a semester
UNKNOWN_SEMESTER_KEY = "Unknown"


# =============================================================================
# DEGREE REQUIREMENTS
# =============================================================================

# Requirement rows that describe a fungible slot rather than a specific course.
# Either condition is enough; such rows are satisfied by an external gen-ed
# tracker and always count as remaining here.
GEN_ED_REQUIREMENT_TYPE = "gen_ed"
GEN_ED_LABEL = "General Education"

# Type assumed for rows that arrive without a usable requirement_type
COURSE_REQUIREMENT_TYPE = "course"

# Program audited when the student's profile has no major set
DEFAULT_PROGRAM_CODE = "CS"


# =============================================================================
# PROGRESS DASHBOARD
# =============================================================================

# Credits a full-time student is expected to earn in one academic year
CREDITS_TARGET_PER_YEAR = 30


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.environ.get("DEGREEPLAN_LOG_LEVEL", "INFO").upper()

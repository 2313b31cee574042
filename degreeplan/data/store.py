"""
Record store contract and in-memory implementation.

The engines never talk to a database directly. They depend on the small
RecordStore protocol below, which returns raw row dicts in the same shape a
remote table would. RecordParser turns those rows into models.
"""

import logging
from typing import Dict, List, Optional, Protocol, Tuple

from ..models import normalize_course_code

logger = logging.getLogger(__name__)


def _sequence_of(row: dict) -> int:
    # Sequences may arrive as strings; anything non-numeric sorts first
    try:
        return int(row.get("sequence") or 0)
    except (TypeError, ValueError):
        return 0


class RecordStore(Protocol):
    """
    Minimal data-access interface used by the placement policy, the audit
    and the planner.

    Implementations raise RecordStoreError when the backing store cannot be
    reached or rejects a query. Absence (no program, no profile) is reported
    with None or an empty list, never with an exception.

    Row shapes:
        program:     {"id", "code", "name"}
        requirement: {"requirement_type", "course_code", "label", "sequence"}
        completion:  {"course_code", "semester_label"}
        schedule:    {"course_code", "semester_label"}
        profile:     {"freshman_semester", "graduation_semester", "major"}
        catalog:     {"course_id", "subject", "title", "credits"}
    """

    def find_program_by_code(self, code: str) -> Optional[dict]: ...
    def find_program_by_name(self, name: str) -> Optional[dict]: ...
    def list_requirements(self, program_id: str) -> List[dict]: ...
    def list_completions(self, student_id: str) -> List[dict]: ...
    def list_schedule(self, student_id: str) -> List[dict]: ...
    def get_profile(self, student_id: str) -> Optional[dict]: ...
    def list_catalog(self) -> List[dict]: ...
    def upsert_completion(self, student_id: str, course_code: str, semester_label: str) -> None: ...
    def upsert_schedule(self, student_id: str, course_code: str, semester_label: str) -> None: ...
    def delete_schedule(self, student_id: str, course_code: str) -> bool: ...


class InMemoryRecordStore:
    """
    Dict-backed RecordStore.

    LEDGER KEYS:
    -----------
    Both ledgers are keyed by (student_id, normalized course code), so an
    upsert for a course the student already has in that ledger overwrites
    the semester instead of adding a second row. Last write wins.

    Usage:
        store = InMemoryRecordStore()
        store.add_program("CS", "Computer Science", requirements=[...])
        store.upsert_schedule("student-1", "CS 2011", "Fall 2026")
    """

    def __init__(self):
        self._programs: Dict[str, dict] = {}             # Keyed by program id
        self._requirements: Dict[str, List[dict]] = {}   # Keyed by program id
        self._profiles: Dict[str, dict] = {}             # Keyed by student id
        self._catalog: Dict[str, dict] = {}              # Keyed by course id
        self._completions: Dict[Tuple[str, str], dict] = {}
        self._schedule: Dict[Tuple[str, str], dict] = {}

    # -------------------------------------------------------------------------
    # Seeding
    # -------------------------------------------------------------------------

    def add_program(self, code: str, name: str = "", requirements: Optional[list] = None,
                    program_id: Optional[str] = None) -> dict:
        """Register a program and its requirement rows. Returns the program row."""
        program_id = program_id or f"program-{len(self._programs) + 1}"
        program = {"id": program_id, "code": code, "name": name}
        self._programs[program_id] = program
        self._requirements[program_id] = [dict(r) for r in (requirements or [])]
        return program

    def set_profile(self, student_id: str, freshman_semester: Optional[str] = None,
                    graduation_semester: Optional[str] = None,
                    major: Optional[str] = None) -> None:
        self._profiles[student_id] = {
            "freshman_semester": freshman_semester,
            "graduation_semester": graduation_semester,
            "major": major,
        }

    def add_catalog_course(self, course_id: str, subject: str = "", title: str = "",
                           credits: float = 0.0) -> None:
        self._catalog[course_id] = {
            "course_id": course_id,
            "subject": subject,
            "title": title,
            "credits": credits,
        }

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def find_program_by_code(self, code: str) -> Optional[dict]:
        for program in self._programs.values():
            if program["code"] == code:
                return dict(program)
        return None

    def find_program_by_name(self, name: str) -> Optional[dict]:
        wanted = name.lower()
        for program in self._programs.values():
            if (program.get("name") or "").lower() == wanted:
                return dict(program)
        return None

    def list_requirements(self, program_id: str) -> List[dict]:
        rows = self._requirements.get(program_id, [])
        return sorted((dict(r) for r in rows), key=_sequence_of)

    def list_completions(self, student_id: str) -> List[dict]:
        return [dict(row) for (sid, _), row in self._completions.items() if sid == student_id]

    def list_schedule(self, student_id: str) -> List[dict]:
        return [dict(row) for (sid, _), row in self._schedule.items() if sid == student_id]

    def get_profile(self, student_id: str) -> Optional[dict]:
        profile = self._profiles.get(student_id)
        return dict(profile) if profile is not None else None

    def list_catalog(self) -> List[dict]:
        return [dict(row) for _, row in sorted(self._catalog.items())]

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def upsert_completion(self, student_id: str, course_code: str,
                          semester_label: Optional[str]) -> None:
        key = (student_id, normalize_course_code(course_code))
        self._completions[key] = {"course_code": course_code, "semester_label": semester_label}
        logger.debug("Upserted completion %s for %s (%s)", course_code, student_id, semester_label)

    def upsert_schedule(self, student_id: str, course_code: str, semester_label: str) -> None:
        key = (student_id, normalize_course_code(course_code))
        self._schedule[key] = {"course_code": course_code, "semester_label": semester_label}
        logger.debug("Upserted schedule %s for %s (%s)", course_code, student_id, semester_label)

    def delete_schedule(self, student_id: str, course_code: str) -> bool:
        key = (student_id, normalize_course_code(course_code))
        return self._schedule.pop(key, None) is not None

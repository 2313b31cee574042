"""
Record row parsing.

This module converts raw record-store rows into model objects.
"""

import logging
from typing import List, Optional

from ..config import COURSE_REQUIREMENT_TYPE, GEN_ED_LABEL, GEN_ED_REQUIREMENT_TYPE
from ..models import (
    CatalogCourse,
    CompletionRecord,
    DegreeProgram,
    ProgramRequirement,
    ScheduleAssignment,
    StudentProfile,
)

logger = logging.getLogger(__name__)


class RecordParser:
    """
    Parses raw store rows into dataclasses.

    KEY RESPONSIBILITY: keep dirty, user-entered data from reaching the
    engines. Rows that lack the fields an engine needs are dropped (and
    logged at DEBUG) rather than raising, so a single bad row never blanks
    the whole planning page.

    REQUIRED FIELDS:
    - requirement: course_code or label, unless the row is a gen-ed slot.
    - completion:  course_code (semester_label may be missing)
    - schedule:    course_code and semester_label
    - catalog:     course_id
    """

    def parse_program(self, row: Optional[dict]) -> Optional[DegreeProgram]:
        if not isinstance(row, dict) or row.get("id") is None:
            return None
        return DegreeProgram(
            program_id=str(row["id"]),
            code=row.get("code") or "",
            name=row.get("name") or "",
        )

    def parse_requirements(self, rows: List[dict]) -> List[ProgramRequirement]:
        requirements = []
        for row in rows or []:
            requirement = self._parse_requirement(row)
            if requirement is None:
                logger.debug("Skipping malformed requirement row: %r", row)
                continue
            requirements.append(requirement)
        return requirements

    def _parse_requirement(self, row: dict) -> Optional[ProgramRequirement]:
        if not isinstance(row, dict):
            return None
        requirement_type = row.get("requirement_type")
        if not isinstance(requirement_type, str) or not requirement_type:
            requirement_type = COURSE_REQUIREMENT_TYPE

        course_code = row.get("course_code")
        course_code = str(course_code) if course_code else None
        label = row.get("label")
        label = str(label) if label else ""
        is_slot = requirement_type == GEN_ED_REQUIREMENT_TYPE or label == GEN_ED_LABEL
        if not is_slot and not course_code and not label.strip():
            # Nothing to match against
            return None

        try:
            sequence = int(row.get("sequence") or 0)
        except (TypeError, ValueError):
            sequence = 0

        return ProgramRequirement(
            requirement_type=requirement_type,
            course_code=course_code,
            label=label,
            sequence=sequence,
        )

    def parse_completions(self, student_id: str, rows: List[dict]) -> List[CompletionRecord]:
        completions = []
        for row in rows or []:
            if not isinstance(row, dict) or not row.get("course_code"):
                logger.debug("Skipping malformed completion row: %r", row)
                continue
            completions.append(CompletionRecord(
                student_id=student_id,
                course_code=row["course_code"],
                semester_label=row.get("semester_label") or None,
            ))
        return completions

    def parse_schedule(self, student_id: str, rows: List[dict]) -> List[ScheduleAssignment]:
        assignments = []
        for row in rows or []:
            if (not isinstance(row, dict) or not row.get("course_code")
                    or not row.get("semester_label")):
                logger.debug("Skipping malformed schedule row: %r", row)
                continue
            assignments.append(ScheduleAssignment(
                student_id=student_id,
                course_code=row["course_code"],
                semester_label=row["semester_label"],
            ))
        return assignments

    def parse_profile(self, student_id: str, row: Optional[dict]) -> StudentProfile:
        """A missing profile row is an empty profile, not an error."""
        row = row if isinstance(row, dict) else {}
        return StudentProfile(
            student_id=student_id,
            freshman_semester=row.get("freshman_semester") or None,
            graduation_semester=row.get("graduation_semester") or None,
            major=row.get("major") or None,
        )

    def parse_catalog(self, rows: List[dict]) -> List[CatalogCourse]:
        courses = []
        for row in rows or []:
            if not isinstance(row, dict) or not row.get("course_id"):
                logger.debug("Skipping malformed catalog row: %r", row)
                continue
            try:
                credits = float(row.get("credits") or 0.0)
            except (TypeError, ValueError):
                credits = 0.0
            courses.append(CatalogCourse(
                course_id=row["course_id"],
                subject=row.get("subject") or "",
                title=row.get("title") or "",
                credits=credits,
            ))
        return courses

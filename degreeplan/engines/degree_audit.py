"""
Degree Requirements Audit Engine.

This module reconciles a degree program's requirement list against the
courses a student has completed.
"""

import logging
from typing import Iterable, List, Optional

from ..config import DEFAULT_PROGRAM_CODE
from ..data import RecordParser, RecordStore
from ..models import AuditSummary, CompletionRecord, DegreeProgram, ProgramRequirement

logger = logging.getLogger(__name__)


class DegreeAuditEngine:
    """
    Audits student progress against a program's requirement list.

    MATCHING LOGIC:
    --------------
    Course codes are compared in normalized form (whitespace removed,
    uppercased), so "CS 2011" and "cs2011" are the same course.

    Each requirement row is one of:
    - GEN-ED SLOT: requirement_type "gen_ed" or label "General Education".
      Never matched against a course; always counted as remaining until an
      external gen-ed tracker exists.
    - COURSE: matched on its course_code, or on its label text when the row
      has no course_code.

    PROGRAM RESOLUTION:
    ------------------
    Exact code first ("CS"), then case-insensitive name ("computer science").
    An unknown program is a valid "no requirements yet" state and yields an
    empty summary. Store failures are propagated as RecordStoreError so the
    caller can tell "nothing configured" from "failed to load".
    """

    def __init__(self, store: RecordStore, parser: Optional[RecordParser] = None):
        self.store = store
        self.parser = parser or RecordParser()

    def resolve_program(self, program_code: str) -> Optional[DegreeProgram]:
        program = self.parser.parse_program(self.store.find_program_by_code(program_code))
        if program is None:
            program = self.parser.parse_program(self.store.find_program_by_name(program_code))
        return program

    def audit(self, student_id: str, program_code: Optional[str] = None) -> AuditSummary:
        """
        Load the program and the student's completions, then compute the summary.

        This is the main entry point used by the planner and the dashboard.
        """
        code = (program_code or "").strip() or DEFAULT_PROGRAM_CODE

        program = self.resolve_program(code)
        if program is None:
            logger.info("No degree program matches %r; returning empty audit", code)
            return AuditSummary.empty(code)

        requirements = self.parser.parse_requirements(
            self.store.list_requirements(program.program_id)
        )
        completions = self.parser.parse_completions(
            student_id, self.store.list_completions(student_id)
        )
        summary = self.compute(program.code or code, requirements, completions)
        logger.debug(
            "Audit for %s against %s: %d/%d complete",
            student_id, summary.program_code, summary.completed_count, summary.total_requirements,
        )
        return summary

    def compute(self, program_code: str, requirements: List[ProgramRequirement],
                completions: Iterable[CompletionRecord]) -> AuditSummary:
        """
        Pure reconciliation of requirements against completions.

        Requirements are processed in the order given, so remaining_courses
        keeps program order.
        """
        # Build quick lookup set for O(1) course checking
        taken = {c.normalized_code for c in completions if c.normalized_code}

        remaining_courses = []
        gen_ed_slots = 0
        completed = 0

        for requirement in requirements:
            if requirement.is_gen_ed_slot:
                gen_ed_slots += 1
                continue
            code = requirement.matching_code
            if code in taken:
                completed += 1
            else:
                remaining_courses.append(code)

        return AuditSummary(
            program_code=program_code,
            total_requirements=len(requirements),
            completed_count=completed,
            remaining_count=len(remaining_courses) + gen_ed_slots,
            remaining_courses=remaining_courses,
            remaining_gen_ed_slots=gen_ed_slots,
        )

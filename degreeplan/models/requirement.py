"""
Degree program data models.

A program owns an ordered list of requirement rows. Rows either name a
specific course or describe a fungible slot (general education).
"""

from dataclasses import dataclass
from typing import Optional

from ..config import GEN_ED_LABEL, GEN_ED_REQUIREMENT_TYPE
from .records import normalize_course_code


@dataclass
class DegreeProgram:
    """A degree program as configured in the record store."""
    program_id: str
    code: str             # e.g. "CS"
    name: str = ""        # e.g. "Computer Science"


@dataclass
class ProgramRequirement:
    """
    One line item of a program's requirement list.

    REQUIREMENT TYPES:
    -----------------
    "course":  A specific course, identified by course_code
    "gen_ed":  A general-education slot, satisfied outside this engine
    Other strings are accepted and audited like "course" rows.

    Some rows carry only a descriptive label and no course_code; the label
    text then doubles as the matching key.
    """
    requirement_type: str
    course_code: Optional[str]
    label: str
    sequence: int = 0     # Display order only

    @property
    def is_gen_ed_slot(self) -> bool:
        return (
            self.requirement_type == GEN_ED_REQUIREMENT_TYPE
            or self.label == GEN_ED_LABEL
        )

    @property
    def matching_code(self) -> str:
        """Normalized course code, falling back to the normalized label."""
        if self.course_code:
            return normalize_course_code(self.course_code)
        return normalize_course_code(self.label)

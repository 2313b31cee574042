"""
Audit result data models.

Contains the AuditSummary read-model produced by the degree audit.
"""

import math
from dataclasses import dataclass, field


def percent(part: float, whole: float) -> int:
    """Whole-number percentage of part in whole, halves rounded up (12.5 -> 13)."""
    if not whole:
        return 0
    return math.floor(part / whole * 100 + 0.5)


@dataclass
class AuditSummary:
    """
    Progress of one student against one degree program.

    Recomputed on demand and never persisted. The counts always satisfy:

        completed_count + len(remaining_courses) + remaining_gen_ed_slots
            == total_requirements

    Example for a four-row CS program with CS2011 done:
        program_code: "CS"
        total_requirements: 4
        completed_count: 1
        remaining_count: 3
        remaining_courses: ["CS2028C", "MATH1011"]
        remaining_gen_ed_slots: 1
    """
    program_code: str
    total_requirements: int = 0
    completed_count: int = 0
    remaining_count: int = 0
    remaining_courses: list = field(default_factory=list)  # Normalized codes, program order
    remaining_gen_ed_slots: int = 0

    @classmethod
    def empty(cls, program_code: str) -> "AuditSummary":
        """Summary for a program with no requirements configured."""
        return cls(program_code=program_code)

    @property
    def has_requirements(self) -> bool:
        return self.total_requirements > 0

    @property
    def completion_rate(self) -> int:
        """Whole-number percentage of requirements completed."""
        return percent(self.completed_count, self.total_requirements)

    def to_dict(self) -> dict:
        """Serializable form for the presentation layer."""
        return {
            "programCode": self.program_code,
            "totalRequirements": self.total_requirements,
            "completedCount": self.completed_count,
            "remainingCount": self.remaining_count,
            "remainingCourses": list(self.remaining_courses),
            "remainingGenEdSlots": self.remaining_gen_ed_slots,
        }
